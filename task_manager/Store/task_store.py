# store/task_store.py
import logging
import threading
from dataclasses import asdict, dataclass
from typing import List, Optional

# Стартовый набор задач
SEED_TASKS = [
    ("Learn Express", False),
    ("Build a REST API", False),
    ("Test API with Postman", True),
    ("Add Swagger Documentation", False),
    ("Deploy to Server", False),
]

ID_STRATEGIES = ("length", "counter")


@dataclass
class Task:
    id: int
    title: str
    completed: bool

    def to_dict(self) -> dict:
        return asdict(self)


class TaskStore:
    """Хранилище задач в памяти процесса."""

    def __init__(self, id_strategy: str = "length"):
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(f"Unknown id strategy: {id_strategy}")
        self.id_strategy = id_strategy
        self._tasks: List[Task] = []
        self._last_id = 0
        # Обработчики FastAPI выполняются в пуле потоков
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def reset(self, tasks=SEED_TASKS):
        # Заполняем хранилище заново, id выдаются по порядку
        with self._lock:
            self._tasks = [Task(i, title, completed) for i, (title, completed) in enumerate(tasks, 1)]
            self._last_id = len(self._tasks)
        logging.info(f"Task store initialized with {len(self._tasks)} tasks")

    def list(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            return self._find(task_id)

    def exists(self, task_id: int) -> bool:
        return self.get(task_id) is not None

    def create(self, title: str, completed: bool) -> Task:
        with self._lock:
            if self.id_strategy == "counter":
                new_id = self._last_id + 1
            else:
                # Как в исходном сервисе: после удаления id может совпасть с существующим
                new_id = len(self._tasks) + 1
            self._last_id = max(self._last_id, new_id)
            task = Task(new_id, title, completed)
            self._tasks.append(task)
            return task

    def update(self, task_id: int, title: str, completed: bool) -> Optional[Task]:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None
            task.title = title
            task.completed = completed
            return task

    def delete(self, task_id: int) -> Optional[Task]:
        with self._lock:
            for index, task in enumerate(self._tasks):
                if task.id == task_id:
                    return self._tasks.pop(index)
            return None

    def _find(self, task_id: int) -> Optional[Task]:
        # Первое совпадение, как Array.find
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None
