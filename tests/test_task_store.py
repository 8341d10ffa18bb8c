# tests/test_task_store.py
import pytest

from task_manager.Store.task_store import SEED_TASKS, Task, TaskStore


def test_reset_seeds_five_tasks_in_order(store):
    tasks = store.list()
    assert [t.id for t in tasks] == [1, 2, 3, 4, 5]
    assert tasks[0] == Task(1, "Learn Express", False)
    assert tasks[2].completed is True


def test_reset_with_empty_collection():
    store = TaskStore()
    store.reset(())
    assert len(store) == 0
    assert store.create("first", False).id == 1


def test_get_missing_returns_none(store):
    assert store.get(42) is None
    assert not store.exists(42)


def test_create_appends_with_length_based_id(store):
    task = store.create("X", False)
    assert task.id == 6
    assert len(store) == 6
    assert store.list()[-1] is task


def test_update_keeps_id_and_position(store):
    task = store.update(3, "Retitled", False)
    assert task == Task(3, "Retitled", False)
    assert store.list()[2] is task
    assert len(store) == len(SEED_TASKS)


def test_update_missing_returns_none(store):
    assert store.update(99, "nope", True) is None
    assert len(store) == 5


def test_delete_removes_task(store):
    removed = store.delete(2)
    assert removed.id == 2
    assert len(store) == 4
    assert store.get(2) is None
    assert store.delete(2) is None


def test_length_strategy_can_reuse_existing_id(store):
    # Известное поведение исходного сервиса: id = длина + 1
    store.delete(3)
    task = store.create("collides", False)
    assert task.id == 5
    assert [t.id for t in store.list()].count(5) == 2
    # Поиск возвращает первую задачу с таким id
    assert store.get(5).title == "Deploy to Server"


def test_counter_strategy_never_reuses_ids():
    store = TaskStore(id_strategy="counter")
    store.reset()
    store.delete(3)
    assert store.create("a", False).id == 6
    store.delete(6)
    assert store.create("b", True).id == 7


def test_unknown_strategy_rejected():
    with pytest.raises(ValueError):
        TaskStore(id_strategy="random")


def test_list_returns_copy(store):
    tasks = store.list()
    tasks.clear()
    assert len(store) == 5
