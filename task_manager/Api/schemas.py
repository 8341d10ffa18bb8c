# api/schemas.py
from typing import Any, Optional

from pydantic import BaseModel, StrictBool, StrictStr


class Task(BaseModel):
    id: int
    title: str
    completed: bool


class TaskPayload(BaseModel):
    """Тело запроса для создания и обновления задачи."""

    # Строгие типы: "true" или 1 вместо булева значения не принимаются
    title: StrictStr
    completed: StrictBool


class Envelope(BaseModel):
    success: bool
    data: Optional[Any] = None
    message: str


class TaskEnvelope(Envelope):
    data: Task


class TaskListEnvelope(Envelope):
    data: list[Task]


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
