# api/endpoints/tasks.py
import json
import logging
import re
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ...Store.task_store import TaskStore
from ..schemas import ErrorEnvelope, TaskEnvelope, TaskListEnvelope, TaskPayload

router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?)(?:(0[xX])([0-9a-fA-F]+)?|([0-9]+))")

# Схема тела запроса для документации, сама проверка выполняется в обработчике
_PAYLOAD_DOC = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": TaskPayload.model_json_schema()}},
    }
}

NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "Task not found"}}
INVALID = {400: {"model": ErrorEnvelope, "description": "Invalid data"}}


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def parse_id(raw: str) -> Optional[int]:
    """Разбор id из пути по правилам parseInt без основания.

    "6abc" -> 6, "0x3" -> 3, "abc" и "0xg" -> None. Учитываются только ASCII-цифры.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, hex_prefix, hex_digits, digits = match.groups()
    if hex_prefix:
        if hex_digits is None:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def parse_payload(payload: Any) -> Optional[TaskPayload]:
    if not isinstance(payload, dict):
        return None
    try:
        return TaskPayload.model_validate(payload)
    except ValidationError:
        return None


def envelope(data, message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse({"success": True, "data": data, "message": message}, status_code=status_code)


def failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)


def task_not_found(raw_id: str) -> JSONResponse:
    logging.warning(f"Task {raw_id!r} not found")
    return failure("Task not found", 404)


def invalid_data(payload: Any) -> JSONResponse:
    logging.warning(f"Invalid task data: {payload!r}")
    return failure("Invalid data", 400)


@router.get("", response_model=TaskListEnvelope, summary="Get all tasks")
def list_tasks(store: TaskStore = Depends(get_store)):
    tasks = [task.to_dict() for task in store.list()]
    return envelope(tasks, "Tasks fetched successfully")


@router.get("/{task_id}", response_model=TaskEnvelope, responses=NOT_FOUND, summary="Get a task by ID")
def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    parsed = parse_id(task_id)
    task = store.get(parsed) if parsed is not None else None
    if task is None:
        return task_not_found(task_id)
    return envelope(task.to_dict(), "Task fetched successfully")


@router.post(
    "",
    status_code=201,
    response_model=TaskEnvelope,
    responses=INVALID,
    openapi_extra=_PAYLOAD_DOC,
    summary="Create a new task",
)
def create_task(payload: Any = Body(None), store: TaskStore = Depends(get_store)):
    data = parse_payload(payload)
    if data is None:
        return invalid_data(payload)

    task = store.create(data.title, data.completed)
    logging.info(f"Created task {task.id}: {task.title!r}")
    return envelope(task.to_dict(), "Task created successfully", status_code=201)


@router.put(
    "/{task_id}",
    response_model=TaskEnvelope,
    responses={**NOT_FOUND, **INVALID},
    openapi_extra=_PAYLOAD_DOC,
    summary="Update a task",
)
async def update_task(task_id: str, request: Request, store: TaskStore = Depends(get_store)):
    # Сначала проверяем существование задачи, затем данные
    parsed = parse_id(task_id)
    if parsed is None or not store.exists(parsed):
        return task_not_found(task_id)

    # Тело читаем сами: некорректный JSON не должен опережать проверку на 404
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw else None
    except ValueError:
        return invalid_data(raw)

    data = parse_payload(payload)
    if data is None:
        return invalid_data(payload)

    task = store.update(parsed, data.title, data.completed)
    if task is None:
        # Задачу успели удалить между проверкой и обновлением
        return task_not_found(task_id)
    logging.info(f"Updated task {task.id}")
    return envelope(task.to_dict(), "Task updated successfully")


@router.delete("/{task_id}", response_model=TaskListEnvelope, responses=NOT_FOUND, summary="Delete a task")
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    parsed = parse_id(task_id)
    task = store.delete(parsed) if parsed is not None else None
    if task is None:
        return task_not_found(task_id)
    logging.info(f"Deleted task {task.id}")
    # Удалённая задача возвращается списком из одного элемента
    return envelope([task.to_dict()], "Task deleted successfully")
