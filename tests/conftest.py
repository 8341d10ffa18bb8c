# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from task_manager.Api.main import create_app
from task_manager.Api.settings import Settings
from task_manager.Store.task_store import TaskStore


@pytest.fixture()
def store() -> TaskStore:
    store = TaskStore()
    store.reset()
    return store


@pytest.fixture()
def config() -> Settings:
    # Без .env, чтобы локальные настройки не влияли на тесты
    return Settings(_env_file=None)


@pytest.fixture()
def app(config: Settings):
    return create_app(config)


@pytest.fixture()
def client(app):
    # Контекстный менеджер запускает lifespan, который заполняет хранилище
    with TestClient(app) as c:
        yield c
