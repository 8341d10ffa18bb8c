# api/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..Store.task_store import SEED_TASKS, TaskStore
from .endpoints import tasks
from .settings import Settings, settings


def create_app(config: Settings = settings) -> FastAPI:
    # Базовая конфигурация логирования, в том числе при запуске через "uvicorn task_manager.Api.main:app"
    logging.basicConfig(level=config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Хранилище живёт столько же, сколько приложение
        store = TaskStore(id_strategy=config.ID_STRATEGY)
        store.reset(SEED_TASKS if config.SEED_TASKS else ())
        app.state.store = store
        logging.info(f"Server running on {config.base_url}")
        logging.info(f"Swagger Docs available at {config.base_url}{config.DOCS_URL}")
        yield
        app.state.store = None

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.PROJECT_VERSION,
        description=config.PROJECT_DESCRIPTION,
        docs_url=config.DOCS_URL,
        openapi_url=f"{config.DOCS_URL}.json",
        redoc_url=None,
        servers=[{"url": config.base_url}],
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def catch_unexpected_errors(request: Request, call_next):
        # Любая необработанная ошибка превращается в 500, процесс продолжает работу
        try:
            return await call_next(request)
        except Exception:
            logging.exception(f"Unhandled error on {request.method} {request.url.path}")
            return JSONResponse({"success": False, "message": "Something went wrong!"}, status_code=500)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        # Например, тело запроса не является корректным JSON
        logging.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse({"success": False, "message": "Invalid data"}, status_code=400)

    # Регистрация маршрутов с указанием префиксов и тегов для документации
    app.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])

    @app.get("/", include_in_schema=False)
    def read_root():
        return {"message": f"Welcome to {config.PROJECT_NAME}"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
