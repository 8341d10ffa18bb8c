# api/settings.py
from typing import Literal

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Task Manager API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "A simple Task Manager API without a database"
    HOST: str = "localhost"
    PORT: int = 3000
    DOCS_URL: str = "/api-docs"
    LOG_LEVEL: str = "INFO"
    # length - id = длина списка + 1 (как в исходном сервисе), counter - сквозной счётчик
    ID_STRATEGY: Literal["length", "counter"] = "length"
    SEED_TASKS: bool = True

    class Config:
        env_file = ".env"

    @property
    def base_url(self) -> str:
        return f"http://{self.HOST}:{self.PORT}"

settings = Settings()
