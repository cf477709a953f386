from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки сервиса, читаются из переменных окружения и .env"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    project_name: str = Field("Movie and Genre API", alias="PROJECT_NAME")
    project_description: str = "API for managing movies and genres"
    project_version: str = "1.0.0"

    mongo_url_override: str | None = Field(None, alias="MONGO_URL")
    mongo_host: str = Field("127.0.0.1", alias="MONGO_HOST")
    mongo_port: int = Field(27017, alias="MONGO_PORT")
    mongo_user: str | None = Field(None, alias="MONGO_USER")
    mongo_password: str | None = Field(None, alias="MONGO_PASSWORD")
    mongo_db: str = Field("movies", alias="MONGO_DB")
    mongo_max_pool_size: int = Field(10, alias="MONGO_MAX_POOL_SIZE")
    mongo_socket_timeout_ms: int = Field(45000, alias="MONGO_SOCKET_TIMEOUT_MS")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    service_host: str = Field("0.0.0.0", alias="SERVICE_HOST")
    service_port: int = Field(3000, alias="SERVICE_PORT")

    @property
    def mongo_url(self) -> str:
        if self.mongo_url_override:
            return self.mongo_url_override
        if self.mongo_user and self.mongo_password:
            return (
                f"mongodb://{self.mongo_user}:{self.mongo_password}"
                f"@{self.mongo_host}:{self.mongo_port}"
            )
        return f"mongodb://{self.mongo_host}:{self.mongo_port}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
