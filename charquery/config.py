from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    pg_host: str = Field(default="127.0.0.1", alias="POSTGRES_HOST")
    pg_port: int = Field(default=5432, alias="POSTGRES_PORT")
    pg_db: str = Field(default="query", alias="POSTGRES_DB")
    pg_user: str = Field(default="sea", alias="POSTGRES_USER")
    pg_password: str = Field(default="sea", alias="POSTGRES_PASSWORD")
    # Полный DSN перекрывает отдельные POSTGRES_* параметры.
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")

    pg_pool_min_size: int = Field(default=1, alias="PG_POOL_MIN_SIZE")
    pg_pool_max_size: int = Field(default=10, alias="PG_POOL_MAX_SIZE")
    pg_command_timeout: float = Field(default=60, alias="PG_COMMAND_TIMEOUT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def pg_dsn(self) -> str:
        if self.database_url:
            return self.database_url
        return f"postgresql://{self.pg_user}:{self.pg_password}@{self.pg_host}:{self.pg_port}/{self.pg_db}"
