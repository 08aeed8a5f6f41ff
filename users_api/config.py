from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Users API"
    database_url: str = Field(default="sqlite:///./users.db")
    # "sql" persists through SQLAlchemy, "memory" keeps users in-process.
    user_store: Literal["sql", "memory"] = "sql"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


settings = Settings()
