from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Snapshot file rewritten after every mutation
    tasks_file: str = Field("tasks.json", validation_alias="TASKS_FILE")

    # Persistence backend: "file" (default) or "memory" for throwaway runs
    task_repo_backend: str = Field("file", validation_alias="TASK_REPO_BACKEND")

    app_log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")

    # HTTP listener
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(8080, validation_alias="PORT")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
