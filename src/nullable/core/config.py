import logging
import os

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    LOG_LEVEL: str = Field(
        "WARNING", description="Level name for the project logger (DEBUG, INFO, ...)."
    )
    LOG_FORMAT: str = Field(
        DEFAULT_LOG_FORMAT, description="Format string for the project logger."
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        return cls(
            LOG_LEVEL=os.getenv("NULLABLE_LOG_LEVEL", "WARNING"),
            LOG_FORMAT=os.getenv("NULLABLE_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )


settings = Settings.load()
