"""Runtime settings, read from ``LOWBAR_*`` environment variables."""

import os
from typing import Optional

from pydantic import BaseModel, field_validator

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    SHUFFLE_SEED: Optional[int] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return value

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from the environment, unset variables keep defaults."""
        values = {}
        for field in cls.model_fields:
            raw = os.environ.get(f"LOWBAR_{field}")
            if raw:
                values[field] = raw

        return cls(**values)


settings = Settings.load()
