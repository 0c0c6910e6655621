"""Configuration management for the fitness planner."""

import os
import logging
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    OUTPUT_FORMAT: str = os.getenv("OUTPUT_FORMAT", "table")  # table or json

    # Plan generation
    CLAMP_NEGATIVE_CARBS: bool = os.getenv("CLAMP_NEGATIVE_CARBS", "true").lower() == "true"
    DEFAULT_GENDER: str = os.getenv("DEFAULT_GENDER", "other")

    OUTPUT_FORMATS = ("table", "json")

    @classmethod
    def get_log_level(cls, name: Optional[str] = None) -> int:
        """Map a level name (LOG_LEVEL by default) to a logging level, INFO if unrecognized."""
        level = logging.getLevelName((name or cls.LOG_LEVEL).upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration values."""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            raise ValueError(f"Invalid LOG_LEVEL '{cls.LOG_LEVEL}'")
        if cls.OUTPUT_FORMAT not in cls.OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid OUTPUT_FORMAT '{cls.OUTPUT_FORMAT}'. Use one of: {', '.join(cls.OUTPUT_FORMATS)}"
            )
        if cls.DEFAULT_GENDER.lower() not in ("male", "female", "other"):
            raise ValueError(f"Invalid DEFAULT_GENDER '{cls.DEFAULT_GENDER}'")
        return True


config = Config()
