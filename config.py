"""Configuration for the task tracker"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


class Config:
    """Application configuration"""

    # Paths
    PROJECT_ROOT = Path(__file__).parent
    DATA_DIR = Path(os.getenv("TASKS_DATA_DIR", str(PROJECT_ROOT / "data")))

    # Console output
    INDENT = int(os.getenv("TASKS_INDENT", "4"))
    DATE_DISPLAY_FORMAT = "%b %d %Y"

    # Persistence
    AUTOSAVE = _env_flag("TASKS_AUTOSAVE", True)
    MAX_BACKUPS = int(os.getenv("TASKS_MAX_BACKUPS", "10"))

    # Logging
    LOG_LEVEL = os.getenv("TASKS_LOG_LEVEL", "WARNING").upper()
    LOG_CONSOLE = _env_flag("TASKS_LOG_CONSOLE", False)

    @classmethod
    def validate(cls):
        """Validate configuration values"""
        if cls.INDENT < 0:
            raise ValueError(f"TASKS_INDENT must not be negative, got {cls.INDENT}")

        if cls.MAX_BACKUPS < 0:
            raise ValueError(f"TASKS_MAX_BACKUPS must not be negative, got {cls.MAX_BACKUPS}")

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Unknown TASKS_LOG_LEVEL '{cls.LOG_LEVEL}'")

    @classmethod
    def get_log_level(cls) -> int:
        return logging.getLevelName(cls.LOG_LEVEL)

    @classmethod
    def get_log_dir(cls, data_dir: Path = None) -> Path:
        """Logs live beside the task list they belong to"""
        return Path(data_dir or cls.DATA_DIR) / "logs"
