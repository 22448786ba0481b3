"""Настройки приложения из переменных окружения."""
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() in ("1", "true", "yes")


class Settings(BaseModel):
    """Настройки консольного приложения бронирования."""

    bookings_file: str = Field(default="bookings.dat", min_length=1)
    tickets_dir: str = "."
    strict_load: bool = False
    atomic_commit: bool = True
    render_tickets: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return v

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """Создает настройки из окружения (и файла .env), затем применяет переопределения."""
        load_dotenv()
        values = {
            "bookings_file": os.getenv("RAILWAY_BOOKINGS_FILE", "bookings.dat"),
            "tickets_dir": os.getenv("RAILWAY_TICKETS_DIR", "."),
            "strict_load": _env_flag("RAILWAY_STRICT_LOAD", False),
            "atomic_commit": _env_flag("RAILWAY_ATOMIC_COMMIT", True),
            "render_tickets": _env_flag("RAILWAY_RENDER_TICKETS", True),
            "log_level": os.getenv("RAILWAY_LOG_LEVEL", "WARNING"),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
