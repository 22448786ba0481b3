import json
import logging
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Настраивает корневой логгер приложения."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class ConsoleLogger:
    """Логгер, передающий сообщения в logging и выводящий контекст в виде JSON."""

    def __init__(self, name: str = "railway_booking", logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(name)

    def _log(self, level: int, message: str, context: dict) -> None:
        if context:
            message = f"{message} | {json.dumps(context, default=str, ensure_ascii=False)}"
        self._logger.log(level, message)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)
