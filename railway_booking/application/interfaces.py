"""
Интерфейсы (порты) прикладного слоя.
"""

from typing import Any, Protocol

from railway_booking.domain import Booking, Train


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class ITicketRenderer(Protocol):
    """Интерфейс для формирования билета по зафиксированному бронированию."""

    def render(self, booking: Booking, train: Train) -> None: ...
