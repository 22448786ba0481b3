"""
Формирование файлов билета.

Для каждого бронирования создаются текстовый билет и ASCII-заглушка
вместо QR-кода.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from railway_booking.application.interfaces import ILogger
from railway_booking.domain import Booking, Train
from railway_booking.infrastructure.loggers import ConsoleLogger

QR_SIZE = 21


def placeholder_seed(booking: Booking) -> int:
    """Хеш djb2 имени пассажира, смешанный с номером бронирования."""
    h = 5381
    for byte in booking.passenger_name.encode("utf-8"):
        h = (h * 33 + byte) & 0xFFFFFFFF
    return h ^ (booking.booking_id & 0xFFFFFFFF)


def ascii_placeholder(booking: Booking, size: int = QR_SIZE) -> str:
    """Детерминированный квадрат из символов '#', заменяющий QR-код."""
    h = placeholder_seed(booking)
    rows = []
    for y in range(size):
        row = "".join(
            "#" if ((h + x * 131 + y * 137) & 0xFF) % 3 == 0 else " "
            for x in range(size)
        )
        rows.append(row)
    return "\n".join(rows) + "\n"


class TicketRenderer:
    """Записывает файлы билета в указанную директорию."""

    def __init__(
        self,
        directory: Union[str, Path] = ".",
        logger: Optional[ILogger] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._directory = Path(directory)
        self._logger = logger or ConsoleLogger()
        self._clock = clock

    def ticket_path(self, booking: Booking) -> Path:
        return self._directory / f"booking_{booking.booking_id}.txt"

    def qr_path(self, booking: Booking) -> Path:
        return self._directory / f"booking_{booking.booking_id}_qr.txt"

    def render(self, booking: Booking, train: Train) -> None:
        """Создает текстовый билет и ASCII-заглушку QR-кода."""
        self._directory.mkdir(parents=True, exist_ok=True)

        lines = [
            f"Booking ID: {booking.booking_id}",
            f"Name: {booking.passenger_name}",
            f"Age: {booking.age}",
            f"Gender: {booking.gender}",
            f"Train ID: {booking.train_id}",
            f"Train: {train.name} ({train.route})",
            f"Class: {booking.travel_class}",
            f"Generated: {self._clock().strftime('%Y-%m-%d %H:%M:%S')}",
        ]
        self.ticket_path(booking).write_text("\n".join(lines) + "\n", encoding="utf-8")

        qr_text = (
            f"ASCII QR placeholder for Booking {booking.booking_id}\n"
            f"{booking.qr_payload()}\n\n"
            f"{ascii_placeholder(booking)}"
        )
        self.qr_path(booking).write_text(qr_text, encoding="utf-8")

        self._logger.info(
            "Билет сформирован",
            booking_id=booking.booking_id,
            ticket=self.ticket_path(booking),
            qr=self.qr_path(booking),
        )
