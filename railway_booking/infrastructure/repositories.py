"""
Реализации долговременного хранилища бронирований.
"""

import contextlib
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from railway_booking.application.interfaces import ILogger
from railway_booking.application.repositories import BookingStorage
from railway_booking.domain import Booking, PersistenceException, StorageWriteException
from railway_booking.infrastructure.codec import BookingRecordCodec
from railway_booking.infrastructure.loggers import ConsoleLogger


class BinaryFileBookingStorage(BookingStorage):
    """Хранилище бронирований в двоичном файле с записями фиксированной длины."""

    def __init__(
        self,
        file_path: Union[str, Path],
        strict: bool = False,
        codec: Optional[BookingRecordCodec] = None,
        logger: Optional[ILogger] = None,
    ):
        """
        Инициализирует хранилище.

        Args:
            file_path: Путь к файлу бронирований
            strict: Считать неполную последнюю запись ошибкой, а не концом данных
            codec: Кодек записей
            logger: Логгер
        """
        self._file_path = Path(file_path)
        self._strict = strict
        self._codec = codec or BookingRecordCodec()
        self._logger = logger or ConsoleLogger()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> List[Booking]:
        """Загружает бронирования из файла. Отсутствие файла означает первый запуск."""
        if not self._file_path.exists():
            self._logger.debug("Файл бронирований не найден", path=self._file_path)
            return []

        try:
            data = self._file_path.read_bytes()
        except OSError as e:
            raise PersistenceException(
                f"Не удалось прочитать файл бронирований: {e}", path=self._file_path
            ) from e

        result = self._codec.decode_all(data)
        if result.discarded_bytes:
            if self._strict:
                raise PersistenceException(
                    "Файл бронирований обрезан: "
                    f"{result.discarded_bytes} лишних байт в конце",
                    path=self._file_path,
                )
            self._logger.warning(
                "Неполная запись в конце файла бронирований отброшена",
                path=self._file_path,
                discarded_bytes=result.discarded_bytes,
            )

        self._logger.info(
            "Бронирования загружены",
            path=self._file_path,
            count=len(result.bookings),
        )
        return result.bookings

    def save(self, bookings: Iterable[Booking]) -> None:
        """Перезаписывает файл через временный файл и атомарную замену."""
        data = self._codec.encode_all(bookings)
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._file_path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise StorageWriteException(
                f"Не удалось сохранить бронирования: {e}", path=self._file_path
            ) from e

        self._logger.debug(
            "Бронирования сохранены",
            path=self._file_path,
            records=len(data) // self._codec.record_size,
        )


class InMemoryBookingStorage(BookingStorage):
    """Реализация хранилища в памяти для тестов и временных запусков."""

    def __init__(self, bookings: Optional[Iterable[Booking]] = None) -> None:
        self._bookings: List[Booking] = list(bookings or [])
        self.save_count = 0

    def save(self, bookings: Iterable[Booking]) -> None:
        self._bookings = list(bookings)
        self.save_count += 1

    def load(self) -> List[Booking]:
        return list(self._bookings)
