"""
Исключения предметной области бронирования билетов.

Все исключения восстановимы: интерфейс сообщает пользователю об ошибке
и возвращается в меню.
"""

from pathlib import Path
from typing import Optional, Union


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class UnknownTrainException(DomainException):
    """Исключение: поезд отсутствует в каталоге."""

    def __init__(self, train_id: int):
        super().__init__(f"Поезд с ID {train_id} не найден.")
        self.train_id = train_id


class TrainFullException(DomainException):
    """Исключение: в поезде не осталось свободных мест."""

    def __init__(self, train_id: int, train_name: str):
        super().__init__(f"Свободных мест в поезде {train_name} нет.")
        self.train_id = train_id
        self.train_name = train_name


class DuplicateBookingException(DomainException):
    """Исключение: бронирование с такими же данными уже существует."""

    def __init__(self, passenger_name: str, train_id: int):
        super().__init__(
            f"Бронирование для пассажира {passenger_name} на поезд {train_id} "
            "с такими же данными уже существует."
        )
        self.passenger_name = passenger_name
        self.train_id = train_id


class BookingNotFoundException(DomainException):
    """Исключение: бронирование не найдено."""

    def __init__(self, booking_id: int):
        super().__init__(f"Бронирование с ID {booking_id} не найдено.")
        self.booking_id = booking_id


class PersistenceException(DomainException):
    """Исключение при чтении сохраненных бронирований."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class StorageWriteException(PersistenceException):
    """Исключение: не удалось записать файл бронирований."""

    pass
