"""
Доменная модель бронирования билетов на поезда.

Содержит каталог поездов, бронирование, хранилище бронирований
и доменные исключения.
"""

from .booking import Booking
from .catalog import DEFAULT_TRAINS, Train, TrainCatalog
from .exceptions import (
    BookingNotFoundException,
    DomainException,
    DuplicateBookingException,
    PersistenceException,
    StorageWriteException,
    TrainFullException,
    UnknownTrainException,
)
from .store import BookingStore
from .value_objects import DuplicateKey, normalize

__all__ = [
    # Основные классы
    "Booking",
    "BookingStore",
    "Train",
    "TrainCatalog",
    "DEFAULT_TRAINS",
    "DuplicateKey",
    "normalize",
    # Исключения
    "DomainException",
    "UnknownTrainException",
    "TrainFullException",
    "DuplicateBookingException",
    "BookingNotFoundException",
    "PersistenceException",
    "StorageWriteException",
]
