from abc import ABC, abstractmethod
from typing import Iterable, List

from railway_booking.domain import Booking


class BookingStorage(ABC):
    """Абстрактное долговременное хранилище набора бронирований."""

    @abstractmethod
    def save(self, bookings: Iterable[Booking]) -> None:
        """Полностью перезаписывает хранилище переданными бронированиями."""
        raise NotImplementedError

    @abstractmethod
    def load(self) -> List[Booking]:
        """Загружает все бронирования. Если данных нет, возвращает пустой список."""
        raise NotImplementedError
