"""
Хранилище бронирований.

Владеет множеством действующих бронирований и отвечает на запросы к нему:
поиск дубликатов, подсчет занятых мест, выдача идентификаторов.
Проверки вместимости и дубликатов выполняет сервис приложения до вставки.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from railway_booking.domain.booking import Booking
from railway_booking.domain.value_objects import DuplicateKey, PassengerDetails


class BookingStore:
    """Множество действующих бронирований с индексами по поезду и ключу дубликата."""

    def __init__(self) -> None:
        self._bookings: Dict[int, Booking] = {}
        self._train_counts: Counter = Counter()
        self._duplicate_keys: Counter = Counter()
        self._last_issued_id = 0

    @classmethod
    def from_bookings(cls, bookings: Iterable[Booking]) -> "BookingStore":
        """Восстанавливает хранилище из загруженных записей."""
        store = cls()
        store.load(bookings)
        return store

    def load(self, bookings: Iterable[Booking]) -> None:
        """Заменяет содержимое хранилища загруженными записями."""
        self._bookings.clear()
        self._train_counts.clear()
        self._duplicate_keys.clear()
        self._last_issued_id = 0
        for booking in bookings:
            self.insert(booking)

    def __len__(self) -> int:
        return len(self._bookings)

    def __contains__(self, booking_id: object) -> bool:
        return booking_id in self._bookings

    def next_id(self) -> int:
        """
        Возвращает следующий идентификатор бронирования.

        Идентификатор на единицу больше максимального из действующих
        и уже выданных в этом процессе, поэтому после отмены он не
        используется повторно.
        """
        return self._last_issued_id + 1

    def count_for_train(self, train_id: int) -> int:
        return self._train_counts[train_id]

    def is_duplicate(self, candidate: PassengerDetails) -> bool:
        """Проверяет, есть ли бронирование с тем же возрастом, поездом, именем и классом."""
        return self._duplicate_keys[DuplicateKey.of(candidate)] > 0

    def insert(self, booking: Booking) -> None:
        """Добавляет бронирование. Запись с тем же ID заменяется."""
        if booking.booking_id in self._bookings:
            self._unindex(self._bookings.pop(booking.booking_id))
        self._bookings[booking.booking_id] = booking
        self._train_counts[booking.train_id] += 1
        self._duplicate_keys[booking.duplicate_key] += 1
        self._last_issued_id = max(self._last_issued_id, booking.booking_id)

    def remove(self, booking_id: int) -> bool:
        booking = self._bookings.pop(booking_id, None)
        if booking is None:
            return False
        self._unindex(booking)
        return True

    def find(self, booking_id: int) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def all(self) -> List[Booking]:
        return list(self._bookings.values())

    def _unindex(self, booking: Booking) -> None:
        self._train_counts[booking.train_id] -= 1
        if self._train_counts[booking.train_id] <= 0:
            del self._train_counts[booking.train_id]
        self._duplicate_keys[booking.duplicate_key] -= 1
        if self._duplicate_keys[booking.duplicate_key] <= 0:
            del self._duplicate_keys[booking.duplicate_key]
