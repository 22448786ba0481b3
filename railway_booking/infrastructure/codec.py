"""
Двоичный формат файла бронирований.

Файл представляет собой последовательность записей фиксированной длины
без заголовка и контрольной суммы. Раскладка записи совпадает с
раскладкой структуры, которую использовала прежняя консольная программа
(little-endian, 144 байта):

    booking_id      int32
    passenger_name  char[100]  UTF-8, дополняется нулями
    age             int32
    gender          char[10]
    <выравнивание>  2 байта
    train_id        int32
    travel_class    char[20]

Неполная последняя запись считается концом данных.
"""

import struct
from dataclasses import dataclass, field
from typing import Iterable, List

from pydantic import ValidationError

from railway_booking.domain import Booking, PersistenceException, StorageWriteException

RECORD_FORMAT = "<i100si10s2xi20s"


@dataclass
class DecodeResult:
    """Результат разбора содержимого файла."""

    bookings: List[Booking] = field(default_factory=list)
    discarded_bytes: int = 0


class BookingRecordCodec:
    """Кодирует бронирования в записи фиксированной длины и обратно."""

    _record = struct.Struct(RECORD_FORMAT)

    @property
    def record_size(self) -> int:
        return self._record.size

    def encode(self, booking: Booking) -> bytes:
        try:
            return self._record.pack(
                booking.booking_id,
                booking.passenger_name.encode("utf-8"),
                booking.age,
                booking.gender.encode("utf-8"),
                booking.train_id,
                booking.travel_class.encode("utf-8"),
            )
        except struct.error as e:
            raise StorageWriteException(
                f"Бронирование {booking.booking_id} не помещается в запись: {e}"
            ) from e

    def encode_all(self, bookings: Iterable[Booking]) -> bytes:
        return b"".join(self.encode(booking) for booking in bookings)

    def decode(self, chunk: bytes) -> Booking:
        """Разбирает одну полную запись."""
        try:
            booking_id, name, age, gender, train_id, travel_class = self._record.unpack(
                chunk
            )
        except struct.error as e:
            raise PersistenceException(f"Некорректная запись бронирования: {e}") from e

        try:
            return Booking(
                booking_id=booking_id,
                passenger_name=_decode_text(name),
                age=age,
                gender=_decode_text(gender),
                train_id=train_id,
                travel_class=_decode_text(travel_class),
            )
        except (UnicodeDecodeError, ValidationError) as e:
            raise PersistenceException(
                f"Поврежденная запись бронирования {booking_id}: {e}"
            ) from e

    def decode_all(self, data: bytes) -> DecodeResult:
        """Разбирает все полные записи; хвост неполной записи отбрасывается."""
        size = self.record_size
        complete = len(data) - len(data) % size
        result = DecodeResult(discarded_bytes=len(data) - complete)
        for offset in range(0, complete, size):
            result.bookings.append(self.decode(data[offset : offset + size]))
        return result


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8")
