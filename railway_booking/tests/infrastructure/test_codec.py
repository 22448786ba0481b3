import struct

import pytest

from railway_booking.domain import Booking, PersistenceException, StorageWriteException
from railway_booking.infrastructure.codec import BookingRecordCodec


@pytest.fixture
def codec() -> BookingRecordCodec:
    return BookingRecordCodec()


@pytest.fixture
def booking() -> Booking:
    return Booking(
        booking_id=12,
        passenger_name="Иван Петров",
        age=45,
        gender="Male",
        train_id=3,
        travel_class="Sleeper",
    )


def test_record_size_matches_legacy_layout(codec: BookingRecordCodec):
    assert codec.record_size == 144


def test_encode_places_fields_at_legacy_offsets(codec: BookingRecordCodec, booking: Booking):
    """Тест: поля записываются по смещениям исходной структуры."""
    record = codec.encode(booking)

    assert len(record) == 144
    assert struct.unpack_from("<i", record, 0)[0] == 12
    assert record[4:104].rstrip(b"\0") == "Иван Петров".encode("utf-8")
    assert struct.unpack_from("<i", record, 104)[0] == 45
    assert record[108:118].rstrip(b"\0") == b"Male"
    assert record[118:120] == b"\0\0"
    assert struct.unpack_from("<i", record, 120)[0] == 3
    assert record[124:144].rstrip(b"\0") == b"Sleeper"


def test_decode_restores_booking(codec: BookingRecordCodec, booking: Booking):
    assert codec.decode(codec.encode(booking)) == booking


def test_decode_ignores_bytes_after_terminator(codec: BookingRecordCodec):
    """Тест: мусор после завершающего нуля в строковом поле игнорируется."""
    raw = bytearray(144)
    struct.pack_into("<i", raw, 0, 1)
    raw[4:14] = b"Ann\0garbag"
    struct.pack_into("<i", raw, 104, 20)
    raw[108:110] = b"F\0"
    raw[118:120] = b"\xff\xff"
    struct.pack_into("<i", raw, 120, 2)
    raw[124:126] = b"AC"

    booking = codec.decode(bytes(raw))

    assert booking.passenger_name == "Ann"
    assert booking.gender == "F"
    assert booking.travel_class == "AC"


def test_decode_all_discards_truncated_tail(codec: BookingRecordCodec, booking: Booking):
    """Тест: неполная последняя запись считается концом данных."""
    data = codec.encode(booking) + codec.encode(booking)[:50]

    result = codec.decode_all(data)

    assert result.bookings == [booking]
    assert result.discarded_bytes == 50


def test_decode_all_empty(codec: BookingRecordCodec):
    result = codec.decode_all(b"")

    assert result.bookings == []
    assert result.discarded_bytes == 0


def test_decode_rejects_invalid_utf8(codec: BookingRecordCodec, booking: Booking):
    raw = bytearray(codec.encode(booking))
    raw[4:6] = b"\xff\xfe"

    with pytest.raises(PersistenceException, match="Поврежденная запись"):
        codec.decode(bytes(raw))


def test_decode_rejects_non_positive_id(codec: BookingRecordCodec, booking: Booking):
    raw = bytearray(codec.encode(booking))
    struct.pack_into("<i", raw, 0, 0)

    with pytest.raises(PersistenceException):
        codec.decode(bytes(raw))


def test_decode_rejects_wrong_length(codec: BookingRecordCodec, booking: Booking):
    with pytest.raises(PersistenceException, match="Некорректная запись"):
        codec.decode(codec.encode(booking)[:-1])


@pytest.mark.parametrize("field", ["age", "train_id"])
def test_encode_rejects_values_outside_int32(
    codec: BookingRecordCodec, booking: Booking, field: str
):
    """Тест: значение, не помещающееся в int32, не приводит к struct.error."""
    # model_copy не выполняет валидацию
    oversized = booking.model_copy(update={field: 2**31})

    with pytest.raises(StorageWriteException, match="не помещается в запись"):
        codec.encode(oversized)
