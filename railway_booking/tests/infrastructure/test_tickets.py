from datetime import datetime
from pathlib import Path

import pytest

from railway_booking.domain import Booking, TrainCatalog
from railway_booking.infrastructure.tickets import (
    QR_SIZE,
    TicketRenderer,
    ascii_placeholder,
    placeholder_seed,
)


@pytest.fixture
def booking() -> Booking:
    return Booking(
        booking_id=3, passenger_name="John Doe", age=30, gender="Male", train_id=1, travel_class="AC"
    )


@pytest.fixture
def renderer(tmp_path: Path) -> TicketRenderer:
    return TicketRenderer(tmp_path / "tickets", clock=lambda: datetime(2024, 5, 1, 12, 30))


def test_placeholder_seed_is_djb2_of_name_xor_id(booking: Booking):
    h = 5381
    for ch in b"John Doe":
        h = (h * 33 + ch) % 2**32

    assert placeholder_seed(booking) == h ^ 3


def test_ascii_placeholder_is_deterministic_square(booking: Booking):
    """Тест: заглушка QR-кода - квадрат 21x21 из '#' и пробелов."""
    art = ascii_placeholder(booking)
    rows = art.splitlines()

    assert len(rows) == QR_SIZE
    assert all(len(row) == QR_SIZE for row in rows)
    assert set(art) <= {"#", " ", "\n"}
    assert "#" in art
    assert ascii_placeholder(booking) == art


def test_ascii_placeholder_depends_on_booking(booking: Booking):
    other = booking.model_copy(update={"booking_id": 4})

    assert ascii_placeholder(other) != ascii_placeholder(booking)


def test_render_writes_ticket_and_qr_files(renderer: TicketRenderer, booking: Booking):
    train = TrainCatalog().find_by_id(1)

    renderer.render(booking, train)

    ticket = renderer.ticket_path(booking).read_text(encoding="utf-8")
    assert renderer.ticket_path(booking).name == "booking_3.txt"
    assert "Booking ID: 3\n" in ticket
    assert "Name: John Doe\n" in ticket
    assert "Age: 30\n" in ticket
    assert "Gender: Male\n" in ticket
    assert "Train ID: 1\n" in ticket
    assert "Class: AC\n" in ticket
    assert "Generated: 2024-05-01 12:30:00" in ticket

    qr = renderer.qr_path(booking).read_text(encoding="utf-8")
    assert renderer.qr_path(booking).name == "booking_3_qr.txt"
    assert qr.startswith("ASCII QR placeholder for Booking 3\n")
    assert booking.qr_payload() in qr
    assert qr.endswith(ascii_placeholder(booking))
