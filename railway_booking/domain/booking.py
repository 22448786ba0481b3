"""
Бронирование билета на поезд.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from railway_booking.domain.value_objects import (
    INT32_MAX,
    INT32_MIN,
    MAX_CLASS_BYTES,
    MAX_GENDER_BYTES,
    MAX_NAME_BYTES,
    DuplicateKey,
    check_encoded_length,
)


class Booking(BaseModel):
    """Зафиксированное бронирование пассажира на поезд."""

    model_config = ConfigDict(frozen=True)

    booking_id: int = Field(..., gt=0, le=INT32_MAX)
    passenger_name: str = Field(..., min_length=1)
    age: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    gender: str = ""
    train_id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    travel_class: str = ""

    @field_validator("passenger_name")
    @classmethod
    def name_fits_record(cls, v: str) -> str:
        return check_encoded_length(v, MAX_NAME_BYTES, "passenger_name")

    @field_validator("gender")
    @classmethod
    def gender_fits_record(cls, v: str) -> str:
        return check_encoded_length(v, MAX_GENDER_BYTES, "gender")

    @field_validator("travel_class")
    @classmethod
    def class_fits_record(cls, v: str) -> str:
        return check_encoded_length(v, MAX_CLASS_BYTES, "travel_class")

    @property
    def duplicate_key(self) -> DuplicateKey:
        return DuplicateKey.of(self)

    def qr_payload(self) -> str:
        """Строка, кодируемая в QR-код билета."""
        return (
            f"BookingID:{self.booking_id};Name:{self.passenger_name};"
            f"Age:{self.age};Train:{self.train_id};Class:{self.travel_class}"
        )
