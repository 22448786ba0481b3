from dataclasses import dataclass
from typing import Protocol

# Максимальная длина строковых полей в байтах UTF-8 (без завершающего нуля)
MAX_NAME_BYTES = 99
MAX_GENDER_BYTES = 9
MAX_CLASS_BYTES = 19

# Числовые поля записи хранятся как int32
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def normalize(value: str) -> str:
    """Приводит строку к нижнему регистру и удаляет все пробельные символы."""
    return "".join(ch for ch in value.lower() if not ch.isspace())


class PassengerDetails(Protocol):
    """Данные, по которым сравниваются бронирования."""

    passenger_name: str
    age: int
    train_id: int
    travel_class: str


@dataclass(frozen=True)
class DuplicateKey:
    """Ключ для обнаружения дубликатов бронирования."""

    age: int
    train_id: int
    passenger_name: str
    travel_class: str

    @staticmethod
    def of(details: PassengerDetails) -> "DuplicateKey":
        return DuplicateKey(
            age=details.age,
            train_id=details.train_id,
            passenger_name=normalize(details.passenger_name),
            travel_class=normalize(details.travel_class),
        )


def check_encoded_length(value: str, limit: int, field_name: str) -> str:
    """Проверяет, что строка помещается в поле записи файла бронирований."""
    if "\x00" in value:
        raise ValueError(f"Поле {field_name} не должно содержать нулевой символ.")
    if len(value.encode("utf-8")) > limit:
        raise ValueError(f"Поле {field_name} не должно превышать {limit} байт.")
    return value
