"""
Прикладной слой бронирования билетов.

Сервис приложения проверяет запрос на бронирование по каталогу и
хранилищу, фиксирует бронирование и сохраняет состояние на диск.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from railway_booking.application.interfaces import ILogger, ITicketRenderer
from railway_booking.application.repositories import BookingStorage
from railway_booking.domain import (
    Booking,
    BookingNotFoundException,
    BookingStore,
    DuplicateBookingException,
    StorageWriteException,
    Train,
    TrainCatalog,
    TrainFullException,
    UnknownTrainException,
)
from railway_booking.domain.value_objects import (
    INT32_MAX,
    INT32_MIN,
    MAX_CLASS_BYTES,
    MAX_GENDER_BYTES,
    MAX_NAME_BYTES,
    check_encoded_length,
)
from railway_booking.infrastructure.loggers import ConsoleLogger

# DTO (Data Transfer Objects) для входящих данных


class BookingRequest(BaseModel):
    """Запрос на бронирование билета."""

    passenger_name: str
    age: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    gender: str = ""
    train_id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    travel_class: str = ""

    @field_validator("passenger_name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Имя пассажира не может быть пустым.")
        return check_encoded_length(v, MAX_NAME_BYTES, "passenger_name")

    @field_validator("gender")
    @classmethod
    def gender_fits_record(cls, v: str) -> str:
        return check_encoded_length(v.strip(), MAX_GENDER_BYTES, "gender")

    @field_validator("travel_class")
    @classmethod
    def class_fits_record(cls, v: str) -> str:
        return check_encoded_length(v.strip(), MAX_CLASS_BYTES, "travel_class")


# DTO для исходящих данных


class TrainAvailabilityDTO(BaseModel):
    """Поезд с количеством свободных мест."""

    id: int
    name: str
    origin: str
    destination: str
    total_seats: int
    available_seats: int

    @classmethod
    def from_domain(cls, train: Train, booked: int) -> "TrainAvailabilityDTO":
        return cls(
            id=train.id,
            name=train.name,
            origin=train.origin,
            destination=train.destination,
            total_seats=train.total_seats,
            available_seats=max(train.total_seats - booked, 0),
        )


# Сервисы приложения


class BookingApplicationService:
    """Сервис приложения для бронирования, поиска и отмены билетов."""

    def __init__(
        self,
        catalog: TrainCatalog,
        store: BookingStore,
        storage: BookingStorage,
        logger: Optional[ILogger] = None,
        ticket_renderer: Optional[ITicketRenderer] = None,
        atomic_commit: bool = True,
    ):
        """
        Инициализирует сервис.

        Args:
            catalog: Каталог поездов
            store: Хранилище действующих бронирований
            storage: Долговременное хранилище
            logger: Логгер
            ticket_renderer: Формирователь билетов; если не задан, билеты не создаются
            atomic_commit: Откатывать изменения в памяти, если сохранение не удалось
        """
        self._catalog = catalog
        self._store = store
        self._storage = storage
        self._logger = logger or ConsoleLogger()
        self._ticket_renderer = ticket_renderer
        self._atomic_commit = atomic_commit

    @property
    def store(self) -> BookingStore:
        return self._store

    def list_trains(self) -> List[TrainAvailabilityDTO]:
        """Возвращает поезда каталога со свободными местами."""
        return [
            TrainAvailabilityDTO.from_domain(train, self._store.count_for_train(train.id))
            for train in self._catalog.list_trains()
        ]

    def find_train(self, train_id: int) -> Optional[Train]:
        return self._catalog.find_by_id(train_id)

    def ensure_seats_available(self, train_id: int) -> Train:
        """Возвращает поезд, если он есть в каталоге и в нем остались свободные места."""
        train = self._catalog.find_by_id(train_id)
        if train is None:
            self._logger.warning("Поезд не найден", train_id=train_id)
            raise UnknownTrainException(train_id)

        if self._store.count_for_train(train.id) >= train.total_seats:
            self._logger.warning("Нет свободных мест", train_id=train.id)
            raise TrainFullException(train.id, train.name)
        return train

    def book(self, request: BookingRequest) -> Booking:
        """Проверяет запрос и фиксирует бронирование."""
        train = self.ensure_seats_available(request.train_id)

        if self._store.is_duplicate(request):
            self._logger.warning(
                "Обнаружено повторное бронирование",
                passenger_name=request.passenger_name,
                train_id=train.id,
            )
            raise DuplicateBookingException(request.passenger_name, train.id)

        booking = Booking(
            booking_id=self._store.next_id(),
            passenger_name=request.passenger_name,
            age=request.age,
            gender=request.gender,
            train_id=train.id,
            travel_class=request.travel_class,
        )
        self._store.insert(booking)

        try:
            self._storage.save(self._store.all())
        except StorageWriteException as e:
            if self._atomic_commit:
                self._store.remove(booking.booking_id)
            self._logger.error(
                f"Ошибка при сохранении бронирования: {str(e)}",
                booking_id=booking.booking_id,
                rolled_back=self._atomic_commit,
            )
            raise

        self._logger.info(
            "Бронирование создано", booking_id=booking.booking_id, train_id=train.id
        )

        if self._ticket_renderer is not None:
            try:
                self._ticket_renderer.render(booking, train)
            except OSError as e:
                self._logger.error(
                    f"Ошибка при формировании билета: {str(e)}",
                    booking_id=booking.booking_id,
                )

        return booking

    def cancel(self, booking_id: int) -> Booking:
        """Отменяет бронирование и сохраняет изменения."""
        booking = self._store.find(booking_id)
        if booking is None:
            raise BookingNotFoundException(booking_id)

        self._store.remove(booking_id)
        try:
            self._storage.save(self._store.all())
        except StorageWriteException as e:
            if self._atomic_commit:
                self._store.insert(booking)
            self._logger.error(
                f"Ошибка при сохранении отмены: {str(e)}",
                booking_id=booking_id,
                rolled_back=self._atomic_commit,
            )
            raise

        self._logger.info("Бронирование отменено", booking_id=booking_id)
        return booking

    def find(self, booking_id: int) -> Booking:
        """Возвращает бронирование по ID."""
        booking = self._store.find(booking_id)
        if booking is None:
            raise BookingNotFoundException(booking_id)
        return booking

    def list_bookings(self) -> List[Booking]:
        return self._store.all()

    def flush(self) -> None:
        """Повторно сохраняет текущее состояние хранилища."""
        self._storage.save(self._store.all())
