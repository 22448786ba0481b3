"""
Консольный интерфейс бронирования билетов.

Числовое меню поверх сервиса приложения. Некорректный ввод не завершает
программу: пользователь получает сообщение и возвращается в меню.
"""

import argparse
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from railway_booking.application.services import BookingApplicationService, BookingRequest
from railway_booking.bootstrap import bootstrap_app
from railway_booking.config import Settings
from railway_booking.domain import Booking, DomainException, PersistenceException

MENU = """
================ Railway Ticket Booker ================
1. Список поездов
2. Забронировать билет
3. Все бронирования
4. Найти бронирование по ID
5. Отменить бронирование
6. Выход"""


class BookingConsole:
    """Интерактивное меню бронирования."""

    def __init__(
        self,
        service: BookingApplicationService,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._service = service
        self._input = input_fn
        self._output = output_fn

    def run(self) -> int:
        actions = {
            1: self.list_trains,
            2: self.book_ticket,
            3: self.view_bookings,
            4: self.search_booking,
            5: self.cancel_booking,
        }
        while True:
            self._output(MENU)
            try:
                choice = self._read_int("Выберите пункт: ")
                if choice is None:
                    self._output("Некорректный ввод. Введите число от 1 до 6.")
                    continue
                if choice == 6:
                    self._shutdown()
                    return 0
                action = actions.get(choice)
                if action is None:
                    self._output("Неверный пункт. Выберите от 1 до 6.")
                    continue
                action()
            except EOFError:
                self._shutdown()
                return 0

    def list_trains(self) -> None:
        self._output("\nДоступные поезда:")
        self._output(f"{'ID':<4} {'Поезд':<18} {'Маршрут':<24} {'Свободно':>8}")
        self._output("-" * 57)
        for train in self._service.list_trains():
            route = f"{train.origin} -> {train.destination}"
            self._output(
                f"{train.id:<4} {train.name:<18} {route:<24} {train.available_seats:>8}"
            )

    def book_ticket(self) -> None:
        self._output("\n--- Бронирование билета ---")
        name = self._input("Имя пассажира: ").strip()
        while not name:
            name = self._input("Имя не может быть пустым. Имя пассажира: ").strip()

        age = self._read_int("Возраст: ")
        if age is None:
            self._output("Некорректный возраст. Бронирование отменено.")
            return

        gender = self._input("Пол (Male/Female/Other): ")

        self.list_trains()
        train_id = self._read_int("ID поезда: ")
        if train_id is None:
            self._output("Некорректный ID поезда. Бронирование отменено.")
            return

        try:
            train = self._service.ensure_seats_available(train_id)
        except DomainException as e:
            self._output(f"{e} Бронирование отменено.")
            return

        travel_class = self._input("Класс (например, Sleeper, AC, 2A): ")

        try:
            request = BookingRequest(
                passenger_name=name,
                age=age,
                gender=gender,
                train_id=train_id,
                travel_class=travel_class,
            )
            booking = self._service.book(request)
        except ValidationError as e:
            self._output(f"Некорректные данные: {e.errors()[0]['msg']}")
            return
        except DomainException as e:
            self._output(f"Ошибка: {e}")
            return

        self._output(f"\nБронирование выполнено! ID бронирования: {booking.booking_id}")
        self._output(
            f"Пассажир: {booking.passenger_name} | Поезд: {train.name} "
            f"({train.route}) | Класс: {booking.travel_class}"
        )

    def view_bookings(self) -> None:
        bookings = self._service.list_bookings()
        if not bookings:
            self._output("\nБронирований нет.")
            return
        self._output("\n--- Все бронирования ---")
        self._output(
            f"{'ID':<4} {'Имя':<28} {'Возр':<4} {'Пол':<7} {'Поезд':<15} Класс"
        )
        self._output("-" * 69)
        for booking in bookings:
            train = self._service.find_train(booking.train_id)
            train_name = train.name if train else "Unknown"
            self._output(
                f"{booking.booking_id:<4} {booking.passenger_name:<28} {booking.age:<4} "
                f"{booking.gender:<7} {train_name:<15} {booking.travel_class}"
            )

    def search_booking(self) -> None:
        booking_id = self._read_int("\nID бронирования для поиска: ")
        if booking_id is None:
            self._output("Некорректный ввод.")
            return
        try:
            booking = self._service.find(booking_id)
        except DomainException as e:
            self._output(str(e))
            return
        self._print_booking(booking)

    def cancel_booking(self) -> None:
        booking_id = self._read_int("\nID бронирования для отмены: ")
        if booking_id is None:
            self._output("Некорректный ввод.")
            return
        try:
            self._service.cancel(booking_id)
        except DomainException as e:
            self._output(f"Ошибка: {e}")
            return
        self._output(f"Бронирование {booking_id} отменено.")

    def _print_booking(self, booking: Booking) -> None:
        train = self._service.find_train(booking.train_id)
        self._output("\nБронирование найдено:")
        self._output(f"ID бронирования: {booking.booking_id}")
        self._output(f"Имя: {booking.passenger_name}")
        self._output(f"Возраст: {booking.age}")
        self._output(f"Пол: {booking.gender}")
        if train is not None:
            self._output(f"Поезд: {train.name} ({train.route})")
        else:
            self._output(f"Поезд: Unknown (ID {booking.train_id})")
        self._output(f"Класс: {booking.travel_class}")

    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def _shutdown(self) -> None:
        try:
            self._service.flush()
        except DomainException as e:
            self._output(f"Ошибка: {e}")
        self._output("До свидания!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="railway-booking", description="Бронирование билетов на поезда"
    )
    parser.add_argument("--bookings-file", default=None, help="Файл бронирований")
    parser.add_argument("--tickets-dir", default=None, help="Директория для билетов")
    parser.add_argument("--log-level", default=None, help="Уровень логирования")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env(
            bookings_file=args.bookings_file,
            tickets_dir=args.tickets_dir,
            log_level=args.log_level,
        )
        app = bootstrap_app(settings)
    except ValidationError as e:
        print(f"Некорректные настройки: {e}", file=sys.stderr)
        return 2
    except PersistenceException as e:
        print(f"Ошибка загрузки бронирований: {e}", file=sys.stderr)
        return 1

    return BookingConsole(app["booking_service"]).run()


if __name__ == "__main__":
    raise SystemExit(main())
