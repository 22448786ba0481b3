"""
Бронирование билетов на поезда.

Консольное приложение для создания, поиска и отмены бронирований
с защитой от повторных бронирований и сохранением состояния в файл.
"""

__version__ = "0.1.0"
