"""
Прикладной слой: сервис бронирования, DTO и порты.
"""
