"""
Инфраструктурный слой: файловое хранилище, двоичный формат записей,
логирование и формирование билетов.
"""
