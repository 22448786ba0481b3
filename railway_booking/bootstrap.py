from typing import Any, Dict, Optional

from railway_booking.application.services import BookingApplicationService
from railway_booking.config import Settings
from railway_booking.domain import BookingStore, TrainCatalog
from railway_booking.infrastructure.loggers import ConsoleLogger, configure_logging
from railway_booking.infrastructure.repositories import BinaryFileBookingStorage
from railway_booking.infrastructure.tickets import TicketRenderer


def bootstrap_app(
    settings: Optional[Settings] = None, catalog: Optional[TrainCatalog] = None
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    logger = ConsoleLogger()

    # 1. Загружаем сохраненные бронирования
    storage = BinaryFileBookingStorage(
        settings.bookings_file, strict=settings.strict_load, logger=logger
    )
    store = BookingStore.from_bookings(storage.load())

    # 2. Создаем сервис, передавая ему зависимости
    renderer = TicketRenderer(settings.tickets_dir, logger=logger) if settings.render_tickets else None
    service = BookingApplicationService(
        catalog=catalog or TrainCatalog(),
        store=store,
        storage=storage,
        logger=logger,
        ticket_renderer=renderer,
        atomic_commit=settings.atomic_commit,
    )

    return {
        "settings": settings,
        "storage": storage,
        "store": store,
        "booking_service": service,
    }
