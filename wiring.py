from __future__ import annotations

from typing import Optional

from application.services import PaymentService
from config import Settings, configure_logging, load_settings
from infrastructure.data_store_factory import get_data_store


def create_payment_service(settings: Settings) -> PaymentService:
    """Build a service whose data store is chosen by `settings.data_store_type`."""

    data_store = get_data_store(settings.data_store_type, settings)
    return PaymentService(data_store)


def bootstrap(settings: Optional[Settings] = None) -> PaymentService:
    """
    Process start-up: read `.env` / the environment, configure logging
    once and return the default payment service.
    """

    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level)
    return create_payment_service(settings)
