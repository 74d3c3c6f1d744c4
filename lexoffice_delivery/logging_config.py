import logging

from lexoffice_delivery.order_context import OrderIdFilter
from lexoffice_delivery.settings import settings


def configure_logging(level: int | str | None = None) -> None:
    """Setzt ein einfaches Logging-Format inklusive Bestellnummer."""
    # ``basicConfig`` legt den Root-Handler an, der Filter liefert ``order_id``.
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] [%(order_id)s] %(message)s",
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, OrderIdFilter) for f in handler.filters):
            handler.addFilter(OrderIdFilter())
