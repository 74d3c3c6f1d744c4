"""Lexoffice-Lieferdienst: überträgt Bestellungen als Rechnung an Lexoffice."""

from lexoffice_delivery.client import LexofficeClient
from lexoffice_delivery.config import LexofficeConfig
from lexoffice_delivery.exceptions import (
    LexofficeError,
    LexofficeInvoiceError,
    LexofficeResponseError,
    LexofficeTransportError,
)
from lexoffice_delivery.provider import LexofficeDeliveryProvider, ServiceProvider, load_provider

__all__ = [
    "LexofficeClient",
    "LexofficeConfig",
    "LexofficeDeliveryProvider",
    "LexofficeError",
    "LexofficeInvoiceError",
    "LexofficeResponseError",
    "LexofficeTransportError",
    "ServiceProvider",
    "load_provider",
]
