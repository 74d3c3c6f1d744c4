from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from importlib import import_module
from typing import Any, Callable, Iterable, Mapping, Optional

from lexoffice_delivery.client import BASE_URL, TIMEOUT, LexofficeClient
from lexoffice_delivery.config import LEXOFFICE_SCHEMA, ConfigAttribute, LexofficeConfig, check_attributes
from lexoffice_delivery.contacts import ensure_contact
from lexoffice_delivery.i18n import CatalogTranslator, Translator
from lexoffice_delivery.invoices import submit_invoice
from lexoffice_delivery.models import DeliveryStatus, Order
from lexoffice_delivery.order_context import bind_order
from lexoffice_delivery.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

INVOICE_ATTRIBUTE = "lexoffice-invoiceid"


class ServiceProvider(ABC):
    """Basisklasse für alle Dienst-Provider des Shops."""

    def check_config(self, attributes: Mapping[str, Any]) -> dict[str, Optional[str]]:
        """Prüft die Backend-Konfiguration, Schlüssel → Fehlermeldung oder ``None``."""
        return {}

    def config_schema(self) -> dict[str, ConfigAttribute]:
        """Definitionen der Konfigurationswerte dieses Providers."""
        return {}

    @abstractmethod
    def process(self, order: Order) -> Order:
        """Verarbeitet eine einzelne Bestellung."""
        raise NotImplementedError

    def push(self, orders: Iterable[Order]) -> list[Order]:
        """Verarbeitet die Bestellungen nacheinander.

        Ein Fehler bricht die restlichen Bestellungen ab.
        """
        result = []
        for order in orders:
            with bind_order(order.id):
                result.append(self.process(order))
        return result


class LexofficeDeliveryProvider(ServiceProvider):
    """Übergibt bestätigte Bestellungen als Rechnung an Lexoffice."""

    def __init__(
        self,
        config: LexofficeConfig,
        code: str = "lexoffice",
        client: Optional[LexofficeClient] = None,
        translator: Optional[Translator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config
        self.code = code
        self.client = client or LexofficeClient(config.api_key)
        self.translator = translator or CatalogTranslator()
        self.clock = clock

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, **kwargs: Any
    ) -> "LexofficeDeliveryProvider":
        """Erzeugt den Provider aus den Umgebungsvariablen ``LEXOFFICE_*``."""
        settings = settings or default_settings
        config = settings.provider_config()
        if "client" not in kwargs:
            kwargs["client"] = LexofficeClient(
                config.api_key,
                base_url=settings.base_url or BASE_URL,
                timeout=settings.timeout or TIMEOUT,
            )
        kwargs.setdefault("code", settings.service_code)
        return cls(config, **kwargs)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "LexofficeDeliveryProvider":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def check_config(self, attributes: Mapping[str, Any]) -> dict[str, Optional[str]]:
        errors = super().check_config(attributes)
        errors.update(check_attributes(LEXOFFICE_SCHEMA, attributes))
        return errors

    def config_schema(self) -> dict[str, ConfigAttribute]:
        schema = super().config_schema()
        schema.update(LEXOFFICE_SCHEMA)
        return schema

    def process(self, order: Order) -> Order:
        contact_id = ensure_contact(self.client, order, self.translator)
        invoice_id = submit_invoice(
            self.client, order, contact_id, self.config, self.translator, self.clock()
        )

        for service in order.service("delivery"):
            if service.code == self.code:
                service.set_attributes({INVOICE_ATTRIBUTE: invoice_id}, "hidden")
                break
        else:
            logger.info("No delivery service with code %s, invoice id not stored", self.code)

        order.delivery_status = DeliveryStatus.PROGRESS
        return order


def load_provider(path: str, **kwargs: Any) -> ServiceProvider:
    """Dynamisch eine Provider-Klasse aus ``module:Class`` laden."""
    module_name, class_name = path.split(":")
    module = import_module(module_name)
    provider_cls = getattr(module, class_name)
    if not (isinstance(provider_cls, type) and issubclass(provider_cls, ServiceProvider)):
        raise TypeError("Provider must inherit from ServiceProvider")
    return provider_cls(**kwargs)
