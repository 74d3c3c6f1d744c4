"""Datenmodelle der Shop-Bestellung, wie sie der Provider liest und ändert."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field


class DeliveryStatus(IntEnum):
    """Lieferstatus einer Bestellung."""

    UNFINISHED = -1
    DELETED = 0
    PENDING = 1
    PROGRESS = 2
    DISPATCHED = 3
    DELIVERED = 4
    LOST = 5
    REFUSED = 6
    RETURNED = 7


class Price(BaseModel):
    """Preis mit Währung, Steuersatz und Steuerkennzeichen."""

    currency_id: str = "EUR"
    value: float = 0.0
    # Versandkosten bzw. Servicekosten
    costs: float = 0.0
    rebate: float = 0.0
    tax_rate: float = 0.0
    # True: Beträge enthalten die Steuer (brutto), False: netto
    tax_flag: bool = True


class Address(BaseModel):
    """Rechnungs- oder Lieferadresse."""

    company: str = ""
    vat_id: str = ""
    salutation: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    telephone: str = ""
    # Straße und Hausnummer
    address1: str = ""
    # Adresszusatz
    address2: str = ""
    postal: str = ""
    city: str = ""
    country_id: str = ""


class OrderProduct(BaseModel):
    """Bestellte Position."""

    name: str
    description: str = ""
    quantity: float = 1
    price: Price = Field(default_factory=Price)


class ServiceAttribute(BaseModel):
    code: str
    value: Any = None
    type: str = ""


class OrderService(BaseModel):
    """Zahlungs- oder Lieferdienst einer Bestellung."""

    code: str
    name: str = ""
    type: str = "delivery"
    price: Price = Field(default_factory=Price)
    attributes: list[ServiceAttribute] = Field(default_factory=list)

    def get_attribute(self, code: str, type: str = "") -> Any:
        for attr in self.attributes:
            if attr.code == code and attr.type == type:
                return attr.value
        return None

    def set_attributes(self, values: dict[str, Any], type: str = "") -> "OrderService":
        """Replace attributes with the same code and type or append new ones."""
        for code, value in values.items():
            for attr in self.attributes:
                if attr.code == code and attr.type == type:
                    attr.value = value
                    break
            else:
                self.attributes.append(ServiceAttribute(code=code, value=value, type=type))
        return self


class Order(BaseModel):
    """Bestellung mit Adressen, Produkten und Diensten."""

    id: str
    time_created: datetime
    language_id: str = "de"
    price: Price = Field(default_factory=Price)
    products: list[OrderProduct] = Field(default_factory=list)
    # Dienste und Adressen sind nach Typ ("payment", "delivery") gruppiert.
    services: dict[str, list[OrderService]] = Field(default_factory=dict)
    addresses: dict[str, list[Address]] = Field(default_factory=dict)
    delivery_status: DeliveryStatus = DeliveryStatus.PENDING

    def address(self, type: str) -> list[Address]:
        return self.addresses.get(type, [])

    def service(self, type: str) -> list[OrderService]:
        return self.services.get(type, [])

    def first_address(self, type: str) -> Optional[Address]:
        """Erste Adresse des Typs oder ``None``."""
        addresses = self.address(type)
        return addresses[0] if addresses else None
