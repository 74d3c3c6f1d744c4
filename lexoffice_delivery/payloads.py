"""Request bodies for the Lexoffice contact and invoice endpoints.

The builders are pure functions of the order data. The only exception is
the shipping date, which depends on the ``now`` value passed in by the
caller.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lexoffice_delivery.config import LexofficeConfig
from lexoffice_delivery.i18n import Translator
from lexoffice_delivery.models import Address, Order, OrderProduct, OrderService, Price

# Lexoffice erwartet Zeitstempel mit Millisekunden und Zeitzone. Der Offset
# ist fest und berücksichtigt keine Sommerzeit.
TIMESTAMP_SUFFIX = ".000+01:00"
INTRODUCTION = "Invoice for your order %s"
CONTACT_NOTE = "Aimeos"


def format_timestamp(value: datetime) -> str:
    """``2024-05-01 12:00:00`` → ``2024-05-01T12:00:00.000+01:00``"""
    return value.strftime("%Y-%m-%dT%H:%M:%S") + TIMESTAMP_SUFFIX


class Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """JSON-fähiges Dict mit camelCase-Schlüsseln, ohne leere Blöcke."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Kontakte -------------------------------------------------------------


class PostalAddress(Payload):
    street: str
    supplement: str
    zip: str
    city: str
    country_code: str


class ContactAddresses(Payload):
    billing: list[PostalAddress]
    shipping: Optional[list[PostalAddress]] = None


class Company(Payload):
    name: str
    vat_registration_id: str


class ContactPerson(Payload):
    first_name: str
    last_name: str
    email_address: str
    phone_number: str


class Person(Payload):
    salutation: str
    first_name: str
    last_name: str


class ContactPayload(Payload):
    version: int = 0
    roles: dict[str, dict] = Field(default_factory=lambda: {"customer": {}})
    email_addresses: dict[str, list[str]]
    note: str = CONTACT_NOTE
    company: Optional[Company] = None
    contact_persons: Optional[list[ContactPerson]] = None
    person: Optional[Person] = None
    addresses: Optional[ContactAddresses] = None


def _postal_address(address: Address) -> PostalAddress:
    return PostalAddress(
        street=address.address1,
        supplement=address.address2,
        zip=address.postal,
        city=address.city,
        country_code=address.country_id,
    )


def contact_address(address: Address, ship_addresses: Iterable[Address]) -> ContactAddresses:
    """Rechnungsadresse plus je eine Lieferadresse pro Eintrag."""
    shipping = [_postal_address(addr) for addr in ship_addresses]
    return ContactAddresses(
        billing=[_postal_address(address)],
        shipping=shipping or None,
    )


def contact_person(address: Address, translator: Translator) -> dict[str, Any]:
    """Firmen- oder Personenblock des Kontakts.

    Mit Firmenname entsteht ein ``company``-Block samt einem
    Ansprechpartner aus derselben Adresse, sonst ein ``person``-Block. Beide
    zusammen gibt es nie.
    """

    if address.company:
        return {
            "company": Company(name=address.company, vat_registration_id=address.vat_id),
            "contact_persons": [
                ContactPerson(
                    first_name=address.first_name,
                    last_name=address.last_name,
                    email_address=address.email,
                    phone_number=address.telephone,
                )
            ],
        }

    return {
        "person": Person(
            salutation=translator.translate("mshop/code", address.salutation),
            first_name=address.first_name,
            last_name=address.last_name,
        )
    }


def build_contact(
    address: Address,
    ship_addresses: Iterable[Address],
    translator: Translator,
    version: int = 0,
) -> ContactPayload:
    return ContactPayload(
        version=version,
        email_addresses={"business": [address.email]},
        addresses=contact_address(address, ship_addresses),
        **contact_person(address, translator),
    )


# --- Rechnungen -----------------------------------------------------------


class InvoiceAddress(Payload):
    name: str
    street: str
    supplement: str
    zip: str
    city: str
    country_code: str


class ContactReference(Payload):
    contact_id: str


class UnitPrice(Payload):
    currency: str
    tax_rate_percentage: float
    gross_amount: Optional[float] = None
    net_amount: Optional[float] = None


class LineItem(Payload):
    type: str = "custom"
    name: str
    description: Optional[str] = None
    quantity: float
    unit_name: str = "x"
    unit_price: UnitPrice


class TotalPrice(Payload):
    currency: str


class TaxConditions(Payload):
    tax_type: str


class PaymentConditions(Payload):
    payment_term_label: str
    payment_term_duration: int


class ShippingConditions(Payload):
    shipping_type: str = "delivery"
    shipping_date: str


class InvoicePayload(Payload):
    voucher_date: str
    language: str
    total_price: TotalPrice
    tax_conditions: TaxConditions
    introduction: str
    address: Union[InvoiceAddress, ContactReference, None] = None
    line_items: list[LineItem] = Field(default_factory=list)
    payment_conditions: Optional[PaymentConditions] = None
    shipping_conditions: Optional[ShippingConditions] = None


def order_address(address: Address) -> InvoiceAddress:
    """Adresse direkt in der Rechnung, falls kein Kontakt existiert."""
    return InvoiceAddress(
        name=address.company or f"{address.first_name} {address.last_name}",
        street=address.address1,
        supplement=address.address2,
        zip=address.postal,
        city=address.city,
        country_code=address.country_id,
    )


def unit_price(amount: float, price: Price, tax_flag: bool) -> UnitPrice:
    """Stückpreis mit genau einem Betrag: brutto oder netto."""
    if tax_flag:
        return UnitPrice(
            currency=price.currency_id,
            tax_rate_percentage=price.tax_rate,
            gross_amount=amount,
        )
    return UnitPrice(
        currency=price.currency_id,
        tax_rate_percentage=price.tax_rate,
        net_amount=amount,
    )


def order_items(products: Iterable[OrderProduct]) -> list[LineItem]:
    return [
        LineItem(
            name=product.name,
            description=product.description,
            quantity=product.quantity,
            unit_price=unit_price(product.price.value, product.price, product.price.tax_flag),
        )
        for product in products
    ]


def order_payment(services: list[OrderService], payment_days: int) -> Optional[PaymentConditions]:
    if not services:
        return None
    return PaymentConditions(
        payment_term_label=services[0].name,
        payment_term_duration=payment_days,
    )


def order_shipping(
    services: list[OrderService],
    price: Price,
    shipping_days: int,
    now: datetime,
) -> Optional[tuple[LineItem, ShippingConditions]]:
    """Versandposition und Lieferbedingungen für den ersten Lieferdienst.

    Ob brutto oder netto abgerechnet wird, bestimmt der Gesamtpreis der
    Bestellung, der Betrag stammt aus den Kosten des Dienstes.
    """

    if not services:
        return None

    service = services[0]
    item = LineItem(
        name=service.name,
        quantity=1,
        unit_price=unit_price(service.price.costs, service.price, price.tax_flag),
    )
    conditions = ShippingConditions(
        shipping_date=format_timestamp(now + timedelta(days=shipping_days)),
    )
    return item, conditions


def build_invoice(
    order: Order,
    contact_id: Optional[str],
    config: LexofficeConfig,
    translator: Translator,
    now: datetime,
) -> InvoicePayload:
    """Setzt den kompletten Rechnungs-Body zusammen."""

    intro = translator.translate("lexoffice", INTRODUCTION)
    payload = InvoicePayload(
        voucher_date=format_timestamp(order.time_created),
        language=order.language_id,
        total_price=TotalPrice(currency=order.price.currency_id),
        tax_conditions=TaxConditions(tax_type="gross" if order.price.tax_flag else "net"),
        introduction=intro.replace("%s", order.id),
    )

    address = order.first_address("payment")
    if not contact_id and address is not None:
        payload.address = order_address(address)
    elif contact_id:
        payload.address = ContactReference(contact_id=contact_id)

    payload.line_items = order_items(order.products)
    payload.payment_conditions = order_payment(order.service("payment"), config.payment_days)

    shipping = order_shipping(order.service("delivery"), order.price, config.shipping_days, now)
    if shipping is not None:
        item, conditions = shipping
        payload.line_items.append(item)
        payload.shipping_conditions = conditions

    return payload
