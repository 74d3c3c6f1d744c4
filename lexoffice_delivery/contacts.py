"""Kontakt in Lexoffice anlegen oder aktualisieren."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from lexoffice_delivery.client import LexofficeClient
from lexoffice_delivery.i18n import Translator
from lexoffice_delivery.models import Order
from lexoffice_delivery.payloads import build_contact

logger = logging.getLogger(__name__)


def find_contact(client: LexofficeClient, email: str) -> tuple[Optional[str], int]:
    """Sucht einen Kontakt per E-Mail und liefert ``(id, version)``."""
    result, status = client.send(f"v1/contacts?email={quote(email, safe='@')}")
    content = result.get("content")
    if status == 200 and isinstance(content, list) and content and isinstance(content[0], dict):
        item = content[0]
        return item.get("id"), item.get("version") or 0
    return None, 0


def ensure_contact(
    client: LexofficeClient, order: Order, translator: Translator
) -> Optional[str]:
    """Liefert die Kontakt-ID zur Rechnungsadresse.

    Ohne Rechnungsadresse wird kein Kontakt angelegt. Lehnt Lexoffice den
    Kontakt ab, gibt es ``None`` und die Rechnung enthält die Adresse direkt.
    """

    address = order.first_address("payment")
    if address is None:
        return None

    contact_id, version = find_contact(client, address.email)
    body = build_contact(address, order.address("delivery"), translator, version=version)

    if contact_id:
        result, status = client.send(f"v1/contacts/{contact_id}", body.to_json(), "PUT")
    else:
        result, status = client.send("v1/contacts", body.to_json(), "POST")

    if status in (200, 201) and result.get("id"):
        logger.info("Lexoffice contact %s saved (version %s)", result["id"], version)
        return result["id"]

    logger.warning("Lexoffice contact not saved (HTTP %s): %s", status, result)
    return None
