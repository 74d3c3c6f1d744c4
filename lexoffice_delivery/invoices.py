"""Rechnung in Lexoffice anlegen und festschreiben."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from lexoffice_delivery.client import LexofficeClient
from lexoffice_delivery.config import LexofficeConfig
from lexoffice_delivery.exceptions import LexofficeInvoiceError
from lexoffice_delivery.i18n import Translator
from lexoffice_delivery.models import Order
from lexoffice_delivery.payloads import build_invoice

logger = logging.getLogger(__name__)


def submit_invoice(
    client: LexofficeClient,
    order: Order,
    contact_id: Optional[str],
    config: LexofficeConfig,
    translator: Translator,
    now: Optional[datetime] = None,
) -> str:
    """Erzeugt die Rechnung und liefert die Lexoffice-ID zurück.

    Raises:
        LexofficeInvoiceError: Wenn Lexoffice nicht mit HTTP 201 und einer ID
            antwortet. Der Request wird nicht wiederholt.
    """

    body = build_invoice(order, contact_id, config, translator, now or datetime.now())
    result, status = client.send("v1/invoices?finalize=true", body.to_json(), "POST")

    if status != 201 or not result.get("id"):
        raise LexofficeInvoiceError(
            f"Lexoffice: Unable to create invoice\n{result}",
            status_code=status,
            payload=result,
        )

    logger.info("Lexoffice invoice %s created", result["id"])
    return result["id"]
