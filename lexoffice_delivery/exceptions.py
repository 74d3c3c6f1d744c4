"""Fehlerklassen für die Kommunikation mit der Lexoffice-API."""

from __future__ import annotations

from typing import Any


class LexofficeError(RuntimeError):
    """Basisklasse aller Lexoffice-Fehler."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.payload = payload


class LexofficeTransportError(LexofficeError):
    """Raised when the request could not be sent or no status was received."""


class LexofficeResponseError(LexofficeError):
    """Raised when the response body is not a JSON object."""


class LexofficeInvoiceError(LexofficeError):
    """Raised when Lexoffice did not create the invoice.

    The invoice is finalized on creation, so the caller must not simply
    resend the request.
    """
