from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import SecretStr

from lexoffice_delivery.exceptions import LexofficeResponseError, LexofficeTransportError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.lexoffice.io/"
TIMEOUT = 5.0


class LexofficeClient:
    """Schickt einzelne Requests an die Lexoffice-API.

    Es gibt keine Wiederholungen: ein POST auf ``v1/invoices`` legt eine
    festgeschriebene Rechnung an und darf nicht blind wiederholt werden.
    """

    def __init__(
        self,
        api_key: SecretStr | str,
        base_url: str = BASE_URL,
        timeout: float = TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        self.base_url = base_url.rstrip("/") + "/"
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client(
            timeout=httpx.Timeout(timeout, connect=timeout)
        )

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    def __enter__(self) -> "LexofficeClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def send(
        self, path: str, body: Optional[dict[str, Any]] = None, method: str = "GET"
    ) -> tuple[dict[str, Any], int]:
        """Sendet einen Request und liefert ``(json, status)`` zurück.

        Der Body wird nur bei PATCH, POST und PUT übertragen.
        """

        url = self.base_url + path
        method = method.upper()
        content = json.dumps(body).encode("utf-8") if body else b""
        headers = {
            "Authorization": f"Bearer {self.api_key.get_secret_value()}",
            "Content-Length": str(len(content)),
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Cache-Control": "no-cache",
        }
        if method not in {"PATCH", "POST", "PUT"}:
            content = b""
            headers["Content-Length"] = "0"

        logger.debug("Lexoffice %s %s", method, url)
        try:
            response = self.http.request(method, url, content=content, headers=headers)
        except httpx.HTTPError as exc:
            raise LexofficeTransportError(
                f'Request failed for "{url}": {exc}', url=url
            ) from exc

        try:
            result = response.json()
        except ValueError as exc:
            raise LexofficeResponseError(
                f'Invalid response for "{url}": {response.text}',
                url=url,
                status_code=response.status_code,
                payload=response.text,
            ) from exc

        if not isinstance(result, dict):
            raise LexofficeResponseError(
                f'Invalid response for "{url}": {response.text}',
                url=url,
                status_code=response.status_code,
                payload=result,
            )

        logger.debug("Lexoffice %s %s -> %s", method, url, response.status_code)
        return result, response.status_code
