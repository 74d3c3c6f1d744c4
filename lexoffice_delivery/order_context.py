"""Bestellnummer der gerade übertragenen Bestellung für Log-Einträge."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

order_id_ctx_var: ContextVar[str] = ContextVar("order_id", default="-")


@contextmanager
def bind_order(order_id: str) -> Iterator[None]:
    """Setzt die Bestellnummer für die Dauer des ``with``-Blocks."""
    token = order_id_ctx_var.set(order_id)
    try:
        yield
    finally:
        order_id_ctx_var.reset(token)


class OrderIdFilter(logging.Filter):
    """Adds ``order_id`` to every record passing the handler."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.order_id = order_id_ctx_var.get()
        return True
