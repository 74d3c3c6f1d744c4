"""Übersetzungen für Anreden und Rechnungstexte."""

from __future__ import annotations

from typing import Mapping, Protocol


class Translator(Protocol):
    def translate(self, domain: str, key: str) -> str:
        ...


DEFAULT_CATALOG: dict[str, dict[str, str]] = {
    "mshop/code": {
        "mr": "Herr",
        "ms": "Frau",
        "mrs": "Frau",
        "company": "Firma",
    },
    "lexoffice": {
        "Invoice for your order %s": "Rechnung zu Ihrer Bestellung %s",
    },
}


class CatalogTranslator:
    """Schlägt Texte in einem verschachtelten Dict nach.

    Unbekannte Schlüssel werden unverändert zurückgegeben, so wie es auch
    gettext macht.
    """

    def __init__(self, catalog: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog

    def translate(self, domain: str, key: str) -> str:
        return self.catalog.get(domain, {}).get(key, key)
