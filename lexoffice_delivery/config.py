"""Konfiguration des Lexoffice-Lieferdienstes und Prüfung der Attribute."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, TypeAdapter, ValidationError, field_validator

API_KEY = "lexoffice.apikey"
SHIPPING_DAYS = "lexoffice.shipping-days"
PAYMENT_DAYS = "lexoffice.payment-days"

_PYTHON_TYPES: dict[str, type] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
}


class ConfigAttribute(BaseModel):
    """Definition eines Konfigurationswerts, wie ihn das Backend anzeigt."""

    code: str
    label: str
    type: Literal["string", "integer", "number", "boolean"] = "string"
    default: Any = None
    required: bool = False
    # Untergrenze für Zahlenwerte
    minimum: Optional[int] = None

    def validate_value(self, value: Any) -> Any:
        """Wandelt den Wert in den deklarierten Typ um.

        Raises:
            pydantic.ValidationError: Wenn Typ oder Untergrenze nicht passen.
        """
        adapter = TypeAdapter(Annotated[_PYTHON_TYPES[self.type], Field(ge=self.minimum)])
        return adapter.validate_python(value)


LEXOFFICE_SCHEMA: dict[str, ConfigAttribute] = {
    API_KEY: ConfigAttribute(
        code=API_KEY,
        label="Lexoffice API key",
        type="string",
        default="",
        required=True,
    ),
    SHIPPING_DAYS: ConfigAttribute(
        code=SHIPPING_DAYS,
        label="Max. days until order is shipped",
        type="integer",
        default=3,
        minimum=0,
    ),
    PAYMENT_DAYS: ConfigAttribute(
        code=PAYMENT_DAYS,
        label="Days until payment is overdue",
        type="integer",
        default=3,
        minimum=0,
    ),
}


def _days_field(code: str) -> Any:
    attr = LEXOFFICE_SCHEMA[code]
    return Field(default=attr.default, ge=attr.minimum)


class LexofficeConfig(BaseModel):
    """Unveränderliche Einstellungen, die der Provider beim Erzeugen erhält.

    Defaults und Grenzen stammen aus ``LEXOFFICE_SCHEMA``, damit Backend-Prüfung
    und Provider dieselben Werte akzeptieren.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    shipping_days: int = _days_field(SHIPPING_DAYS)
    payment_days: int = _days_field(PAYMENT_DAYS)

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("Lexoffice API key is missing")
        return value

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "LexofficeConfig":
        """Build the config from the key/value store of a service item."""
        values = {
            "api_key": attributes.get(API_KEY),
            "shipping_days": attributes.get(SHIPPING_DAYS),
            "payment_days": attributes.get(PAYMENT_DAYS),
        }
        # Leere Werte fallen auf die Defaults zurück.
        return cls(**{k: v for k, v in values.items() if v not in (None, "")})


def check_attributes(
    schema: Mapping[str, ConfigAttribute], attributes: Mapping[str, Any]
) -> dict[str, Optional[str]]:
    """Prüft die Attribute gegen das Schema.

    Liefert für jeden Schlüssel des Schemas ``None`` oder eine
    Fehlermeldung zurück.
    """

    errors: dict[str, Optional[str]] = {}
    for code, attr in schema.items():
        value = attributes.get(code)
        if value is None or value == "":
            errors[code] = f'Configuration for "{code}" is missing' if attr.required else None
            continue
        try:
            attr.validate_value(value)
        except ValidationError as exc:
            errors[code] = f'Invalid value for "{code}": {exc.errors()[0]["msg"]}'
        else:
            errors[code] = None
    return errors
