from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from lexoffice_delivery.config import LexofficeConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    api_key: SecretStr | None = None
    shipping_days: int = 3
    payment_days: int = 3
    base_url: str = "https://api.lexoffice.io/"
    timeout: float = 5.0
    service_code: str = "lexoffice"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LEXOFFICE_", env_file=".env", extra="ignore"
    )

    def provider_config(self) -> LexofficeConfig:
        """Erzeugt das Konfigurationsobjekt für den Provider.

        Ohne ``LEXOFFICE_API_KEY`` schlägt die Validierung sofort fehl.
        """
        return LexofficeConfig(
            api_key=self.api_key,
            shipping_days=self.shipping_days,
            payment_days=self.payment_days,
        )


settings = Settings()
