# dealdesk/core/settings.py
from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "DealDesk"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    ALLOWED_ORIGINS: list[str] = ["http://localhost:5173"]

    # --- Fees (economic conditions) ---
    FEES_CURRENCY: str = "EUR"
    FEES_LOCALE: Literal["fr", "en"] = "fr"
    FEES_MAX_TRANCHES: int = 5
    FEES_DEFAULT_TRANCHE_WIDTH: Decimal = Decimal("10000000")  # +10M per nieuwe tranche

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()  # leest .env
