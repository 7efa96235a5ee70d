from functools import lru_cache
from typing import Optional

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., RAPID_CURRENCY_KEY,
    RAPID_CURRENCY_HOST, PORT, HTTP_TIMEOUT_SECONDS). Values may also come from a
    local ``.env`` file.
    """

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Listener
    host: str = "0.0.0.0"
    port: int = 8080

    # Upstream exchange API credentials (required)
    rapid_currency_key: str
    rapid_currency_host: str

    # Upstream exchange API
    exchange_api_url: AnyHttpUrl = "https://currency-exchange.p.rapidapi.com/exchange"
    http_timeout_seconds: Optional[float] = None  # None: no timeout

    # Answer 200 with a zero rate instead of 502 when the upstream fails
    zero_rate_on_upstream_failure: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
