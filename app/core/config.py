"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Bind address for the development server.
        port: Bind port for the development server.
        cors_allow_origins: Origins allowed by the CORS middleware.
        rate_limit_enabled: Turn request rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        fee_rate: Fraction of the balance charged on an allocation switch.
        native_asset: Asset label used when a deposit names none.
        default_pair: Trading pair whose market data feeds the decision.
        decision_mode: "random" (signal draw) or "momentum" (24h change).
        decision_signal_range: Half-width of the random signal interval.
        decision_seed: Optional seed for reproducible simulations.

    Ledger state is held in memory only; a restart resets it.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Stellar AI Trading Automation"
    version: str = "2.0.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "localhost"
    port: int = 3000

    cors_allow_origins: list[str] = ["*"]

    rate_limit_enabled: bool = True
    rate_limit_default: str = "100 per 15 minutes"

    fee_rate: Decimal = Field(default=Decimal("0.005"), ge=0, lt=1)
    native_asset: str = "XLM"
    default_pair: str = "XLM/USDC"

    decision_mode: str = "random"
    decision_signal_range: float = Field(default=0.5, gt=0)
    decision_seed: Optional[int] = None

    @field_validator("decision_mode")
    @classmethod
    def _known_decision_mode(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("random", "momentum"):
            raise ValueError("decision_mode must be 'random' or 'momentum'")
        return value


settings = Settings()
