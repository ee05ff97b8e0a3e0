# src/wholesale/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")
    API_TITLE: str = Field(default="Wholesale AI - Deal Desk")

    # -----------------------------
    # Exit-strategy decision table
    # -----------------------------
    SPREAD_THRESHOLD: float = Field(default=0.20)
    EQUITY_MINIMUM: float = Field(default=0.10)
    LOW_RATE_THRESHOLD: float = Field(default=5.0)
    HIGH_RATE_WARNING: float = Field(default=8.0)
    RETAIL_REPAIR_THRESHOLD: float = Field(default=15_000.0)
    FLIP_CAPITAL_MINIMUM: float = Field(default=10_000.0)
    LOW_EQUITY_WARNING_PERCENT: float = Field(default=15.0)

    # -----------------------------
    # Deal analyzer defaults
    # -----------------------------
    DEFAULT_WHOLESALE_FEE: float = Field(default=10_000.0)
    DEFAULT_ARV_MULTIPLIER: float = Field(default=0.70)

    model_config = SettingsConfigDict(
        env_prefix="WHOLESALE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "SPREAD_THRESHOLD",
        "EQUITY_MINIMUM",
        "DEFAULT_ARV_MULTIPLIER",
        mode="before",
    )
    @classmethod
    def _to_fraction(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("ratio must be numeric or percent-like") from err
        if f > 1.0:
            f = f / 100.0
        if f < 0:
            raise ValueError("ratio must be non-negative")
        return f

    @field_validator(
        "LOW_RATE_THRESHOLD",
        "HIGH_RATE_WARNING",
        "LOW_EQUITY_WARNING_PERCENT",
        mode="before",
    )
    @classmethod
    def _strip_percent(cls, v: Any) -> Any:
        # these are kept in percent units: "5%" -> 5.0
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        f = float(v)
        if f < 0:
            raise ValueError("percent must be non-negative")
        return f


config = AppConfig()
