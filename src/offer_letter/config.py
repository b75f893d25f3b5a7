"""Configuration management for the offer letter service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class AllocationConfig:
    """
    Shares used to split a monthly CTC into fixed components.

    Attributes:
        basic_share: Fraction of monthly CTC paid as basic pay.
        hra_share: Fraction of monthly CTC paid as house rent allowance.

    The special allowance takes whatever is left after rounding basic and
    HRA, so it has no share of its own.
    """

    basic_share: Decimal = Decimal("0.4615")
    hra_share: Decimal = Decimal("0.1487")

    def __post_init__(self) -> None:
        if self.basic_share < 0 or self.hra_share < 0:
            raise ValueError("allocation shares must be non-negative")
        if self.basic_share + self.hra_share > 1:
            raise ValueError(
                f"basic_share + hra_share must not exceed 1 "
                f"(got {self.basic_share + self.hra_share})"
            )

    @property
    def special_share(self) -> Decimal:
        """Nominal share left for the special allowance."""
        return Decimal("1") - self.basic_share - self.hra_share


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    app_version: str
    host: str
    port: int
    debug: bool
    allocation: AllocationConfig = field(default_factory=AllocationConfig)

    @property
    def HOST(self) -> str:
        """Alias for host."""
        return self.host

    @property
    def PORT(self) -> int:
        """Alias for port."""
        return self.port

    @property
    def DEBUG(self) -> bool:
        """Alias for debug."""
        return self.debug

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        defaults = AllocationConfig()
        return cls(
            app_version=os.getenv("APP_VERSION", "0.1.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            allocation=AllocationConfig(
                basic_share=Decimal(os.getenv("BASIC_SHARE", str(defaults.basic_share))),
                hra_share=Decimal(os.getenv("HRA_SHARE", str(defaults.hra_share))),
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


settings = get_settings()
