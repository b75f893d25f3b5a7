"""Tests for settings and allocation configuration."""

from decimal import Decimal

import pytest

from offer_letter.config import AllocationConfig, Settings


class TestAllocationConfig:
    """Test split share validation."""

    def test_defaults(self):
        config = AllocationConfig()

        assert config.basic_share == Decimal("0.4615")
        assert config.hra_share == Decimal("0.1487")
        assert config.special_share == Decimal("0.3898")

    def test_negative_share_rejected(self):
        with pytest.raises(ValueError):
            AllocationConfig(basic_share=Decimal("-0.1"))

    def test_shares_over_one_rejected(self):
        with pytest.raises(ValueError):
            AllocationConfig(basic_share=Decimal("0.8"), hra_share=Decimal("0.3"))


class TestSettings:
    """Test loading settings from the environment."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "True")
        monkeypatch.setenv("BASIC_SHARE", "0.5")
        monkeypatch.setenv("HRA_SHARE", "0.2")

        settings = Settings.from_env()

        assert settings.PORT == 9000
        assert settings.DEBUG is True
        assert settings.allocation == AllocationConfig(
            basic_share=Decimal("0.5"), hra_share=Decimal("0.2")
        )

    def test_defaults_when_unset(self, monkeypatch):
        for name in ("HOST", "PORT", "DEBUG", "BASIC_SHARE", "HRA_SHARE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.HOST == "0.0.0.0"
        assert settings.PORT == 8000
        assert settings.DEBUG is False
        assert settings.allocation == AllocationConfig()
