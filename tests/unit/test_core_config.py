"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment

BASE = {
    "database_url": "postgresql+asyncpg://u:p@localhost/db",
    "secret_key": "s" * 32,
}


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **{**BASE, **overrides})


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = _settings()

        assert settings.jwt_issuer == "http://restaurantapi.com"
        assert settings.jwt_expire_days == 15
        assert settings.slow_request_threshold_ms == 4000

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            _settings(secret_key="short")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_range(self, rounds):
        with pytest.raises(ValidationError):
            _settings(bcrypt_rounds=rounds)

    def test_jwt_expire_days_positive(self):
        with pytest.raises(ValidationError):
            _settings(jwt_expire_days=0)

    def test_cors_origins_split(self):
        settings = _settings(cors_origins="http://a.com, http://b.com,")

        assert settings.cors_origins == ["http://a.com", "http://b.com"]

    def test_issuer_trailing_slash_stripped(self):
        assert _settings(jwt_issuer="http://x.com/").jwt_issuer == "http://x.com"

    def test_log_level_upper(self):
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_environment_flags(self):
        settings = _settings(environment=Environment.TESTING)

        assert settings.is_testing
        assert not settings.is_production
