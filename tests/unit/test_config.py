"""Unit tests for configuration."""

import pytest

from leadbooth.config import Settings, to_async_url
from leadbooth.core.constants import DEFAULT_INSECURE_SECRET


pytestmark = pytest.mark.unit


class TestAsyncUrl:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("postgresql://u:p@db/leads", "postgresql+asyncpg://u:p@db/leads"),
            ("postgres://u:p@db/leads", "postgresql+asyncpg://u:p@db/leads"),
            ("sqlite:///./leads.db", "sqlite+aiosqlite:///./leads.db"),
            ("postgresql+asyncpg://u:p@db/leads", "postgresql+asyncpg://u:p@db/leads"),
        ],
    )
    def test_to_async_url(self, url, expected):
        assert to_async_url(url) == expected


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None, database_url="sqlite://", secret_key=DEFAULT_INSECURE_SECRET)

        assert settings.form_sources == ["trade-show-lead", "aa-tradeshow-lead"]
        assert settings.session_max_age_days == 30
        assert settings.async_database_url == "sqlite+aiosqlite://"

    def test_short_secret_is_rejected(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, secret_key="too-short")

    def test_insecure_secret_refused_in_production(self):
        settings = Settings(
            _env_file=None,
            environment="production",
            secret_key=DEFAULT_INSECURE_SECRET,
        )

        with pytest.raises(ValueError):
            _ = settings.is_production
