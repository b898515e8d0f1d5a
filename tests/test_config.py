# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings

REQUIRED = {
    "SUPABASE_URL": "https://test-project.supabase.co",
    "SUPABASE_ANON_KEY": "anon",
    "SUPABASE_SERVICE_KEY": "service",
}


class TestSettings:
    """Test environment parsing."""

    def test_defaults(self, monkeypatch):
        for name, value in REQUIRED.items():
            monkeypatch.setenv(name, value)

        settings = Settings(_env_file=None)

        assert settings.API_PORT == 3001
        assert settings.JWT_EXPIRES_MINUTES == 1440
        assert settings.cors_origins_list == ["http://localhost:3000"]
        assert settings.session_cookie_names_list == [
            "next-auth.session-token",
            "__Secure-next-auth.session-token",
        ]

    def test_frontend_url_sets_cors_origins(self, monkeypatch):
        for name, value in REQUIRED.items():
            monkeypatch.setenv(name, value)
        monkeypatch.setenv("FRONTEND_URL", "https://curio.app, http://localhost:3000")

        settings = Settings(_env_file=None)

        assert settings.cors_origins_list == ["https://curio.app", "http://localhost:3000"]

    def test_missing_supabase_url(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_short_jwt_secret_rejected(self, monkeypatch):
        for name, value in REQUIRED.items():
            monkeypatch.setenv(name, value)
        monkeypatch.setenv("JWT_SECRET", "short")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
