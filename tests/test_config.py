# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.PORT == 3000
        assert settings.JWT_EXPIRES_SECONDS == 3600
        assert settings.BCRYPT_ROUNDS == 10
        assert settings.SMTP_HOST == "smtp.gmail.com"
        assert settings.DEMO_FETCH_URL == "https://jsonplaceholder.typicode.com/todos/1"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017/app")

        settings = Settings(_env_file=None)

        assert settings.PORT == 8080
        assert settings.MONGO_URI == "mongodb://db.internal:27017/app"

    def test_invalid_port_rejected(self, monkeypatch):
        monkeypatch.setenv("PORT", "70000")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, CORS_ORIGINS="http://localhost:3000, https://myapp.com")

        assert settings.cors_origins_list == ["http://localhost:3000", "https://myapp.com"]

    def test_cors_wildcard_default(self):
        assert Settings(_env_file=None).cors_origins_list == ["*"]

    def test_mail_enabled(self):
        assert Settings(_env_file=None, EMAIL_USER="a@b.com", EMAIL_PASS="x").mail_enabled
        assert not Settings(_env_file=None, EMAIL_USER="a@b.com", EMAIL_PASS="").mail_enabled
