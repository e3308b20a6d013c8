"""
Testes para configurações.
"""
from manup.core.config import Settings, get_settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MANUP_URL", raising=False)
        monkeypatch.delenv("REDIS_URL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        s = Settings(_env_file=None)

        assert s.MANUP_URL == ""
        assert s.cache_enabled is False
        assert s.is_production is False

    def test_le_do_ambiente(self, monkeypatch):
        monkeypatch.setenv("MANUP_URL", "https://example.com/manup.json")
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
        monkeypatch.setenv("ENVIRONMENT", "Production")

        s = Settings(_env_file=None)

        assert s.MANUP_URL == "https://example.com/manup.json"
        assert s.cache_enabled is True
        assert s.is_production is True

    def test_get_settings_cacheado(self):
        assert get_settings() is get_settings()
