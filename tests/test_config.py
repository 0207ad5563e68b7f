"""Settings loading from the environment."""

from rental_monitor.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "CHECK_INTERVAL_SECONDS", "ARCHIVE_AFTER_DAYS", "WARNING_WINDOW_MINUTES", "CURRENCY_SUFFIX", "RUN_ONCE"):
            monkeypatch.delenv(name, raising=False)

        s = Settings()

        assert s.PORT == 3000
        assert s.CHECK_INTERVAL_SECONDS == 60
        assert s.WARNING_WINDOW_MINUTES == 5
        assert s.ARCHIVE_AFTER_DAYS == 30
        assert s.CURRENCY_SUFFIX == "L.E"
        assert s.RUN_ONCE is False

    def test_env_overrides_and_aliases(self, monkeypatch):
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT", raising=False)
        monkeypatch.setenv("TELEGRAM_TOKEN", "abc")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100")
        monkeypatch.setenv("FIREBASE_CREDENTIALS_JSON", '{"project_id": "x"}')
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("RUN_ONCE", "true")

        s = Settings()

        assert s.TELEGRAM_BOT_TOKEN == "abc"
        assert s.telegram_configured is True
        assert s.FIREBASE_SERVICE_ACCOUNT == '{"project_id": "x"}'
        assert s.PORT == 8080
        assert s.RUN_ONCE is True

    def test_telegram_not_configured_without_chat(self, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "abc")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "")

        assert Settings().telegram_configured is False
