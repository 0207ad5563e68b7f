from pathlib import Path
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# -------------------------------------------------
# Explicitly load .env (CRITICAL)
# -------------------------------------------------

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_PATH)


class Settings(BaseSettings):
    # Telegram bot (optional; notifications are skipped when missing)
    TELEGRAM_BOT_TOKEN: str = Field(default="", validation_alias=AliasChoices("TELEGRAM_BOT_TOKEN", "TELEGRAM_TOKEN"))
    TELEGRAM_CHAT_ID: str = ""
    TELEGRAM_API_BASE: str = "https://api.telegram.org"
    TELEGRAM_PARSE_MODE: str = "HTML"
    TELEGRAM_TIMEOUT_SECONDS: float = 30.0

    # Firebase service account: raw JSON (preferred) or a file path
    FIREBASE_SERVICE_ACCOUNT: str = Field(
        default="",
        validation_alias=AliasChoices("FIREBASE_SERVICE_ACCOUNT", "FIREBASE_CREDENTIALS_JSON"),
        description="Raw JSON string of the service account",
    )
    FIREBASE_CREDENTIALS_PATH: str = Field(default="", description="Path to service account JSON file")

    RENTALS_COLLECTION: str = "internet-rentals"
    HISTORY_COLLECTION: str = "internet-rentals-history"

    # Liveness server (hosting platforms pass PORT)
    PORT: int = 3000
    SERVICE_NAME: str = "Internet Rental Monitor"

    # Rental check cron
    CHECK_INTERVAL_SECONDS: float = Field(default=60.0, description="Delay between the end of one check and the start of the next")
    WARNING_WINDOW_MINUTES: float = Field(default=5.0, description="Send the ending-soon warning within this many minutes of endTime")
    ARCHIVE_AFTER_DAYS: int = Field(default=30, description="Move expired rentals to history once endTime is older than this")
    CURRENCY_SUFFIX: str = "L.E"
    RUN_ONCE: bool = Field(default=False, description="Run a single check and exit instead of serving")

    LOG_LEVEL: str = "INFO"

    class Config:
        extra = "ignore"
        env_file = str(ENV_PATH)
        env_file_encoding = "utf-8"

    @property
    def telegram_configured(self) -> bool:
        return bool(self.TELEGRAM_BOT_TOKEN.strip() and self.TELEGRAM_CHAT_ID.strip())


settings = Settings()
