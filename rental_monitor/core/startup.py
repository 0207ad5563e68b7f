"""
Startup/shutdown utilities for the monitor.
"""
import logging

from rental_monitor.core.config import settings
from rental_monitor.core.firebase_client import get_firestore_client, init_firebase
from rental_monitor.core.rental_store import RentalStore
from rental_monitor.core.telegram_client import notify

logger = logging.getLogger(__name__)


def check_telegram_settings() -> bool:
    """Warn (do not abort) when Telegram credentials are missing; alerts will no-op."""
    missing = [
        name for name in ("TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID")
        if not (getattr(settings, name) or "").strip()
    ]
    if missing:
        logger.warning("Telegram not configured (missing %s); notifications are disabled", ", ".join(missing))
        return False
    return True


def init_rental_store() -> RentalStore | None:
    """Initialize Firebase and return the store, or None if the store is unavailable."""
    if not init_firebase():
        return None
    try:
        return RentalStore(get_firestore_client())
    except Exception as e:
        logger.exception("Firestore client unavailable: %s", e)
        return None


async def send_startup_notification() -> bool:
    return await notify(
        f"🚀 <b>{settings.SERVICE_NAME} started</b>\n\n"
        f"Checking rentals every {settings.CHECK_INTERVAL_SECONDS:.0f}s."
    )


async def send_shutdown_notification() -> bool:
    return await notify(f"🛑 <b>{settings.SERVICE_NAME} stopped</b>")
