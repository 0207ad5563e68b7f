"""
Telegram Bot API client for rental alerts.
Sends to the configured chat. Disabled (returns False) if the bot token or chat id is missing.
"""
import asyncio
import logging

import requests

from rental_monitor.core.config import settings

logger = logging.getLogger(__name__)


def _send_url() -> str:
    return f"{settings.TELEGRAM_API_BASE.rstrip('/')}/bot{settings.TELEGRAM_BOT_TOKEN}/sendMessage"


def send_telegram_message(text: str) -> bool:
    """
    Send one message to TELEGRAM_CHAT_ID.
    Returns True if Telegram answered ok, False otherwise (not configured, transport error, or API error).
    Never raises.
    """
    if not settings.telegram_configured:
        logger.warning("Telegram not configured; message not sent")
        return False

    payload = {
        "chat_id": settings.TELEGRAM_CHAT_ID,
        "text": text,
        "parse_mode": settings.TELEGRAM_PARSE_MODE,
    }
    try:
        r = requests.post(_send_url(), json=payload, timeout=settings.TELEGRAM_TIMEOUT_SECONDS)
        result = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.exception("Telegram send failed: %s", e)
        return False

    if isinstance(result, dict) and result.get("ok"):
        logger.info("Telegram message sent")
        return True
    description = result.get("description") if isinstance(result, dict) else None
    logger.warning("Telegram error (HTTP %s): %s", r.status_code, description or r.text[:200])
    return False


async def notify(text: str) -> bool:
    """Async wrapper so the check loop is not blocked by the HTTP call."""
    return await asyncio.to_thread(send_telegram_message, text)
