"""
Run the rental check in the background (non-blocking).
Started on app startup; cancelled on shutdown.
"""
import asyncio
import logging

from rental_monitor.core.config import settings
from rental_monitor.core.notification_tracker import NotificationTracker
from rental_monitor.core.rental_store import RentalStore
from rental_monitor.cron.rental_checks import check_rentals

logger = logging.getLogger(__name__)


async def run_rental_check_loop(
    store: RentalStore,
    tracker: NotificationTracker,
    interval_seconds: float | None = None,
    max_cycles: int | None = None,
) -> None:
    """
    Loop: check immediately, then wait the interval after each completed check.
    A cycle never overlaps the previous one. max_cycles bounds the loop (None = forever).
    """
    if interval_seconds is None:
        interval_seconds = settings.CHECK_INTERVAL_SECONDS
    logger.info("Rental check cron started (interval=%.0fs)", interval_seconds)
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        try:
            await check_rentals(store, tracker)
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            await asyncio.sleep(interval_seconds)
        except asyncio.CancelledError:
            logger.info("Rental check cron cancelled")
            break
        except Exception as e:
            cycles += 1
            logger.exception("Rental check cron loop error: %s", e)
            await asyncio.sleep(interval_seconds)
