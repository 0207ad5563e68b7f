"""
Cron job: check active internet rentals, alert on expiry and on the ending-soon window,
and archive expired rentals older than ARCHIVE_AFTER_DAYS.
Duplicate alerts are suppressed by the NotificationTracker (per process).
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Awaitable, Callable

from rental_monitor.core.config import settings
from rental_monitor.core.notification_tracker import NotificationTracker
from rental_monitor.core.rental_store import RentalStore
from rental_monitor.core.telegram_client import notify
from rental_monitor.core.utils import minutes_remaining, utcnow
from rental_monitor.models.enums import NotificationKind, RentalStatus
from rental_monitor.models.rental import Rental

logger = logging.getLogger(__name__)

Notifier = Callable[[str], Awaitable[bool]]


@dataclass
class CheckSummary:
    checked: int = 0
    expired: int = 0
    warnings: int = 0
    archived: int = 0
    failed: bool = False


def expired_message(rental: Rental, currency_suffix: str | None = None) -> str:
    suffix = currency_suffix if currency_suffix is not None else settings.CURRENCY_SUFFIX
    return (
        "🔴 <b>RENTAL EXPIRED!</b>\n\n"
        f"🏨 Room: <b>{rental.room_display}</b>\n"
        f"👤 Client: {rental.client_display}\n"
        f"⏱️ Duration: {rental.duration_text}\n"
        f"💰 Cost: {rental.cost_text(suffix)}\n\n"
        "⚠️ Please disconnect internet access!"
    )


def warning_message(rental: Rental, remaining: timedelta) -> str:
    return (
        "🟡 <b>5 MINUTE WARNING!</b>\n\n"
        f"🏨 Room: <b>{rental.room_display}</b>\n"
        f"👤 Client: {rental.client_display}\n\n"
        f"⏰ Rental ending in {minutes_remaining(remaining)} minute(s)!"
    )


async def _handle_expired(
    store: RentalStore,
    tracker: NotificationTracker,
    notify_func: Notifier,
    rental: Rental,
) -> bool:
    """Alert once, then move the rental to expired. Returns True if an alert was sent this call."""
    alerted = False
    if not tracker.has_notified(NotificationKind.expired, rental.id):
        tracker.mark_notified(NotificationKind.expired, rental.id)
        logger.info("EXPIRED: room %s (rental %s)", rental.room_display, rental.id)
        await notify_func(expired_message(rental))
        alerted = True
    else:
        # Alert went out but the status update did not land last time
        logger.debug("Expiry already notified for rental %s; retrying status update", rental.id)
    await asyncio.to_thread(store.mark_expired, rental.id)
    return alerted


async def _archive_old_expired(store: RentalStore, now: datetime) -> int:
    cutoff = now - timedelta(days=settings.ARCHIVE_AFTER_DAYS)
    archived = 0
    for rental in await asyncio.to_thread(store.query_by_status, RentalStatus.expired):
        end_time = rental.end_datetime
        if end_time is None or end_time >= cutoff:
            continue
        await asyncio.to_thread(store.archive, rental, now)
        archived += 1
    return archived


async def check_rentals(
    store: RentalStore,
    tracker: NotificationTracker,
    notify_func: Notifier = notify,
    now: datetime | None = None,
) -> CheckSummary:
    """
    One check cycle. Never raises: a store failure is logged and ends the cycle early
    (summary.failed is set); the next scheduled cycle tries again.
    """
    now = now or utcnow()
    warning_window = timedelta(minutes=settings.WARNING_WINDOW_MINUTES)
    summary = CheckSummary()
    try:
        active = await asyncio.to_thread(store.query_by_status, RentalStatus.active)
        if not active:
            logger.debug("No active rentals")
            return summary

        logger.info("Checking %s active rental(s)", len(active))
        for rental in active:
            summary.checked += 1
            end_time = rental.end_datetime
            if end_time is None:
                logger.warning("Rental %s (room %s) has no usable endTime: %r", rental.id, rental.room_display, rental.end_time)
                continue
            remaining = end_time - now

            if remaining <= timedelta(0):
                if await _handle_expired(store, tracker, notify_func, rental):
                    summary.expired += 1
            elif remaining <= warning_window:
                if tracker.has_notified(NotificationKind.warning, rental.id):
                    logger.debug("Skipping duplicate warning for rental %s", rental.id)
                    continue
                tracker.mark_notified(NotificationKind.warning, rental.id)
                logger.info("Warning: room %s ends in %s", rental.room_display, remaining)
                await notify_func(warning_message(rental, remaining))
                summary.warnings += 1

        summary.archived = await _archive_old_expired(store, now)
        logger.info(
            "Rental check complete: checked=%s expired=%s warnings=%s archived=%s",
            summary.checked, summary.expired, summary.warnings, summary.archived,
        )
    except Exception as e:
        summary.failed = True
        logger.exception("Rental check failed: %s", e)
    return summary
