"""
Entrypoint: python -m rental_monitor

Initializes the rental store (exit code 1 if it fails), then either runs a single
check (RUN_ONCE) or serves the liveness endpoint with the check loop in the background.
"""
import asyncio
import logging
import sys

import uvicorn

from rental_monitor.core.config import settings
from rental_monitor.core.notification_tracker import NotificationTracker
from rental_monitor.core.startup import check_telegram_settings, init_rental_store
from rental_monitor.cron.rental_checks import check_rentals

logger = logging.getLogger("rental_monitor")


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Rental monitor starting")

    store = init_rental_store()
    if store is None:
        logger.error("Rental store unavailable; exiting")
        return 1

    if settings.RUN_ONCE:
        # server mode checks Telegram settings in the app startup hook
        check_telegram_settings()
        summary = asyncio.run(check_rentals(store, NotificationTracker()))
        logger.info("Single check done: %s", summary)
        return 0

    from rental_monitor.main import app

    app.state.rental_store = store
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
