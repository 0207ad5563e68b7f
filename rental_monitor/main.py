import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rental_monitor.api.v1.api_router import api_router
from rental_monitor.api.v1.health import router as health_router
from rental_monitor.core.config import settings
from rental_monitor.core.notification_tracker import NotificationTracker
from rental_monitor.core.startup import (
    check_telegram_settings,
    init_rental_store,
    send_shutdown_notification,
    send_startup_notification,
)

logger = logging.getLogger(__name__)


async def startup_event(app: FastAPI):
    """Application startup: store, startup alert, background check loop."""
    check_telegram_settings()
    if app.state.rental_store is None:
        app.state.rental_store = init_rental_store()
    if app.state.rental_store is None:
        raise RuntimeError("Rental store could not be initialized")
    await send_startup_notification()
    # Start rental check cron (non-blocking)
    from rental_monitor.core.cron_runner import run_rental_check_loop
    task = asyncio.create_task(
        run_rental_check_loop(app.state.rental_store, app.state.notification_tracker)
    )
    app.state.rental_check_task = task


async def shutdown_event(app: FastAPI):
    """Application shutdown: stop the loop, then send the shutdown alert."""
    task = getattr(app.state, "rental_check_task", None)
    if task and not task.done():
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass  # expected on cancel
    await send_shutdown_notification()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event(app)
    yield
    await shutdown_event(app)


# Create FastAPI app
app = FastAPI(
    title=settings.SERVICE_NAME,
    description="Liveness endpoint for the internet rental expiry monitor",
    version="1.0.0",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Liveness at the root for uptime probes, and under the versioned API
app.include_router(health_router, tags=["health"])
app.include_router(api_router, prefix="/api/v1")

app.state.notification_tracker = NotificationTracker()
app.state.rental_store = None
