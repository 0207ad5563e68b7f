from fastapi import APIRouter, Request

from rental_monitor.core.config import settings
from rental_monitor.core.utils import utcnow
from rental_monitor.models.enums import NotificationKind

router = APIRouter()


@router.get("/", summary="Health Check")
async def health_check(request: Request):
    tracker = request.app.state.notification_tracker
    return {
        "status": "running",
        "service": settings.SERVICE_NAME,
        "lastCheck": utcnow().isoformat(),
        "activeNotifications": tracker.count(NotificationKind.expired),
    }
