"""Shared fixtures: in-memory rental store and a recording notifier."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from rental_monitor.core.notification_tracker import NotificationTracker
from rental_monitor.models.enums import RentalStatus
from rental_monitor.models.rental import Rental


NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class FakeRentalStore:
    """Dict-backed stand-in for RentalStore with the same method surface."""

    def __init__(self, docs: dict | None = None):
        self.docs = {k: dict(v) for k, v in (docs or {}).items()}
        self.history: list[dict] = []
        self.fail_on: set[str] = set()

    def _maybe_fail(self, op: str):
        if op in self.fail_on:
            raise RuntimeError(f"{op} unavailable")

    def query_by_status(self, status):
        self._maybe_fail("query")
        value = status.value if isinstance(status, RentalStatus) else status
        rentals = []
        for doc_id, data in self.docs.items():
            if data.get("status") != value:
                continue
            try:
                rentals.append(Rental.from_snapshot(doc_id, data))
            except ValidationError:
                continue
        return rentals

    def mark_expired(self, rental_id):
        self._maybe_fail("update")
        self.docs[rental_id]["status"] = RentalStatus.expired.value

    def archive(self, rental, archived_at):
        self._maybe_fail("archive")
        self.history.append({**rental.document, "archivedAt": archived_at})
        del self.docs[rental.id]


class RecordingNotifier:
    def __init__(self, result: bool = True):
        self.messages: list[str] = []
        self.result = result

    async def __call__(self, text: str) -> bool:
        self.messages.append(text)
        return self.result


@pytest.fixture
def tracker():
    return NotificationTracker()


@pytest.fixture
def notifier():
    return RecordingNotifier()
