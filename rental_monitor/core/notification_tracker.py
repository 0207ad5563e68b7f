"""
In-memory record of which rentals were already notified, per notification kind.
Lives for the process lifetime only: a restart forgets it, so a notification may repeat after a restart.
"""
from rental_monitor.models.enums import NotificationKind


class NotificationTracker:
    """Additive sets of rental ids, one per NotificationKind. No eviction, no persistence."""

    def __init__(self) -> None:
        self._notified: dict[NotificationKind, set[str]] = {kind: set() for kind in NotificationKind}

    def has_notified(self, kind: NotificationKind, rental_id: str) -> bool:
        return rental_id in self._notified[NotificationKind(kind)]

    def mark_notified(self, kind: NotificationKind, rental_id: str) -> None:
        self._notified[NotificationKind(kind)].add(rental_id)

    def count(self, kind: NotificationKind) -> int:
        """Number of distinct rental ids notified for this kind."""
        return len(self._notified[NotificationKind(kind)])

    def reset(self) -> None:
        for ids in self._notified.values():
            ids.clear()
