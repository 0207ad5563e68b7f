"""
Firestore access for internet rentals: query by status, mark expired, archive to history.
Methods are blocking (Firestore SDK); async callers run them via asyncio.to_thread.
Errors propagate to the caller, which logs and aborts the current check.
"""
import logging
from datetime import datetime

from pydantic import ValidationError

from rental_monitor.core.config import settings
from rental_monitor.models.enums import RentalStatus
from rental_monitor.models.rental import Rental

logger = logging.getLogger(__name__)


class RentalStore:
    def __init__(
        self,
        client,
        rentals_collection: str | None = None,
        history_collection: str | None = None,
    ) -> None:
        self.client = client
        self.rentals_collection = rentals_collection or settings.RENTALS_COLLECTION
        self.history_collection = history_collection or settings.HISTORY_COLLECTION

    def _rentals(self):
        return self.client.collection(self.rentals_collection)

    def query_by_status(self, status: RentalStatus | str) -> list[Rental]:
        """All rentals with the given status. Empty list when none match; unreadable documents are skipped."""
        from firebase_admin import firestore

        value = status.value if isinstance(status, RentalStatus) else status
        query = self._rentals().where(filter=firestore.FieldFilter("status", "==", value))
        rentals = []
        for snap in query.stream():
            try:
                rentals.append(Rental.from_snapshot(snap.id, snap.to_dict()))
            except ValidationError as e:
                logger.warning("Skipping unreadable rental %s: %s", snap.id, e)
        return rentals

    def mark_expired(self, rental_id: str) -> None:
        self._rentals().document(rental_id).update({"status": RentalStatus.expired.value})
        logger.debug("Rental %s marked expired", rental_id)

    def archive(self, rental: Rental, archived_at: datetime) -> None:
        """Copy every stored field plus archivedAt into history, then delete the original."""
        history_doc = {**rental.document, "archivedAt": archived_at}
        self.client.collection(self.history_collection).add(history_doc)
        self._rentals().document(rental.id).delete()
        logger.info("Archived rental %s (room %s) to %s", rental.id, rental.room_display, self.history_collection)
