from enum import Enum


class RentalStatus(str, Enum):
    active = "active"
    expired = "expired"


class NotificationKind(str, Enum):
    expired = "expired"
    warning = "warning"
