"""Internet rental document as stored in the rentals collection."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rental_monitor.core.utils import format_number, normalize_end_time


class Rental(BaseModel):
    """
    One rental document. Field names follow the stored camelCase keys via aliases.
    `document` keeps the untouched snapshot so archival copies every field.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    room_number: Any = Field(None, alias="roomNumber")
    client_name: str | None = Field(None, alias="clientName")
    status: str | None = None
    end_time: Any = Field(None, alias="endTime")
    duration_display: str | None = Field(None, alias="durationDisplay")
    days: Any = None
    total_cost: Any = Field(None, alias="totalCost")
    is_exception: bool = Field(False, alias="isException")
    document: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @classmethod
    def from_snapshot(cls, doc_id: str, data: dict[str, Any] | None) -> Rental:
        data = dict(data or {})
        payload = {k: v for k, v in data.items() if k not in ("id", "document")}
        return cls.model_validate({**payload, "id": doc_id, "document": data})

    @field_validator("client_name", "duration_display", "status", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("is_exception", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)

    @property
    def end_datetime(self) -> datetime | None:
        return normalize_end_time(self.end_time)

    @property
    def room_display(self) -> str:
        if self.room_number is None:
            return "?"
        if isinstance(self.room_number, (int, float)):
            return format_number(self.room_number)
        return str(self.room_number)

    @property
    def client_display(self) -> str:
        return self.client_name or "Guest"

    @property
    def duration_text(self) -> str:
        if self.duration_display:
            return self.duration_display
        return f"{format_number(self.days)} day(s)"

    def cost_text(self, currency_suffix: str) -> str:
        if self.is_exception:
            return "FREE"
        return f"{format_number(self.total_cost)} {currency_suffix}"
