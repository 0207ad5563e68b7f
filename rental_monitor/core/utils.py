"""Shared helpers: end-time normalization and display formatting for rental messages."""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any


@dataclass(frozen=True)
class NativeTimestamp:
    """endTime as the store returned it: a datetime or a timestamp object with to_datetime()."""
    value: Any


@dataclass(frozen=True)
class RawTimestamp:
    """endTime stored as a plain value: epoch millis, ISO string or a {seconds, nanoseconds} map."""
    value: Any


EndTime = NativeTimestamp | RawTimestamp


def classify_end_time(value: Any) -> EndTime | None:
    if value is None:
        return None
    if isinstance(value, datetime) or hasattr(value, "to_datetime") or hasattr(value, "ToDatetime"):
        return NativeTimestamp(value)
    return RawTimestamp(value)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _from_native(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return _as_utc(value)
    if hasattr(value, "to_datetime"):
        return _as_utc(value.to_datetime())
    # protobuf Timestamp
    return _as_utc(value.ToDatetime())


def _from_raw(value: Any) -> datetime | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return _as_utc(datetime.fromisoformat(text))
    if isinstance(value, dict):
        seconds = value.get("seconds", value.get("_seconds"))
        if seconds is None:
            return None
        nanos = value.get("nanoseconds", value.get("_nanoseconds")) or 0
        return datetime.fromtimestamp(float(seconds) + float(nanos) / 1e9, tz=timezone.utc)
    return None


def normalize_end_time(value: Any) -> datetime | None:
    """
    Return endTime as an aware UTC datetime, or None when it is missing, unparseable or out of range.
    Naive datetimes and ISO strings without an offset are taken as UTC.
    """
    end_time = classify_end_time(value)
    if end_time is None:
        return None
    try:
        if isinstance(end_time, NativeTimestamp):
            return _from_native(end_time.value)
        return _from_raw(end_time.value)
    except (ValueError, OverflowError, OSError, TypeError, AttributeError):
        # out-of-range epoch, non-numeric seconds, timestamp object returning garbage
        return None


def format_number(value: float | int | str | None) -> str:
    """Render a number the way it reads on a receipt: 100.0 -> '100', 12.5 -> '12.5'."""
    if value is None:
        return "0"
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if not math.isfinite(number):
        return str(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def minutes_remaining(remaining: timedelta) -> int:
    """Whole minutes left, rounded up (90s -> 2)."""
    return math.ceil(remaining.total_seconds() / 60)
