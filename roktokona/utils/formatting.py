"""Timestamp and locale helpers shared by models and response schemas."""
from datetime import datetime, timedelta, timezone
from typing import Optional

# Bangladesh Standard Time, no daylight saving
BANGLADESH_TZ = timezone(timedelta(hours=6), "BST")

BENGALI_DIGITS = str.maketrans("0123456789", "০১২৩৪৫৬৭৮৯")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_bengali_digits(value: str) -> str:
    """Replace ASCII digits with Bengali digits, leaving everything else untouched."""
    return value.translate(BENGALI_DIGITS)


def format_display_date(value: Optional[datetime], locale: str = "bn-BD") -> Optional[str]:
    """
    Render a stored timestamp as a short local date string.

    Naive values are treated as UTC (SQLite drops the offset). The ``bn-BD``
    locale gives day/month/year in Bengali digits, e.g. ``১৯/১০/২০২৬``; any
    other locale keeps ASCII digits.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(BANGLADESH_TZ)
    text = f"{local.day}/{local.month}/{local.year}"
    if locale.lower().startswith("bn"):
        return to_bengali_digits(text)
    return text
