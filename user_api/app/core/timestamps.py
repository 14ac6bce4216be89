"""
Timestamp formatting shared by the API responses.

Timestamps are rendered as ISO-8601 in UTC with millisecond precision
and a ``Z`` suffix, e.g. ``2024-01-15T00:00:00.000Z``.
"""

from datetime import datetime, timezone
from typing import Optional


def isoformat_utc(value: Optional[datetime] = None) -> str:
    """Format ``value`` (default: now) as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive datetimes are taken to be UTC already.
    """
    if value is None:
        value = datetime.now(timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
