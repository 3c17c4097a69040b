from datetime import datetime, UTC
from typing import Optional


def iso_utc(value: Optional[datetime]) -> Optional[str]:
    """Format as ``2024-05-01T12:00:00.000Z``.

    Naive values are store timestamps (``CURRENT_TIMESTAMP``) and are read as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
