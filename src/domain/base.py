from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns (stored without tz)"""
    return datetime.now(UTC).replace(tzinfo=None)
