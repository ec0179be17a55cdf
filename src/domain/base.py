from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, the form both stores persist."""
    return datetime.now(UTC).replace(tzinfo=None)
