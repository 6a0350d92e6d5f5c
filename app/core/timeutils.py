from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching what SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
