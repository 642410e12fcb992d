from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utcfromtimestamp(ts: float) -> datetime:
    return datetime.fromtimestamp(ts, timezone.utc)
