from datetime import datetime, timezone


def aware(momento: datetime | None) -> datetime | None:
    """SQLite devuelve datetimes sin zona; se interpretan como UTC."""
    if momento is None or momento.tzinfo is not None:
        return momento
    return momento.replace(tzinfo=timezone.utc)
