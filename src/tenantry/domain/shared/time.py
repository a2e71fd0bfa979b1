"""UTC clock helpers.

Every timestamp the identity domain stores (account activity, session
expiry) is an aware UTC datetime.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Return ``dt`` as an aware UTC datetime.

    SQLite hands back naive values, which are read as UTC. Aware values
    from other zones (e.g. a Postgres session time zone) are converted.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
