"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def unix_timestamp(moment: datetime | None = None) -> int:
    """Whole seconds since the epoch, as the program's Clock reports them."""
    return int((moment or utc_now()).timestamp())
