from datetime import datetime, timezone


def is_utc(dt: datetime) -> bool:
    """Check if a datetime is timezone-aware and strictly UTC.

    Args:
        dt (datetime): The datetime to check.

    Returns:
        bool: True if $dt is aware and its tzinfo is exactly UTC; otherwise False.
    """
    # Check: datetime must be timezone-aware (not naive)
    if dt.tzinfo is None:
        return False

    # Check: timezone must be exactly UTC
    return dt.tzinfo is timezone.utc


def require_utc(dt: datetime) -> None:
    """Fail fast if $dt is not timezone-aware UTC (strict).

    Args:
        dt (datetime): The datetime to validate.

    Raises:
        ValueError: If $dt is not timezone-aware UTC.
    """
    if not isinstance(dt, datetime) or not is_utc(dt):
        raise ValueError(f"$dt ('{dt}') is not timezone-aware UTC.")


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
