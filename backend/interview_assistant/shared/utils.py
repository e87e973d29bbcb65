"""Shared utility functions used across components."""

import secrets
import string
from datetime import datetime, timezone

_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits


def utcnow() -> datetime:
    """Return the current UTC datetime (timezone-aware)."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return datetime as timezone-aware UTC. Returns None if input is None."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def isoformat_z(dt: datetime) -> str:
    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_submission_id(prefix: str, at: datetime | None = None, *, suffix_length: int = 0) -> str:
    """Build ids like ``TC-1718000000000`` or ``REV-1718000000000-7K2QZD``."""
    stamp = ensure_utc(at) or utcnow()
    millis = int(stamp.timestamp() * 1000)
    submission_id = f"{prefix}-{millis}"
    if suffix_length:
        suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(suffix_length))
        submission_id = f"{submission_id}-{suffix}"
    return submission_id
