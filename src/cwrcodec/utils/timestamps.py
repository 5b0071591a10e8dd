"""Timestamp utilities for cwrcodec.

This module provides consistent timestamp functions across the codebase.
"""

from datetime import UTC, datetime

__all__ = ["get_iso_timestamp", "utc_now"]


def utc_now() -> datetime:
    """Get the current time as a timezone-aware UTC datetime.

    Returns
    -------
    datetime
        Current UTC time, truncated to whole seconds.

    Notes
    -----
    CWR headers carry second resolution only, so microseconds are dropped
    to keep the context and the rendered HDR record in agreement.
    """
    return datetime.now(UTC).replace(microsecond=0)


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Returns
    -------
    str
        ISO8601 timestamp with microseconds (e.g., "2026-02-03T12:34:56.123456Z").

    Notes
    -----
    This function includes microseconds for high-precision audit logging.
    Use this as the canonical timestamp function across the codebase.
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")
