"""Common utility functions for cwrcodec.

This module consolidates shared utility functions used across the codebase,
including hashing and timestamps.
"""

from cwrcodec.utils.hashing import (
    calculate_bytes_sha256,
    format_sha256,
)
from cwrcodec.utils.timestamps import get_iso_timestamp, utc_now

__all__ = [
    "get_iso_timestamp",
    "utc_now",
    "calculate_bytes_sha256",
    "format_sha256",
]
