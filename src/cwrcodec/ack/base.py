"""Decoding and sniffing helpers for acknowledgement files."""

import re

from cwrcodec.models import CWRVersion

__all__ = [
    "detect_encoding",
    "normalize_line_endings",
    "split_lines",
    "sniff_version",
    "parse_int",
    "ENVELOPE_RECORD_TYPES",
]

# Envelope records carry no per-transaction outcome
ENVELOPE_RECORD_TYPES = frozenset({"HDR", "GRH", "GRT", "TRL"})

# Later entries win when several markers appear in one header
_VERSION_MARKERS: tuple[tuple[str, CWRVersion], ...] = (
    ("2.20", CWRVersion.V22),
    ("3.00", CWRVersion.V30),
    ("3.10", CWRVersion.V31),
)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def detect_encoding(file_bytes: bytes) -> str:
    """Detect the encoding of an ACK file.

    Societies send either UTF-8 (sometimes with BOM) or ISO-8859-1.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content.

    Returns
    -------
    str
        "utf-8-sig", "utf-8" or "latin-1".
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Convert CRLF and bare CR line endings to LF."""
    return content.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(content: str) -> list[str]:
    """Split on CRLF or LF and drop empty lines."""
    return [line for line in re.split(r"\r?\n", content) if line]


def sniff_version(header_line: str) -> CWRVersion:
    """Guess the CWR version of an ACK file from its HDR line.

    The header layout is not self-describing, so this looks for the
    literal markers "2.20", "3.00" and "3.10" anywhere in the line and
    falls back to 2.1.

    Parameters
    ----------
    header_line : str
        First line of the file.

    Returns
    -------
    CWRVersion
        Detected version.
    """
    version = CWRVersion.V21
    for marker, candidate in _VERSION_MARKERS:
        if marker in header_line:
            version = candidate
    return version


def parse_int(field: str) -> int:
    """Parse the leading integer of a numeric field; 0 when there is none."""
    match = _LEADING_INT_RE.match(field)
    return int(match.group(1)) if match else 0
