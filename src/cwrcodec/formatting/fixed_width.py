"""Fixed-width field primitives for CWR records.

Every CWR field has a rigid width. Values that are too long are truncated
here rather than rejected: length problems are reported earlier by the
validators, and a record must always come out with the exact layout width.

Field widths live in this module only; record builders compose fields
through these helpers and never pad by hand.
"""

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from cwrcodec.validators.identifiers import SOCIETY_CODES
from cwrcodec.validators.text import cwr_string

__all__ = [
    "ljust",
    "rjust",
    "zfill",
    "spaces",
    "zeros",
    "format_text",
    "format_code",
    "format_sequence",
    "format_date",
    "format_time",
    "format_duration",
    "format_share",
    "format_society",
    "format_ipi",
    "format_ipi_base",
    "format_iswc",
    "format_isrc",
    "build_record",
    "SEQUENCE_WIDTH",
    "PARTY_CODE_WIDTH",
    "WORK_CODE_WIDTH",
    "TITLE_WIDTH",
    "LAST_NAME_WIDTH",
    "FIRST_NAME_WIDTH",
    "NAME_WIDTH",
    "LANGUAGE_WIDTH",
    "ROLE_WIDTH",
    "CHAIN_WIDTH",
    "SAAN_WIDTH",
    "ISNI_WIDTH",
    "FILENAME_WIDTH",
    "SOFTWARE_WIDTH",
    "VERSION_TYPE_WIDTH",
    "TITLE_TYPE_WIDTH",
    "TERRITORY_SEQ_WIDTH",
    "SOCIETY_WIDTH",
    "SOCIETY_V3_WIDTH",
    "SENDER_IPI_WIDTH",
    "GROUP_ID_WIDTH",
    "SUBMITTER_CODE_WIDTH_V2",
    "SUBMITTER_CODE_WIDTH_V3",
    "DURATION_MAX_SECONDS",
]

SEQUENCE_WIDTH = 8
PARTY_CODE_WIDTH = 9
WORK_CODE_WIDTH = 14
TITLE_WIDTH = 60
NAME_WIDTH = 45
LAST_NAME_WIDTH = 45
FIRST_NAME_WIDTH = 30
LANGUAGE_WIDTH = 2
ROLE_WIDTH = 2
CHAIN_WIDTH = 2
SAAN_WIDTH = 14
ISNI_WIDTH = 16
FILENAME_WIDTH = 27
SOFTWARE_WIDTH = 30
VERSION_TYPE_WIDTH = 3
TITLE_TYPE_WIDTH = 2
TERRITORY_SEQ_WIDTH = 3
SOCIETY_WIDTH = 3
SOCIETY_V3_WIDTH = 4
SENDER_IPI_WIDTH = 9
GROUP_ID_WIDTH = 5
SUBMITTER_CODE_WIDTH_V2 = 3
SUBMITTER_CODE_WIDTH_V3 = 4

_DATE_WIDTH = 8
_TIME_WIDTH = 6
_SHARE_WIDTH = 5
_IPI_WIDTH = 11
_IPI_BASE_WIDTH = 13
_ISWC_WIDTH = 11
_ISRC_WIDTH = 12

DURATION_MAX_SECONDS = 99 * 3600 + 59 * 60 + 59
_SHARE_MAX = 10 ** _SHARE_WIDTH - 1

_NON_DIGIT_RE = re.compile(r"\D")
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------


def ljust(value: object, width: int, fill: str = " ") -> str:
    """Left-justify ``value`` in ``width`` columns, truncating on the right."""
    text = "" if value is None else str(value)
    return text[:width].ljust(width, fill)


def rjust(value: object, width: int, fill: str = " ") -> str:
    """Right-justify ``value`` in ``width`` columns.

    Overlong values keep their rightmost ``width`` characters, so a counter
    that outgrows its field still shows its low-order digits.
    """
    text = "" if value is None else str(value)
    if len(text) >= width:
        return text[-width:]
    return text.rjust(width, fill)


def zfill(value: int | str | None, width: int) -> str:
    """Zero-fill a number to ``width`` digits (None renders as zero)."""
    return rjust(0 if value is None else value, width, "0")


def spaces(count: int) -> str:
    """Blank filler."""
    return " " * count


def zeros(count: int) -> str:
    """Zero filler."""
    return "0" * count


# ---------------------------------------------------------------------------
# Text and codes
# ---------------------------------------------------------------------------


def format_text(value: str | None, width: int) -> str:
    """Cleanse free text to the CWR character set and left-justify it."""
    return ljust(cwr_string(value), width)


def format_code(value: str | None, width: int = PARTY_CODE_WIDTH) -> str:
    """Left-justify an identifier code (party, work, SAAN, role).

    Codes go through the same CWR cleansing as free text, so they are
    upper-cased and never carry characters the file encoding cannot hold.
    """
    return ljust(cwr_string(value), width)


def format_sequence(value: int | None, width: int = SEQUENCE_WIDTH) -> str:
    """Zero-filled transaction, record or chain sequence number."""
    return zfill(value, width)


# ---------------------------------------------------------------------------
# Dates and durations
# ---------------------------------------------------------------------------


def _coerce_datetime(value: date | str | None) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).strip())
    except ValueError:
        return None


def format_date(value: date | str | None) -> str:
    """Render a date as YYYYMMDD; missing or unparseable dates are zeros."""
    day = _coerce_datetime(value)
    if day is None:
        return zeros(_DATE_WIDTH)
    return f"{day.year:04d}{day.month:02d}{day.day:02d}"


def format_time(value: datetime | str | None) -> str:
    """Render a time of day as HHMMSS; missing values are zeros."""
    moment = _coerce_datetime(value)
    if not isinstance(moment, datetime):
        return zeros(_TIME_WIDTH)
    return f"{moment.hour:02d}{moment.minute:02d}{moment.second:02d}"


def format_duration(seconds: int | float | None) -> str:
    """Render a duration in seconds as HHMMSS.

    Non-positive or missing durations render as ``000000``; durations longer
    than 99:59:59 are capped there.
    """
    if not seconds or seconds <= 0:
        return zeros(_TIME_WIDTH)

    total = min(int(seconds), DURATION_MAX_SECONDS)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}{minutes:02d}{secs:02d}"


# ---------------------------------------------------------------------------
# Shares and societies
# ---------------------------------------------------------------------------


def format_share(share: float | int | str | None) -> str:
    """Render a percentage as 5 digits with two implied decimals.

    ``50`` renders as ``05000``, ``50.5`` as ``05050`` and ``100`` as
    ``10000``. Rounding is half-up on the exact decimal value.

    Examples
    --------
    >>> format_share(33.335)
    '03334'
    """
    if share is None:
        return zeros(_SHARE_WIDTH)

    try:
        scaled = (Decimal(str(share)) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return zeros(_SHARE_WIDTH)
    if not scaled.is_finite():
        return zeros(_SHARE_WIDTH)

    value = max(0, min(int(scaled), _SHARE_MAX))
    return zfill(value, _SHARE_WIDTH)


def format_society(code: str | None, width: int = SOCIETY_WIDTH) -> str:
    """Render a society as a zero-padded TIS code.

    Numeric codes and known acronyms are rendered as ``width`` digits
    (3 in 2.x share fields, 4 in 3.x territory records). Anything else is
    upper-cased and left-justified.
    """
    if not code or not str(code).strip():
        return spaces(width)

    cleaned = str(code).strip().upper()
    numeric = SOCIETY_CODES.get(cleaned, cleaned)
    if numeric.isdigit():
        return rjust(numeric.lstrip("0") or "0", width, "0")
    return ljust(cleaned, width)


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


def format_ipi(value: str | None) -> str:
    """IPI Name Number as 11 zero-padded digits, or blanks."""
    if not value:
        return spaces(_IPI_WIDTH)
    return rjust(_NON_DIGIT_RE.sub("", value), _IPI_WIDTH, "0")


def format_ipi_base(value: str | None) -> str:
    """IPI Base Number in its 13-character hyphenated form, or blanks."""
    return ljust(value or "", _IPI_BASE_WIDTH)


def format_iswc(value: str | None) -> str:
    """ISWC without separators (``T1234567892``), or blanks."""
    if not value:
        return spaces(_ISWC_WIDTH)
    return ljust(_NON_ALNUM_RE.sub("", value).upper(), _ISWC_WIDTH)


def format_isrc(value: str | None) -> str:
    """ISRC without hyphens, or blanks."""
    if not value:
        return spaces(_ISRC_WIDTH)
    return ljust(value.replace("-", "").upper(), _ISRC_WIDTH)


def build_record(*fields: str) -> str:
    """Concatenate rendered fields into one record line (no terminator)."""
    return "".join(fields)
