"""Identifier checksums and validators.

IPI Name Number, IPI Base Number, ISWC, ISRC and EAN-13, plus society codes
and share percentages. Every validator is a pure, total function: empty
input is valid (all these fields are optional) and bad data yields an
invalid FieldResult instead of an exception. Only the checksum generators
raise, and only for malformed base digits.
"""

import math
import re

from ._result_types import FieldResult

__all__ = [
    "validate_ipi",
    "generate_ipi_checksum",
    "validate_ipi_base",
    "generate_ipi_base_checksum",
    "validate_iswc",
    "generate_iswc_checksum",
    "validate_isrc",
    "validate_ean13",
    "generate_ean13_checksum",
    "validate_society_code",
    "validate_share",
    "validate_shares_total",
    "SOCIETY_CODES",
]

_SEPARATORS_RE = re.compile(r"[\s\-]")
_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]")
_ISWC_RE = re.compile(r"^T(\d{9})(\d)$")
_ISRC_RE = re.compile(r"^[A-Z]{2}[A-Z0-9]{3}\d{2}\d{5}$")

SHARE_TOLERANCE = 0.01

# CISAC TIS numeric codes for the societies most often seen in CWR traffic
SOCIETY_CODES: dict[str, str] = {
    "APRA": "008",
    "ASCAP": "010",
    "JASRAC": "011",
    "BMI": "021",
    "BUMA": "023",
    "GEMA": "035",
    "MCPS": "044",
    "PRS": "052",
    "SABAM": "055",
    "SACEM": "058",
    "SESAC": "071",
    "SGAE": "072",
    "SIAE": "074",
    "STIM": "079",
    "SUISA": "080",
    "SOCAN": "101",
}


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


# ---------------------------------------------------------------------------
# IPI Name Number (modulo 101)
# ---------------------------------------------------------------------------


def _ipi_check(base_digits: str) -> int:
    remainder = int(base_digits) % 101
    return 0 if remainder == 0 else 101 - remainder


def validate_ipi(value: str | None) -> FieldResult:
    """Validate an 11-digit IPI Name Number.

    The last two digits are ``101 - (first9 mod 101)``, or ``00`` when the
    remainder is zero.

    Parameters
    ----------
    value : str | None
        IPI Name Number, optionally with spaces or hyphens.

    Returns
    -------
    FieldResult
        Normalized 11-digit string on success.
    """
    if _is_blank(value):
        return FieldResult.empty()

    normalized = _SEPARATORS_RE.sub("", str(value))
    if not re.fullmatch(r"\d{11}", normalized):
        return FieldResult.invalid(
            f"IPI Name Number must be exactly 11 digits, got {normalized!r}"
        )

    expected = f"{_ipi_check(normalized[:9]):02d}"
    actual = normalized[9:]
    if expected != actual:
        return FieldResult.invalid(
            f"Invalid IPI checksum. Expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )

    return FieldResult.ok(normalized)


def generate_ipi_checksum(base_digits: str) -> str:
    """Append the modulo-101 check digits to a 9-digit IPI base.

    Parameters
    ----------
    base_digits : str
        Exactly 9 digits.

    Returns
    -------
    str
        11-digit IPI Name Number.

    Raises
    ------
    ValueError
        If the base is not 9 digits, or if it has no two-digit check value
        (``first9 mod 101 == 1`` would require a check of 100).
    """
    if not re.fullmatch(r"\d{9}", base_digits or ""):
        raise ValueError("IPI base must be exactly 9 digits")

    check = _ipi_check(base_digits)
    if check > 99:
        raise ValueError(f"IPI base {base_digits} has no two-digit check value")

    return f"{base_digits}{check:02d}"


# ---------------------------------------------------------------------------
# IPI Base Number (weighted modulo 10)
# ---------------------------------------------------------------------------


def _ipi_base_check(base_digits: str) -> int:
    total = sum(int(d) * (1 if i % 2 == 0 else 2) for i, d in enumerate(base_digits))
    return (10 - total % 10) % 10


def validate_ipi_base(value: str | None) -> FieldResult:
    """Validate an IPI Base Number.

    Accepts ``I-NNNNNNNNN-C``, ``INNNNNNNNNC`` or bare 10 digits. The check
    digit is computed with alternating weights 1, 2 over the 9 base digits.

    Parameters
    ----------
    value : str | None
        IPI Base Number.

    Returns
    -------
    FieldResult
        ``I-NNNNNNNNN-C`` on success.
    """
    if _is_blank(value):
        return FieldResult.empty()

    normalized = _SEPARATORS_RE.sub("", str(value).upper())
    if normalized.startswith("I"):
        normalized = normalized[1:]

    if not re.fullmatch(r"\d{10}", normalized):
        return FieldResult.invalid(
            "IPI Base Number must be 10 digits (or I-NNNNNNNNN-C format)"
        )

    base, actual = normalized[:9], normalized[9]
    expected = str(_ipi_base_check(base))
    if expected != actual:
        return FieldResult.invalid(
            f"Invalid IPI Base checksum. Expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )

    return FieldResult.ok(f"I-{base}-{actual}")


def generate_ipi_base_checksum(base_digits: str) -> str:
    """Build an ``I-NNNNNNNNN-C`` IPI Base Number from 9 digits.

    Raises
    ------
    ValueError
        If the base is not exactly 9 digits.
    """
    if not re.fullmatch(r"\d{9}", base_digits or ""):
        raise ValueError("IPI Base Number base must be exactly 9 digits")
    return f"I-{base_digits}-{_ipi_base_check(base_digits)}"


# ---------------------------------------------------------------------------
# ISWC (weighted modulo 10, T seeds the sum)
# ---------------------------------------------------------------------------


def _iswc_check(digits: str) -> int:
    total = 1  # the T prefix
    for i, d in enumerate(digits):
        product = int(d) * (1 if i % 2 == 0 else 2)
        total += product // 10 + product % 10
    return (10 - total % 10) % 10


def validate_iswc(value: str | None) -> FieldResult:
    """Validate an International Standard Work Code.

    Accepts any separator style (``T-123.456.789-2``, ``T1234567892``, ...).

    Parameters
    ----------
    value : str | None
        ISWC.

    Returns
    -------
    FieldResult
        ``T-NNNNNNNNN-C`` on success.
    """
    if _is_blank(value):
        return FieldResult.empty()

    compact = _NON_ALNUM_RE.sub("", str(value).upper())
    match = _ISWC_RE.match(compact)
    if not match:
        return FieldResult.invalid(f"ISWC must be in format T-NNNNNNNNN-C, got {value!r}")

    digits, actual = match.groups()
    expected = str(_iswc_check(digits))
    if expected != actual:
        return FieldResult.invalid(
            f"Invalid ISWC checksum. Expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )

    return FieldResult.ok(f"T-{digits}-{actual}")


def generate_iswc_checksum(digits: str) -> str:
    """Build a normalized ISWC from its 9 work digits.

    Raises
    ------
    ValueError
        If ``digits`` is not exactly 9 digits.
    """
    if not re.fullmatch(r"\d{9}", digits or ""):
        raise ValueError("ISWC digits must be exactly 9 digits")
    return f"T-{digits}-{_iswc_check(digits)}"


# ---------------------------------------------------------------------------
# ISRC (structural only)
# ---------------------------------------------------------------------------


def validate_isrc(value: str | None) -> FieldResult:
    """Validate an International Standard Recording Code.

    ISRC has no check digit; only the ``CC XXX YY NNNNN`` structure is
    verified (country, registrant, year, designation).

    Parameters
    ----------
    value : str | None
        ISRC with or without hyphens.

    Returns
    -------
    FieldResult
        ``CC-XXX-YY-NNNNN`` on success.
    """
    if _is_blank(value):
        return FieldResult.empty()

    normalized = _SEPARATORS_RE.sub("", str(value).upper())
    if len(normalized) != 12:
        return FieldResult.invalid(f"ISRC must be 12 characters, got {len(normalized)}")

    if not _ISRC_RE.match(normalized):
        return FieldResult.invalid(
            "ISRC must be in format CC-XXX-YY-NNNNN (Country-Registrant-Year-Designation)"
        )

    return FieldResult.ok(
        f"{normalized[:2]}-{normalized[2:5]}-{normalized[5:7]}-{normalized[7:]}"
    )


# ---------------------------------------------------------------------------
# EAN-13
# ---------------------------------------------------------------------------


def _ean13_check(first12: str) -> int:
    total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(first12))
    return (10 - total % 10) % 10


def validate_ean13(value: str | None) -> FieldResult:
    """Validate an EAN-13 barcode (weights 1, 3 over the first 12 digits)."""
    if _is_blank(value):
        return FieldResult.empty()

    normalized = _SEPARATORS_RE.sub("", str(value))
    if not re.fullmatch(r"\d{13}", normalized):
        return FieldResult.invalid("EAN-13 must be exactly 13 digits")

    expected = str(_ean13_check(normalized[:12]))
    actual = normalized[12]
    if expected != actual:
        return FieldResult.invalid(
            f"Invalid EAN-13 checksum. Expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )

    return FieldResult.ok(normalized)


def generate_ean13_checksum(first12: str) -> str:
    """Append the check digit to 12 EAN digits.

    Raises
    ------
    ValueError
        If ``first12`` is not exactly 12 digits.
    """
    if not re.fullmatch(r"\d{12}", first12 or ""):
        raise ValueError("EAN-13 body must be exactly 12 digits")
    return f"{first12}{_ean13_check(first12)}"


# ---------------------------------------------------------------------------
# Society codes
# ---------------------------------------------------------------------------


def validate_society_code(value: str | None) -> FieldResult:
    """Validate a society code and normalize it to a 3-digit TIS code.

    Numeric codes (1-3 digits) are zero-padded. Known society acronyms are
    translated; unknown acronyms are rejected since they cannot be placed in
    a numeric CWR field.

    Parameters
    ----------
    value : str | None
        TIS code ("10", "010") or acronym ("ASCAP").

    Returns
    -------
    FieldResult
        3-digit TIS code on success.
    """
    if _is_blank(value):
        return FieldResult.empty()

    code = str(value).strip().upper()

    if code.isdigit():
        if len(code) > 3:
            return FieldResult.invalid(f"Society code {code} exceeds 3 digits")
        normalized = code.zfill(3)
        known = normalized in SOCIETY_CODES.values()
        warnings = (
            () if known else (f"Society code {normalized} not in known list - please verify",)
        )
        return FieldResult.ok(normalized, warnings=warnings)

    if code in SOCIETY_CODES:
        return FieldResult.ok(SOCIETY_CODES[code])

    return FieldResult.invalid(f"Unknown society code: {code}")


# ---------------------------------------------------------------------------
# Shares
# ---------------------------------------------------------------------------


def validate_share(value: float | None) -> FieldResult:
    """Validate a share percentage (0-100, at most 2 decimal places)."""
    if value is None:
        return FieldResult.empty()

    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        return FieldResult.invalid("Share must be a valid number")

    if value < 0 or value > 100:
        return FieldResult.invalid(f"Share must be between 0 and 100, got {value}")

    if abs(round(value, 2) - value) > 1e-9:
        return FieldResult.invalid(f"Share can have maximum 2 decimal places, got {value}")

    return FieldResult.ok(f"{value:.2f}")


def validate_shares_total(shares: list[float], expected_total: float = 100.0) -> FieldResult:
    """Check that shares add up to ``expected_total`` within 0.01.

    Returns
    -------
    FieldResult
        Normalized total ("100.00") on success.
    """
    total = sum(shares)
    if abs(total - expected_total) > SHARE_TOLERANCE:
        return FieldResult.invalid(
            f"Shares total {total:.2f}% but should equal {expected_total:.0f}%",
            expected=f"{expected_total:.2f}",
            actual=f"{total:.2f}",
        )
    return FieldResult.ok(f"{total:.2f}")
