"""CWR-safe text handling.

CWR text fields accept upper-case ASCII letters, digits, space and a small
set of punctuation. Accented letters are folded through a fixed table;
anything else is flagged (validate_cwr_string) or dropped (cwr_string).
"""

import re
import unicodedata

from ._result_types import FieldResult

__all__ = [
    "ACCENT_TABLE",
    "CWR_ALLOWED_PUNCTUATION",
    "cwr_string",
    "fold_accents",
    "validate_cwr_string",
]

CWR_ALLOWED_PUNCTUATION = " .,;:'\"()-/\\&!?#@*+=%$"

_INVALID_RE = re.compile(r"[^A-Z0-9" + re.escape(CWR_ALLOWED_PUNCTUATION) + r"]")

ACCENT_TABLE: dict[str, str] = {
    **dict.fromkeys("ÀÁÂÃÄÅ", "A"),
    **dict.fromkeys("ÈÉÊË", "E"),
    **dict.fromkeys("ÌÍÎÏ", "I"),
    **dict.fromkeys("ÒÓÔÕÖ", "O"),
    **dict.fromkeys("ÙÚÛÜ", "U"),
    "Ñ": "N",
    "Ý": "Y",
    "Ç": "C",
    "ß": "SS",
    "Æ": "AE",
    "Œ": "OE",
    "—": "-",
    "–": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
}

_ACCENT_TRANSLATION = str.maketrans(ACCENT_TABLE)


def fold_accents(value: str) -> str:
    """Upper-case ``value`` and replace table characters with ASCII."""
    return value.upper().translate(_ACCENT_TRANSLATION)


def _fold(value: str) -> str:
    """Apply the accent table, then strip remaining combining marks.

    Letters outside the table still fold ("Ă" becomes "A"); letters with no
    decomposition ("Ł") are left for the caller to flag or drop.
    """
    decomposed = unicodedata.normalize("NFD", fold_accents(value))
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def cwr_string(value: str | None) -> str:
    """Cleanse free text for a CWR field, silently.

    Folds accents and drops whatever is still outside the CWR set.

    Parameters
    ----------
    value : str | None
        Raw text.

    Returns
    -------
    str
        CWR-safe text, possibly empty.
    """
    if not value:
        return ""

    return _INVALID_RE.sub("", _fold(value))


def validate_cwr_string(
    value: str | None,
    max_length: int,
    field_name: str = "Value",
) -> FieldResult:
    """Validate and normalize a string for a CWR text field.

    Parameters
    ----------
    value : str | None
        Raw text.
    max_length : int
        Field width on the wire.
    field_name : str, optional
        Name used in messages, by default "Value".

    Returns
    -------
    FieldResult
        Invalid if characters outside the CWR set remain after folding
        (each distinct offender is listed once, in order of appearance);
        the normalized value then has them removed. Overlong values are
        truncated to ``max_length`` with a warning.
    """
    if not value:
        return FieldResult.ok("")

    normalized = _fold(value)

    offenders = list(dict.fromkeys(_INVALID_RE.findall(normalized)))
    if offenders:
        cleaned = _INVALID_RE.sub("", normalized)[:max_length]
        return FieldResult(
            is_valid=False,
            normalized=cleaned,
            errors=(
                f"{field_name} contains invalid CWR characters: {', '.join(offenders)}",
            ),
        )

    if len(normalized) > max_length:
        return FieldResult.ok(
            normalized[:max_length],
            warnings=(
                f"{field_name} exceeds maximum length of {max_length} characters "
                f"and was truncated",
            ),
        )

    return FieldResult.ok(normalized)
