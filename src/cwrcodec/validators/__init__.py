"""Identifier, text and work validation."""

from ._result_types import FieldResult, Severity, ValidationIssue, ValidationReport
from .identifiers import (
    SHARE_TOLERANCE,
    SOCIETY_CODES,
    generate_ean13_checksum,
    generate_ipi_base_checksum,
    generate_ipi_checksum,
    generate_iswc_checksum,
    validate_ean13,
    validate_ipi,
    validate_ipi_base,
    validate_isrc,
    validate_iswc,
    validate_share,
    validate_shares_total,
    validate_society_code,
)
from .text import (
    ACCENT_TABLE,
    CWR_ALLOWED_PUNCTUATION,
    cwr_string,
    fold_accents,
    validate_cwr_string,
)
from .works import is_work_ready, validate_works

__all__ = [
    "FieldResult",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "SHARE_TOLERANCE",
    "SOCIETY_CODES",
    "generate_ean13_checksum",
    "generate_ipi_base_checksum",
    "generate_ipi_checksum",
    "generate_iswc_checksum",
    "validate_ean13",
    "validate_ipi",
    "validate_ipi_base",
    "validate_isrc",
    "validate_iswc",
    "validate_share",
    "validate_shares_total",
    "validate_society_code",
    "ACCENT_TABLE",
    "CWR_ALLOWED_PUNCTUATION",
    "cwr_string",
    "fold_accents",
    "validate_cwr_string",
    "is_work_ready",
    "validate_works",
]
