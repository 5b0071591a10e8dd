"""Result dataclasses for validation functions.

Validators never raise for bad data; they return one of these values.
"""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating one field value.

    Attributes
    ----------
    is_valid : bool
        Whether the value is acceptable. Empty input is always valid.
    normalized : str | None
        Canonical form of the value (None for empty input or when no
        usable form could be derived).
    errors : tuple[str, ...]
        Reasons the value was rejected.
    warnings : tuple[str, ...]
        Non-blocking remarks (truncation, unknown society, ...).
    expected : str | None
        Expected check digit(s) when a checksum mismatch was detected.
    actual : str | None
        Supplied check digit(s) when a checksum mismatch was detected.
    """

    is_valid: bool
    normalized: str | None = None
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    expected: str | None = None
    actual: str | None = None

    @property
    def error(self) -> str | None:
        """First error message, if any."""
        return self.errors[0] if self.errors else None

    @classmethod
    def empty(cls) -> "FieldResult":
        """Result for absent optional input."""
        return cls(is_valid=True)

    @classmethod
    def ok(cls, normalized: str, warnings: tuple[str, ...] = ()) -> "FieldResult":
        """Valid result with its normalized form."""
        return cls(is_valid=True, normalized=normalized, warnings=warnings)

    @classmethod
    def invalid(cls, message: str, **kwargs: Any) -> "FieldResult":
        """Invalid result with one error message."""
        return cls(is_valid=False, errors=(message,), **kwargs)


class Severity(StrEnum):
    """Severity of a work validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationIssue:
    """A single finding of the work pre-flight validator.

    Attributes
    ----------
    severity : Severity
        error blocks generation; warning and info do not.
    code : str
        Stable machine-readable issue code (e.g. "INVALID_ISWC").
    message : str
        Human-readable description.
    work_code : str
        Work the issue belongs to.
    field : str | None
        Offending field or section ("iswc", "writers", "shares", ...).
    work_id : str | None
        Catalog identifier of the work.
    """

    severity: Severity
    code: str
    message: str
    work_code: str
    field: str | None = None
    work_id: str | None = None


@dataclass(frozen=True)
class ValidationReport:
    """Categorized issues for a batch of works.

    Attributes
    ----------
    errors : list[ValidationIssue]
        Blocking issues.
    warnings : list[ValidationIssue]
        Issues likely to cause society-side rejections.
    info : list[ValidationIssue]
        Informational notes.
    total_works : int
        Number of works inspected.
    valid_works : int
        Works with no error-level issue.
    """

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)
    info: list[ValidationIssue] = field(default_factory=list)
    total_works: int = 0
    valid_works: int = 0

    @property
    def is_valid(self) -> bool:
        """True if no error-level issue was found."""
        return not self.errors

    @property
    def can_generate(self) -> bool:
        """True if the batch may be exported (warnings allowed)."""
        return not self.errors

    @property
    def summary(self) -> dict[str, int]:
        """Counts for display."""
        return {
            "total_works": self.total_works,
            "valid_works": self.valid_works,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
        }

    def codes(self) -> set[str]:
        """All issue codes present in the report."""
        return {i.code for i in (*self.errors, *self.warnings, *self.info)}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["summary"] = self.summary
        return data
