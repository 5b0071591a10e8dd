"""Pre-flight validation of works before CWR generation.

The generator only enforces the rules that make a file impossible to
produce. This module reports the wider set of problems that typically cause
society-side rejections, so a reviewer can fix them before export.
"""

from collections.abc import Callable, Iterator

from cwrcodec import formatting
from cwrcodec.models import CWRVersion, Work

from ._result_types import Severity, ValidationIssue, ValidationReport
from .identifiers import validate_ipi, validate_isrc, validate_iswc

__all__ = [
    "validate_works",
    "is_work_ready",
    "WRITER_ROLES",
    "PUBLISHER_ROLES",
    "TITLE_TYPES",
    "MAX_DURATION_SECONDS",
]

WRITER_ROLES = frozenset({"CA", "A", "AD", "AR", "C", "SA", "SR", "TR", "PA"})
PUBLISHER_ROLES = frozenset({"E", "AM", "PA", "SE", "ES", "AQ"})
TITLE_TYPES = frozenset({"AT", "TE", "FT", "IT", "OT", "TT", "PT", "RT", "ET", "OL", "AL"})

# 99:59:59, the largest value an HHMMSS field can carry
MAX_DURATION_SECONDS = 359_999

_RIGHT_TOTAL_TOLERANCE = 0.1

_Check = Callable[[Work, CWRVersion], Iterator[ValidationIssue]]


def _issue(
    severity: Severity,
    code: str,
    message: str,
    work: Work,
    field: str | None = None,
) -> ValidationIssue:
    return ValidationIssue(
        severity=severity,
        code=code,
        message=message,
        work_code=work.work_code,
        field=field,
        work_id=work.work_id,
    )


def _check_required(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    if not work.title or not work.title.strip():
        yield _issue(Severity.ERROR, "MISSING_TITLE", "Work title is required", work, "title")

    if not work.work_code or not work.work_code.strip():
        yield _issue(
            Severity.ERROR,
            "MISSING_WORK_CODE",
            "Work code (submitter ID) is required",
            work,
            "work_code",
        )

    if not work.writers:
        yield _issue(Severity.ERROR, "NO_WRITERS", "Work must have at least one writer", work)

    if work.version_type not in ("ORI", "MOD"):
        yield _issue(
            Severity.WARNING,
            "INVALID_VERSION_TYPE",
            f"Version type {work.version_type!r} is not ORI or MOD",
            work,
            "version_type",
        )


def _check_identifiers(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    if work.iswc:
        result = validate_iswc(work.iswc)
        if not result.is_valid:
            yield _issue(
                Severity.ERROR, "INVALID_ISWC", f"Invalid ISWC: {result.error}", work, "iswc"
            )
    else:
        yield _issue(
            Severity.INFO,
            "NO_ISWC",
            "Work has no ISWC - will be assigned by society",
            work,
            "iswc",
        )

    if work.work_code and len(work.work_code) > formatting.WORK_CODE_WIDTH:
        yield _issue(
            Severity.ERROR,
            "WORK_CODE_TOO_LONG",
            f"Work code exceeds {formatting.WORK_CODE_WIDTH} characters",
            work,
            "work_code",
        )

    if work.title and len(work.title) > formatting.TITLE_WIDTH:
        yield _issue(
            Severity.WARNING,
            "TITLE_TRUNCATED",
            f"Title exceeds {formatting.TITLE_WIDTH} characters and will be truncated",
            work,
            "title",
        )

    if work.duration is not None:
        if work.duration < 0:
            yield _issue(
                Severity.ERROR,
                "INVALID_DURATION",
                "Duration cannot be negative",
                work,
                "duration",
            )
        elif work.duration > MAX_DURATION_SECONDS:
            yield _issue(
                Severity.WARNING,
                "DURATION_EXCEEDS_MAX",
                "Duration exceeds maximum CWR value (99:59:59)",
                work,
                "duration",
            )


def _check_writers(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    seen: set[str] = set()

    for writer in work.writers:
        if writer.code in seen:
            yield _issue(
                Severity.ERROR,
                "DUPLICATE_WRITER_CODE",
                f"Duplicate writer code: {writer.code}",
                work,
                "writers",
            )
        seen.add(writer.code)

        if not writer.last_name or not writer.last_name.strip():
            yield _issue(
                Severity.ERROR,
                "MISSING_WRITER_NAME",
                f"Writer {writer.code} missing last name",
                work,
                "writers",
            )

        if writer.role not in WRITER_ROLES:
            yield _issue(
                Severity.ERROR,
                "INVALID_WRITER_ROLE",
                f"Writer {writer.code} has invalid role: {writer.role}",
                work,
                "writers",
            )

        if writer.controlled:
            if not writer.ipi_name_number:
                yield _issue(
                    Severity.WARNING,
                    "CONTROLLED_WRITER_NO_IPI",
                    f"Controlled writer {writer.code} has no IPI - may cause rejection",
                    work,
                    "writers",
                )
            if not writer.pr_society:
                yield _issue(
                    Severity.WARNING,
                    "CONTROLLED_WRITER_NO_PR_SOCIETY",
                    f"Controlled writer {writer.code} has no PR society",
                    work,
                    "writers",
                )
            if not writer.publisher_code:
                yield _issue(
                    Severity.WARNING,
                    "CONTROLLED_WRITER_NO_PUBLISHER",
                    f"Controlled writer {writer.code} not linked to publisher",
                    work,
                    "writers",
                )

        if writer.ipi_name_number:
            result = validate_ipi(writer.ipi_name_number)
            if not result.is_valid:
                yield _issue(
                    Severity.ERROR,
                    "INVALID_WRITER_IPI",
                    f"Writer {writer.code} has invalid IPI: {result.error}",
                    work,
                    "writers",
                )

        for right, share in (
            ("PR", writer.pr_share),
            ("MR", writer.mr_share),
            ("SR", writer.sr_share),
        ):
            if share < 0 or share > 100:
                yield _issue(
                    Severity.ERROR,
                    f"INVALID_{right}_SHARE",
                    f"Writer {writer.code} {right} share out of range: {share}",
                    work,
                    "writers",
                )

        if (
            len(writer.last_name or "") > formatting.LAST_NAME_WIDTH
            or len(writer.first_name or "") > formatting.FIRST_NAME_WIDTH
        ):
            yield _issue(
                Severity.WARNING,
                "WRITER_NAME_TRUNCATED",
                f"Writer {writer.code} name exceeds field width and will be truncated",
                work,
                "writers",
            )


def _check_publishers(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    seen: set[str] = set()

    if work.controlled_writers and not work.publishers:
        yield _issue(
            Severity.WARNING,
            "NO_PUBLISHER_FOR_CONTROLLED",
            "Controlled writers exist but no publisher defined",
            work,
        )

    for pub in work.publishers:
        if pub.code in seen:
            yield _issue(
                Severity.ERROR,
                "DUPLICATE_PUBLISHER_CODE",
                f"Duplicate publisher code: {pub.code}",
                work,
                "publishers",
            )
        seen.add(pub.code)

        if not pub.name or not pub.name.strip():
            yield _issue(
                Severity.ERROR,
                "MISSING_PUBLISHER_NAME",
                f"Publisher {pub.code} missing name",
                work,
                "publishers",
            )

        if pub.ipi_name_number:
            result = validate_ipi(pub.ipi_name_number)
            if not result.is_valid:
                yield _issue(
                    Severity.ERROR,
                    "INVALID_PUBLISHER_IPI",
                    f"Publisher {pub.code} has invalid IPI: {result.error}",
                    work,
                    "publishers",
                )
        else:
            yield _issue(
                Severity.WARNING,
                "PUBLISHER_NO_IPI",
                f"Publisher {pub.code} has no IPI",
                work,
                "publishers",
            )

        if pub.role not in PUBLISHER_ROLES:
            yield _issue(
                Severity.ERROR,
                "INVALID_PUBLISHER_ROLE",
                f"Publisher {pub.code} has invalid role: {pub.role}",
                work,
                "publishers",
            )

        if any(s < 0 or s > 100 for s in (pub.pr_share, pub.mr_share, pub.sr_share)):
            yield _issue(
                Severity.ERROR,
                "INVALID_PUBLISHER_SHARE",
                f"Publisher {pub.code} share out of range",
                work,
                "publishers",
            )

        if pub.name and len(pub.name) > formatting.NAME_WIDTH:
            yield _issue(
                Severity.WARNING,
                "PUBLISHER_NAME_TRUNCATED",
                f"Publisher {pub.code} name exceeds {formatting.NAME_WIDTH} chars",
                work,
                "publishers",
            )

    for writer in work.controlled_writers:
        if writer.publisher_code and writer.publisher_code not in seen:
            yield _issue(
                Severity.ERROR,
                "WRITER_PUBLISHER_NOT_FOUND",
                f"Writer {writer.code} links to unknown publisher {writer.publisher_code}",
                work,
                "writers",
            )


def _check_share_totals(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    for right in ("pr", "mr", "sr"):
        total = sum(getattr(w, f"{right}_share") for w in work.writers) + sum(
            getattr(p, f"{right}_share") for p in work.publishers
        )
        if abs(total - 100) > _RIGHT_TOTAL_TOLERANCE:
            label = right.upper()
            yield _issue(
                Severity.ERROR,
                f"{label}_SHARES_NOT_100",
                f"{label} shares total {total:.2f}%, must equal 100%",
                work,
                "shares",
            )

    for writer in work.writers:
        if (
            abs(writer.pr_share - writer.mr_share) > 0.01
            or abs(writer.mr_share - writer.sr_share) > 0.01
        ):
            yield _issue(
                Severity.INFO,
                "DIFFERENT_RIGHT_SHARES",
                f"Writer {writer.code} has different shares for PR/MR/SR",
                work,
                "writers",
            )


def _check_alternate_titles(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    for alt in work.alternate_titles:
        if not alt.title or not alt.title.strip():
            yield _issue(
                Severity.WARNING,
                "EMPTY_ALT_TITLE",
                "Empty alternate title",
                work,
                "alternate_titles",
            )
            continue

        if len(alt.title) > formatting.TITLE_WIDTH:
            yield _issue(
                Severity.WARNING,
                "ALT_TITLE_TRUNCATED",
                f'Alternate title "{alt.title[:20]}..." exceeds {formatting.TITLE_WIDTH} chars',
                work,
                "alternate_titles",
            )

        if alt.title_type not in TITLE_TYPES:
            yield _issue(
                Severity.WARNING,
                "INVALID_TITLE_TYPE",
                f"Invalid title type: {alt.title_type}",
                work,
                "alternate_titles",
            )


def _check_recordings(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    seen: set[str] = set()

    for rec in work.recordings:
        if rec.isrc:
            result = validate_isrc(rec.isrc)
            key = result.normalized or rec.isrc
            if key in seen:
                yield _issue(
                    Severity.WARNING,
                    "DUPLICATE_ISRC",
                    f"Duplicate ISRC in work: {rec.isrc}",
                    work,
                    "recordings",
                )
            seen.add(key)

            if not result.is_valid:
                yield _issue(
                    Severity.ERROR,
                    "INVALID_ISRC",
                    f"Invalid ISRC: {result.error}",
                    work,
                    "recordings",
                )

        if rec.title and len(rec.title) > formatting.TITLE_WIDTH:
            yield _issue(
                Severity.WARNING,
                "RECORDING_TITLE_TRUNCATED",
                f"Recording title exceeds {formatting.TITLE_WIDTH} chars",
                work,
                "recordings",
            )

        if rec.duration is not None and rec.duration < 0:
            yield _issue(
                Severity.ERROR,
                "INVALID_RECORDING_DURATION",
                "Recording duration cannot be negative",
                work,
                "recordings",
            )


def _check_version_rules(work: Work, version: CWRVersion) -> Iterator[ValidationIssue]:
    if version.is_v3:
        for writer in work.controlled_writers:
            if not writer.ipi_name_number:
                yield _issue(
                    Severity.ERROR,
                    "CWR3_REQUIRES_IPI",
                    f"CWR {version.label} requires IPI for controlled writer {writer.code}",
                    work,
                    "writers",
                )

    if version is CWRVersion.V21:
        for writer in work.writers:
            if writer.ipi_base_number:
                yield _issue(
                    Severity.INFO,
                    "CWR21_IPI_BASE_IGNORED",
                    f"IPI Base Number ignored in CWR 2.1 for writer {writer.code}",
                    work,
                    "writers",
                )


_CHECKS: tuple[_Check, ...] = (
    _check_required,
    _check_identifiers,
    _check_writers,
    _check_publishers,
    _check_share_totals,
    _check_alternate_titles,
    _check_recordings,
    _check_version_rules,
)


def validate_works(
    works: list[Work], version: CWRVersion | str = CWRVersion.V21
) -> ValidationReport:
    """Run all pre-flight checks on a batch of works.

    Parameters
    ----------
    works : list[Work]
        Works to inspect.
    version : CWRVersion | str, optional
        Target CWR version, by default 2.1.

    Returns
    -------
    ValidationReport
        Issues split by severity, with per-batch counts.
    """
    version = CWRVersion.parse(version)

    issues = [issue for work in works for check in _CHECKS for issue in check(work, version)]

    errors = [i for i in issues if i.severity is Severity.ERROR]
    failing = {i.work_code for i in errors}

    return ValidationReport(
        errors=errors,
        warnings=[i for i in issues if i.severity is Severity.WARNING],
        info=[i for i in issues if i.severity is Severity.INFO],
        total_works=len(works),
        valid_works=sum(1 for w in works if w.work_code not in failing),
    )


def is_work_ready(work: Work, version: CWRVersion | str = CWRVersion.V21) -> bool:
    """Quick check whether a single work has no blocking issue."""
    return validate_works([work], version).can_generate
