"""Work-level records: the transaction header and its ALT, PER and REC details."""

from cwrcodec.formatting import (
    FIRST_NAME_WIDTH,
    ISNI_WIDTH,
    LANGUAGE_WIDTH,
    LAST_NAME_WIDTH,
    TITLE_TYPE_WIDTH,
    TITLE_WIDTH,
    VERSION_TYPE_WIDTH,
    WORK_CODE_WIDTH,
    build_record,
    format_code,
    format_date,
    format_duration,
    format_ipi,
    format_isrc,
    format_iswc,
    format_text,
    spaces,
    zeros,
)
from cwrcodec.models import (
    AlternateTitle,
    CWRVersion,
    GenerationContext,
    Performer,
    Recording,
    Work,
)

from .base import family_layouts, record_prefix, render

__all__ = ["build_wrk", "build_alt", "build_per", "build_rec", "work_record_type"]

_MUSICAL_WORK_DISTINCTION = "UNC"
_TRANSACTION_HEADER_SEQ = 0


def work_record_type(context: GenerationContext) -> str:
    """NWR or REV before 3.0; always WRK from 3.0 on."""
    return "WRK" if context.version.is_v3 else context.transaction_type.value


# ---------------------------------------------------------------------------
# NWR / REV / WRK
# ---------------------------------------------------------------------------


def _work_identity(work: Work) -> str:
    return build_record(
        format_text(work.title, TITLE_WIDTH),
        format_code(work.language, LANGUAGE_WIDTH),
        format_code(work.work_code, WORK_CODE_WIDTH),
        format_iswc(work.iswc),
        zeros(8),  # copyright date
        spaces(12),  # copyright number
        _MUSICAL_WORK_DISTINCTION,
        format_duration(work.duration),
        work.recorded_indicator or "U",
        spaces(6),  # text-music relationship, composite type
        format_code(work.version_type or "ORI", VERSION_TYPE_WIDTH),
    )


def _work_trailer() -> str:
    return build_record(
        "N",  # grand rights
        zeros(11),  # composite component count
        spaces(51),
        "N",  # priority
    )


def _wrk_v2(context: GenerationContext, work: Work, transaction_seq: int) -> str:
    return build_record(
        record_prefix(work_record_type(context), transaction_seq, _TRANSACTION_HEADER_SEQ),
        _work_identity(work),
        spaces(2),  # excerpt type
        spaces(40),  # contact name and id
        _work_trailer(),
    )


def _wrk_v3(context: GenerationContext, work: Work, transaction_seq: int) -> str:
    return build_record(
        record_prefix(work_record_type(context), transaction_seq, _TRANSACTION_HEADER_SEQ),
        _work_identity(work),
        _work_trailer(),
    )


_WRK_LAYOUTS = family_layouts(_wrk_v2, _wrk_v3)


def build_wrk(context: GenerationContext, work: Work, transaction_seq: int) -> str:
    """Transaction header record for one work (record sequence 0).

    Parameters
    ----------
    context : GenerationContext
        Export configuration; decides NWR/REV/WRK and the layout.
    work : Work
        Work being registered.
    transaction_seq : int
        Transaction sequence number of the work.

    Returns
    -------
    str
        Work record line.
    """
    return render(_WRK_LAYOUTS, context, work, transaction_seq)


# ---------------------------------------------------------------------------
# ALT
# ---------------------------------------------------------------------------


def _alt(
    context: GenerationContext,
    title: AlternateTitle,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("ALT", transaction_seq, record_seq),
        format_text(title.title, TITLE_WIDTH),
        format_code(title.title_type or "AT", TITLE_TYPE_WIDTH),
        format_code(title.language, LANGUAGE_WIDTH),
    )


_ALT_LAYOUTS = family_layouts(_alt, _alt)


def build_alt(
    context: GenerationContext,
    title: AlternateTitle,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Alternate title record (same layout in every version)."""
    return render(_ALT_LAYOUTS, context, title, transaction_seq, record_seq)


# ---------------------------------------------------------------------------
# PER
# ---------------------------------------------------------------------------


def _per_v2(
    context: GenerationContext,
    performer: Performer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("PER", transaction_seq, record_seq),
        format_text(performer.last_name, LAST_NAME_WIDTH),
        format_text(performer.first_name, FIRST_NAME_WIDTH),
        spaces(24),  # IPI name and base numbers
    )


def _per_v3(
    context: GenerationContext,
    performer: Performer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("PER", transaction_seq, record_seq),
        format_text(performer.last_name, LAST_NAME_WIDTH),
        format_text(performer.first_name, FIRST_NAME_WIDTH),
        format_ipi(performer.ipi_name_number),
        format_code(performer.isni, ISNI_WIDTH),
        spaces(5),
    )


_PER_LAYOUTS = family_layouts(_per_v2, _per_v3)


def build_per(
    context: GenerationContext,
    performer: Performer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Performing artist record; 3.x adds the performer IPI and ISNI."""
    return render(_PER_LAYOUTS, context, performer, transaction_seq, record_seq)


# ---------------------------------------------------------------------------
# REC
# ---------------------------------------------------------------------------


def _rec_v21(
    context: GenerationContext,
    recording: Recording,
    work_code: str,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("REC", transaction_seq, record_seq),
        format_date(recording.release_date),
        spaces(60),  # first album title
        format_duration(recording.duration),
        spaces(5),
        spaces(151),  # album label, catalog number, EAN, media type
        format_isrc(recording.isrc),
        spaces(5),
    )


def _rec_v22(
    context: GenerationContext,
    recording: Recording,
    work_code: str,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        _rec_v21(context, recording, work_code, transaction_seq, record_seq),
        format_text(recording.title, TITLE_WIDTH),
        format_text(recording.version_title, TITLE_WIDTH),
        format_text(recording.display_artist, TITLE_WIDTH),
        format_text(recording.record_label, TITLE_WIDTH),
        spaces(20),  # ISRC validity
        format_code(work_code, WORK_CODE_WIDTH),
    )


def _rec_v3(
    context: GenerationContext,
    recording: Recording,
    work_code: str,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("REC", transaction_seq, record_seq),
        format_date(recording.release_date),
        format_duration(recording.duration),
        format_isrc(recording.isrc),
        format_text(recording.title, TITLE_WIDTH),
        format_text(recording.version_title, TITLE_WIDTH),
        format_text(recording.display_artist, TITLE_WIDTH),
        spaces(11),
        spaces(ISNI_WIDTH),  # display artist ISNI
        format_text(recording.record_label, TITLE_WIDTH),
        spaces(20),
        format_code(work_code, WORK_CODE_WIDTH),
    )


_REC_LAYOUTS = {
    CWRVersion.V21: _rec_v21,
    CWRVersion.V22: _rec_v22,
    CWRVersion.V30: _rec_v3,
    CWRVersion.V31: _rec_v3,
}


def build_rec(
    context: GenerationContext,
    recording: Recording,
    work_code: str,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Recording detail record.

    The field set grows with the version: 2.1 carries date, duration and
    ISRC only; 2.2 appends titles, artist, label and the work code; 3.x
    reorders these and adds an ISNI slot.
    """
    return render(_REC_LAYOUTS, context, recording, work_code, transaction_seq, record_seq)
