"""Transmission and group envelope records: HDR, GRH, GRT, TRL."""

import re

from cwrcodec.formatting import (
    FILENAME_WIDTH,
    GROUP_ID_WIDTH,
    NAME_WIDTH,
    SENDER_IPI_WIDTH,
    SEQUENCE_WIDTH,
    SOFTWARE_WIDTH,
    build_record,
    format_code,
    format_date,
    format_sequence,
    format_text,
    format_time,
    rjust,
    spaces,
    zeros,
)
from cwrcodec.models import CWRVersion, GenerationContext

from .base import family_layouts, render

__all__ = ["build_hdr", "build_grh", "build_grt", "build_trl", "GROUP_ID"]

# A generated file always carries exactly one group
GROUP_ID = 1

_SENDER_TYPE = "PB"
_EDI_VERSION = "01.10"

_GROUP_VERSIONS = {
    CWRVersion.V21: "02.10",
    CWRVersion.V22: "02.20",
    CWRVersion.V30: "03.00",
    CWRVersion.V31: "03.10",
}

_HEADER_VERSIONS = {
    CWRVersion.V30: "3.0000",
    CWRVersion.V31: "3.1000",
}


def _group_id() -> str:
    return format_sequence(GROUP_ID, GROUP_ID_WIDTH)


# ---------------------------------------------------------------------------
# HDR
# ---------------------------------------------------------------------------


def _hdr_v2(context: GenerationContext) -> str:
    created = context.creation_datetime
    ipi_digits = re.sub(r"\D", "", context.submitter_ipi or "")
    return build_record(
        "HDR",
        _SENDER_TYPE,
        rjust(ipi_digits[-SENDER_IPI_WIDTH:], SENDER_IPI_WIDTH),
        format_text(context.submitter_name, NAME_WIDTH),
        _EDI_VERSION,
        format_date(created),
        format_time(created),
        format_date(created),  # transmission date
        spaces(15),  # character set
    )


def _hdr_v3(context: GenerationContext) -> str:
    created = context.creation_datetime
    return build_record(
        "HDR",
        _SENDER_TYPE,
        format_code(context.submitter_code, context.version.submitter_code_width),
        format_text(context.submitter_name, NAME_WIDTH),
        spaces(11),
        format_date(created),
        format_time(created),
        format_date(created),
        spaces(15),
        _HEADER_VERSIONS[context.version],
        format_code(context.software_name, SOFTWARE_WIDTH),
        format_code(context.software_version, SOFTWARE_WIDTH),
        format_code(context.filename, FILENAME_WIDTH),
    )


_HDR_LAYOUTS = family_layouts(_hdr_v2, _hdr_v3)


def build_hdr(context: GenerationContext) -> str:
    """Transmission header.

    2.x headers identify the sender by the last 9 digits of the submitter
    IPI; 3.x headers carry the submitter code, the header version and the
    software name, version and filename.
    """
    return render(_HDR_LAYOUTS, context)


# ---------------------------------------------------------------------------
# GRH
# ---------------------------------------------------------------------------


def _grh_v2(context: GenerationContext) -> str:
    return build_record(
        "GRH",
        context.transaction_type.value,
        _group_id(),
        _GROUP_VERSIONS[context.version],
        zeros(10),  # batch request
        spaces(2),  # submission/distribution type
    )


def _grh_v3(context: GenerationContext) -> str:
    return build_record(
        "GRH",
        context.transaction_type.value,
        _group_id(),
        _GROUP_VERSIONS[context.version],
        zeros(10),
    )


_GRH_LAYOUTS = family_layouts(_grh_v2, _grh_v3)


def build_grh(context: GenerationContext) -> str:
    """Group header for the single transaction group of the file."""
    return render(_GRH_LAYOUTS, context)


# ---------------------------------------------------------------------------
# GRT / TRL
# ---------------------------------------------------------------------------


def _counts(transaction_count: int, record_count: int) -> str:
    return build_record(
        format_sequence(transaction_count, SEQUENCE_WIDTH),
        format_sequence(record_count, SEQUENCE_WIDTH),
    )


def _grt_v2(context: GenerationContext, transaction_count: int, record_count: int) -> str:
    return build_record(
        "GRT",
        _group_id(),
        _counts(transaction_count, record_count),
        spaces(3),  # currency indicator
        zeros(10),  # total monetary value
    )


def _grt_v3(context: GenerationContext, transaction_count: int, record_count: int) -> str:
    return build_record("GRT", _group_id(), _counts(transaction_count, record_count))


_GRT_LAYOUTS = family_layouts(_grt_v2, _grt_v3)


def build_grt(context: GenerationContext, transaction_count: int, record_count: int) -> str:
    """Group trailer with the group's transaction and record counts.

    Parameters
    ----------
    context : GenerationContext
        Export configuration.
    transaction_count : int
        Number of transactions in the group.
    record_count : int
        Records in the group, including GRH and GRT.

    Returns
    -------
    str
        GRT record line.
    """
    return render(_GRT_LAYOUTS, context, transaction_count, record_count)


def _trl(context: GenerationContext, transaction_count: int, record_count: int) -> str:
    return build_record("TRL", _group_id(), _counts(transaction_count, record_count))


_TRL_LAYOUTS = family_layouts(_trl, _trl)


def build_trl(context: GenerationContext, transaction_count: int, record_count: int) -> str:
    """Transmission trailer; ``record_count`` covers every line of the file."""
    return render(_TRL_LAYOUTS, context, transaction_count, record_count)
