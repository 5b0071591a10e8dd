"""Fixed-width field formatting for CWR records."""

from cwrcodec.formatting.fixed_width import (
    CHAIN_WIDTH,
    DURATION_MAX_SECONDS,
    FILENAME_WIDTH,
    FIRST_NAME_WIDTH,
    GROUP_ID_WIDTH,
    ISNI_WIDTH,
    LANGUAGE_WIDTH,
    LAST_NAME_WIDTH,
    NAME_WIDTH,
    PARTY_CODE_WIDTH,
    ROLE_WIDTH,
    SAAN_WIDTH,
    SENDER_IPI_WIDTH,
    SEQUENCE_WIDTH,
    SOCIETY_V3_WIDTH,
    SOCIETY_WIDTH,
    SOFTWARE_WIDTH,
    SUBMITTER_CODE_WIDTH_V2,
    SUBMITTER_CODE_WIDTH_V3,
    TERRITORY_SEQ_WIDTH,
    TITLE_TYPE_WIDTH,
    TITLE_WIDTH,
    VERSION_TYPE_WIDTH,
    WORK_CODE_WIDTH,
    build_record,
    format_code,
    format_date,
    format_duration,
    format_ipi,
    format_ipi_base,
    format_isrc,
    format_iswc,
    format_sequence,
    format_share,
    format_society,
    format_text,
    format_time,
    ljust,
    rjust,
    spaces,
    zeros,
    zfill,
)

__all__ = [
    "CHAIN_WIDTH",
    "DURATION_MAX_SECONDS",
    "FILENAME_WIDTH",
    "FIRST_NAME_WIDTH",
    "GROUP_ID_WIDTH",
    "ISNI_WIDTH",
    "LANGUAGE_WIDTH",
    "LAST_NAME_WIDTH",
    "NAME_WIDTH",
    "PARTY_CODE_WIDTH",
    "ROLE_WIDTH",
    "SAAN_WIDTH",
    "SENDER_IPI_WIDTH",
    "SEQUENCE_WIDTH",
    "SOCIETY_V3_WIDTH",
    "SOCIETY_WIDTH",
    "SOFTWARE_WIDTH",
    "SUBMITTER_CODE_WIDTH_V2",
    "SUBMITTER_CODE_WIDTH_V3",
    "TERRITORY_SEQ_WIDTH",
    "TITLE_TYPE_WIDTH",
    "TITLE_WIDTH",
    "VERSION_TYPE_WIDTH",
    "WORK_CODE_WIDTH",
    "build_record",
    "format_code",
    "format_date",
    "format_duration",
    "format_ipi",
    "format_ipi_base",
    "format_isrc",
    "format_iswc",
    "format_sequence",
    "format_share",
    "format_society",
    "format_text",
    "format_time",
    "ljust",
    "rjust",
    "spaces",
    "zeros",
    "zfill",
]
