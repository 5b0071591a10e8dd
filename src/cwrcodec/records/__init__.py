"""CWR record builders.

One builder per record type. Every builder takes the GenerationContext
first and dispatches on its version through a layout table, so the four
wire layouts (2.1, 2.2, 3.0, 3.1) are rendered by a single code path.
"""

from cwrcodec.records.base import family_layouts, record_prefix, render
from cwrcodec.records.parties import (
    WORLD_TERRITORY,
    build_opu,
    build_owr,
    build_pwr,
    build_spt,
    build_spu,
    build_swr,
    build_swt,
)
from cwrcodec.records.transmission import (
    GROUP_ID,
    build_grh,
    build_grt,
    build_hdr,
    build_trl,
)
from cwrcodec.records.work import (
    build_alt,
    build_per,
    build_rec,
    build_wrk,
    work_record_type,
)

__all__ = [
    # Envelope
    "build_hdr",
    "build_grh",
    "build_grt",
    "build_trl",
    "GROUP_ID",
    # Work
    "build_wrk",
    "build_alt",
    "build_per",
    "build_rec",
    "work_record_type",
    # Parties
    "build_spu",
    "build_spt",
    "build_swr",
    "build_swt",
    "build_pwr",
    "build_opu",
    "build_owr",
    "WORLD_TERRITORY",
    # Dispatch
    "family_layouts",
    "record_prefix",
    "render",
]
