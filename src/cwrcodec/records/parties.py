"""Interested-party records: publishers, writers and their territory shares.

Up to 2.2 the per-right society and share pairs sit inline in SPU/SWR/OWR.
From 3.0 they move to the companion SPT/SWT records, which then also carry
4-digit society codes and a post-term collection status.
"""

from cwrcodec.formatting import (
    CHAIN_WIDTH,
    FIRST_NAME_WIDTH,
    LAST_NAME_WIDTH,
    NAME_WIDTH,
    PARTY_CODE_WIDTH,
    ROLE_WIDTH,
    SAAN_WIDTH,
    SOCIETY_V3_WIDTH,
    TERRITORY_SEQ_WIDTH,
    build_record,
    format_code,
    format_ipi,
    format_ipi_base,
    format_sequence,
    format_share,
    format_society,
    format_text,
    spaces,
    zeros,
)
from cwrcodec.models import CWRVersion, GenerationContext, Publisher, Writer

from .base import family_layouts, record_prefix, render

__all__ = [
    "build_spu",
    "build_spt",
    "build_swr",
    "build_swt",
    "build_pwr",
    "build_opu",
    "build_owr",
    "WORLD_TERRITORY",
]

# TIS code for the whole world
WORLD_TERRITORY = "2136"

_INCLUDE = "I"
_TERRITORY_SEQ = 1


def _rights_inline(party: Writer | Publisher) -> str:
    """Society and share for PR, MR and SR, 2.x inline style."""
    return build_record(
        format_society(party.pr_society),
        format_share(party.pr_share),
        format_society(party.mr_society),
        format_share(party.mr_share),
        format_society(party.sr_society),
        format_share(party.sr_share),
    )


def _shares(party: Writer | Publisher) -> str:
    return build_record(
        format_share(party.pr_share),
        format_share(party.mr_share),
        format_share(party.sr_share),
    )


def _territory_v3(party: Writer | Publisher) -> str:
    """Body shared by SPT and SWT from 3.0 on."""
    return build_record(
        format_sequence(_TERRITORY_SEQ, TERRITORY_SEQ_WIDTH),
        format_code(party.code, PARTY_CODE_WIDTH),
        _shares(party),
        _INCLUDE,
        WORLD_TERRITORY,
        format_society(party.pr_society, SOCIETY_V3_WIDTH),
        format_society(party.mr_society, SOCIETY_V3_WIDTH),
        format_society(party.sr_society, SOCIETY_V3_WIDTH),
        spaces(32),
        zeros(4),  # post-term collection status
    )


def _writer_names(writer: Writer) -> str:
    return build_record(
        format_code(writer.code, PARTY_CODE_WIDTH),
        format_text(writer.last_name, LAST_NAME_WIDTH),
        format_text(writer.first_name, FIRST_NAME_WIDTH),
    )


# ---------------------------------------------------------------------------
# SPU / SPT
# ---------------------------------------------------------------------------


def _spu_v2(
    context: GenerationContext,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SPU", transaction_seq, record_seq),
        format_sequence(publisher.chain_sequence, CHAIN_WIDTH),
        format_code(publisher.code, PARTY_CODE_WIDTH),
        format_text(publisher.name, NAME_WIDTH),
        " ",  # publisher unknown indicator
        format_code(publisher.role or "E", ROLE_WIDTH),
        zeros(9),  # tax id
        format_ipi(publisher.ipi_name_number),
        spaces(14),  # submitter agreement number
        _rights_inline(publisher),
        " N ",  # special agreements, first recording refusal, filler
        format_ipi_base(publisher.ipi_base_number),
        spaces(14),  # ISAC
        format_code(publisher.saan, SAAN_WIDTH),
        spaces(2),  # agreement type
        " ",  # USA license indicator
    )


def _spu_v3(
    context: GenerationContext,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SPU", transaction_seq, record_seq),
        format_sequence(publisher.chain_sequence, CHAIN_WIDTH),
        format_code(publisher.code, PARTY_CODE_WIDTH),
        format_text(publisher.name, NAME_WIDTH),
        "N",
        format_code(publisher.role or "E", ROLE_WIDTH),
        zeros(9),
        format_ipi(publisher.ipi_name_number),
        format_ipi_base(publisher.ipi_base_number),
        " ",
    )


_SPU_LAYOUTS = family_layouts(_spu_v2, _spu_v3)


def build_spu(
    context: GenerationContext,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Controlled publisher record."""
    return render(_SPU_LAYOUTS, context, publisher, transaction_seq, record_seq)


def _spt_v2(
    context: GenerationContext,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SPT", transaction_seq, record_seq),
        format_code(publisher.code, PARTY_CODE_WIDTH),
        spaces(6),
        _shares(publisher),
        _INCLUDE,
        WORLD_TERRITORY,
        "N",  # shares change
        format_sequence(_TERRITORY_SEQ, TERRITORY_SEQ_WIDTH),
    )


def _spt_v3(
    context: GenerationContext,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SPT", transaction_seq, record_seq),
        _territory_v3(publisher),
    )


_SPT_LAYOUTS = family_layouts(_spt_v2, _spt_v3)


def build_spt(
    context: GenerationContext,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Publisher territory of control (world, all rights)."""
    return render(_SPT_LAYOUTS, context, publisher, transaction_seq, record_seq)


# ---------------------------------------------------------------------------
# SWR / SWT / OWR
# ---------------------------------------------------------------------------


def _swr_v2(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SWR", transaction_seq, record_seq),
        _writer_names(writer),
        " ",  # writer unknown indicator
        format_code(writer.role, ROLE_WIDTH),
        zeros(9),  # tax id
        format_ipi(writer.ipi_name_number),
        _rights_inline(writer),
        " N  ",  # reversionary, first recording refusal, work for hire
        format_ipi_base(writer.ipi_base_number),
        spaces(13),
    )


def _swr_v3(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SWR", transaction_seq, record_seq),
        _writer_names(writer),
        "N",
        format_code(writer.role, ROLE_WIDTH),
        format_ipi(writer.ipi_name_number),
        format_ipi_base(writer.ipi_base_number),
        " N  ",
    )


_SWR_LAYOUTS = family_layouts(_swr_v2, _swr_v3)


def build_swr(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Controlled writer record."""
    return render(_SWR_LAYOUTS, context, writer, transaction_seq, record_seq)


def _swt_v2(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SWT", transaction_seq, record_seq),
        format_code(writer.code, PARTY_CODE_WIDTH),
        _shares(writer),
        _INCLUDE,
        WORLD_TERRITORY,
        "N",
        format_sequence(_TERRITORY_SEQ, TERRITORY_SEQ_WIDTH),
    )


def _swt_v3(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("SWT", transaction_seq, record_seq),
        _territory_v3(writer),
    )


_SWT_LAYOUTS = family_layouts(_swt_v2, _swt_v3)


def build_swt(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Writer territory of control (world, all rights)."""
    return render(_SWT_LAYOUTS, context, writer, transaction_seq, record_seq)


def _owr(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("OWR", transaction_seq, record_seq),
        _writer_names(writer),
        " ",
        format_code(writer.role, ROLE_WIDTH),
        zeros(9),
        format_ipi(writer.ipi_name_number),
        _rights_inline(writer),
        spaces(4),
        format_ipi_base(writer.ipi_base_number),
        spaces(13),
    )


_OWR_LAYOUTS = family_layouts(_owr, _owr)


def build_owr(
    context: GenerationContext,
    writer: Writer,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Uncontrolled writer record, kept for share completeness."""
    return render(_OWR_LAYOUTS, context, writer, transaction_seq, record_seq)


# ---------------------------------------------------------------------------
# PWR
# ---------------------------------------------------------------------------


def _pwr_v21(
    context: GenerationContext,
    writer: Writer,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("PWR", transaction_seq, record_seq),
        format_code(publisher.code, PARTY_CODE_WIDTH),
        format_text(publisher.name, NAME_WIDTH),
        spaces(14),  # submitter agreement number
        format_code(publisher.saan, SAAN_WIDTH),
        format_code(writer.code, PARTY_CODE_WIDTH),
    )


def _pwr_v22(
    context: GenerationContext,
    writer: Writer,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        _pwr_v21(context, writer, publisher, transaction_seq, record_seq),
        format_sequence(publisher.chain_sequence, CHAIN_WIDTH),
    )


def _pwr_v3(
    context: GenerationContext,
    writer: Writer,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    return build_record(
        record_prefix("PWR", transaction_seq, record_seq),
        format_sequence(publisher.chain_sequence, CHAIN_WIDTH),
        format_code(publisher.code, PARTY_CODE_WIDTH),
        format_code(writer.code, PARTY_CODE_WIDTH),
        spaces(14),
        format_society(publisher.pr_society, SOCIETY_V3_WIDTH),
        format_code(publisher.saan, SAAN_WIDTH),
        spaces(2),  # agreement type
    )


_PWR_LAYOUTS = {
    CWRVersion.V21: _pwr_v21,
    CWRVersion.V22: _pwr_v22,
    CWRVersion.V30: _pwr_v3,
    CWRVersion.V31: _pwr_v3,
}


def build_pwr(
    context: GenerationContext,
    writer: Writer,
    publisher: Publisher,
    transaction_seq: int,
    record_seq: int,
) -> str:
    """Link between a controlled writer and the publisher representing them.

    2.2 appends the publisher sequence to the 2.1 layout; 3.x keys the link
    by chain sequence and codes instead of the publisher name.
    """
    return render(_PWR_LAYOUTS, context, writer, publisher, transaction_seq, record_seq)


# ---------------------------------------------------------------------------
# OPU
# ---------------------------------------------------------------------------


def _opu(
    context: GenerationContext,
    shares: tuple[float, float, float],
    transaction_seq: int,
    record_seq: int,
    chain_sequence: int,
) -> str:
    pr_share, mr_share, sr_share = shares
    return build_record(
        record_prefix("OPU", transaction_seq, record_seq),
        format_sequence(chain_sequence, CHAIN_WIDTH),
        spaces(PARTY_CODE_WIDTH + NAME_WIDTH),  # no code or name: publisher unknown
        "YE ",  # unknown indicator, role E
        zeros(11),
        zeros(9),
        spaces(14),
        spaces(3),
        format_share(pr_share),
        spaces(3),
        format_share(mr_share),
        spaces(3),
        format_share(sr_share),
        " N",
        spaces(45),
    )


_OPU_LAYOUTS = family_layouts(_opu, _opu)


def build_opu(
    context: GenerationContext,
    shares: tuple[float, float, float],
    transaction_seq: int,
    record_seq: int,
    chain_sequence: int = 1,
) -> str:
    """Synthetic unknown publisher holding the uncontrolled remainder.

    Parameters
    ----------
    context : GenerationContext
        Export configuration.
    shares : tuple[float, float, float]
        PR, MR and SR ownership shares in percent.
    transaction_seq : int
        Transaction sequence number.
    record_seq : int
        Record sequence number within the transaction.
    chain_sequence : int, optional
        Publisher chain sequence, by default 1.

    Returns
    -------
    str
        OPU record line (same layout in every version).
    """
    return render(_OPU_LAYOUTS, context, shares, transaction_seq, record_seq, chain_sequence)
