"""Share calculation for CWR interested parties.

A controlled writer's overall share is split between the writer and the
publisher representing them (the manuscript share, 50% by default). The
publisher side is accumulated per publisher code. Uncontrolled writers keep
their full share; the publisher side of their work is covered by a
synthetic OPU record at generation time.
"""

from dataclasses import dataclass, field, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

from cwrcodec.models import Publisher, Work, Writer

__all__ = [
    "RightShares",
    "ShareInput",
    "ShareCalculation",
    "calculate_shares",
    "calculate_ownership",
    "uncontrolled_publisher_shares",
    "DEFAULT_MANUSCRIPT_SHARE",
    "OPU_MAX_SHARE",
]

DEFAULT_MANUSCRIPT_SHARE = 50.0

# Cap of the synthetic OPU share, assuming a 50/50 writer/publisher split
OPU_MAX_SHARE = 50.0

_WRITER_TOTAL_TOLERANCE = 0.01
_RIGHT_TOTAL_TOLERANCE = 0.1


class RightShares(NamedTuple):
    """Per-right percentages (performance, mechanical, synchronization)."""

    pr: float
    mr: float
    sr: float

    def any_positive(self) -> bool:
        """True if at least one right has a positive share."""
        return self.pr > 0 or self.mr > 0 or self.sr > 0


@dataclass(frozen=True)
class ShareInput:
    """Writer with the overall share to be split.

    Attributes
    ----------
    writer : Writer
        Writer identity; ``controlled`` and ``publisher_code`` drive the split.
    share : float
        Overall share of the work in percent.
    manuscript_share : float | None
        Part of the share ceded to the publisher in percent; None uses
        DEFAULT_MANUSCRIPT_SHARE.
    """

    writer: Writer
    share: float
    manuscript_share: float | None = None


@dataclass(frozen=True)
class ShareCalculation:
    """Writers and publishers with per-right shares filled in.

    Attributes
    ----------
    writers : list[Writer]
        Writers with their PR/MR/SR shares, in input order.
    publishers : list[Publisher]
        Linked publishers with accumulated shares and chain sequences in
        first-seen order.
    totals : RightShares
        Sum of all writer and publisher shares per right.
    controlled : RightShares
        Shares held by controlled writers and their publishers.
    warnings : list[str]
        Share inconsistencies found during the calculation.
    """

    writers: list[Writer] = field(default_factory=list)
    publishers: list[Publisher] = field(default_factory=list)
    totals: RightShares = RightShares(0.0, 0.0, 0.0)
    controlled: RightShares = RightShares(0.0, 0.0, 0.0)
    warnings: list[str] = field(default_factory=list)


def _round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _split(entry: ShareInput) -> tuple[float, float]:
    """Return (writer part, publisher part) of one writer's share."""
    if not entry.writer.controlled:
        return entry.share, 0.0

    manuscript = (
        DEFAULT_MANUSCRIPT_SHARE if entry.manuscript_share is None else entry.manuscript_share
    )
    writer_part = _round2(entry.share * (100 - manuscript) / 100)
    publisher_part = _round2(entry.share * manuscript / 100)
    return writer_part, publisher_part


def calculate_shares(
    entries: list[ShareInput],
    publishers: list[Publisher],
) -> ShareCalculation:
    """Split writer shares between writers and their linked publishers.

    The same split applies to all three rights.

    Parameters
    ----------
    entries : list[ShareInput]
        Writers with their overall shares.
    publishers : list[Publisher]
        Publishers the writers may link to by code.

    Returns
    -------
    ShareCalculation
        Filled-in writers and publishers, totals and warnings.
    """
    warnings: list[str] = []

    overall = sum(e.share for e in entries)
    if abs(overall - 100) > _WRITER_TOTAL_TOLERANCE:
        warnings.append(f"Writer shares total {overall:.2f}%, expected 100%")

    by_code = {p.code: p for p in publishers}
    linked: dict[str, float] = {}
    writers: list[Writer] = []
    total = 0.0
    controlled = 0.0

    for entry in entries:
        writer_part, publisher_part = _split(entry)
        writer = entry.writer
        writers.append(
            replace(writer, pr_share=writer_part, mr_share=writer_part, sr_share=writer_part)
        )
        total += writer_part

        if not (writer.controlled and writer.publisher_code):
            continue

        if writer.publisher_code not in by_code:
            warnings.append(
                f"Writer {writer.code} linked to unknown publisher {writer.publisher_code}"
            )
            continue

        linked[writer.publisher_code] = linked.get(writer.publisher_code, 0.0) + publisher_part
        total += publisher_part
        controlled += writer_part + publisher_part

    result_publishers = [
        replace(
            by_code[code],
            role="E",
            pr_share=_round2(share),
            mr_share=_round2(share),
            sr_share=_round2(share),
            chain_sequence=index,
        )
        for index, (code, share) in enumerate(linked.items(), start=1)
    ]

    totals = RightShares(total, total, total)
    for right, value in zip(("PR", "MR", "SR"), totals, strict=True):
        if abs(value - 100) > _RIGHT_TOTAL_TOLERANCE:
            warnings.append(f"Total {right} shares = {value:.2f}%, expected 100%")

    return ShareCalculation(
        writers=writers,
        publishers=result_publishers,
        totals=totals,
        controlled=RightShares(controlled, controlled, controlled),
        warnings=warnings,
    )


def calculate_ownership(writers: list[Writer], publishers: list[Publisher]) -> RightShares:
    """Shares held by the submitter: controlled writers plus all publishers."""
    controlled = [w for w in writers if w.controlled]
    return RightShares(
        pr=sum(w.pr_share for w in controlled) + sum(p.pr_share for p in publishers),
        mr=sum(w.mr_share for w in controlled) + sum(p.mr_share for p in publishers),
        sr=sum(w.sr_share for w in controlled) + sum(p.sr_share for p in publishers),
    )


def uncontrolled_publisher_shares(work: Work) -> RightShares:
    """Shares of the synthetic OPU record of a work without publishers.

    Each right gets ``min(50, 100 - sum of all writer shares)``. A negative
    result (writers over 100%) means no OPU share for that right.
    """
    return RightShares(
        pr=min(OPU_MAX_SHARE, 100 - sum(w.pr_share for w in work.writers)),
        mr=min(OPU_MAX_SHARE, 100 - sum(w.mr_share for w in work.writers)),
        sr=min(OPU_MAX_SHARE, 100 - sum(w.sr_share for w in work.writers)),
    )
