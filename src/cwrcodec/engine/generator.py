"""CWR export orchestration.

A single generator serves all four wire layouts: the version lives on the
GenerationContext and every record builder dispatches on it. Per-export
state is kept in a batch accumulator created inside each call, so
concurrent exports never share mutable state.

File structure:
    HDR, GRH
    per work: NWR/REV/WRK, [SPU, SPT]*, [OPU]?, [SWR, SWT, [PWR]?]*,
              [OWR]*, [ALT]*, [PER]*, [REC]*
    GRT, TRL
"""

import time
from dataclasses import dataclass, field

from cwrcodec.audit.logger import AuditLogger
from cwrcodec.engine.shares import uncontrolled_publisher_shares
from cwrcodec.errors import CWRGenerationError
from cwrcodec.models import RECORD_SEPARATOR, GenerationContext, GenerationResult, Work
from cwrcodec.records import (
    build_alt,
    build_grh,
    build_grt,
    build_hdr,
    build_opu,
    build_owr,
    build_per,
    build_pwr,
    build_rec,
    build_spt,
    build_spu,
    build_swr,
    build_swt,
    build_trl,
    build_wrk,
)

__all__ = ["generate", "check_works", "WorkWarning", "STAGE"]

STAGE = "generate"

_SHARE_TOLERANCE = 0.01

# GRH and GRT belong to the group count; HDR and TRL only to the file count
_GROUP_ENVELOPE_RECORDS = 2
_TRANSMISSION_ENVELOPE_RECORDS = 2


@dataclass(frozen=True)
class WorkWarning:
    """Non-fatal finding tied to one work."""

    work_code: str
    message: str


def check_works(works: list[Work]) -> tuple[list[str], list[WorkWarning]]:
    """Check a batch for conditions that block or degrade an export.

    Parameters
    ----------
    works : list[Work]
        Works to export.

    Returns
    -------
    tuple[list[str], list[WorkWarning]]
        Fatal errors (works without writers) and warnings (controlled
        writers without publisher, PR share total off 100%).
    """
    errors: list[str] = []
    warnings: list[WorkWarning] = []

    for work in works:
        if not work.writers:
            errors.append(f"Work {work.work_code}: Must have at least one writer")

        if work.controlled_writers and not work.publishers:
            warnings.append(
                WorkWarning(
                    work.work_code,
                    f"Work {work.work_code}: Controlled writers without publisher",
                )
            )

        pr_total = sum(w.pr_share for w in work.writers)
        if pr_total > 0 and abs(pr_total - 100) > _SHARE_TOLERANCE:
            warnings.append(
                WorkWarning(
                    work.work_code,
                    f"Work {work.work_code}: Writer PR shares total {pr_total:.2f}%, expected 100%",
                )
            )

    return errors, warnings


@dataclass
class _Batch:
    """Records and counters of one export call."""

    context: GenerationContext
    lines: list[str] = field(default_factory=list)
    transaction_count: int = 0
    transaction_records: int = 0

    def add(self, record: str) -> None:
        self.lines.append(record)

    def add_transaction_record(self, record: str) -> None:
        self.lines.append(record)
        self.transaction_records += 1


class _Transaction:
    """Sequence numbering inside one work transaction."""

    def __init__(self, batch: _Batch) -> None:
        batch.transaction_count += 1
        self.batch = batch
        self.sequence = batch.transaction_count
        self.record_seq = 0

    def next_seq(self) -> int:
        self.record_seq += 1
        return self.record_seq

    def emit(self, record: str) -> None:
        self.batch.add_transaction_record(record)


def _emit_work(batch: _Batch, work: Work) -> None:
    context = batch.context
    tx = _Transaction(batch)

    tx.emit(build_wrk(context, work, tx.sequence))

    for publisher in work.publishers:
        tx.emit(build_spu(context, publisher, tx.sequence, tx.next_seq()))
        tx.emit(build_spt(context, publisher, tx.sequence, tx.next_seq()))

    if not work.publishers:
        shares = uncontrolled_publisher_shares(work)
        if shares.any_positive():
            tx.emit(build_opu(context, tuple(shares), tx.sequence, tx.next_seq()))

    for writer in work.controlled_writers:
        tx.emit(build_swr(context, writer, tx.sequence, tx.next_seq()))
        tx.emit(build_swt(context, writer, tx.sequence, tx.next_seq()))

        publisher = work.find_publisher(writer.publisher_code)
        if publisher is not None:
            tx.emit(build_pwr(context, writer, publisher, tx.sequence, tx.next_seq()))

    for writer in work.uncontrolled_writers:
        tx.emit(build_owr(context, writer, tx.sequence, tx.next_seq()))

    for title in work.alternate_titles:
        tx.emit(build_alt(context, title, tx.sequence, tx.next_seq()))

    for performer in work.performers:
        tx.emit(build_per(context, performer, tx.sequence, tx.next_seq()))

    for recording in work.recordings:
        tx.emit(build_rec(context, recording, work.work_code, tx.sequence, tx.next_seq()))


def generate(
    works: list[Work],
    context: GenerationContext,
    logger: AuditLogger | None = None,
) -> GenerationResult:
    """Render a complete CWR file for a batch of works.

    Parameters
    ----------
    works : list[Work]
        Works to register, in output order.
    context : GenerationContext
        Version, submitter and receiver identity, transaction type.
    logger : AuditLogger | None, optional
        Audit logger for stage events and work warnings.

    Returns
    -------
    GenerationResult
        Rendered text with counts and warnings. ``record_count`` is the
        group count reported in GRT (transaction records plus GRH and
        GRT); TRL reports two more for HDR and TRL.

    Raises
    ------
    CWRGenerationError
        If any work has no writer. The error lists every offending work and
        no file is produced.
    """
    start_time = time.perf_counter()
    if logger:
        logger.stage_started(STAGE, expected_items=len(works))

    errors, warnings = check_works(works)
    if errors:
        exc = CWRGenerationError(errors)
        if logger:
            logger.error(type(exc).__name__, str(exc), stage=STAGE)
            logger.set_stage(None)
        raise exc

    if logger:
        for warning in warnings:
            logger.work_flagged(warning.work_code, warning.message, stage=STAGE)

    batch = _Batch(context=context)
    batch.add(build_hdr(context))
    batch.add(build_grh(context))

    for work in works:
        _emit_work(batch, work)

    record_count = batch.transaction_records + _GROUP_ENVELOPE_RECORDS
    batch.add(build_grt(context, batch.transaction_count, record_count))
    batch.add(
        build_trl(
            context,
            batch.transaction_count,
            record_count + _TRANSMISSION_ENVELOPE_RECORDS,
        )
    )

    result = GenerationResult(
        filename=context.filename,
        content=RECORD_SEPARATOR.join(batch.lines),
        version=context.version,
        transaction_count=batch.transaction_count,
        record_count=record_count,
        works=[w.work_code for w in works],
        errors=[],
        warnings=[w.message for w in warnings],
    )

    if logger:
        logger.stage_finished(
            STAGE,
            time.perf_counter() - start_time,
            counters={
                "works": len(works),
                "transactions": result.transaction_count,
                "records": result.record_count,
                "warnings": len(result.warnings),
            },
        )

    return result
