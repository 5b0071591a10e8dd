"""Parser for CWR acknowledgement (ACK) files.

Parsing is tolerant at line level: a malformed body line is recorded as
``"Line N: reason"`` and the remaining lines are still decoded. Only an
unusable file as a whole (too few lines, no HDR first line, unreadable)
raises AckParseError.

All state lives in local variables of one call, so parse_ack is safe to
call concurrently.
"""

import re
import time
from collections.abc import Callable
from pathlib import Path

from cwrcodec.ack.base import (
    ENVELOPE_RECORD_TYPES,
    detect_encoding,
    normalize_line_endings,
    parse_int,
    sniff_version,
    split_lines,
)
from cwrcodec.audit.logger import AuditLogger
from cwrcodec.errors import AckParseError
from cwrcodec.models import AckParseResult, AckRecord, AckStatus

__all__ = ["parse_ack", "parse_ack_file", "STAGE", "ACK_MIN_LENGTH", "MSG_MIN_LENGTH"]

STAGE = "parse_ack"

# Shortest lines that still reach the status (ACK) or message level (MSG)
ACK_MIN_LENGTH = 117
MSG_MIN_LENGTH = 32

_MIN_LINES = 3
_EMPTY_ISWC = "T0000000000"


def _optional(value: str) -> str | None:
    value = value.strip()
    return value or None


def _parse_status(raw: str) -> AckStatus:
    """Map a status code to AckStatus; unknown codes count as rejected."""
    try:
        return AckStatus(raw.strip().upper())
    except ValueError:
        return AckStatus.RJ


def _format_iswc(raw: str) -> str:
    cleaned = re.sub(r"[^A-Za-z0-9]", "", raw).upper()
    if len(cleaned) == 11 and cleaned.startswith("T"):
        return f"T-{cleaned[1:10]}-{cleaned[10]}"
    return raw


def _parse_ack_line(line: str) -> AckRecord:
    """Decode an ACK record (status of one submitted transaction)."""
    if len(line) < ACK_MIN_LENGTH:
        raise ValueError(
            f"ACK record too short ({len(line)} characters, expected at least {ACK_MIN_LENGTH})"
        )

    iswc = line[104:115].strip()

    return AckRecord(
        record_type="ACK",
        transaction_sequence=parse_int(line[3:11]),
        record_sequence=parse_int(line[11:19]),
        original_transaction_type=line[19:22].strip(),
        original_transaction_sequence=parse_int(line[22:30]),
        creation_title=line[30:90].strip(),
        work_code=line[90:104].strip(),
        iswc=_format_iswc(iswc) if iswc and iswc != _EMPTY_ISWC else None,
        status=_parse_status(line[115:117]),
        society_work_id=_optional(line[117:131]),
        processing_date=_optional(line[131:139]),
    )


def _parse_msg_line(line: str) -> AckRecord:
    """Decode a MSG record (validation message on a submitted record)."""
    if len(line) < MSG_MIN_LENGTH:
        raise ValueError(
            f"MSG record too short ({len(line)} characters, expected at least {MSG_MIN_LENGTH})"
        )

    level = line[31:32]

    return AckRecord(
        record_type="MSG",
        transaction_sequence=parse_int(line[3:11]),
        record_sequence=parse_int(line[11:19]),
        original_transaction_type=line[28:31].strip(),
        original_transaction_sequence=parse_int(line[20:28]),
        status=AckStatus.RJ if level == "E" else AckStatus.RA,
        error_message=line[40:].strip(),
        message_level=level,
        validation_number=line[32:40].strip(),
    )


_PARSER_MAP: dict[str, Callable[[str], AckRecord]] = {
    "ACK": _parse_ack_line,
    "MSG": _parse_msg_line,
}


def parse_ack(
    content: str,
    filename: str,
    receiver_code: str = "",
    logger: AuditLogger | None = None,
) -> AckParseResult:
    """Decode acknowledgement text into per-transaction outcomes.

    Parameters
    ----------
    content : str
        Full ACK file text.
    filename : str
        Name reported on the result.
    receiver_code : str, optional
        Submitter code the file was addressed to; ACK headers do not
        carry it reliably.
    logger : AuditLogger | None, optional
        Audit logger for stage events, skipped and failed lines.

    Returns
    -------
    AckParseResult
        Decoded records, counts and tolerated line errors.

    Raises
    ------
    AckParseError
        If the file has fewer than 3 non-empty lines or does not start
        with an HDR record.
    """
    start_time = time.perf_counter()
    lines = split_lines(content)

    if logger:
        logger.stage_started(STAGE, expected_items=len(lines))

    try:
        if len(lines) < _MIN_LINES:
            raise AckParseError("Invalid ACK file: too few lines", file=filename)
        header = lines[0]
        if not header.startswith("HDR"):
            raise AckParseError("Invalid ACK file: missing HDR record", file=filename)
    except AckParseError as e:
        if logger:
            logger.error(type(e).__name__, str(e), stage=STAGE)
            logger.set_stage(None)
        raise

    records: list[AckRecord] = []
    errors: list[str] = []

    # the last line is the trailer
    for index in range(1, len(lines) - 1):
        line = lines[index]
        line_number = index + 1
        record_type = line[:3]

        parser = _PARSER_MAP.get(record_type)
        if parser is None:
            if record_type not in ENVELOPE_RECORD_TYPES and logger:
                logger.unknown_record(line_number, record_type, line[:50])
            continue

        try:
            records.append(parser(line))
        except ValueError as e:
            errors.append(f"Line {line_number}: {e}")
            if logger:
                logger.line_error(line_number, str(e))

    statuses = [r.status for r in records]
    result = AckParseResult(
        filename=filename,
        version=sniff_version(header).label,
        sender_code=header[5:14].strip(),
        receiver_code=receiver_code,
        processing_date=header[60:68].strip(),
        records=records,
        accepted=sum(1 for s in statuses if s in (AckStatus.RA, AckStatus.SR)),
        rejected=sum(1 for s in statuses if s in (AckStatus.RJ, AckStatus.CR)),
        conflicts=statuses.count(AckStatus.CO),
        duplicates=statuses.count(AckStatus.DU),
        errors=errors,
    )

    if logger:
        logger.stage_finished(
            STAGE,
            time.perf_counter() - start_time,
            counters={
                "records": len(records),
                "accepted": result.accepted,
                "rejected": result.rejected,
                "conflicts": result.conflicts,
                "duplicates": result.duplicates,
                "line_errors": len(errors),
            },
        )

    return result


def parse_ack_file(
    path: Path | str,
    receiver_code: str = "",
    logger: AuditLogger | None = None,
) -> AckParseResult:
    """Read and parse an ACK file from disk.

    Parameters
    ----------
    path : Path | str
        ACK file path.
    receiver_code : str, optional
        Submitter code the file was addressed to.
    logger : AuditLogger | None, optional
        Audit logger.

    Returns
    -------
    AckParseResult
        Parsed result; ``filename`` is the file's base name.

    Raises
    ------
    AckParseError
        If the file cannot be read or is not a usable ACK file.
    """
    path = Path(path)
    try:
        file_bytes = path.read_bytes()
    except OSError as e:
        raise AckParseError(f"Cannot read ACK file: {e}", file=str(path)) from e

    content = normalize_line_endings(file_bytes.decode(detect_encoding(file_bytes)))
    return parse_ack(content, path.name, receiver_code=receiver_code, logger=logger)
