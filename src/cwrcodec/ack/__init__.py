"""Acknowledgement (ACK) file parsing."""

from cwrcodec.ack.base import (
    ENVELOPE_RECORD_TYPES,
    detect_encoding,
    normalize_line_endings,
    parse_int,
    sniff_version,
    split_lines,
)
from cwrcodec.ack.parser import (
    ACK_MIN_LENGTH,
    MSG_MIN_LENGTH,
    STAGE,
    parse_ack,
    parse_ack_file,
)

__all__ = [
    "parse_ack",
    "parse_ack_file",
    "ACK_MIN_LENGTH",
    "MSG_MIN_LENGTH",
    "STAGE",
    "ENVELOPE_RECORD_TYPES",
    "detect_encoding",
    "normalize_line_endings",
    "parse_int",
    "sniff_version",
    "split_lines",
]
