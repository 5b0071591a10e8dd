"""Shared fixtures for ACK parser unit tests."""

from collections.abc import Callable

import pytest


def ack_header(sender: str = "052", processing_date: str = "20241205", marker: str = "") -> str:
    """HDR line with the sender at [5:14] and the processing date at [60:68]."""
    return (
        "HDRSO"
        + sender.ljust(9)
        + "PRS FOR MUSIC".ljust(46)
        + processing_date
        + "000000"
        + marker
    )


def ack_line(
    status: str = "RA",
    tx: int = 1,
    work_code: str = "WK001",
    title: str = "YESTERDAY",
    iswc: str = "T1234567892",
    society_work_id: str = "SOC123",
    processing_date: str = "20241205",
) -> str:
    """ACK line with every field at its fixed offset (139 characters)."""
    return (
        "ACK"
        + f"{tx:08d}"
        + "00000000"
        + "NWR"
        + f"{tx:08d}"
        + title.ljust(60)
        + work_code.ljust(14)
        + iswc.ljust(11)
        + status.ljust(2)
        + society_work_id.ljust(14)
        + processing_date.ljust(8)
    )


def msg_line(level: str = "E", message: str = "Invalid IPI", tx: int = 1) -> str:
    """MSG line referring to record 2 of transaction ``tx``."""
    return (
        "MSG"
        + f"{tx:08d}"
        + "00000001"
        + "T"
        + "00000002"
        + "SWR"
        + level
        + "00000123"
        + message
    )


TRAILER = "TRL000010000000100000005"


@pytest.fixture
def make_ack_file() -> Callable[..., str]:
    """Assemble an ACK file from body lines, with HDR and TRL around them."""

    def _factory(*body: str, header: str | None = None, separator: str = "\r\n") -> str:
        lines = [header if header is not None else ack_header(), *body, TRAILER]
        return separator.join(lines)

    return _factory


@pytest.fixture
def make_ack_line() -> Callable[..., str]:
    """Factory for ACK body lines."""
    return ack_line


@pytest.fixture
def make_msg_line() -> Callable[..., str]:
    """Factory for MSG body lines."""
    return msg_line


@pytest.fixture
def make_ack_header() -> Callable[..., str]:
    """Factory for HDR lines of ACK files."""
    return ack_header
