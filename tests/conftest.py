"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from cwrcodec.models import (  # noqa: E402
    CWRVersion,
    GenerationContext,
    Publisher,
    TransactionType,
    Work,
    Writer,
)

CREATION_DATE = datetime(2024, 12, 1, 14, 30, 5, tzinfo=UTC)

# IPI Name Number whose check digits are correct (123456789 mod 101 = 45)
VALID_IPI = "12345678956"


@pytest.fixture
def make_writer() -> Callable[..., Writer]:
    """Factory for writers with one-line overrides."""

    def _factory(code: str = "W001", **overrides: object) -> Writer:
        defaults: dict[str, object] = {
            "last_name": "LENNON",
            "first_name": "JOHN",
            "role": "CA",
            "pr_share": 50.0,
            "mr_share": 50.0,
            "sr_share": 50.0,
            "controlled": True,
        }
        defaults.update(overrides)
        return Writer(code=code, **defaults)  # type: ignore[arg-type]

    return _factory


@pytest.fixture
def make_publisher() -> Callable[..., Publisher]:
    """Factory for publishers with one-line overrides."""

    def _factory(code: str = "P001", **overrides: object) -> Publisher:
        defaults: dict[str, object] = {
            "name": "NORTHERN SONGS",
            "role": "E",
            "pr_society": "PRS",
            "pr_share": 50.0,
            "mr_share": 50.0,
            "sr_share": 50.0,
        }
        defaults.update(overrides)
        return Publisher(code=code, **defaults)  # type: ignore[arg-type]

    return _factory


@pytest.fixture
def make_work(make_writer: Callable[..., Writer]) -> Callable[..., Work]:
    """Factory for works; one controlled writer unless ``writers`` is given."""

    def _factory(work_code: str = "WK001", **overrides: object) -> Work:
        defaults: dict[str, object] = {
            "title": "YESTERDAY",
            "writers": [make_writer()],
        }
        defaults.update(overrides)
        return Work(work_code=work_code, **defaults)  # type: ignore[arg-type]

    return _factory


@pytest.fixture
def context_for() -> Callable[..., GenerationContext]:
    """Factory for generation contexts with a fixed creation date."""

    def _factory(
        version: CWRVersion | str = CWRVersion.V21,
        transaction_type: TransactionType = TransactionType.NWR,
        **overrides: object,
    ) -> GenerationContext:
        version = CWRVersion.parse(version)
        defaults: dict[str, object] = {
            "submitter_code": "ABCD" if version.is_v3 else "ABC",
            "submitter_name": "ACME MUSIC PUBLISHING",
            "receiver_code": "052",
            "submitter_ipi": VALID_IPI,
            "creation_date": CREATION_DATE,
            "software_version": "0.1.0",
        }
        defaults.update(overrides)
        return GenerationContext(
            version=version,
            transaction_type=transaction_type,
            **defaults,  # type: ignore[arg-type]
        )

    return _factory
