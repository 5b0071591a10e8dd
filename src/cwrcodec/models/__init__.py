"""Shared value objects for cwrcodec.

This package contains the dataclasses exchanged with callers: catalog
works, the generation context, the generation result, and ACK records.

Domain-specific types live closer to their consumers:
- Validation result types → cwrcodec.validators
- Share calculation types → cwrcodec.engine.shares
"""

from cwrcodec.models.ack import AckParseResult, AckRecord, AckStatus
from cwrcodec.models.context import (
    CWRVersion,
    GenerationContext,
    TransactionType,
    build_filename,
)
from cwrcodec.models.results import RECORD_SEPARATOR, GenerationResult
from cwrcodec.models.works import (
    AlternateTitle,
    Performer,
    Publisher,
    Recording,
    Work,
    Writer,
)

__all__ = [
    # Catalog inputs
    "Work",
    "Writer",
    "Publisher",
    "AlternateTitle",
    "Performer",
    "Recording",
    # Generation
    "CWRVersion",
    "TransactionType",
    "GenerationContext",
    "GenerationResult",
    "RECORD_SEPARATOR",
    "build_filename",
    # Acknowledgements
    "AckStatus",
    "AckRecord",
    "AckParseResult",
]
