"""Common Works Registration (CWR) codec.

This package provides:
- Data models (cwrcodec.models) — works, generation context, results, ACK records
- Validators (cwrcodec.validators) — IPI/ISWC/ISRC/EAN-13 checksums, CWR text, work pre-flight
- Formatting (cwrcodec.formatting) — fixed-width field primitives
- Records (cwrcodec.records) — version-dispatched record builders
- Engine (cwrcodec.engine) — export orchestration and share calculation
- ACK (cwrcodec.ack) — acknowledgement file parsing
- Audit (cwrcodec.audit) — JSONL event logging
- CLI (cwrcodec.cli) — command-line interface
- Public API (cwrcodec.api) — high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from cwrcodec.api import (
    generate_cwr,
    load_works,
    parse_ack,
    parse_ack_file,
    validate_works,
    write_cwr,
)
from cwrcodec.errors import AckParseError, CWRError, CWRGenerationError, WorkBatchError
from cwrcodec.models import (
    AckParseResult,
    AckRecord,
    AckStatus,
    AlternateTitle,
    CWRVersion,
    GenerationContext,
    GenerationResult,
    Performer,
    Publisher,
    Recording,
    TransactionType,
    Work,
    Writer,
)

__all__ = [
    "__version__",
    "__license__",
    # Models
    "Work",
    "Writer",
    "Publisher",
    "AlternateTitle",
    "Performer",
    "Recording",
    "CWRVersion",
    "TransactionType",
    "GenerationContext",
    "GenerationResult",
    "AckStatus",
    "AckRecord",
    "AckParseResult",
    # API
    "generate_cwr",
    "write_cwr",
    "load_works",
    "parse_ack",
    "parse_ack_file",
    "validate_works",
    # Errors
    "CWRError",
    "CWRGenerationError",
    "AckParseError",
    "WorkBatchError",
]
