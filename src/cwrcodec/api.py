"""Public API for CWR generation and acknowledgement parsing.

This module provides the main public API for cwrcodec, enabling:
- Loading work batches from JSON files
- Generating CWR files for any supported version
- Writing generated files to disk
- Parsing acknowledgement files returned by societies
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema.exceptions import best_match

from cwrcodec.ack import parse_ack, parse_ack_file
from cwrcodec.audit.logger import AuditLogger
from cwrcodec.engine import generate
from cwrcodec.errors import AckParseError, CWRError, CWRGenerationError, WorkBatchError
from cwrcodec.models import GenerationContext, GenerationResult, Work
from cwrcodec.utils import calculate_bytes_sha256
from cwrcodec.validators import validate_works

__all__ = [
    "generate_cwr",
    "write_cwr",
    "load_works",
    "load_schema",
    "parse_ack",
    "parse_ack_file",
    "validate_works",
    "CWRError",
    "CWRGenerationError",
    "AckParseError",
    "WorkBatchError",
]

# CWR files are ISO-8859-1 on the wire
CWR_ENCODING = "latin-1"


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by file name.

    Parameters
    ----------
    name : str
        Schema file name (e.g. "work_batch.schema.json").

    Returns
    -------
    dict[str, Any]
        Parsed schema.
    """
    text = (resources.files("cwrcodec") / "schemas" / name).read_text(encoding="utf-8")
    return json.loads(text)


def _json_path(error: jsonschema.ValidationError) -> str:
    path = "$"
    for part in error.absolute_path:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def load_works(path: str | Path) -> list[Work]:
    """Load a JSON work batch (``{"works": [...]}``).

    The batch is validated against the bundled work batch schema before
    any Work is built.

    Parameters
    ----------
    path : str | Path
        Path to the JSON file.

    Returns
    -------
    list[Work]
        Works in file order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    WorkBatchError
        If the file is not valid JSON or does not match the schema.

    Examples
    --------
        >>> from cwrcodec import load_works
        >>> works = load_works("catalog_export.json")
        >>> works[0].title
        'YESTERDAY'
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise WorkBatchError(f"Invalid JSON: {e.msg} (line {e.lineno})") from e

    validator = jsonschema.Draft202012Validator(load_schema("work_batch.schema.json"))
    error = best_match(validator.iter_errors(data))
    if error is not None:
        raise WorkBatchError(error.message, path=_json_path(error))

    return [Work.from_dict(item) for item in data["works"]]


def generate_cwr(
    works: list[Work] | list[dict[str, Any]],
    context: GenerationContext,
    *,
    logger: AuditLogger | None = None,
) -> GenerationResult:
    """Generate a CWR file for a batch of works.

    Parameters
    ----------
    works : list[Work] | list[dict[str, Any]]
        Works, or dictionaries in work batch format.
    context : GenerationContext
        Version, submitter and receiver identity.
    logger : AuditLogger | None, optional
        Audit logger.

    Returns
    -------
    GenerationResult
        Rendered file and counts.

    Raises
    ------
    CWRGenerationError
        If a work has no writer.

    Examples
    --------
        >>> from cwrcodec import GenerationContext, generate_cwr
        >>> context = GenerationContext.create(
        ...     "2.1", submitter_code="ABC", submitter_name="ACME MUSIC", receiver_code="052"
        ... )
        >>> result = generate_cwr(works, context)
        >>> result.filename
        'CW241201ABC052.V21'
    """
    batch = [w if isinstance(w, Work) else Work.from_dict(w) for w in works]
    return generate(batch, context, logger=logger)


def write_cwr(
    result: GenerationResult,
    output_dir: str | Path,
    *,
    logger: AuditLogger | None = None,
) -> Path:
    """Write a generated CWR file under its conventional filename.

    The text is encoded as ISO-8859-1 and written byte-for-byte, so the
    CRLF record separators are preserved on every platform.

    Parameters
    ----------
    result : GenerationResult
        Generator output.
    output_dir : str | Path
        Target directory (created if missing).
    logger : AuditLogger | None, optional
        Audit logger; receives an artifact_written event.

    Returns
    -------
    Path
        Path of the written file.
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    file_path = directory / result.filename
    payload = result.content.encode(CWR_ENCODING, errors="replace")
    file_path.write_bytes(payload)

    if logger:
        logger.artifact_written(
            str(file_path),
            calculate_bytes_sha256(payload),
            bytes_written=len(payload),
            record_count=len(result.lines),
        )

    return file_path
