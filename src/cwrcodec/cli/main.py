"""Command-line interface for cwrcodec.

Provides CLI commands for CWR generation, ACK parsing and identifier checks.
"""

import importlib.metadata
import json
import sys
import time
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path

import click

from cwrcodec.audit import AuditLogger, generate_run_id

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("cwrcodec")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

_VERSION_CHOICES = ["2.1", "2.2", "3.0", "3.1", "21", "22", "30", "31"]
_ID_KINDS = ["ipi", "ipi-base", "iswc", "isrc", "ean13", "society"]


def _audit_logger(audit_log: str | None) -> AbstractContextManager[AuditLogger | None]:
    """Open an audit logger when a log path was given."""
    if audit_log is None:
        return nullcontext()
    return AuditLogger(run_id=generate_run_id(), log_path=Path(audit_log))


@click.group()
@click.version_option(version=__version__, prog_name="cwrcodec")
def cli() -> None:
    """Generate CWR registration files and read society acknowledgements.

    Use 'cwrcodec COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("works_json", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default="out",
    help="Directory for the generated CWR file (default: out)",
)
@click.option(
    "--version",
    "cwr_version",
    type=click.Choice(_VERSION_CHOICES),
    default="2.1",
    help="CWR version to generate (default: 2.1)",
)
@click.option("--submitter-code", required=True, help="Submitter code (3 chars, 4 for 3.x)")
@click.option("--submitter-name", required=True, help="Submitter (publisher) name")
@click.option("--submitter-ipi", default="", help="Submitter IPI Name Number")
@click.option("--receiver-code", required=True, help="Receiving society code")
@click.option("--revision", is_flag=True, help="Emit REV transactions instead of NWR")
@click.option("--audit-log", type=click.Path(dir_okay=False), help="Append audit events (JSONL)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def generate(
    works_json: str,
    output_dir: str,
    cwr_version: str,
    submitter_code: str,
    submitter_name: str,
    submitter_ipi: str,
    receiver_code: str,
    revision: bool,
    audit_log: str | None,
    verbose: bool,
) -> None:
    """Generate a CWR file from a JSON work batch.

    WORKS_JSON is a file of the form {"works": [...]}.

    Examples
    --------
        cwrcodec generate works.json --submitter-code ABC --submitter-name "ACME MUSIC" \\
            --receiver-code 052
        cwrcodec generate works.json -o out --version 3.1 --submitter-code ABCD \\
            --submitter-name "ACME MUSIC" --receiver-code 052 --audit-log audit.jsonl
    """
    from cwrcodec.api import generate_cwr, load_works, write_cwr
    from cwrcodec.models import GenerationContext, TransactionType

    start = time.perf_counter()

    with _audit_logger(audit_log) as logger:
        if logger:
            logger.run_started(sys.argv, {"version": cwr_version, "works": works_json})

        try:
            works = load_works(works_json)
            if verbose:
                click.echo(f"Loaded {len(works)} works from {works_json}", err=True)

            context = GenerationContext.create(
                cwr_version,
                submitter_code=submitter_code,
                submitter_name=submitter_name,
                submitter_ipi=submitter_ipi,
                receiver_code=receiver_code,
                transaction_type=TransactionType.REV if revision else TransactionType.NWR,
            )
            result = generate_cwr(works, context, logger=logger)
            path = write_cwr(result, output_dir, logger=logger)

        except Exception as e:
            if logger:
                logger.run_finished("failed", time.perf_counter() - start)
            click.secho(f"✗ Error: {e}", fg="red", err=True)
            sys.exit(1)

        if logger:
            logger.run_finished("success", time.perf_counter() - start)

    for warning in result.warnings:
        click.secho(f"! {warning}", fg="yellow", err=True)

    click.secho(
        f"✓ Wrote {path} ({result.transaction_count} transactions, "
        f"{result.record_count} group records)",
        fg="green",
    )


@cli.command("parse-ack")
@click.argument("ack_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the parsed result as JSON",
)
@click.option("--receiver-code", default="", help="Submitter code the ACK is addressed to")
@click.option("--audit-log", type=click.Path(dir_okay=False), help="Append audit events (JSONL)")
@click.option("--verbose", "-v", is_flag=True, help="List every record needing attention")
def parse_ack_command(
    ack_file: str,
    output: str | None,
    receiver_code: str,
    audit_log: str | None,
    verbose: bool,
) -> None:
    """Parse a society acknowledgement file.

    Examples
    --------
        cwrcodec parse-ack CW241201ABC052.V21.ACK
        cwrcodec parse-ack response.ack -o response.json
    """
    from cwrcodec.api import parse_ack_file

    with _audit_logger(audit_log) as logger:
        try:
            result = parse_ack_file(ack_file, receiver_code=receiver_code, logger=logger)
        except Exception as e:
            click.secho(f"✗ Error: {e}", fg="red", err=True)
            sys.exit(1)

    if output:
        with Path(output).open("w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    for error in result.errors:
        click.secho(f"! {error}", fg="yellow", err=True)

    if verbose:
        for record in result.attention_records():
            click.echo(
                f"  {record.work_code or '-'} tx {record.transaction_sequence}: "
                f"{record.status.value} {record.status.description}",
                err=True,
            )

    click.secho(
        f"✓ {result.filename} (CWR {result.version}): "
        f"{result.accepted} accepted, {result.rejected} rejected, "
        f"{result.conflicts} conflicts, {result.duplicates} duplicates",
        fg="green",
    )


@cli.command("check-id")
@click.argument("kind", type=click.Choice(_ID_KINDS))
@click.argument("value")
def check_id(kind: str, value: str) -> None:
    """Validate an identifier and print its normalized form.

    KIND is one of ipi, ipi-base, iswc, isrc, ean13, society.

    Examples
    --------
        cwrcodec check-id iswc T-123.456.789-2
        cwrcodec check-id society ASCAP
    """
    from cwrcodec import validators

    checks = {
        "ipi": validators.validate_ipi,
        "ipi-base": validators.validate_ipi_base,
        "iswc": validators.validate_iswc,
        "isrc": validators.validate_isrc,
        "ean13": validators.validate_ean13,
        "society": validators.validate_society_code,
    }

    result = checks[kind](value)

    if not result.is_valid:
        click.secho(f"✗ {result.error}", fg="red", err=True)
        sys.exit(1)

    for warning in result.warnings:
        click.secho(f"! {warning}", fg="yellow", err=True)

    click.secho(f"✓ {result.normalized}", fg="green")


if __name__ == "__main__":
    cli()
