"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle for efficient I/O.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from cwrcodec.audit.models import LOG_LEVELS, LogEvent
from cwrcodec.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write for durability.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    current_stage : str | None
        Current stage name for context.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set current stage context.

        Parameters
        ----------
        stage : str | None
            Stage name or None to clear.
        """
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        work_code: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "stage_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        stage : str | None, optional
            Stage identifier, uses current_stage if not provided.
        work_code : str | None, optional
            Work code if event is work-specific.

        Raises
        ------
        ValueError
            If level is not one of LOG_LEVELS.
        """
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")

        if data is None:
            data = {}

        if stage is None:
            stage = self.current_stage

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data,
            stage=stage,
            work_code=work_code,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        event_dict = asdict(event)
        json.dump(event_dict, self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        command : list[str]
            Command-line arguments.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.event(
            "run_started",
            data={"command": command, "parameters": parameters},
        )

    def run_finished(self, status: str, duration_seconds: float) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed").
        duration_seconds : float
            Total execution time in seconds.
        """
        self.event(
            "run_finished",
            data={"status": status, "duration_seconds": duration_seconds},
        )

    def stage_started(self, stage: str, expected_items: int | None = None) -> None:
        """Log stage_started event.

        Parameters
        ----------
        stage : str
            Stage identifier.
        expected_items : int | None, optional
            Number of works or lines the stage is about to process.
        """
        self.set_stage(stage)

        data: dict[str, Any] = {}
        if expected_items is not None:
            data["expected_items"] = expected_items

        self.event("stage_started", data=data, stage=stage)

    def stage_finished(
        self,
        stage: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Log stage_finished event.

        Parameters
        ----------
        stage : str
            Stage identifier.
        duration_seconds : float
            Stage execution time in seconds.
        counters : dict[str, int] | None, optional
            Stage-specific counters.
        """
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters

        self.event("stage_finished", data=data, stage=stage)
        self.set_stage(None)

    def work_flagged(
        self,
        work_code: str,
        message: str,
        stage: str | None = None,
    ) -> None:
        """Log a non-fatal warning attached to one work.

        Parameters
        ----------
        work_code : str
            Submitter work code.
        message : str
            Warning text as it appears on the result.
        stage : str | None, optional
            Stage identifier.
        """
        self.event(
            "work_flagged",
            data={"message": message},
            level="WARN",
            stage=stage,
            work_code=work_code,
        )

    def unknown_record(self, line_number: int, record_type: str, preview: str) -> None:
        """Log an input line skipped because its record type is not recognized.

        Parameters
        ----------
        line_number : int
            1-based line number among non-empty lines.
        record_type : str
            First three characters of the line.
        preview : str
            Leading part of the line (at most 50 characters).
        """
        self.event(
            "unknown_record",
            data={"line": line_number, "record_type": record_type, "preview": preview[:50]},
            level="DEBUG",
        )

    def line_error(self, line_number: int, message: str) -> None:
        """Log a tolerated per-line parse failure.

        Parameters
        ----------
        line_number : int
            1-based line number among non-empty lines.
        message : str
            Failure reason.
        """
        self.event(
            "line_error",
            data={"line": line_number, "message": message},
            level="WARN",
        )

    def artifact_written(
        self,
        path: str,
        sha256: str,
        bytes_written: int | None = None,
        record_count: int | None = None,
    ) -> None:
        """Log artifact_written event.

        Parameters
        ----------
        path : str
            Path to artifact.
        sha256 : str
            SHA256 hash of artifact.
        bytes_written : int | None, optional
            File size in bytes.
        record_count : int | None, optional
            Number of CWR records in artifact.
        """
        data: dict[str, Any] = {"path": path, "sha256": sha256}
        if bytes_written is not None:
            data["bytes"] = bytes_written
        if record_count is not None:
            data["record_count"] = record_count

        self.event("artifact_written", data=data)

    def error(
        self,
        exception_class: str,
        message: str,
        stage: str | None = None,
        work_code: str | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        stage : str | None, optional
            Stage where error occurred.
        work_code : str | None, optional
            Work code if error is work-specific.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            stage=stage,
            level="ERROR",
            work_code=work_code,
        )
