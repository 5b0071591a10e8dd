"""Audit logging subsystem for cwrcodec.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope written per line
- generate_run_id: run identifier factory
"""

from cwrcodec.audit.helpers import generate_run_id, get_package_version
from cwrcodec.audit.logger import AuditLogger
from cwrcodec.audit.models import LOG_LEVELS, LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "LOG_LEVELS",
    "generate_run_id",
    "get_package_version",
]
