"""Acknowledgement (ACK) value objects."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any

__all__ = ["AckStatus", "AckRecord", "AckParseResult"]


class AckStatus(StrEnum):
    """Transaction status reported by a society in an ACK file."""

    CO = "CO"
    DU = "DU"
    RA = "RA"
    AS = "AS"
    AC = "AC"
    SR = "SR"
    CR = "CR"
    RJ = "RJ"
    NP = "NP"

    @property
    def description(self) -> str:
        """Human-readable description."""
        return _STATUS_DESCRIPTIONS[self]

    @property
    def is_success(self) -> bool:
        """True if the society registered or acknowledged the claim."""
        return self in _SUCCESS_STATUSES

    @property
    def requires_attention(self) -> bool:
        """True if a human has to follow up on the transaction."""
        return self in _ATTENTION_STATUSES


_STATUS_DESCRIPTIONS: dict[AckStatus, str] = {
    AckStatus.CO: "Conflict - Work conflicts with existing registration",
    AckStatus.DU: "Duplicate - Work already registered",
    AckStatus.RA: "Registration Accepted",
    AckStatus.AS: "Agreement Starts",
    AckStatus.AC: "Agreement Claim",
    AckStatus.SR: "Society Registration Complete",
    AckStatus.CR: "Claim Rejected",
    AckStatus.RJ: "Rejected",
    AckStatus.NP: "Not in Portfolio",
}

_SUCCESS_STATUSES = frozenset({AckStatus.RA, AckStatus.AS, AckStatus.AC, AckStatus.SR})
_ATTENTION_STATUSES = frozenset(
    {AckStatus.CO, AckStatus.DU, AckStatus.CR, AckStatus.RJ, AckStatus.NP}
)


@dataclass(frozen=True)
class AckRecord:
    """One decoded ACK or MSG line.

    Attributes
    ----------
    record_type : str
        "ACK" or "MSG".
    transaction_sequence : int
        Transaction sequence echoed by the society.
    record_sequence : int
        Record sequence echoed by the society.
    original_transaction_type : str
        Transaction type of the submitted transaction (ACK) or the
        record type the message refers to (MSG).
    original_transaction_sequence : int
        Sequence of the submitted transaction (ACK) or record (MSG).
    status : AckStatus
        Outcome; MSG lines map level E to RJ and anything else to RA.
    creation_title : str | None
        Title as received by the society.
    work_code : str | None
        Submitter work code.
    iswc : str | None
        ISWC in T-NNNNNNNNN-C form.
    society_work_id : str | None
        Society-assigned work identifier.
    processing_date : str | None
        Processing date (YYYYMMDD).
    error_message : str | None
        Free-text message (MSG).
    message_level : str | None
        Message level (MSG): E, F, T, ...
    validation_number : str | None
        Society validation rule number (MSG).
    """

    record_type: str
    transaction_sequence: int
    record_sequence: int
    original_transaction_type: str
    original_transaction_sequence: int
    status: AckStatus
    creation_title: str | None = None
    work_code: str | None = None
    iswc: str | None = None
    society_work_id: str | None = None
    processing_date: str | None = None
    error_message: str | None = None
    message_level: str | None = None
    validation_number: str | None = None


@dataclass(frozen=True)
class AckParseResult:
    """Decoded acknowledgement file with aggregate statistics.

    Attributes
    ----------
    filename : str
        Name of the parsed file.
    version : str
        Detected CWR version label ("2.1", "2.2", "3.0", "3.1").
    sender_code : str
        Society code from the HDR record.
    receiver_code : str
        Receiver (submitter) code supplied by the caller.
    processing_date : str
        Processing date from the HDR record (YYYYMMDD, may be empty).
    records : list[AckRecord]
        Decoded ACK/MSG records in file order.
    accepted : int
        Records with status RA or SR.
    rejected : int
        Records with status RJ or CR.
    conflicts : int
        Records with status CO.
    duplicates : int
        Records with status DU.
    errors : list[str]
        Tolerated line-level failures ("Line N: reason").
    """

    filename: str
    version: str
    sender_code: str
    receiver_code: str
    processing_date: str
    records: list[AckRecord] = field(default_factory=list)
    accepted: int = 0
    rejected: int = 0
    conflicts: int = 0
    duplicates: int = 0
    errors: list[str] = field(default_factory=list)

    def attention_records(self) -> list[AckRecord]:
        """Records whose status requires human follow-up."""
        return [r for r in self.records if r.status.requires_attention]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
