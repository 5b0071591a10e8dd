"""Generation context: the per-export configuration of the CWR generator."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from cwrcodec.utils import utc_now

__all__ = [
    "CWRVersion",
    "TransactionType",
    "GenerationContext",
    "build_filename",
    "DEFAULT_SOFTWARE_NAME",
]

DEFAULT_SOFTWARE_NAME = "CWRCODEC"


class CWRVersion(StrEnum):
    """Supported CWR wire layouts.

    Values are the two-digit suffixes used in CWR filenames (``.V21``).
    """

    V21 = "21"
    V22 = "22"
    V30 = "30"
    V31 = "31"

    @property
    def label(self) -> str:
        """Dotted version label (e.g. "2.1")."""
        return f"{self.value[0]}.{self.value[1]}"

    @property
    def is_v3(self) -> bool:
        """True for the dense 3.x layout family."""
        return self.value.startswith("3")

    @property
    def submitter_code_width(self) -> int:
        """Maximum submitter code length accepted by this version."""
        from cwrcodec.formatting import SUBMITTER_CODE_WIDTH_V2, SUBMITTER_CODE_WIDTH_V3

        return SUBMITTER_CODE_WIDTH_V3 if self.is_v3 else SUBMITTER_CODE_WIDTH_V2

    @classmethod
    def parse(cls, value: "str | CWRVersion") -> "CWRVersion":
        """Accept "21", "2.1", "V21" or a CWRVersion.

        Raises
        ------
        ValueError
            If the value names no supported version.
        """
        if isinstance(value, CWRVersion):
            return value
        cleaned = str(value).strip().upper().lstrip("V").replace(".", "")
        try:
            return cls(cleaned)
        except ValueError:
            supported = ", ".join(v.label for v in cls)
            raise ValueError(
                f"Unsupported CWR version: {value!r} (supported: {supported})"
            ) from None


class TransactionType(StrEnum):
    """Work transaction types emitted by the generator."""

    NWR = "NWR"  # new work registration
    REV = "REV"  # revised registration


def build_filename(
    submitter_code: str,
    receiver_code: str,
    version: CWRVersion | str,
    creation_date: date | None = None,
) -> str:
    """Derive the conventional CWR filename.

    Parameters
    ----------
    submitter_code : str
        Submitter code.
    receiver_code : str
        Receiving society code.
    version : CWRVersion | str
        CWR version.
    creation_date : date | None, optional
        File date, by default today (UTC).

    Returns
    -------
    str
        ``CW{YYMMDD}{SUBMITTER}{RECEIVER}.V{version}``, e.g. ``CW241201ABCXYZ.V21``.
    """
    version = CWRVersion.parse(version)
    day = creation_date or utc_now()
    return f"CW{day:%y%m%d}{submitter_code}{receiver_code}.V{version.value}"


@dataclass(frozen=True)
class GenerationContext:
    """Immutable configuration for one CWR export.

    Attributes
    ----------
    version : CWRVersion
        Target wire layout.
    submitter_code : str
        Submitter code (3 characters for 2.x, 4 for 3.x).
    submitter_name : str
        Submitter (publisher) name for the HDR record.
    receiver_code : str
        Receiving society code.
    submitter_ipi : str
        Submitter IPI Name Number; 2.x headers carry its last 9 digits.
    transaction_type : TransactionType
        NWR for new registrations, REV for revisions.
    creation_date : datetime | None
        Creation timestamp; None means "now" (UTC).
    filename : str
        Output filename; derived with build_filename() when empty.
    software_name : str
        Software package name written into 3.x headers.
    software_version : str
        Software package version written into 3.x headers.
    """

    version: CWRVersion
    submitter_code: str
    submitter_name: str
    receiver_code: str
    submitter_ipi: str = ""
    transaction_type: TransactionType = TransactionType.NWR
    creation_date: datetime | None = None
    filename: str = ""
    software_name: str = DEFAULT_SOFTWARE_NAME
    software_version: str = ""

    def __post_init__(self) -> None:
        """Coerce enum values, fill derived fields, and validate."""
        version = CWRVersion.parse(self.version)
        object.__setattr__(self, "version", version)

        try:
            object.__setattr__(self, "transaction_type", TransactionType(self.transaction_type))
        except ValueError:
            raise ValueError(
                f"transaction_type must be NWR or REV, got {self.transaction_type!r}"
            ) from None

        if not self.submitter_code or not self.submitter_code.strip():
            raise ValueError("submitter_code must not be empty")
        if not self.receiver_code or not self.receiver_code.strip():
            raise ValueError("receiver_code must not be empty")
        if len(self.submitter_code) > version.submitter_code_width:
            raise ValueError(
                f"submitter_code {self.submitter_code!r} exceeds "
                f"{version.submitter_code_width} characters for CWR {version.label}"
            )

        if self.creation_date is None:
            object.__setattr__(self, "creation_date", utc_now())

        if not self.filename:
            object.__setattr__(
                self,
                "filename",
                build_filename(
                    self.submitter_code, self.receiver_code, version, self.creation_date
                ),
            )

        if not self.software_version:
            from cwrcodec.audit.helpers import get_package_version

            object.__setattr__(self, "software_version", get_package_version())

    @classmethod
    def create(
        cls,
        version: CWRVersion | str,
        *,
        submitter_code: str,
        submitter_name: str,
        receiver_code: str,
        submitter_ipi: str = "",
        transaction_type: TransactionType | str = TransactionType.NWR,
    ) -> "GenerationContext":
        """Create a context stamped with the current time and a derived filename."""
        return cls(
            version=CWRVersion.parse(version),
            submitter_code=submitter_code,
            submitter_name=submitter_name,
            receiver_code=receiver_code,
            submitter_ipi=submitter_ipi,
            transaction_type=TransactionType(transaction_type),
        )

    @property
    def creation_datetime(self) -> datetime:
        """Creation timestamp (always set after initialization)."""
        assert self.creation_date is not None
        return self.creation_date

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "version": self.version.value,
            "submitter_code": self.submitter_code,
            "submitter_name": self.submitter_name,
            "receiver_code": self.receiver_code,
            "submitter_ipi": self.submitter_ipi,
            "transaction_type": self.transaction_type.value,
            "creation_date": self.creation_datetime.isoformat(),
            "filename": self.filename,
            "software_name": self.software_name,
            "software_version": self.software_version,
        }
