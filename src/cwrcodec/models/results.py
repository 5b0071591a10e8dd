"""Result of one CWR export."""

from dataclasses import asdict, dataclass, field
from typing import Any

from cwrcodec.models.context import CWRVersion

__all__ = ["GenerationResult", "RECORD_SEPARATOR"]

# CWR records are CRLF-separated; the final TRL record carries no terminator
RECORD_SEPARATOR = "\r\n"


@dataclass(frozen=True)
class GenerationResult:
    """Rendered CWR file plus counts and collected warnings.

    Created once per export and owned by the caller.

    Attributes
    ----------
    filename : str
        Conventional CWR filename.
    content : str
        Full rendered file text.
    version : CWRVersion
        Wire layout used.
    transaction_count : int
        Number of work transactions.
    record_count : int
        Transaction records plus GRH and GRT, as reported in the GRT record.
    works : list[str]
        Work codes processed, in output order.
    errors : list[str]
        Fatal causes; always empty on a returned result (fatal errors raise).
    warnings : list[str]
        Non-fatal business warnings.
    """

    filename: str
    content: str
    version: CWRVersion
    transaction_count: int
    record_count: int
    works: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        """Individual records, without line terminators."""
        return self.content.split(RECORD_SEPARATOR)

    def records_of_type(self, record_type: str) -> list[str]:
        """Return all records whose 3-character prefix is ``record_type``."""
        return [line for line in self.lines if line[:3] == record_type]

    def to_dict(self, include_content: bool = True) -> dict[str, Any]:
        """Convert to dictionary.

        Parameters
        ----------
        include_content : bool, optional
            Whether to embed the rendered file text, by default True.
        """
        data = asdict(self)
        data["version"] = self.version.value
        if not include_content:
            data.pop("content")
        return data
