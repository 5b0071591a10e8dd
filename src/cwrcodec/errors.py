"""Exception hierarchy for cwrcodec.

Bad field data never raises: validators report it as a result value. The
exceptions below are reserved for failures that abort a whole operation.
"""

__all__ = [
    "CWRError",
    "CWRGenerationError",
    "AckParseError",
    "WorkBatchError",
]


class CWRError(Exception):
    """Base class for all cwrcodec errors."""


class CWRGenerationError(CWRError):
    """Raised when a work batch cannot be exported at all.

    Attributes
    ----------
    errors : list[str]
        Every fatal cause, one entry per offending work.
    """

    def __init__(self, errors: list[str]) -> None:
        """Initialize generation error.

        Parameters
        ----------
        errors : list[str]
            Fatal causes collected during batch validation.
        """
        super().__init__(f"CWR validation failed: {'; '.join(errors)}")
        self.errors = list(errors)


class AckParseError(CWRError):
    """Raised when an acknowledgement file is unusable as a whole."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
    ) -> None:
        """Initialize ACK parse error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.file = file


class WorkBatchError(CWRError):
    """Raised when a JSON work batch does not match the batch schema."""

    def __init__(self, message: str, path: str = "$") -> None:
        """Initialize work batch error.

        Parameters
        ----------
        message : str
            Schema validation message.
        path : str, optional
            JSON path of the failing element, by default "$".
        """
        super().__init__(f"{path}: {message}")
        self.path = path
