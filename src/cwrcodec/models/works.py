"""Catalog value objects consumed by the CWR generator.

These are the already-validated, in-memory works handed over by the catalog
store. The codec never mutates them; every export reads them as-is.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

__all__ = [
    "Writer",
    "Publisher",
    "AlternateTitle",
    "Performer",
    "Recording",
    "Work",
]


@dataclass(frozen=True)
class Writer:
    """Writer (composer, author, arranger, ...) credited on a work.

    Attributes
    ----------
    code : str
        Submitter-side interested party code (max 9 characters on the wire).
    last_name : str
        Family name, or the full name for single-name writers.
    first_name : str
        Given name(s).
    role : str
        CWR writer designation code (C, A, CA, AR, AD, TR, SA, SR).
    ipi_name_number : str | None
        11-digit IPI Name Number.
    ipi_base_number : str | None
        IPI Base Number (I-NNNNNNNNN-C).
    pr_society : str | None
        Performing rights society (TIS code or acronym).
    mr_society : str | None
        Mechanical rights society.
    sr_society : str | None
        Synchronization rights society.
    pr_share : float
        Performance share in percent (0-100).
    mr_share : float
        Mechanical share in percent.
    sr_share : float
        Synchronization share in percent.
    controlled : bool
        True if the submitter administers this writer's rights.
    publisher_code : str | None
        Code of the publisher the writer is linked to (PWR).
    """

    code: str
    last_name: str
    first_name: str = ""
    role: str = "C"
    ipi_name_number: str | None = None
    ipi_base_number: str | None = None
    pr_society: str | None = None
    mr_society: str | None = None
    sr_society: str | None = None
    pr_share: float = 0.0
    mr_share: float = 0.0
    sr_share: float = 0.0
    controlled: bool = False
    publisher_code: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Writer":
        """Build a writer from a JSON-style dictionary."""
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class Publisher:
    """Original or sub-publisher controlled by the submitter.

    Attributes
    ----------
    code : str
        Submitter-side publisher code.
    name : str
        Publisher name.
    role : str
        CWR publisher type (E, AM, SE, PA, ES).
    ipi_name_number : str | None
        11-digit IPI Name Number.
    ipi_base_number : str | None
        IPI Base Number.
    pr_society, mr_society, sr_society : str | None
        Society affiliations per right.
    pr_share, mr_share, sr_share : float
        Ownership shares per right, in percent.
    chain_sequence : int
        Position of the publisher among co-publishers (1-based).
    saan : str | None
        Society-assigned agreement number.
    """

    code: str
    name: str
    role: str = "E"
    ipi_name_number: str | None = None
    ipi_base_number: str | None = None
    pr_society: str | None = None
    mr_society: str | None = None
    sr_society: str | None = None
    pr_share: float = 0.0
    mr_share: float = 0.0
    sr_share: float = 0.0
    chain_sequence: int = 1
    saan: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Publisher":
        """Build a publisher from a JSON-style dictionary."""
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class AlternateTitle:
    """Alternate title (ALT) of a work."""

    title: str
    title_type: str = "AT"
    language: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AlternateTitle":
        """Build an alternate title from a JSON-style dictionary."""
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class Performer:
    """Performing artist (PER) associated with a work."""

    last_name: str
    first_name: str = ""
    ipi_name_number: str | None = None
    isni: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Performer":
        """Build a performer from a JSON-style dictionary."""
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class Recording:
    """Recording detail (REC) of a work.

    Attributes
    ----------
    isrc : str | None
        International Standard Recording Code.
    title : str | None
        Recording title.
    version_title : str | None
        Version title (e.g. "Radio Edit").
    release_date : str | None
        First release date (ISO 8601 date).
    duration : int | None
        Recording duration in seconds.
    record_label : str | None
        Label name.
    display_artist : str | None
        Display artist.
    """

    isrc: str | None = None
    title: str | None = None
    version_title: str | None = None
    release_date: str | None = None
    duration: int | None = None
    record_label: str | None = None
    display_artist: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recording":
        """Build a recording from a JSON-style dictionary."""
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class Work:
    """Musical work registered in one CWR transaction.

    Attributes
    ----------
    title : str
        Work title.
    work_code : str
        Submitter work identifier (max 14 characters on the wire).
    writers : list[Writer]
        Ordered writers; at least one is required for export.
    publishers : list[Publisher]
        Ordered controlled publishers.
    iswc : str | None
        International Standard Work Code.
    duration : int | None
        Duration in seconds.
    language : str | None
        ISO 639-1 language code of the title.
    version_type : str
        ORI (original) or MOD (modified version).
    recorded_indicator : str
        Y, N or U (unknown).
    alternate_titles : list[AlternateTitle]
        Optional ALT attachments.
    performers : list[Performer]
        Optional PER attachments.
    recordings : list[Recording]
        Optional REC attachments.
    work_id : str | None
        Catalog-side identifier, carried through for reporting only.
    """

    title: str
    work_code: str
    writers: list[Writer] = field(default_factory=list)
    publishers: list[Publisher] = field(default_factory=list)
    iswc: str | None = None
    duration: int | None = None
    language: str | None = None
    version_type: str = "ORI"
    recorded_indicator: str = "U"
    alternate_titles: list[AlternateTitle] = field(default_factory=list)
    performers: list[Performer] = field(default_factory=list)
    recordings: list[Recording] = field(default_factory=list)
    work_id: str | None = None

    @property
    def controlled_writers(self) -> list[Writer]:
        """Writers administered by the submitter, in input order."""
        return [w for w in self.writers if w.controlled]

    @property
    def uncontrolled_writers(self) -> list[Writer]:
        """Writers only referenced for completeness, in input order."""
        return [w for w in self.writers if not w.controlled]

    def find_publisher(self, code: str | None) -> Publisher | None:
        """Return the publisher with the given code, if declared on this work."""
        if not code:
            return None
        return next((p for p in self.publishers if p.code == code), None)

    def to_dict(self) -> dict[str, Any]:
        """Convert work to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Work":
        """Reconstruct a Work (with its attachments) from a dictionary.

        Parameters
        ----------
        data : dict[str, Any]
            Dictionary (e.g. from a JSON work batch) with work fields.

        Returns
        -------
        Work
            Reconstructed work.
        """
        scalars = _known_fields(cls, data)
        scalars["writers"] = [Writer.from_dict(w) for w in data.get("writers", [])]
        scalars["publishers"] = [Publisher.from_dict(p) for p in data.get("publishers", [])]
        scalars["alternate_titles"] = [
            AlternateTitle.from_dict(a) for a in data.get("alternate_titles", [])
        ]
        scalars["performers"] = [Performer.from_dict(p) for p in data.get("performers", [])]
        scalars["recordings"] = [Recording.from_dict(r) for r in data.get("recordings", [])]
        return cls(**scalars)


def _known_fields(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    names = cls.__dataclass_fields__.keys()
    return {k: v for k, v in data.items() if k in names}
