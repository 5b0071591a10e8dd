"""Version dispatch shared by all record builders.

Each builder owns a table mapping every CWRVersion to a layout function.
Layouts take the generation context first and return one record line
without terminator.
"""

from collections.abc import Callable, Mapping

from cwrcodec.formatting import build_record, format_sequence
from cwrcodec.models import CWRVersion, GenerationContext

__all__ = ["Layout", "LayoutTable", "family_layouts", "render", "record_prefix"]

Layout = Callable[..., str]
LayoutTable = Mapping[CWRVersion, Layout]


def family_layouts(v2: Layout, v3: Layout) -> dict[CWRVersion, Layout]:
    """Table where 2.1/2.2 share one layout and 3.0/3.1 share another."""
    return {
        CWRVersion.V21: v2,
        CWRVersion.V22: v2,
        CWRVersion.V30: v3,
        CWRVersion.V31: v3,
    }


def render(table: LayoutTable, context: GenerationContext, *args: object) -> str:
    """Render a record with the layout registered for the context version.

    Raises
    ------
    ValueError
        If the table has no layout for the context version.
    """
    layout = table.get(context.version)
    if layout is None:
        raise ValueError(f"No record layout registered for CWR {context.version.label}")
    return layout(context, *args)


def record_prefix(record_type: str, transaction_seq: int, record_seq: int) -> str:
    """Record type followed by the transaction and record sequence numbers."""
    return build_record(
        record_type,
        format_sequence(transaction_seq),
        format_sequence(record_seq),
    )
