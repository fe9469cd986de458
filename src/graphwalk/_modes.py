"""String enums selecting how graphs are built."""

from enum import StrEnum
from typing import Self


class _DocumentedStrEnum(StrEnum):
    """String enum whose members carry their own docstring.

    Members are declared as ``NAME = "value", "doc"``.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj


class GraphMode(_DocumentedStrEnum):
    """How parsed edges are interpreted."""

    DIRECTED = "directed", "Each edge is inserted exactly as written"
    UNDIRECTED = "undirected", "Each edge is inserted in both directions"


class DanglingEdgePolicy(_DocumentedStrEnum):
    """What to do with an edge that names a label absent from the graph.

    The edge itself is never inserted; the policy only decides whether the
    caller hears about it.
    """

    IGNORE = "ignore", "Drop the edge silently"
    WARN = "warn", "Drop the edge and log a warning"
    ERROR = "error", "Raise InvalidArgumentError"
