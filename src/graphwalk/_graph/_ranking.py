"""Per-vertex result of a traversal or ordering algorithm."""

from __future__ import annotations

from dataclasses import dataclass

from graphwalk._errors import InvalidArgumentError, OutOfMemoryError


def allocate_counts(n: int) -> list[int]:
    """Return a zero-filled list of ``n`` counters."""
    try:
        return [0] * n
    except MemoryError as e:
        msg = f"Could not allocate result for {n} vertices"
        raise OutOfMemoryError(msg) from e


@dataclass(frozen=True, slots=True)
class Ranking:
    """One integer per vertex, indexed like the graph it was computed from.

    For traversals the value is the 1-based visitation number (0 for a vertex
    the traversal never reached). For topological sort it is the longest-path
    distance from a source vertex.

    Attributes:
        labels: Vertex labels in index order.
        values: The value of each vertex, in index order.

    Example:
        >>> r = Ranking(labels=("A", "B"), values=(2, 1))
        >>> r.items()
        [(0, 2), (1, 1)]
        >>> r.order()
        ('B', 'A')

    """

    labels: tuple[str, ...]
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.values):
            msg = f"Got {len(self.values)} values for {len(self.labels)} vertices"
            raise InvalidArgumentError(msg)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def items(self) -> list[tuple[int, int]]:
        """Return ``(vertex_index, value)`` pairs in index order."""
        return list(enumerate(self.values))

    def by_label(self) -> dict[str, int]:
        return dict(zip(self.labels, self.values, strict=True))

    def rank_of(self, label: str) -> int:
        """Return the value assigned to the vertex labelled ``label``."""
        try:
            return self.values[self.labels.index(label)]
        except ValueError:
            msg = f"Unknown vertex label {label!r}"
            raise InvalidArgumentError(msg) from None

    def order(self, *, skip_unvisited: bool = False) -> tuple[str, ...]:
        """Return labels sorted by value, ties broken by vertex index.

        Args:
            skip_unvisited: Leave out vertices whose value is 0. Only
                meaningful for traversal results.

        """
        ranked = sorted(range(len(self.values)), key=lambda i: (self.values[i], i))
        return tuple(self.labels[i] for i in ranked if not (skip_unvisited and self.values[i] == 0))
