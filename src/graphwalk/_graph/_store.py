"""Adjacency-list graph store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from graphwalk._errors import InvalidArgumentError, OutOfMemoryError
from graphwalk._modes import DanglingEdgePolicy, GraphMode

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from types import TracebackType

logger = logging.getLogger(__name__)

EDGE_CODE_SEPARATOR = " "


@dataclass(slots=True, eq=False)
class Vertex:
    """A labelled node and the indices of the vertices it points to.

    Successor indices are kept in insertion order. The public ``neighbors``
    view reads them back newest first, so an edge added later is visited
    earlier by the traversals.
    """

    label: str
    _successors: list[int] = field(default_factory=list, repr=False)

    @property
    def neighbors(self) -> tuple[int, ...]:
        """Indices of the vertices this vertex points to, most recently added first."""
        return tuple(reversed(self._successors))

    @property
    def out_degree(self) -> int:
        return len(self._successors)


class Graph:
    """A fixed set of labelled vertices with directed adjacency lists.

    The vertex count is fixed at construction and vertex index is the
    position of the label in the sequence passed in. Edges are stored as
    vertex indices (never as references to other vertices), and a vertex
    never holds the same target twice.

    A graph can be used as a context manager; leaving the block destroys it.

    Example:
        >>> with graph_from_string(GraphMode.DIRECTED, "ABC", "AB AC") as g:
        ...     g.neighbors("A")
        ('C', 'B')

    """

    __slots__ = ("_destroyed", "_index", "_mode", "_vertices")

    def __init__(self, labels: Iterable[str], mode: GraphMode = GraphMode.DIRECTED) -> None:
        labels = tuple(labels)
        index: dict[str, int] = {}
        for position, label in enumerate(labels):
            if not isinstance(label, str) or not label:
                msg = f"Vertex label at position {position} must be a non-empty string, got {label!r}"
                raise InvalidArgumentError(msg)
            if label in index:
                msg = f"Duplicate vertex label {label!r}"
                raise InvalidArgumentError(msg)
            index[label] = position

        try:
            self._vertices = [Vertex(label) for label in labels]
        except MemoryError as e:
            msg = f"Could not allocate {len(index)} vertices"
            raise OutOfMemoryError(msg) from e
        self._index = index
        self._mode = GraphMode(mode)
        self._destroyed = False

    def __repr__(self) -> str:
        if self._destroyed:
            return "Graph(destroyed)"
        return f"Graph({self._mode}, N={len(self._vertices)}, E={self.edge_count})"

    def __len__(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __enter__(self) -> Self:
        self._check_alive()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()

    @property
    def mode(self) -> GraphMode:
        return self._mode

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def labels(self) -> tuple[str, ...]:
        """Vertex labels in index order."""
        self._check_alive()
        return tuple(vertex.label for vertex in self._vertices)

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        self._check_alive()
        return tuple(self._vertices)

    @property
    def edge_count(self) -> int:
        self._check_alive()
        return sum(vertex.out_degree for vertex in self._vertices)

    def vertex(self, index: int) -> Vertex:
        """Return the vertex stored at ``index``."""
        self._check_alive()
        return self._vertices[index]

    def index_of(self, label: str) -> int:
        """Return the index of the vertex labelled ``label``.

        Raises:
            InvalidArgumentError: If no vertex carries that label.

        """
        self._check_alive()
        try:
            return self._index[label]
        except KeyError:
            msg = f"Unknown vertex label {label!r}"
            raise InvalidArgumentError(msg) from None

    def neighbors(self, label: str) -> tuple[str, ...]:
        """Return the labels ``label`` points to, in stored order."""
        vertex = self._vertices[self.index_of(label)]
        return tuple(self._vertices[i].label for i in vertex.neighbors)

    def add_edge(self, from_label: str, to_label: str) -> bool:
        """Add the directed edge ``from_label -> to_label``.

        Nothing happens if either label is absent or the edge already exists.

        Returns:
            True if a new edge was inserted, False otherwise.

        """
        self._check_alive()
        src = self._index.get(from_label)
        dst = self._index.get(to_label)
        if src is None or dst is None:
            return False
        successors = self._vertices[src]._successors  # noqa: SLF001
        if dst in successors:
            return False
        try:
            successors.append(dst)
        except MemoryError as e:
            msg = f"Could not allocate edge {from_label}{to_label}"
            raise OutOfMemoryError(msg) from e
        return True

    def edges(self) -> Iterator[tuple[str, str]]:
        """Yield every edge as a ``(from, to)`` label pair, vertex by vertex in stored order."""
        self._check_alive()
        for vertex in self._vertices:
            for target in vertex.neighbors:
                yield vertex.label, self._vertices[target].label

    def edge_codes(self) -> str:
        """Render every edge in the compact ``"AB AC"`` form.

        Edges are written vertex by vertex in insertion order, so parsing the
        result in DIRECTED mode rebuilds every neighbor list in the same order.
        """
        self._check_alive()
        return EDGE_CODE_SEPARATOR.join(
            vertex.label + self._vertices[target].label
            for vertex in self._vertices
            for target in vertex._successors  # noqa: SLF001
        )

    def adjacency_matrix(self) -> tuple[tuple[bool, ...], ...]:
        """Return the ``n x n`` matrix whose entry ``(i, j)`` is True iff there is an edge ``i -> j``."""
        self._check_alive()
        n = len(self._vertices)
        rows = []
        for vertex in self._vertices:
            row = [False] * n
            for target in vertex.neighbors:
                row[target] = True
            rows.append(tuple(row))
        return tuple(rows)

    def destroy(self) -> None:
        """Release every adjacency list and then the vertex array.

        Destroying an already destroyed graph does nothing.
        """
        if self._destroyed:
            return
        for vertex in self._vertices:
            vertex._successors.clear()  # noqa: SLF001
        self._vertices.clear()
        self._index.clear()
        self._destroyed = True

    def _check_alive(self) -> None:
        if self._destroyed:
            msg = "Graph has been destroyed"
            raise InvalidArgumentError(msg)


def require_graph(graph: Graph | None) -> Graph:
    """Return ``graph`` if it can be traversed, raise InvalidArgumentError otherwise."""
    if graph is None:
        msg = "Graph must not be None"
        raise InvalidArgumentError(msg)
    if not isinstance(graph, Graph):
        msg = f"Expected a Graph, got {type(graph).__name__}"
        raise InvalidArgumentError(msg)
    graph._check_alive()  # noqa: SLF001
    return graph


def destroy_graph(graph: Graph | None) -> None:
    """Destroy ``graph``; None is accepted and ignored."""
    if graph is None:
        return
    graph.destroy()


def parse_edge_codes(edges: str) -> list[tuple[str, str]]:
    """Split a compact edge string such as ``"AB AC"`` into label pairs.

    Each edge takes three characters: the two endpoint labels and a space
    separator (omitted after the last edge).

    Raises:
        InvalidArgumentError: If a group has fewer than two labels or the
            separator is not a space.

    """
    pairs: list[tuple[str, str]] = []
    for start in range(0, len(edges), 3):
        code = edges[start : start + 2]
        if len(code) != 2:  # noqa: PLR2004
            msg = f"Malformed edge code {code!r} at offset {start} in {edges!r}"
            raise InvalidArgumentError(msg)
        separator = edges[start + 2 : start + 3]
        if separator not in ("", EDGE_CODE_SEPARATOR):
            msg = f"Expected a space after edge code {code!r} at offset {start + 2} in {edges!r}"
            raise InvalidArgumentError(msg)
        pairs.append((code[0], code[1]))
    return pairs


def _report_dangling(src: str, dst: str, missing: list[str], policy: DanglingEdgePolicy) -> None:
    match policy:
        case DanglingEdgePolicy.ERROR:
            msg = f"Edge {src!r} -> {dst!r} refers to unknown vertex label(s): {', '.join(missing)}"
            raise InvalidArgumentError(msg)
        case DanglingEdgePolicy.WARN:
            logger.warning("Dropping edge %r -> %r: unknown vertex label(s) %s", src, dst, ", ".join(missing))
        case DanglingEdgePolicy.IGNORE:
            pass


def build_graph(
    mode: GraphMode,
    vertices: Iterable[str],
    edges: Iterable[tuple[str, str]],
    *,
    on_dangling: DanglingEdgePolicy = DanglingEdgePolicy.WARN,
) -> Graph:
    """Build a graph from vertex labels and ``(from, to)`` label pairs.

    Vertex index is the position of the label in ``vertices``. In UNDIRECTED
    mode every edge is also inserted in reverse. Repeated edges are inserted
    once. Edges naming an unknown label are dropped and reported according
    to ``on_dangling``.

    Args:
        mode: How to interpret ``edges``.
        vertices: Distinct vertex labels. A string is read as one label per character.
        edges: Pairs of endpoint labels.
        on_dangling: Reaction to edges that name an unknown label.

    Returns:
        A new Graph owned by the caller.

    Raises:
        InvalidArgumentError: On duplicate or empty labels, or on a dangling
            edge when ``on_dangling`` is ERROR.
        OutOfMemoryError: If the graph storage cannot be allocated.

    """
    mode = GraphMode(mode)
    policy = DanglingEdgePolicy(on_dangling)
    graph = Graph(vertices, mode)
    for src, dst in edges:
        missing = [label for label in (src, dst) if label not in graph]
        if missing:
            _report_dangling(src, dst, missing, policy)
            continue
        graph.add_edge(src, dst)
        if mode is GraphMode.UNDIRECTED:
            graph.add_edge(dst, src)
    logger.debug("Built %r", graph)
    return graph


def graph_from_string(
    mode: GraphMode,
    vertices: str,
    edges: str,
    *,
    on_dangling: DanglingEdgePolicy = DanglingEdgePolicy.WARN,
) -> Graph:
    """Build a graph from single-letter labels and a compact edge string.

    Example:
        >>> g = graph_from_string(GraphMode.UNDIRECTED, "ABC", "AB BC")
        >>> g.neighbors("B")
        ('C', 'A')

    """
    return build_graph(mode, vertices, parse_edge_codes(edges), on_dangling=on_dangling)
