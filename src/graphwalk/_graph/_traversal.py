"""Depth-first and breadth-first traversal.

Both searches run the same loop; only the frontier differs. A stack makes
the most recently discovered vertex the next one visited (depth-first), a
queue makes it the oldest one (breadth-first).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._containers import Frontier, VertexQueue, VertexStack
from ._ranking import Ranking, allocate_counts
from ._store import Graph, Vertex, require_graph

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def _visit_from(
    vertices: Sequence[Vertex],
    start: int,
    frontier: Frontier,
    counts: list[int],
    count: int,
) -> int:
    """Number every vertex reachable from ``start`` that has no number yet.

    Returns the last visitation number handed out.
    """
    frontier.push(start)
    while not frontier.is_empty():
        current = frontier.pop()
        # A vertex can be pushed once per incoming edge before it is visited.
        if counts[current]:
            continue
        count += 1
        counts[current] = count
        for neighbor in vertices[current].neighbors:
            if not counts[neighbor]:
                frontier.push(neighbor)
    return count


def _traverse(graph: Graph | None, frontier: Frontier, start: str | None = None) -> Ranking:
    graph = require_graph(graph)
    vertices = graph.vertices
    counts = allocate_counts(len(vertices))

    if start is not None:
        index = graph.index_of(start)
        logger.debug("Traversing %r from %r with %s", graph, start, type(frontier).__name__)
        _visit_from(vertices, index, frontier, counts, 0)
    else:
        count = 0
        for index in range(len(vertices)):
            if not counts[index]:
                logger.debug("Starting traversal at %r", vertices[index].label)
                count = _visit_from(vertices, index, frontier, counts, count)

    return Ranking(labels=graph.labels, values=tuple(counts))


def depth_first_search(graph: Graph | None, *, capacity: int | None = None) -> Ranking:
    """Number the vertices in the order a depth-first search visits them.

    Idea: keep the discovered but unvisited vertices on a stack. Pop one; if
    it has not been visited, give it the next number and push its unvisited
    neighbors. Restart from the lowest-indexed unvisited vertex until every
    vertex has a number, so every connected component is covered.

    Time complexity: O(|V| + |E|), each adjacency list is scanned once.

    Space complexity: O(|V|) for the counts plus the stack, which holds at
    most one entry per edge.

    Args:
        graph: The graph to traverse.
        capacity: Fixed stack capacity. None lets the stack grow.

    Returns:
        A Ranking whose values are a permutation of ``1..len(graph)``.

    Raises:
        InvalidArgumentError: If ``graph`` is None or destroyed.
        CapacityExceededError: If a fixed ``capacity`` is too small.

    Example:
        >>> g = graph_from_string(GraphMode.DIRECTED, "ABC", "AB AC")
        >>> depth_first_search(g).values
        (1, 2, 3)

    """
    return _traverse(graph, VertexStack(capacity))


def breadth_first_search(graph: Graph | None, *, capacity: int | None = None) -> Ranking:
    """Number the vertices in the order a breadth-first search visits them.

    Idea: the same loop as depth_first_search, but the discovered vertices
    wait in a queue, so all neighbors of a vertex are visited before any of
    their own neighbors.

    Time complexity: O(|V| + |E|).

    Space complexity: O(|V|) for the counts plus the queue.

    Raises:
        InvalidArgumentError: If ``graph`` is None or destroyed.
        CapacityExceededError: If a fixed ``capacity`` is too small.

    """
    return _traverse(graph, VertexQueue(capacity))


def depth_first_search_from(graph: Graph | None, start: str, *, capacity: int | None = None) -> Ranking:
    """Depth-first search restricted to the vertices reachable from ``start``.

    Vertices that cannot be reached keep the value 0.

    Raises:
        InvalidArgumentError: If ``graph`` is None or destroyed, or ``start`` is unknown.

    """
    return _traverse(graph, VertexStack(capacity), start)


def breadth_first_search_from(graph: Graph | None, start: str, *, capacity: int | None = None) -> Ranking:
    """Breadth-first search restricted to the vertices reachable from ``start``."""
    return _traverse(graph, VertexQueue(capacity), start)
