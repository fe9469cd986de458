"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

import logging

from graphwalk._errors import CycleDetectedError

from ._containers import VertexQueue
from ._ranking import Ranking, allocate_counts
from ._store import Graph, require_graph

logger = logging.getLogger(__name__)


def topological_sort(graph: Graph | None) -> Ranking:
    """Rank the vertices of a DAG so that every edge points to a higher rank.

    The rank of a vertex is the length of the longest path reaching it from
    a source (a vertex with no incoming edges), so sources get 0 and several
    vertices may share a rank.

    Idea: identify the sources and remove them together with their outgoing
    edges; the targets that are left without incoming edges become the next
    sources. Each removed edge ``u -> v`` raises the rank of ``v`` to at least
    ``rank(u) + 1``.

    Time complexity: O(|V| + |E|).

    Space complexity: O(|V|) for the queue and the in-degrees.

    Args:
        graph: The graph to order.

    Returns:
        A Ranking of longest-path ranks.

    Raises:
        InvalidArgumentError: If ``graph`` is None or destroyed.
        CycleDetectedError: If the graph contains a cycle. The error lists the
            vertices that could not be ordered.

    Example:
        >>> g = graph_from_string(GraphMode.DIRECTED, "ABC", "AB BC AC")
        >>> topological_sort(g).values
        (0, 1, 2)

    """
    graph = require_graph(graph)
    vertices = graph.vertices
    n = len(vertices)

    in_degrees = allocate_counts(n)
    for vertex in vertices:
        for target in vertex.neighbors:
            in_degrees[target] += 1

    ranks = allocate_counts(n)
    # Every vertex enters the queue exactly once, when its in-degree drops to zero.
    queue = VertexQueue(n)
    for index, degree in enumerate(in_degrees):
        if degree == 0:
            queue.push(index)
    logger.debug("Topological sort of %r seeded with %d source(s)", graph, len(queue))

    ordered = 0
    while not queue.is_empty():
        source = queue.pop()
        ordered += 1
        for target in vertices[source].neighbors:
            in_degrees[target] -= 1
            ranks[target] = max(ranks[target], ranks[source] + 1)
            if in_degrees[target] == 0:
                queue.push(target)

    if ordered != n:
        raise CycleDetectedError(tuple(vertices[i].label for i in range(n) if in_degrees[i] > 0))

    return Ranking(labels=graph.labels, values=tuple(ranks))


def has_cycle(graph: Graph | None) -> bool:
    """Check if the graph contains a cycle.

    Returns:
        True if topological_sort would raise CycleDetectedError, False otherwise.

    """
    try:
        topological_sort(graph)
    except CycleDetectedError:
        return True
    return False
