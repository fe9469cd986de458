"""Graph module providing the adjacency-list graph and its algorithms.

This module contains:
- Graph: a fixed set of labelled vertices with directed adjacency lists
- VertexStack / VertexQueue: the frontiers that drive traversals
- depth_first_search / breadth_first_search: visitation order of every vertex
- topological_sort: longest-path ranks of a directed acyclic graph
"""

from ._algorithms import has_cycle, topological_sort
from ._containers import Frontier, VertexQueue, VertexStack
from ._ranking import Ranking
from ._store import Graph, Vertex, build_graph, destroy_graph, graph_from_string, parse_edge_codes
from ._traversal import (
    breadth_first_search,
    breadth_first_search_from,
    depth_first_search,
    depth_first_search_from,
)

__all__ = [
    "Frontier",
    "Graph",
    "Ranking",
    "Vertex",
    "VertexQueue",
    "VertexStack",
    "breadth_first_search",
    "breadth_first_search_from",
    "build_graph",
    "depth_first_search",
    "depth_first_search_from",
    "destroy_graph",
    "graph_from_string",
    "has_cycle",
    "parse_edge_codes",
    "topological_sort",
]
