"""Textbook graph traversal and ordering algorithms."""

__all__ = [
    "CapacityExceededError",
    "ConfigError",
    "CycleDetectedError",
    "DanglingEdgePolicy",
    "Frontier",
    "Graph",
    "GraphDefinition",
    "GraphError",
    "GraphFileError",
    "GraphMode",
    "GraphwalkConfig",
    "InvalidArgumentError",
    "OutOfMemoryError",
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
    "export_graphs",
    "find_pyproject_toml",
    "get_config",
    "graph_from_string",
    "has_cycle",
    "load_config",
    "load_graph_definitions",
    "load_graphs",
    "parse_edge_codes",
    "topological_sort",
]

from ._config import GraphwalkConfig, find_pyproject_toml, get_config, load_config
from ._errors import (
    CapacityExceededError,
    ConfigError,
    CycleDetectedError,
    GraphError,
    GraphFileError,
    InvalidArgumentError,
    OutOfMemoryError,
)
from ._graph import (
    Frontier,
    Graph,
    Ranking,
    Vertex,
    VertexQueue,
    VertexStack,
    breadth_first_search,
    breadth_first_search_from,
    build_graph,
    depth_first_search,
    depth_first_search_from,
    destroy_graph,
    graph_from_string,
    has_cycle,
    parse_edge_codes,
    topological_sort,
)
from ._io import GraphDefinition, export_graphs, load_graph_definitions, load_graphs
from ._modes import DanglingEdgePolicy, GraphMode
