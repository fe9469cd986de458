"""Reading and writing graph definition files.

A definition file is a TOML document with one table per named graph::

    [graphs.levitin-dfs]
    mode = "directed"
    vertices = "ABCDEFG"
    edges = "AB AC BG BE CF DA DB DC DF DG GF"
"""

from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Self

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ._config import GraphwalkConfig
from ._errors import GraphFileError, InvalidArgumentError
from ._graph import Graph, graph_from_string, parse_edge_codes
from ._graph._store import require_graph
from ._modes import DanglingEdgePolicy, GraphMode

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


class GraphDefinition(BaseModel):
    """The textual description of one graph."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: GraphMode = GraphMode.DIRECTED
    vertices: str
    edges: str = ""

    @field_validator("vertices")
    @classmethod
    def _check_distinct_labels(cls, value: str) -> str:
        duplicates = sorted({label for label in value if value.count(label) > 1})
        if duplicates:
            msg = f"Duplicate vertex label(s): {', '.join(duplicates)}"
            raise ValueError(msg)
        return value

    @field_validator("edges")
    @classmethod
    def _check_edge_codes(cls, value: str) -> str:
        parse_edge_codes(value)
        return value

    def build(self, *, on_dangling: DanglingEdgePolicy = DanglingEdgePolicy.WARN) -> Graph:
        """Construct the graph this definition describes."""
        return graph_from_string(self.mode, self.vertices, self.edges, on_dangling=on_dangling)

    @classmethod
    def from_graph(cls, graph: Graph) -> Self:
        """Describe ``graph`` so that building the result reproduces its adjacency lists.

        The edges are written as directed edges in insertion order, so an
        undirected graph is exported with both directions of every edge and
        mode DIRECTED.

        Raises:
            InvalidArgumentError: If the graph has been destroyed, or a label is
                longer than one character, which the compact edge form cannot express.

        """
        graph = require_graph(graph)
        long_labels = [label for label in graph.labels if len(label) != 1]
        if long_labels:
            msg = f"Labels must be single characters to export, got {', '.join(map(repr, long_labels))}"
            raise InvalidArgumentError(msg)
        return cls(mode=GraphMode.DIRECTED, vertices="".join(graph.labels), edges=graph.edge_codes())


class GraphFile(BaseModel):
    """A collection of named graph definitions."""

    model_config = ConfigDict(extra="forbid")

    graphs: dict[str, GraphDefinition] = {}


def load_graph_definitions(path: Path) -> dict[str, GraphDefinition]:
    """Read and validate the graph definitions stored in a TOML file.

    Raises:
        GraphFileError: If the file is not valid TOML or a definition is invalid.

    """
    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {path}: {e}"
            raise GraphFileError(msg) from e

    try:
        graph_file = GraphFile.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph definitions in {path}: {e}"
        raise GraphFileError(msg) from e

    logger.info("Loaded %d graph definition(s) from %s", len(graph_file.graphs), path)
    return graph_file.graphs


def load_graphs(path: Path, *, config: GraphwalkConfig | None = None) -> dict[str, Graph]:
    """Build every graph defined in a TOML file.

    Dangling edges are handled according to ``config.dangling_edges``.

    Raises:
        GraphFileError: If the file is invalid, or a graph has a dangling edge
            under the ERROR policy.

    """
    if config is None:
        config = GraphwalkConfig()

    graphs: dict[str, Graph] = {}
    for name, definition in load_graph_definitions(path).items():
        try:
            graphs[name] = definition.build(on_dangling=config.dangling_edges)
        except InvalidArgumentError as e:
            msg = f"Graph {name!r} in {path}: {e}"
            raise GraphFileError(msg) from e
    return graphs


def export_graphs(graphs: Mapping[str, Graph], path: Path) -> None:
    """Write ``graphs`` to a TOML definition file, replacing any existing file."""
    graph_file = GraphFile(graphs={name: GraphDefinition.from_graph(graph) for name, graph in graphs.items()})
    with path.open("wb") as f:
        tomli_w.dump(graph_file.model_dump(mode="json"), f)
    logger.info("Exported %d graph(s) to %s", len(graphs), path)
