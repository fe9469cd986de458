"""Configuration loading from pyproject.toml."""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ._errors import ConfigError
from ._modes import DanglingEdgePolicy

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GraphwalkConfig:
    """Configuration loaded from the ``[tool.graphwalk]`` table of pyproject.toml.

    Attributes:
        dangling_edges: Reaction to edges naming an unknown vertex label.
        container_capacity: Fixed capacity for traversal containers, or None
            to let them grow.
        project_root: Directory containing the pyproject.toml, if one was found.

    """

    dangling_edges: DanglingEdgePolicy = DanglingEdgePolicy.WARN
    container_capacity: int | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Return the pyproject.toml closest to ``start_dir``, looking in its ancestors too.

    ``start_dir`` defaults to the current working directory. Returns None if
    no directory up to the filesystem root holds one.
    """
    start = (Path.cwd() if start_dir is None else start_dir).resolve()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _parse_dangling_edges(value: object) -> DanglingEdgePolicy:
    if not isinstance(value, str):
        msg = "Invalid [tool.graphwalk].dangling-edges: expected string"
        raise ConfigError(msg)
    try:
        return DanglingEdgePolicy(value)
    except ValueError as e:
        choices = ", ".join(repr(p.value) for p in DanglingEdgePolicy)
        msg = f"Invalid [tool.graphwalk].dangling-edges {value!r}. Expected one of {choices}"
        raise ConfigError(msg) from e


def _parse_container_capacity(value: object) -> int:
    # bool is a subclass of int but `true` is not a capacity
    if not isinstance(value, int) or isinstance(value, bool):
        msg = "Invalid [tool.graphwalk].container-capacity: expected integer"
        raise ConfigError(msg)
    if value < 0:
        msg = f"Invalid [tool.graphwalk].container-capacity {value}: must be non-negative"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> GraphwalkConfig:
    """Load and validate [tool.graphwalk] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphwalkConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool = data.get("tool", {})
    section = tool.get("graphwalk", {}) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        msg = f"Invalid [tool.graphwalk] in {pyproject_path}: expected a table"
        raise ConfigError(msg)
    if not section:
        return GraphwalkConfig(project_root=project_root)

    unknown = sorted(set(section) - {"dangling-edges", "container-capacity"})
    if unknown:
        msg = f"Unknown [tool.graphwalk] key(s): {', '.join(unknown)}"
        raise ConfigError(msg)

    dangling_edges = DanglingEdgePolicy.WARN
    if "dangling-edges" in section:
        dangling_edges = _parse_dangling_edges(section["dangling-edges"])

    container_capacity: int | None = None
    if "container-capacity" in section:
        container_capacity = _parse_container_capacity(section["container-capacity"])

    return GraphwalkConfig(
        dangling_edges=dangling_edges,
        container_capacity=container_capacity,
        project_root=project_root,
    )


def get_config(start_dir: Path | None = None) -> GraphwalkConfig:
    """Load the configuration that applies to ``start_dir`` (the working directory by default).

    Without a pyproject.toml the defaults apply, and graph loading falls back
    to the WARN dangling-edge policy with growable containers.
    """
    pyproject_path = find_pyproject_toml(start_dir)
    if pyproject_path is None:
        logger.debug("No pyproject.toml found; using default graphwalk config")
        return GraphwalkConfig()
    logger.debug("Reading graphwalk config from %s", pyproject_path)
    return load_config(pyproject_path)
