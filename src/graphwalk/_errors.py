"""Exception types raised by graphwalk."""


class GraphError(Exception):
    """Base class for all graphwalk errors."""


class InvalidArgumentError(GraphError, ValueError):
    """An argument is absent, malformed, or refers to something that does not exist."""


class CapacityExceededError(GraphError, OverflowError):
    """A fixed-capacity traversal container received one push too many."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Container capacity of {capacity} exceeded")


class CycleDetectedError(GraphError, ValueError):
    """A topological ordering was requested for a graph that contains a cycle."""

    def __init__(self, vertices: tuple[str, ...]) -> None:
        self.vertices = vertices
        super().__init__(f"Cycle detected in graph; unordered vertices: {', '.join(vertices)}")


class OutOfMemoryError(GraphError, MemoryError):
    """Storage for a graph or a result could not be allocated."""


class ConfigError(GraphError):
    """Error in graphwalk configuration."""


class GraphFileError(GraphError):
    """A graph definition file could not be read or validated."""
