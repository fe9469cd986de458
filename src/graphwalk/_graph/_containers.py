"""Stack and queue of vertex indices used to drive graph traversals."""

from collections import deque
from typing import Protocol

from graphwalk._errors import CapacityExceededError, InvalidArgumentError


class Frontier(Protocol):
    """Container discipline of a traversal: which pending vertex is visited next."""

    def push(self, vertex: int) -> None: ...

    def pop(self) -> int: ...

    def is_empty(self) -> bool: ...


def _check_capacity(capacity: int | None) -> int | None:
    if capacity is not None and capacity < 0:
        msg = f"Capacity must be non-negative, got {capacity}"
        raise InvalidArgumentError(msg)
    return capacity


class VertexStack:
    """Last-in first-out holder of vertex indices.

    Grows on demand unless ``capacity`` is given, in which case pushing onto a
    full stack raises CapacityExceededError.
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int | None = None) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"VertexStack({self._items!r}, capacity={self._capacity})"

    @property
    def capacity(self) -> int | None:
        return self._capacity

    def push(self, vertex: int) -> None:
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise CapacityExceededError(self._capacity)
        self._items.append(vertex)

    def pop(self) -> int:
        if not self._items:
            msg = "pop from empty stack"
            raise IndexError(msg)
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items


class VertexQueue:
    """First-in first-out holder of vertex indices.

    Same capacity rules as VertexStack.
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int | None = None) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"VertexQueue({list(self._items)!r}, capacity={self._capacity})"

    @property
    def capacity(self) -> int | None:
        return self._capacity

    def push(self, vertex: int) -> None:
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise CapacityExceededError(self._capacity)
        self._items.append(vertex)

    def pop(self) -> int:
        if not self._items:
            msg = "pop from empty queue"
            raise IndexError(msg)
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items
