"""An append-only object pool addressed by index-based handles."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

__all__ = ["ObjPool", "PoolPtr"]

T = TypeVar("T")


class ObjPool(Generic[T]):
    """Holds objects created by ``factory``; handles stay valid as it grows."""

    def __init__(self, factory: Callable[..., T]) -> None:
        self._factory = factory
        self._objects: list[T] = []
        self._recycled: set[int] = set()

    def spawn(self, *args, **kwargs) -> "PoolPtr[T]":
        """Create a new object in the pool and return a handle to it."""
        self._objects.append(self._factory(*args, **kwargs))
        return PoolPtr(self, len(self._objects) - 1)

    def recycle(self, ptr: "PoolPtr[T]") -> None:
        """Mark an object as given back; its storage is kept and not reused."""
        if self.contains(ptr):
            self._recycled.add(ptr.index)

    @property
    def recycled_count(self) -> int:
        """Number of distinct objects that have been given back."""
        return len(self._recycled)

    def contains(self, ptr: "PoolPtr[T]") -> bool:
        """Return True if the handle refers to an object of this pool."""
        return ptr.pool is self and ptr.index is not None and 0 <= ptr.index < len(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def _get(self, index: int) -> T:
        return self._objects[index]


class PoolPtr(Generic[T]):
    """A handle to an object in an :class:`ObjPool`."""

    __slots__ = ("pool", "index")

    def __init__(self, pool: ObjPool[T] | None = None, index: int | None = None) -> None:
        self.pool = pool
        self.index = index

    def get(self) -> T:
        """Return the object the handle refers to."""
        if not self.is_valid():
            raise ValueError("invalid pool pointer")
        return self.pool._get(self.index)

    def clear(self) -> None:
        """Detach the handle from its pool."""
        self.pool = None
        self.index = None

    def recycle(self) -> None:
        """Give the object back to its pool and detach the handle."""
        if self.pool is not None:
            self.pool.recycle(self)
            self.clear()

    def is_valid(self) -> bool:
        return self.pool is not None and self.pool.contains(self)

    def __bool__(self) -> bool:
        return self.is_valid()

    def _key(self) -> tuple[int, int]:
        return (id(self.pool) if self.pool is not None else 0,
                self.index if self.index is not None else -1)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PoolPtr):
            return NotImplemented
        return self.pool is other.pool and self.index == other.index

    def __lt__(self, other: "PoolPtr[T]") -> bool:
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"PoolPtr(index={self.index})"