"""Bounded most-recently-used list.

Items are stored least-recent first; the last slot is the most recent one.
Lookups are a linear scan with ``==``, which is fine for the small capacities
this is meant for (tab lists, history menus).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from recency.config import RecencyConfig

logger = logging.getLogger("recency.list")

T = TypeVar("T")

DEFAULT_CAPACITY = 7


class RecencyList(Generic[T]):
    """An ordered, duplicate-free list that evicts its least-recent item on overflow.

    ``use`` promotes an existing item (or appends a new one) to the most-recent
    slot. Lowering ``capacity`` does not evict anything by itself; the bound is
    enforced the next time ``use`` overflows it.

    Not thread-safe: a single owner mutates it, or callers bring their own lock.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._items: list[T] = []
        self._capacity = capacity

    @classmethod
    def with_capacity(cls, capacity: int) -> RecencyList[T]:
        return cls(capacity)

    @classmethod
    def from_config(cls, config: RecencyConfig) -> RecencyList[T]:
        return cls(config.capacity)

    def _position(self, item: T) -> int | None:
        for idx, existing in enumerate(self._items):
            if existing == item:
                return idx
        return None

    def use(self, item: T) -> None:
        """Mark *item* as the most recently used element."""

        pos = self._position(item)
        if pos is not None:
            del self._items[pos]
        self._items.append(item)
        if len(self._items) > self._capacity:
            evicted = self._items.pop(0)
            logger.debug("Evicted %r (capacity=%d)", evicted, self._capacity)

    def remove(self, item: T) -> None:
        """Remove the element equal to *item*; absent items are ignored."""

        pos = self._position(item)
        if pos is not None:
            del self._items[pos]

    def most_recent(self) -> T | None:
        if not self._items:
            return None
        return self._items[-1]

    def is_empty(self) -> bool:
        return len(self) == 0

    def iter(self) -> Iterator[T]:
        """Iterate from most recent to least recent."""

        return reversed(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, capacity: int) -> None:
        if len(self._items) > capacity:
            logger.debug(
                "Capacity lowered to %d with %d items stored; shrinking on next use",
                capacity,
                len(self._items),
            )
        self._capacity = capacity

    def set_capacity(self, capacity: int) -> None:
        self.capacity = capacity

    def retain(self, predicate: Callable[[T], object]) -> None:
        """Keep only the elements for which *predicate* returns true.

        Unlike ``filter``, the predicate is called most-recent first, and it gets
        the stored object so it may update it in place before deciding.
        """

        # Walk downward so deleting index i leaves indices < i untouched.
        for idx in range(len(self._items) - 1, -1, -1):
            if not predicate(self._items[idx]):
                del self._items[idx]

    def to_dict(self) -> dict[str, Any]:
        from recency.serde import to_dict  # noqa: PLC0415

        return to_dict(self)

    @classmethod
    def from_dict(cls, data: object, item_type: Any = Any) -> RecencyList[Any]:
        from recency.serde import from_dict  # noqa: PLC0415

        return from_dict(data, item_type=item_type)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __contains__(self, item: object) -> bool:
        return self._position(item) is not None  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecencyList):
            return NotImplemented
        return self._capacity == other._capacity and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={self._items!r}, capacity={self._capacity})"
