from abc import ABC
from typing import Any, Iterator

from fluent_collection.keys import Key


class Iterable(ABC):
    """Iteration over ``(key, value)`` pairs of the live backing store."""

    _items: dict[Key, Any]

    def __iter__(self) -> Iterator[tuple[Key, Any]]:
        # Changing the store size mid-iteration raises RuntimeError, as for dict.
        yield from self._items.items()

    def __len__(self) -> int:
        return len(self._items)
