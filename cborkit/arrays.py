"""CBOR arrays, definite (fixed capacity) or indefinite (growable)."""

from __future__ import annotations

from typing import Any, ClassVar, Iterator, Optional

from cborkit.items import CborError, CborType


class Array:
    """A CBOR array; a capacity makes it definite, ``None`` makes it indefinite."""

    type: ClassVar[CborType] = CborType.ARRAY

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise CborError("array capacity cannot be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def is_definite(self) -> bool:
        return self._capacity is not None

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def push(self, item: Any) -> None:
        """Append an item; a definite array never grows past its capacity."""
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise CborError("definite array is full")
        self._items.append(item)

    def set(self, index: int, value: Any) -> None:
        """Replace the item at ``index`` or append when ``index`` is one past the end."""
        if index == len(self._items):
            self.push(value)
        else:
            self.replace(index, value)

    def replace(self, index: int, value: Any) -> None:
        """Replace an existing item."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"array index {index} out of range")
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.is_definite == other.is_definite and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "definite" if self.is_definite else "indefinite"
        return f"Array({kind}, {self._items!r})"