"""Core CBOR data items: integers, floats and simple values, maps and tags."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Optional, Tuple, Union

CTRL_FALSE = 20
CTRL_TRUE = 21
CTRL_NULL = 22
CTRL_UNDEF = 23

_UINT64_MAX = (1 << 64) - 1


class CborError(ValueError):
    """Raised when an item cannot be built or modified as requested."""


class CborType(enum.IntEnum):
    """CBOR major types."""

    UINT = 0
    NEGINT = 1
    BYTESTRING = 2
    STRING = 3
    ARRAY = 4
    MAP = 5
    TAG = 6
    FLOAT_CTRL = 7


class IntWidth(enum.IntEnum):
    """Storage width of an integer item."""

    INT_8 = 0
    INT_16 = 1
    INT_32 = 2
    INT_64 = 3

    @property
    def byte_count(self) -> int:
        return 1 << self.value

    @property
    def max_value(self) -> int:
        return (1 << (8 * self.byte_count)) - 1

    @classmethod
    def smallest_for(cls, value: int) -> "IntWidth":
        """Return the narrowest width able to hold ``value``."""
        for width in cls:
            if 0 <= value <= width.max_value:
                return width
        raise CborError(f"integer {value} does not fit in 64 bits")


class FloatWidth(enum.IntEnum):
    """Storage width of a float or control item; FLOAT_0 marks a control value."""

    FLOAT_0 = 0
    FLOAT_16 = 1
    FLOAT_32 = 2
    FLOAT_64 = 3


@dataclass(frozen=True)
class _Integer:
    value: int
    width: Optional[IntWidth] = None

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise CborError(f"integer value expected, got {self.value!r}")
        if self.value < 0:
            raise CborError("integer items store a non-negative magnitude")
        if self.width is None:
            width = IntWidth.smallest_for(self.value)
        else:
            width = IntWidth(self.width)
            if self.value > width.max_value:
                raise CborError(
                    f"value {self.value} does not fit in {width.byte_count} bytes"
                )
        object.__setattr__(self, "width", width)


@dataclass(frozen=True)
class UnsignedInt(_Integer):
    """An unsigned integer (major type 0)."""

    type: ClassVar[CborType] = CborType.UINT

    @property
    def integer(self) -> int:
        return self.value


@dataclass(frozen=True)
class NegativeInt(_Integer):
    """A negative integer (major type 1); ``value`` n stands for -1 - n."""

    type: ClassVar[CborType] = CborType.NEGINT

    @property
    def integer(self) -> int:
        return -1 - self.value


def _round_float(value: float, fmt: str) -> float:
    try:
        return struct.unpack(fmt, struct.pack(fmt, value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class FloatCtrl:
    """A float of a given width or, with FLOAT_0, a simple control value."""

    width: FloatWidth
    value: Union[float, int] = 0

    type: ClassVar[CborType] = CborType.FLOAT_CTRL

    def __post_init__(self) -> None:
        width = FloatWidth(self.width)
        object.__setattr__(self, "width", width)
        if width is FloatWidth.FLOAT_0:
            value = self.value
            if isinstance(value, bool) or not isinstance(value, int):
                raise CborError(f"control value must be an integer, got {value!r}")
            if not 0 <= value <= 0xFF:
                raise CborError(f"control value {value} out of range")
            return
        value = float(self.value)
        if width is FloatWidth.FLOAT_16:
            value = _round_float(value, "<e")
        elif width is FloatWidth.FLOAT_32:
            value = _round_float(value, "<f")
        object.__setattr__(self, "value", value)

    @property
    def is_ctrl(self) -> bool:
        return self.width is FloatWidth.FLOAT_0

    @property
    def as_bool(self) -> bool:
        """The truth value of a boolean item."""
        if not is_bool(self):
            raise CborError("item is not a boolean")
        return self.value == CTRL_TRUE


Pair = Tuple[Any, Any]


class Map:
    """A CBOR map; a capacity makes it definite, ``None`` makes it indefinite."""

    type: ClassVar[CborType] = CborType.MAP

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise CborError("map capacity cannot be negative")
        self._capacity = capacity
        self._pairs: list[Pair] = []

    @property
    def is_definite(self) -> bool:
        return self._capacity is not None

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def add(self, key: Any, value: Any) -> None:
        """Append a key/value pair; a full definite map refuses it."""
        if self._capacity is not None and len(self._pairs) >= self._capacity:
            raise CborError("definite map is full")
        self._pairs.append((key, value))

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return self.is_definite == other.is_definite and self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "definite" if self.is_definite else "indefinite"
        return f"Map({kind}, {self._pairs!r})"


@dataclass
class Tag:
    """A tagged item (major type 6)."""

    value: int
    item: Any = None

    type: ClassVar[CborType] = CborType.TAG

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise CborError(f"tag value must be an integer, got {self.value!r}")
        if not 0 <= self.value <= _UINT64_MAX:
            raise CborError(f"tag value {self.value} out of range")


def ctrl(value: int) -> FloatCtrl:
    """Build a simple (control) value."""
    return FloatCtrl(FloatWidth.FLOAT_0, value)


def null() -> FloatCtrl:
    return ctrl(CTRL_NULL)


def undefined() -> FloatCtrl:
    return ctrl(CTRL_UNDEF)


def boolean(value: bool) -> FloatCtrl:
    return ctrl(CTRL_TRUE if value else CTRL_FALSE)


def is_int(item: Any) -> bool:
    """Is the item an integer, either positive or negative?"""
    return isinstance(item, (UnsignedInt, NegativeInt))


def is_float(item: Any) -> bool:
    return isinstance(item, FloatCtrl) and not item.is_ctrl


def is_bool(item: Any) -> bool:
    return (
        isinstance(item, FloatCtrl)
        and item.is_ctrl
        and item.value in (CTRL_FALSE, CTRL_TRUE)
    )


def is_null(item: Any) -> bool:
    return isinstance(item, FloatCtrl) and item.is_ctrl and item.value == CTRL_NULL


def is_undef(item: Any) -> bool:
    return isinstance(item, FloatCtrl) and item.is_ctrl and item.value == CTRL_UNDEF