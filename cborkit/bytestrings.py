"""CBOR byte strings and text strings, definite or chunked (indefinite)."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple, Union

from cborkit.items import CborError, CborType

_Bytes = Union[bytes, bytearray, memoryview]


class _ChunkedString:
    """Shared behaviour of byte and text strings.

    Passing ``None`` creates an indefinite string that is built from chunks;
    passing data creates a definite string holding a copy of it.
    """

    type: ClassVar[CborType]

    def __init__(self, data: Optional[_Bytes] = None) -> None:
        self._data: Optional[bytes]
        self._chunks: Optional[list]
        if data is None:
            self._data = None
            self._chunks = []
        else:
            self._data = self._coerce(data)
            self._chunks = None

    @staticmethod
    def _coerce(data) -> bytes:
        if isinstance(data, str):
            raise CborError("binary data expected, got str")
        return bytes(data)

    @property
    def is_definite(self) -> bool:
        return self._chunks is None

    @property
    def is_indefinite(self) -> bool:
        return not self.is_definite

    @property
    def data(self) -> bytes:
        """The raw bytes of a definite string."""
        if self._data is None:
            raise CborError("indefinite strings have no data of their own")
        return self._data

    @data.setter
    def data(self, value) -> None:
        if not self.is_definite:
            raise CborError("cannot assign data to an indefinite string")
        self._data = self._coerce(value)

    @property
    def chunks(self) -> Tuple["_ChunkedString", ...]:
        """The chunks of an indefinite string, in order."""
        if self._chunks is None:
            raise CborError("definite strings have no chunks")
        return tuple(self._chunks)

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    def add_chunk(self, chunk: "_ChunkedString") -> None:
        """Append a definite chunk of the same kind to an indefinite string."""
        if self._chunks is None:
            raise CborError("chunks can only be added to indefinite strings")
        if type(chunk) is not type(self):
            raise CborError(
                f"chunk must be a {type(self).__name__}, got {type(chunk).__name__}"
            )
        if not chunk.is_definite:
            raise CborError("chunks must be definite strings")
        self._chunks.append(chunk)

    def __len__(self) -> int:
        """Length of the data in bytes; zero for indefinite strings."""
        return 0 if self._data is None else len(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data and self._chunks == other._chunks

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.is_definite:
            return f"{name}({self._data!r})"
        return f"{name}(indefinite, {self._chunks!r})"


class ByteString(_ChunkedString):
    """A CBOR byte string (major type 2)."""

    type: ClassVar[CborType] = CborType.BYTESTRING

    def __init__(self, data: Optional[_Bytes] = None) -> None:
        super().__init__(data)

    def add_chunk(self, chunk: "ByteString") -> None:
        super().add_chunk(chunk)

    def __len__(self) -> int:
        return super().__len__()


class TextString(_ChunkedString):
    """A CBOR UTF-8 text string (major type 3).

    A ``str`` is stored as its UTF-8 encoding; bytes are kept as given.
    """

    type: ClassVar[CborType] = CborType.STRING

    def __init__(self, data: Union[str, _Bytes, None] = None) -> None:
        super().__init__(data)

    @staticmethod
    def _coerce(data) -> bytes:
        if isinstance(data, str):
            return data.encode("utf-8")
        return bytes(data)

    def add_chunk(self, chunk: "TextString") -> None:
        super().add_chunk(chunk)

    def __len__(self) -> int:
        return super().__len__()

    @property
    def text(self) -> str:
        """The decoded text, joining chunks for indefinite strings."""
        if self.is_definite:
            return _decode(self.data)
        return "".join(chunk.text for chunk in self.chunks)

    def codepoint_count(self) -> int:
        """Number of Unicode code points; raises CborError on invalid UTF-8."""
        if self.is_definite:
            return len(_decode(self.data))
        return sum(chunk.codepoint_count() for chunk in self.chunks)


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CborError(f"invalid UTF-8 at byte {exc.start}") from exc