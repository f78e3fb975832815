"""Byte strings built on the generic collection."""

from __future__ import annotations

from typing import Union

from polystring.collection import Collection
from polystring.fieldinfo import char_field_info, string_field_info

_Text = Union[str, bytes, bytearray, memoryview]


def _as_bytes(text: _Text, what: str) -> bytes:
    if text is None:
        raise TypeError(f"{what} must not be None")
    if isinstance(text, str):
        data = text.encode("utf-8")
    elif isinstance(text, (bytes, bytearray, memoryview)):
        data = bytes(text)
    else:
        raise TypeError(f"{what} must be str or bytes, not {type(text).__name__}")
    # Text is NUL-terminated: anything after the first NUL is not part of it.
    return data.split(b"\0", 1)[0]


class ByteString(Collection):
    """A string stored as a collection of bytes.

    Text given as ``str`` is stored UTF-8 encoded; length and indexes count
    bytes, not characters.
    """

    def __init__(self, text: _Text) -> None:
        super().__init__(char_field_info())
        for byte in _as_bytes(text, "text"):
            self.append(byte)

    def _new_empty(self) -> ByteString:
        return ByteString(b"")

    def char_at(self, index: int) -> int:
        """Return the byte at ``index``."""
        return self[index]

    def substring(self, start: int, end: int) -> ByteString:
        """Return the bytes from ``start`` up to, not including, ``end``."""
        return self.slice(start, end)

    def concat(self, other: ByteString) -> ByteString:
        """Return this string followed by ``other``."""
        if not isinstance(other, ByteString):
            raise TypeError("can only concatenate with another ByteString")
        return super().concat(other)

    def split(self, delimiters: _Text) -> Collection:
        """Split on any of the delimiter bytes, dropping empty pieces."""
        delimiter_set = set(_as_bytes(delimiters, "delimiters"))
        words = Collection(string_field_info())
        word = bytearray()
        for byte in self:
            if byte in delimiter_set:
                if word:
                    words.append(ByteString(word))
                    word.clear()
            else:
                word.append(byte)
        if word:
            words.append(ByteString(word))
        return words

    def to_bytes(self) -> bytes:
        """Return the stored bytes."""
        return bytes(self)

    def __str__(self) -> str:
        return self.to_bytes().decode("utf-8", errors="replace")