"""Element type descriptions used by collections."""

from __future__ import annotations

import operator
import struct
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class FieldInfo:
    """Describes how elements of one kind are stored, copied and rendered.

    ``size`` is the storage size of one element in bytes, ``copy`` returns an
    independent copy of a value suitable for storing, and ``render`` returns
    the raw bytes that represent the value when printed.
    """

    name: str
    size: int
    copy: Callable[[Any], Any]
    render: Callable[[Any], bytes]


def _copy_char(value: Any) -> int:
    byte = operator.index(value)
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"a char must be a byte value in 0..255, got {byte}")
    return byte


def _render_char(value: int) -> bytes:
    return bytes([value])


def _copy_string(value: Any) -> Any:
    # A fresh instance of the same string type built from the same bytes.
    return type(value)(value.to_bytes())


def _render_string(value: Any) -> bytes:
    return value.to_bytes()


_CHAR_INFO = FieldInfo(name="char", size=1, copy=_copy_char, render=_render_char)
_STRING_INFO = FieldInfo(
    name="string",
    size=struct.calcsize("P"),
    copy=_copy_string,
    render=_render_string,
)


def char_field_info() -> FieldInfo:
    """Return the shared description of single-byte characters."""
    return _CHAR_INFO


def string_field_info() -> FieldInfo:
    """Return the shared description of string elements."""
    return _STRING_INFO