"""Encoder for Rusty Object Notation (RON) documents.

Output is compact, matching what the reference Rust codec emits for plain
data: string-keyed mappings whose keys are all identifiers become anonymous
structs ``(field:value)``, other mappings become maps ``{key:value}``, lists
become sequences ``[a,b]`` and tuples become RON tuples ``(a,b)``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, Final

_IDENTIFIER: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {"true", "false", "None", "Some", "inf", "NaN"}
)

_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def _is_identifier(key: object) -> bool:
    return isinstance(key, str) and _IDENTIFIER.fullmatch(key) is not None


def _field_name(key: str) -> str:
    # reserved words need the raw identifier form
    return f"r#{key}" if key in _RESERVED_WORDS else key


def _encode_string(value: str) -> str:
    parts: list[str] = ['"']
    for char in value:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _encode_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "." not in text and "e" not in text:
        text += ".0"
    return text


class _RonEncoder:
    def __init__(self) -> None:
        self._active: set[int] = set()

    def encode(self, value: Any) -> str:
        # bool before int: bool is an int subclass
        if value is None:
            return "None"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            if not _is_identifier(value.name):
                raise ValueError(f"Enum member {value.name!r} is not a RON identifier")
            return value.name
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _encode_float(value)
        if isinstance(value, str):
            return _encode_string(value)
        if isinstance(value, Mapping):
            return self._container(value, self._mapping)
        if isinstance(value, tuple):
            return self._container(value, lambda items: "(" + self._join(items) + ")")
        if isinstance(value, list):
            return self._container(value, lambda items: "[" + self._join(items) + "]")
        raise TypeError(f"Object of type {type(value).__name__} is not RON serializable")

    def _container(self, value: Any, render: Callable[[Any], str]) -> str:
        marker = id(value)
        if marker in self._active:
            raise ValueError("Circular reference detected")
        self._active.add(marker)
        try:
            return render(value)
        finally:
            self._active.discard(marker)

    def _join(self, items: Iterable[Any]) -> str:
        return ",".join(self.encode(item) for item in items)

    def _mapping(self, value: Mapping[Any, Any]) -> str:
        if value and all(_is_identifier(key) for key in value):
            fields = ",".join(
                f"{_field_name(key)}:{self.encode(item)}" for key, item in value.items()
            )
            return f"({fields})"
        entries = ",".join(
            f"{self.encode(key)}:{self.encode(item)}" for key, item in value.items()
        )
        return "{" + entries + "}"


def encode_ron(value: Any) -> str:
    """Encode ``value`` as a compact RON document.

    Raises:
        TypeError: If ``value`` contains an unsupported type.
        ValueError: If ``value`` is self-referential or an enum name is not a
            valid identifier.
    """

    return _RonEncoder().encode(value)


__all__ = ["encode_ron"]
