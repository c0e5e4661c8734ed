"""Summary: Map serialization formats to the encoder adapters that produce them.
Why: Select codecs through one registry so missing formats fail at construction."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Final

import json5
import tomli_w

from configgen.core.errors import UnsupportedFormatError

from .enums import SerializationFormat
from .ron import encode_ron

Encoder = Callable[[Any], str]


def _terminated(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def encode_toml(payload: Any) -> str:
    """Encode ``payload`` as a TOML document; the top level must be a table.

    The text is exactly what ``tomli_w.dumps`` produces.
    """

    if not isinstance(payload, Mapping):
        raise TypeError("TOML documents require a table at the top level")
    return tomli_w.dumps(payload)


def encode_json(payload: Any) -> str:
    """Encode ``payload`` as an indented JSON document.

    Unlike a bare ``json.dumps`` call the output is indented by two spaces,
    keeps non-ASCII text unescaped and ends with a newline.
    """

    return _terminated(json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False))


def encode_json5(payload: Any) -> str:
    """Encode ``payload`` as a JSON5 document with bare identifier keys.

    The output is indented by two spaces and ends with a newline, which a
    bare ``json5.dumps`` call does not add.
    """

    return _terminated(json5.dumps(payload, indent=2, ensure_ascii=False))


def encode_ron_document(payload: Any) -> str:
    """Encode ``payload`` as a compact RON document followed by a newline."""

    return _terminated(encode_ron(payload))


BUILTIN_ENCODERS: Final[Mapping[SerializationFormat, Encoder]] = {
    SerializationFormat.TOML: encode_toml,
    SerializationFormat.JSON: encode_json,
    SerializationFormat.JSON5: encode_json5,
    SerializationFormat.RON: encode_ron_document,
}


class EncoderRegistry:
    """Lookup table from :class:`SerializationFormat` to encoder callables."""

    def __init__(self, encoders: Mapping[SerializationFormat, Encoder] | None = None) -> None:
        self._encoders: dict[SerializationFormat, Encoder] = dict(encoders or {})

    def register(self, format: SerializationFormat, encoder: Encoder) -> None:
        """Register or replace the encoder used for ``format``."""

        self._encoders[format] = encoder

    def get(self, format: SerializationFormat) -> Encoder:
        """Return the encoder for ``format``.

        Raises:
            UnsupportedFormatError: If no encoder is registered for ``format``.
        """

        try:
            return self._encoders[format]
        except KeyError:
            raise UnsupportedFormatError(format) from None

    def formats(self) -> frozenset[SerializationFormat]:
        """Return the formats this registry can encode."""

        return frozenset(self._encoders)

    def __contains__(self, format: object) -> bool:
        return format in self._encoders

    def __iter__(self) -> Iterator[SerializationFormat]:
        return iter(self._encoders)

    def __len__(self) -> int:
        return len(self._encoders)


def build_registry(formats: Iterable[SerializationFormat] | None = None) -> EncoderRegistry:
    """Create a registry holding the built-in encoders for ``formats``.

    Args:
        formats: Formats the caller needs. Defaults to every built-in format.

    Returns:
        EncoderRegistry: Registry populated with the requested encoders.

    Raises:
        UnsupportedFormatError: If a requested format has no built-in encoder.
    """

    requested = list(BUILTIN_ENCODERS) if formats is None else list(formats)
    registry = EncoderRegistry()
    for format in requested:
        encoder = BUILTIN_ENCODERS.get(format)
        if encoder is None:
            raise UnsupportedFormatError(format)
        registry.register(format, encoder)
    return registry


_default_registry: EncoderRegistry | None = None


def default_registry() -> EncoderRegistry:
    """Return the shared registry holding every built-in encoder."""

    global _default_registry
    if _default_registry is None:
        _default_registry = build_registry()
    return _default_registry


__all__ = [
    "BUILTIN_ENCODERS",
    "Encoder",
    "EncoderRegistry",
    "build_registry",
    "default_registry",
    "encode_json",
    "encode_json5",
    "encode_ron_document",
    "encode_toml",
]
