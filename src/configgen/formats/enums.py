"""Enumerations describing on-disk formats and key naming conventions."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from configgen.core.errors import UnsupportedFormatError


class SerializationFormat(Enum):
    """Supported encodings for default configuration files."""

    TOML = ".toml"
    JSON = ".json"
    JSON5 = ".json5"
    RON = ".ron"

    @property
    def suffix(self) -> str:
        """Conventional file suffix for the format."""
        return self.value

    @classmethod
    def from_path(cls, path: Path | str) -> "SerializationFormat":
        """Infer the format from the suffix of ``path``.

        Args:
            path: File path whose suffix names the format.

        Returns:
            SerializationFormat: Matching member.

        Raises:
            UnsupportedFormatError: If the suffix is missing or unknown.
        """
        suffix = Path(path).suffix.lower()
        for member in cls:
            if member.value == suffix:
                return member
        raise UnsupportedFormatError(suffix, f"No serialization format for suffix {suffix!r}")


class KeyCase(Enum):
    """Naming conventions applied to mapping keys before encoding."""

    SNAKE = "snake"
    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"


__all__ = ["KeyCase", "SerializationFormat"]
