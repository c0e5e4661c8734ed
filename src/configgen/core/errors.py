"""Exceptions raised while provisioning default configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from configgen.formats.enums import SerializationFormat


class ConfiggenError(Exception):
    """Base exception for configuration provisioning failures."""


class DirectoryCreationError(ConfiggenError):
    """Raised when the configuration directory cannot be created."""

    def __init__(self, path: Path, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"Configuration directory creation failed: {path}")


class SerializationError(ConfiggenError):
    """Raised when the default configuration cannot be encoded."""

    def __init__(self, format: SerializationFormat, message: str | None = None) -> None:
        self.format = format
        super().__init__(message or f"Serialization to {format.name} failed")


class FileWriteError(ConfiggenError):
    """Raised when the encoded configuration cannot be written to disk."""

    def __init__(self, path: Path, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"Writing configuration file failed: {path}")


class UnsupportedFormatError(ConfiggenError):
    """Raised when no encoder is available for the requested format."""

    def __init__(self, format: object, message: str | None = None) -> None:
        self.format = format
        super().__init__(message or f"Unhandled serialization format: {format!r}")


__all__ = [
    "ConfiggenError",
    "DirectoryCreationError",
    "FileWriteError",
    "SerializationError",
    "UnsupportedFormatError",
]
