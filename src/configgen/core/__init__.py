"""Core utilities shared across configgen layers."""

from .errors import (
    ConfiggenError,
    DirectoryCreationError,
    FileWriteError,
    SerializationError,
    UnsupportedFormatError,
)
from .filesystem import ensure_directory_exists, write_new_file

__all__ = [
    "ConfiggenError",
    "DirectoryCreationError",
    "FileWriteError",
    "SerializationError",
    "UnsupportedFormatError",
    "ensure_directory_exists",
    "write_new_file",
]
