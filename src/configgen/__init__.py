"""Generate default configuration files on disk when they do not exist yet."""

from .core.errors import (
    ConfiggenError,
    DirectoryCreationError,
    FileWriteError,
    SerializationError,
    UnsupportedFormatError,
)
from .core.filesystem import ensure_directory_exists
from .formats import (
    EncoderRegistry,
    KeyCase,
    SerializationFormat,
    build_registry,
    default_registry,
    encode_ron,
    to_payload,
)
from .initialization import initialize_config_file
from .platform.logging import logger, setup_logger

__all__ = [
    "ConfiggenError",
    "DirectoryCreationError",
    "EncoderRegistry",
    "FileWriteError",
    "KeyCase",
    "SerializationError",
    "SerializationFormat",
    "UnsupportedFormatError",
    "build_registry",
    "default_registry",
    "encode_ron",
    "ensure_directory_exists",
    "initialize_config_file",
    "logger",
    "setup_logger",
    "to_payload",
]
