"""Serialization formats and their encoder adapters."""

from .enums import KeyCase, SerializationFormat
from .payload import SupportsModelDump, SupportsToDict, to_payload
from .registry import (
    BUILTIN_ENCODERS,
    Encoder,
    EncoderRegistry,
    build_registry,
    default_registry,
)
from .ron import encode_ron

__all__ = [
    "BUILTIN_ENCODERS",
    "Encoder",
    "EncoderRegistry",
    "KeyCase",
    "SerializationFormat",
    "SupportsModelDump",
    "SupportsToDict",
    "build_registry",
    "default_registry",
    "encode_ron",
    "to_payload",
]
