"""Summary: Write a default configuration file when none exists yet.
Why: Give applications a valid file to read on first start without touching existing ones."""

from __future__ import annotations

from pathlib import Path

from configgen.core.errors import FileWriteError, SerializationError
from configgen.core.filesystem import ensure_directory_exists, write_new_file
from configgen.formats.enums import KeyCase, SerializationFormat
from configgen.formats.payload import to_payload
from configgen.formats.registry import EncoderRegistry, default_registry
from configgen.platform.logging import logger


def initialize_config_file(
    config: object,
    config_file_path: Path | str,
    format: SerializationFormat,
    *,
    key_case: KeyCase | None = None,
    registry: EncoderRegistry | None = None,
    exclusive: bool = False,
) -> None:
    """Serialize ``config`` to ``config_file_path`` unless the file already exists.

    The parent directory is created first. An existing file is never read,
    merged or overwritten; the call simply succeeds. The existence check and
    the write are not atomic, so two concurrent callers may both write and
    the last one wins unless ``exclusive`` is set.

    Args:
        config: Default configuration as a mapping, dataclass instance, or an
            object exposing ``model_dump()`` or ``to_dict()``.
        config_file_path: Destination file.
        format: Encoding to write.
        key_case: Optional naming convention applied to keys before encoding.
        registry: Encoders to choose from. Defaults to every built-in format.
        exclusive: Create the file exclusively so a concurrent creator makes
            this call fail instead of being overwritten.

    Raises:
        DirectoryCreationError: If the parent directory cannot be created.
        UnsupportedFormatError: If ``registry`` has no encoder for ``format``.
        SerializationError: If ``config`` cannot be encoded in ``format``.
        FileWriteError: If the target cannot be checked or the encoded document
            cannot be written.
    """

    path = Path(config_file_path)
    ensure_directory_exists(path.parent)

    try:
        exists = path.is_file()
    except OSError as e:
        raise FileWriteError(path) from e

    if exists:
        logger.debug(
            "Configuration file already exists at %s",
            path,
            extra={"provision_event": "provision.file.exists", "path": str(path)},
        )
        return

    encoder = (registry or default_registry()).get(format)
    try:
        content = encoder(to_payload(config, key_case=key_case)).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(format, f"Serialization to {format.name} failed: {e}") from e

    write_new_file(path, content, exclusive=exclusive)
    logger.info(
        "Default configuration written to %s",
        path,
        extra={
            "provision_event": "provision.file.created",
            "path": str(path),
            "serialization_format": format.name,
        },
    )


__all__ = ["initialize_config_file"]
