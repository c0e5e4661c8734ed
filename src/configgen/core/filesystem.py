"""Filesystem helpers for provisioning configuration locations."""

from __future__ import annotations

from pathlib import Path

from configgen.core.errors import DirectoryCreationError, FileWriteError
from configgen.platform.logging import logger


def ensure_directory_exists(directory: Path | str) -> None:
    """Ensure ``directory`` and any missing ancestors exist as folders.

    Args:
        directory: Directory to provision.

    Raises:
        DirectoryCreationError: If the path cannot be inspected, exists but is
            not a directory, or cannot be created.
    """

    directory = Path(directory)
    try:
        exists = directory.exists()
        is_dir = exists and directory.is_dir()
    except OSError as e:
        raise DirectoryCreationError(directory) from e

    if exists:
        if not is_dir:
            raise DirectoryCreationError(
                directory, f"Path exists but is not a directory: {directory}"
            ) from NotADirectoryError(str(directory))
        return

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(directory) from e

    logger.debug(
        "Created directory %s",
        directory,
        extra={"provision_event": "provision.directory.created", "path": str(directory)},
    )


def write_new_file(path: Path, content: bytes, *, exclusive: bool = False) -> None:
    """Write the already encoded ``content`` to ``path``.

    Args:
        path: Destination file.
        content: Encoded document to persist.
        exclusive: Fail instead of truncating when ``path`` appears meanwhile.

    Raises:
        FileWriteError: If the file cannot be opened or written.
    """

    mode = "xb" if exclusive else "wb"
    try:
        with open(path, mode) as f:
            _ = f.write(content)
    except OSError as e:
        raise FileWriteError(path) from e


__all__ = ["ensure_directory_exists", "write_new_file"]
