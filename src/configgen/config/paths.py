"""Path settings resolved from explicit arguments and the environment.

Policy:
- Log file: explicit argument, else ``CONFIGGEN_LOG_FILE``, else no file
  (console logging only).
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final


ENV_LOG_FILE: Final[str] = "CONFIGGEN_LOG_FILE"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    if default_path is None:
        return None
    return default_path.expanduser().resolve()


def configured_log_file(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the log file to write to, or ``None`` for console-only logging."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_LOG_FILE,
        default_factory=lambda: None,
    )


__all__ = ["ENV_LOG_FILE", "configured_log_file", "resolve_overridable_path"]
