"""Runtime settings for configgen itself."""

from .paths import ENV_LOG_FILE, configured_log_file, resolve_overridable_path

__all__ = ["ENV_LOG_FILE", "configured_log_file", "resolve_overridable_path"]
