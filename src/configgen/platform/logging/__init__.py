"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper, and Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import ProvisioningRichHandler

__all__ = [
    "LOGGER_NAME",
    "ProvisioningRichHandler",
    "logger",
    "setup_logger",
]
