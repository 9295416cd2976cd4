"""Shared exception policy helpers for asset extraction paths."""

from __future__ import annotations

import logging
import zipfile
from typing import TypeAlias


class AssetExtractionError(ValueError):
    """Source unit decoded but did not have the expected shape."""


# Explicitly bounded set of failures tolerated per source unit.
RecoverableExtractionErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_EXTRACTION_ERRORS: RecoverableExtractionErrors = (
    AssetExtractionError,
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    KeyError,
    AttributeError,
    EOFError,
    zipfile.BadZipFile,
)

# Failures a consumer may raise while receiving an admitted entry.
RECOVERABLE_PUBLISH_ERRORS: RecoverableExtractionErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    KeyError,
    AttributeError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.WARNING,
) -> None:
    """Log a tolerated failure; traceback is attached only when DEBUG is enabled."""
    logger.log(level, message, *args, exc_info=logger.isEnabledFor(logging.DEBUG))


__all__ = [
    "AssetExtractionError",
    "RECOVERABLE_EXTRACTION_ERRORS",
    "RECOVERABLE_PUBLISH_ERRORS",
    "RecoverableExtractionErrors",
    "log_recoverable",
]
