# core/errors.py
from __future__ import annotations


class VLabsError(Exception):
    """Base class for errors raised by the core package."""


class ConfigurationError(VLabsError, ValueError):
    """Constraints are empty or cannot be satisfied (raised before any password is produced)."""


class EntropySourceError(VLabsError, RuntimeError):
    """The OS secure random source is unavailable or failed mid-operation."""


class ExportError(VLabsError):
    """CSV export or clipboard copy failed."""
