"""Exceptions raised by the identifier formatters."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a formatter receives an identifier that fails its validity check."""
