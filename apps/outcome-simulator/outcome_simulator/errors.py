"""Errors raised by the outcome simulator."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a run is requested over an empty scenario list."""
