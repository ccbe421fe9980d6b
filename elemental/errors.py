"""Exceptions raised by the builders, UV mapper, modifiers and noise generator.

All of them derive from ``ValueError`` so callers that already guard argument
checks with ``except ValueError`` keep working.
"""
from __future__ import annotations


class ElementalError(Exception):
    """Base class for every error raised by this package."""


class InvalidShapeError(ElementalError, ValueError):
    """A size, segment count, radius or similar parameter is out of range."""


class InsufficientDataError(ElementalError, ValueError):
    """Fewer input points were supplied than the shape needs."""


class UnsupportedAxisError(ElementalError, ValueError):
    """A modifier was asked to work along an axis it does not support."""


class PreconditionError(ElementalError, ValueError):
    """The operation was invoked on data lacking what it requires."""
