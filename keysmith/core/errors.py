"""
Keysmith Exceptions
====================

Single exception hierarchy for every failure Keysmith can report. The
generation core raises these; only the CLI boundary turns them into
user-facing messages and exit codes.
"""

from __future__ import annotations

import enum


class KeysmithError(Exception):
    """Base class for all Keysmith errors."""


class ValidationErrorKind(str, enum.Enum):
    """Machine-distinguishable reason a length token was rejected."""

    PARSE = "parse"
    RANGE = "range"


class LengthValidationError(KeysmithError, ValueError):
    """A length token was not an integer or was outside the allowed bounds.

    Attributes:
        kind: Whether the token failed to parse or was out of range.
        token: The rejected input, as given.
        message: Human-readable rejection reason.
    """

    def __init__(self, kind: ValidationErrorKind, token: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.token = token
        self.message = message


class InvalidConfigurationError(KeysmithError):
    """Generation parameters cannot be satisfied (degenerate weights,
    impossible class requirements, invalid seeds or config defaults)."""


class ClipboardError(KeysmithError):
    """The system clipboard could not be accessed."""


class AnalysisError(KeysmithError):
    """The strength scorer could not score the given input."""
