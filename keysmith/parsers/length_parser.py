"""
Length Parser
==============

Range checks that gate the generators from malformed input. Each parser
takes a textual token and returns the accepted integer or raises
:class:`~keysmith.core.errors.LengthValidationError` tagged with the
rejection kind.

A token is an optional ``+`` followed by ASCII decimal digits. Signs,
whitespace, and non-ASCII digits are parse errors.
"""

from __future__ import annotations

import re

from keysmith.core.errors import LengthValidationError, ValidationErrorKind

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 100
PIN_MIN_LENGTH = 4
PIN_MAX_LENGTH = 12

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def parse_length(token: str, low: int, high: int) -> int:
    """Parse *token* as an integer in the inclusive range ``[low, high]``."""
    if not _UNSIGNED_INT.fullmatch(token):
        raise LengthValidationError(
            ValidationErrorKind.PARSE, token, "Value must be an integer"
        )
    value = int(token)
    if not low <= value <= high:
        raise LengthValidationError(
            ValidationErrorKind.RANGE,
            token,
            f"The number must be between {low} and {high}",
        )
    return value


def parse_password_length(token: str) -> int:
    return parse_length(token, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH)


def parse_pin_length(token: str) -> int:
    return parse_length(token, PIN_MIN_LENGTH, PIN_MAX_LENGTH)
