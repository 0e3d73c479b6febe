"""
Keysmith Parsers
=================

Input parsing utilities for command-line and configuration values.
"""

from keysmith.parsers.length_parser import (
    parse_length,
    parse_password_length,
    parse_pin_length,
)

__all__ = [
    "parse_length",
    "parse_password_length",
    "parse_pin_length",
]
