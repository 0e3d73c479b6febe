"""
Keysmith Generators
====================

Character classes, random sources, and the password / PIN generators.
"""

from keysmith.generators.charsets import CHARSETS, DIGITS, LETTERS, SYMBOLS
from keysmith.generators.password import generate_password
from keysmith.generators.pin import generate_pin_number
from keysmith.generators.random_source import (
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    create_random_source,
)

__all__ = [
    "CHARSETS",
    "DIGITS",
    "LETTERS",
    "SYMBOLS",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "create_random_source",
    "generate_password",
    "generate_pin_number",
]
