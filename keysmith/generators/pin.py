"""PIN number generator: uniformly drawn decimal digits."""

from __future__ import annotations

from keysmith.generators.charsets import DIGITS
from keysmith.generators.random_source import RandomSource


def generate_pin_number(rng: RandomSource, length: int) -> str:
    """Generate a PIN of exactly *length* digits (leading zeros allowed)."""
    return "".join(DIGITS[rng.uniform_int(0, len(DIGITS))] for _ in range(length))
