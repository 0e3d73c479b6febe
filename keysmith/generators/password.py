"""
Password Generator
===================

Builds passwords from weighted character classes. Letters are always
active; digits and symbols are optional. Class weights are fixed:

    ==============================  ====================
    classes                         weights
    ==============================  ====================
    letters                         10 (100%)
    letters + digits                8 / 2 (80/20)
    letters + symbols               8 / 2 (80/20)
    letters + digits + symbols      6 / 2 / 2 (60/20/20)
    ==============================  ====================

Every position is drawn independently: first a class by weight, then a
character uniformly within that class. Repeats are allowed, and by
default an enabled class is not guaranteed to appear in short outputs.
"""

from __future__ import annotations

from keysmith.core.errors import InvalidConfigurationError
from keysmith.core.models import active_classes, class_weights
from keysmith.generators.charsets import CHARSETS
from keysmith.generators.random_source import RandomSource

# Upper bound on whole-string redraws when every class must appear
MAX_ATTEMPTS = 1000


def generate_password(
    rng: RandomSource,
    length: int,
    numbers: bool = False,
    symbols: bool = False,
    require_each_class: bool = False,
) -> str:
    """Generate a password of exactly *length* characters.

    Args:
        rng: Random source used for every draw.
        length: Number of characters to produce.
        numbers: Include the digit class.
        symbols: Include the symbol class.
        require_each_class: Redraw the whole password until each active
            class appears at least once.

    Returns:
        The generated password.

    Raises:
        InvalidConfigurationError: If every class cannot appear in
            *length* characters, or no valid password was drawn within
            :data:`MAX_ATTEMPTS` attempts.
    """
    charsets = [CHARSETS[cls] for cls in active_classes(numbers, symbols)]
    weights = class_weights(numbers, symbols)

    if not require_each_class:
        return _draw(rng, length, charsets, weights)

    if length < len(charsets):
        raise InvalidConfigurationError(
            f"length {length} is too short to include all "
            f"{len(charsets)} character classes"
        )
    for _ in range(MAX_ATTEMPTS):
        password = _draw(rng, length, charsets, weights)
        if all(any(c in charset for c in password) for charset in charsets):
            return password
    raise InvalidConfigurationError(
        f"no password containing every class after {MAX_ATTEMPTS} attempts"
    )


def _draw(
    rng: RandomSource,
    length: int,
    charsets: list[tuple[str, ...]],
    weights: tuple[int, ...],
) -> str:
    chars = []
    for _ in range(length):
        charset = charsets[rng.weighted_index(weights)]
        chars.append(charset[rng.uniform_int(0, len(charset))])
    return "".join(chars)
