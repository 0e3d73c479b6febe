"""
Keysmith Core Data Models
==========================

Pydantic models describing generation policies, generated secrets, and
strength analysis results. All models are serialisable to JSON and are
consumed by both the console output layer and the JSON report generator.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security Symposium.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from keysmith.core.errors import AnalysisError


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CharacterClass(str, enum.Enum):
    """Named character class a password character is drawn from."""

    LETTERS = "letters"
    DIGITS = "digits"
    SYMBOLS = "symbols"


class SecretKind(str, enum.Enum):
    """Kind of generated secret."""

    PASSWORD = "password"
    PIN = "pin"


class StrengthLevel(str, enum.Enum):
    """Qualitative strength rating mapped from a zxcvbn score (0-4)."""

    VERY_WEAK = "very weak"
    WEAK = "weak"
    GOOD = "good"
    STRONG = "strong"
    VERY_STRONG = "very strong"

    @classmethod
    def from_score(cls, score: int) -> StrengthLevel:
        """Map a 0-4 score onto a level.

        Raises:
            AnalysisError: If *score* is outside 0-4.
        """
        levels = list(cls)
        if not 0 <= score < len(levels):
            raise AnalysisError(f"invalid score: {score}")
        return levels[score]


# ===================================================================== #
#  Generation Policies
# ===================================================================== #


# Relative class weights keyed by (include_numbers, include_symbols).
_CLASS_WEIGHTS: dict[tuple[bool, bool], tuple[int, ...]] = {
    (False, False): (10,),
    (True, False): (8, 2),
    (False, True): (8, 2),
    (True, True): (6, 2, 2),
}


def active_classes(numbers: bool, symbols: bool) -> tuple[CharacterClass, ...]:
    """Active classes in draw order: letters, then digits, then symbols."""
    classes = [CharacterClass.LETTERS]
    if numbers:
        classes.append(CharacterClass.DIGITS)
    if symbols:
        classes.append(CharacterClass.SYMBOLS)
    return tuple(classes)


def class_weights(numbers: bool, symbols: bool) -> tuple[int, ...]:
    """Weights aligned with :func:`active_classes`."""
    return _CLASS_WEIGHTS[(numbers, symbols)]


class PasswordPolicy(BaseModel):
    """Parameters for a single password generation.

    Attributes:
        length: Number of characters to produce.
        include_numbers: Enable the digit class.
        include_symbols: Enable the symbol class.
        require_each_class: Guarantee every active class appears at least once.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=1)
    include_numbers: bool = False
    include_symbols: bool = False
    require_each_class: bool = False

    def active_classes(self) -> tuple[CharacterClass, ...]:
        return active_classes(self.include_numbers, self.include_symbols)

    def weights(self) -> tuple[int, ...]:
        return class_weights(self.include_numbers, self.include_symbols)


class PinPolicy(BaseModel):
    """Parameters for a single PIN generation."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=1)


class GeneratedSecret(BaseModel):
    """A generated password or PIN, returned by value to the caller.

    The secret value is excluded from ``repr`` so that it never ends up
    in logs or tracebacks by accident.
    """

    model_config = ConfigDict(frozen=True)

    kind: SecretKind
    value: str = Field(..., repr=False)
    length: int
    seed: Optional[int] = None
    classes: tuple[CharacterClass, ...] = ()

    def __str__(self) -> str:
        return f"<{self.kind.value} length={self.length}>"


# ===================================================================== #
#  Strength Analysis Models
# ===================================================================== #


class CrackTimeEstimate(BaseModel):
    """Estimated time to crack a secret at one attack rate.

    Attributes:
        rate_label: Short rate label (e.g. ``"10^4/s"``).
        description: Row label used in reports (e.g. ``"10^4 attempts/second"``).
        seconds: Estimated time in seconds.
        display: Human-readable duration string.
    """

    rate_label: str
    description: str
    seconds: float
    display: str


class StrengthReport(BaseModel):
    """Complete strength analysis of a generated secret."""

    score: int = Field(..., ge=0, le=4)
    strength: StrengthLevel
    guesses_log10: float
    crack_times: list[CrackTimeEstimate] = Field(default_factory=list)

    @property
    def guesses_display(self) -> str:
        return f"10^{self.guesses_log10:.0f}"

    def summary(self) -> dict[str, Any]:
        """Serialisable summary: strength, guesses, and crack times by rate."""
        return {
            "strength": self.strength.value,
            "guesses": self.guesses_display,
            "crack_times": {
                estimate.rate_label: estimate.display
                for estimate in self.crack_times
            },
        }
