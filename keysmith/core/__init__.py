"""
Keysmith Core Module
=====================

Data models and exceptions. The engine lives in
:mod:`keysmith.core.engine`.
"""

from keysmith.core.errors import (
    AnalysisError,
    ClipboardError,
    InvalidConfigurationError,
    KeysmithError,
    LengthValidationError,
    ValidationErrorKind,
)
from keysmith.core.models import (
    CharacterClass,
    CrackTimeEstimate,
    GeneratedSecret,
    PasswordPolicy,
    PinPolicy,
    SecretKind,
    StrengthLevel,
    StrengthReport,
)

__all__ = [
    "AnalysisError",
    "CharacterClass",
    "ClipboardError",
    "CrackTimeEstimate",
    "GeneratedSecret",
    "InvalidConfigurationError",
    "KeysmithError",
    "LengthValidationError",
    "PasswordPolicy",
    "PinPolicy",
    "SecretKind",
    "StrengthLevel",
    "StrengthReport",
    "ValidationErrorKind",
]
