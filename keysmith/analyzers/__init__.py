"""
Keysmith Analyzers
===================

Strength analysis of generated secrets.
"""

from keysmith.analyzers.strength import StrengthAnalyzer

__all__ = ["StrengthAnalyzer"]
