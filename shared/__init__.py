"""
Keysmith Shared Module
======================

Configuration, logging, and console utilities shared across Keysmith
components.
"""

from shared.config import KeysmithConfig

__all__ = ["KeysmithConfig"]
