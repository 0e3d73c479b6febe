"""
Keysmith Output Module
=======================

Console display, JSON reports, and clipboard integration.
"""

from keysmith.output.clipboard import copy_to_clipboard
from keysmith.output.console import KeysmithConsoleOutput
from keysmith.output.report import KeysmithReportGenerator

__all__ = [
    "KeysmithConsoleOutput",
    "KeysmithReportGenerator",
    "copy_to_clipboard",
]
