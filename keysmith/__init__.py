"""
Keysmith -- Password and PIN Generator
=======================================

Generates random passwords from weighted character classes and uniformly
drawn PIN numbers, with optional zxcvbn strength reports.

Modules:
    - keysmith.generators: Character classes, random sources, generators
    - keysmith.parsers: Length validation
    - keysmith.analyzers: Strength analysis
    - keysmith.core: Engine, data models, exceptions
    - keysmith.output: Console, JSON, and clipboard output
    - keysmith.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
