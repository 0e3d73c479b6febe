"""
Keysmith Console Output
========================

Console formatters for generated secrets. The raw secret is written to
stdout as a single line with no styling so that it can be piped; the
strength report is rendered as three Rich tables:

1. Generated Password
2. Password Security Analysis (strength, guesses)
3. Password Crack Time Estimations (one row per attack rate)
"""

from __future__ import annotations

import click

from shared.console import KeysmithConsole
from keysmith.core.models import GeneratedSecret, StrengthReport


class KeysmithConsoleOutput:
    """Render secrets and strength reports on a :class:`KeysmithConsole`."""

    def __init__(self, console: KeysmithConsole) -> None:
        self.console = console

    def display_secret(self, secret: GeneratedSecret) -> None:
        click.echo(secret.value)

    def display_report(self, secret: GeneratedSecret, report: StrengthReport) -> None:
        """Print the secret, its strength summary, and crack-time table."""
        self.console.table("Generated Password", [], [[secret.value]])
        self.console.table(
            "Password Security Analysis",
            [],
            [
                ["Strength", report.strength.value],
                ["Guesses", report.guesses_log10],
            ],
            styles=["bold"],
        )
        self.console.table(
            "Password Crack Time Estimations",
            [],
            [[estimate.description, estimate.display] for estimate in report.crack_times],
            styles=["bold"],
        )
