"""
Keysmith Console Interface
===========================

Rich-powered console abstraction providing a consistent presentation layer
for Keysmith output: styled tables and error messages.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_KEYSMITH_THEME = Theme(
    {
        "keysmith.error": "bold red",
        "keysmith.header": "bold bright_magenta",
        "keysmith.border": "bright_cyan",
    }
)


class KeysmithConsole:
    """Unified console interface for Keysmith output.

    Usage::

        con = KeysmithConsole()
        con.table("Generated Password", [], [["hunter2"]])
        con.error("Unable to access clipboard")
    """

    def __init__(
        self,
        *,
        record: bool = False,
        stderr: bool = False,
    ) -> None:
        """Initialise the console.

        Args:
            record: Enable Rich recording for text export.
            stderr: Write to stderr instead of stdout.
        """
        self._console = Console(
            theme=_KEYSMITH_THEME,
            record=record,
            stderr=stderr,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Error messages
    # ------------------------------------------------------------------ #

    def error(self, message: str) -> None:
        self._message("keysmith.error", "✘", "ERROR", message)

    def _message(self, style: str, icon: str, label: str, message: str) -> None:
        # The message is appended as plain text; it may contain brackets.
        text = Text(f"[{icon}] {label}: ", style=style)
        text.append(message)
        self._console.print(text)

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table with a header panel.

        Cells are rendered as literal text, never as console markup.

        Args:
            title:    Header shown in the top row of the table.
            columns:  Column header labels. Empty hides the header row.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        width = max([len(columns)] + [len(row) for row in rows] + [1])
        tbl = Table(
            title=title,
            caption=caption,
            box=box.SQUARE,
            border_style="keysmith.border",
            header_style="keysmith.header",
            title_style="keysmith.header",
            show_header=bool(columns),
            show_lines=True,
            padding=(0, 1),
            min_width=len(title) + 4,
        )
        for idx in range(width):
            name = columns[idx] if idx < len(columns) else ""
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(name, style=style)

        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
