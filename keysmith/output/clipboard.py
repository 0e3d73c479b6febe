"""System clipboard access via pyperclip."""

from __future__ import annotations

import pyperclip

from keysmith.core.errors import ClipboardError


def copy_to_clipboard(text: str) -> None:
    """Place *text* on the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Unable to access clipboard: {exc}") from exc
