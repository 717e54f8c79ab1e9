#!/usr/bin/env python
"""
Output formatting with Rich console.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


# Custom theme for prefsdoc CLI
custom_theme = Theme({
    "error": "red",
    "success": "green",
})


class ConsoleOutput:
    """Console output with Rich formatting."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(theme=custom_theme)

    def print_plain(self, text: str = ""):
        """Print text verbatim: no markup, no highlighting, no wrapping."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def print_list(self, title: str, entries: Iterable[str]):
        """Print a title line followed by one verbatim line per entry."""
        self.print_plain(title)
        for entry in entries:
            self.print_plain(entry)

    def print_error(self, text: str):
        """Print error text."""
        line = Text.assemble(("Error:", "error"), " ", text)
        self.console.print(line, highlight=False, soft_wrap=True)

    def print_success(self, text: str):
        """Print success text."""
        self.console.print(f"[success]Success:[/success] {text}", highlight=False)
