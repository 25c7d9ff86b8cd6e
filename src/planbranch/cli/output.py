"""Output utilities for CLI commands with clear intent.

user_output() is the single route for human-readable status lines. Color is a
formatting strategy chosen once at the entry point: ColorStyler uses click
styling, PlainStyler returns text untouched.
"""

from abc import ABC, abstractmethod

import click


def user_output(message: str) -> None:
    """Write a human-readable line to stderr."""
    click.echo(message, err=True)


class Styler(ABC):
    """Formatting strategy applied to status lines before they are written."""

    @abstractmethod
    def style(self, text: str, *, fg: str | None = None, bold: bool = False) -> str: ...


class ColorStyler(Styler):
    def style(self, text: str, *, fg: str | None = None, bold: bool = False) -> str:
        # bold=False would emit a reset code; None leaves boldness untouched
        return click.style(text, fg=fg, bold=bold or None)


class PlainStyler(Styler):
    def style(self, text: str, *, fg: str | None = None, bold: bool = False) -> str:
        return text


def select_styler(*, color: bool) -> Styler:
    """Pick the styler for this invocation.

    click.echo already strips ANSI codes when stderr is not a terminal, so
    ColorStyler is safe to use by default; PlainStyler is for --no-color.
    """
    if color:
        return ColorStyler()
    return PlainStyler()
