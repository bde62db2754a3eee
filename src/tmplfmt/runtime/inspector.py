"""Structural inspector for debug (``?``) output.

Dumps arbitrary values to unbounded depth using Rich's pretty printer.
Compact mode stays on one line; pretty mode expands every container onto
its own lines. The decorated form is highlighted with Rich's repr
highlighter and rendered to ANSI through a private Console, so no terminal
or global state is touched.

Python 3.13+. External dependency: Rich.
"""

from __future__ import annotations

import sys

from rich.console import Console
from rich.highlighter import ReprHighlighter
from rich.pretty import pretty_repr
from rich.text import Text

from tmplfmt.constants import INSPECT_INDENT, INSPECT_WIDTH
from tmplfmt.runtime.value_types import RenderedValue

__all__ = ["inspect_value", "strip_styles", "true_length"]

_HIGHLIGHTER = ReprHighlighter()


def inspect_value(
    value: object,
    *,
    pretty: bool = False,
    decorate: bool = False,
    width: int = INSPECT_WIDTH,
) -> RenderedValue:
    """Return a human-readable structural dump of ``value``.

    Args:
        value: Any object
        pretty: Multi-line layout with every container expanded
        decorate: Also produce an ANSI-highlighted form
        width: Line width for pretty layout

    Returns:
        RenderedValue whose decorated form equals plain when not decorating

    Example:
        >>> inspect_value({"a": [1, 2]}).plain
        "{'a': [1, 2]}"
        >>> print(inspect_value({"a": [1, 2]}, pretty=True).plain)
        {
          'a': [
            1,
            2
          ]
        }
    """
    if pretty:
        plain = pretty_repr(value, max_width=width, indent_size=INSPECT_INDENT, expand_all=True)
    else:
        plain = pretty_repr(value, max_width=sys.maxsize)
    if not decorate:
        return RenderedValue.of(plain)
    return RenderedValue(plain, _to_ansi(_HIGHLIGHTER(plain), width))


def _to_ansi(text: Text, width: int) -> str:
    """Render highlighted text to a string with ANSI styling codes."""
    console = Console(
        color_system="standard",
        force_terminal=True,
        force_jupyter=False,
        no_color=False,
        legacy_windows=False,
        highlight=False,
        width=max(width, 1),
    )
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()


def strip_styles(text: str) -> str:
    """Remove ANSI styling codes, recovering the plain form.

    Example:
        >>> strip_styles("\\x1b[1;34m42\\x1b[0m")
        '42'
    """
    return "\n".join(Text.from_ansi(line).plain for line in text.split("\n"))


def true_length(text: str) -> int:
    """Width-counting length of text, excluding styling codes."""
    return len(strip_styles(text))
