"""Write rendered text to streams.

FormattedString values are written in their decorated form when colours are
on and their plain form otherwise; anything else is written as ``str(text)``.
Colours default to whether the stream is a terminal.

The standard streams are looked up at call time, so redirecting
``sys.stdout``/``sys.stderr`` affects these helpers.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tmplfmt.runtime import FormattedString

__all__ = [
    "eprint",
    "eprintln",
    "print_out",
    "print_to_stream",
    "println",
]

logger = logging.getLogger(__name__)


def _stream_is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty()) if callable(isatty) else False


def print_to_stream(
    stream: TextIO,
    text: str | FormattedString,
    *,
    newline: bool = False,
    colors: bool | None = None,
) -> None:
    """Write ``text`` to ``stream``.

    Args:
        stream: Writable text stream
        text: Plain string or FormattedString
        newline: Append a trailing newline
        colors: Write decorated debug output (default: stream.isatty())

    Raises:
        FormatError: If rendering a FormattedString fails; nothing is written
    """
    if colors is None:
        colors = _stream_is_terminal(stream)

    if isinstance(text, FormattedString):
        output = text.render(colors=colors)
    else:
        output = str(text)

    if newline:
        output += "\n"

    logger.debug("Writing %d character(s) (colors=%s)", len(output), colors)
    stream.write(output)


def print_out(text: str | FormattedString, *, colors: bool | None = None) -> None:
    """Write ``text`` to stdout."""
    print_to_stream(sys.stdout, text, colors=colors)


def println(text: str | FormattedString = "", *, colors: bool | None = None) -> None:
    """Write ``text`` and a newline to stdout."""
    print_to_stream(sys.stdout, text, newline=True, colors=colors)


def eprint(text: str | FormattedString, *, colors: bool | None = None) -> None:
    """Write ``text`` to stderr."""
    print_to_stream(sys.stderr, text, colors=colors)


def eprintln(text: str | FormattedString = "", *, colors: bool | None = None) -> None:
    """Write ``text`` and a newline to stderr."""
    print_to_stream(sys.stderr, text, newline=True, colors=colors)
