"""Alignment engine - fill a rendered value out to its width.

Width is compared against the value's true length, so styling codes in
decorated debug output never count. Center alignment gives the left side
floor(deficit / 2) fill characters and the right side the remainder.

Python 3.13+.
"""

from __future__ import annotations

from tmplfmt.enums import Alignment
from tmplfmt.runtime.value_types import RenderedValue

__all__ = ["align"]


def align(value: RenderedValue, width: int, alignment: Alignment, fill: str) -> RenderedValue:
    """Pad ``value`` with ``fill`` until it reaches ``width``.

    Example:
        >>> align(RenderedValue.of("aa"), 5, Alignment.CENTER, "*").plain
        '*aa**'
    """
    deficit = width - value.true_length
    if deficit <= 0:
        return value
    match alignment:
        case Alignment.LEFT:
            return value.pad("", fill * deficit)
        case Alignment.CENTER:
            left = deficit // 2
            return value.pad(fill * left, fill * (deficit - left))
        case Alignment.RIGHT:
            return value.pad(fill * deficit, "")
