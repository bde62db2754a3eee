"""Core value types for the rendering pipeline.

Defines the types passed between pipeline stages:
    - TaggedValue: Slot value tagged with its ValueKind
    - RenderedValue: Text produced for one slot, plain and decorated
    - RenderedPair: Whole-template output, plain and decorated

The converter and post-processor dispatch on ``TaggedValue.kind`` instead of
inspecting the raw value again.

Python 3.13+.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from tmplfmt.enums import ValueKind

__all__ = [
    "RenderedPair",
    "RenderedValue",
    "TaggedValue",
    "classify",
]


@dataclass(frozen=True, slots=True)
class TaggedValue:
    """Slot value with its kind resolved once.

    Attributes:
        kind: Dispatch tag
        raw: The resolved slot value
    """

    kind: ValueKind
    raw: object

    @property
    def is_numeric(self) -> bool:
        """True for integers, floats and Decimals."""
        return self.kind in (ValueKind.INTEGER, ValueKind.NUMBER)

    @property
    def is_finite(self) -> bool:
        """False for infinite and NaN floats or Decimals."""
        match self.raw:
            case float():
                return math.isfinite(self.raw)
            case Decimal():
                return self.raw.is_finite()
            case _:
                return True


def classify(value: object) -> TaggedValue:
    """Tag a resolved slot value.

    bool is checked before int: it is an int subtype but renders as text.

    Example:
        >>> classify(True).kind
        <ValueKind.STRUCTURAL: 'structural'>
        >>> classify(2**80).kind
        <ValueKind.INTEGER: 'integer'>
    """
    match value:
        case bool():
            return TaggedValue(ValueKind.STRUCTURAL, value)
        case int():
            return TaggedValue(ValueKind.INTEGER, value)
        case float() | Decimal():
            return TaggedValue(ValueKind.NUMBER, value)
        case str():
            return TaggedValue(ValueKind.TEXT, value)
        case _:
            return TaggedValue(ValueKind.STRUCTURAL, value)


@dataclass(frozen=True, slots=True)
class RenderedValue:
    """Text produced for one slot.

    ``decorated`` may embed ANSI styling codes (debug output only); ``plain``
    never does. Width is measured on ``plain``, so styling codes do not count.

    Attributes:
        plain: Text without styling codes
        decorated: Text with styling codes (equal to plain when undecorated)
    """

    plain: str
    decorated: str

    @classmethod
    def of(cls, text: str) -> RenderedValue:
        """Create an undecorated value."""
        return cls(text, text)

    @property
    def true_length(self) -> int:
        """Width-counting length, excluding styling codes."""
        return len(self.plain)

    def pad(self, left: str, right: str) -> RenderedValue:
        """Surround both forms with the same padding."""
        return RenderedValue(left + self.plain + right, left + self.decorated + right)


@dataclass(frozen=True, slots=True)
class RenderedPair:
    """Rendered template output.

    Attributes:
        plain: Output without styling codes
        decorated: Output with styling codes in debug slots
    """

    plain: str
    decorated: str

    def __str__(self) -> str:
        """Return plain output."""
        return self.plain
