"""Enumerations for tmplfmt type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
Members whose value is a grammar character compare equal to that character,
so the specifier parser can map source text to members with a plain lookup.

Python 3.13+.
"""

from enum import StrEnum


class Alignment(StrEnum):
    """Alignment of a rendered value inside its width.

    StrEnum provides automatic string conversion: str(Alignment.LEFT) == "<"
    """

    LEFT = "<"
    """Pad on the right: {x}:<5"""

    CENTER = "^"
    """Pad on both sides, left side gets the smaller share: {x}:^5"""

    RIGHT = ">"
    """Pad on the left (default): {x}:>5"""


class SignMode(StrEnum):
    """Sign policy for non-negative numbers.

    Negative numbers always show "-" regardless of mode.
    """

    NONE = ""
    """No prefix on non-negative numbers"""

    PLUS = "+"
    """Force a leading "+" on non-negative numbers: {x}:+"""

    SPACE = "-"
    """Leading space on non-negative numbers: {x}:-"""


class FormatType(StrEnum):
    """Conversion selected by the type code of a specifier."""

    NONE = ""
    """Natural string representation"""

    OCTAL = "o"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    BINARY = "b"
    SCI_LOWER = "e"
    SCI_UPPER = "E"
    ORDINAL_LOWER = "n"
    ORDINAL_UPPER = "N"

    DEBUG = "?"
    """Structural dump of arbitrary values"""

    @property
    def is_radix(self) -> bool:
        """True for octal, hexadecimal and binary conversions."""
        return self in _RADIX_TYPES

    @property
    def is_scientific(self) -> bool:
        """True for scientific notation conversions."""
        return self in (FormatType.SCI_LOWER, FormatType.SCI_UPPER)

    @property
    def is_ordinal(self) -> bool:
        """True for ordinal suffix conversions."""
        return self in (FormatType.ORDINAL_LOWER, FormatType.ORDINAL_UPPER)

    @property
    def is_upper(self) -> bool:
        """True for the upper-case variant of a conversion."""
        return self in (FormatType.HEX_UPPER, FormatType.SCI_UPPER, FormatType.ORDINAL_UPPER)


_RADIX_TYPES: frozenset[FormatType] = frozenset(
    {FormatType.OCTAL, FormatType.HEX_LOWER, FormatType.HEX_UPPER, FormatType.BINARY}
)


class ValueKind(StrEnum):
    """Tag assigned to a slot value before conversion.

    StrEnum provides automatic string conversion: str(ValueKind.TEXT) == "text"
    """

    INTEGER = "integer"
    """int (bool excluded), arbitrary precision"""

    NUMBER = "number"
    """float or Decimal"""

    TEXT = "text"
    """str"""

    STRUCTURAL = "structural"
    """Everything else: collections, objects, bool, None"""


__all__ = [
    "Alignment",
    "FormatType",
    "SignMode",
    "ValueKind",
]
