"""Type converter - base textual form of a slot value.

Applies the specifier's type code to a tagged value. Sign, padding and
precision are handled afterwards by the numeric post-processor; this module
only produces digits.

Conversion Rules:
    - Radix (o/x/X/b): exact for integral values; non-integral floats expand
      their exact binary fraction; Decimals go through float
    - Scientific (e/E): shortest mantissa, signed exponent (1.5e+2)
    - Ordinal (n/N): round half away from zero, then st/nd/rd/th
    - Debug (?): structural dump via the inspector
    - None: natural string; fixed-point digits for floats when a precision
      will be applied

Non-numeric values ignore radix, scientific and ordinal codes and render
their natural string.

Python 3.13+.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import cast

from tmplfmt.constants import INSPECT_WIDTH
from tmplfmt.enums import FormatType, ValueKind
from tmplfmt.runtime.inspector import inspect_value
from tmplfmt.runtime.value_types import RenderedValue, TaggedValue
from tmplfmt.syntax import FormatSpecifier

__all__ = [
    "convert",
    "ordinal_suffix",
    "to_radix",
    "to_scientific",
]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_RADIX_BASES: dict[FormatType, int] = {
    FormatType.OCTAL: 8,
    FormatType.HEX_LOWER: 16,
    FormatType.HEX_UPPER: 16,
    FormatType.BINARY: 2,
}


def convert(
    value: TaggedValue,
    specifier: FormatSpecifier,
    *,
    decorate: bool = False,
    inspect_width: int = INSPECT_WIDTH,
) -> RenderedValue:
    """Convert a tagged value to its base textual form.

    Args:
        value: Resolved and tagged slot value
        specifier: Bound specifier for the slot
        decorate: Produce a styled form for debug output
        inspect_width: Line width for pretty debug output

    Returns:
        RenderedValue (decorated differs from plain only for debug output)
    """
    format_type = specifier.type

    if format_type is FormatType.DEBUG:
        return inspect_value(
            value.raw, pretty=specifier.pretty, decorate=decorate, width=inspect_width
        )

    if not value.is_numeric or not value.is_finite:
        return RenderedValue.of(str(value.raw))

    number = cast(int | float | Decimal, value.raw)
    if format_type.is_radix:
        text = to_radix(number, _RADIX_BASES[format_type])
        return RenderedValue.of(text.upper() if format_type.is_upper else text)
    if format_type.is_scientific:
        return RenderedValue.of(to_scientific(number, upper=format_type.is_upper))
    if format_type.is_ordinal:
        return RenderedValue.of(_to_ordinal(number, upper=format_type.is_upper))
    if value.kind is ValueKind.NUMBER and specifier.precision is not None:
        return RenderedValue.of(_fixed_point(number))
    return RenderedValue.of(str(number))


def _as_decimal(value: int | float | Decimal) -> Decimal:
    """Exact decimal digits: shortest repr for floats."""
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _fixed_point(value: float | Decimal) -> str:
    """Positional notation without an exponent."""
    return format(_as_decimal(value), "f")


def to_radix(value: int | float | Decimal, base: int) -> str:
    """Convert a number to lowercase digits in ``base``.

    Example:
        >>> to_radix(255, 16)
        'ff'
        >>> to_radix(-0.5, 2)
        '-0.1'
    """
    if isinstance(value, int):
        return _int_to_radix(value, base)
    if isinstance(value, Decimal) and value == value.to_integral_value():
        return _int_to_radix(int(value), base)
    if isinstance(value, float) and value.is_integer():
        return _int_to_radix(int(value), base)

    sign = "-" if value < 0 else ""
    fraction = abs(Fraction(float(value)))
    whole = math.floor(fraction)
    remainder = fraction - whole
    digits: list[str] = []
    # A float's fraction has a power-of-two denominator, so this terminates
    # for bases 2, 8 and 16.
    while remainder:
        remainder *= base
        digit = math.floor(remainder)
        digits.append(_DIGITS[digit])
        remainder -= digit
    if not digits:
        # Decimal below float resolution
        return f"{sign}{_int_to_radix(whole, base)}"
    return f"{sign}{_int_to_radix(whole, base)}.{''.join(digits)}"


def _int_to_radix(value: int, base: int) -> str:
    match base:
        case 2:
            return format(value, "b")
        case 8:
            return format(value, "o")
        case 16:
            return format(value, "x")
        case _:
            sign = "-" if value < 0 else ""
            value = abs(value)
            digits: list[str] = []
            while True:
                value, digit = divmod(value, base)
                digits.append(_DIGITS[digit])
                if not value:
                    break
            return sign + "".join(reversed(digits))


def to_scientific(value: int | float | Decimal, *, upper: bool = False) -> str:
    """Scientific notation with the shortest exact mantissa.

    Example:
        >>> to_scientific(150)
        '1.5e+2'
        >>> to_scientific(0.00123, upper=True)
        '1.23E-3'
    """
    number = _as_decimal(value)
    sign, digit_tuple, _ = number.as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    if digits:
        exponent = number.adjusted()
    else:
        digits = "0"
        exponent = 0
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    marker = "E" if upper else "e"
    exponent_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}{marker}{exponent_sign}{abs(exponent)}"


def ordinal_suffix(number: int) -> str:
    """English ordinal suffix for an integer.

    Final two digits 11, 12 and 13 take "th"; otherwise the final digit
    picks st/nd/rd, anything else "th".

    Example:
        >>> [ordinal_suffix(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 112)]
        ['st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'st', 'th']
    """
    number = abs(number)
    if number % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def _to_ordinal(value: int | float | Decimal, *, upper: bool) -> str:
    if isinstance(value, int):
        rounded = value
    else:
        rounded = int(_as_decimal(value).to_integral_value(rounding=ROUND_HALF_UP))
    suffix = ordinal_suffix(rounded)
    return f"{rounded}{suffix.upper() if upper else suffix}"
