"""Numeric post-processor.

Shapes the converted digits of a numeric value. Order of operations:

    1. Precision: pad or truncate (never round) the fractional digits;
       precision 0 drops the point
    2. Sign: strip a leading "-", choose the prefix per SignMode
    3. Pretty radix prefix: 0o / 0x / 0b after the sign
    4. Zero padding: left-pad the digits so sign + prefix + digits reach width

Ordinal output keeps its sign handling but ignores precision and zero
padding. Non-finite values skip precision shaping and zero padding, so
alignment fills them instead.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from tmplfmt.constants import RADIX_PREFIXES
from tmplfmt.enums import SignMode
from tmplfmt.syntax import FormatSpecifier

__all__ = ["NumericText", "apply_precision", "post_process"]

_EXPONENT_MARKERS = "eE"


@dataclass(frozen=True, slots=True)
class NumericText:
    """Result of numeric post-processing.

    Attributes:
        text: Final digits with sign and prefix
        zero_padded: True when zero padding was applied; alignment is skipped
    """

    text: str
    zero_padded: bool


def apply_precision(text: str, precision: int, *, scientific: bool = False) -> str:
    """Pad or truncate the fractional part to exactly ``precision`` digits.

    With ``scientific`` set, the mantissa is shaped and the exponent kept.

    Example:
        >>> apply_precision("1.23456789", 3)
        '1.234'
        >>> apply_precision("-1", 3)
        '-1.000'
        >>> apply_precision("1.9", 0)
        '1'
        >>> apply_precision("1.5e+2", 2, scientific=True)
        '1.50e+2'
    """
    exponent = ""
    if scientific:
        for marker in _EXPONENT_MARKERS:
            if marker in text:
                text, _, power = text.partition(marker)
                exponent = marker + power
                break

    whole, _, fraction = text.partition(".")
    if precision == 0:
        return whole + exponent
    fraction = fraction[:precision].ljust(precision, "0")
    return f"{whole}.{fraction}{exponent}"


def post_process(
    text: str,
    specifier: FormatSpecifier,
    *,
    finite: bool = True,
) -> NumericText:
    """Apply precision, sign, radix prefix and zero padding.

    Args:
        text: Converted digits (may carry a leading "-")
        specifier: Bound, effective specifier
        finite: False for inf/nan, which skip precision shaping and zero padding

    Returns:
        NumericText

    Example:
        >>> post_process("f", FormatSpecifier(pretty=True, zero_pad=True, width=7,
        ...              type=FormatType.HEX_LOWER)).text
        '0x0000f'
    """
    format_type = specifier.type
    precision = specifier.precision
    ordinal = format_type.is_ordinal

    if isinstance(precision, int) and finite and not ordinal:
        text = apply_precision(text, precision, scientific=format_type.is_scientific)

    if text.startswith("-"):
        sign = "-"
        text = text[1:]
    elif specifier.sign is SignMode.PLUS:
        sign = "+"
    elif specifier.sign is SignMode.SPACE:
        sign = " "
    else:
        sign = ""

    if specifier.pretty and format_type.is_radix:
        sign += RADIX_PREFIXES[format_type]

    width = specifier.width
    if specifier.zero_pad and finite and not ordinal and isinstance(width, int):
        return NumericText(sign + text.rjust(width - len(sign), "0"), zero_padded=True)
    return NumericText(sign + text, zero_padded=False)
