"""Shared constants for tmplfmt.

This module provides centralized configuration constants used across
the syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar characters: Specifier mini-language surface syntax
- Cache limits: Memory bounds for the compile cache
- Inspection: Layout of debug (``?``) output

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar characters
    "INTRODUCER",
    "DELIMITER",
    "ALIGN_CHARS",
    "SIGN_CHARS",
    "PRETTY_CHAR",
    "ZERO_PAD_CHAR",
    "PRECISION_CHAR",
    "TYPE_CHARS",
    "DEFAULT_FILL",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    # Inspection
    "INSPECT_WIDTH",
    "INSPECT_INDENT",
    "RADIX_PREFIXES",
]

# ============================================================================
# GRAMMAR CHARACTERS
# ============================================================================
#
# A specifier is written at the start of the literal segment that follows a
# value slot:
#
#     ":" [[fill] align] [sign] ["#"] ["0"] [width] ["." precision] [type] end
#
# where end is the end of the segment, a whitespace character (kept) or the
# delimiter (consumed).

# Introduces a specifier. Doubled, it escapes to a single literal character.
INTRODUCER: str = ":"

# Terminates a specifier and is removed from output.
DELIMITER: str = ";"

ALIGN_CHARS: frozenset[str] = frozenset("<^>")

SIGN_CHARS: frozenset[str] = frozenset("+-")

PRETTY_CHAR: str = "#"

ZERO_PAD_CHAR: str = "0"

PRECISION_CHAR: str = "."

# Type code characters. Any other character in type position is left for the
# terminator check, which rejects it.
TYPE_CHARS: frozenset[str] = frozenset("oxXbeEnN?")

DEFAULT_FILL: str = " "

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum compiled templates kept by CompileCache.
# Compiled plans depend only on literal text, so one entry serves every call
# site that renders the same template with different values.
DEFAULT_CACHE_SIZE: int = 1000

# ============================================================================
# INSPECTION
# ============================================================================

# Line width used to lay out pretty (multi-line) debug output.
INSPECT_WIDTH: int = 80

# Indent per nesting level in pretty debug output.
INSPECT_INDENT: int = 2

# Prefixes added by the pretty flag to radix conversions, keyed by type code.
RADIX_PREFIXES: dict[str, str] = {
    "o": "0o",
    "x": "0x",
    "X": "0x",
    "b": "0b",
}
