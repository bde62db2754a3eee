"""Hypothesis strategies for tmplfmt property-based testing.

Usage:
    from tests.strategies import slot_values, alignment_specs
"""

from .values import (
    alignment_specs,
    decimals,
    fill_chars,
    finite_floats,
    plain_literals,
    precisions,
    slot_values,
    text_values,
    widths,
)

__all__ = [
    "alignment_specs",
    "decimals",
    "fill_chars",
    "finite_floats",
    "plain_literals",
    "precisions",
    "slot_values",
    "text_values",
    "widths",
]
