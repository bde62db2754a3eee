"""Format specifier parser.

Recursive-descent scan of the specifier text that follows each value slot.
Parsing depends only on the literal segments, never on slot values, so a
template compiles once into a CompiledTemplate that any number of renders
can bind values against.

Grammar (stage order is fixed):

    spec      := ":" escape | ":" [fill_align] [sign] ["#"] ["0"] [width]
                 ["." precision] [type] terminator
    escape    := ":"                       (emits one literal ":")
    fill_align:= <any char> ("<"|"^"|">") | ("<"|"^"|">")
    sign      := "+" | "-"
    width     := digits | <end of segment>  (deferred to the next slot)
    precision := digits | <end of segment>  (deferred to the next slot) | <empty> (0)
    type      := "o" | "x" | "X" | "b" | "e" | "E" | "n" | "N" | "?"
    terminator:= <end of segment> | <whitespace, kept> | ";" (consumed)

A deferred parameter absorbs the following slot and fuses its literal
segment onto the current one, so parsing continues across the seam.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass

from tmplfmt.constants import (
    ALIGN_CHARS,
    DEFAULT_FILL,
    DELIMITER,
    INTRODUCER,
    PRECISION_CHAR,
    PRETTY_CHAR,
    SIGN_CHARS,
    TYPE_CHARS,
    ZERO_PAD_CHAR,
)
from tmplfmt.diagnostics import (
    ErrorTemplate,
    MalformedSpecifierError,
    MissingArgumentError,
)
from tmplfmt.enums import Alignment, FormatType, SignMode
from tmplfmt.syntax.cursor import Cursor

__all__ = [
    "DEFERRED",
    "CompiledTemplate",
    "Deferred",
    "FormatSpecifier",
    "SlotPlan",
    "SpecifierParser",
    "compile_template",
]


@dataclass(frozen=True, slots=True)
class Deferred:
    """Marker for a width or precision supplied by the following slot."""

    def __repr__(self) -> str:
        return "DEFERRED"


DEFERRED: Deferred = Deferred()


@dataclass(frozen=True, slots=True)
class FormatSpecifier:
    """Structured form of one slot's specifier.

    Attributes:
        fill: Fill character used by alignment
        align: Alignment within width
        sign: Sign policy for non-negative numbers
        pretty: Radix prefixes / multi-line debug output
        zero_pad: Pad numeric digits with zeros (replaces alignment)
        width: Minimum width, 0 for none, or DEFERRED before binding
        precision: Fraction digits, None for unset, or DEFERRED before binding
        type: Conversion applied to the value
    """

    fill: str = DEFAULT_FILL
    align: Alignment = Alignment.RIGHT
    sign: SignMode = SignMode.NONE
    pretty: bool = False
    zero_pad: bool = False
    width: int | Deferred = 0
    precision: int | Deferred | None = None
    type: FormatType = FormatType.NONE

    @property
    def is_bound(self) -> bool:
        """True once no parameter is waiting on a following slot."""
        return not isinstance(self.width, Deferred) and not isinstance(self.precision, Deferred)

    def bind(
        self,
        width: int | None = None,
        precision: int | None = None,
    ) -> FormatSpecifier:
        """Return a copy with deferred parameters replaced by slot values."""
        changes: dict[str, int] = {}
        if width is not None:
            changes["width"] = width
        if precision is not None:
            changes["precision"] = precision
        return dataclasses.replace(self, **changes) if changes else self

    def effective(self) -> FormatSpecifier:
        """Return the specifier with flags that cannot apply forced inert.

        Debug inspection output is not numeric, so sign, zero padding and
        precision never apply to it regardless of what was parsed.
        """
        if self.type is FormatType.DEBUG:
            return dataclasses.replace(
                self, sign=SignMode.NONE, zero_pad=False, precision=None
            )
        return self


PLAIN_SPECIFIER: FormatSpecifier = FormatSpecifier()


@dataclass(frozen=True, slots=True)
class SlotPlan:
    """Parse result for one rendered slot.

    Attributes:
        slot_index: Slot whose value is rendered
        specifier: Parsed specifier (width/precision may be DEFERRED)
        tail: Literal text emitted after the value
        width_slot: Slot absorbed as the deferred width, if any
        precision_slot: Slot absorbed as the deferred precision, if any
        escaped: True when the specifier introducer was escaped
    """

    slot_index: int
    specifier: FormatSpecifier
    tail: str
    width_slot: int | None = None
    precision_slot: int | None = None
    escaped: bool = False

    @property
    def consumed(self) -> int:
        """Number of slots this plan takes from the template."""
        return 1 + (self.width_slot is not None) + (self.precision_slot is not None)


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Template literals compiled into a rendering plan.

    Attributes:
        head: Literal text before the first slot
        slots: One plan per rendered slot, in order
        slot_count: Number of value slots the template expects
    """

    head: str
    slots: tuple[SlotPlan, ...]
    slot_count: int


class SpecifierParser:
    """Parses the specifiers embedded in a template's literal segments.

    The parser holds no state between calls beyond the segments it was
    given, so one instance may compile many templates sequentially and
    separate instances may run concurrently.

    Example:
        >>> plan, next_slot = SpecifierParser(["", ":>5"]).parse_slot(0)
        >>> plan.specifier.width, next_slot
        (5, 1)
    """

    __slots__ = ("_slot_count", "_strings")

    def __init__(self, strings: Sequence[str]) -> None:
        self._strings = tuple(strings)
        self._slot_count = len(self._strings) - 1

    def compile(self) -> CompiledTemplate:
        """Parse every slot and return the compiled plan."""
        plans: list[SlotPlan] = []
        slot = 0
        while slot < self._slot_count:
            plan, slot = self.parse_slot(slot)
            plans.append(plan)
        return CompiledTemplate(
            head=self._strings[0],
            slots=tuple(plans),
            slot_count=self._slot_count,
        )

    def parse_slot(self, slot_index: int) -> tuple[SlotPlan, int]:
        """Parse the specifier that follows slot ``slot_index``.

        Args:
            slot_index: Slot whose following literal holds the specifier

        Returns:
            Tuple of (plan, index of the next unconsumed slot)

        Raises:
            MalformedSpecifierError: Unexpected character before the terminator
            MissingArgumentError: Deferred parameter with no following slot
        """
        text = self._strings[slot_index + 1]
        next_slot = slot_index + 1

        if not text.startswith(INTRODUCER):
            return SlotPlan(slot_index, PLAIN_SPECIFIER, text), next_slot

        cursor = Cursor(text, len(INTRODUCER))

        # 1. Escape: doubled introducer emits one literal introducer
        if cursor.peek() == INTRODUCER:
            return SlotPlan(slot_index, PLAIN_SPECIFIER, cursor.remainder(), escaped=True), next_slot

        # 2. Fill + align
        fill = DEFAULT_FILL
        align = Alignment.RIGHT
        after = cursor.peek(1)
        if after is not None and after in ALIGN_CHARS:
            fill = cursor.current
            align = Alignment(after)
            cursor = cursor.advance(2)
        elif not cursor.is_eof and cursor.current in ALIGN_CHARS:
            align = Alignment(cursor.current)
            cursor = cursor.advance()

        # 3. Sign
        sign = SignMode.NONE
        if not cursor.is_eof and cursor.current in SIGN_CHARS:
            sign = SignMode(cursor.current)
            cursor = cursor.advance()

        # 4. Pretty flag
        pretty = False
        if (advanced := cursor.expect(PRETTY_CHAR)) is not None:
            pretty = True
            cursor = advanced

        # 5. Zero-pad flag
        zero_pad = False
        if (advanced := cursor.expect(ZERO_PAD_CHAR)) is not None:
            zero_pad = True
            cursor = advanced

        # 6. Width
        width: int | Deferred = 0
        width_slot: int | None = None
        digits, cursor = cursor.take_digits()
        if digits:
            width = int(digits)
        elif cursor.is_eof:
            width = DEFERRED
            width_slot = next_slot
            cursor = self._fuse(cursor, slot_index, next_slot)
            next_slot += 1

        # 7. Precision
        precision: int | Deferred | None = None
        precision_slot: int | None = None
        if (advanced := cursor.expect(PRECISION_CHAR)) is not None:
            cursor = advanced
            digits, cursor = cursor.take_digits()
            if digits:
                precision = int(digits)
            elif cursor.is_eof:
                precision = DEFERRED
                precision_slot = next_slot
                cursor = self._fuse(cursor, slot_index, next_slot)
                next_slot += 1
            else:
                precision = 0

        # 8. Type code
        format_type = FormatType.NONE
        if not cursor.is_eof and cursor.current in TYPE_CHARS:
            format_type = FormatType(cursor.current)
            cursor = cursor.advance()

        # 9. Terminator
        if cursor.is_eof or cursor.current.isspace():
            tail = cursor.remainder()
        elif cursor.current == DELIMITER:
            tail = cursor.advance().remainder()
        else:
            raise MalformedSpecifierError(
                ErrorTemplate.malformed_specifier(slot_index, cursor.pos, cursor.current)
            )

        specifier = FormatSpecifier(
            fill=fill,
            align=align,
            sign=sign,
            pretty=pretty,
            zero_pad=zero_pad,
            width=width,
            precision=precision,
            type=format_type,
        )
        plan = SlotPlan(
            slot_index,
            specifier,
            tail,
            width_slot=width_slot,
            precision_slot=precision_slot,
        )
        return plan, next_slot

    def _fuse(self, cursor: Cursor, slot_index: int, absorbed: int) -> Cursor:
        """Absorb slot ``absorbed`` and continue over its trailing literal."""
        if absorbed >= self._slot_count:
            raise MissingArgumentError(ErrorTemplate.missing_argument(absorbed, self._slot_count))
        return cursor.extend(self._strings[absorbed + 1])


def compile_template(strings: Sequence[str]) -> CompiledTemplate:
    """Compile a template's literal segments into a rendering plan.

    Args:
        strings: Literal segments (at least one)

    Returns:
        CompiledTemplate

    Raises:
        ValueError: If no literal segment is given
        MalformedSpecifierError: Unexpected character in a specifier
        MissingArgumentError: Deferred parameter at the end of the template

    Example:
        >>> compiled = compile_template(["x = ", ":05 units"])
        >>> compiled.slots[0].specifier.zero_pad, compiled.slots[0].tail
        (True, ' units')
    """
    if not strings:
        msg = "Template needs at least one literal segment"
        raise ValueError(msg)
    return SpecifierParser(strings).compile()
