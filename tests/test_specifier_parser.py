"""Tests for the format specifier parser.

Covers each grammar stage in order, deferred width/precision fusion,
terminators and the errors raised while compiling.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import alignment_specs, plain_literals, precisions, widths
from tmplfmt.diagnostics import MalformedSpecifierError, MissingArgumentError
from tmplfmt.enums import Alignment, FormatType, SignMode
from tmplfmt.syntax import (
    DEFERRED,
    FormatSpecifier,
    SpecifierParser,
    compile_template,
)


def _parse(*strings: str) -> FormatSpecifier:
    plan, _ = SpecifierParser(strings).parse_slot(0)
    return plan.specifier


class TestPlainAndEscape:
    """Segments without a specifier and the escaped introducer."""

    def test_segment_without_introducer(self) -> None:
        """A literal not starting with ':' is emitted unchanged."""
        plan, next_slot = SpecifierParser(["a", " b"]).parse_slot(0)

        assert plan.specifier == FormatSpecifier()
        assert plan.tail == " b"
        assert not plan.escaped
        assert next_slot == 1

    def test_empty_segment(self) -> None:
        """An empty following literal is plain."""
        plan, _ = SpecifierParser(["", ""]).parse_slot(0)
        assert plan.tail == ""
        assert plan.specifier == FormatSpecifier()

    def test_escape_keeps_one_introducer(self) -> None:
        """'::' emits the value's natural form then a single ':'."""
        plan, _ = SpecifierParser(["", "::30"]).parse_slot(0)

        assert plan.escaped
        assert plan.tail == ":30"
        assert plan.specifier == FormatSpecifier()

    def test_escape_is_not_parsed_further(self) -> None:
        """Specifier characters after the escape are literal text."""
        plan, _ = SpecifierParser(["", "::>5x"]).parse_slot(0)
        assert plan.tail == ":>5x"


class TestFillAndAlign:
    """Stage 2: optional fill followed by an alignment character."""

    @pytest.mark.parametrize(
        ("text", "alignment"),
        [(":<", Alignment.LEFT), (":^", Alignment.CENTER), (":>", Alignment.RIGHT)],
    )
    def test_alignment_only(self, text: str, alignment: Alignment) -> None:
        """Alignment without fill uses a space."""
        spec = _parse("", text + "3")
        assert spec.align is alignment
        assert spec.fill == " "
        assert spec.width == 3

    def test_fill_and_alignment(self) -> None:
        """A character followed by an alignment character is the fill."""
        spec = _parse("", ":*<6")
        assert spec.fill == "*"
        assert spec.align is Alignment.LEFT
        assert spec.width == 6

    def test_alignment_character_as_fill(self) -> None:
        """An alignment character can itself be the fill."""
        spec = _parse("", ":<>4")
        assert spec.fill == "<"
        assert spec.align is Alignment.RIGHT

    def test_digit_as_fill(self) -> None:
        """A digit followed by an alignment character is a fill, not a width."""
        spec = _parse("", ":0^5")
        assert spec.fill == "0"
        assert spec.align is Alignment.CENTER
        assert not spec.zero_pad
        assert spec.width == 5

    def test_default_alignment_is_right(self) -> None:
        """Without an alignment character values align right."""
        assert _parse("", ":5").align is Alignment.RIGHT


class TestSignFlagsWidth:
    """Stages 3-6: sign, '#', '0' and width."""

    def test_plus_sign(self) -> None:
        """'+' forces a plus on non-negative numbers."""
        assert _parse("", ":+5").sign is SignMode.PLUS

    def test_space_sign(self) -> None:
        """'-' requests a space on non-negative numbers."""
        spec = _parse("", ":-5")
        assert spec.sign is SignMode.SPACE
        assert spec.width == 5

    def test_all_flags(self) -> None:
        """Sign, pretty, zero pad, width and type combine in order."""
        spec = _parse("", ":+#010x rest")
        assert spec.sign is SignMode.PLUS
        assert spec.pretty
        assert spec.zero_pad
        assert spec.width == 10
        assert spec.type is FormatType.HEX_LOWER

    def test_zero_flag_then_width(self) -> None:
        """A leading '0' is the zero-pad flag, the following digits the width."""
        spec = _parse("", ":05")
        assert spec.zero_pad
        assert spec.width == 5

    def test_width_with_inner_zero(self) -> None:
        """Zeros after the first width digit belong to the width."""
        spec = _parse("", ":10")
        assert not spec.zero_pad
        assert spec.width == 10

    def test_no_width_means_zero(self) -> None:
        """A specifier with a type but no width has width 0."""
        assert _parse("", ":x").width == 0


class TestPrecisionAndType:
    """Stages 7-8: precision and type code."""

    def test_precision_digits(self) -> None:
        """'.' followed by digits sets the precision."""
        spec = _parse("", ":.3")
        assert spec.precision == 3
        assert spec.width == 0

    def test_width_and_precision(self) -> None:
        """Width and precision together."""
        spec = _parse("", ":>8.2")
        assert spec.width == 8
        assert spec.precision == 2

    def test_empty_precision_before_type(self) -> None:
        """'.' followed by a non-digit means precision 0."""
        spec = _parse("", ":.x")
        assert spec.precision == 0
        assert spec.type is FormatType.HEX_LOWER

    def test_empty_precision_before_terminator(self) -> None:
        """'.' followed by the delimiter means precision 0."""
        plan, _ = SpecifierParser(["", ":.;!"]).parse_slot(0)
        assert plan.specifier.precision == 0
        assert plan.tail == "!"

    def test_no_precision_is_none(self) -> None:
        """Absent precision is None, distinct from 0."""
        assert _parse("", ":5").precision is None

    @pytest.mark.parametrize("code", list("oxXbeEnN?"))
    def test_type_codes(self, code: str) -> None:
        """Every type code maps to its FormatType member."""
        assert _parse("", ":" + code).type is FormatType(code)

    def test_pretty_debug(self) -> None:
        """'#?' selects multi-line debug output."""
        spec = _parse("", ":#?")
        assert spec.pretty
        assert spec.type is FormatType.DEBUG


class TestTerminators:
    """Stage 9: end of segment, whitespace or delimiter."""

    def test_end_of_segment(self) -> None:
        """A specifier filling the segment leaves an empty tail."""
        plan, _ = SpecifierParser(["", ":>5"]).parse_slot(0)
        assert plan.tail == ""

    def test_whitespace_is_kept(self) -> None:
        """Whitespace ends the specifier and stays in the output."""
        plan, _ = SpecifierParser(["", ":05 units"]).parse_slot(0)
        assert plan.tail == " units"

    def test_newline_terminates(self) -> None:
        """Any whitespace character terminates, including newlines."""
        plan, _ = SpecifierParser(["", ":x\nnext"]).parse_slot(0)
        assert plan.tail == "\nnext"

    def test_delimiter_is_consumed(self) -> None:
        """';' ends the specifier and is dropped from the output."""
        plan, _ = SpecifierParser(["", ":*<6;|"]).parse_slot(0)
        assert plan.tail == "|"

    def test_only_first_delimiter_is_consumed(self) -> None:
        """Text after the delimiter is literal, including further ';'."""
        plan, _ = SpecifierParser(["", ":x;;"]).parse_slot(0)
        assert plan.tail == ";"


class TestDeferredParameters:
    """Width or precision taken from the following slot."""

    def test_deferred_width(self) -> None:
        """A specifier ending before the width defers it to the next slot."""
        plan, next_slot = SpecifierParser(["", ":", ""]).parse_slot(0)

        assert plan.specifier.width is DEFERRED
        assert plan.width_slot == 1
        assert plan.precision_slot is None
        assert plan.consumed == 2
        assert next_slot == 2

    def test_deferred_width_keeps_fill_and_align(self) -> None:
        """Fill and alignment parse before the deferred width."""
        plan, _ = SpecifierParser(["", ":*<", ""]).parse_slot(0)
        assert plan.specifier.fill == "*"
        assert plan.specifier.align is Alignment.LEFT
        assert plan.specifier.width is DEFERRED

    def test_deferred_width_then_inline_precision(self) -> None:
        """Parsing continues over the absorbed slot's literal."""
        plan, _ = SpecifierParser(["", ":", ".2;!"]).parse_slot(0)
        assert plan.specifier.width is DEFERRED
        assert plan.specifier.precision == 2
        assert plan.tail == "!"

    def test_deferred_precision(self) -> None:
        """'.' at the end of the segment defers the precision."""
        plan, next_slot = SpecifierParser(["", ":.", ""]).parse_slot(0)
        assert plan.specifier.width == 0
        assert plan.specifier.precision is DEFERRED
        assert plan.precision_slot == 1
        assert next_slot == 2

    def test_deferred_width_and_precision(self) -> None:
        """Both parameters can be deferred, absorbing two slots."""
        plan, next_slot = SpecifierParser(["", ":", ".", " end"]).parse_slot(0)

        assert plan.specifier.width is DEFERRED
        assert plan.specifier.precision is DEFERRED
        assert (plan.width_slot, plan.precision_slot) == (1, 2)
        assert plan.tail == " end"
        assert plan.consumed == 3
        assert next_slot == 3

    def test_deferred_width_with_whitespace_tail(self) -> None:
        """An absorbed literal starting with whitespace ends the specifier."""
        plan, _ = SpecifierParser(["", ":", " and ", ":x"]).parse_slot(0)
        assert plan.specifier.width is DEFERRED
        assert plan.tail == " and "

    def test_deferred_width_without_following_slot(self) -> None:
        """A deferred width in the final segment names the missing slot."""
        with pytest.raises(MissingArgumentError) as exc_info:
            compile_template(["", ":"])
        assert exc_info.value.slot_index == 1

    def test_deferred_precision_without_following_slot(self) -> None:
        """A deferred precision in the final segment is missing too."""
        with pytest.raises(MissingArgumentError) as exc_info:
            compile_template(["", ":", "."])
        assert exc_info.value.slot_index == 2

    def test_bind_replaces_deferred(self) -> None:
        """bind() fills deferred parameters with slot values."""
        spec = _parse("", ":", ".", "")
        assert not spec.is_bound

        bound = spec.bind(8, 2)
        assert bound.is_bound
        assert (bound.width, bound.precision) == (8, 2)

    def test_bind_without_values_is_identity(self) -> None:
        """bind() with nothing to bind returns the same specifier."""
        spec = _parse("", ":>5")
        assert spec.bind() is spec


class TestMalformedSpecifiers:
    """Unexpected characters before the terminator."""

    def test_unknown_type_code(self) -> None:
        """An unknown character fails with its slot and offset."""
        with pytest.raises(MalformedSpecifierError) as exc_info:
            compile_template(["", ":q"])

        assert exc_info.value.slot_index == 0
        assert exc_info.value.offset == 1

    def test_offset_after_width(self) -> None:
        """The offset points at the offending character."""
        with pytest.raises(MalformedSpecifierError) as exc_info:
            compile_template(["", ":5q"])
        assert exc_info.value.offset == 2

    def test_error_in_later_slot(self) -> None:
        """The slot index identifies which specifier failed."""
        with pytest.raises(MalformedSpecifierError) as exc_info:
            compile_template(["", ":x ", ":>5.2f"])
        assert exc_info.value.slot_index == 1
        assert exc_info.value.offset == 5

    def test_two_type_codes(self) -> None:
        """Only one type code is allowed."""
        with pytest.raises(MalformedSpecifierError):
            compile_template(["", ":xx"])

    def test_flags_out_of_order(self) -> None:
        """Stage order is fixed: '#' cannot follow the width."""
        with pytest.raises(MalformedSpecifierError):
            compile_template(["", ":5#x"])


class TestCompileTemplate:
    """Whole-template compilation."""

    def test_requires_a_segment(self) -> None:
        """An empty strings sequence is rejected."""
        with pytest.raises(ValueError, match="at least one literal"):
            compile_template([])

    def test_no_slots(self) -> None:
        """A single literal compiles to its head with no slots."""
        compiled = compile_template(["just text :x"])
        assert compiled.head == "just text :x"
        assert compiled.slots == ()
        assert compiled.slot_count == 0

    def test_multiple_slots(self) -> None:
        """Each slot gets its own plan in order."""
        compiled = compile_template(["a", ":>3 b", ":x"])

        assert compiled.head == "a"
        assert [plan.slot_index for plan in compiled.slots] == [0, 1]
        assert compiled.slots[0].tail == " b"
        assert compiled.slots[1].specifier.type is FormatType.HEX_LOWER

    def test_deferred_slot_is_skipped(self) -> None:
        """A slot absorbed as a parameter gets no plan of its own."""
        compiled = compile_template(["", ":", " and ", ":x"])
        assert [plan.slot_index for plan in compiled.slots] == [0, 2]
        assert compiled.slot_count == 3

    @given(st.lists(plain_literals, min_size=1, max_size=8))
    def test_plain_templates_plan_every_slot(self, strings: list[str]) -> None:
        """Without deferred parameters every slot has exactly one plan."""
        compiled = compile_template(strings)
        assert len(compiled.slots) == len(strings) - 1
        assert sum(plan.consumed for plan in compiled.slots) == compiled.slot_count

    @given(
        alignment_specs(),
        st.sampled_from(["", "+", "-"]),
        st.booleans(),
        widths,
        st.none() | precisions,
        st.sampled_from(["", *"oxXbeEnN?"]),
    )
    def test_generated_specifiers_parse_to_their_parts(
        self,
        prefix: tuple[str, str, str],
        sign: str,
        pretty: bool,
        width: int,
        precision: int | None,
        code: str,
    ) -> None:
        """Every stage reads back the value it was written with."""
        align_text, fill, align = prefix
        width_text = str(width) if width else ""
        precision_text = "" if precision is None else f".{precision}"
        text = f":{align_text}{sign}{'#' if pretty else ''}{width_text}{precision_text}{code};"

        spec = _parse("", text)

        assert spec.fill == fill
        assert spec.align is Alignment(align)
        assert spec.sign is SignMode(sign)
        assert spec.pretty is pretty
        assert spec.width == width
        assert spec.precision == precision
        assert spec.type is FormatType(code)
