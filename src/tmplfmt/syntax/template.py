"""Template model: literal segments interleaved with value slots.

A template is the pair (strings, values) produced by a tagged-template style
call. The specifier text for slot ``i`` is embedded at the start of
``strings[i + 1]``.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "Ref",
    "Template",
    "TemplateLike",
    "as_template",
    "ref",
]


@dataclass(frozen=True, slots=True)
class Ref:
    """Back-reference token: use the value of slot ``index`` instead.

    Consumed only by the value resolver. Chains of references are followed
    until a plain value is reached.

    Attributes:
        index: Target slot index
    """

    index: int

    def __repr__(self) -> str:
        """Return compact representation for debugging."""
        return f"ref({self.index!r})"


def ref(index: int) -> Ref:
    """Create a back-reference to slot ``index``.

    Example:
        >>> render(Template.of(["", " and ", ":x"], 255, ref(0)))
        '255 and ff'
    """
    return Ref(index)


@runtime_checkable
class TemplateLike(Protocol):
    """Anything exposing literal ``strings`` and slot ``values``.

    PEP 750 ``string.templatelib.Template`` objects satisfy this protocol, so
    ``t"{price}:>8.2"`` renders directly.
    """

    @property
    def strings(self) -> tuple[str, ...]: ...

    @property
    def values(self) -> tuple[object, ...]: ...


@dataclass(frozen=True, slots=True)
class Template:
    """Ordered literal segments and the slot values between them.

    Attributes:
        strings: Literal segments, one more than there are values
        values: Raw slot values (may include Ref tokens)
    """

    strings: tuple[str, ...]
    values: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        """Validate the segment/slot count invariant.

        Raises:
            ValueError: If len(strings) != len(values) + 1
        """
        if len(self.strings) != len(self.values) + 1:
            msg = (
                f"Template needs exactly one more literal segment than values, "
                f"got {len(self.strings)} segment(s) and {len(self.values)} value(s)"
            )
            raise ValueError(msg)

    @classmethod
    def of(cls, strings: Sequence[str], *values: object) -> Template:
        """Build a template from a tagged-template style call.

        Example:
            >>> Template.of(["Hex: ", ":#07x"], 15).values
            (15,)
        """
        return cls(tuple(strings), tuple(values))

    @property
    def slot_count(self) -> int:
        """Number of value slots."""
        return len(self.values)


def as_template(template: Template | TemplateLike) -> Template:
    """Normalize any template-like object into a Template.

    Args:
        template: Template, or an object with ``strings`` and ``values``

    Returns:
        Template instance (the argument itself when already a Template)

    Raises:
        TypeError: If the object does not expose strings and values
    """
    if isinstance(template, Template):
        return template
    if isinstance(template, TemplateLike):
        return Template(tuple(template.strings), tuple(template.values))
    msg = f"Expected a Template or an object with strings and values, got {type(template).__name__}"
    raise TypeError(msg)
