"""Slot value resolver - dereferences back-references.

Resolves each slot's raw value, following Ref tokens until a plain value is
reached, and hands slots out in template order through a positional cursor.

Thread Safety:
    Resolution state lives in the resolver instance and in a per-call
    ResolutionContext. A resolver is created per render call, so concurrent
    renders never share state.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tmplfmt.diagnostics import (
    ErrorTemplate,
    InvalidReferenceError,
    MissingArgumentError,
    ReferenceCycleError,
    SelfReferenceError,
)
from tmplfmt.syntax import Ref

__all__ = ["ResolutionContext", "ValueResolver"]


@dataclass(slots=True)
class ResolutionContext:
    """Explicit context for one back-reference chain.

    Attributes:
        origin: Slot whose value is being resolved
        path: Slot indices visited so far, origin first
    """

    origin: int
    path: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path.append(self.origin)

    def push(self, index: int) -> None:
        """Record a visited slot index."""
        self.path.append(index)

    def contains(self, index: int) -> bool:
        """Check if index was already visited (cycle detection)."""
        return index in self.path

    @property
    def depth(self) -> int:
        """Number of references followed."""
        return len(self.path) - 1

    def get_cycle_path(self, index: int) -> list[int]:
        """Get the cycle path for error reporting."""
        return [*self.path, index]


class ValueResolver:
    """Resolves slot values for one render call.

    Two ways in:
        - resolve(index): explicit index, does not move the cursor
        - consume(): next slot in template order, advances the cursor

    Example:
        >>> resolver = ValueResolver(["a", ref(0)])
        >>> resolver.consume(), resolver.consume()
        ((0, 'a'), (1, 'a'))
    """

    __slots__ = ("_cursor", "_values")

    def __init__(self, values: Sequence[object]) -> None:
        self._values = tuple(values)
        self._cursor = 0

    @property
    def slot_count(self) -> int:
        """Number of slots available."""
        return len(self._values)

    @property
    def cursor(self) -> int:
        """Index of the next slot consume() will return."""
        return self._cursor

    def consume(self) -> tuple[int, object]:
        """Resolve the next slot in template order.

        Returns:
            Tuple of (slot index, resolved value)

        Raises:
            MissingArgumentError: No slots remain
        """
        index = self._cursor
        value = self.resolve(index)
        self._cursor += 1
        return index, value

    def resolve(self, index: int) -> object:
        """Resolve slot ``index`` to a plain value.

        Follows back-references, tracking every visited index so that a chain
        can neither return to its origin nor loop among other slots.

        Raises:
            MissingArgumentError: index has no supplied value
            InvalidReferenceError: a reference target is not an in-range int
            SelfReferenceError: the chain returns to ``index``
            ReferenceCycleError: the chain revisits another slot
        """
        if not 0 <= index < len(self._values):
            raise MissingArgumentError(ErrorTemplate.missing_argument(index, len(self._values)))

        context = ResolutionContext(index)
        value = self._values[index]
        while isinstance(value, Ref):
            target = value.index
            if (
                not isinstance(target, int)
                or isinstance(target, bool)
                or not 0 <= target < len(self._values)
            ):
                raise InvalidReferenceError(
                    ErrorTemplate.invalid_reference(index, target, len(self._values))
                )
            if target == index:
                raise SelfReferenceError(
                    ErrorTemplate.self_reference(index, context.get_cycle_path(target))
                )
            if context.contains(target):
                raise ReferenceCycleError(
                    ErrorTemplate.reference_cycle(index, context.get_cycle_path(target))
                )
            context.push(target)
            value = self._values[target]
        return value
