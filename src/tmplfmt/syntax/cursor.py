"""Immutable cursor infrastructure for specifier parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Fusing a following literal segment returns a NEW cursor at the same position

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor(":>5", 1)
        >>> cursor.current
        '>'
        >>> cursor.advance().current
        '5'
        >>> cursor.current  # Original unchanged (immutability)
        '>'
        >>> Cursor(":", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of specifier at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("+5", 0).expect("+").pos
            1
            >>> Cursor("5", 0).expect("+") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def take_digits(self) -> tuple[str, "Cursor"]:
        """Consume a run of ASCII decimal digits.

        Returns:
            Tuple of (digits, cursor after the run). digits is empty when the
            current character is not a digit.

        Example:
            >>> Cursor("12.5", 0).take_digits()
            ('12', Cursor(source='12.5', pos=2))
        """
        c = self
        while not c.is_eof and c.current in "0123456789":
            c = c.advance()
        return self.slice_to(c.pos), c

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def remainder(self) -> str:
        """Return the unconsumed source from the current position."""
        return self.source[self.pos :]

    def extend(self, text: str) -> "Cursor":
        """Return a cursor at the same position over source + text.

        Used when a deferred width or precision absorbs the following slot and
        its literal segment is fused onto the current one.

        Example:
            >>> Cursor(":", 1).extend(".3").current
            '.'
        """
        return Cursor(self.source + text, self.pos)
