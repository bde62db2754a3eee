"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for template rendering.
Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing slots, back-references)
        2000-2999: Argument errors (deferred width/precision values)
        3000-3999: Syntax errors (specifier parsing)
    """

    # Reference errors (1000-1999)
    MISSING_ARGUMENT = 1001
    INVALID_REFERENCE = 1002
    SELF_REFERENCE = 1003
    REFERENCE_CYCLE = 1004

    # Argument errors (2000-2999)
    INVALID_WIDTH = 2001
    INVALID_PRECISION = 2002

    # Syntax errors (3000-3999)
    MALFORMED_SPECIFIER = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Locates the failure by the slot
    being processed and, for syntax errors, the character offset inside that
    slot's specifier text (the literal segment following the slot, extended
    by any segments fused in through deferred width or precision).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        slot_index: Index of the slot being processed (None if not applicable)
        offset: Character offset within the slot's specifier text
        hint: Suggestion for fixing the error
        severity: Error severity level
        resolution_path: Slot indices followed while resolving back-references
    """

    code: DiagnosticCode
    message: str
    slot_index: int | None = None
    offset: int | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"
    resolution_path: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If slot_index or offset is negative.
        """
        if self.slot_index is not None and self.slot_index < 0:
            msg = f"Diagnostic.slot_index must be >= 0, got {self.slot_index}"
            raise ValueError(msg)
        if self.offset is not None and self.offset < 0:
            msg = f"Diagnostic.offset must be >= 0, got {self.offset}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[MALFORMED_SPECIFIER]: Unexpected character 'q' in format specifier
              --> slot 2, offset 4
              = help: End the specifier with whitespace, ';' or the end of the literal

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
