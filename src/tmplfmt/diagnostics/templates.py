"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def missing_argument(slot_index: int, slot_count: int) -> Diagnostic:
        """Slot index has no supplied value.

        Args:
            slot_index: The slot index that was requested
            slot_count: Number of slots the template actually has

        Returns:
            Diagnostic for MISSING_ARGUMENT
        """
        msg = f"No value supplied for slot {slot_index} (template has {slot_count} slot(s))"
        return Diagnostic(
            code=DiagnosticCode.MISSING_ARGUMENT,
            message=msg,
            slot_index=slot_index,
            hint="A specifier ending without a width or precision takes it from the next slot",
        )

    @staticmethod
    def invalid_reference(slot_index: int, target: object, slot_count: int) -> Diagnostic:
        """Back-reference target is not a valid slot index.

        Args:
            slot_index: The slot whose value is being resolved
            target: The index carried by the back-reference
            slot_count: Number of slots the template has

        Returns:
            Diagnostic for INVALID_REFERENCE
        """
        msg = (
            f"Slot {slot_index} refers to {target!r}, "
            f"which is not a slot index in range [0, {slot_count})"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_REFERENCE,
            message=msg,
            slot_index=slot_index,
            hint="Back-references take the integer index of another slot",
        )

    @staticmethod
    def self_reference(slot_index: int, path: list[int]) -> Diagnostic:
        """Back-reference chain returns to its origin.

        Args:
            slot_index: The slot whose value is being resolved
            path: Slot indices followed, ending with the origin

        Returns:
            Diagnostic for SELF_REFERENCE
        """
        chain = " -> ".join(str(index) for index in path)
        msg = f"Slot {slot_index} refers to itself: {chain}"
        return Diagnostic(
            code=DiagnosticCode.SELF_REFERENCE,
            message=msg,
            slot_index=slot_index,
            hint="Supply a value instead of a reference for at least one slot in the chain",
            resolution_path=tuple(path),
        )

    @staticmethod
    def reference_cycle(slot_index: int, path: list[int]) -> Diagnostic:
        """Back-reference chain cycles among other slots.

        Args:
            slot_index: The slot whose value is being resolved
            path: Slot indices followed, ending with the repeated index

        Returns:
            Diagnostic for REFERENCE_CYCLE
        """
        chain = " -> ".join(str(index) for index in path)
        msg = f"Reference cycle detected while resolving slot {slot_index}: {chain}"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_CYCLE,
            message=msg,
            slot_index=slot_index,
            hint="Break the cycle by removing one of the references",
            resolution_path=tuple(path),
        )

    @staticmethod
    def invalid_width(slot_index: int, value: object) -> Diagnostic:
        """Deferred width slot does not hold a non-negative integer.

        Args:
            slot_index: The slot that supplied the width
            value: The resolved value found there

        Returns:
            Diagnostic for INVALID_WIDTH
        """
        msg = f"Invalid width {value!r} in slot {slot_index} (must be a non-negative integer)"
        return Diagnostic(
            code=DiagnosticCode.INVALID_WIDTH,
            message=msg,
            slot_index=slot_index,
            hint="Write the width inline or pass an int in the following slot",
        )

    @staticmethod
    def invalid_precision(slot_index: int, value: object) -> Diagnostic:
        """Deferred precision slot does not hold a non-negative integer.

        Args:
            slot_index: The slot that supplied the precision
            value: The resolved value found there

        Returns:
            Diagnostic for INVALID_PRECISION
        """
        msg = (
            f"Invalid precision {value!r} in slot {slot_index} "
            "(must be a non-negative integer)"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_PRECISION,
            message=msg,
            slot_index=slot_index,
            hint="Write the precision inline after '.' or pass an int in the following slot",
        )

    @staticmethod
    def malformed_specifier(slot_index: int, offset: int, char: str) -> Diagnostic:
        """Unexpected character before the specifier's terminator.

        Args:
            slot_index: The slot whose specifier is being parsed
            offset: Character offset of the offending character
            char: The offending character

        Returns:
            Diagnostic for MALFORMED_SPECIFIER
        """
        msg = f"Unexpected character {char!r} in format specifier of slot {slot_index}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_SPECIFIER,
            message=msg,
            slot_index=slot_index,
            offset=offset,
            hint="End the specifier with whitespace, ';' or the end of the literal; "
            "write '::' for a literal ':'",
        )
