"""tmplfmt exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Errors are raised where the offending slot is parsed or resolved and are
never recovered internally: they abort the whole render.

Python 3.13+.
"""

from .codes import Diagnostic


class FormatError(Exception):
    """Base exception for all template formatting errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def slot_index(self) -> int | None:
        """Index of the slot being processed when the error occurred."""
        return self.diagnostic.slot_index if self.diagnostic else None

    @property
    def offset(self) -> int | None:
        """Character offset within the slot's specifier text, if known."""
        return self.diagnostic.offset if self.diagnostic else None


class FormatReferenceError(FormatError):
    """A slot's value could not be located."""


class MissingArgumentError(FormatReferenceError):
    """A slot index has no supplied value.

    Example:
        A deferred width at the end of the last literal segment names a slot
        that does not exist.
    """


class InvalidReferenceError(FormatReferenceError):
    """Back-reference index is not an integer in range."""


class SelfReferenceError(InvalidReferenceError):
    """Back-reference chain returns to the slot it started from.

    Example:
        render(["", ""], ref(0))  # slot 0 refers to itself
    """


class ReferenceCycleError(InvalidReferenceError):
    """Back-reference chain revisits a slot other than its origin.

    Example:
        slot 0 -> slot 1 -> slot 2 -> slot 1
    """


class FormatArgumentError(FormatError):
    """A deferred width or precision slot holds an unusable value."""


class InvalidWidthError(FormatArgumentError):
    """Deferred width slot is not a non-negative integer."""


class InvalidPrecisionError(FormatArgumentError):
    """Deferred precision slot is not a non-negative integer."""


class FormatSyntaxError(FormatError):
    """Specifier text does not follow the grammar."""


class MalformedSpecifierError(FormatSyntaxError):
    """Unexpected character before the specifier's terminator.

    The diagnostic carries the slot index and the character offset of the
    offending character within that slot's specifier text.
    """
