"""Diagnostic system for template formatting errors.

Provides structured error diagnostics with codes, slot locations and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatArgumentError,
    FormatError,
    FormatReferenceError,
    FormatSyntaxError,
    InvalidPrecisionError,
    InvalidReferenceError,
    InvalidWidthError,
    MalformedSpecifierError,
    MissingArgumentError,
    ReferenceCycleError,
    SelfReferenceError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatArgumentError",
    "FormatError",
    "FormatReferenceError",
    "FormatSyntaxError",
    "InvalidPrecisionError",
    "InvalidReferenceError",
    "InvalidWidthError",
    "MalformedSpecifierError",
    "MissingArgumentError",
    "OutputFormat",
    "ReferenceCycleError",
    "SelfReferenceError",
]
