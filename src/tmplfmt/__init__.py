"""tmplfmt - format-specifier mini-language for tagged templates.

Renders templates made of literal segments and value slots. Each slot is
shaped by a compact specifier written at the start of the literal segment
that follows it (fill, alignment, sign, radix prefix, zero padding, width,
precision and type), with back-references between slots and deferred
width/precision taken from the next slot.

Public API:
    Template - Literal segments plus slot values
    ref - Back-reference to an earlier slot's value
    TemplateRenderer - Renderer with its own compile cache and colour default
    render - Render a Template (or any object with strings/values)
    format_template - Render a tagged-template style call eagerly
    fmt - Build a lazily rendered FormattedString
    FormattedString - Template with memoized plain and decorated forms
    print_out, println, eprint, eprintln - Write rendered text to stdout/stderr

Exceptions:
    FormatError - Base exception class
    FormatReferenceError - Missing arguments and bad back-references
    FormatArgumentError - Invalid deferred width or precision values
    FormatSyntaxError - Malformed specifiers

Submodules:
    tmplfmt.syntax - Template model and specifier parser
    tmplfmt.runtime - Resolution, conversion and rendering pipeline
    tmplfmt.diagnostics - Error types, codes and diagnostic formatting
    tmplfmt.printing - Stream output with terminal-aware decoration
"""

from .diagnostics import (
    FormatArgumentError,
    FormatError,
    FormatReferenceError,
    FormatSyntaxError,
)
from .printing import eprint, eprintln, print_out, println
from .runtime import (
    FormattedString,
    TemplateRenderer,
    fmt,
    format_template,
    render,
)
from .syntax import Ref, Template, ref

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("tmplfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatArgumentError",
    "FormatError",
    "FormatReferenceError",
    "FormatSyntaxError",
    "FormattedString",
    "Ref",
    "Template",
    "TemplateRenderer",
    "__version__",
    "eprint",
    "eprintln",
    "fmt",
    "format_template",
    "print_out",
    "println",
    "ref",
    "render",
]
