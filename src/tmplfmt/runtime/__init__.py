"""Template runtime package.

Provides value resolution, conversion, numeric shaping, alignment and the
TemplateRenderer API. Depends on the syntax package for parsing.

Python 3.13+.
"""

from .alignment import align
from .cache import CompileCache
from .converter import convert, ordinal_suffix, to_radix, to_scientific
from .formatted import FormattedString
from .inspector import inspect_value, strip_styles, true_length
from .numeric import NumericText, apply_precision, post_process
from .renderer import (
    TemplateRenderer,
    fmt,
    format_template,
    get_default_renderer,
    render,
    render_pair,
)
from .resolver import ResolutionContext, ValueResolver
from .value_types import RenderedPair, RenderedValue, TaggedValue, classify

__all__ = [
    "CompileCache",
    "FormattedString",
    "NumericText",
    "RenderedPair",
    "RenderedValue",
    "ResolutionContext",
    "TaggedValue",
    "TemplateRenderer",
    "ValueResolver",
    "align",
    "apply_precision",
    "classify",
    "convert",
    "fmt",
    "format_template",
    "get_default_renderer",
    "inspect_value",
    "ordinal_suffix",
    "post_process",
    "render",
    "render_pair",
    "strip_styles",
    "to_radix",
    "to_scientific",
    "true_length",
]
