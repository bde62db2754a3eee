"""Template syntax package.

Provides the template model, back-reference tokens and the specifier parser.
Has no dependency on the runtime package.

Python 3.13+.
"""

from .cursor import Cursor
from .specifier import (
    DEFERRED,
    CompiledTemplate,
    Deferred,
    FormatSpecifier,
    SlotPlan,
    SpecifierParser,
    compile_template,
)
from .template import Ref, Template, TemplateLike, as_template, ref

__all__ = [
    "DEFERRED",
    "CompiledTemplate",
    "Cursor",
    "Deferred",
    "FormatSpecifier",
    "Ref",
    "SlotPlan",
    "SpecifierParser",
    "Template",
    "TemplateLike",
    "as_template",
    "compile_template",
    "ref",
]
