"""TemplateRenderer - main API for rendering templates.

Walks a compiled template's literal/slot sequence and runs each slot
through the pipeline:

    resolve -> bind deferred width/precision -> convert -> post-process -> align

Thread Safety:
    A renderer's only mutable state is its CompileCache, which is locked.
    Per-call state (the slot cursor, reference chains) lives in objects
    created for that call. Colours are a per-call argument or a per-instance
    default, never a global toggle.

Python 3.13+. External dependency: Rich (debug output only).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from tmplfmt.constants import DEFAULT_CACHE_SIZE, INSPECT_WIDTH
from tmplfmt.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    FormatArgumentError,
    InvalidPrecisionError,
    InvalidWidthError,
)
from tmplfmt.enums import FormatType
from tmplfmt.runtime.alignment import align
from tmplfmt.runtime.cache import CompileCache
from tmplfmt.runtime.converter import convert
from tmplfmt.runtime.formatted import FormattedString
from tmplfmt.runtime.numeric import post_process
from tmplfmt.runtime.resolver import ValueResolver
from tmplfmt.runtime.value_types import RenderedPair, RenderedValue, classify
from tmplfmt.syntax import (
    CompiledTemplate,
    SlotPlan,
    Template,
    TemplateLike,
    as_template,
    compile_template,
)

__all__ = [
    "TemplateRenderer",
    "fmt",
    "format_template",
    "get_default_renderer",
    "render",
    "render_pair",
]

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Renders templates into strings.

    Examples:
        >>> renderer = TemplateRenderer()
        >>> renderer.format(["Hex: ", ":#07x"], 15)
        'Hex: 0x0000f'
        >>> renderer.format(["[", ":^5;]"], "aaa")
        '[ aaa ]'
        >>> renderer.format(["", ":n place"], 22)
        '22nd place'
        >>>
        >>> # Deferred width: the second value is consumed as the width
        >>> renderer.format(["", ":", ""], "a", 4)
        '   a'
    """

    __slots__ = ("_cache", "_colors", "_inspect_width")

    def __init__(
        self,
        *,
        colors: bool = False,
        enable_cache: bool = True,
        cache_size: int = DEFAULT_CACHE_SIZE,
        inspect_width: int = INSPECT_WIDTH,
    ) -> None:
        """Initialize renderer.

        Args:
            colors: Default for embedding styling codes in debug output
            enable_cache: Memoize compiled templates by their literal segments
            cache_size: Maximum compiled templates kept (default: 1000)
            inspect_width: Line width for pretty debug output (default: 80)
        """
        self._colors = colors
        self._inspect_width = inspect_width
        self._cache: CompileCache | None = CompileCache(cache_size) if enable_cache else None

        logger.info(
            "TemplateRenderer initialized (colors=%s, cache=%s)",
            colors,
            "enabled" if enable_cache else "disabled",
        )

    @property
    def colors(self) -> bool:
        """Default colour setting (read-only)."""
        return self._colors

    @property
    def cache_stats(self) -> dict[str, int | float] | None:
        """Compile cache statistics, or None when caching is disabled."""
        return self._cache.get_stats() if self._cache is not None else None

    def clear_cache(self) -> None:
        """Drop all compiled templates."""
        if self._cache is not None:
            self._cache.clear()
            logger.debug("Compile cache manually cleared")

    def compile(self, strings: Sequence[str]) -> CompiledTemplate:
        """Compile literal segments, through the cache when enabled."""
        if self._cache is not None:
            return self._cache.get_or_compile(strings)
        return compile_template(strings)

    def render(self, template: Template | TemplateLike, *, colors: bool | None = None) -> str:
        """Render a template.

        Args:
            template: Template or any object with strings and values
            colors: Embed styling codes in debug output (default: renderer setting)

        Returns:
            Rendered string

        Raises:
            FormatError: Any resolution or parsing failure; no partial output
        """
        decorate = self._colors if colors is None else colors
        pair = self._render(as_template(template), decorate=decorate)
        return pair.decorated if decorate else pair.plain

    def render_pair(self, template: Template | TemplateLike) -> RenderedPair:
        """Render both plain and decorated output in one pass."""
        return self._render(as_template(template), decorate=True)

    def format(self, strings: Sequence[str], *values: object, colors: bool | None = None) -> str:
        """Render a tagged-template style call eagerly."""
        return self.render(Template.of(strings, *values), colors=colors)

    def fmt(self, strings: Sequence[str], *values: object) -> FormattedString:
        """Build a lazily rendered FormattedString from a tagged-template style call."""
        return FormattedString(Template.of(strings, *values), self)

    def _render(self, template: Template, *, decorate: bool) -> RenderedPair:
        compiled = self.compile(template.strings)
        resolver = ValueResolver(template.values)

        plain = [compiled.head]
        decorated = [compiled.head]
        for plan in compiled.slots:
            rendered = self._render_slot(plan, resolver, decorate=decorate)
            plain.extend((rendered.plain, plan.tail))
            decorated.extend((rendered.decorated, plan.tail))

        logger.debug("Rendered template with %d slot(s)", len(compiled.slots))
        return RenderedPair("".join(plain), "".join(decorated))

    def _render_slot(
        self,
        plan: SlotPlan,
        resolver: ValueResolver,
        *,
        decorate: bool,
    ) -> RenderedValue:
        _, value = resolver.consume()

        width = precision = None
        if plan.width_slot is not None:
            width = _take_parameter(
                resolver, InvalidWidthError, ErrorTemplate.invalid_width
            )
        if plan.precision_slot is not None:
            precision = _take_parameter(
                resolver, InvalidPrecisionError, ErrorTemplate.invalid_precision
            )
        specifier = plan.specifier.bind(width, precision).effective()

        tagged = classify(value)
        rendered = convert(
            tagged, specifier, decorate=decorate, inspect_width=self._inspect_width
        )

        target_width = specifier.width if isinstance(specifier.width, int) else 0
        if tagged.is_numeric and specifier.type is not FormatType.DEBUG:
            numeric = post_process(rendered.plain, specifier, finite=tagged.is_finite)
            rendered = RenderedValue.of(numeric.text)
            if numeric.zero_padded:
                return rendered
        return align(rendered, target_width, specifier.align, specifier.fill)


def _take_parameter(
    resolver: ValueResolver,
    error_type: type[FormatArgumentError],
    template: Callable[[int, object], Diagnostic],
) -> int:
    """Consume the next slot as a deferred width or precision."""
    index, value = resolver.consume()
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise error_type(template(index, value))
    return value


# Shared renderer for the module-level helpers. Its only state is the
# thread-safe compile cache.
_DEFAULT_RENDERER: TemplateRenderer | None = None


def get_default_renderer() -> TemplateRenderer:
    """Return the shared renderer used by module-level helpers."""
    global _DEFAULT_RENDERER  # noqa: PLW0603 - lazy singleton
    if _DEFAULT_RENDERER is None:
        _DEFAULT_RENDERER = TemplateRenderer()
    return _DEFAULT_RENDERER


def render(template: Template | TemplateLike, *, colors: bool = False) -> str:
    """Render a template with the shared renderer.

    Example:
        >>> render(Template.of(["Total: ", ":+.2"], 3))
        'Total: +3.00'
    """
    return get_default_renderer().render(template, colors=colors)


def render_pair(template: Template | TemplateLike) -> RenderedPair:
    """Render plain and decorated output with the shared renderer."""
    return get_default_renderer().render_pair(template)


def format_template(strings: Sequence[str], *values: object, colors: bool = False) -> str:
    """Render a tagged-template style call with the shared renderer.

    Example:
        >>> format_template(["", ":*<6;|"], "ab")
        'ab****|'
    """
    return get_default_renderer().format(strings, *values, colors=colors)


def fmt(strings: Sequence[str], *values: object) -> FormattedString:
    """Build a lazily rendered FormattedString with the shared renderer."""
    return get_default_renderer().fmt(strings, *values)
