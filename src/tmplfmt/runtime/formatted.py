"""Lazily rendered template string.

FormattedString keeps a template and renders it on first access, caching
the plain and decorated forms in two separate fields. Which form is wanted
is chosen by the caller (``plain``/``decorated`` or ``render(colors=...)``),
never by shared state, so the same object may be printed to a terminal and
written to a log concurrently.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tmplfmt.runtime.renderer import TemplateRenderer
    from tmplfmt.syntax import Template

__all__ = ["FormattedString"]


class FormattedString:
    """Template plus memoized plain and decorated renderings.

    Rendering errors surface on first access of a form and are not cached.

    Example:
        >>> text = fmt(["", ":?"], {"a": 1})
        >>> text.plain
        "{'a': 1}"
        >>> str(text) == text.plain
        True
    """

    __slots__ = ("_decorated", "_plain", "_renderer", "_template")

    def __init__(self, template: Template, renderer: TemplateRenderer) -> None:
        self._template = template
        self._renderer = renderer
        self._plain: str | None = None
        self._decorated: str | None = None

    @property
    def template(self) -> Template:
        """The template this string renders."""
        return self._template

    @property
    def plain(self) -> str:
        """Rendering without styling codes."""
        if self._plain is None:
            self._plain = self._renderer.render(self._template, colors=False)
        return self._plain

    @property
    def decorated(self) -> str:
        """Rendering with styling codes in debug slots."""
        if self._decorated is None:
            self._decorated = self._renderer.render(self._template, colors=True)
        return self._decorated

    def render(self, *, colors: bool = False) -> str:
        """Return the decorated form when ``colors`` is set, else plain."""
        return self.decorated if colors else self.plain

    def __str__(self) -> str:
        return self.plain

    def __repr__(self) -> str:
        return f"FormattedString({self.plain!r})"

    def __len__(self) -> int:
        return len(self.plain)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FormattedString):
            return self.plain == other.plain
        if isinstance(other, str):
            return self.plain == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.plain)
