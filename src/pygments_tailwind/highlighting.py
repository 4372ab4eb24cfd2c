"""Highlighter protocol and Pygments-backed convenience API.

Tokenization is delegated to Pygments lexers; this module only wires a lexer
to a TailwindRenderer.

Protocol:
    The Highlighter protocol matches what Markdown renderers expect from a
    code-block highlighter:
    - highlight(code, language, hl_lines, show_linenos) -> str
    - supports_language(language) -> bool

Usage:
    from pygments_tailwind import highlight

    html = highlight("print('hi')\\n", "python", style="default", dark_style="github-dark")

    # Reusable instance (keeps its class cache between calls)
    from pygments_tailwind.highlighting import TailwindHighlighter

    highlighter = TailwindHighlighter("default", "github-dark", classprefix="tw-")
    html = highlighter.highlight(code, "go", hl_lines=[2, 3], show_linenos=True)
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any, Protocol

from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from pygments_tailwind.cache import CLASS_CACHE_LIMIT, ClassCache
from pygments_tailwind.config import FormatterConfig, collapse_lines
from pygments_tailwind.renderer import TailwindRenderer, ThemeLike
from pygments_tailwind.theme import Theme, get_theme
from pygments_tailwind.utils.logger import get_logger

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight
            language: Language identifier (e.g., "python", "go")
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Include line numbers in output

        Returns:
            HTML markup with highlighting
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language."""
        ...


def get_lexer(language: str, **lexer_options: Any) -> Lexer:
    """Look up a Pygments lexer, falling back to plain text."""
    try:
        return get_lexer_by_name(language or "text", **lexer_options)
    except ClassNotFound:
        logger.debug("No lexer for %r, using plain text", language)
        return TextLexer(**lexer_options)


class TailwindHighlighter:
    """Pygments-lexer highlighter implementing the Highlighter protocol.

    The theme pair is resolved once. Line options (hl_lines, show_linenos)
    are part of the renderer configuration, so a call that passes them gets
    its own renderer; that renderer shares the class cache kept for its
    class-affecting options, so mappings are computed once per theme pair
    rather than once per call.

    Thread Safety:
        Safe to share; the cache table is lock-protected and each
        ClassCache locks itself.
    """

    __slots__ = ("_light", "_dark", "_base", "_renderer", "_caches", "_lock")

    def __init__(self, style: ThemeLike = "default", dark_style: ThemeLike | None = None, **options: Any) -> None:
        """Initialize highlighter.

        Args:
            style: Light theme
            dark_style: Dark theme (optional)
            **options: Pygments formatter options, see FormatterConfig.from_options
        """
        self._light = get_theme(style)
        self._dark = get_theme(dark_style) if dark_style is not None else None
        self._base = FormatterConfig.from_options(options)
        self._renderer = TailwindRenderer(self._base)
        # FormatterConfig.class_options -> shared ClassCache
        self._caches: dict[tuple[str, int, bool, bool], ClassCache] = {
            self._base.class_options: self._renderer.cache,
        }
        self._lock = threading.Lock()

    def _renderer_for(self, hl_lines: list[int] | None, show_linenos: bool) -> TailwindRenderer:
        if not (hl_lines or show_linenos):
            return self._renderer
        config = replace(
            self._base,
            highlight_ranges=(*self._base.highlight_ranges, *collapse_lines(hl_lines or ())),
            line_numbers=self._base.line_numbers or show_linenos,
        )
        with self._lock:
            cache = self._caches.get(config.class_options)
            if cache is None:
                renderer = TailwindRenderer(config)
                self._caches[config.class_options] = renderer.cache
                return renderer
        return TailwindRenderer(config, cache=cache)

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Tokenize ``code`` with the Pygments lexer for ``language`` and render it.

        Lexer errors propagate unchanged.
        """
        renderer = self._renderer_for(hl_lines, show_linenos)
        lexer = get_lexer(language)
        return renderer.render(lexer.get_tokens(code), self._light, self._dark)

    def supports_language(self, language: str) -> bool:
        """Check if Pygments has a lexer for the language."""
        try:
            get_lexer_by_name(language)
        except ClassNotFound:
            return False
        return True


# (light, dark, config) -> highlighter, oldest first
_highlighters: dict[tuple[Theme, Theme | None, FormatterConfig], TailwindHighlighter] = {}
_highlighters_lock = threading.Lock()


def _shared_highlighter(style: ThemeLike, dark_style: ThemeLike | None, options: dict[str, Any]) -> TailwindHighlighter:
    light = get_theme(style)
    dark = get_theme(dark_style) if dark_style is not None else None
    key = (light, dark, FormatterConfig.from_options(options))
    with _highlighters_lock:
        highlighter = _highlighters.get(key)
        if highlighter is None:
            if len(_highlighters) >= CLASS_CACHE_LIMIT:
                del _highlighters[next(iter(_highlighters))]
            highlighter = TailwindHighlighter(light, dark, **options)
            _highlighters[key] = highlighter
        return highlighter


def highlight(
    code: str,
    language: str,
    *,
    style: ThemeLike = "default",
    dark_style: ThemeLike | None = None,
    **options: Any,
) -> str:
    """Highlight ``code`` in one call.

    Highlighters are reused across calls with the same themes and options,
    so repeated calls hit the class cache.

    Args:
        code: Source code
        language: Pygments lexer name or alias; unknown names use plain text
        style: Light theme (Pygments style name, Style class or Theme)
        dark_style: Dark theme (optional)
        **options: Pygments formatter options, see FormatterConfig.from_options

    Returns:
        HTML markup
    """
    return _shared_highlighter(style, dark_style, options).highlight(code, language)


__all__ = [
    "Highlighter",
    "TailwindHighlighter",
    "get_lexer",
    "highlight",
]
