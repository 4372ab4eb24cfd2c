"""Pygments formatter plugin.

Registered under the ``pygments.formatters`` entry point, so it is available
through the usual Pygments lookups:

    >>> from pygments import highlight
    >>> from pygments.lexers import GoLexer
    >>> html = highlight("package main\\n", GoLexer(),
    ...                  TailwindFormatter(style="default", dark_style="github-dark"))

    >>> from pygments.formatters import get_formatter_by_name
    >>> get_formatter_by_name("tailwind")  # doctest: +SKIP

Options are the Pygments spellings documented on FormatterConfig.from_options,
plus ``style`` (light theme), ``dark_style`` and ``cache_capacity``. Both
style options accept a Pygments style name, a Pygments Style class or a
Theme.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TextIO

from pygments.formatter import Formatter
from pygments.util import get_int_opt

from pygments_tailwind.cache import CLASS_CACHE_LIMIT
from pygments_tailwind.config import FormatterConfig
from pygments_tailwind.lines import TokenPair
from pygments_tailwind.renderer import TailwindRenderer
from pygments_tailwind.theme import Theme, get_theme


class TailwindFormatter(Formatter):
    """Format tokens as HTML styled with Tailwind utility classes.

    The light theme comes from the standard ``style`` option; ``dark_style``
    adds ``dark:`` variants. Without a dark style, dark mode looks the same
    as light mode.
    """

    name = "Tailwind"
    aliases = ["tailwind"]
    filenames = ["*.html", "*.htm"]

    def __init__(self, **options: Any) -> None:
        super().__init__(**options)
        self.config = FormatterConfig.from_options(options)
        self.light_theme: Theme = get_theme(self.style)
        dark_style = options.get("dark_style")
        self.dark_theme: Theme | None = get_theme(dark_style) if dark_style is not None else None
        self.renderer = TailwindRenderer(
            self.config,
            cache_capacity=get_int_opt(options, "cache_capacity", CLASS_CACHE_LIMIT),
        )

    def format_unencoded(self, tokensource: Iterable[TokenPair], outfile: TextIO) -> None:
        self.renderer.render_to(outfile.write, tokensource, self.light_theme, self.dark_theme)

    def get_style_defs(self, arg: Any = None) -> str:
        """Utility classes need no stylesheet; always returns ``""``."""
        return ""


__all__ = ["TailwindFormatter"]
