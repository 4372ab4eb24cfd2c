"""
pygments-tailwind: Tailwind utility-class HTML for Pygments

Renders Pygments token streams to HTML whose styling is expressed entirely as
Tailwind utility classes. A second (dark) theme adds ``dark:`` variants, so one
fragment follows the page's light/dark mode without any stylesheet.

Quick Start:
    >>> from pygments_tailwind import highlight
    >>> html = highlight("package main\\n", "go", style="default", dark_style="github-dark")

    >>> # As a regular Pygments formatter
    >>> from pygments import highlight as pygments_highlight
    >>> from pygments.lexers import GoLexer
    >>> from pygments_tailwind import TailwindFormatter
    >>> formatter = TailwindFormatter(style="default", dark_style="github-dark", linenos="inline")
    >>> html = pygments_highlight("package main\\n", GoLexer(), formatter)

Custom themes:
    >>> from pygments.token import Keyword
    >>> from pygments_tailwind import Theme, Background
    >>> light = Theme.from_styles("light", {Background: "bg:#ffffff", Keyword: "#d73a49"})

Installation:
    pip install pygments-tailwind
"""

from pygments_tailwind.cache import CLASS_CACHE_LIMIT, ClassCache
from pygments_tailwind.categories import (
    STANDARD_CATEGORIES,
    Background,
    CodeLine,
    Line,
    LineHighlight,
    LineLink,
    LineNumbers,
    LineNumbersTable,
    LineTable,
    LineTableTD,
    ancestors,
    parent_category,
)
from pygments_tailwind.config import FormatterConfig
from pygments_tailwind.differ import ClassMapping, ClassSet, build_class_mapping, compute_classes
from pygments_tailwind.errors import ConfigError, RenderError, TailwindError, ThemeError
from pygments_tailwind.formatter import TailwindFormatter
from pygments_tailwind.highlighting import Highlighter, TailwindHighlighter, highlight
from pygments_tailwind.lines import split_tokens_into_lines
from pygments_tailwind.profiling import RenderAccumulator, profiled_render
from pygments_tailwind.renderer import HighlightCursor, TailwindRenderer
from pygments_tailwind.theme import Colour, StyleEntry, Theme, get_theme
from pygments_tailwind.wrappers import (
    DEFAULT_PRE_WRAPPER,
    INLINE_CODE_WRAPPER,
    NOP_PRE_WRAPPER,
    FunctionPreWrapper,
    PreWrapper,
)

__version__ = "0.1.0"

__all__ = [
    # Rendering
    "TailwindFormatter",
    "TailwindHighlighter",
    "TailwindRenderer",
    "Highlighter",
    "HighlightCursor",
    "highlight",
    "split_tokens_into_lines",
    # Configuration
    "FormatterConfig",
    "PreWrapper",
    "FunctionPreWrapper",
    "DEFAULT_PRE_WRAPPER",
    "INLINE_CODE_WRAPPER",
    "NOP_PRE_WRAPPER",
    # Themes and classes
    "Theme",
    "StyleEntry",
    "Colour",
    "get_theme",
    "ClassCache",
    "CLASS_CACHE_LIMIT",
    "ClassMapping",
    "ClassSet",
    "build_class_mapping",
    "compute_classes",
    # Categories
    "STANDARD_CATEGORIES",
    "Background",
    "CodeLine",
    "Line",
    "LineHighlight",
    "LineLink",
    "LineNumbers",
    "LineNumbersTable",
    "LineTable",
    "LineTableTD",
    "ancestors",
    "parent_category",
    # Profiling
    "RenderAccumulator",
    "profiled_render",
    # Errors
    "TailwindError",
    "ThemeError",
    "ConfigError",
    "RenderError",
    "__version__",
]
