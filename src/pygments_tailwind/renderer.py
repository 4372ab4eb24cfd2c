"""Tailwind HTML renderer.

Turns a token stream into markup whose styling lives entirely in utility
classes, with ``dark:`` variants for the dark theme.

Output structure (default wrapper, line numbers inline):

    <pre class="..."><code>
      <span class="flex ...">                 one per line
        <span class="whitespace-pre ...">1</span>
        <span>
          <span class="text-[#d73a49] ...">func</span> main...
        </span>
      </span>
    </code></pre>

Line numbers in a table put every number in a first ``<td>`` and the code in
a second one. Highlighted lines carry the Line and LineHighlight classes.

Thread Safety:
    The only shared mutable state is the renderer's ClassCache, which is
    lock-protected. Everything else is local to each render call, so one
    TailwindRenderer can serve many threads.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from pygments.style import Style

from pygments_tailwind.cache import CLASS_CACHE_LIMIT, ClassCache
from pygments_tailwind.categories import (
    Background,
    Category,
    CodeLine,
    Line,
    LineHighlight,
    LineLink,
    LineNumbers,
    LineNumbersTable,
    LineTable,
    LineTableTD,
    PreWrapper,
)
from pygments_tailwind.config import FormatterConfig, HighlightRange
from pygments_tailwind.differ import ClassMapping, build_class_mapping, prefix_class
from pygments_tailwind.lines import TokenPair, split_tokens_into_lines
from pygments_tailwind.profiling import get_render_accumulator
from pygments_tailwind.stringbuilder import StringBuilder
from pygments_tailwind.theme import Theme, get_theme
from pygments_tailwind.utils.text import escape_html, join_classes

ThemeLike = Theme | type[Style] | str
Write = Callable[[str], object]


class HighlightCursor:
    """Monotonic cursor over sorted highlight ranges.

    Lines must be visited in ascending order. Ranges that end before the
    current line are skipped for good, so a full pass costs
    O(lines + ranges).
    """

    __slots__ = ("_ranges", "_index")

    def __init__(self, ranges: Sequence[HighlightRange]) -> None:
        self._ranges = ranges
        self._index = 0

    def advance(self, line: int) -> bool:
        """Move to ``line`` and report whether it is highlighted."""
        ranges = self._ranges
        while self._index < len(ranges) and line > ranges[self._index][1]:
            self._index += 1
        if self._index < len(ranges):
            start, end = ranges[self._index]
            return start <= line <= end
        return False


class TailwindRenderer:
    """Render token streams to Tailwind-styled HTML.

    Usage:
        >>> from pygments.token import Keyword, Text
        >>> from pygments_tailwind.theme import Theme
        >>> light = Theme.from_styles("light", {Keyword: "#d73a49"})
        >>> renderer = TailwindRenderer(FormatterConfig(prevent_surrounding_pre=True))
        >>> renderer.render([(Keyword, "func"), (Text, "\\n")], light)
        '<span class="text-[#d73a49] dark:text-[#d73a49]">func</span>\\n'

    Thread Safety:
        Safe to share between threads; see module docstring.
    """

    __slots__ = ("_config", "_cache")

    def __init__(
        self,
        config: FormatterConfig | None = None,
        *,
        cache_capacity: int = CLASS_CACHE_LIMIT,
        cache: ClassCache | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Formatting options (defaults to FormatterConfig())
            cache_capacity: Number of theme pairs kept in the class cache
            cache: Existing class cache to share. Its mappings must have been
                built for the same class-affecting options (see
                ``FormatterConfig.class_options``); ``cache_capacity`` is then
                ignored.
        """
        self._config = config or FormatterConfig()
        self._cache = cache if cache is not None else ClassCache(self._build_mapping, cache_capacity)

    def _build_mapping(self, light: Theme, dark: Theme) -> ClassMapping:
        return build_class_mapping(light, dark, self._config)

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def cache(self) -> ClassCache:
        return self._cache

    def class_mapping(self, light: ThemeLike, dark: ThemeLike | None = None) -> ClassMapping:
        """Return the (cached) class mapping for a theme pair."""
        return self._cache.get(get_theme(light), get_theme(dark) if dark is not None else None)

    def render(
        self,
        tokens: Iterable[TokenPair],
        light: ThemeLike,
        dark: ThemeLike | None = None,
    ) -> str:
        """Render tokens to an HTML string.

        Args:
            tokens: ``(category, text)`` pairs, e.g. from a Pygments lexer
            light: Light theme, Pygments style class or style name
            dark: Dark theme; defaults to the light theme

        Returns:
            HTML fragment, or a full document in standalone mode
        """
        sb = StringBuilder()
        self.render_to(sb.write, tokens, light, dark)
        return sb.build()

    def render_to(
        self,
        write: Write,
        tokens: Iterable[TokenPair],
        light: ThemeLike,
        dark: ThemeLike | None = None,
    ) -> None:
        """Render tokens, streaming markup to ``write``.

        A failing ``write`` aborts the render with its own exception;
        whatever was written before stays written.
        """
        config = self._config
        classes = self.class_mapping(light, dark)
        lines = split_tokens_into_lines(tokens)
        digits = len(str(config.base_line_number + len(lines) - 1))
        wrapper = config.wrapper
        in_table = config.numbers_in_table

        if config.standalone:
            write("<html>\n")
            write(f"<body{self._class_attr(classes, Background)}>\n")

        if in_table:
            write(f"<div{self._class_attr(classes, PreWrapper)}>\n")
            write(f"<table{self._class_attr(classes, LineTable)}><tr>")
            write(f"<td{self._class_attr(classes, LineTableTD)}>\n")
            write(wrapper.start(False, self._class_attr(classes, PreWrapper)))
            cursor = HighlightCursor(config.highlight_ranges)
            for index in range(len(lines)):
                number = config.base_line_number + index
                highlight = cursor.advance(number)
                if highlight:
                    write(f"<span{self._class_attr(classes, LineHighlight)}>")
                write(
                    f"<span{self._class_attr(classes, LineNumbersTable)}{self._line_id_attr(number)}>"
                    f"{self._line_title(classes, digits, number)}\n</span>"
                )
                if highlight:
                    write("</span>")
            write(wrapper.end(False))
            write("</td>\n")
            write(f"<td{self._class_attr(classes, LineTableTD, 'w-full')}>\n")

        write(wrapper.start(True, self._class_attr(classes, PreWrapper)))

        cursor = HighlightCursor(config.highlight_ranges)
        token_count = 0
        for index, line in enumerate(lines):
            number = config.base_line_number + index
            highlight = cursor.advance(number)

            if config.line_spans:
                if highlight:
                    line_classes = join_classes(classes[Line], classes[LineHighlight]).strip()
                    write(f'<span class="{line_classes}">' if line_classes else "<span>")
                else:
                    write(f"<span{self._class_attr(classes, Line)}>")
                if config.line_numbers and not in_table:
                    write(
                        f"<span{self._class_attr(classes, LineNumbers)}{self._line_id_attr(number)}>"
                        f"{self._line_title(classes, digits, number)}</span>"
                    )
                write(f"<span{self._class_attr(classes, CodeLine)}>")

            for category, text in line:
                escaped = escape_html(text)
                attr = self._class_attr(classes, category)
                write(f"<span{attr}>{escaped}</span>" if attr else escaped)
            token_count += len(line)

            if config.line_spans:
                write("</span>")  # CodeLine
                write("</span>")  # Line

        write(wrapper.end(True))

        if in_table:
            write("</td></tr></table>\n")
            write("</div>\n")

        if config.standalone:
            write("\n</body>\n")
            write("</html>\n")

        acc = get_render_accumulator()
        if acc is not None:
            acc.record_render(len(lines), token_count)

    def _class_attr(self, classes: ClassMapping, category: Category, *extra: str) -> str:
        parts = []
        cls = classes.classes_for(category).strip()
        if cls:
            parts.append(cls)
        for group in extra:
            prefixed = [prefix_class(self._config.class_prefix, c) for c in group.split()]
            if prefixed:
                parts.append(" ".join(prefixed))
        if not parts:
            return ""
        return f' class="{" ".join(parts)}"'

    def _line_id(self, number: int) -> str:
        return f"{self._config.line_numbers_id_prefix}{number}"

    def _line_id_attr(self, number: int) -> str:
        if not self._config.linkable_line_numbers:
            return ""
        return f' id="{self._line_id(number)}"'

    def _line_title(self, classes: ClassMapping, digits: int, number: int) -> str:
        title = f"{number:>{digits}d}"
        if not self._config.linkable_line_numbers:
            return title
        return f'<a{self._class_attr(classes, LineLink)} href="#{self._line_id(number)}">{title}</a>'


__all__ = [
    "HighlightCursor",
    "TailwindRenderer",
]
