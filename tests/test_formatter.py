"""End-to-end tests for the Pygments formatter plugin."""

import io

import pytest
from conftest import KW
from pygments import highlight
from pygments.formatters import get_formatter_by_name
from pygments.lexers import GoLexer
from pygments.style import Style
from pygments.token import Comment, Keyword, Token
from pygments.util import OptionError

from pygments_tailwind.errors import ConfigError, ThemeError
from pygments_tailwind.formatter import TailwindFormatter
from pygments_tailwind.theme import Theme

GO_SOURCE = 'package main\n\n// entry\nfunc main() {\n\tprintln("<hi>")\n}\n'


class LightStyle(Style):
    name = "test-light"
    background_color = "#ffffff"
    highlight_color = "#e5e5e5"
    styles = {
        Token: "#24292e",
        Keyword: "bold #d73a49",
        Comment: "italic #6a737d",
    }


class DarkStyle(Style):
    name = "test-dark"
    background_color = "#0d1117"
    styles = {
        Token: "#e6edf3",
        Keyword: "#ff7b72",
    }


BG = "text-[#24292e] bg-[#ffffff] dark:text-[#e6edf3] dark:bg-[#0d1117]"


def format_go(**options) -> str:
    formatter = TailwindFormatter(style=LightStyle, dark_style=DarkStyle, **options)
    return highlight(GO_SOURCE, GoLexer(), formatter)


class TestTailwindFormatter:
    """TailwindFormatter used through pygments.highlight()."""

    def test_block(self) -> None:
        html = format_go()
        assert html.startswith(f'<pre class="{BG}"><code>')
        assert html.endswith("</code></pre>")
        assert f'<span class="{KW}">package</span>' in html
        assert f'<span class="{KW}">func</span>' in html

    def test_one_line_span_per_source_line(self) -> None:
        html = format_go()
        assert html.count('<span class="flex">') == GO_SOURCE.count("\n")

    def test_comment_reset_in_dark_mode(self) -> None:
        html = format_go()
        assert (
            '<span class="text-[#6a737d] italic dark:text-[inherit] dark:not-italic">'
            "// entry"
        ) in html

    def test_string_is_escaped(self) -> None:
        html = format_go()
        assert "&lt;hi&gt;" in html
        assert "<hi>" not in html

    def test_inline_line_numbers_and_highlight(self) -> None:
        html = format_go(linenos="inline", hl_lines="4")
        assert html.startswith(f'<pre class="grid {BG}"><code>')
        assert html.count("bg-[#e5e5e5]") == 1
        assert '<span class="whitespace-pre select-none mr-[0.4em] px-[0.4em]">6</span>' in html

    def test_table_line_numbers(self) -> None:
        html = format_go(linenos=True)
        assert html.startswith(f'<div class="{BG}">\n<table ')
        assert html.endswith("</td></tr></table>\n</div>\n")

    def test_nowrap(self) -> None:
        html = format_go(nowrap=True)
        assert not html.startswith("<pre")
        assert 'class="flex"' not in html

    def test_full_document(self) -> None:
        html = format_go(full=True)
        assert html.startswith(f'<html>\n<body class="{BG}">\n')

    def test_without_dark_style(self) -> None:
        formatter = TailwindFormatter(style=LightStyle)
        html = highlight("package main\n", GoLexer(), formatter)
        assert "dark:text-[#d73a49] dark:font-bold" in html

    def test_theme_objects(self) -> None:
        light = Theme.from_styles("l", {Keyword: "#d73a49"})
        formatter = TailwindFormatter(style=light, dark_style=light)
        html = highlight("package main\n", GoLexer(), formatter)
        assert '<span class="text-[#d73a49] dark:text-[#d73a49]">package</span>' in html

    def test_encoding_gives_bytes(self) -> None:
        formatter = TailwindFormatter(style=LightStyle, encoding="utf-8")
        out = highlight("package main\n", GoLexer(), formatter)
        assert isinstance(out, bytes)
        assert out.startswith(b"<pre")

    def test_outfile(self) -> None:
        outfile = io.StringIO()
        highlight("package main\n", GoLexer(), TailwindFormatter(style=LightStyle), outfile)
        assert "package" in outfile.getvalue()

    def test_no_stylesheet(self) -> None:
        assert TailwindFormatter().get_style_defs() == ""

    def test_registered_with_pygments(self) -> None:
        assert isinstance(get_formatter_by_name("tailwind"), TailwindFormatter)

    def test_cache_capacity_option(self) -> None:
        assert TailwindFormatter(cache_capacity=3).renderer.cache.capacity == 3


class TestFormatterErrors:
    """Option errors surface when the formatter is built."""

    def test_unknown_dark_style(self) -> None:
        with pytest.raises(ThemeError):
            TailwindFormatter(dark_style="no-such-style")

    def test_bad_highlight_lines(self) -> None:
        with pytest.raises(ConfigError):
            TailwindFormatter(hl_lines="one two")

    def test_bad_cache_capacity(self) -> None:
        with pytest.raises(ConfigError):
            TailwindFormatter(cache_capacity=0)

    def test_bad_int_option(self) -> None:
        with pytest.raises(OptionError):
            TailwindFormatter(linenostart="first")
