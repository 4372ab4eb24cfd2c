"""Shared themes and token streams for the test suite."""

from __future__ import annotations

import pytest
from pygments.token import Comment, Keyword, Name, Punctuation, String, Text

from pygments_tailwind.categories import Background, LineHighlight, LineNumbers
from pygments_tailwind.theme import Theme

# Expected class strings for the LIGHT/DARK pair below
BG = "text-[#24292e] bg-[#ffffff] dark:text-[#e6edf3] dark:bg-[#0d1117]"
KW = "text-[#d73a49] font-bold dark:text-[#ff7b72] dark:font-normal"
HL = "bg-[#e5e5e5] dark:bg-transparent"
GUTTER = "whitespace-pre select-none mr-[0.4em] px-[0.4em]"
LN = f"{GUTTER} text-[#7f7f7f] dark:text-[#6e7681]"
TABLE = "border-separate border-spacing-0 p-0 m-0 border-0"
TD = "align-top p-0 m-0 border-0"
LINK = "outline-none no-underline text-[inherit]"


def make_light() -> Theme:
    return Theme.from_styles(
        "github",
        {
            Background: "bg:#ffffff #24292e",
            Keyword: "bold #d73a49",
            Comment: "italic #6a737d",
            String: "#032f62",
            LineHighlight: "bg:#e5e5e5",
            LineNumbers: "#7f7f7f",
        },
    )


def make_dark() -> Theme:
    return Theme.from_styles(
        "github-dark",
        {
            Background: "bg:#0d1117 #e6edf3",
            Keyword: "#ff7b72",
            String: "#a5d6ff",
            LineNumbers: "#6e7681",
        },
    )


@pytest.fixture
def light() -> Theme:
    return make_light()


@pytest.fixture
def dark() -> Theme:
    return make_dark()


@pytest.fixture
def go_tokens() -> list[tuple]:
    """Tokens for ``package main\\nfunc main() {}\\n``."""
    return [
        (Keyword.Namespace, "package"),
        (Text, " "),
        (Name, "main"),
        (Text, "\n"),
        (Keyword.Declaration, "func"),
        (Text, " "),
        (Name.Function, "main"),
        (Punctuation, "()"),
        (Text, " "),
        (Punctuation, "{}"),
        (Text, "\n"),
    ]
