"""Splitting a token stream into lines.

A token whose text spans several lines is cut after each newline; every
fragment keeps the token's category and the newline stays at the end of
the line it terminates.

Example:
    >>> from pygments.token import String, Text
    >>> split_tokens_into_lines([(String, '"a\\nb"'), (Text, "\\n")])
    [[(Token.Literal.String, '"a\\n')], [(Token.Literal.String, 'b"'), (Token.Text, '\\n')]]
"""

from __future__ import annotations

from collections.abc import Iterable

from pygments_tailwind.categories import Category
from pygments_tailwind.errors import RenderError

TokenPair = tuple[Category, str]


def split_tokens_into_lines(tokens: Iterable[TokenPair]) -> list[list[TokenPair]]:
    """Group tokens into lines.

    Empty fragments are dropped, so text ending in a newline does not
    produce an empty trailing line.

    Raises:
        RenderError: A token's text is not a string.
    """
    lines: list[list[TokenPair]] = []
    line: list[TokenPair] = []
    for category, text in tokens:
        if not isinstance(text, str):
            raise RenderError(f"token text must be str, got {type(text).__name__} for {category}")
        start = 0
        newline = text.find("\n")
        while newline != -1:
            line.append((category, text[start : newline + 1]))
            lines.append(line)
            line = []
            start = newline + 1
            newline = text.find("\n", start)
        if start < len(text):
            line.append((category, text[start:]))
    if line:
        lines.append(line)
    return lines


__all__ = ["TokenPair", "split_tokens_into_lines"]
