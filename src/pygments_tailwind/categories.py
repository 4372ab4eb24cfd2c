"""Token categories known to the class mapping.

Lexer categories are Pygments token types, which already form a tree through
dotted naming (``Token.Comment.Single`` -> ``Token.Comment`` -> ``Token``).
On top of those the formatter needs a handful of structural pseudo-categories
that no lexer ever emits: the page background, the block wrapper, lines,
line-number gutters and the line-number table.

The fallback rule lives here, in parent_category() and ancestors(), so that
both theme resolution and class lookup walk the same chain.

Thread Safety:
    All data is immutable (token types and frozensets). Safe to call from any
    thread.

"""

from __future__ import annotations

from collections.abc import Iterator

from pygments.token import STANDARD_TYPES, Token, _TokenType

Category = _TokenType

Background = Token.Background
PreWrapper = Token.PreWrapper
Line = Token.Line
CodeLine = Token.CodeLine
LineNumbers = Token.LineNumbers
LineNumbersTable = Token.LineNumbersTable
LineTable = Token.LineTable
LineTableTD = Token.LineTableTD
LineHighlight = Token.LineHighlight
LineLink = Token.LineLink

STRUCTURAL_CATEGORIES: frozenset[Category] = frozenset(
    {
        Background,
        PreWrapper,
        Line,
        CodeLine,
        LineNumbers,
        LineNumbersTable,
        LineTable,
        LineTableTD,
        LineHighlight,
        LineLink,
    }
)

# Every category the class mapping is built for, in a stable order.
STANDARD_CATEGORIES: tuple[Category, ...] = tuple(
    sorted(set(STANDARD_TYPES) | STRUCTURAL_CATEGORIES)
)


def is_structural(category: Category) -> bool:
    """Return True for pseudo-categories that no lexer emits."""
    return category in STRUCTURAL_CATEGORIES


def parent_category(category: Category) -> Category | None:
    """Return the category a missing style entry falls back to.

    Pseudo-categories and the root token have no parent.

    Examples:
        >>> parent_category(Token.Comment.Single)
        Token.Comment
        >>> parent_category(Token) is None
        True
        >>> parent_category(LineHighlight) is None
        True
    """
    if category in STRUCTURAL_CATEGORIES:
        return None
    return category.parent


def ancestors(category: Category) -> Iterator[Category]:
    """Yield the fallback chain of a category, nearest ancestor first.

    The category itself is not included.
    """
    parent = parent_category(category)
    while parent is not None:
        yield parent
        parent = parent_category(parent)


__all__ = [
    "Background",
    "Category",
    "CodeLine",
    "LineHighlight",
    "LineLink",
    "Line",
    "LineNumbers",
    "LineNumbersTable",
    "LineTable",
    "LineTableTD",
    "PreWrapper",
    "STANDARD_CATEGORIES",
    "STRUCTURAL_CATEGORIES",
    "ancestors",
    "is_structural",
    "parent_category",
]
