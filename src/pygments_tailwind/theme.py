"""Themes: per-category style entries with hierarchical fallback.

A Theme maps token categories to StyleEntry values. Looking up a category
that the theme does not define (or defines only partially) fills the missing
fields from the nearest ancestor that sets them, and finally from the
Background entry, field by field.

Themes come from three places:
    - ``Theme(name, {category: StyleEntry(...)})``
    - ``Theme.from_styles(name, {category: "bold #d73a49 bg:#ffffff"})``
    - ``Theme.from_pygments(SomePygmentsStyle)`` / ``get_theme("github-dark")``

Thread Safety:
    Theme and StyleEntry are immutable. The Pygments conversion memo used by
    get_theme() is guarded by a lock, so every thread receives the same Theme
    object for the same Pygments style (the class cache keys on identity).

"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any

from pygments.style import Style
from pygments.styles import get_style_by_name
from pygments.token import Token
from pygments.util import ClassNotFound

from pygments_tailwind.categories import (
    Background,
    Category,
    LineHighlight,
    LineNumbers,
    LineNumbersTable,
    ancestors,
)
from pygments_tailwind.errors import ThemeError
from pygments_tailwind.utils.logger import get_logger

logger = get_logger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Style-string words Pygments accepts that have no utility-class counterpart.
_IGNORED_WORDS = frozenset({"roman", "sans", "mono"})


@dataclass(frozen=True, slots=True)
class Colour:
    """An RGB colour.

    ``str(colour)`` is the canonical lowercase ``#rrggbb`` form used inside
    arbitrary-value utility classes.
    """

    red: int
    green: int
    blue: int

    @classmethod
    def parse(cls, value: str | None) -> Colour | None:
        """Parse ``#rgb``, ``#rrggbb`` or ``rrggbb``.

        Returns None for an empty or missing value.

        Raises:
            ThemeError: The value is not a hex colour.

        Examples:
            >>> str(Colour.parse("#D73A49"))
            '#d73a49'
            >>> str(Colour.parse("#fff"))
            '#ffffff'
            >>> Colour.parse("") is None
            True
        """
        if not value:
            return None
        digits = value.strip().removeprefix("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6 or not _HEX_DIGITS.issuperset(digits):
            raise ThemeError(f"invalid colour {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def __str__(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True, slots=True)
class StyleEntry:
    """Style of one token category.

    Flags are tri-state: None means unset (inherit), True means on and False
    is an explicit "off" (``nobold``). Only True ever produces a class.

    Attributes:
        colour: Foreground colour
        background: Background colour
        bold: Bold flag
        italic: Italic flag
        underline: Underline flag
        inherit: False stops the fallback walk at this entry (``noinherit``)

    """

    colour: Colour | None = None
    background: Colour | None = None
    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    inherit: bool = True

    @classmethod
    def parse(cls, text: str, *, theme: str | None = None) -> StyleEntry:
        """Parse a Pygments-style definition string.

        Examples:
            >>> entry = StyleEntry.parse("bold #d73a49 bg:#fff")
            >>> entry.bold, str(entry.colour), str(entry.background)
            (True, '#d73a49', '#ffffff')
        """
        values: dict[str, Any] = {}
        for word in text.split():
            if word in ("bold", "nobold"):
                values["bold"] = word == "bold"
            elif word in ("italic", "noitalic"):
                values["italic"] = word == "italic"
            elif word in ("underline", "nounderline"):
                values["underline"] = word == "underline"
            elif word == "noinherit":
                values["inherit"] = False
            elif word.startswith("bg:"):
                values["background"] = _colour(word[3:], theme)
            elif word.startswith("border:") or word in _IGNORED_WORDS:
                continue
            elif word.startswith("#") or _HEX_DIGITS.issuperset(word):
                values["colour"] = _colour(word, theme)
            else:
                raise ThemeError(f"unknown style word {word!r}", theme)
        return cls(**values)

    @property
    def is_empty(self) -> bool:
        """True when no field is set."""
        return (
            self.colour is None
            and self.background is None
            and self.bold is None
            and self.italic is None
            and self.underline is None
        )

    def inherit_from(self, *others: StyleEntry) -> StyleEntry:
        """Fill unset fields from ``others``, nearest first."""
        out = self
        for other in others:
            out = replace(
                out,
                colour=out.colour if out.colour is not None else other.colour,
                background=out.background if out.background is not None else other.background,
                bold=out.bold if out.bold is not None else other.bold,
                italic=out.italic if out.italic is not None else other.italic,
                underline=out.underline if out.underline is not None else other.underline,
            )
        return out

    def sub(self, other: StyleEntry) -> StyleEntry:
        """Unset every field that equals the same field of ``other``.

        Comparison is field by field: a foreground colour equal to the
        background entry's foreground is dropped even if the background
        colours differ.
        """
        return StyleEntry(
            colour=None if self.colour == other.colour else self.colour,
            background=None if self.background == other.background else self.background,
            bold=None if self.bold == other.bold else self.bold,
            italic=None if self.italic == other.italic else self.italic,
            underline=None if self.underline == other.underline else self.underline,
            inherit=self.inherit,
        )


EMPTY_ENTRY = StyleEntry()


def _colour(value: str, theme: str | None) -> Colour | None:
    try:
        return Colour.parse(value)
    except ThemeError as e:
        raise ThemeError(str(e), theme) from None


class Theme:
    """Immutable, named mapping of categories to style entries.

    Themes compare and hash by identity: two themes with identical entries
    are still different cache keys.
    """

    __slots__ = ("_name", "_entries")

    def __init__(self, name: str, entries: Mapping[Category, StyleEntry] | None = None) -> None:
        self._name = name
        self._entries: Mapping[Category, StyleEntry] = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_styles(cls, name: str, styles: Mapping[Category, str]) -> Theme:
        """Build a theme from Pygments-style definition strings.

        Example:
            >>> from pygments.token import Keyword
            >>> theme = Theme.from_styles("light", {
            ...     Background: "bg:#ffffff #24292e",
            ...     Keyword: "#d73a49",
            ... })
            >>> str(theme.get(Keyword).colour)
            '#d73a49'
        """
        return cls(name, {category: StyleEntry.parse(text, theme=name) for category, text in styles.items()})

    @classmethod
    def from_pygments(cls, style: type[Style]) -> Theme:
        """Adapt a Pygments Style class.

        Per-token styles come pre-resolved from Pygments. The page background
        is ``background_color`` combined with the root text colour; the
        highlight and line-number colours feed the structural categories.
        Colours that are not hex values (``inherit``, ``transparent``) are
        skipped.
        """
        name = getattr(style, "name", None) or style.__name__
        entries: dict[Category, StyleEntry] = {}
        for ttype, values in style:
            entry = StyleEntry(
                colour=_pygments_colour(values["color"], name, "color"),
                background=_pygments_colour(values["bgcolor"], name, "bgcolor"),
                bold=values["bold"] or None,
                italic=values["italic"] or None,
                underline=values["underline"] or None,
            )
            if not entry.is_empty:
                entries[ttype] = entry

        root = entries.get(Token, EMPTY_ENTRY)
        entries[Background] = StyleEntry(
            colour=root.colour,
            background=_pygments_colour(style.background_color, name, "background_color"),
        )
        highlight = _pygments_colour(style.highlight_color, name, "highlight_color")
        if highlight is not None:
            entries[LineHighlight] = StyleEntry(background=highlight)
        gutter = StyleEntry(
            colour=_pygments_colour(style.line_number_color, name, "line_number_color"),
            background=_pygments_colour(
                style.line_number_background_color, name, "line_number_background_color"
            ),
        )
        if not gutter.is_empty:
            entries[LineNumbers] = gutter
            entries[LineNumbersTable] = gutter
        return cls(name, entries)

    @property
    def name(self) -> str:
        return self._name

    def get(self, category: Category) -> StyleEntry:
        """Resolve the style entry for ``category``.

        Unset fields are filled from the nearest ancestor that sets them, then
        from Background. Unknown categories resolve to the inherited fields
        only, never an error.
        """
        entry = self._entries.get(category, EMPTY_ENTRY)
        if not entry.inherit:
            return entry
        for ancestor in ancestors(category):
            found = self._entries.get(ancestor)
            if found is None:
                continue
            entry = entry.inherit_from(found)
            if not found.inherit:
                return entry
        if category != Background:
            entry = entry.inherit_from(self._entries.get(Background, EMPTY_ENTRY))
        return entry

    def __contains__(self, category: object) -> bool:
        return category in self._entries

    def __iter__(self) -> Iterator[Category]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Theme({self._name!r}, {len(self._entries)} entries)"


def _pygments_colour(value: str | None, theme: str, field: str) -> Colour | None:
    try:
        return Colour.parse(value)
    except ThemeError:
        logger.debug("Theme %r: skipping non-hex %s %r", theme, field, value)
        return None


# Pygments style class -> adapted Theme
_pygments_themes: dict[type[Style], Theme] = {}
_pygments_lock = threading.Lock()


def get_theme(style: Theme | type[Style] | str) -> Theme:
    """Return a Theme for a Theme, a Pygments Style class or a style name.

    Pygments conversions are memoized, so repeated calls with the same style
    return the same Theme object.

    Raises:
        ThemeError: No Pygments style is registered under the given name.

    Example:
        >>> get_theme("github-dark") is get_theme("github-dark")
        True
    """
    if isinstance(style, Theme):
        return style
    if isinstance(style, str):
        try:
            style = get_style_by_name(style)
        except ClassNotFound:
            raise ThemeError(f"unknown Pygments style {style!r}") from None
    with _pygments_lock:
        theme = _pygments_themes.get(style)
        if theme is None:
            theme = Theme.from_pygments(style)
            _pygments_themes[style] = theme
        return theme


__all__ = [
    "Colour",
    "EMPTY_ENTRY",
    "StyleEntry",
    "Theme",
    "get_theme",
]
