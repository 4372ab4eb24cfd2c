"""Style differ: derives utility classes from a light/dark theme pair.

For every category the differ emits three groups of classes, in order:

1. structural classes that do not depend on the theme (``flex`` on lines,
   gutter spacing, table resets)
2. light classes, one per field set in the light entry
3. dark-variant classes: ``dark:``-prefixed equivalents of the dark entry's
   fields, plus a reset class for each field the light entry sets and the
   dark entry does not (``dark:text-[inherit]``, ``dark:bg-transparent``,
   ``dark:font-normal``, ``dark:not-italic``, ``dark:no-underline``)

Every category except Background is first reduced against Background, so
a keyword does not repeat the page's text and background colours.

Example:
    >>> from pygments.token import Keyword
    >>> from pygments_tailwind.theme import Theme
    >>> light = Theme.from_styles("light", {Keyword: "bold #d73a49"})
    >>> dark = Theme.from_styles("dark", {Keyword: "#ff7b72"})
    >>> str(compute_classes(Keyword, light, dark))
    'text-[#d73a49] font-bold dark:text-[#ff7b72] dark:font-normal'

Thread Safety:
    Pure functions over immutable inputs.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from pygments_tailwind.categories import (
    STANDARD_CATEGORIES,
    Background,
    Category,
    Line,
    LineLink,
    LineNumbers,
    LineNumbersTable,
    LineTable,
    LineTableTD,
    PreWrapper,
)
from pygments_tailwind.theme import StyleEntry, Theme
from pygments_tailwind.utils.text import join_classes

if TYPE_CHECKING:
    from pygments_tailwind.config import FormatterConfig

DEFAULT_TAB_WIDTH = 8

_GUTTER_CLASSES = ("whitespace-pre", "select-none", "mr-[0.4em]", "px-[0.4em]")

_STRUCTURAL_CLASSES: dict[Category, tuple[str, ...]] = {
    Line: ("flex",),
    LineNumbers: _GUTTER_CLASSES,
    LineNumbersTable: _GUTTER_CLASSES,
    LineTable: ("border-separate", "border-spacing-0", "p-0", "m-0", "border-0"),
    LineTableTD: ("align-top", "p-0", "m-0", "border-0"),
    LineLink: ("outline-none", "no-underline", "text-[inherit]"),
}

# (field, light/dark class, dark reset class) in emission order
_FLAG_CLASSES = (
    ("bold", "font-bold", "font-normal"),
    ("italic", "italic", "not-italic"),
    ("underline", "underline", "no-underline"),
)


def prefix_class(prefix: str, cls: str) -> str:
    """Prepend the configured class prefix."""
    return f"{prefix}{cls}" if prefix else cls


def dark_class(prefix: str, cls: str) -> str:
    """Build a dark-variant class; the variant precedes the prefix.

    Examples:
        >>> dark_class("tw-", "italic")
        'dark:tw-italic'
    """
    return "dark:" + prefix_class(prefix, cls)


@dataclass(frozen=True, slots=True)
class ClassSet:
    """Ordered utility classes for one category."""

    structural: tuple[str, ...] = ()
    light: tuple[str, ...] = ()
    dark: tuple[str, ...] = ()

    @property
    def classes(self) -> tuple[str, ...]:
        return self.structural + self.light + self.dark

    def __str__(self) -> str:
        return " ".join(self.classes)


def structural_classes(
    category: Category,
    *,
    wrap_long_lines: bool = False,
    highlight_lines: bool = False,
) -> tuple[str, ...]:
    """Theme-independent classes for structural categories (unprefixed)."""
    if category == PreWrapper:
        classes: list[str] = []
        if highlight_lines:
            classes.append("grid")
        if wrap_long_lines:
            classes.extend(("whitespace-pre-wrap", "break-words"))
        return tuple(classes)
    return _STRUCTURAL_CLASSES.get(category, ())


def _entry_values(entry: StyleEntry) -> dict[str, str]:
    # field -> unprefixed class, set fields only
    values: dict[str, str] = {}
    if entry.colour is not None:
        values["colour"] = f"text-[{entry.colour}]"
    if entry.background is not None:
        values["background"] = f"bg-[{entry.background}]"
    for field, cls, _ in _FLAG_CLASSES:
        if getattr(entry, field) is True:
            values[field] = cls
    return values


def _dark_variants(light: dict[str, str], dark: dict[str, str], prefix: str) -> list[str]:
    resets = {
        "colour": "text-[inherit]",
        "background": "bg-transparent",
        **{field: reset for field, _, reset in _FLAG_CLASSES},
    }
    out: list[str] = []
    for field, reset in resets.items():
        if field in dark:
            out.append(dark_class(prefix, dark[field]))
        elif field in light:
            out.append(dark_class(prefix, reset))
    return out


def compute_classes(
    category: Category,
    light: Theme,
    dark: Theme,
    *,
    prefix: str = "",
    wrap_long_lines: bool = False,
    highlight_lines: bool = False,
) -> ClassSet:
    """Compute the utility classes for one category.

    Args:
        category: Token category or structural pseudo-category
        light: Theme applied unconditionally
        dark: Theme applied under a ``dark:`` ancestor
        prefix: Class prefix (e.g. ``"tw-"``)
        wrap_long_lines: Add wrapping classes to the block wrapper
        highlight_lines: Highlight ranges are configured (wrapper becomes a grid)

    Returns:
        ClassSet with structural, light and dark-variant classes
    """
    light_entry = light.get(category)
    dark_entry = dark.get(category)
    if category != Background:
        light_entry = light_entry.sub(light.get(Background))
        dark_entry = dark_entry.sub(dark.get(Background))

    light_values = _entry_values(light_entry)
    dark_values = _entry_values(dark_entry)

    structural = structural_classes(
        category, wrap_long_lines=wrap_long_lines, highlight_lines=highlight_lines
    )
    return ClassSet(
        structural=tuple(prefix_class(prefix, cls) for cls in structural),
        light=tuple(prefix_class(prefix, cls) for cls in light_values.values()),
        dark=tuple(_dark_variants(light_values, dark_values, prefix)),
    )


class ClassMapping(Mapping[Category, str]):
    """Read-only category -> class attribute value mapping.

    Built once per theme pair and shared across renders.
    """

    __slots__ = ("_classes",)

    def __init__(self, classes: Mapping[Category, str]) -> None:
        self._classes: Mapping[Category, str] = MappingProxyType(dict(classes))

    def __getitem__(self, category: Category) -> str:
        return self._classes[category]

    def __iter__(self) -> Iterator[Category]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def classes_for(self, category: Category) -> str:
        """Classes for a token, walking up to the nearest mapped ancestor.

        Lexers may emit token types outside the standard set; those use the
        classes of their closest standard ancestor.
        """
        while category is not None:
            cls = self._classes.get(category)
            if cls is not None:
                return cls
            category = category.parent
        return ""


def build_class_mapping(light: Theme, dark: Theme, config: FormatterConfig) -> ClassMapping:
    """Compute classes for every standard category of a theme pair.

    The tab-size class (when the tab width is not the default) is appended
    to Background, and the block wrapper carries Background's classes after
    its own.
    """
    prefix = config.class_prefix
    classes: dict[Category, str] = {}
    for category in STANDARD_CATEGORIES:
        classes[category] = str(
            compute_classes(
                category,
                light,
                dark,
                prefix=prefix,
                wrap_long_lines=config.wrap_long_lines,
                highlight_lines=bool(config.highlight_ranges),
            )
        )
    if config.tab_width not in (0, DEFAULT_TAB_WIDTH):
        tab_class = prefix_class(prefix, f"[tab-size:{config.tab_width}]")
        classes[Background] = join_classes(classes[Background], tab_class)
    classes[PreWrapper] = join_classes(classes[PreWrapper], classes[Background])
    return ClassMapping(classes)


__all__ = [
    "ClassMapping",
    "ClassSet",
    "DEFAULT_TAB_WIDTH",
    "build_class_mapping",
    "compute_classes",
    "dark_class",
    "prefix_class",
    "structural_classes",
]
