"""Formatter configuration.

FormatterConfig is resolved once, when a formatter or renderer is built, and
never changes afterwards. It can be created directly, from a plain dict
(framework integration), or from Pygments-style formatter options.

Usage:
    config = FormatterConfig(line_numbers=True, highlight_ranges=[(3, 5)])

    # Pygments option spelling
    config = FormatterConfig.from_options({"linenos": "inline", "hl_lines": "3 4 5"})

Thread Safety:
    Frozen dataclass; safe to share between threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from pygments.util import get_bool_opt, get_int_opt, get_list_opt

from pygments_tailwind.errors import ConfigError
from pygments_tailwind.wrappers import (
    DEFAULT_PRE_WRAPPER,
    INLINE_CODE_WRAPPER,
    NOP_PRE_WRAPPER,
    PreWrapper,
)

HighlightRange = tuple[int, int]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable formatter configuration.

    Attributes:
        standalone: Wrap output in a minimal HTML document with a styled body
        class_prefix: String prepended to every generated utility class
        tab_width: Tab size; anything but 8 (or 0) emits a tab-size class
        prevent_surrounding_pre: Omit the block markup and per-line spans
        inline_code: Wrap content in a ``<code>`` element, no per-line spans
        pre_wrapper: Caller-supplied block wrapper (wins over the two above)
        wrap_long_lines: Add whitespace-wrapping classes to the block wrapper
        line_numbers: Render a number for every line
        line_numbers_in_table: Put the numbers in their own table column
        linkable_line_numbers: Give numbers an id and wrap them in a link
        line_numbers_id_prefix: Prefix of the line-number ids
        highlight_ranges: Inclusive 1-based line ranges to mark, sorted by start
        base_line_number: Number of the first line

    """

    standalone: bool = False
    class_prefix: str = ""
    tab_width: int = 8
    prevent_surrounding_pre: bool = False
    inline_code: bool = False
    pre_wrapper: PreWrapper | None = None
    wrap_long_lines: bool = False
    line_numbers: bool = False
    line_numbers_in_table: bool = False
    linkable_line_numbers: bool = False
    line_numbers_id_prefix: str = ""
    highlight_ranges: tuple[HighlightRange, ...] = ()
    base_line_number: int = 1

    def __post_init__(self) -> None:
        if self.tab_width < 0:
            raise ConfigError("tab_width", f"must not be negative, got {self.tab_width}")
        ranges = [_check_range(value) for value in _option_ranges(self.highlight_ranges)]
        ranges.sort(key=lambda r: r[0])
        object.__setattr__(self, "highlight_ranges", tuple(ranges))

    @property
    def wrapper(self) -> PreWrapper:
        """The effective block wrapper."""
        if self.pre_wrapper is not None:
            return self.pre_wrapper
        if self.inline_code:
            return INLINE_CODE_WRAPPER
        if self.prevent_surrounding_pre:
            return NOP_PRE_WRAPPER
        return DEFAULT_PRE_WRAPPER

    @property
    def line_spans(self) -> bool:
        """Whether each line gets its own Line/CodeLine spans."""
        return not (self.prevent_surrounding_pre or self.inline_code)

    @property
    def numbers_in_table(self) -> bool:
        return self.line_numbers and self.line_numbers_in_table

    @property
    def class_options(self) -> tuple[str, int, bool, bool]:
        """The options a class mapping depends on.

        Configurations with equal class_options can share one ClassCache.
        """
        return (self.class_prefix, self.tab_width, self.wrap_long_lines, bool(self.highlight_ranges))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> FormatterConfig:
        """Create a FormatterConfig from a dictionary.

        Only keys that are FormatterConfig fields are used; unknown keys are
        silently ignored.

        Example:
            >>> config = FormatterConfig.from_dict({
            ...     "line_numbers": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.line_numbers
            True
        """
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> FormatterConfig:
        """Create a FormatterConfig from Pygments formatter options.

        Recognised options: ``full`` / ``standalone``, ``classprefix``,
        ``tabsize``, ``nowrap``, ``inline``, ``wrapper``, ``wraplonglines``,
        ``linenos`` (``True`` / ``"table"`` or ``"inline"``), ``lineanchors``,
        ``hl_lines``, ``highlight_ranges`` (pairs, or text such as
        ``"3-4 9"``) and ``linenostart``.

        Raises:
            pygments.util.OptionError: An option has the wrong type.
            ConfigError: A line number or range is malformed.
        """
        linenos = options.get("linenos", False)
        if linenos == "inline":
            line_numbers, in_table = True, False
        elif linenos == "table":
            line_numbers, in_table = True, True
        else:
            line_numbers = get_bool_opt(options, "linenos", False)
            in_table = line_numbers

        anchors = options.get("lineanchors") or ""
        hl_lines = [_int_line(v) for v in get_list_opt(options, "hl_lines", [])]
        ranges = [*_option_ranges(options.get("highlight_ranges", ())), *collapse_lines(hl_lines)]

        return cls(
            standalone=get_bool_opt(options, "full", get_bool_opt(options, "standalone", False)),
            class_prefix=options.get("classprefix", ""),
            tab_width=get_int_opt(options, "tabsize", 8),
            prevent_surrounding_pre=get_bool_opt(options, "nowrap", False),
            inline_code=get_bool_opt(options, "inline", False),
            pre_wrapper=options.get("wrapper"),
            wrap_long_lines=get_bool_opt(options, "wraplonglines", False),
            line_numbers=line_numbers,
            line_numbers_in_table=in_table,
            linkable_line_numbers=bool(anchors),
            line_numbers_id_prefix=anchors,
            highlight_ranges=tuple(ranges),
            base_line_number=get_int_opt(options, "linenostart", 1),
        )


def _int_line(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError("hl_lines", f"not a line number: {value!r}") from None


def _check_range(value: Any) -> HighlightRange:
    if isinstance(value, str):
        raise ConfigError("highlight_ranges", f"not a (start, end) pair: {value!r}")
    try:
        start, end = value
        start, end = int(start), int(end)
    except (TypeError, ValueError):
        raise ConfigError("highlight_ranges", f"not a (start, end) pair: {value!r}") from None
    if start < 1 or end < start:
        raise ConfigError("highlight_ranges", f"invalid range [{start}, {end}]")
    return start, end


def _option_ranges(value: Any) -> list[Any]:
    """Read ``highlight_ranges`` as pairs or as text such as ``"3-4 9"``."""
    if isinstance(value, str):
        return [_parse_range(word) for word in value.replace(",", " ").split()]
    try:
        return list(value)
    except TypeError:
        raise ConfigError("highlight_ranges", f"expected a list of ranges, got {value!r}") from None


def _parse_range(word: str) -> HighlightRange:
    start, sep, end = word.partition("-")
    try:
        return int(start), int(end if sep else start)
    except ValueError:
        raise ConfigError("highlight_ranges", f"not a line range: {word!r}") from None


def collapse_lines(lines: Iterable[int]) -> list[HighlightRange]:
    """Collapse individual line numbers into inclusive ranges.

    Examples:
        >>> collapse_lines([5, 3, 4, 9])
        [(3, 5), (9, 9)]
    """
    ranges: list[HighlightRange] = []
    for line in sorted(set(lines)):
        if ranges and line == ranges[-1][1] + 1:
            ranges[-1] = (ranges[-1][0], line)
        else:
            ranges.append((line, line))
    return ranges


__all__ = [
    "FormatterConfig",
    "HighlightRange",
    "collapse_lines",
]
