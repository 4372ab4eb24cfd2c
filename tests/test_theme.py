"""Tests for colours, style entries and theme resolution."""

import pytest
from pygments.style import Style
from pygments.token import Comment, Keyword, Name, String, Token

from pygments_tailwind.categories import (
    Background,
    LineHighlight,
    LineNumbers,
    LineNumbersTable,
)
from pygments_tailwind.errors import ThemeError
from pygments_tailwind.theme import EMPTY_ENTRY, Colour, StyleEntry, Theme, get_theme


class TestColour:
    """Tests for Colour parsing and formatting."""

    def test_parse_long_form(self) -> None:
        """#rrggbb parses to its components."""
        assert Colour.parse("#d73a49") == Colour(0xD7, 0x3A, 0x49)

    def test_canonical_string_is_lowercase(self) -> None:
        """str() is lowercase #rrggbb."""
        assert str(Colour.parse("#D73A49")) == "#d73a49"

    def test_parse_short_form(self) -> None:
        """#rgb expands each digit."""
        assert str(Colour.parse("#0af")) == "#00aaff"

    def test_parse_without_hash(self) -> None:
        """Pygments reports colours without the leading #."""
        assert str(Colour.parse("24292e")) == "#24292e"

    def test_unset(self) -> None:
        """Empty and missing values mean unset."""
        assert Colour.parse("") is None
        assert Colour.parse(None) is None

    @pytest.mark.parametrize("value", ["#12345", "red", "#ggghhh", "inherit"])
    def test_invalid(self, value: str) -> None:
        """Non-hex values raise ThemeError."""
        with pytest.raises(ThemeError):
            Colour.parse(value)

    def test_equality(self) -> None:
        """Equal components compare equal regardless of spelling."""
        assert Colour.parse("#fff") == Colour.parse("ffffff")


class TestStyleEntryParse:
    """Tests for style-string parsing."""

    def test_full_definition(self) -> None:
        """All supported words map to fields."""
        entry = StyleEntry.parse("bold italic underline #d73a49 bg:#ffffff")
        assert entry == StyleEntry(
            colour=Colour.parse("#d73a49"),
            background=Colour.parse("#ffffff"),
            bold=True,
            italic=True,
            underline=True,
        )

    def test_negated_flags_are_explicit_false(self) -> None:
        """nobold/noitalic/nounderline set False, not None."""
        entry = StyleEntry.parse("nobold noitalic nounderline")
        assert entry.bold is False
        assert entry.italic is False
        assert entry.underline is False

    def test_noinherit(self) -> None:
        """noinherit clears the inherit flag."""
        assert StyleEntry.parse("noinherit").inherit is False

    def test_ignored_words(self) -> None:
        """Border and font family words are accepted and ignored."""
        assert StyleEntry.parse("border:#000000 mono sans roman") == EMPTY_ENTRY

    def test_unknown_word(self) -> None:
        """Unknown words raise ThemeError naming the theme."""
        with pytest.raises(ThemeError, match="mytheme"):
            StyleEntry.parse("blink", theme="mytheme")

    def test_empty_string(self) -> None:
        """An empty definition is an empty entry."""
        assert StyleEntry.parse("").is_empty


class TestStyleEntryOperations:
    """Tests for inherit_from() and sub()."""

    def test_inherit_fills_unset_fields_only(self) -> None:
        """Set fields win over inherited ones."""
        child = StyleEntry(colour=Colour.parse("#111111"))
        parent = StyleEntry(colour=Colour.parse("#222222"), bold=True)
        out = child.inherit_from(parent)
        assert str(out.colour) == "#111111"
        assert out.bold is True

    def test_inherit_keeps_explicit_false(self) -> None:
        """An explicit nobold is not overridden by a bold parent."""
        out = StyleEntry(bold=False).inherit_from(StyleEntry(bold=True))
        assert out.bold is False

    def test_sub_is_field_wise(self) -> None:
        """Only fields equal to the other entry are dropped."""
        entry = StyleEntry(colour=Colour.parse("#24292e"), background=Colour.parse("#eeeeee"), bold=True)
        bg = StyleEntry(colour=Colour.parse("#24292e"), background=Colour.parse("#ffffff"))
        out = entry.sub(bg)
        assert out.colour is None
        assert str(out.background) == "#eeeeee"
        assert out.bold is True

    def test_sub_drops_foreground_equal_to_background_entry_foreground(self) -> None:
        """A colour equal to the background's colour is treated as unset."""
        colour = Colour.parse("#ffffff")
        assert StyleEntry(colour=colour).sub(StyleEntry(colour=colour)).is_empty


class TestThemeGet:
    """Tests for hierarchical theme lookup."""

    def test_missing_category_falls_back_to_ancestor(self) -> None:
        """Comment.Single uses Comment's style."""
        theme = Theme.from_styles("t", {Comment: "italic #6a737d"})
        entry = theme.get(Comment.Single)
        assert entry.italic is True
        assert str(entry.colour) == "#6a737d"

    def test_fields_merge_across_levels(self) -> None:
        """Each field comes from the nearest level that sets it."""
        theme = Theme.from_styles("t", {Name: "bold #111111", Name.Builtin: "#222222"})
        entry = theme.get(Name.Builtin.Pseudo)
        assert str(entry.colour) == "#222222"
        assert entry.bold is True

    def test_background_is_inherited_last(self) -> None:
        """Unset fields fall back to Background after the ancestors."""
        theme = Theme.from_styles("t", {Background: "bg:#ffffff #24292e", Keyword: "#d73a49"})
        entry = theme.get(Keyword)
        assert str(entry.colour) == "#d73a49"
        assert str(entry.background) == "#ffffff"

    def test_unknown_category_defaults_to_empty(self) -> None:
        """Lookups never fail; an empty theme gives empty entries."""
        assert Theme("empty").get(String.Doc).is_empty

    def test_noinherit_stops_walk(self) -> None:
        """An entry marked noinherit ignores ancestors and Background."""
        theme = Theme.from_styles(
            "t",
            {Background: "bg:#ffffff", Keyword: "bold", Keyword.Type: "noinherit #123456"},
        )
        entry = theme.get(Keyword.Type)
        assert entry.bold is None
        assert entry.background is None

    def test_identity_semantics(self) -> None:
        """Identical definitions still give distinct themes."""
        a = Theme.from_styles("t", {Keyword: "#d73a49"})
        b = Theme.from_styles("t", {Keyword: "#d73a49"})
        assert a != b
        assert a == a

    def test_entries_are_read_only(self) -> None:
        """The theme does not expose a mutable mapping."""
        entries = {Keyword: StyleEntry(bold=True)}
        theme = Theme("t", entries)
        entries[Keyword] = StyleEntry()
        assert theme.get(Keyword).bold is True
        assert Keyword in theme
        assert len(theme) == 1


class SampleStyle(Style):
    name = "sample"
    background_color = "#ffffff"
    highlight_color = "#ffffcc"
    styles = {
        Token: "#24292e",
        Keyword: "bold #d73a49",
        Comment: "italic #6a737d",
    }


class GutterStyle(Style):
    background_color = "#000000"
    line_number_color = "#888888"
    line_number_background_color = "#111111"
    styles = {Token: "#eeeeee"}


class TestFromPygments:
    """Tests for adapting Pygments styles."""

    def test_background_entry(self) -> None:
        """Background combines background_color and the root text colour."""
        theme = Theme.from_pygments(SampleStyle)
        entry = theme.get(Background)
        assert str(entry.colour) == "#24292e"
        assert str(entry.background) == "#ffffff"

    def test_token_styles(self) -> None:
        """Resolved Pygments styles carry over, including inheritance."""
        theme = Theme.from_pygments(SampleStyle)
        entry = theme.get(Keyword.Declaration)
        assert str(entry.colour) == "#d73a49"
        assert entry.bold is True

    def test_highlight_colour(self) -> None:
        """highlight_color feeds LineHighlight."""
        theme = Theme.from_pygments(SampleStyle)
        assert str(theme.get(LineHighlight).background) == "#ffffcc"

    def test_non_hex_gutter_colours_are_skipped(self) -> None:
        """Pygments' default 'inherit'/'transparent' gutter colours are ignored."""
        theme = Theme.from_pygments(SampleStyle)
        assert LineNumbers not in theme

    def test_gutter_colours(self) -> None:
        """Hex gutter colours apply to both gutter categories."""
        theme = Theme.from_pygments(GutterStyle)
        for category in (LineNumbers, LineNumbersTable):
            entry = theme.get(category)
            assert str(entry.colour) == "#888888"
            assert str(entry.background) == "#111111"

    def test_name(self) -> None:
        """The theme is named after the style."""
        assert Theme.from_pygments(SampleStyle).name == "sample"


class TestGetTheme:
    """Tests for get_theme()."""

    def test_theme_passes_through(self) -> None:
        """A Theme is returned as is."""
        theme = Theme("t")
        assert get_theme(theme) is theme

    def test_style_class_is_memoized(self) -> None:
        """The same Pygments style always yields the same Theme object."""
        assert get_theme(SampleStyle) is get_theme(SampleStyle)

    def test_style_name(self) -> None:
        """Registered Pygments style names resolve and memoize."""
        theme = get_theme("github-dark")
        assert theme is get_theme("github-dark")
        assert theme.get(Background).background is not None

    def test_unknown_style_name(self) -> None:
        """Unknown names raise ThemeError."""
        with pytest.raises(ThemeError, match="no-such-style"):
            get_theme("no-such-style")
