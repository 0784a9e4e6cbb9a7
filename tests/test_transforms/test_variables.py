"""Tests for the variable table."""

import pytest

from stylepress.transforms.variables import (
    VariableSubstitutionTransform,
    VariableTable,
    sanitize_name,
    strip_tags,
)


# ---------------------------------------------------------------------------
# Name and value cleaning
# ---------------------------------------------------------------------------


class TestCleaning:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("blue", "blue"),
            ("font_family", "font_family"),
            ("col-width", "col-width"),
            ("@blue", "blue"),
            ("[blue]", "blue"),
            ("bl ue!", "blue"),
        ],
    )
    def test_sanitize_name(self, raw, expected):
        assert sanitize_name(raw) == expected

    def test_strip_tags(self):
        assert strip_tags("<b>#00F</b>") == "#00F"

    def test_strip_unclosed_tag(self):
        assert strip_tags("red<script") == "red"


# ---------------------------------------------------------------------------
# bind
# ---------------------------------------------------------------------------


class TestBind:
    def test_default_prefix(self):
        table = VariableTable().bind("blue", "#00F")
        assert table.tokens() == {"@blue": "#00F"}

    def test_value_is_trimmed_and_stripped(self):
        table = VariableTable().bind("blue", "  <em>#00F</em>  ")
        assert table.get("blue") == "#00F"

    def test_name_is_sanitized(self):
        table = VariableTable().bind("@bl ue", "#00F")
        assert "@blue" in table.tokens()

    def test_bind_mapping(self):
        table = VariableTable().bind({"img": "/images/", "blue": "#0000FF"})
        assert table.tokens() == {"@img": "/images/", "@blue": "#0000FF"}

    def test_last_write_wins(self):
        table = VariableTable().bind("blue", "#00F").bind({"blue": "#0000FF"})
        assert table.get("blue") == "#0000FF"
        assert len(table) == 1

    @pytest.mark.parametrize("name, value", [("", "#00F"), ("!!", "#00F"), ("blue", ""), ("blue", None), ("blue", "<b></b>")])
    def test_empty_name_or_value_ignored(self, name, value):
        table = VariableTable().bind(name, value)
        assert len(table) == 0

    def test_bind_is_chainable(self):
        table = VariableTable()
        assert table.bind("a", "1") is table

    def test_contains(self):
        table = VariableTable().bind("blue", "#00F")
        assert "blue" in table
        assert "red" not in table


# ---------------------------------------------------------------------------
# Delimiters
# ---------------------------------------------------------------------------


class TestDelimiters:
    def test_bracket_pair(self):
        table = VariableTable().set_delimiters("[", "]").bind("blue", "#00F")
        assert table.tokens() == {"[blue]": "#00F"}

    def test_rewraps_existing_bindings(self):
        table = VariableTable().bind("blue", "#00F").set_delimiters("{{", "}}")
        assert table.substitute("color: {{blue}};") == "color: #00F;"

    def test_disallowed_characters_dropped(self):
        table = VariableTable().set_delimiters("$[", "]$")
        assert table.delimiters == ("[", "]")

    def test_empty_side_keeps_previous(self):
        table = VariableTable("[", "]").set_delimiters("<", "")
        assert table.delimiters == ("<", "]")


# ---------------------------------------------------------------------------
# substitute
# ---------------------------------------------------------------------------


class TestSubstitute:
    def test_replaces_every_occurrence(self):
        table = VariableTable().bind("blue", "#00F")
        css = "a { color: @blue; } b { border-color: @blue; }"
        assert table.substitute(css) == "a { color: #00F; } b { border-color: #00F; }"

    def test_unbound_placeholder_untouched(self):
        table = VariableTable().bind("blue", "#00F")
        assert table.substitute("color: @red;") == "color: @red;"

    def test_case_sensitive(self):
        table = VariableTable().bind("blue", "#00F")
        assert table.substitute("@Blue @blue") == "@Blue #00F"

    def test_longer_token_wins_over_prefix(self):
        table = VariableTable().bind({"blue": "#00F", "blueDark": "#003"})
        assert table.substitute("@blueDark @blue") == "#003 #00F"

    def test_values_not_rescanned(self):
        table = VariableTable().bind({"a": "@b", "b": "x"})
        assert table.substitute("@a") == "@b"

    def test_regex_characters_are_literal(self):
        table = VariableTable().set_delimiters("[", "]").bind("img", "/images")
        assert table.substitute("url([img]/bg.png) [i]") == "url(/images/bg.png) [i]"

    def test_no_bindings_returns_input(self):
        assert VariableTable().substitute("@blue") == "@blue"

    def test_transform_wrapper(self):
        table = VariableTable().bind("blue", "#00F")
        assert VariableSubstitutionTransform(table).apply("@blue") == "#00F"
