"""Tests for the CSS front end."""

import pytest

from style_engine.css import (Color, CSSParseError, Declaration, Keyword, Length,
                              SimpleSelector, Unit, parse_css)


def declarations_of(source):
    sheet = parse_css(f"div {{ {source} }}")
    assert len(sheet.rules) == 1
    return {d.name: d.value for d in sheet.rules[0].declarations}


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    @pytest.mark.parametrize("text, expected", [
        ("*", SimpleSelector()),
        ("div", SimpleSelector(tag_name="div")),
        ("#main", SimpleSelector(id="main")),
        (".box", SimpleSelector(classes={"box"})),
        (".a.b", SimpleSelector(classes={"a", "b"})),
        ("div#main.box", SimpleSelector(tag_name="div", id="main", classes={"box"})),
        ("*.note", SimpleSelector(classes={"note"})),
        ("DIV", SimpleSelector(tag_name="div")),
    ])
    def test_simple_selector(self, text, expected):
        sheet = parse_css(f"{text} {{ color: red }}")
        assert sheet.rules[0].selectors == (expected,)

    def test_selector_list_sorted_most_specific_first(self):
        sheet = parse_css("h1, h2.title, #x { margin: 10px }")
        assert sheet.rules[0].selectors == (
            SimpleSelector(id="x"),
            SimpleSelector(tag_name="h2", classes={"title"}),
            SimpleSelector(tag_name="h1"),
        )

    @pytest.mark.parametrize("text", [
        "div p",
        "div > p",
        "a:hover",
        "input[type=text]",
        "h1, div p",
        "div,",
        "#a#b",
    ])
    def test_unsupported_selector_skips_rule(self, text):
        sheet = parse_css(f"{text} {{ color: red }} .ok {{ color: blue }}")
        assert len(sheet.rules) == 1
        assert sheet.rules[0].selectors == (SimpleSelector(classes={"ok"}),)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestRules:
    def test_rules_keep_source_order(self):
        sheet = parse_css("div { color: black } #main { color: red } .box { color: blue }")
        assert [r.selectors[0] for r in sheet.rules] == [
            SimpleSelector(tag_name="div"),
            SimpleSelector(id="main"),
            SimpleSelector(classes={"box"}),
        ]

    def test_declarations_keep_source_order(self):
        sheet = parse_css("p { width: 1px; Color: red; width: 2px }")
        assert [d.name for d in sheet.rules[0].declarations] == ["width", "color", "width"]

    def test_empty_source(self):
        assert len(parse_css("")) == 0

    def test_comments_ignored(self):
        sheet = parse_css("/* header */ p { /* inner */ display: block }")
        assert sheet.rules[0].declarations == (Declaration("display", Keyword("block")),)

    def test_at_rules_skipped(self):
        sheet = parse_css("@media screen { div { color: red } } @import url(x.css); p { color: red }")
        assert len(sheet.rules) == 1
        assert sheet.rules[0].selectors == (SimpleSelector(tag_name="p"),)

    def test_rule_with_empty_block(self):
        sheet = parse_css(".other.box { }")
        assert sheet.rules[0].declarations == ()

    def test_non_string_input(self):
        with pytest.raises(CSSParseError):
            parse_css(b"div { color: red }")

    def test_error_is_value_error(self):
        assert issubclass(CSSParseError, ValueError)


# ---------------------------------------------------------------------------
# Declarations and values
# ---------------------------------------------------------------------------


class TestValues:
    def test_lengths(self):
        values = declarations_of("width: 12px; font-size: 1.5em; line-height: 2REM; margin: 0")
        assert values == {
            "width": Length(12, Unit.PX),
            "font-size": Length(1.5, Unit.EM),
            "line-height": Length(2, Unit.REM),
            "margin": Length(0, Unit.PX),
        }

    def test_keywords_are_lower_cased(self):
        assert declarations_of("display: Block")["display"] == Keyword("block")

    def test_named_color(self):
        assert declarations_of("color: red")["color"] == Color(255, 0, 0, 255)

    def test_hex_colors(self):
        values = declarations_of("color: #0f0; background-color: #336699")
        assert values["color"] == Color(0, 255, 0)
        assert values["background-color"] == Color(0x33, 0x66, 0x99)

    def test_rgb_functions(self):
        values = declarations_of("color: rgb(0, 128, 255); background-color: rgba(255, 0, 0, 0.5)")
        assert values["color"] == Color(0, 128, 255, 255)
        assert values["background-color"] == Color(255, 0, 0, 128)

    def test_transparent(self):
        assert declarations_of("color: transparent")["color"] == Color(0, 0, 0, 0)

    def test_current_color_is_keyword(self):
        assert declarations_of("color: currentColor")["color"] == Keyword("currentcolor")

    def test_compound_value_kept_as_text(self):
        assert declarations_of("border: 1px solid red")["border"] == Keyword("1px solid red")

    def test_unsupported_unit_kept_as_text(self):
        assert declarations_of("width: 50%")["width"] == Keyword("50%")

    def test_important_flag_ignored(self):
        assert declarations_of("color: red !important")["color"] == Color(255, 0, 0)

    def test_invalid_declaration_skipped(self):
        assert declarations_of("color red; width: 5px") == {"width": Length(5, Unit.PX)}

    def test_empty_value_skipped(self):
        assert declarations_of("color: ; width: 5px") == {"width": Length(5, Unit.PX)}
