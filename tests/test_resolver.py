"""Tests for rule resolution."""

from style_engine.css import (Color, Declaration, Keyword, Length, Rule, SimpleSelector,
                              Stylesheet, Unit)
from style_engine.dom import ElementData
from style_engine.style import match_rule, matching_rules, specified_values


def rule(selectors, **declarations):
    return Rule(selectors, [Declaration(name.replace("_", "-"), value)
                            for name, value in declarations.items()])


def color_rule(selector, keyword):
    return rule([selector], color=Keyword(keyword))


TAG_DIV = SimpleSelector(tag_name="div")
ID_MAIN = SimpleSelector(id="main")
CLASS_BOX = SimpleSelector(classes={"box"})


class TestMatchRule:
    def test_no_selector_matches(self):
        elem = ElementData("p")
        assert match_rule(elem, rule([TAG_DIV, ID_MAIN])) is None

    def test_returns_highest_matching_specificity(self):
        elem = ElementData("div", {"id": "main"})
        assert match_rule(elem, rule([TAG_DIV, ID_MAIN, CLASS_BOX])) == (1, 0, 0)

    def test_ignores_non_matching_more_specific_selector(self):
        elem = ElementData("div")
        assert match_rule(elem, rule([ID_MAIN, TAG_DIV])) == (0, 0, 1)


class TestMatchingRules:
    def test_keeps_stylesheet_order(self):
        first = color_rule(ID_MAIN, "red")
        second = color_rule(TAG_DIV, "black")
        sheet = Stylesheet([first, second, color_rule(SimpleSelector(tag_name="p"), "blue")])

        result = matching_rules(ElementData("div", {"id": "main"}), sheet)

        assert result == [((1, 0, 0), first), ((0, 0, 1), second)]


class TestSpecifiedValues:
    def test_no_rules(self):
        assert specified_values(ElementData("div"), Stylesheet()) == {}

    def test_no_matching_rules(self):
        sheet = Stylesheet([color_rule(SimpleSelector(tag_name="p"), "red")])
        assert specified_values(ElementData("div"), sheet) == {}

    def test_id_beats_later_class(self):
        sheet = Stylesheet([
            color_rule(TAG_DIV, "black"),
            color_rule(ID_MAIN, "red"),
            color_rule(CLASS_BOX, "blue"),
        ])
        elem = ElementData("div", {"id": "main", "class": "box"})

        assert specified_values(elem, sheet)["color"] == Keyword("red")

    def test_equal_specificity_later_rule_wins(self):
        sheet = Stylesheet([
            color_rule(SimpleSelector(classes={"a"}), "green"),
            color_rule(SimpleSelector(classes={"b"}), "yellow"),
        ])
        elem = ElementData("p", {"class": "a b"})

        assert specified_values(elem, sheet)["color"] == Keyword("yellow")

    def test_more_specific_earlier_rule_beats_later_rule(self):
        sheet = Stylesheet([
            color_rule(SimpleSelector(classes={"a", "b"}), "green"),
            color_rule(SimpleSelector(classes={"b"}), "yellow"),
        ])
        elem = ElementData("p", {"class": "a b"})

        assert specified_values(elem, sheet)["color"] == Keyword("green")

    def test_properties_from_different_rules_are_merged(self):
        sheet = Stylesheet([
            rule([TAG_DIV], color=Keyword("black"), width=Length(10, Unit.PX)),
            rule([CLASS_BOX], color=Color(0, 0, 255)),
        ])
        elem = ElementData("div", {"class": "box"})

        assert specified_values(elem, sheet) == {
            "color": Color(0, 0, 255),
            "width": Length(10, Unit.PX),
        }

    def test_later_declaration_in_same_rule_wins(self):
        sheet = Stylesheet([Rule([TAG_DIV], [
            Declaration("color", Keyword("red")),
            Declaration("color", Keyword("blue")),
        ])])
        assert specified_values(ElementData("div"), sheet) == {"color": Keyword("blue")}

    def test_rule_ranked_by_best_matching_selector(self):
        # The id selector of the first rule matches, so it outranks the class rule
        sheet = Stylesheet([
            color_rule(TAG_DIV, "unused"),
            rule([TAG_DIV, ID_MAIN], color=Keyword("red")),
            color_rule(CLASS_BOX, "blue"),
        ])
        elem = ElementData("div", {"id": "main", "class": "box"})

        assert specified_values(elem, sheet)["color"] == Keyword("red")

    def test_universal_selector_applies(self):
        sheet = Stylesheet([rule([SimpleSelector()], display=Keyword("block"))])
        assert specified_values(ElementData("span"), sheet) == {"display": Keyword("block")}

    def test_returns_fresh_map(self):
        sheet = Stylesheet([color_rule(TAG_DIV, "red")])
        first = specified_values(ElementData("div"), sheet)
        first["color"] = Keyword("blue")

        assert specified_values(ElementData("div"), sheet)["color"] == Keyword("red")
