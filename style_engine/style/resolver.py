"""
Rule resolution: which declarations apply to an element.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..css.selector import Specificity, matches, specificity
from ..css.stylesheet import Rule, Stylesheet
from ..css.values import Value
from ..dom.node import ElementData

logger = logging.getLogger(__name__)

PropertyMap = Dict[str, Value]

MatchedRule = Tuple[Specificity, Rule]


def match_rule(element: ElementData, rule: Rule) -> Optional[Specificity]:
    """
    Check if any selector of a rule matches the element.

    Args:
        element: The element to check
        rule: The rule whose selectors are tried

    Returns:
        Specificity of the most specific matching selector, or None if no match
    """
    max_specificity = None

    for selector in rule.selectors:
        if matches(element, selector):
            selector_specificity = specificity(selector)
            if max_specificity is None or selector_specificity > max_specificity:
                max_specificity = selector_specificity

    return max_specificity


def matching_rules(element: ElementData, stylesheet: Stylesheet) -> List[MatchedRule]:
    """Find the rules that match an element, in stylesheet order."""
    matched = []
    for rule in stylesheet.rules:
        rule_specificity = match_rule(element, rule)
        if rule_specificity is not None:
            matched.append((rule_specificity, rule))
    return matched


def specified_values(element: ElementData, stylesheet: Stylesheet) -> PropertyMap:
    """
    Resolve the property values that apply to an element.

    Matching rules are applied from lowest to highest specificity; the sort is
    stable, so among equally specific rules the one later in the stylesheet is
    applied last and wins.

    Args:
        element: The element to resolve
        stylesheet: The stylesheet to take rules from

    Returns:
        Mapping from property name to the winning value
    """
    values: PropertyMap = {}

    rules = matching_rules(element, stylesheet)
    rules.sort(key=lambda matched: matched[0])

    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    if rules:
        logger.debug(f"<{element.tag_name}> matched {len(rules)} rules, "
                     f"{len(values)} properties")
    return values


resolve = specified_values
