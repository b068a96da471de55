"""
CSS front end.
Turns CSS source text into a Stylesheet using tinycss2 for tokenization.
"""

import logging
from typing import List, Optional

import tinycss2
from tinycss2.color3 import parse_color

from .selector import SimpleSelector, specificity
from .stylesheet import Rule, Stylesheet
from .values import Color, Declaration, Keyword, Length, Unit, Value

logger = logging.getLogger(__name__)

LENGTH_UNITS = {unit.value: unit for unit in Unit}


class CSSParseError(ValueError):
    """Raised when the CSS front end is given something that is not CSS text."""


def parse_css(source: str) -> Stylesheet:
    """
    Parse CSS source into a Stylesheet.

    Parsing is tolerant: rules with unsupported selectors, at-rules and
    malformed declarations are logged and skipped.

    Args:
        source: CSS content to parse

    Returns:
        Parsed Stylesheet

    Raises:
        CSSParseError: If source is not a string
    """
    if not isinstance(source, str):
        raise CSSParseError(f"CSS source must be str, not {type(source).__name__}")

    rules = []
    for node in tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True):
        if node.type == 'qualified-rule':
            rule = _parse_rule(node)
            if rule is not None:
                rules.append(rule)
        elif node.type == 'at-rule':
            logger.debug(f"Skipping unsupported @{node.lower_at_keyword} rule "
                         f"at line {node.source_line}")
        elif node.type == 'error':
            logger.warning(f"CSS parse error at line {node.source_line}, "
                           f"column {node.source_column}: {node.message}")

    logger.debug(f"Parsed stylesheet with {len(rules)} rules")
    return Stylesheet(tuple(rules))


def _parse_rule(node) -> Optional[Rule]:
    selectors = parse_selectors(node.prelude)
    if selectors is None:
        logger.warning(f"Skipping rule with unsupported selector "
                       f"'{tinycss2.serialize(node.prelude).strip()}' at line {node.source_line}")
        return None

    return Rule(selectors, parse_declarations(node.content))


def parse_selectors(tokens) -> Optional[List[SimpleSelector]]:
    """
    Parse a comma separated selector list.

    Args:
        tokens: Selector prelude as tinycss2 component values

    Returns:
        Selectors sorted from most to least specific, or None if any
        selector in the list is not a simple selector
    """
    groups = [[]]
    for token in tokens:
        if token.type == 'literal' and token.value == ',':
            groups.append([])
        elif token.type != 'comment':
            groups[-1].append(token)

    selectors = []
    for group in groups:
        selector = _parse_simple_selector(_strip_whitespace(group))
        if selector is None:
            return None
        selectors.append(selector)

    selectors.sort(key=specificity, reverse=True)
    return selectors


def _parse_simple_selector(tokens) -> Optional[SimpleSelector]:
    if not tokens:
        return None

    tag_name = None
    element_id = None
    classes = []

    position = 0
    first = tokens[0]
    if first.type == 'ident':
        tag_name = first.lower_value
        position = 1
    elif first.type == 'literal' and first.value == '*':
        position = 1

    while position < len(tokens):
        token = tokens[position]
        if token.type == 'hash' and token.is_identifier and element_id is None:
            element_id = token.value
            position += 1
        elif (token.type == 'literal' and token.value == '.'
              and position + 1 < len(tokens) and tokens[position + 1].type == 'ident'):
            classes.append(tokens[position + 1].value)
            position += 2
        else:
            # Combinators, pseudo-classes, attribute selectors, repeated ids
            return None

    return SimpleSelector(tag_name=tag_name, id=element_id, classes=frozenset(classes))


def parse_declarations(tokens) -> List[Declaration]:
    """
    Parse the content of a rule block into declarations.

    Args:
        tokens: Block content as tinycss2 component values

    Returns:
        Declarations in source order
    """
    declarations = []
    for item in tinycss2.parse_declaration_list(tokens, skip_comments=True, skip_whitespace=True):
        if item.type == 'error':
            logger.warning(f"Invalid declaration at line {item.source_line}: {item.message}")
            continue
        if item.type != 'declaration':
            continue

        value = parse_value(item.value)
        if value is None:
            logger.warning(f"Empty value for property '{item.lower_name}' at line {item.source_line}")
            continue
        declarations.append(Declaration(item.lower_name, value))

    return declarations


def parse_value(tokens) -> Optional[Value]:
    """
    Convert a declaration value into a Keyword, Length or Color.

    Args:
        tokens: Declaration value as tinycss2 component values

    Returns:
        The converted value, or None for an empty value
    """
    significant = _strip_whitespace([t for t in tokens if t.type != 'comment'])
    if not significant:
        return None

    if len(significant) == 1:
        token = significant[0]

        if token.type == 'dimension' and token.lower_unit in LENGTH_UNITS:
            return Length(token.value, LENGTH_UNITS[token.lower_unit])

        if token.type == 'number' and token.value == 0:
            return Length(0, Unit.PX)

        color = parse_color(token)
        if color is not None and not isinstance(color, str):
            return Color(*(_channel(c) for c in color))

        if token.type == 'ident':
            return Keyword(token.lower_value)

    return Keyword(tinycss2.serialize(significant).strip())


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value * 255))))


def _strip_whitespace(tokens):
    start = 0
    end = len(tokens)
    while start < end and tokens[start].type == 'whitespace':
        start += 1
    while end > start and tokens[end - 1].type == 'whitespace':
        end -= 1
    return tokens[start:end]
