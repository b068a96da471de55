"""
CSS model for the style engine.
This package provides values, selectors, stylesheets and the CSS front end.
"""

from .values import Unit, Keyword, Length, Color, Value, Declaration
from .selector import SimpleSelector, Selector, Specificity, matches, specificity
from .stylesheet import Rule, Stylesheet
from .parser import CSSParseError, parse_css

__all__ = [
    'Unit', 'Keyword', 'Length', 'Color', 'Value', 'Declaration',
    'SimpleSelector', 'Selector', 'Specificity', 'matches', 'specificity',
    'Rule', 'Stylesheet', 'CSSParseError', 'parse_css'
]
