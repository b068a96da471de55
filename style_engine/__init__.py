"""
Wink Style Engine - CSS selector matching and style tree construction.
"""

from style_engine.css import Stylesheet, parse_css
from style_engine.dom import Node, parse_html
from style_engine.style import StyledNode, specified_values, style_tree

# Package information
__version__ = "1.0.0"
__author__ = "Wink Browser Team"
__description__ = "CSS selector matching and style tree construction"

__all__ = [
    'Stylesheet', 'parse_css', 'Node', 'parse_html',
    'StyledNode', 'specified_values', 'style_tree'
]
