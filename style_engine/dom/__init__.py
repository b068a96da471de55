"""
Document tree used as input by the style engine.
"""

from .node import Node, NodeType, ElementData, text, elem
from .html_loader import parse_html

__all__ = [
    'Node', 'NodeType', 'ElementData', 'text', 'elem', 'parse_html'
]
