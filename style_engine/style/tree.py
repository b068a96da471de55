"""
Style tree construction.
Pairs every document node with its resolved property values.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional

from ..css.stylesheet import Stylesheet
from ..css.values import Keyword, Value
from ..dom.node import Node
from ..utils.logging import PerformanceLogger
from .resolver import PropertyMap, specified_values

logger = logging.getLogger(__name__)


class Display(Enum):
    """Values of the display property understood by layout."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """
    A document node with its specified values.

    The document node is referenced, not copied, and is only reachable
    through a read-only property.
    """

    def __init__(self, node: Node, specified_values: PropertyMap,
                 children: Optional[List['StyledNode']] = None):
        """
        Initialize a styled node.

        Args:
            node: The document node this styled node describes
            specified_values: Resolved property values for the node
            children: Styled children in document order
        """
        self._node = node
        self.specified_values = specified_values
        self.children: List['StyledNode'] = list(children or [])

    @property
    def node(self) -> Node:
        return self._node

    def value(self, name: str) -> Optional[Value]:
        """Get the value of a property if it was specified."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Get a property value, trying a fallback property before the default.

        Used for shorthands, e.g. ``lookup("margin-left", "margin", zero)``.
        """
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        if value is None:
            return default
        return value

    def display(self) -> Display:
        """The display type of this node, inline unless specified otherwise."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.text == 'block':
                return Display.BLOCK
            if value.text == 'none':
                return Display.NONE
        return Display.INLINE

    def iter_nodes(self) -> Iterator['StyledNode']:
        """Iterate over this styled node and its descendants, depth first."""
        stack = [self]
        while stack:
            styled = stack.pop()
            yield styled
            stack.extend(reversed(styled.children))

    def __repr__(self):
        return f"StyledNode({self._node!r}, {len(self.specified_values)} properties)"


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Build the style tree for a document.

    Args:
        root: Root of the document tree, left unmodified
        stylesheet: The stylesheet to apply

    Returns:
        Styled root node, with one styled node per document node
    """
    with PerformanceLogger(logger, "style tree build"):
        styled = _style_node(root, stylesheet)
    return styled


def _style_node(node: Node, stylesheet: Stylesheet) -> StyledNode:
    element = node.element
    if element is not None:
        values = specified_values(element, stylesheet)
    else:
        # Text nodes cannot match any selector
        values = {}

    children = [_style_node(child, stylesheet) for child in node.children]
    return StyledNode(node, values, children)


build = style_tree
