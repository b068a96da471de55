"""
Node implementation for the document tree.
This module defines the element and text nodes consumed by the style engine.
"""

from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Set, Union


class NodeType(IntEnum):
    """Node types, numbered as in the DOM standard."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


class ElementData:
    """
    Tag name and attributes of an element node.

    Only ``tag_name``, ``id`` and ``class`` are ever read by selector matching.
    """

    def __init__(self, tag_name: str, attributes: Optional[Dict[str, str]] = None):
        """
        Initialize element data.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Mapping from attribute name to attribute value
        """
        self.tag_name = tag_name
        self.attributes: Dict[str, str] = dict(attributes or {})

    def id(self) -> Optional[str]:
        """Get the value of the id attribute, or None if it is absent."""
        return self.attributes.get('id')

    def classes(self) -> Set[str]:
        """Get the set of class names listed in the class attribute."""
        class_attr = self.attributes.get('class')
        if not class_attr:
            return set()
        return set(class_attr.split())

    def __eq__(self, other) -> bool:
        if not isinstance(other, ElementData):
            return NotImplemented
        return self.tag_name == other.tag_name and self.attributes == other.attributes

    def __repr__(self):
        return f"ElementData({self.tag_name!r}, {self.attributes!r})"


class Node:
    """
    A document tree node.

    An element node carries ``ElementData`` and any number of children;
    a text node carries its string data and has no children.
    """

    def __init__(self, data: Union[ElementData, str], children: Optional[List['Node']] = None):
        """
        Initialize a node.

        Args:
            data: ElementData for an element node, or the text of a text node
            children: Child nodes in document order
        """
        self.data = data
        self.children: List['Node'] = list(children or [])

    @property
    def node_type(self) -> NodeType:
        if isinstance(self.data, ElementData):
            return NodeType.ELEMENT_NODE
        return NodeType.TEXT_NODE

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def element(self) -> Optional[ElementData]:
        """The ElementData of an element node, None for text nodes."""
        if isinstance(self.data, ElementData):
            return self.data
        return None

    @property
    def text(self) -> Optional[str]:
        """The text of a text node, None for element nodes."""
        if isinstance(self.data, str):
            return self.data
        return None

    def iter_nodes(self) -> Iterator['Node']:
        """Iterate over this node and its descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count(self) -> int:
        """Number of nodes in the subtree rooted at this node."""
        return sum(1 for _ in self.iter_nodes())

    def __repr__(self):
        if self.is_element:
            return f"Node(<{self.data.tag_name}>, {len(self.children)} children)"
        return f"Node(#text {self.data!r})"


def text(data: str) -> Node:
    """Create a text node."""
    return Node(data)


def elem(name: str, attrs: Optional[Dict[str, str]] = None,
         children: Optional[List[Node]] = None) -> Node:
    """
    Create an element node.

    Args:
        name: Tag name
        attrs: Attribute mapping
        children: Child nodes in document order

    Returns:
        The new element node
    """
    return Node(ElementData(name, attrs), children)
