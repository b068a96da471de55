"""
HTML front end.
Builds a style engine document tree from markup using BeautifulSoup with html5lib.
"""

import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .node import Node, elem, text

logger = logging.getLogger(__name__)


def parse_html(markup: Union[str, bytes], fragment: bool = False) -> Node:
    """
    Parse markup into a document tree.

    In document mode the markup goes through the html5lib tree builder, so
    missing ``<html>``, ``<head>`` and ``<body>`` elements are synthesized and
    the ``<html>`` element is returned as the root.

    In fragment mode the markup is parsed as written. A single top-level node
    becomes the root; several top-level nodes are wrapped in an ``html`` element.

    Args:
        markup: HTML content to parse
        fragment: Parse the markup as a fragment instead of a full document

    Returns:
        Root node of the document tree
    """
    if fragment:
        soup = BeautifulSoup(markup, 'html.parser')
        nodes = _convert_children(soup)
        logger.debug(f"Parsed HTML fragment with {len(nodes)} top-level nodes")
        if len(nodes) == 1:
            return nodes[0]
        return elem('html', {}, nodes)

    soup = BeautifulSoup(markup, 'html5lib')
    root = soup.find('html')
    if root is None:
        return elem('html', {}, _convert_children(soup))

    node = _convert(root)
    logger.debug(f"Parsed HTML document with {node.count()} nodes")
    return node


def _convert(item) -> Optional[Node]:
    if isinstance(item, Tag):
        attributes = {}
        for name, value in item.attrs.items():
            # Multi-valued attributes such as class come back as lists
            if isinstance(value, (list, tuple)):
                value = ' '.join(value)
            attributes[name] = value
        return elem(item.name, attributes, _convert_children(item))

    # Comments, doctypes, CDATA and processing instructions
    if isinstance(item, PreformattedString):
        return None

    if isinstance(item, NavigableString):
        data = str(item)
        if not data.strip():
            return None
        return text(data)

    return None


def _convert_children(tag: Tag) -> List[Node]:
    children = []
    for child in tag.children:
        node = _convert(child)
        if node is not None:
            children.append(node)
    return children
