"""
Cascade and style tree construction.
"""

from .resolver import PropertyMap, match_rule, matching_rules, specified_values, resolve
from .tree import Display, StyledNode, style_tree, build

__all__ = [
    'PropertyMap', 'match_rule', 'matching_rules', 'specified_values', 'resolve',
    'Display', 'StyledNode', 'style_tree', 'build'
]
