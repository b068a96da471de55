"""
CSS selector matching and specificity.

Only simple selectors are supported: an optional tag name, an optional id and
any number of classes, as in ``div#main.box.wide``. ``Selector`` is the union
of all selector kinds; ``matches`` and ``specificity`` are the only places that
dispatch on it.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple, Union

from ..dom.node import ElementData

# (id, class, tag)
Specificity = Tuple[int, int, int]


@dataclass(frozen=True)
class SimpleSelector:
    """
    A selector made of independent, optional constraints.

    An empty selector (no tag, no id, no classes) matches every element,
    which is what ``*`` parses to.
    """
    tag_name: Optional[str] = None
    id: Optional[str] = None
    classes: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if not isinstance(self.classes, frozenset):
            object.__setattr__(self, 'classes', frozenset(self.classes))

    def __str__(self):
        parts = [self.tag_name or ('' if self.id or self.classes else '*')]
        if self.id:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in sorted(self.classes))
        return ''.join(parts)


Selector = Union[SimpleSelector]


def matches(element: ElementData, selector: Selector) -> bool:
    """
    Check if an element matches a selector.

    Args:
        element: The element to match against
        selector: The selector to check

    Returns:
        True if the element matches the selector, False otherwise
    """
    if isinstance(selector, SimpleSelector):
        return matches_simple_selector(element, selector)
    raise TypeError(f"Unsupported selector type: {type(selector).__name__}")


def matches_simple_selector(element: ElementData, selector: SimpleSelector) -> bool:
    if selector.tag_name is not None and element.tag_name != selector.tag_name:
        return False

    if selector.id is not None and element.id() != selector.id:
        return False

    if selector.classes and not selector.classes <= element.classes():
        return False

    return True


def specificity(selector: Selector) -> Specificity:
    """
    Calculate the specificity of a selector.

    Args:
        selector: The selector to rank

    Returns:
        Tuple of (id count, class count, tag count), compared lexicographically
    """
    if isinstance(selector, SimpleSelector):
        a = 1 if selector.id is not None else 0
        b = len(selector.classes)
        c = 1 if selector.tag_name is not None else 0
        return (a, b, c)
    raise TypeError(f"Unsupported selector type: {type(selector).__name__}")
