"""
Stylesheet model: rules made of selectors and declarations.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .selector import Selector
from .values import Declaration


@dataclass(frozen=True)
class Rule:
    """
    A style rule.

    The rule applies to an element when any one of its selectors matches, and
    then every declaration applies.
    """
    selectors: Tuple[Selector, ...]
    declarations: Tuple[Declaration, ...]

    def __post_init__(self):
        object.__setattr__(self, 'selectors', tuple(self.selectors))
        object.__setattr__(self, 'declarations', tuple(self.declarations))


@dataclass(frozen=True)
class Stylesheet:
    """An ordered sequence of rules. Later rules win specificity ties."""
    rules: Tuple[Rule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'rules', tuple(self.rules))

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    @classmethod
    def concat(cls, stylesheets: Iterable['Stylesheet']) -> 'Stylesheet':
        """Join stylesheets, keeping their order."""
        rules = []
        for sheet in stylesheets:
            rules.extend(sheet.rules)
        return cls(tuple(rules))
