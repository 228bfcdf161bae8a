from selectorkit.selector.builder import (
    COMBINATORS,
    SelectorBuilder,
    css_selector_builder,
    stringify,
)
from selectorkit.selector.model import CombinedSelector, Rank, Selector

__all__ = [
    "COMBINATORS",
    "CombinedSelector",
    "Rank",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "stringify",
]
