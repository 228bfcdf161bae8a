"""selectorkit: fluent CSS selector builder and small object helpers."""
from __future__ import annotations

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import (
    DeserializationError,
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
    SelectorkitError,
    SerializationError,
)
from selectorkit.objects import Rectangle, from_json, get_json
from selectorkit.selector import (
    COMBINATORS,
    CombinedSelector,
    Rank,
    Selector,
    SelectorBuilder,
    css_selector_builder,
    stringify,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "SelectorkitConfig",
    # errors
    "SelectorkitError",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "SerializationError",
    "DeserializationError",
    # selector
    "COMBINATORS",
    "Rank",
    "Selector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
    "stringify",
    # objects
    "Rectangle",
    "get_json",
    "from_json",
]
