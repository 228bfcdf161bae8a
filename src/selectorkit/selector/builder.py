"""SelectorBuilder facade: entry points that start a fresh Selector per call."""

from __future__ import annotations

import logging

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import InvalidCombinatorError
from selectorkit.selector.model import CombinedSelector, Selector

__all__ = ["COMBINATORS", "SelectorBuilder", "css_selector_builder", "stringify"]

logger = logging.getLogger(__name__)

# Descendant, adjacent sibling, general sibling, child.
COMBINATORS = frozenset({" ", "+", "~", ">"})


def stringify(handle: Selector | CombinedSelector) -> str:
    """Render *handle* without modifying it."""
    return handle.stringify()


class SelectorBuilder:
    """Facade for building CSS selectors.

    Each fragment method returns a new, independently owned Selector with
    that single fragment applied; continue by chaining on the result::

        builder = SelectorBuilder()
        builder.id("main").class_("container").stringify()   # '#main.container'

    The builder keeps no state between calls, so one instance can be shared.
    """

    def __init__(self, config: SelectorkitConfig | None = None) -> None:
        self.config = config or SelectorkitConfig()

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attr(self, expr: str) -> Selector:
        return Selector().attr(expr)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(
        self,
        left: Selector | CombinedSelector,
        combinator: str,
        right: Selector | CombinedSelector,
    ) -> CombinedSelector:
        """Join two selectors with *combinator*.

        Both sides are rendered now; the result does not follow later
        changes to *left* or *right*.  The two sides are not validated
        against each other.  Unless the builder is configured with
        ``strict_combinators``, the combinator is accepted as an opaque
        string.
        """
        if self.config.strict_combinators and combinator not in COMBINATORS:
            raise InvalidCombinatorError(combinator)
        logger.debug("Combining with %r", combinator)
        rendered = f"{left.stringify()} {combinator} {right.stringify()}"
        return CombinedSelector(combinator=combinator, rendered=rendered)

    stringify = staticmethod(stringify)


css_selector_builder = SelectorBuilder()
