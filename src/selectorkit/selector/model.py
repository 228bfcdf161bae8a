"""Selector model: Rank, Selector and CombinedSelector.

A compound selector is assembled from typed fragments:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Fragments must be appended in rank order, and element, id and
pseudo-element may occur only once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

from selectorkit.errors import DuplicateFragmentError, OrderViolationError

__all__ = ["Rank", "Selector", "CombinedSelector"]

logger = logging.getLogger(__name__)


class Rank(IntEnum):
    """Fragment categories in the order they must appear."""

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


@dataclass
class Selector:
    """A compound selector under construction.

    Every fragment method validates before it mutates and returns ``self``
    so calls can be chained.  Rendering never changes the selector.
    """

    element_name: str | None = None
    id_value: str | None = None
    class_names: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element_name: str | None = None
    last_stage_reached: Rank = Rank.NONE

    # --- validation -----------------------------------------------------------

    def _check_order(self, rank: Rank) -> None:
        if self.last_stage_reached > rank:
            logger.debug(
                "Rejected %s after %s", rank.label, self.last_stage_reached.label
            )
            raise OrderViolationError(rank.label, self.last_stage_reached.label)

    def _check_unset(self, rank: Rank, current: str | None) -> None:
        if current is not None:
            logger.debug("Rejected second %s %r", rank.label, current)
            raise DuplicateFragmentError(rank.label)

    def _advance(self, rank: Rank, value: str) -> Selector:
        self.last_stage_reached = rank
        logger.debug("Appended %s %r", rank.label, value)
        return self

    # --- fragments ------------------------------------------------------------

    def element(self, name: str) -> Selector:
        self._check_unset(Rank.ELEMENT, self.element_name)
        self._check_order(Rank.ELEMENT)
        self.element_name = name
        return self._advance(Rank.ELEMENT, name)

    def id(self, value: str) -> Selector:
        self._check_unset(Rank.ID, self.id_value)
        self._check_order(Rank.ID)
        self.id_value = value
        return self._advance(Rank.ID, value)

    def class_(self, name: str) -> Selector:
        self._check_order(Rank.CLASS)
        self.class_names.append(name)
        return self._advance(Rank.CLASS, name)

    def attr(self, expr: str) -> Selector:
        self._check_order(Rank.ATTRIBUTE)
        self.attributes.append(expr)
        return self._advance(Rank.ATTRIBUTE, expr)

    def pseudo_class(self, name: str) -> Selector:
        self._check_order(Rank.PSEUDO_CLASS)
        self.pseudo_classes.append(name)
        return self._advance(Rank.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> Selector:
        self._check_unset(Rank.PSEUDO_ELEMENT, self.pseudo_element_name)
        self._check_order(Rank.PSEUDO_ELEMENT)
        self.pseudo_element_name = name
        return self._advance(Rank.PSEUDO_ELEMENT, name)

    # --- rendering ------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.last_stage_reached is Rank.NONE

    def stringify(self) -> str:
        """Render the selector in fixed category order, skipping empty parts."""
        parts: list[str] = []
        if self.element_name is not None:
            parts.append(self.element_name)
        if self.id_value is not None:
            parts.append(f"#{self.id_value}")
        if self.class_names:
            parts.append("." + ".".join(self.class_names))
        parts.extend(f"[{expr}]" for expr in self.attributes)
        if self.pseudo_classes:
            parts.append(":" + ":".join(self.pseudo_classes))
        if self.pseudo_element_name is not None:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator, rendered once when combined.

    Later changes to the operands do not affect ``rendered``.  A
    CombinedSelector may itself be an operand of another combine.
    """

    combinator: str
    rendered: str

    def stringify(self) -> str:
        return self.rendered

    def __str__(self) -> str:
        return self.rendered
