"""Error hierarchy for selectorkit."""
from __future__ import annotations


class SelectorkitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(SelectorkitError):
    """Error raised while building a selector."""


class DuplicateFragmentError(SelectorError):
    """A single-occurrence fragment (element, id, pseudo-element) was set twice."""

    def __init__(self, category: str, message: str | None = None) -> None:
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        )
        self.category = category


class OrderViolationError(SelectorError):
    """A fragment was appended after a higher-ranked fragment."""

    def __init__(self, category: str, reached: str, message: str | None = None) -> None:
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        self.category = category
        self.reached = reached


class InvalidCombinatorError(SelectorError):
    """Combinator outside the canonical set, rejected in strict mode."""

    def __init__(self, combinator: str) -> None:
        super().__init__(f"Invalid combinator: {combinator!r}")
        self.combinator = combinator


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------


class SerializationError(SelectorkitError):
    """An object could not be encoded as JSON."""


class DeserializationError(SelectorkitError):
    """JSON text could not be turned into an object of the requested class."""
