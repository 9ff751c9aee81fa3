"""Error hierarchy for objtasks."""
from __future__ import annotations

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class ObjtasksError(Exception):
    """Base error for everything raised by objtasks."""


class SelectorError(ObjtasksError):
    """A fragment was rejected by a selector builder."""

    message = ""

    def __init__(self, category: str = "") -> None:
        super().__init__(self.message)
        self.category = category


class DuplicateError(SelectorError):
    """Element, id or pseudo-element appended a second time."""

    message = DUPLICATE_MESSAGE


class OrderError(SelectorError):
    """Fragment appended after a fragment of a later category."""

    message = ORDER_MESSAGE


class SerializationError(ObjtasksError):
    """JSON text could not be produced or parsed."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
