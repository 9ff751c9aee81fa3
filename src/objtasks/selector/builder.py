"""Fluent builder for compound CSS selector strings.

A selector is assembled from fragments in a fixed category order::

    element#id.class[attr]:pseudo-class::pseudo-element

``class``, ``attr`` and ``pseudo-class`` may repeat; ``element``, ``id`` and
``pseudo-element`` may occur once.  Two complete selectors can be joined with
a combinator (`` ``, ``+``, ``~``, ``>``) via :meth:`SelectorBuilder.combine`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from objtasks.errors import DuplicateError, OrderError

__all__ = ["CATEGORIES", "SelectorBuilder", "Stringifiable"]

log = logging.getLogger("objtasks.selector")

# Category order; a fragment may not follow any category listed after it.
CATEGORIES = (
    "element",
    "id",
    "class",
    "attr",
    "pseudo_class",
    "pseudo_element",
)

_UNIQUE = frozenset({"element", "id", "pseudo_element"})


class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


@dataclass(eq=False)
class SelectorBuilder:
    """Accumulates selector fragments into a single selector string.

    Every fragment method returns the builder itself so calls can be chained.
    A rejected fragment raises before any state changes.
    """

    text: str = field(default="", init=False)
    has_element: bool = field(default=False, init=False)
    has_id: bool = field(default=False, init=False)
    has_class: bool = field(default=False, init=False)
    has_attr: bool = field(default=False, init=False)
    has_pseudo_class: bool = field(default=False, init=False)
    has_pseudo_element: bool = field(default=False, init=False)

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append("element", value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append("id", f"#{value}")

    def class_(self, value: str) -> SelectorBuilder:
        return self._append("class", f".{value}")

    def attr(self, value: str) -> SelectorBuilder:
        return self._append("attr", f"[{value}]")

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append("pseudo_class", f":{value}")

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append("pseudo_element", f"::{value}")

    # --- composition ----------------------------------------------------------

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> SelectorBuilder:
        """Append ``left``, the combinator and ``right`` separated by spaces."""
        self.text += f"{left.stringify()} {combinator} {right.stringify()}"
        return self

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    # --- internals ------------------------------------------------------------

    def _has(self, category: str) -> bool:
        return getattr(self, f"has_{category}")

    def _append(self, category: str, fragment: str) -> SelectorBuilder:
        if category in _UNIQUE and self._has(category):
            log.debug("Rejected duplicate %s %r after %r", category, fragment, self.text)
            raise DuplicateError(category)
        later = CATEGORIES[CATEGORIES.index(category) + 1 :]
        if any(self._has(c) for c in later):
            log.debug("Rejected out-of-order %s %r after %r", category, fragment, self.text)
            raise OrderError(category)
        setattr(self, f"has_{category}", True)
        self.text += fragment
        return self
