"""Stateless entry points that start a new selector builder per call."""

from __future__ import annotations

from objtasks.selector.builder import SelectorBuilder, Stringifiable


class CssSelectorBuilder:
    """Facade over :class:`SelectorBuilder`.

    Holds no state: each call returns a fresh builder, so chains started from
    the same facade never share fragments.
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, selector1: Stringifiable, combinator: str, selector2: Stringifiable
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(selector1, combinator, selector2)


css_selector_builder = CssSelectorBuilder()
