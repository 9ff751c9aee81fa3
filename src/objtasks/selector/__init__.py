from objtasks.selector.builder import CATEGORIES, SelectorBuilder, Stringifiable
from objtasks.selector.facade import CssSelectorBuilder, css_selector_builder

__all__ = [
    "CATEGORIES",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "Stringifiable",
    "css_selector_builder",
]
