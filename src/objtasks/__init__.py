"""objtasks: object-factory helpers and a fluent CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.config import JsonConfig
from objtasks.errors import (
    DuplicateError,
    ObjtasksError,
    OrderError,
    SelectorError,
    SerializationError,
)
from objtasks.rectangle import Rectangle
from objtasks.selector import CssSelectorBuilder, SelectorBuilder, css_selector_builder
from objtasks.serialization import from_json, get_json

__all__ = [
    "__version__",
    "CssSelectorBuilder",
    "DuplicateError",
    "JsonConfig",
    "ObjtasksError",
    "OrderError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "SerializationError",
    "css_selector_builder",
    "from_json",
    "get_json",
]
