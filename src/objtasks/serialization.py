"""JSON helpers: serialize values and rebuild typed objects from JSON text."""

from __future__ import annotations

import dataclasses
import json
import logging
import types
from typing import Any, TypeVar

from objtasks.config import JsonConfig
from objtasks.errors import SerializationError

__all__ = ["get_json", "from_json"]

log = logging.getLogger("objtasks.serialization")

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__") and not (callable(obj) or isinstance(obj, types.ModuleType)):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, config: JsonConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    The default config renders compact output, e.g. ``[1,2,3]``.
    Dataclasses and plain objects are serialized through their attributes.
    """
    cfg = config or JsonConfig()
    try:
        return json.dumps(
            obj,
            default=_default,
            indent=cfg.indent,
            sort_keys=cfg.sort_keys,
            ensure_ascii=cfg.ensure_ascii,
            separators=cfg.separators(),
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), cause=exc) from exc


def from_json(proto: type[T], text: str) -> T:
    """Parse *text* into an instance of *proto*.

    The instance is created without calling ``__init__``; the keys of the JSON
    object become its attributes, so methods defined on *proto* work on it.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        log.debug("Invalid JSON for %s: %s", proto.__name__, exc)
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {proto.__name__}, got {type(data).__name__}"
        )
    obj = proto.__new__(proto)
    try:
        for key, value in data.items():
            # object.__setattr__ also works on frozen dataclasses
            object.__setattr__(obj, key, value)
    except (AttributeError, TypeError) as exc:
        raise SerializationError(str(exc), cause=exc) from exc
    return obj
