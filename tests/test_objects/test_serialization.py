"""Tests for the JSON helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass

import pytest

from objtasks import JsonConfig, Rectangle, SerializationError, from_json, get_json


class Circle:
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def get_circumference(self) -> float:
        return 2 * math.pi * self.radius


@dataclass(frozen=True)
class Point:
    x: int
    y: int


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list_is_compact(self) -> None:
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self) -> None:
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_scalars(self) -> None:
        assert get_json("a") == '"a"'
        assert get_json(None) == "null"
        assert get_json(True) == "true"

    def test_dataclass(self) -> None:
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object(self) -> None:
        assert get_json(Circle(10)) == '{"radius":10}'

    def test_non_ascii_kept(self) -> None:
        assert get_json(["é"]) == '["é"]'

    def test_sort_keys(self) -> None:
        assert get_json({"b": 1, "a": 2}, JsonConfig(sort_keys=True)) == '{"a":2,"b":1}'

    def test_indent(self) -> None:
        assert get_json({"a": 1}, JsonConfig(indent=2)) == '{\n  "a": 1\n}'

    def test_not_compact(self) -> None:
        assert get_json([1, 2], JsonConfig(compact=False)) == "[1, 2]"

    def test_unserializable(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            get_json({1, 2})
        assert isinstance(exc_info.value.cause, TypeError)

    @pytest.mark.parametrize("value", [lambda: 0, math, Circle])
    def test_functions_modules_and_classes_rejected(self, value) -> None:
        with pytest.raises(SerializationError):
            get_json(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), [1.0, float("-inf")]])
    def test_non_finite_numbers_rejected(self, value) -> None:
        with pytest.raises(SerializationError) as exc_info:
            get_json(value)
        assert isinstance(exc_info.value.cause, ValueError)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_attaches_class(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == pytest.approx(20 * math.pi)

    def test_frozen_dataclass(self) -> None:
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.get_area() == 200

    def test_round_trip(self) -> None:
        p = Point(1, 2)
        assert from_json(Point, get_json(p)) == p

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            from_json(Circle, "{radius: 10")
        assert exc_info.value.cause is not None

    def test_non_object(self) -> None:
        with pytest.raises(SerializationError, match="Expected a JSON object"):
            from_json(Circle, "[1,2,3]")

    def test_slots_class_rejects_unknown_key(self) -> None:
        class Slotted:
            __slots__ = ("a",)

        with pytest.raises(SerializationError):
            from_json(Slotted, '{"b": 1}')

    @pytest.mark.parametrize("text", ['{"__dict__": 1}', '{"__class__": 1}'])
    def test_reserved_attribute_key(self, text: str) -> None:
        with pytest.raises(SerializationError) as exc_info:
            from_json(Circle, text)
        assert isinstance(exc_info.value.cause, TypeError)


class TestJsonConfig:
    def test_defaults(self) -> None:
        cfg = JsonConfig()
        assert cfg.indent is None
        assert cfg.sort_keys is False
        assert cfg.ensure_ascii is False
        assert cfg.separators() == (",", ":")

    def test_indent_uses_json_defaults(self) -> None:
        assert JsonConfig(indent=4).separators() is None

    def test_frozen(self) -> None:
        cfg = JsonConfig()
        with pytest.raises(AttributeError):
            cfg.indent = 2  # type: ignore[misc]
