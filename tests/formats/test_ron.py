"""Tests for the compact RON encoder."""

from __future__ import annotations

from enum import Enum

import pytest

from configgen.formats.ron import encode_ron


class Mode(Enum):
    FAST = 1
    SAFE = 2


class TestEncodeRon:
    """Behavioural checks for ``encode_ron``."""

    def test_identifier_keyed_mapping_becomes_struct(self) -> None:
        assert encode_ron({"field1": 2}) == "(field1:2)"

    def test_nested_values(self) -> None:
        """Scalars, sequences and nested structs should use RON notation."""

        value = {
            "name": "demo",
            "tags": ["a", "b"],
            "ratio": 1.0,
            "missing": None,
            "enabled": True,
            "server": {"port": 8080},
        }

        assert encode_ron(value) == (
            '(name:"demo",tags:["a","b"],ratio:1.0,missing:None,'
            "enabled:true,server:(port:8080))"
        )

    def test_non_identifier_keys_become_map(self) -> None:
        assert encode_ron({"first key": 1}) == '{"first key":1}'
        assert encode_ron({1: "a", 2: "b"}) == '{1:"a",2:"b"}'

    def test_reserved_words_use_raw_identifiers(self) -> None:
        """Field names that collide with RON literals must not be read back as values."""

        assert encode_ron({"true": 1, "None": 2, "port": 3}) == "(r#true:1,r#None:2,port:3)"

    def test_empty_mapping_is_empty_map(self) -> None:
        assert encode_ron({}) == "{}"

    def test_tuples_and_enums(self) -> None:
        assert encode_ron((1, "x")) == '(1,"x")'
        assert encode_ron({"mode": Mode.SAFE}) == "(mode:SAFE)"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.0, "2.0"),
            (0.5, "0.5"),
            (1e20, "1e+20"),
            (float("nan"), "NaN"),
            (float("inf"), "inf"),
            (float("-inf"), "-inf"),
        ],
    )
    def test_floats(self, value: float, expected: str) -> None:
        assert encode_ron(value) == expected

    def test_string_escapes(self) -> None:
        """Quotes, backslashes and control characters must be escaped."""

        assert encode_ron('a"b\\c\n\x01') == '"a\\"b\\\\c\\n\\u0001"'

    def test_unicode_passes_through(self) -> None:
        assert encode_ron("café") == '"café"'

    def test_circular_reference_is_rejected(self) -> None:
        value: dict[str, object] = {}
        value["self"] = value

        with pytest.raises(ValueError, match="Circular"):
            _ = encode_ron(value)

    def test_unsupported_type_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            _ = encode_ron({"handle": object()})

    def test_shared_non_circular_values_are_allowed(self) -> None:
        """The same list referenced twice is not a cycle."""

        shared = [1, 2]

        assert encode_ron({"a": shared, "b": shared}) == "(a:[1,2],b:[1,2])"
