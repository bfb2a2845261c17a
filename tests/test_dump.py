"""Tests for the state dump format."""

from __future__ import annotations

from collections import deque
from decimal import Decimal

from titubate.state.dump import dump_mapping, qualified_type_name, render_value


class _Opaque:
    def __str__(self) -> str:
        return "opaque!"


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("boom")


class _UnprintableList(list):
    def __str__(self) -> str:
        raise RuntimeError("boom")


def test_dump_null_value() -> None:
    assert dump_mapping({"n": None}) == "{n = |null|}"


def test_dump_utf8_bytes() -> None:
    assert dump_mapping({"b": "hi".encode()}) == "{b = |hi|}"
    assert dump_mapping({"b": bytearray(b"hi")}) == "{b = |hi|}"
    assert dump_mapping({"b": memoryview(b"hi")}) == "{b = |hi|}"


def test_dump_malformed_bytes_replaced() -> None:
    assert render_value(b"\xff") == "�"


def test_dump_opaque_object() -> None:
    rendered = dump_mapping({"k": _Opaque()})

    assert rendered.startswith("{k = |")
    assert rendered.endswith("|}")
    type_name, _, text = rendered[len("{k = |") : -len("|}")].partition(" -> ")
    assert type_name
    assert type_name.endswith("_Opaque")
    assert text == "opaque!"


def test_dump_unprintable_value() -> None:
    rendered = dump_mapping({"k": _Unprintable(), "l": _UnprintableList()}, sort_keys=True)

    assert rendered == (
        f"{{k = |{__name__}._Unprintable -> <unprintable>|,l = |<unprintable>|}}"
    )


def test_dump_multiple_entries_delimiters() -> None:
    rendered = dump_mapping({"a": 1, "b": "x", "c": None})

    assert rendered.startswith("{")
    assert rendered.endswith("}")
    assert not rendered.endswith(",}")
    assert sorted(rendered[1:-1].split(",")) == ["a = |1|", "b = |x|", "c = |null|"]


def test_dump_sort_keys() -> None:
    assert dump_mapping({"b": 2, "a": 1}, sort_keys=True) == "{a = |1|,b = |2|}"


class TestRenderValue:
    def test_numbers(self) -> None:
        assert render_value(5) == "5"
        assert render_value(1.5) == "1.5"
        assert render_value(Decimal("2.50")) == "2.50"

    def test_collections(self) -> None:
        assert render_value([1, 2]) == "[1, 2]"
        assert render_value((1,)) == "(1,)"
        assert render_value(deque([3])) == "deque([3])"

    def test_string_passes_through(self) -> None:
        assert render_value("a, b") == "a, b"

    def test_bool_is_not_a_number(self) -> None:
        assert render_value(True) == "builtins.bool -> True"

    def test_mapping_is_not_a_collection(self) -> None:
        assert render_value({"a": 1}) == "builtins.dict -> {'a': 1}"

    def test_encoding_arguments(self) -> None:
        assert render_value(b"caf\xe9", encoding="latin-1") == "café"
        assert render_value(b"\xff", errors="ignore") == ""


def test_qualified_type_name() -> None:
    assert qualified_type_name(_Opaque()) == f"{__name__}._Opaque"
    assert qualified_type_name(3) == "builtins.int"
