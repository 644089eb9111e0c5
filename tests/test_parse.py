from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import orjson
import pytest

from analysis import UNKNOWN_CRATE_NAME, DeclKind, parse
from errors import MalformedInputError, UnknownDeclarationKindError

FIXTURE = Path(__file__).parent / "fixtures" / "demo_analysis.json"


def _raw_def(kind: str, qualname: str, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "kind": kind,
        "id": {"krate": 0, "index": 1},
        "span": {
            "file_name": "lib.rs",
            "byte_start": 0,
            "byte_end": 10,
            "line_start": 3,
            "line_end": 3,
            "column_start": 1,
            "column_end": 5,
        },
        "name": qualname.rsplit("::", 1)[-1],
        "qualname": qualname,
        "value": "",
    }
    record.update(overrides)
    return record


def test_parse_fixture_preserves_input_order() -> None:
    crate, declarations = parse(FIXTURE.read_bytes())

    assert crate.crate_name == "demo"
    expected = [
        d["qualname"] for d in json.loads(FIXTURE.read_text(encoding="utf-8"))["defs"]
    ]
    assert [d.qualified_name for d in declarations] == expected


def test_parse_normalizes_save_analysis_kind_spellings() -> None:
    _, declarations = parse(FIXTURE.read_bytes())
    kinds = {d.qualified_name: d.kind for d in declarations}

    assert kinds["demo"] is DeclKind.MODULE
    assert kinds["demo::io::Reader::buf"] is DeclKind.STRUCT_FIELD
    assert kinds["demo::io::Reader::new"] is DeclKind.METHOD_IMPLEMENTATION
    assert kinds["demo::Read::read"] is DeclKind.TRAIT_METHOD_SIGNATURE
    assert kinds["demo::Mode::Fast"] is DeclKind.ENUM_VARIANT
    assert kinds["demo::run::x"] is DeclKind.VARIABLE
    assert kinds["demo::MAX"] is DeclKind.CONSTANT


def test_parse_keeps_name_independent_of_qualname_tail() -> None:
    raw = {"defs": [_raw_def("Struct", "demo::Point", name="0")]}

    _, (decl,) = parse(raw)

    assert decl.display_name == "0"
    assert decl.qualified_name == "demo::Point"


@pytest.mark.parametrize("explicit_null", [True, False])
def test_parse_defaults_crate_name_without_prelude(explicit_null: bool) -> None:
    raw: dict[str, Any] = {"defs": [_raw_def("Function", "demo::run")]}
    if explicit_null:
        raw["prelude"] = None

    crate, declarations = parse(json.dumps(raw))

    assert crate.crate_name == UNKNOWN_CRATE_NAME
    assert len(declarations) == 1


def test_parse_rejects_unknown_kind() -> None:
    raw = {
        "prelude": {"crate_name": "demo"},
        "defs": [_raw_def("Struct", "demo::A"), _raw_def("Tuple", "demo::B")],
    }

    with pytest.raises(UnknownDeclarationKindError, match=r"defs\[1\].*'Tuple'") as exc:
        parse(raw)

    assert exc.value.kind == "Tuple"
    assert isinstance(exc.value, MalformedInputError)


def test_parse_rejects_invalid_json() -> None:
    with pytest.raises(MalformedInputError, match="Invalid JSON"):
        parse(b"{not json")


def test_parse_rejects_non_object_top_level() -> None:
    with pytest.raises(MalformedInputError, match="top level"):
        parse(b"[]")


def test_parse_rejects_missing_defs() -> None:
    with pytest.raises(MalformedInputError, match="Schema validation failed"):
        parse({"prelude": {"crate_name": "demo"}})


def test_parse_rejects_missing_required_field() -> None:
    record = _raw_def("Struct", "demo::Foo")
    del record["span"]

    with pytest.raises(MalformedInputError):
        parse({"defs": [record]})


@pytest.mark.parametrize("qualname", ["", "demo::", "::Foo", "demo::::Foo"])
def test_parse_rejects_empty_qualname_segments(qualname: str) -> None:
    with pytest.raises(MalformedInputError, match="empty segment"):
        parse({"defs": [_raw_def("Struct", qualname, name="Foo")]})


@pytest.mark.parametrize(
    ("field", "start", "end"),
    [("line", 5, 4), ("byte", 10, 2)],
)
def test_parse_rejects_inverted_span_ranges(field: str, start: int, end: int) -> None:
    record = _raw_def("Struct", "demo::Foo")
    record["span"][f"{field}_start"] = start
    record["span"][f"{field}_end"] = end

    with pytest.raises(MalformedInputError, match=f"{field}_start"):
        parse({"defs": [record]})


def test_parse_ignores_unrelated_sections() -> None:
    raw = {
        "prelude": {"crate_name": "demo", "crate_root": "src"},
        "imports": [],
        "refs": [],
        "defs": [_raw_def("Enum", "demo::Mode")],
    }

    crate, declarations = parse(raw)

    assert crate.crate_name == "demo"
    assert declarations[0].kind is DeclKind.ENUM


@pytest.mark.parametrize(
    ("section", "field", "value"),
    [
        ("id", "krate", True),
        ("id", "index", "7"),
        ("id", "index", 7.0),
        ("id", "krate", 2**32),
        ("id", "index", -1),
        ("span", "line_start", "3"),
        ("span", "line_end", 3.0),
        ("span", "byte_start", False),
        ("span", "column_start", 0),
    ],
)
def test_parse_rejects_mistyped_numbers(
    section: str, field: str, value: object
) -> None:
    record = _raw_def("Struct", "demo::Foo")
    record[section][field] = value

    with pytest.raises(MalformedInputError, match=field):
        parse({"defs": [record]})


@pytest.mark.parametrize("field", ["kind", "name", "qualname", "value"])
def test_parse_rejects_non_string_fields(field: str) -> None:
    record = _raw_def("Struct", "demo::Foo")
    record[field] = 1

    with pytest.raises(MalformedInputError, match=field):
        parse({"defs": [record]})


def test_parse_rejects_non_string_crate_name() -> None:
    raw = {"prelude": {"crate_name": 5}, "defs": [_raw_def("Struct", "demo::Foo")]}

    with pytest.raises(MalformedInputError, match="crate_name"):
        parse(raw)


def test_parse_keeps_largest_u32_id() -> None:
    record = _raw_def("Struct", "demo::Foo")
    record["id"] = {"krate": 2**32 - 1, "index": 0}

    _, (decl,) = parse(orjson.dumps({"defs": [record]}))

    assert decl.id.krate == 2**32 - 1
    assert decl.id.index == 0
