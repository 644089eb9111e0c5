from __future__ import annotations

import pytest

from analysis.kinds import (
    LEGACY_KIND_ALIASES,
    MEMBER_KINDS,
    PAGE_BEARING_KINDS,
    DeclKind,
)
from links.tags import TYPE_TAGS, type_tag


def test_every_kind_has_a_tag_entry() -> None:
    assert set(TYPE_TAGS) == set(DeclKind)


def test_variable_has_no_tag() -> None:
    assert type_tag(DeclKind.VARIABLE) is None
    assert [k for k, tag in TYPE_TAGS.items() if tag is None] == [DeclKind.VARIABLE]


@pytest.mark.parametrize(
    ("kind", "tag"),
    [
        (DeclKind.MODULE, "mod"),
        (DeclKind.STRUCT, "struct"),
        (DeclKind.ENUM, "enum"),
        (DeclKind.FUNCTION, "fn"),
        (DeclKind.TYPE_ALIAS, "type"),
        (DeclKind.TRAIT, "trait"),
        (DeclKind.MACRO, "macro"),
        (DeclKind.STATIC_ITEM, "static"),
        (DeclKind.CONSTANT, "constant"),
        (DeclKind.STRUCT_FIELD, "structfield"),
        (DeclKind.TRAIT_METHOD_SIGNATURE, "tymethod"),
        (DeclKind.METHOD_IMPLEMENTATION, "method"),
        (DeclKind.ENUM_VARIANT, "variant"),
    ],
)
def test_type_tags(kind: DeclKind, tag: str) -> None:
    assert type_tag(kind) == tag


def test_from_wire_accepts_canonical_and_legacy_names() -> None:
    assert DeclKind.from_wire("TypeAlias") is DeclKind.TYPE_ALIAS
    assert DeclKind.from_wire("Type") is DeclKind.TYPE_ALIAS
    assert DeclKind.from_wire("Static") is DeclKind.STATIC_ITEM
    assert DeclKind.from_wire("Tuple") is None
    assert DeclKind.from_wire("struct") is None


def test_legacy_aliases_do_not_shadow_canonical_names() -> None:
    canonical = {kind.value for kind in DeclKind}
    assert not canonical & set(LEGACY_KIND_ALIASES)


def test_page_bearing_and_member_kinds_are_disjoint() -> None:
    assert not PAGE_BEARING_KINDS & MEMBER_KINDS
