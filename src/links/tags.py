"""Rustdoc type tags used in page file names and in-page anchors."""

from __future__ import annotations

from analysis.kinds import DeclKind

# Variable has no rustdoc item type; it maps to None and is reported as
# unsupported rather than guessed.
TYPE_TAGS: dict[DeclKind, str | None] = {
    DeclKind.MODULE: "mod",
    DeclKind.STRUCT: "struct",
    DeclKind.ENUM: "enum",
    DeclKind.FUNCTION: "fn",
    DeclKind.TYPE_ALIAS: "type",
    DeclKind.TRAIT: "trait",
    DeclKind.MACRO: "macro",
    DeclKind.STATIC_ITEM: "static",
    DeclKind.CONSTANT: "constant",
    DeclKind.STRUCT_FIELD: "structfield",
    DeclKind.TRAIT_METHOD_SIGNATURE: "tymethod",
    DeclKind.METHOD_IMPLEMENTATION: "method",
    DeclKind.ENUM_VARIANT: "variant",
    DeclKind.VARIABLE: None,
}


def type_tag(kind: DeclKind) -> str | None:
    """Return the rustdoc type tag for a kind, or None when it has none."""
    return TYPE_TAGS[kind]


__all__ = ["TYPE_TAGS", "type_tag"]
