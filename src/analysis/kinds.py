"""Declaration kinds.

One closed enumeration is shared by the parser and the link synthesizer.
"""

from __future__ import annotations

from enum import Enum


class DeclKind(str, Enum):
    """Kinds of declarations found in an analysis dump."""

    MODULE = "Module"
    STRUCT = "Struct"
    ENUM = "Enum"
    TRAIT = "Trait"
    FUNCTION = "Function"
    MACRO = "Macro"
    TYPE_ALIAS = "TypeAlias"
    VARIABLE = "Variable"
    STATIC_ITEM = "StaticItem"
    CONSTANT = "Constant"
    STRUCT_FIELD = "StructField"
    TRAIT_METHOD_SIGNATURE = "TraitMethodSignature"
    METHOD_IMPLEMENTATION = "MethodImplementation"
    ENUM_VARIANT = "EnumVariant"

    @classmethod
    def from_wire(cls, raw: str) -> DeclKind | None:
        """Resolve a wire kind string, accepting save-analysis spellings."""
        try:
            return cls(raw)
        except ValueError:
            return LEGACY_KIND_ALIASES.get(raw)


# rustc save-analysis spellings
LEGACY_KIND_ALIASES: dict[str, DeclKind] = {
    "Mod": DeclKind.MODULE,
    "Type": DeclKind.TYPE_ALIAS,
    "Static": DeclKind.STATIC_ITEM,
    "Const": DeclKind.CONSTANT,
    "Field": DeclKind.STRUCT_FIELD,
    "TyMethod": DeclKind.TRAIT_METHOD_SIGNATURE,
    "Method": DeclKind.METHOD_IMPLEMENTATION,
    "Variant": DeclKind.ENUM_VARIANT,
    "Local": DeclKind.VARIABLE,
}

# Kinds that own a documentation page other declarations can anchor into.
PAGE_BEARING_KINDS = frozenset({DeclKind.STRUCT, DeclKind.ENUM, DeclKind.TRAIT})

# Kinds documented as an anchor on their container's page.
MEMBER_KINDS = frozenset(
    {
        DeclKind.STRUCT_FIELD,
        DeclKind.TRAIT_METHOD_SIGNATURE,
        DeclKind.METHOD_IMPLEMENTATION,
        DeclKind.ENUM_VARIANT,
    }
)


__all__ = ["LEGACY_KIND_ALIASES", "MEMBER_KINDS", "PAGE_BEARING_KINDS", "DeclKind"]
