"""Error hierarchy for doclinks.

Parse-time errors reject a whole input document. Synthesis-time errors are
raised per declaration and carry the declaration that failed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from analysis.models import Declaration


class DocLinksError(Exception):
    """Base class for all doclinks errors."""


class MalformedInputError(DocLinksError):
    """Raised when an analysis dump is structurally invalid."""


class UnknownDeclarationKindError(MalformedInputError):
    """Raised when a declaration kind is outside the closed set."""

    def __init__(self, kind: str, index: int) -> None:
        self.kind = kind
        self.index = index
        super().__init__(f"defs[{index}]: unknown declaration kind {kind!r}")


class SynthesisError(DocLinksError):
    """Raised when links cannot be synthesized for a single declaration."""

    def __init__(self, declaration: Declaration, message: str) -> None:
        self.declaration = declaration
        super().__init__(f"{declaration.qualified_name}: {message}")


class UnsupportedKindError(SynthesisError):
    """Raised when a declaration kind has no documentation type tag."""

    def __init__(self, declaration: Declaration) -> None:
        super().__init__(
            declaration,
            f"kind {declaration.kind.value} has no documentation type tag",
        )


class MissingParentError(SynthesisError):
    """Raised when a member declaration has no page-bearing container."""

    def __init__(self, declaration: Declaration, parent_qualname: str) -> None:
        self.parent_qualname = parent_qualname
        super().__init__(
            declaration,
            f"no struct, enum or trait named {parent_qualname!r} to anchor in",
        )


__all__ = [
    "DocLinksError",
    "MalformedInputError",
    "MissingParentError",
    "SynthesisError",
    "UnknownDeclarationKindError",
    "UnsupportedKindError",
]
