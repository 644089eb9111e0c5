"""Synthesize rustdoc and source-browsing URLs for declarations.

Documentation URLs follow the layout rustdoc's search results link to:

* modules:   ``<doc_base><a/b/c>/index.html``
* items:     ``<doc_base><module path>/<tag>.<name>.html``
* members and associated items:
  ``<doc_base><module path>/<parent tag>.<parent name>.html#<tag>.<name>``

Source URLs always point at the first line of the declaration's span.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from analysis.kinds import DeclKind
from analysis.models import CrateContext, Declaration
from errors import MissingParentError, UnsupportedKindError
from links.parents import ParentIndex
from links.tags import type_tag
from utils import parent_qualname, qualname_to_path

DOC_BASE = "https://doc.rust-lang.org/nightly/"
SRC_BASE = "https://github.com/rust-lang/rust/tree/master/src/"


@dataclass(frozen=True)
class LinkBases:
    """Root URLs of the documentation and source-browsing sites."""

    doc_base: str = DOC_BASE
    src_base: str = SRC_BASE


@dataclass(frozen=True)
class Links:
    doc_url: str
    src_url: str


def _require_tag(decl: Declaration) -> str:
    tag = type_tag(decl.kind)
    if tag is None:
        raise UnsupportedKindError(decl)
    return tag


def _page_file(page_path: str, tag: str, name: str) -> str:
    file_name = f"{tag}.{name}.html"
    return f"{page_path}/{file_name}" if page_path else file_name


def _module_path(qualname: str) -> str:
    return qualname_to_path(parent_qualname(qualname))


def make_src_url(crate: CrateContext, decl: Declaration, bases: LinkBases) -> str:
    """Build the source-browsing URL for a declaration.

    Only ``line_start`` is used for the anchor; ranges are not emitted.
    """
    span = decl.span
    return f"{bases.src_base}lib{crate.crate_name}/{span.file_name}#L{span.line_start}"


def make_doc_url(
    decl: Declaration,
    parents: ParentIndex,
    bases: LinkBases,
) -> str:
    """Build the rustdoc URL for a declaration.

    Any declaration other than a module whose container is indexed in
    ``parents`` is anchored in the container's page, whatever its kind, so
    associated constants and types land on their struct, enum or trait page.

    Raises:
        UnsupportedKindError: If the kind has no rustdoc type tag.
        MissingParentError: If a member's container is not in ``parents``.
    """
    match decl.kind:
        case DeclKind.MODULE:
            return f"{bases.doc_base}{qualname_to_path(decl.qualified_name)}/index.html"
        case (
            DeclKind.STRUCT_FIELD
            | DeclKind.TRAIT_METHOD_SIGNATURE
            | DeclKind.METHOD_IMPLEMENTATION
            | DeclKind.ENUM_VARIANT
        ):
            tag = _require_tag(decl)
            parent = parents.parent_of(decl)
            if parent is None:
                raise MissingParentError(decl, parent_qualname(decl.qualified_name))
        case (
            DeclKind.STRUCT
            | DeclKind.ENUM
            | DeclKind.TRAIT
            | DeclKind.FUNCTION
            | DeclKind.MACRO
            | DeclKind.TYPE_ALIAS
            | DeclKind.STATIC_ITEM
            | DeclKind.CONSTANT
            | DeclKind.VARIABLE
        ):
            tag = _require_tag(decl)
            parent = parents.parent_of(decl)
        case _:
            assert_never(decl.kind)

    if parent is None:
        page = _page_file(_module_path(decl.qualified_name), tag, decl.display_name)
        return f"{bases.doc_base}{page}"

    page = _page_file(
        _module_path(parent.qualified_name),
        _require_tag(parent),
        parent.display_name,
    )
    return f"{bases.doc_base}{page}#{tag}.{decl.display_name}"


def synthesize_links(
    crate: CrateContext,
    decl: Declaration,
    parents: ParentIndex,
    bases: LinkBases | None = None,
) -> Links:
    """Return the documentation and source URLs for one declaration."""
    bases = bases or LinkBases()
    return Links(
        doc_url=make_doc_url(decl, parents, bases),
        src_url=make_src_url(crate, decl, bases),
    )


__all__ = [
    "DOC_BASE",
    "SRC_BASE",
    "LinkBases",
    "Links",
    "make_doc_url",
    "make_src_url",
    "synthesize_links",
]
