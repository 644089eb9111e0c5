"""Documentation and source URL synthesis."""

from links.parents import ParentIndex
from links.synthesize import (
    DOC_BASE,
    SRC_BASE,
    LinkBases,
    Links,
    make_doc_url,
    make_src_url,
    synthesize_links,
)
from links.tags import TYPE_TAGS, type_tag

__all__ = [
    "DOC_BASE",
    "SRC_BASE",
    "TYPE_TAGS",
    "LinkBases",
    "Links",
    "ParentIndex",
    "make_doc_url",
    "make_src_url",
    "synthesize_links",
    "type_tag",
]
