"""Read-only index from qualified name to page-bearing declaration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from analysis.kinds import PAGE_BEARING_KINDS
from analysis.models import Declaration
from utils import parent_qualname


@dataclass(frozen=True)
class ParentIndex:
    """Containers that member declarations anchor into, keyed by qualname.

    Built once before synthesis and never mutated afterwards, so it can be
    read from several worker threads.
    """

    by_qualname: Mapping[str, Declaration] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(cls, declarations: Iterable[Declaration]) -> ParentIndex:
        """Index every page-bearing declaration in a single pass.

        When two containers share a qualname the first one in input order wins.
        """
        index: dict[str, Declaration] = {}
        for decl in declarations:
            if decl.kind in PAGE_BEARING_KINDS:
                index.setdefault(decl.qualified_name, decl)
        return cls(by_qualname=MappingProxyType(index))

    def parent_of(self, decl: Declaration) -> Declaration | None:
        """Return the container of ``decl``, if it is indexed."""
        return self.by_qualname.get(parent_qualname(decl.qualified_name))

    def __len__(self) -> int:
        return len(self.by_qualname)


__all__ = ["ParentIndex"]
