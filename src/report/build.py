"""Assemble an output document from parsed declarations."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from errors import SynthesisError
from links.parents import ParentIndex
from links.synthesize import LinkBases, synthesize_links
from report.models import OutputDef, OutputDocument

if TYPE_CHECKING:
    from collections.abc import Sequence

    from analysis.models import CrateContext, Declaration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedDeclaration:
    """A declaration left out of the output, with the reason."""

    declaration: Declaration
    reason: str


@dataclass
class Report:
    document: OutputDocument
    skipped: list[SkippedDeclaration] = field(default_factory=list)


def _output_def(
    crate: CrateContext,
    decl: Declaration,
    parents: ParentIndex,
    bases: LinkBases,
) -> OutputDef | SynthesisError:
    try:
        links = synthesize_links(crate, decl, parents, bases)
    except SynthesisError as exc:
        return exc
    return OutputDef(
        kind=decl.kind.value,
        id=decl.id,
        name=decl.display_name,
        qualname=decl.qualified_name,
        value=decl.value,
        doc_url=links.doc_url,
        src_url=links.src_url,
    )


def build_report(
    crate: CrateContext,
    declarations: Sequence[Declaration],
    *,
    bases: LinkBases | None = None,
    workers: int = 1,
) -> Report:
    """Synthesize links for every declaration.

    A declaration whose links cannot be synthesized is omitted from the
    document and recorded in ``Report.skipped``; its siblings are unaffected.
    Records keep input order whatever the number of workers.

    Args:
        crate: Crate context of the dump.
        declarations: Declarations in input order.
        bases: Documentation and source site roots.
        workers: Number of threads; 1 runs inline.
    """
    bases = bases or LinkBases()
    parents = ParentIndex.build(declarations)

    def _one(decl: Declaration) -> OutputDef | SynthesisError:
        return _output_def(crate, decl, parents, bases)

    if workers > 1 and len(declarations) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(_one, declarations))
    else:
        results = [_one(decl) for decl in declarations]

    defs: list[OutputDef] = []
    skipped: list[SkippedDeclaration] = []
    for result in results:
        if isinstance(result, SynthesisError):
            logger.warning("Skipping declaration: %s", result)
            skipped.append(
                SkippedDeclaration(declaration=result.declaration, reason=str(result))
            )
        else:
            defs.append(result)

    return Report(
        document=OutputDocument(crate_name=crate.crate_name, defs=defs),
        skipped=skipped,
    )


__all__ = ["Report", "SkippedDeclaration", "build_report"]
