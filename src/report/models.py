"""Output document models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from analysis.models import CompilerId


class OutputDef(BaseModel):
    """One declaration with its synthesized links."""

    model_config = ConfigDict(frozen=True)

    kind: str
    id: CompilerId
    name: str
    qualname: str
    value: str
    doc_url: str
    src_url: str


class OutputDocument(BaseModel):
    """Links for every declaration of one analysis dump, in input order."""

    model_config = ConfigDict(frozen=True)

    crate_name: str
    defs: list[OutputDef]


__all__ = ["OutputDef", "OutputDocument"]
