"""Wire and in-memory models for analysis dumps.

Wire shapes are pydantic models validated straight from decoded JSON. The
normalized ``Declaration`` and ``CrateContext`` are frozen dataclasses so
they can be shared between worker threads without copying.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator

from analysis.kinds import DeclKind

UNKNOWN_CRATE_NAME = "<unknown>"

U32_MAX = 2**32 - 1


class CompilerId(BaseModel):
    """Compiler-assigned identifier of a declaration."""

    model_config = ConfigDict(frozen=True)

    krate: int = Field(ge=0, le=U32_MAX, strict=True)
    index: int = Field(ge=0, le=U32_MAX, strict=True)


class SpanData(BaseModel):
    """Source location of a declaration.

    Lines and columns are 1-based; ``file_name`` is relative to the crate root.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(strict=True)
    byte_start: int = Field(ge=0, le=U32_MAX, strict=True)
    byte_end: int = Field(ge=0, le=U32_MAX, strict=True)
    line_start: int = Field(ge=1, strict=True)
    line_end: int = Field(ge=1, strict=True)
    column_start: int = Field(ge=1, strict=True)
    column_end: int = Field(ge=1, strict=True)

    @model_validator(mode="after")
    def check_ranges(self) -> SpanData:
        if self.line_start > self.line_end:
            msg = f"line_start {self.line_start} is after line_end {self.line_end}"
            raise ValueError(msg)
        if self.byte_start > self.byte_end:
            msg = f"byte_start {self.byte_start} is after byte_end {self.byte_end}"
            raise ValueError(msg)
        return self


class CratePreludeData(BaseModel):
    crate_name: str = Field(strict=True)


class RawDef(BaseModel):
    """A declaration exactly as it appears in the dump.

    Scalars are validated strictly so ids and spans pass through unchanged.
    """

    kind: str = Field(strict=True)
    id: CompilerId
    span: SpanData
    name: str = Field(strict=True)
    qualname: str = Field(strict=True)
    value: str = Field(strict=True)


class RawAnalysis(BaseModel):
    """Top-level analysis dump. Unrecognized sections are ignored."""

    prelude: CratePreludeData | None = None
    defs: list[RawDef]


@dataclass(frozen=True)
class CrateContext:
    """Crate-level metadata shared by every declaration of one dump."""

    crate_name: str = UNKNOWN_CRATE_NAME


@dataclass(frozen=True)
class Declaration:
    """A named, located item of the analyzed crate."""

    kind: DeclKind
    id: CompilerId
    span: SpanData
    display_name: str
    qualified_name: str
    value: str


__all__ = [
    "UNKNOWN_CRATE_NAME",
    "U32_MAX",
    "CompilerId",
    "CrateContext",
    "CratePreludeData",
    "Declaration",
    "RawAnalysis",
    "RawDef",
    "SpanData",
]
