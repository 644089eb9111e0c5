"""Typed model of a compiled crate's analysis dump."""

from analysis.kinds import MEMBER_KINDS, PAGE_BEARING_KINDS, DeclKind
from analysis.models import (
    UNKNOWN_CRATE_NAME,
    CompilerId,
    CrateContext,
    Declaration,
    SpanData,
)
from analysis.parse import parse

__all__ = [
    "MEMBER_KINDS",
    "PAGE_BEARING_KINDS",
    "UNKNOWN_CRATE_NAME",
    "CompilerId",
    "CrateContext",
    "DeclKind",
    "Declaration",
    "SpanData",
    "parse",
]
