"""Translate a raw analysis dump into the typed declaration model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import orjson
from pydantic import ValidationError

from analysis.kinds import DeclKind
from analysis.models import (
    UNKNOWN_CRATE_NAME,
    CrateContext,
    Declaration,
    RawAnalysis,
    RawDef,
)
from errors import MalformedInputError, UnknownDeclarationKindError
from utils import split_qualname

logger = logging.getLogger(__name__)

RawInput = bytes | bytearray | str | Mapping[str, Any]


def _decode(raw: RawInput) -> Any:
    if isinstance(raw, Mapping):
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc}"
        raise MalformedInputError(msg) from exc


def _to_declaration(index: int, raw_def: RawDef) -> Declaration:
    kind = DeclKind.from_wire(raw_def.kind)
    if kind is None:
        raise UnknownDeclarationKindError(raw_def.kind, index)

    segments = split_qualname(raw_def.qualname)
    if not all(segments):
        msg = f"defs[{index}]: qualname {raw_def.qualname!r} has an empty segment"
        raise MalformedInputError(msg)

    return Declaration(
        kind=kind,
        id=raw_def.id,
        span=raw_def.span,
        display_name=raw_def.name,
        qualified_name=raw_def.qualname,
        value=raw_def.value,
    )


def parse(raw: RawInput) -> tuple[CrateContext, list[Declaration]]:
    """Parse an analysis dump.

    Args:
        raw: JSON bytes or text, or an already decoded mapping.

    Returns:
        The crate context and the declarations in input order.

    Raises:
        MalformedInputError: If the dump is not valid JSON, does not match the
            expected shape, or a qualname is empty or has an empty segment.
        UnknownDeclarationKindError: If a declaration kind is not recognized.
    """
    data = _decode(raw)
    if not isinstance(data, Mapping):
        msg = f"Expected a JSON object at top level, got {type(data).__name__}"
        raise MalformedInputError(msg)

    try:
        analysis = RawAnalysis.model_validate(data)
    except ValidationError as exc:
        msg = f"Schema validation failed: {exc}"
        raise MalformedInputError(msg) from exc

    if analysis.prelude is None:
        logger.debug("No prelude; using crate name %s", UNKNOWN_CRATE_NAME)
        context = CrateContext()
    else:
        context = CrateContext(crate_name=analysis.prelude.crate_name)

    declarations = [
        _to_declaration(index, raw_def) for index, raw_def in enumerate(analysis.defs)
    ]
    logger.debug(
        "Parsed %d declarations for crate %s", len(declarations), context.crate_name
    )
    return context, declarations
