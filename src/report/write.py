"""Serialize output documents and write them beside their inputs."""

from __future__ import annotations

import logging
from pathlib import Path

import orjson

from analysis.parse import RawInput, parse
from report.build import Report, build_report
from report.models import OutputDocument
from rules.config import DocLinksConfig

logger = logging.getLogger(__name__)


def dump_document(document: OutputDocument) -> bytes:
    """Serialize an output document with sorted keys."""
    return orjson.dumps(document.model_dump(), option=orjson.OPT_SORT_KEYS)


def render_output(
    raw: RawInput,
    config: DocLinksConfig | None = None,
) -> tuple[bytes, Report]:
    """Parse an analysis dump and render its output document.

    Raises:
        MalformedInputError: If the dump cannot be parsed. Nothing is rendered.
    """
    config = config or DocLinksConfig()
    crate, declarations = parse(raw)
    report = build_report(
        crate,
        declarations,
        bases=config.link_bases(),
        workers=config.workers,
    )
    return dump_document(report.document), report


def output_path_for(input_path: Path, config: DocLinksConfig) -> Path:
    return input_path.with_name(input_path.name + config.output_suffix)


def write_output(input_path: Path, config: DocLinksConfig | None = None) -> Report:
    """Render the output for ``input_path`` and write it beside the input.

    The output file is only written when the whole input parses.
    """
    config = config or DocLinksConfig()
    payload, report = render_output(input_path.read_bytes(), config)
    out_path = output_path_for(input_path, config)
    out_path.write_bytes(payload)
    logger.info(
        "Wrote %d records to %s (%d skipped)",
        len(report.document.defs),
        out_path,
        len(report.skipped),
    )
    return report
