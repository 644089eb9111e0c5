"""Determinism verification for doclinks output files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from report.write import output_path_for, render_output
from rules.config import DocLinksConfig

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class DeterminismResult:
    input_path: Path
    output_path: Path
    missing: bool = False
    mismatch: bool = False

    @property
    def ok(self) -> bool:
        return not self.missing and not self.mismatch


def verify_determinism(
    input_path: Path,
    config: DocLinksConfig | None = None,
) -> DeterminismResult:
    """Verify that an existing output file matches a fresh rendering.

    Regenerates the output for ``input_path`` in memory and compares it
    byte-for-byte with the output file written next to it.

    Args:
        input_path: Analysis dump the output was generated from.
        config: Configuration used for rendering and output naming.

    Returns:
        DeterminismResult flagging a missing or mismatched output file.

    Raises:
        FileNotFoundError: If ``input_path`` does not exist.
        MalformedInputError: If ``input_path`` cannot be parsed.
    """
    config = config or DocLinksConfig()
    if not input_path.is_file():
        msg = f"Input file does not exist: {input_path}"
        raise FileNotFoundError(msg)

    output_path = output_path_for(input_path, config)
    regenerated, _ = render_output(input_path.read_bytes(), config)

    if not output_path.is_file():
        return DeterminismResult(
            input_path=input_path, output_path=output_path, missing=True
        )

    return DeterminismResult(
        input_path=input_path,
        output_path=output_path,
        mismatch=output_path.read_bytes() != regenerated,
    )
