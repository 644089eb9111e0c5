"""Output document assembly and serialization."""

from report.build import Report, SkippedDeclaration, build_report
from report.models import OutputDef, OutputDocument
from report.write import dump_document, output_path_for, render_output, write_output

__all__ = [
    "OutputDef",
    "OutputDocument",
    "Report",
    "SkippedDeclaration",
    "build_report",
    "dump_document",
    "output_path_for",
    "render_output",
    "write_output",
]
