"""
SVG Studio - validate SVG documents as they are edited and export them.

This package checks every edit of an SVG document for well-formedness,
keeps a diagnostics log of the results, and exports the document as a
raster-embedded PDF or as source-passthrough EPS.
"""

__version__ = "0.1.0"

from svg_studio.config import DEFAULT_CONFIG, DEFAULT_SVG
from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.core.renderer import CairoSVGBackend, RasterBackend, SVGRasterizer
from svg_studio.core.validator import SVGValidator
from svg_studio.export.eps import EPSExporter
from svg_studio.export.pdf import PDFExporter
from svg_studio.models import (
    Bitmap,
    Diagnostic,
    ExportedPayload,
    ExportResult,
    RasterResult,
    Severity,
    ValidationResult,
)
from svg_studio.session import EditorSession

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SVG",
    "Bitmap",
    "CairoSVGBackend",
    "Diagnostic",
    "DiagnosticsLog",
    "EditorSession",
    "EPSExporter",
    "ExportedPayload",
    "ExportResult",
    "PDFExporter",
    "RasterBackend",
    "RasterResult",
    "SVGRasterizer",
    "SVGValidator",
    "Severity",
    "ValidationResult",
]
