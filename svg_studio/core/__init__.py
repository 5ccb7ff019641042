"""
Core functionality for validating and rasterizing SVG documents.
"""

from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.core.renderer import CairoSVGBackend, RasterBackend, SVGRasterizer
from svg_studio.core.validator import SVGValidator

__all__ = [
    "CairoSVGBackend",
    "DiagnosticsLog",
    "RasterBackend",
    "SVGRasterizer",
    "SVGValidator",
]
