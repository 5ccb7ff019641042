"""
Exporters that turn the edited SVG into PDF and EPS payloads.
"""

from svg_studio.export.base import BaseExporter
from svg_studio.export.eps import EPSExporter
from svg_studio.export.pdf import PDFExporter

__all__ = [
    "BaseExporter",
    "EPSExporter",
    "PDFExporter",
]
