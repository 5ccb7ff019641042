"""
Data models for the validation and export pipeline.
"""

from svg_studio.models.diagnostic import Diagnostic, Severity
from svg_studio.models.results import (
    Bitmap,
    ExportedPayload,
    ExportResult,
    RasterResult,
    ValidationResult,
)

__all__ = [
    "Bitmap",
    "Diagnostic",
    "ExportedPayload",
    "ExportResult",
    "RasterResult",
    "Severity",
    "ValidationResult",
]
