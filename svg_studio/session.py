"""
Editing session that ties the document to validation and export.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from svg_studio.config import DEFAULT_SVG, build_config
from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.core.renderer import SVGRasterizer
from svg_studio.core.validator import SVGValidator
from svg_studio.export.eps import EPSExporter
from svg_studio.export.pdf import PDFExporter
from svg_studio.models.diagnostic import Diagnostic
from svg_studio.models.results import ExportedPayload, ExportResult, ValidationResult

logger = logging.getLogger(__name__)


class EditorSession:
    """
    Owns the current document snapshot and the session's diagnostics log.

    Every new snapshot is validated immediately. Validation passes are never
    skipped or discarded, so diagnostics arrive in the order edits were made,
    even for snapshots that have since been replaced.
    """

    def __init__(
        self,
        document: str = DEFAULT_SVG,
        config: Optional[Dict[str, Any]] = None,
        log: Optional[DiagnosticsLog] = None,
        rasterizer: Optional[SVGRasterizer] = None,
    ):
        """
        Initialize the session and validate the initial document.

        Args:
            document: Initial SVG source
            config: Configuration overrides (see DEFAULT_CONFIG)
            log: Diagnostics log to adopt instead of creating a new one
            rasterizer: Rasterizer for PDF export (defaults to cairosvg)
        """
        self.config = build_config(config)
        if log is None:
            log = DiagnosticsLog(timestamp_format=self.config["timestamp_format"])
        self.log = log

        self.validator = SVGValidator(self.log)
        self.pdf_exporter = PDFExporter(
            self.log,
            rasterizer=rasterizer,
            base_name=self.config["base_filename"],
            page_size=self.config["pdf_page_size"],
            image_offset=self.config["pdf_image_offset"],
            image_width=self.config["pdf_image_width"],
        )
        self.eps_exporter = EPSExporter(
            self.log,
            base_name=self.config["base_filename"],
            mime_type=self.config["eps_mime_type"],
        )

        self._document = document
        self.last_result = self.validator.validate(document)

    @property
    def document(self) -> str:
        return self._document

    def update(self, document: str) -> ValidationResult:
        """
        Replace the document with a new snapshot and validate it.

        Args:
            document: Complete new SVG source

        Returns:
            Result of validating the new snapshot
        """
        self._document = document
        self.last_result = self.validator.validate(document)
        return self.last_result

    async def export_pdf(self) -> ExportResult:
        """Export the current snapshot as a raster-embedded PDF."""
        document = self._document
        logger.info("Starting PDF export")
        return await self.pdf_exporter.export(document)

    def schedule_pdf_export(self) -> "asyncio.Task[ExportResult]":
        """
        Start a PDF export of the current snapshot as a task.

        Must be called from a running event loop. The returned task can be
        awaited or cancelled; later edits do not affect it.
        """
        return asyncio.ensure_future(self.pdf_exporter.export(self._document))

    def export_eps(self) -> ExportedPayload:
        """Export the current snapshot as source-passthrough EPS."""
        logger.info("Starting EPS export")
        return self.eps_exporter.export(self._document)

    def problems(self) -> List[Diagnostic]:
        return self.log.errors()

    def terminal(self) -> List[Diagnostic]:
        return self.log.entries()
