"""
PDF export by embedding a rasterized copy of the SVG.
"""
import io
import logging
from typing import Optional, Tuple

from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.core.renderer import SVGRasterizer
from svg_studio.errors import DecodeError, ExportAssemblyError
from svg_studio.export.base import BaseExporter
from svg_studio.models.diagnostic import Severity
from svg_studio.models.results import Bitmap, ExportResult

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    "A3": A3,
    "A4": A4,
    "A5": A5,
    "LEGAL": LEGAL,
    "LETTER": LETTER,
}

RENDER_FAILED_MESSAGE = "Failed to render SVG for PDF export. Check syntax."
SUCCESS_MESSAGE = "Successfully exported to PDF"


class PDFExporter(BaseExporter):
    """
    Builds a one-page PDF holding a PNG rendering of the document.

    The image sits at a fixed offset from the top-left corner with a fixed
    width and a height that keeps the bitmap's aspect ratio. Text and shapes
    become pixels; no PDF vector primitives are written.
    """

    extension = ".pdf"
    mime_type = "application/pdf"

    def __init__(
        self,
        log: DiagnosticsLog,
        rasterizer: Optional[SVGRasterizer] = None,
        base_name: str = "design",
        page_size: str = "A4",
        image_offset: Tuple[float, float] = (10, 10),
        image_width: float = 100,
    ):
        """
        Initialize the PDF exporter.

        Args:
            log: Diagnostics log that receives export outcomes
            rasterizer: Rasterizer used to turn SVG into pixels
            base_name: File name without extension
            page_size: Name of the page size (see PAGE_SIZES)
            image_offset: (x, y) of the image's top-left corner in millimetres
            image_width: Width of the image on the page in millimetres
        """
        super().__init__(log, base_name)
        if page_size.upper() not in PAGE_SIZES:
            raise ValueError(f"Unsupported page size: {page_size}. Use one of {', '.join(PAGE_SIZES)}.")

        self.rasterizer = rasterizer or SVGRasterizer()
        self.page_size = PAGE_SIZES[page_size.upper()]
        self.image_offset = image_offset
        self.image_width = image_width

    async def export(self, svg_code: str) -> ExportResult:
        """
        Rasterize SVG code and embed it in a new PDF.

        Args:
            svg_code: SVG code as a string

        Returns:
            ExportResult with the PDF payload, or the DecodeError /
            ExportAssemblyError that stopped the export
        """
        raster = await self.rasterizer.rasterize(svg_code)
        if not raster.ok:
            self.log.append(Severity.ERROR, RENDER_FAILED_MESSAGE)
            return ExportResult.failure(DecodeError(raster.error))

        try:
            pdf_data = self.assemble(raster.bitmap)
        except ExportAssemblyError as e:
            self.log.append(Severity.ERROR, f"Export failed: {e}")
            return ExportResult.failure(e)

        self.log.append(Severity.SUCCESS, SUCCESS_MESSAGE)
        return ExportResult.success(self.build_payload(pdf_data))

    def placement(self, bitmap: Bitmap) -> Tuple[float, float, float, float]:
        """
        Position of the image on the page in PDF points.

        Returns:
            Tuple of (x, y, width, height) with y measured from the page bottom
        """
        _, page_height = self.page_size
        offset_x, offset_y = self.image_offset
        width = self.image_width * mm
        height = width * bitmap.aspect_ratio
        return offset_x * mm, page_height - offset_y * mm - height, width, height

    def assemble(self, bitmap: Bitmap) -> bytes:
        """
        Encode the bitmap as PNG and write it onto a single PDF page.

        Args:
            bitmap: Rasterized document

        Returns:
            Serialized PDF bytes

        Raises:
            ExportAssemblyError: If encoding or PDF generation fails
        """
        try:
            png_buffer = io.BytesIO()
            bitmap.image.save(png_buffer, format='PNG')
            png_buffer.seek(0)

            pdf_buffer = io.BytesIO()
            document = canvas.Canvas(pdf_buffer, pagesize=self.page_size)
            x, y, width, height = self.placement(bitmap)
            document.drawImage(ImageReader(png_buffer), x, y, width=width, height=height, mask='auto')
            document.showPage()
            document.save()
        except Exception as e:
            raise ExportAssemblyError(str(e)) from e

        pdf_data = pdf_buffer.getvalue()
        logger.debug(f"Assembled {len(pdf_data)} byte PDF from {bitmap.width}x{bitmap.height} bitmap")
        return pdf_data
