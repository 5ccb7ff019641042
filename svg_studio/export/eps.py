"""
EPS export by passing the SVG source through unchanged.
"""
import logging

from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.export.base import BaseExporter
from svg_studio.models.diagnostic import Severity
from svg_studio.models.results import ExportedPayload

logger = logging.getLogger(__name__)

EPS_NOTICE = "Exported as EPS (Source SVG wrapped). Note: True EPS requires server-side processing."


class EPSExporter(BaseExporter):
    """
    Labels the raw SVG bytes as an EPS file.

    No conversion happens: the payload is the document itself under an
    EPS filename and MIME type. Always succeeds.
    """

    extension = ".eps"

    def __init__(
        self,
        log: DiagnosticsLog,
        base_name: str = "design",
        mime_type: str = "application/postscript",
    ):
        super().__init__(log, base_name)
        self._mime_type = mime_type

    @property
    def mime_type(self) -> str:
        return self._mime_type

    def export(self, svg_code: str) -> ExportedPayload:
        """
        Wrap SVG code in an EPS-named payload.

        Args:
            svg_code: SVG code as a string

        Returns:
            Payload whose bytes are the UTF-8 encoded source (lone
            surrogates are passed through so the bytes always round-trip)
        """
        payload = self.build_payload(svg_code.encode('utf-8', errors='surrogatepass'))
        logger.debug(f"Wrapped {len(payload)} bytes of SVG source as {payload.filename}")
        self.log.append(Severity.INFO, EPS_NOTICE)
        return payload
