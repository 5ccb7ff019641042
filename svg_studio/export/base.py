"""
Base exporter interface shared by the output formats.
"""
from abc import ABC, abstractmethod

from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.models.results import ExportedPayload


class BaseExporter(ABC):
    """
    Abstract base class for document exporters.

    Subclasses name their file extension and MIME type and record the
    outcome of each export in the session's diagnostics log.
    """

    def __init__(self, log: DiagnosticsLog, base_name: str = "design"):
        """
        Args:
            log: Diagnostics log that receives export outcomes
            base_name: File name without extension
        """
        self.log = log
        self.base_name = base_name

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension including the leading dot."""
        pass

    @property
    @abstractmethod
    def mime_type(self) -> str:
        pass

    @property
    def filename(self) -> str:
        return f"{self.base_name}{self.extension}"

    def build_payload(self, data: bytes) -> ExportedPayload:
        return ExportedPayload(data=data, filename=self.filename, mime_type=self.mime_type)
