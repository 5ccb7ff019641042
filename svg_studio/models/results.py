"""
Typed outcomes passed between the validator, rasterizer and exporters.
"""
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from svg_studio.errors import ExportError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation pass: valid, or invalid with a short reason."""
    valid: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, reason=reason)

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class Bitmap:
    """RGBA pixel grid at the decoded image's intrinsic size."""
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self):
        return self.image.size

    @property
    def aspect_ratio(self) -> float:
        """Height over width."""
        return self.height / self.width


@dataclass(frozen=True)
class RasterResult:
    """Either a bitmap or the reason decoding failed."""
    bitmap: Optional[Bitmap] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.bitmap is not None

    @classmethod
    def success(cls, bitmap: Bitmap) -> "RasterResult":
        return cls(bitmap=bitmap)

    @classmethod
    def failure(cls, error: str) -> "RasterResult":
        return cls(error=error)


@dataclass(frozen=True)
class ExportedPayload:
    """Terminal export value handed to the persistence collaborator."""
    data: bytes
    filename: str
    mime_type: str

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ExportResult:
    """Either an exported payload or the error that ended the export."""
    payload: Optional[ExportedPayload] = None
    error: Optional[ExportError] = None

    @property
    def ok(self) -> bool:
        return self.payload is not None

    @classmethod
    def success(cls, payload: ExportedPayload) -> "ExportResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: ExportError) -> "ExportResult":
        return cls(error=error)
