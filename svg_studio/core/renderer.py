"""
SVG rasterization for the raster-embedding export path.
"""
import asyncio
import io
import logging
from abc import ABC, abstractmethod
from concurrent.futures import Executor
from typing import Optional

from PIL import Image

from svg_studio.errors import DecodeError
from svg_studio.models.results import Bitmap, RasterResult

logger = logging.getLogger(__name__)


class RasterBackend(ABC):
    """
    Abstract base class for image-decoding backends.

    A backend turns encoded SVG bytes into a PIL Image at the image's
    intrinsic size.
    """

    @abstractmethod
    def decode(self, svg_data: bytes) -> Image.Image:
        """
        Decode SVG bytes into an image.

        Args:
            svg_data: UTF-8 encoded SVG source

        Returns:
            Decoded PIL Image

        Raises:
            DecodeError: If the source cannot be rendered
        """
        pass


class CairoSVGBackend(RasterBackend):
    """Renders SVG with cairosvg and reads the resulting PNG with Pillow."""

    def __init__(self):
        import cairosvg
        self.cairosvg = cairosvg

    def decode(self, svg_data: bytes) -> Image.Image:
        try:
            png_data = self.cairosvg.svg2png(bytestring=svg_data)
            image = Image.open(io.BytesIO(png_data))
            image.load()
        except Exception as e:
            raise DecodeError(f"Error rendering SVG: {e}") from e
        return image


class SVGRasterizer:
    """
    Converts SVG code to bitmaps without blocking the event loop.

    The backend call runs in an executor; awaiting it is the only point
    where an export suspends. Every request decodes independently.
    """

    def __init__(
        self,
        backend: Optional[RasterBackend] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize the rasterizer.

        Args:
            backend: Decoding backend (defaults to CairoSVGBackend)
            executor: Executor for the blocking decode (defaults to the loop's)
        """
        self._backend = backend
        self.executor = executor

    @property
    def backend(self) -> RasterBackend:
        # cairosvg needs the native cairo library, so load it on first use
        if self._backend is None:
            self._backend = CairoSVGBackend()
        return self._backend

    async def rasterize(self, svg_code: str) -> RasterResult:
        """
        Convert SVG code to a bitmap.

        Args:
            svg_code: SVG code as a string

        Returns:
            RasterResult holding the bitmap, or the decode failure reason
        """
        try:
            svg_data = svg_code.encode('utf-8')
        except UnicodeEncodeError as e:
            return RasterResult.failure(f"Cannot encode SVG source: {e}")
        loop = asyncio.get_running_loop()

        try:
            image = await loop.run_in_executor(self.executor, self.backend.decode, svg_data)
        except DecodeError as e:
            logger.warning(f"Decode failed: {e}")
            logger.debug(f"Problematic SVG code: {svg_code[:100]}...")
            return RasterResult.failure(str(e))

        width, height = image.size
        if width <= 0 or height <= 0:
            return RasterResult.failure(f"Decoded image has no area: {width}x{height}")

        # Copy onto a fresh buffer at the intrinsic size
        canvas = Image.new('RGBA', (width, height), (0, 0, 0, 0))
        canvas.paste(image.convert('RGBA'), (0, 0))
        logger.debug(f"Rasterized SVG to {width}x{height} bitmap")
        return RasterResult.success(Bitmap(canvas))
