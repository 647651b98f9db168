"""Raster backends used by the resize, crop and encode helpers.

A renderer knows three things: how to sample a region of an image into a new
frame, how to capture an image into a plain bitmap, and how to serialize that
bitmap as PNG. :class:`PillowRenderer` binds them to Pillow; anything else
with the same methods can be passed to the helpers instead.
"""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Protocol, Tuple

from PIL import Image

from config import CONFIG, PngOptions
from .geometry import Rect, Size
from .io_utils import map_resample
from .result import Result

logger = logging.getLogger(__name__)

# Errors Pillow raises for unreadable sources, bad boxes, oversized frames and
# exhausted buffers.
RENDER_ERRORS = (OSError, ValueError, MemoryError, OverflowError)


class Renderer(Protocol):
    def sample(
        self,
        image: Image.Image,
        source: Rect,
        frame: Size,
        resample: Optional[str] = None,
    ) -> Result[Image.Image]: ...

    def capture(self, image: Image.Image) -> Result[Image.Image]: ...

    def encode_png(self, bitmap: Image.Image) -> Result[bytes]: ...


@contextmanager
def drawing_context(size: Tuple[int, int], mode: str) -> Iterator[Image.Image]:
    """Acquire a blank canvas to draw into.

    The canvas is closed if the block raises; on a clean exit ownership passes
    to the caller.

    Parameters
    ----------
    size
        Pixel frame of the canvas.
    mode
        Pillow mode, e.g. ``"RGBA"``.

    Yields
    ------
    Image.Image
        Fully transparent canvas of ``size``.
    """

    canvas = Image.new(mode, size)
    try:
        yield canvas
    except BaseException:
        canvas.close()
        raise


def _integral(values) -> bool:
    return all(float(v).is_integer() for v in values)


class PillowRenderer:
    """Renderer backed by Pillow.

    Parameters
    ----------
    resample
        Default resampling method name when ``sample`` gets none.
    mode
        Mode of canvases and captured bitmaps.
    png
        Options for the PNG writer.
    """

    def __init__(
        self,
        resample: Optional[str] = None,
        mode: Optional[str] = None,
        png: Optional[PngOptions] = None,
    ) -> None:
        self.resample = resample or CONFIG.behavior.resample
        self.mode = mode or CONFIG.canvas_mode
        self.png = png or CONFIG.png

    def _as_mode(self, image: Image.Image) -> Image.Image:
        return image if image.mode == self.mode else image.convert(self.mode)

    def sample(
        self,
        image: Image.Image,
        source: Rect,
        frame: Size,
        resample: Optional[str] = None,
    ) -> Result[Image.Image]:
        """Draw ``source`` (a region of ``image``) so it fills ``frame``.

        A region that already has the frame's pixel size is copied as is;
        anything else is resampled.
        """

        if frame.is_degenerate:
            return self._fail(f"cannot draw into a {frame.width}x{frame.height} frame")
        if source.size.is_degenerate:
            return self._fail(
                f"cannot sample a {source.width}x{source.height} source region"
            )

        pixels = frame.pixels
        method = resample or self.resample
        try:
            with drawing_context(pixels, self.mode) as canvas:
                src = self._as_mode(image)
                if source.size.pixels == pixels and _integral(source.box):
                    region = src.crop(tuple(int(v) for v in source.box))
                else:
                    region = src.resize(pixels, map_resample(method), box=source.box)
                canvas.paste(region, (0, 0))
        except RENDER_ERRORS as exc:
            return self._fail(f"sampling {source.box} into {pixels} failed: {exc}")

        logger.debug("Sampled %s into %s using %s", source.box, pixels, method)
        return Result.success(canvas)

    def capture(self, image: Image.Image) -> Result[Image.Image]:
        """Render ``image`` into a bitmap of the same dimensions."""

        size = Size.of(image)
        if size.is_degenerate:
            return self._fail(f"cannot capture a {image.width}x{image.height} image")
        try:
            with drawing_context(size.pixels, self.mode) as bitmap:
                bitmap.paste(self._as_mode(image), (0, 0))
        except RENDER_ERRORS as exc:
            return self._fail(f"bitmap capture failed: {exc}")
        return Result.success(bitmap)

    def encode_png(self, bitmap: Image.Image) -> Result[bytes]:
        """Serialize ``bitmap`` with Pillow's PNG writer."""

        try:
            with io.BytesIO() as buffer:
                bitmap.save(
                    buffer,
                    format="PNG",
                    optimize=self.png.optimize,
                    compress_level=self.png.compress_level,
                )
                data = buffer.getvalue()
        except RENDER_ERRORS as exc:
            return self._fail(f"PNG encoding failed: {exc}")

        logger.debug("Encoded %dx%d bitmap to %d PNG bytes", *bitmap.size, len(data))
        return Result.success(data)

    @staticmethod
    def _fail(reason: str) -> Result:
        logger.warning("Rendering failed: %s", reason)
        return Result.failure(reason)


def default_renderer() -> PillowRenderer:
    """Pillow renderer built from the current ``CONFIG``."""

    return PillowRenderer()
