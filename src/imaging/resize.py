"""Resizing and cropping helpers.

``resize`` stretches an image into an exact size. ``resize_preserving_aspect_ratio``
scales it so that it covers a target size without distortion, and
``crop_to_size`` takes the centered target-sized region of that result. Each
returns a :class:`~src.imaging.result.Result` rather than raising.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from PIL import Image

from .geometry import Rect, Size, aspect_fill_size, center_crop_rect
from .renderer import Renderer, default_renderer
from .result import Result

logger = logging.getLogger(__name__)

SizeLike = Union[Size, Tuple[float, float]]


def _as_size(size: SizeLike) -> Size:
    return size if isinstance(size, Size) else Size(*size)


def resize(
    image: Image.Image,
    size: SizeLike,
    renderer: Optional[Renderer] = None,
    resample: Optional[str] = None,
) -> Result[Image.Image]:
    """Stretch the whole image into exactly ``size``.

    The aspect ratio is not preserved.

    Parameters
    ----------
    image
        Source image.
    size
        Target (width, height). Fractional dimensions are floored.
    renderer
        Backend to draw with. Defaults to a Pillow renderer.
    resample
        Resampling method name.

    Returns
    -------
    Result
        The resized copy, or a failure for degenerate sizes.
    """

    renderer = renderer or default_renderer()
    source = Rect.from_size(Size.of(image))
    return renderer.sample(image, source, _as_size(size), resample)


def resize_preserving_aspect_ratio(
    image: Image.Image,
    size: SizeLike,
    renderer: Optional[Renderer] = None,
    resample: Optional[str] = None,
) -> Result[Image.Image]:
    """Scale by the larger of the width/height ratios so ``size`` is covered.

    Parameters
    ----------
    image
        Source image.
    size
        Size the result has to cover.
    renderer
        Backend to draw with. Defaults to a Pillow renderer.
    resample
        Resampling method name.

    Returns
    -------
    Result
        Image equal to ``size`` in the dominant dimension and at least as
        large in the other.
    """

    target = _as_size(size)
    source = Size.of(image)
    if source.is_degenerate or target.is_degenerate:
        reason = (
            f"cannot scale {image.width}x{image.height} "
            f"to {target.width}x{target.height}"
        )
        logger.warning("Rendering failed: %s", reason)
        return Result.failure(reason)

    try:
        new_size = aspect_fill_size(source, target)
    except OverflowError as exc:
        logger.warning("Rendering failed: %s", exc)
        return Result.failure(f"cannot scale to {target.width}x{target.height}: {exc}")
    logger.debug("Aspect fill %s -> %s for target %s", source, new_size, target)
    return resize(image, new_size, renderer=renderer, resample=resample)


def crop_to_size(
    image: Image.Image,
    size: SizeLike,
    renderer: Optional[Renderer] = None,
    resample: Optional[str] = None,
) -> Result[Image.Image]:
    """Scale to cover ``size`` then keep the centered ``size`` region.

    Parameters
    ----------
    image
        Source image.
    size
        Final (width, height).
    renderer
        Backend to draw with. Defaults to a Pillow renderer.
    resample
        Resampling method name.

    Returns
    -------
    Result
        Image of exactly ``size``.
    """

    renderer = renderer or default_renderer()
    target = _as_size(size)

    def _crop(resized: Image.Image) -> Result[Image.Image]:
        frame = center_crop_rect(Size.of(resized), target)
        logger.debug("Center crop %s from %dx%d", frame, *resized.size)
        return renderer.sample(resized, frame, frame.size, resample)

    return resize_preserving_aspect_ratio(
        image, target, renderer=renderer, resample=resample
    ).then(_crop)
