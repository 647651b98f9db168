"""Sizes, rectangles and the aspect-fill/center-crop arithmetic.

Nothing here touches pixels; the functions only compute the frames that
:mod:`src.imaging.resize` hands to a renderer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from PIL import Image


@dataclass(frozen=True)
class Size:
    """A ``(width, height)`` pair. Dimensions may be real-valued."""

    width: float
    height: float

    @classmethod
    def of(cls, image: Image.Image) -> "Size":
        """Size of a Pillow image."""

        return cls(image.width, image.height)

    @property
    def pixels(self) -> Tuple[int, int]:
        """Integer pixel frame, each dimension floored."""

        return math.floor(self.width), math.floor(self.height)

    @property
    def is_degenerate(self) -> bool:
        """True when the pixel frame would have no area or is not finite."""

        if not (math.isfinite(self.width) and math.isfinite(self.height)):
            return True
        width, height = self.pixels
        return width < 1 or height < 1


@dataclass(frozen=True)
class Rect:
    """A sub-region ``(x, y, width, height)`` with a top-left origin."""

    x: float
    y: float
    width: float
    height: float

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def box(self) -> Tuple[float, float, float, float]:
        """Pillow-style ``(left, upper, right, lower)`` box."""

        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        return cls(0, 0, size.width, size.height)


def aspect_fill_size(source: Size, target: Size) -> Size:
    """Scale ``source`` by the larger of the two target ratios.

    The result matches ``target`` in the dominant dimension and is at least as
    large as ``target`` in the other, so a centered crop of ``target`` always
    fits inside it. Ties resolve to the height ratio.

    Parameters
    ----------
    source
        Size of the image being scaled. Both dimensions must be positive.
    target
        Requested size.

    Returns
    -------
    Size
        Integer-valued size with the source aspect ratio, floored.
    """

    width_ratio = target.width / source.width
    height_ratio = target.height / source.height
    min_width, min_height = target.pixels

    # Multiply before dividing so exact integer results stay exact.
    if width_ratio > height_ratio:
        width = math.floor(source.width * target.width / source.width)
        height = math.floor(source.height * target.width / source.width)
    else:
        width = math.floor(source.width * target.height / source.height)
        height = math.floor(source.height * target.height / source.height)

    return Size(max(width, min_width), max(height, min_height))


def center_crop_rect(source: Size, target: Size) -> Rect:
    """Rectangle of ``target`` size centered inside ``source``.

    Parameters
    ----------
    source
        Size of the image being cropped.
    target
        Size of the region to keep.

    Returns
    -------
    Rect
        Crop region; odd margins leave the extra pixel on the right/bottom.
    """

    width, height = target.pixels
    # Top-left origin: an odd margin leaves the extra column on the right and
    # the extra row at the bottom.
    x = math.floor((source.width - width) / 2)
    y = math.floor((source.height - height) / 2)
    return Rect(x, y, width, height)
