"""PNG encoding."""

from __future__ import annotations

from typing import Optional

from PIL import Image

from .renderer import Renderer, default_renderer
from .result import Result

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def encode_to_png(
    image: Image.Image, renderer: Optional[Renderer] = None
) -> Result[bytes]:
    """Capture ``image`` into a bitmap of the same size and encode it as PNG.

    Parameters
    ----------
    image
        Image to encode.
    renderer
        Backend to draw and encode with. Defaults to a Pillow renderer.

    Returns
    -------
    Result
        PNG file contents, or a failure if capture or encoding failed.
    """

    renderer = renderer or default_renderer()
    return renderer.capture(image).then(renderer.encode_png)
