"""Global configuration for the icon image prep helpers.

This module centralizes defaults and user-tunable settings for:
- accepted input image formats
- resampling used when resizing/cropping
- PNG encoding options

All values can be overridden via CLI flags or direct imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Supported file extensions for input images. Output is always PNG.
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".bmp", ".tiff", ".gif"}


RESAMPLE_METHOD = "lanczos"  # one of {nearest, bilinear, bicubic, lanczos}


# Color mode of freshly created canvases and captured bitmaps.
CANVAS_MODE = "RGBA"


@dataclass
class Behavior:
    """Processing behavior toggles.

    Attributes
    ----------
    resample
        Resampling method for resizing operations. One of: 'nearest', 'bilinear',
        'bicubic', 'lanczos'.
    overwrite
        Whether the CLI may overwrite an existing output file.
    """

    resample: str = RESAMPLE_METHOD
    overwrite: bool = False


@dataclass
class PngOptions:
    """Options passed to Pillow's PNG writer.

    Attributes
    ----------
    optimize
        Let the encoder search for the smallest output.
    compress_level
        zlib compression level, 0-9. Ignored by Pillow when ``optimize`` is set.
    """

    optimize: bool = True
    compress_level: int = 6


@dataclass
class ProjectConfig:
    """Top-level configuration container.

    Attributes
    ----------
    behavior
        Execution-time toggles.
    png
        PNG encoding options.
    canvas_mode
        Pillow mode of drawing canvases.
    """

    behavior: Behavior = field(default_factory=Behavior)
    png: PngOptions = field(default_factory=PngOptions)
    canvas_mode: str = CANVAS_MODE


# Default singleton-style config instance used by CLI unless overridden
CONFIG = ProjectConfig()
