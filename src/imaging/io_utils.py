"""I/O utilities and helpers for image processing.

This module provides helpers to open a source image, write encoded PNG bytes
to disk, and map resampling method names to Pillow constants.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from config import IMAGE_EXTENSIONS


def is_image_path(path: Path) -> bool:
    """Whether ``path`` has one of the accepted image extensions."""

    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


def ensure_dir(path: Path) -> None:
    """Create a directory if it does not exist.

    Parameters
    ----------
    path
        Directory path to create.
    """

    Path(path).mkdir(parents=True, exist_ok=True)


def load_image(image_path: Path) -> Image.Image:
    """Load an image fully into memory.

    Parameters
    ----------
    image_path
        Path to the image file.

    Returns
    -------
    Image.Image
        The decoded image, detached from the file handle.

    Raises
    ------
    FileNotFoundError
        If the path does not point to a file.
    ValueError
        If the file is not a supported image.
    """

    path = Path(image_path)
    if not path.is_file():
        raise FileNotFoundError(f"Image not found: {path}")
    if not is_image_path(path):
        raise ValueError(f"Unsupported image extension: {path.suffix}")

    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except UnidentifiedImageError as exc:
        raise ValueError(f"Not an image: {path}") from exc
    except OSError as exc:
        raise ValueError(f"Could not decode {path}: {exc}") from exc


def write_png(data: bytes, dest_path: Path, overwrite: bool = False) -> Path:
    """Write encoded PNG bytes to disk.

    Parameters
    ----------
    data
        PNG file contents.
    dest_path
        Destination path. Parent directories are created as needed.
    overwrite
        Whether an existing file may be replaced.

    Returns
    -------
    Path
        The written path.
    """

    dest_path = Path(dest_path)
    if dest_path.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite {dest_path}")
    ensure_dir(dest_path.parent)
    dest_path.write_bytes(data)
    return dest_path


def map_resample(name: str) -> int:
    """Map a resample name to a Pillow constant.

    Parameters
    ----------
    name
        One of 'nearest', 'bilinear', 'bicubic', 'lanczos'.

    Returns
    -------
    int
        Pillow resampling constant.
    """

    name_lower = (name or "").lower()
    if name_lower == "nearest":
        return Image.NEAREST
    if name_lower == "bilinear":
        return Image.BILINEAR
    if name_lower == "bicubic":
        return Image.BICUBIC
    return Image.LANCZOS
