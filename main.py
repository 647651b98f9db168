"""CLI for icon image preparation.

Commands:
  - resize: Stretch an image to an exact size
  - fit: Resize while preserving aspect ratio so a size is covered
  - crop: Resize to cover a size, then center-crop to it
  - encode: Re-encode an image as PNG
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import click
from PIL import Image

from config import CONFIG
from src.imaging.encode import encode_to_png
from src.imaging.io_utils import load_image, write_png
from src.imaging.renderer import PillowRenderer
from src.imaging.resize import crop_to_size, resize, resize_preserving_aspect_ratio
from src.imaging.result import RenderingFailed, Result

RESAMPLE_CHOICES = ["nearest", "bilinear", "bicubic", "lanczos"]


def _size_options(func: Callable) -> Callable:
    func = click.option(
        "--height", type=click.FloatRange(min=0), required=True, help="Target height"
    )(func)
    func = click.option(
        "--width", type=click.FloatRange(min=0), required=True, help="Target width"
    )(func)
    return func


def _io_options(func: Callable) -> Callable:
    func = click.option(
        "--overwrite/--no-overwrite", default=CONFIG.behavior.overwrite
    )(func)
    func = click.option(
        "--output",
        type=click.Path(path_type=Path, dir_okay=False),
        required=True,
        help="Destination .png file",
    )(func)
    func = click.option(
        "--input-path",
        type=click.Path(path_type=Path, exists=True, dir_okay=False),
        required=True,
        help="Source image file",
    )(func)
    return func


def _resample_option(func: Callable) -> Callable:
    return click.option(
        "--resample",
        type=click.Choice(RESAMPLE_CHOICES, case_sensitive=False),
        default=CONFIG.behavior.resample,
    )(func)


def _run(
    input_path: Path,
    output: Path,
    overwrite: bool,
    renderer: PillowRenderer,
    transform: Callable[[Image.Image], Result[Image.Image]],
) -> None:
    if output.exists() and not overwrite:
        raise click.ClickException(f"{output} exists; pass --overwrite to replace it")
    try:
        image = load_image(input_path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--input-path") from exc

    try:
        data = transform(image).then(
            lambda img: encode_to_png(img, renderer=renderer)
        ).unwrap()
    except RenderingFailed as exc:
        raise click.ClickException(str(exc)) from exc

    write_png(data, output, overwrite=overwrite)
    click.echo(f"Wrote {output}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log computed sizes")
def cli(verbose: bool) -> None:
    """Icon image prep toolkit."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="resize")
@_io_options
@_size_options
@_resample_option
def cmd_resize(
    input_path: Path,
    output: Path,
    overwrite: bool,
    width: float,
    height: float,
    resample: str,
) -> None:
    """Stretch an image to exactly WIDTH x HEIGHT."""

    renderer = PillowRenderer(resample=resample)
    _run(
        input_path,
        output,
        overwrite,
        renderer,
        lambda img: resize(img, (width, height), renderer=renderer),
    )


@cli.command(name="fit")
@_io_options
@_size_options
@_resample_option
def cmd_fit(
    input_path: Path,
    output: Path,
    overwrite: bool,
    width: float,
    height: float,
    resample: str,
) -> None:
    """Resize without distortion so WIDTH x HEIGHT is fully covered."""

    renderer = PillowRenderer(resample=resample)
    _run(
        input_path,
        output,
        overwrite,
        renderer,
        lambda img: resize_preserving_aspect_ratio(
            img, (width, height), renderer=renderer
        ),
    )


@cli.command(name="crop")
@_io_options
@_size_options
@_resample_option
def cmd_crop(
    input_path: Path,
    output: Path,
    overwrite: bool,
    width: float,
    height: float,
    resample: str,
) -> None:
    """Cover WIDTH x HEIGHT, then keep the centered region of that size."""

    renderer = PillowRenderer(resample=resample)
    _run(
        input_path,
        output,
        overwrite,
        renderer,
        lambda img: crop_to_size(img, (width, height), renderer=renderer),
    )


@cli.command(name="encode")
@_io_options
def cmd_encode(input_path: Path, output: Path, overwrite: bool) -> None:
    """Re-encode an image as PNG at its current size."""

    _run(input_path, output, overwrite, PillowRenderer(), Result.success)


if __name__ == "__main__":
    cli()
