import pytest
from PIL import Image

from src.imaging.geometry import (
    Rect,
    Size,
    aspect_fill_size,
    center_crop_rect,
)


def test_size_of_image():
    img = Image.new("RGB", (30, 20))
    assert Size.of(img) == Size(30, 20)


def test_pixels_are_floored():
    assert Size(10.9, 4.2).pixels == (10, 4)


@pytest.mark.parametrize(
    "size",
    [
        Size(0, 0),
        Size(0, 10),
        Size(10, 0.5),
        Size(float("inf"), 10),
        Size(10, float("-inf")),
        Size(float("nan"), 10),
    ],
)
def test_degenerate_sizes(size):
    assert size.is_degenerate


def test_rect_box():
    assert Rect(25, 0, 50, 50).box == (25, 0, 75, 50)


def test_aspect_fill_wide_source_scales_by_height_ratio():
    # width ratio 0.25, height ratio 0.5
    assert aspect_fill_size(Size(200, 100), Size(50, 50)) == Size(100, 50)


def test_aspect_fill_tall_source_scales_by_width_ratio():
    assert aspect_fill_size(Size(100, 400), Size(64, 64)) == Size(64, 256)


def test_aspect_fill_upscales_small_sources():
    assert aspect_fill_size(Size(16, 8), Size(128, 128)) == Size(256, 128)


@pytest.mark.parametrize(
    "source, target",
    [
        ((3, 7), (7, 7)),
        ((333, 1000), (49, 17)),
        ((1023, 767), (512, 512)),
        ((17, 13), (1000, 1)),
        ((640, 480), (1024, 1024)),
    ],
)
def test_aspect_fill_covers_target(source, target):
    result = aspect_fill_size(Size(*source), Size(*target))
    assert result.width >= target[0]
    assert result.height >= target[1]
    # equality in the dominant dimension
    assert result.width == target[0] or result.height == target[1]
    # aspect ratio kept up to flooring
    scale = max(target[0] / source[0], target[1] / source[1])
    assert result.width == pytest.approx(source[0] * scale, abs=1)
    assert result.height == pytest.approx(source[1] * scale, abs=1)


def test_center_crop_rect():
    assert center_crop_rect(Size(100, 50), Size(50, 50)) == Rect(25, 0, 50, 50)


def test_center_crop_rect_odd_margin_floors():
    assert center_crop_rect(Size(101, 60), Size(50, 50)) == Rect(25, 5, 50, 50)
