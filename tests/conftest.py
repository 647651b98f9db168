from PIL import Image
import pytest

from src.imaging.renderer import PillowRenderer


class RecordingRenderer(PillowRenderer):
    """Pillow renderer that remembers every region it was asked to sample."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = []

    def sample(self, image, source, frame, resample=None):
        self.calls.append((image.size, source, frame))
        return super().sample(image, source, frame, resample)


@pytest.fixture
def wide_image():
    # 200x100, left half red, right half blue
    img = Image.new("RGB", (200, 100), color=(255, 0, 0))
    img.paste((0, 0, 255), (100, 0, 200, 100))
    return img


@pytest.fixture
def recorder():
    return RecordingRenderer(resample="nearest")
