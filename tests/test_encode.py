import io

from PIL import Image

from src.imaging.encode import PNG_SIGNATURE, encode_to_png
from src.imaging.renderer import PillowRenderer
from src.imaging.result import Result


def test_encode_solid_image_has_png_signature():
    img = Image.new("RGB", (10, 10), color=(0, 128, 255))
    data = encode_to_png(img).unwrap()
    assert data.startswith(PNG_SIGNATURE)


def test_encoded_png_decodes_to_same_pixels():
    img = Image.new("RGBA", (12, 7), color=(200, 10, 10, 128))
    data = encode_to_png(img).unwrap()
    with Image.open(io.BytesIO(data)) as decoded:
        assert decoded.format == "PNG"
        assert decoded.size == (12, 7)
        assert decoded.convert("RGBA").getpixel((3, 3)) == (200, 10, 10, 128)


def test_encode_empty_image_fails():
    result = encode_to_png(Image.new("RGB", (0, 0)))
    assert not result.ok


def test_encode_capture_failure_skips_encoding():
    class NoCapture(PillowRenderer):
        encoded = False

        def capture(self, image):
            return Result.failure("capture failed")

        def encode_png(self, bitmap):
            self.encoded = True
            return super().encode_png(bitmap)

    renderer = NoCapture()
    result = encode_to_png(Image.new("RGB", (4, 4)), renderer=renderer)
    assert result.reason == "capture failed"
    assert not renderer.encoded


def test_encode_png_rejects_unsupported_mode():
    bitmap = Image.new("CMYK", (4, 4))
    result = PillowRenderer().encode_png(bitmap)
    assert not result.ok
    assert "PNG encoding failed" in result.reason
