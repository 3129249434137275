"""
Tests for hashing Pillow images
"""

import pytest

from blurhash_encoder import encode_rgb
from tests.helpers import make_gradient

Image = pytest.importorskip("PIL.Image")

from blurhash_encoder.image import encode_image  # noqa: E402


class TestEncodeImage:
    def test_white_image(self):
        image = Image.new("RGB", (1, 1), (255, 255, 255))
        assert encode_image(image, 4, 3) == "L~TSUA" + "~q" * 11

    def test_matches_raw_buffer(self):
        pixels = make_gradient(20, 10)
        image = Image.frombytes("RGB", (20, 10), pixels)
        assert encode_image(image, 4, 3) == encode_rgb(pixels, 20, 10, 4, 3)

    def test_alpha_is_dropped(self):
        rgb = Image.new("RGB", (8, 8), (40, 90, 200))
        rgba = Image.new("RGBA", (8, 8), (40, 90, 200, 10))
        assert encode_image(rgba, 3, 3) == encode_image(rgb, 3, 3)

    def test_grayscale_image(self):
        gray = Image.new("L", (5, 5), 77)
        rgb = Image.new("RGB", (5, 5), (77, 77, 77))
        assert encode_image(gray, 2, 2) == encode_image(rgb, 2, 2)

    def test_image_path(self, tmp_path):
        path = tmp_path / "gradient.png"
        pixels = make_gradient(12, 9)
        Image.frombytes("RGB", (12, 9), pixels).save(path)

        assert encode_image(path) == encode_rgb(pixels, 12, 9)
        assert encode_image(str(path), 2, 5) == encode_rgb(pixels, 12, 9, 2, 5)
