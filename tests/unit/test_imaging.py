import sys
import tempfile
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "render"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from termpix_core.errors import ImageLoadError
from termpix_core.imaging import image_to_pixel_buffer, load_image, load_pixel_buffer, resize_to_width


class ImagingTests(unittest.TestCase):
    def test_rgb_image_becomes_opaque_rgba(self):
        img = Image.new("RGB", (3, 2), (10, 20, 30))
        buffer = image_to_pixel_buffer(img)
        self.assertEqual((buffer.width, buffer.height), (3, 2))
        self.assertEqual(len(buffer.data), 24)
        self.assertEqual(buffer.pixel(2, 1), (10, 20, 30, 255))

    def test_resize_keeps_aspect(self):
        img = Image.new("RGBA", (10, 6), (1, 2, 3, 255))
        out = resize_to_width(img, 5, "lanczos")
        self.assertEqual(out.size, (5, 3))

    def test_resize_never_collapses_height(self):
        img = Image.new("RGBA", (100, 1))
        self.assertEqual(resize_to_width(img, 10).size, (10, 1))

    def test_resize_rejects_bad_arguments(self):
        img = Image.new("RGBA", (4, 4))
        with self.assertRaises(ValueError):
            resize_to_width(img, 0)
        with self.assertRaises(ValueError):
            resize_to_width(img, 2, "gaussian")

    def test_load_png_with_transparency(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "sprite.png"
            img = Image.new("RGBA", (2, 2), (0, 0, 0, 0))
            img.putpixel((1, 0), (255, 0, 0, 255))
            img.save(path)

            buffer = load_pixel_buffer(path)
            self.assertEqual(buffer.pixel(1, 0), (255, 0, 0, 255))
            self.assertEqual(buffer.pixel(0, 0)[3], 0)

            resized = load_pixel_buffer(path, width=4)
            self.assertEqual((resized.width, resized.height), (4, 4))

    def test_missing_file(self):
        with self.assertRaises(ImageLoadError) as ctx:
            load_image(Path("/nonexistent/termpix/missing.png"))
        self.assertIn("Could not open file", str(ctx.exception))

    def test_garbage_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "not-an-image.png"
            path.write_bytes(b"definitely not a png")
            with self.assertRaises(ImageLoadError) as ctx:
                load_image(path)
            self.assertIn("Failed to", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
