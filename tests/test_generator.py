"""
Tests for the SVG Generator and the PNG renderer.
"""

import os
import sys
import shutil
import tempfile
import unittest
from unittest import mock

from svg_markup.core.renderer import RenderError, SVGRenderer
from svg_markup.demo import build_demo_document
from svg_markup.generation.svg_generator import SVGGenerator
from svg_markup.models.document import Document

try:
    import cairosvg
except (ImportError, OSError):  # cairosvg or the cairo library is unavailable
    cairosvg = None


class TestSVGGenerator(unittest.TestCase):
    """Tests for the SVGGenerator class."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.generator = SVGGenerator(os.path.join(self.temp_dir, "out"))

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def test_output_dir_created_on_save(self):
        self.assertFalse(os.path.exists(os.path.join(self.temp_dir, "out")))
        self.generator.save_svg(Document(), "empty")
        self.assertTrue(os.path.isdir(os.path.join(self.temp_dir, "out")))

    def test_write_svg_to_path(self):
        filepath = os.path.join(self.temp_dir, "nested", "dir", "figure.svg")

        self.assertEqual(self.generator.write_svg(Document(), filepath), filepath)
        with open(filepath, 'r', encoding='utf-8') as f:
            self.assertEqual(f.read(), Document().to_svg_string())

    def test_save_svg(self):
        """Test saving an SVG file."""
        document = build_demo_document()

        filepath = self.generator.save_svg(document, "demo")

        self.assertTrue(os.path.exists(filepath))
        self.assertEqual(os.path.basename(filepath), "demo.svg")
        with open(filepath, 'r', encoding='utf-8') as f:
            self.assertEqual(f.read(), document.to_svg_string())

    def test_generate_svg(self):
        self.assertEqual(
            self.generator.generate_svg(Document()),
            Document().to_svg_string()
        )

    @unittest.skipIf(cairosvg is None, "cairosvg is not available")
    def test_save_png(self):
        filepath = self.generator.save_png(build_demo_document(), "demo", size=(64, 64))

        with open(filepath, 'rb') as f:
            self.assertEqual(f.read(8), b"\x89PNG\r\n\x1a\n")


class TestSVGRenderer(unittest.TestCase):
    """Tests for the SVGRenderer class."""

    def test_missing_cairosvg(self):
        renderer = SVGRenderer()
        with mock.patch.dict(sys.modules, {"cairosvg": None}):
            with self.assertRaises(RenderError):
                renderer.render_png(Document().to_svg_string())

    @unittest.skipIf(cairosvg is None, "cairosvg is not available")
    def test_render_png(self):
        png_data = SVGRenderer(default_size=(32, 32)).render_png(
            build_demo_document().to_svg_string()
        )
        self.assertTrue(png_data.startswith(b"\x89PNG"))

    @unittest.skipIf(cairosvg is None, "cairosvg is not available")
    def test_invalid_markup(self):
        with self.assertRaises(RenderError):
            SVGRenderer().render_png("<svg")


if __name__ == "__main__":
    unittest.main()
