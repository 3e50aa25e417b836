"""
Tests for the Color model.
"""

import copy
import unittest

from svg_markup.models.color import Color, ColorError, Rgb, as_color


class TestColor(unittest.TestCase):
    """Tests for the Color class."""

    def test_default_is_none(self):
        """An unset color serializes as the none token."""
        color = Color()
        self.assertTrue(color.is_none)
        self.assertEqual(str(color), "none")
        self.assertEqual(str(Color.none()), "none")

    def test_keyword_is_verbatim(self):
        """Keywords are neither validated nor altered."""
        self.assertEqual(str(Color("white")), "white")
        self.assertEqual(str(Color("not-a-color")), "not-a-color")
        self.assertEqual(str(Color("")), "")
        self.assertEqual(Color("white").keyword, "white")
        self.assertIsNone(Color("white").rgb)

    def test_rgb_serialization(self):
        """RGB colors print their channels in order without spaces."""
        self.assertEqual(str(Color(Rgb(255, 198, 63))), "rgb(255,198,63)")
        self.assertEqual(str(Color((0, 0, 0))), "rgb(0,0,0)")
        self.assertEqual(str(Color.from_rgb(1, 2, 3)), "rgb(1,2,3)")
        # Channels wider than a byte are accepted
        self.assertEqual(str(Color(Rgb(300, 1000, 65535))), "rgb(300,1000,65535)")

    def test_rgb_default_channels(self):
        self.assertEqual(str(Rgb()), "rgb(0,0,0)")

    def test_exactly_one_state(self):
        rgb = Color(Rgb(1, 2, 3))
        self.assertFalse(rgb.is_none)
        self.assertIsNone(rgb.keyword)
        self.assertEqual(rgb.rgb, Rgb(1, 2, 3))

    def test_equality_and_hash(self):
        self.assertEqual(Color("red"), Color("red"))
        self.assertEqual(Color((1, 2, 3)), Color(Rgb(1, 2, 3)))
        self.assertEqual(hash(Color("red")), hash(Color("red")))
        self.assertNotEqual(Color("red"), Color())
        self.assertNotEqual(Color(), Color(""))

    def test_immutable(self):
        color = Color("red")
        with self.assertRaises(AttributeError):
            color._value = "blue"
        self.assertIs(copy.deepcopy(color), color)

    def test_invalid_value(self):
        with self.assertRaises(ColorError):
            Color(42)
        with self.assertRaises(ColorError):
            Color((1, 2))

    def test_rgb_channels_checked_on_construction(self):
        """Non-numeric channels fail when the color is built, not when rendered."""
        with self.assertRaises(ColorError):
            Color(("a", "b", "c"))
        with self.assertRaises(ColorError):
            Color((1, None, 3))
        self.assertEqual(Color((1.0, 2.0, 3.0)).rgb, Rgb(1, 2, 3))


class TestAsColor(unittest.TestCase):
    """Tests for as_color coercion."""

    def test_coercion(self):
        color = Color("blue")
        self.assertIs(as_color(color), color)
        self.assertEqual(as_color("blue"), color)
        self.assertEqual(as_color(None), Color())
        self.assertEqual(as_color((4, 5, 6)), Color(Rgb(4, 5, 6)))

    def test_rejects_other_types(self):
        with self.assertRaises(ColorError):
            as_color(3.5)


if __name__ == "__main__":
    unittest.main()
