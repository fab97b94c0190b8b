"""
Tests for the LatLon coordinate value.
"""

import dataclasses
import math
import unittest

from spherogeo import LatLon


class TestLatLonToString(unittest.TestCase):
    """Test LatLon rendering."""

    def setUp(self):
        """Set up test fixtures."""
        self.bangalore = LatLon(12.97194, 77.59369)

    def test_default_is_dms(self):
        """Test str() renders whole-second dms."""
        self.assertEqual(str(self.bangalore), "12°58′19″N,077°35′37″E")
        self.assertEqual(self.bangalore.to_string(), str(self.bangalore))

    def test_degrees_four_places(self):
        """Test the d notation at 4 places."""
        self.assertEqual(self.bangalore.to_string("d", 4), "12.9719°N,077.5937°E")

    def test_degrees_two_places(self):
        """Test the d notation at 2 places."""
        self.assertEqual(self.bangalore.to_string("d", 2), "12.97°N,077.59°E")

    def test_degrees_no_places(self):
        """Test the d notation rounded to whole degrees."""
        self.assertEqual(self.bangalore.to_string("d", 0), "13°N,078°E")

    def test_deg_min(self):
        """Test the dm notation at its default precision."""
        self.assertEqual(self.bangalore.to_string("dm"), "12°58.32′N,077°35.62′E")

    def test_empty_format_falls_back_to_dms(self):
        """Test that an empty format tag means dms."""
        self.assertEqual(self.bangalore.to_string(""), str(self.bangalore))

    def test_south_west(self):
        """Test suffixes for a point in the southern and western hemispheres."""
        rio = LatLon(-22.9068, -43.1729)
        self.assertEqual(rio.to_string("d", 2), "22.91°S,043.17°W")


class TestLatLonConstruction(unittest.TestCase):
    """Test LatLon constructors."""

    def test_fields(self):
        """Test that fields hold degrees as given."""
        p = LatLon(52.205, 0.119)
        self.assertEqual(p.latitude, 52.205)
        self.assertEqual(p.longitude, 0.119)

    def test_no_clamping(self):
        """Test that out-of-range values are kept."""
        p = LatLon(95.0, 200.0)
        self.assertEqual((p.latitude, p.longitude), (95.0, 200.0))

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        p = LatLon(1.0, 2.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            p.latitude = 3.0

    def test_value_equality(self):
        """Test equality and hashing by value."""
        self.assertEqual(LatLon(1.0, 2.0), LatLon(1.0, 2.0))
        self.assertEqual(len({LatLon(1.0, 2.0), LatLon(1.0, 2.0)}), 1)

    def test_from_rad(self):
        """Test construction from radians."""
        p = LatLon.from_rad(math.pi / 4, math.pi / 3)
        self.assertAlmostEqual(p.latitude, 45.0)
        self.assertAlmostEqual(p.longitude, 60.0)

    def test_integer_degrees(self):
        """Test that integer degrees render like floats."""
        self.assertEqual(LatLon(45, 90).to_string("d", 1), "45.0°N,090.0°E")

    def test_from_dms(self):
        """Test construction from degree strings."""
        p = LatLon.from_dms("51° 28′ 40″ N", "000° 00′ 05″ W")
        self.assertAlmostEqual(p.latitude, 51.477778, places=6)
        self.assertAlmostEqual(p.longitude, -0.001389, places=6)

    def test_from_dms_unparseable(self):
        """Test that an unparseable part gives no point."""
        self.assertIsNone(LatLon.from_dms("north", "000° 00′ 05″ W"))
        self.assertIsNone(LatLon.from_dms("51° 28′ 40″ N", ""))


if __name__ == '__main__':
    unittest.main()
