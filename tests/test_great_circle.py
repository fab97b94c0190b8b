"""
Tests for great-circle geodesy.
"""

import unittest

from spherogeo import LatLon
from spherogeo.geodesy import (
    bearing_between,
    cross_track_distance_to,
    destination_point,
    distance_between,
    final_bearing_to,
    intersection,
    midpoint_between,
)


class TestDistance(unittest.TestCase):
    """Test distance_between."""

    def setUp(self):
        """Set up test fixtures."""
        self.bangalore = LatLon(12.97194, 77.59369)
        self.chennai = LatLon(13.08784, 80.27847)

    def test_default_radius(self):
        """Test the distance in metres."""
        d = distance_between(self.bangalore, self.chennai)
        self.assertAlmostEqual(d, 291131.41, delta=0.5)

    def test_radius_in_miles(self):
        """Test a plain radius in miles."""
        d = distance_between(self.bangalore, self.chennai, 3959.0)
        self.assertAlmostEqual(d, 180.91, delta=0.5)

    def test_radius_in_kilometres(self):
        """Test that the result takes the units of the radius."""
        d = distance_between(self.bangalore, self.chennai, 6371.0)
        self.assertAlmostEqual(d, 291.131, delta=0.001)

    def test_coincident_points(self):
        """Test that distance to the same point is zero."""
        self.assertEqual(distance_between(self.bangalore, self.bangalore), 0.0)

    def test_symmetry(self):
        """Test that distance is symmetric."""
        self.assertAlmostEqual(
            distance_between(self.bangalore, self.chennai),
            distance_between(self.chennai, self.bangalore),
            places=6,
        )

    def test_antipodal(self):
        """Test that antipodal points are half a circumference apart."""
        d = distance_between(LatLon(0, 0), LatLon(0, 180), 1.0)
        self.assertAlmostEqual(d, 3.141592653589793)


class TestBearing(unittest.TestCase):
    """Test bearing_between and final_bearing_to."""

    def setUp(self):
        """Set up test fixtures."""
        self.cambridge = LatLon(52.205, 0.119)
        self.paris = LatLon(48.857, 2.351)

    def test_initial_bearing(self):
        """Test the initial bearing."""
        self.assertAlmostEqual(bearing_between(self.cambridge, self.paris), 156.16, delta=0.5)

    def test_final_bearing(self):
        """Test the final bearing."""
        self.assertAlmostEqual(final_bearing_to(self.cambridge, self.paris), 157.89, delta=0.5)

    def test_final_bearing_is_reversed_initial(self):
        """Test the relation between final and reverse initial bearings."""
        expected = (bearing_between(self.paris, self.cambridge) + 180) % 360
        self.assertEqual(final_bearing_to(self.cambridge, self.paris), expected)

    def test_bearing_range(self):
        """Test that bearings fall in [0, 360)."""
        origin = LatLon(10, 10)
        for target in [LatLon(20, 10), LatLon(10, 20), LatLon(0, 10), LatLon(10, 0), LatLon(5, 5)]:
            with self.subTest(target=target):
                b = bearing_between(origin, target)
                self.assertGreaterEqual(b, 0.0)
                self.assertLess(b, 360.0)

    def test_cardinal_bearings(self):
        """Test due north and due west."""
        self.assertAlmostEqual(bearing_between(LatLon(0, 0), LatLon(10, 0)), 0.0)
        self.assertAlmostEqual(bearing_between(LatLon(0, 0), LatLon(0, -10)), 270.0)


class TestMidpointAndDestination(unittest.TestCase):
    """Test midpoint_between and destination_point."""

    def test_midpoint(self):
        """Test the great-circle midpoint."""
        mid = midpoint_between(LatLon(52.205, 0.119), LatLon(48.857, 2.351))
        self.assertEqual(mid.to_string("d"), "50.5363°N,001.2746°E")

    def test_midpoint_across_antimeridian(self):
        """Test that the midpoint longitude is normalised."""
        mid = midpoint_between(LatLon(0, 170), LatLon(0, -170))
        self.assertAlmostEqual(abs(mid.longitude), 180.0)
        self.assertAlmostEqual(mid.latitude, 0.0)

    def test_destination(self):
        """Test the destination from Greenwich."""
        p = destination_point(LatLon(51.4778, -0.0015), 7794.0, 300.7)
        self.assertEqual(p.to_string("d"), "51.5135°N,000.0983°W")

    def test_destination_round_trip(self):
        """Test that the destination lies at the requested distance and bearing."""
        start = LatLon(40.0, -74.0)
        end = destination_point(start, 10000.0, 45.0)
        self.assertAlmostEqual(distance_between(start, end), 10000.0, delta=1e-6)
        self.assertAlmostEqual(bearing_between(start, end), 45.0, places=6)


class TestIntersection(unittest.TestCase):
    """Test intersection."""

    def test_intersection(self):
        """Test a well-defined crossing point."""
        p = intersection(LatLon(51.8853, 0.2545), 108.547, LatLon(49.0034, 2.5735), 32.435)
        self.assertEqual(p.to_string("d"), "50.9078°N,004.5084°E")

    def test_coincident_points(self):
        """Test that identical points have no unique intersection."""
        p = LatLon(51.8853, 0.2545)
        self.assertIsNone(intersection(p, 108.547, p, 32.435))

    def test_ambiguous_intersection(self):
        """Test that paths heading to opposite sides give no intersection."""
        self.assertIsNone(intersection(LatLon(0, 0), 135.0, LatLon(0, 10), 45.0))

    def test_same_meridian(self):
        """Test that opposite courses along one meridian have no unique intersection."""
        self.assertIsNone(intersection(LatLon(10, 20), 0.0, LatLon(30, 20), 180.0))

    def test_same_course_along_equator(self):
        """Test that parallel equator courses meet at the first point."""
        p = intersection(LatLon(0, 0), 90.0, LatLon(0, 10), 90.0)
        self.assertEqual(str(p), "00°00′00″N,000°00′00″E")


class TestCrossTrack(unittest.TestCase):
    """Test cross_track_distance_to."""

    def setUp(self):
        """Set up test fixtures."""
        self.start = LatLon(53.3206, -1.7297)
        self.end = LatLon(53.1887, 0.1334)

    def test_left_of_path(self):
        """Test a point left of the path."""
        d = cross_track_distance_to(LatLon(53.2611, -0.7972), self.start, self.end)
        self.assertAlmostEqual(d, -307.54, delta=0.5)

    def test_on_path(self):
        """Test that the path end lies on the path."""
        d = cross_track_distance_to(self.end, self.start, self.end)
        self.assertAlmostEqual(d, 0.0, delta=1e-6)

    def test_right_of_path(self):
        """Test that a point south of an eastbound equator path is to the right."""
        d = cross_track_distance_to(LatLon(-1, 5), LatLon(0, 0), LatLon(0, 10))
        self.assertGreater(d, 0.0)

    def test_radius_in_kilometres(self):
        """Test that the result takes the units of the radius."""
        d = cross_track_distance_to(LatLon(53.2611, -0.7972), self.start, self.end, 6371.0)
        self.assertAlmostEqual(d, -0.30754, delta=0.0005)


if __name__ == '__main__':
    unittest.main()
