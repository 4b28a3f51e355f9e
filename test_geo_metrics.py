import math
import random
import unittest

from route_optimizer.errors import InvalidCoordinate, UnresolvedLocation, UnknownVesselProfile
from route_optimizer.gazetteer import Gazetteer, resolve_coordinate
from route_optimizer.geo_utils import great_circle_distance_nm, normalize_position, round_half_up
from route_optimizer.interfaces import Coordinate, Resolved, Unresolved, VesselProfile
from route_optimizer.preprocessing import parse_coordinates, split_route_text
from route_optimizer.vessel_profiles import (
    derive_metrics,
    fuel_factor_tons_per_nm,
    speed_factor_knots,
    validate_vessel_profile,
)

ROTTERDAM = Coordinate(51.9225, 4.4792)
SINGAPORE = Coordinate(1.3521, 103.8198)

def haversine_reference_nm(a, b):
    lat1, lon1, lat2, lon2 = map(math.radians, [a.latitude, a.longitude, b.latitude, b.longitude])
    h = math.sin((lat2 - lat1) / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    return 2 * math.asin(math.sqrt(h)) * 6371 * 0.539957

class TestGreatCircleDistance(unittest.TestCase):
    def test_rotterdam_to_singapore_matches_haversine(self):
        """Test distance between two known ports against the haversine formula"""
        distance = great_circle_distance_nm(ROTTERDAM, SINGAPORE)
        self.assertIsInstance(distance, int)
        self.assertLessEqual(abs(distance - haversine_reference_nm(ROTTERDAM, SINGAPORE)), 0.5)
        self.assertTrue(5600 < distance < 5800)

    def test_symmetric(self):
        """Test distance is the same in both directions"""
        rng = random.Random(7)
        for _ in range(100):
            a = Coordinate(rng.uniform(-90, 90), rng.uniform(-180, 180))
            b = Coordinate(rng.uniform(-90, 90), rng.uniform(-180, 180))
            self.assertEqual(great_circle_distance_nm(a, b), great_circle_distance_nm(b, a))

    def test_antipodal_points(self):
        """Test distance between antipodal points is half the circumference"""
        a = Coordinate(72.6441, -88.6611)
        b = Coordinate(-72.6441, 91.3389)
        distance = great_circle_distance_nm(a, b)
        self.assertEqual(distance, great_circle_distance_nm(b, a))
        # Half the circumference: pi * 6371 km in nautical miles
        self.assertEqual(distance, round_half_up(math.pi * 6371 * 0.539957))

    def test_same_point_is_zero(self):
        """Test distance from a point to itself"""
        self.assertEqual(great_circle_distance_nm(ROTTERDAM, ROTTERDAM), 0)
        self.assertEqual(great_circle_distance_nm(Coordinate(-90, 0), Coordinate(-90, 0)), 0)

    def test_one_degree_of_latitude_is_about_sixty_nm(self):
        """Test one degree of latitude along a meridian"""
        self.assertEqual(great_circle_distance_nm(Coordinate(0, 0), Coordinate(1, 0)), 60)

class TestRounding(unittest.TestCase):
    def test_halves_round_up(self):
        """Test halves round up"""
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(0), 0)

class TestVesselFactors(unittest.TestCase):
    def test_container_medium(self):
        """Test speed and fuel factors for a medium container ship"""
        self.assertEqual(speed_factor_knots("container", "medium"), 20)
        self.assertEqual(fuel_factor_tons_per_nm("container", "medium"), 0.3)

    def test_vlcc_tanker_fuel(self):
        """Test fuel factor for a VLCC tanker"""
        self.assertEqual(fuel_factor_tons_per_nm("tanker", "vlcc"), 0.75)
        self.assertAlmostEqual(speed_factor_knots("tanker", "vlcc"), 12.75)

    def test_size_modifiers(self):
        """Test size modifiers scale the base factors"""
        self.assertAlmostEqual(speed_factor_knots("cruise", "large"), 24.2)
        self.assertAlmostEqual(fuel_factor_tons_per_nm("fishing", "small"), 0.06)

    def test_unknown_profile_uses_defaults(self):
        """Test default factors for an unknown vessel profile"""
        self.assertEqual(speed_factor_knots("submarine", "huge"), 15)
        self.assertEqual(fuel_factor_tons_per_nm("submarine", "huge"), 0.25)
        self.assertEqual(speed_factor_knots("bulk", "huge"), 14)

    def test_validate_vessel_profile(self):
        """Test validation of vessel type and size"""
        profile = VesselProfile("bulk", "large")
        self.assertIs(validate_vessel_profile(profile), profile)
        with self.assertRaises(UnknownVesselProfile):
            validate_vessel_profile(VesselProfile("submarine", "large"))
        with self.assertRaises(UnknownVesselProfile):
            validate_vessel_profile(VesselProfile("bulk", "huge"))

class TestDeriveMetrics(unittest.TestCase):
    def test_reference_values(self):
        """Test metrics derived for a reference distance"""
        metrics = derive_metrics(1000, 20, 0.3)
        self.assertEqual(metrics.distance_nm, 1000)
        self.assertEqual(metrics.duration_hours, 50)
        self.assertEqual(metrics.fuel_consumption_mt, 300)
        self.assertEqual(metrics.co2_emissions_mt, 930)

    def test_co2_derived_from_rounded_fuel(self):
        """Test CO2 is computed from the rounded fuel figure"""
        metrics = derive_metrics(1001, 15, 0.25)
        self.assertEqual(metrics.fuel_consumption_mt, 250)
        self.assertEqual(metrics.co2_emissions_mt, round_half_up(250 * 3.1))
        self.assertEqual(metrics.duration_hours, 67)

    def test_zero_distance(self):
        """Test metrics for a zero distance"""
        metrics = derive_metrics(0, 20, 0.3)
        self.assertEqual((metrics.duration_hours, metrics.fuel_consumption_mt, metrics.co2_emissions_mt), (0, 0, 0))

    def test_non_positive_speed_rejected(self):
        """Test a non-positive speed factor is rejected"""
        with self.assertRaises(ValueError):
            derive_metrics(100, 0, 0.3)

class TestGazetteer(unittest.TestCase):
    def test_substring_match(self):
        """Test gazetteer matches on substrings"""
        result = Gazetteer().lookup("Port of Rotterdam, Netherlands")
        self.assertIsInstance(result, Resolved)
        self.assertEqual(result.coordinate, ROTTERDAM)
        self.assertEqual(result.matched_key, "rotterdam")

    def test_case_insensitive(self):
        """Test gazetteer lookup ignores case"""
        self.assertEqual(Gazetteer().lookup("SINGAPORE").coordinate, SINGAPORE)

    def test_first_match_in_order_wins(self):
        """Test the first matching gazetteer entry is used"""
        result = Gazetteer().lookup("Suez Canal via Rotterdam")
        self.assertEqual(result.matched_key, "rotterdam")

    def test_unresolved(self):
        """Test lookup of an unknown place name"""
        result = Gazetteer().lookup("Atlantis")
        self.assertIsInstance(result, Unresolved)
        self.assertEqual(result.place_name, "Atlantis")

class TestResolveCoordinate(unittest.TestCase):
    def test_coordinate_passes_through(self):
        """Test a Coordinate is returned unchanged"""
        self.assertIs(resolve_coordinate(SINGAPORE), SINGAPORE)

    def test_known_name(self):
        """Test resolving a known port name"""
        self.assertEqual(resolve_coordinate("Hamburg"), Coordinate(53.5511, 9.9937))

    def test_coordinate_literal(self):
        """Test resolving a "lat, lon" literal"""
        self.assertEqual(resolve_coordinate("51.9, 4.4"), Coordinate(51.9, 4.4))

    def test_literal_out_of_range(self):
        """Test an out of range literal is rejected"""
        with self.assertRaises(InvalidCoordinate):
            resolve_coordinate("95.0, 10.0")

    def test_strict_unresolved_raises(self):
        """Test strict mode raises for an unknown place"""
        with self.assertRaises(UnresolvedLocation):
            resolve_coordinate("Atlantis", strict=True)

    def test_random_fallback_is_valid_and_seeded(self):
        """Test lenient mode falls back to a seeded random coordinate"""
        first = resolve_coordinate("Atlantis", random.Random(3))
        second = resolve_coordinate("Atlantis", random.Random(3))
        self.assertEqual(first, second)
        self.assertTrue(-90 <= first.latitude <= 90)
        self.assertTrue(-180 <= first.longitude <= 180)

class TestCoordinates(unittest.TestCase):
    def test_invalid_coordinate(self):
        """Test Coordinate range validation"""
        with self.assertRaises(InvalidCoordinate):
            Coordinate(91, 0)
        with self.assertRaises(InvalidCoordinate):
            Coordinate(0, -180.5)

    def test_normalize_position(self):
        """Test latitude clamping and longitude wrapping"""
        self.assertEqual(normalize_position(92.0, 10.0), Coordinate(90.0, 10.0))
        self.assertEqual(normalize_position(-91.0, 10.0), Coordinate(-90.0, 10.0))
        wrapped = normalize_position(10.0, 181.5)
        self.assertAlmostEqual(wrapped.longitude, -178.5)

    def test_parse_decimal(self):
        """Test parsing decimal coordinates"""
        parsed = parse_coordinates("[-33.92, 18.42]")
        self.assertTrue(parsed.is_valid)
        self.assertEqual((parsed.latitude, parsed.longitude), (-33.92, 18.42))

    def test_parse_dms(self):
        """Test parsing degrees, minutes and seconds"""
        parsed = parse_coordinates("40°26'46\"N 79°58'56\"W")
        self.assertTrue(parsed.is_valid)
        self.assertAlmostEqual(parsed.latitude, 40.4461, places=3)
        self.assertAlmostEqual(parsed.longitude, -79.9822, places=3)

    def test_parse_cardinal(self):
        """Test parsing coordinates with cardinal directions"""
        parsed = parse_coordinates("33.9° S 18.4° E")
        self.assertTrue(parsed.is_valid)
        self.assertEqual((parsed.latitude, parsed.longitude), (-33.9, 18.4))

    def test_parse_place_name(self):
        """Test a place name is not parsed as a coordinate"""
        parsed = parse_coordinates("Rotterdam, Netherlands")
        self.assertFalse(parsed.is_valid)
        self.assertIsNone(parsed.to_coordinate())

    def test_split_route_text(self):
        """Test splitting "A to B" route text"""
        self.assertEqual(split_route_text("Rotterdam to Hamburg"), "Rotterdam")
        self.assertEqual(split_route_text("Toronto"), "Toronto")


if __name__ == "__main__":
    unittest.main()
