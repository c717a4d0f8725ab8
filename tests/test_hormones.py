"""Unit tests for hormone readings and normalization."""

from __future__ import annotations

import random
import unittest

from hormones import HORMONE_NAMES, NEUTRAL_LEVEL, HormoneReading, normalize, random_reading


class NormalizeTests(unittest.TestCase):
    """Validate the signed unit mapping around the neutral point."""

    def test_scale_endpoints(self) -> None:
        self.assertEqual(normalize(NEUTRAL_LEVEL), 0.0)
        self.assertEqual(normalize(0), -1.0)
        self.assertEqual(normalize(100), 1.0)
        self.assertEqual(normalize(75), 0.5)

    def test_out_of_range_is_not_rejected(self) -> None:
        self.assertEqual(normalize(150), 2.0)
        self.assertEqual(normalize(-50), -2.0)


class HormoneReadingTests(unittest.TestCase):
    def test_missing_and_none_default_to_neutral(self) -> None:
        reading = HormoneReading.from_mapping({"insulin": 80, "cortisol": None})
        self.assertEqual(reading.insulin, 80.0)
        self.assertEqual(reading.cortisol, NEUTRAL_LEVEL)
        self.assertEqual(reading.testosterone, NEUTRAL_LEVEL)
        self.assertEqual(reading.estrogen, NEUTRAL_LEVEL)

    def test_zero_is_a_real_low_reading(self) -> None:
        reading = HormoneReading.from_mapping({"testosterone": 0})
        self.assertEqual(reading.testosterone, 0.0)
        self.assertEqual(reading.normalized()["testosterone"], -1.0)

    def test_non_numeric_values_raise(self) -> None:
        with self.assertRaises(ValueError):
            HormoneReading.from_mapping({"estrogen": "high"})
        with self.assertRaises(ValueError):
            HormoneReading.from_mapping({"insulin": True})

    def test_numeric_strings_are_accepted(self) -> None:
        self.assertEqual(HormoneReading.from_mapping({"insulin": "62.5"}).insulin, 62.5)

    def test_coerce_passes_readings_through(self) -> None:
        reading = HormoneReading(insulin=10.0)
        self.assertIs(HormoneReading.coerce(reading), reading)
        self.assertEqual(HormoneReading.coerce({"insulin": 10}), reading)

    def test_neutral_normalizes_to_zero(self) -> None:
        normalized = HormoneReading.neutral().normalized()
        self.assertEqual(set(normalized), set(HORMONE_NAMES))
        self.assertTrue(all(value == 0.0 for value in normalized.values()))


class RandomReadingTests(unittest.TestCase):
    def test_levels_stay_in_band(self) -> None:
        rng = random.Random(1234)
        for _ in range(50):
            reading = random_reading(rng)
            for name, level in reading.as_dict().items():
                with self.subTest(hormone=name):
                    self.assertGreaterEqual(level, 30.0)
                    self.assertLess(level, 70.0)
                    self.assertEqual(level, int(level))

    def test_seeded_draws_repeat(self) -> None:
        self.assertEqual(random_reading(random.Random(7)), random_reading(random.Random(7)))

    def test_empty_band_raises(self) -> None:
        with self.assertRaises(ValueError):
            random_reading(random.Random(0), low=60, high=60)


if __name__ == "__main__":
    unittest.main()
