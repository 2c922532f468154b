from unittest import TestCase
from voluptuous import MultipleInvalid

from ncdescr.parse.validate import (
    OPTION_KEYS,
    validate_options,
    validate_time_range,
)
from ncdescr.util.validation import (
    v_float_str,
    v_num_str,
    v_opt_str,
)


class TestValidateOptions(TestCase):

    """Tests for ncdescr.parse.validate.validate_options"""
    raw_opts = {
        "--f77": False,
        "--dmget": False,
        "--modulo": True,
        "--nodods": False,
        "--prefix": "http://server/sst_",
        "--suffix": ".nc",
        "--title": None,
        "--verbose": False,
        "--help": False,
        "FILE": ["1990", "1991"],
    }

    def test_validate_valid(self):
        """Test validate_options with valid options"""
        self.assertDictEqual(validate_options(self.raw_opts), self.raw_opts)
        self.assertListEqual(sorted(validate_options(self.raw_opts).keys()),
                             sorted(OPTION_KEYS))

    def test_validate_defaults(self):
        """Missing flags are defaulted"""
        res = validate_options({"FILE": ["a.nc"]})
        self.assertFalse(res["--f77"])
        self.assertFalse(res["--dmget"])
        self.assertIsNone(res["--prefix"])
        self.assertIsNone(res["--title"])

    def test_validate_invalid(self):
        """Test validate_options with invalid options"""
        with self.assertRaises(TypeError):
            validate_options(None)
        with self.assertRaises(MultipleInvalid):
            validate_options({"FILE": []})
        with self.assertRaises(MultipleInvalid):
            validate_options({"FILE": ["a.nc"], "--f77": "yes"})
        with self.assertRaises(MultipleInvalid):
            validate_options({"FILE": ["a.nc"], "--bogus": True})


class TestValidateTimeRange(TestCase):

    """Tests for ncdescr.parse.validate.validate_time_range"""

    def test_validate_valid(self):
        res = validate_time_range({"count": "12", "start": "0,",
                                   "end": "335"})
        self.assertDictEqual(res, {"count": 12, "start": 0.0, "end": 335.0})
        self.assertIsInstance(res["count"], int)
        self.assertIsInstance(res["start"], float)

    def test_validate_fractional(self):
        res = validate_time_range({"count": "2", "start": "0.5",
                                   "end": "1.25"})
        self.assertEqual(res["start"], 0.5)
        self.assertEqual(res["end"], 1.25)

    def test_validate_invalid(self):
        with self.assertRaises(TypeError):
            validate_time_range([])
        with self.assertRaises(MultipleInvalid):
            validate_time_range({"count": "0", "start": "0", "end": "0"})
        with self.assertRaises(MultipleInvalid):
            validate_time_range({"count": "x", "start": "0", "end": "0"})
        with self.assertRaises(MultipleInvalid):
            validate_time_range({"count": "1", "start": "_", "end": "0"})
        with self.assertRaises(MultipleInvalid):
            validate_time_range({"count": None, "start": "0", "end": "0"})


class TestValidators(TestCase):

    """Tests for the v_* validators"""

    def test_v_num_str(self):
        self.assertEqual(v_num_str("12"), 12)
        self.assertEqual(v_num_str(" 3 "), 3)
        self.assertEqual(v_num_str(4), 4)
        with self.assertRaises(ValueError):
            v_num_str("1.5")
        with self.assertRaises(ValueError):
            v_num_str(1.5)
        with self.assertRaises(ValueError):
            v_num_str(True)

    def test_v_float_str(self):
        self.assertEqual(v_float_str("30.5"), 30.5)
        self.assertEqual(v_float_str("30.5,"), 30.5)
        self.assertEqual(v_float_str("1e3"), 1000.0)
        self.assertEqual(v_float_str(7), 7.0)
        with self.assertRaises(ValueError):
            v_float_str("abc")
        with self.assertRaises(ValueError):
            v_float_str("NaN")
        with self.assertRaises(ValueError):
            v_float_str("inf")

    def test_v_opt_str(self):
        self.assertIsNone(v_opt_str(None))
        self.assertEqual(v_opt_str("x"), "x")
        with self.assertRaises(ValueError):
            v_opt_str(3)
