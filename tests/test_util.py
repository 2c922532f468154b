from unittest import TestCase

from ncdescr.util import (
    format_number,
    fortran_bool,
    fortran_str,
)


class TestFormatNumber(TestCase):

    """Tests for ncdescr.util.format_number"""
    _multiprocess_can_split_ = True

    def test_integral(self):
        """Test format_number drops the decimal point of integral values"""
        self.assertEqual(format_number(86400), "86400")
        self.assertEqual(format_number(365.0), "365")
        self.assertEqual(format_number(0.0), "0")
        self.assertEqual(format_number(-12), "-12")

    def test_fractional(self):
        """Test format_number with fractional values"""
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(335.0 / 11), "30.4545454545455")
        self.assertEqual(format_number(1.0 / 3), "0.333333333333333")

    def test_bad_params(self):
        """Test format_number with non-numbers"""
        with self.assertRaises(TypeError):
            format_number("12")
        with self.assertRaises(TypeError):
            format_number(None)
        with self.assertRaises(TypeError):
            format_number(True)


class TestFortranLiterals(TestCase):

    """Tests for ncdescr.util.fortran_str and fortran_bool"""

    def test_fortran_str(self):
        self.assertEqual(fortran_str("Test SST"), "'Test SST'")
        self.assertEqual(fortran_str(""), "''")
        self.assertEqual(fortran_str(" "), "' '")

    def test_fortran_str_quote(self):
        """Embedded quotes are doubled"""
        self.assertEqual(fortran_str("Reynolds' SST"), "'Reynolds'' SST'")

    def test_fortran_str_bad_param(self):
        with self.assertRaises(TypeError):
            fortran_str(12)

    def test_fortran_bool(self):
        self.assertEqual(fortran_bool(True), ".TRUE.")
        self.assertEqual(fortran_bool(False), ".FALSE.")
