import os

from parameterized import parameterized

from jobboard.helpers import (
    format_emblem_title,
    generate_id,
    get_standing_label,
    is_safe_emblem_filename,
    is_valid_color_scheme,
    sanitize_emblem_base_name,
    validate_date,
    validate_emblem,
    validate_integer,
    validate_required_string,
)
from jobboard.tests.utils import JobBoardTestCase


class StandingTestCase(JobBoardTestCase):
    @parameterized.expand([
        (0, "DISTRUSTED"), (2, "NEUTRAL"), (4, "TRUSTED"), (5, "UNKNOWN"), (-1, "UNKNOWN"),
        (None, "UNKNOWN"),
    ])
    def test_labels(self, standing, label):
        self.assertEqual(get_standing_label(standing), label)


class GenerateIdTestCase(JobBoardTestCase):
    def test_unique(self):
        self.assertNotEqual(generate_id(), generate_id())
        self.assertEqual(len(generate_id()), 36)


class EmblemTestCase(JobBoardTestCase):
    @parameterized.expand([
        ("Harrison Armory.svg", "Harrison_Armory"),
        ("C:\\uploads\\ssc logo.png", "ssc_logo"),
        ("../../etc/passwd", "passwd"),
        ("__horus__.svg", "horus"),
        ("con.svg", "_con"),
        ("LPT1", "_LPT1"),
        ("!!!.svg", None),
        ("", None),
        (None, None),
    ])
    def test_sanitize(self, original, expected):
        self.assertEqual(sanitize_emblem_base_name(original), expected)

    @parameterized.expand([
        ("ipsn.svg", True),
        ("union-navy_2.svg", True),
        ("ipsn.png", False),
        ("../ipsn.svg", False),
        ("my emblem.svg", False),
        (42, False),
    ])
    def test_is_safe(self, filename, safe):
        self.assertEqual(is_safe_emblem_filename(filename), safe)

    def test_format_title(self):
        self.assertEqual(format_emblem_title("Harrison_Armory.svg"), "Harrison Armory")

    def test_validate_emblem(self):
        upload_dir = self._create_tempdir()
        with open(os.path.join(upload_dir, "ipsn.svg"), "w") as f:
            f.write("<svg/>")

        self.assertTrue(validate_emblem("", upload_dir).valid)
        self.assertTrue(validate_emblem("ipsn.svg", upload_dir).valid)
        self.assertEqual(validate_emblem("ha.svg", upload_dir).message, "Invalid emblem selection")
        self.assertEqual(validate_emblem("../ipsn.svg", upload_dir).message, "Invalid emblem filename")


class ValidateDateTestCase(JobBoardTestCase):
    @parameterized.expand([("",), (None,), ("01/01/5016",), ("29/02/2024",), ("29/02/2000",), ("31/12/1999",)])
    def test_valid(self, date_str):
        self.assertTrue(validate_date(date_str).valid)

    @parameterized.expand([
        ("29/02/2023", "Maximum is 28"),
        ("29/02/1900", "Maximum is 28"),
        ("31/04/2024", "Maximum is 30"),
        ("00/01/2024", "Invalid date values"),
        ("01/13/2024", "Invalid date values"),
        ("2024-01-01", "Use DD/MM/YYYY"),
        ("1/1/2024", "Use DD/MM/YYYY"),
    ])
    def test_invalid(self, date_str, message):
        result = validate_date(date_str)
        self.assertFalse(result.valid)
        self.assertIn(message, result.message)


class ColorSchemeTestCase(JobBoardTestCase):
    def test_schemes(self):
        self.assertTrue(is_valid_color_scheme("orange"))
        self.assertFalse(is_valid_color_scheme("purple"))
        self.assertFalse(is_valid_color_scheme(None))


class ValidateRequiredStringTestCase(JobBoardTestCase):
    def test_trims(self):
        result = validate_required_string("  Hawk  ", "Callsign")
        self.assertTrue(result.valid)
        self.assertEqual(result.value, "Hawk")

    @parameterized.expand([("",), ("   ",), (None,), (12,)])
    def test_empty(self, value):
        result = validate_required_string(value, "Callsign")
        self.assertFalse(result.valid)
        self.assertEqual(result.message, "Callsign cannot be empty")

    def test_too_long(self):
        result = validate_required_string("abcdef", "Callsign", 5)
        self.assertFalse(result.valid)
        self.assertEqual(result.message, "Callsign must be 5 characters or less")


class ValidateIntegerTestCase(JobBoardTestCase):
    def test_parses(self):
        self.assertEqual(validate_integer("3", "Rank").value, 3)
        self.assertEqual(validate_integer(2, "Rank", 1, 3).value, 2)

    @parameterized.expand([
        ("abc", "Rank must be a valid number"),
        (None, "Rank must be a valid number"),
        ("0", "Rank must be at least 1"),
        ("4", "Rank must be at most 3"),
    ])
    def test_invalid(self, value, message):
        result = validate_integer(value, "Rank", 1, 3)
        self.assertFalse(result.valid)
        self.assertEqual(result.message, message)
