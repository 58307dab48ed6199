"""
Unit tests for Graph body decoding helpers.
"""

import unittest

from whatsapp_cloud_api.decode import decode_body, is_numeric, parse_form_encoded, try_parse_json


class TestTryParseJson(unittest.TestCase):
    """Test lenient JSON parsing."""

    def test_valid_object(self):
        self.assertEqual(try_parse_json('{"a": 1}'), {"a": 1})

    def test_invalid_json_returns_none(self):
        self.assertIsNone(try_parse_json("access_token=XYZ"))
        self.assertIsNone(try_parse_json(""))

    def test_non_standard_constants_rejected(self):
        """NaN and Infinity are not valid JSON."""
        self.assertIsNone(try_parse_json("NaN"))
        self.assertIsNone(try_parse_json("-Infinity"))

    def test_deep_nesting_returns_none(self):
        self.assertIsNone(try_parse_json("[" * 100000 + "]" * 100000))


class TestParseFormEncoded(unittest.TestCase):
    """Test form-encoded pair parsing."""

    def test_pairs_are_url_decoded(self):
        result = parse_form_encoded("name=John+Doe&note=a%26b")
        self.assertEqual(result, {"name": "John Doe", "note": "a&b"})

    def test_blank_values_kept(self):
        self.assertEqual(parse_form_encoded("flag&x="), {"flag": "", "x": ""})

    def test_last_duplicate_wins(self):
        self.assertEqual(parse_form_encoded("a=1&a=2"), {"a": "2"})

    def test_empty_input(self):
        self.assertEqual(parse_form_encoded(""), {})


class TestIsNumeric(unittest.TestCase):
    """Test numeric detection."""

    def test_numbers(self):
        self.assertTrue(is_numeric(12345))
        self.assertTrue(is_numeric(1.5))

    def test_numeric_strings(self):
        for value in ["123", " 12", "-4.2", "1e3", ".5", "+7"]:
            self.assertTrue(is_numeric(value), value)

    def test_non_numeric(self):
        for value in [True, False, None, "", "abc", "12abc", "1.2.3", [1], {"a": 1}]:
            self.assertFalse(is_numeric(value), repr(value))


class TestDecodeBody(unittest.TestCase):
    """Test the canonical decoding of every body shape Graph returns."""

    def test_json_object(self):
        body = '{"messaging_product":"whatsapp","id":"abc"}'
        self.assertEqual(decode_body(body), {"messaging_product": "whatsapp", "id": "abc"})

    def test_bare_number_becomes_id(self):
        self.assertEqual(decode_body("12345"), {"id": 12345})

    def test_numeric_json_string_becomes_id(self):
        self.assertEqual(decode_body('"12345"'), {"id": "12345"})

    def test_oversized_number_still_becomes_id(self):
        """Integers beyond the int digit limit keep their digits as a string."""
        digits = "9" * 5000
        decoded = decode_body(digits)
        self.assertEqual(list(decoded), ["id"])
        self.assertEqual(str(decoded["id"]), digits)

    def test_form_encoded(self):
        body = "access_token=XYZ&expires_in=5184000"
        self.assertEqual(decode_body(body), {"access_token": "XYZ", "expires_in": "5184000"})

    def test_empty_body(self):
        self.assertEqual(decode_body(""), {})

    def test_json_null_falls_back_to_form(self):
        self.assertEqual(decode_body("null"), {"null": ""})

    def test_json_array_keyed_by_index(self):
        self.assertEqual(decode_body('["a", "b"]'), {0: "a", 1: "b"})

    def test_scalars_become_empty(self):
        self.assertEqual(decode_body("true"), {})
        self.assertEqual(decode_body('"hello"'), {})

    def test_result_is_always_a_dict(self):
        for body in ["", "{", "}}}", "%%%", "null", "false", "[]", "0", "NaN"]:
            self.assertIsInstance(decode_body(body), dict, body)


if __name__ == "__main__":
    unittest.main()
