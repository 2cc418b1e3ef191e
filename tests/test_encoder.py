#!/usr/bin/env python3
'''
Unit tests for the encode stage (code points -> UTF-8 / UTF-16)
'''

from pathlib import Path
import sys
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from utfutils import *
from fixtures import BOUNDARIES


class TestEncodeUTF8(unittest.TestCase):
    '''Test encode_utf8'''

    def test_boundaries(self):
        for code_point, utf8, _ in BOUNDARIES:
            with self.subTest(code_point = hex(code_point)):
                result = encode_utf8([code_point])
                self.assertEqual(result.status, ConversionStatus.Success)
                self.assertEqual(result.value, utf8)

    def test_length_is_chosen_by_magnitude(self):
        self.assertEqual(len(encode_utf8([0x7F]).value), 1)
        self.assertEqual(len(encode_utf8([0x80]).value), 2)
        self.assertEqual(encode_utf8([0x7FF]).value, b'\xDF\xBF')
        self.assertEqual(encode_utf8([0x800]).value, b'\xE0\xA0\x80')
        self.assertEqual(len(encode_utf8([0xFFFF]).value), 3)
        self.assertEqual(len(encode_utf8([0x10000]).value), 4)

    def test_matches_python_codec(self):
        text = 'plain ascii, Ünïcödé, Ελληνικά, 日本語, 😀🎉𝄞'
        result = encode_utf8(text)
        self.assertEqual(result.value, text.encode('utf-8'))

    def test_out_of_range(self):
        for comply in (False, True):
            for code_point in (0x110000, 0xFFFFFFFF, -1):
                with self.subTest(comply = comply, code_point = code_point):
                    result = encode_utf8([0x41, code_point], comply)
                    self.assertEqual(result.status, ConversionStatus.UndefinedError)
                    self.assertIsNone(result.value)

    def test_non_integer_code_point(self):
        result = encode_utf8([0x41, 'B'])
        self.assertEqual(result.status, ConversionStatus.UndefinedError)

    def test_surrogates_permissive(self):
        '''Surrogate code points get the generic three byte form'''
        self.assertEqual(encode_utf8([0xD800], False).value, b'\xED\xA0\x80')
        self.assertEqual(encode_utf8([0xDFFF], False).value, b'\xED\xBF\xBF')

    def test_surrogates_strict(self):
        for code_point in (0xD800, 0xDA12, 0xDBFF, 0xDC00, 0xDFFF):
            with self.subTest(code_point = hex(code_point)):
                result = encode_utf8([code_point], True)
                self.assertEqual(result.status, ConversionStatus.NonStandardEncoding)
                self.assertIsNone(result.value)

    def test_surrogates_strict_legacy_range(self):
        legacy = SurrogateRange.Legacy

        self.assertEqual(encode_utf8([0xD800], True, surrogate_range = legacy).value, b'\xED\xA0\x80')
        self.assertEqual(encode_utf8([0xDC00], True, surrogate_range = legacy).value, b'\xED\xB0\x80')
        self.assertEqual(encode_utf8([0xD801], True, surrogate_range = legacy).status, ConversionStatus.NonStandardEncoding)

        # permissive mode ignores the range
        self.assertEqual(encode_utf8([0xD801], False, surrogate_range = legacy).value, b'\xED\xA0\x81')

    def test_strict_does_not_change_valid_output(self):
        code_points = [0x24, 0xA2, 0x20AC, 0xD7FF, 0xE000, 0x10348]
        self.assertEqual(encode_utf8(code_points, True), encode_utf8(code_points, False))

    def test_failure_is_logged(self):
        with self.assertLogs('utfutils.encoder', level = 'DEBUG') as logs:
            encode_utf8([0x41, 0x110000])

        self.assertIn('index 1', logs.output[0])

    def test_empty(self):
        result = encode_utf8([])
        self.assertEqual(result.status, ConversionStatus.Success)
        self.assertEqual(result.value, b'')


class TestEncodeUTF16(unittest.TestCase):
    '''Test encode_utf16'''

    def test_boundaries(self):
        for code_point, _, utf16 in BOUNDARIES:
            with self.subTest(code_point = hex(code_point)):
                result = encode_utf16([code_point])
                self.assertEqual(result.status, ConversionStatus.Success)
                self.assertEqual(result.value, utf16)

    def test_matches_python_codec(self):
        text = 'abc Ωμέγα 𝄞 😀 \U0010FFFF'
        data = text.encode('utf-16-le')
        expected = tuple(int.from_bytes(data[i:i + 2], 'little') for i in range(0, len(data), 2))
        self.assertEqual(encode_utf16(text).value, expected)

    def test_out_of_range(self):
        for comply in (False, True):
            with self.subTest(comply = comply):
                self.assertEqual(encode_utf16([0x110000], comply).status, ConversionStatus.UndefinedError)

    def test_surrogates(self):
        self.assertEqual(encode_utf16([0xD800], False).value, (0xD800,))
        self.assertEqual(encode_utf16([0xDC00], True).status, ConversionStatus.NonStandardEncoding)
        self.assertEqual(encode_utf16([0xD800], True).status, ConversionStatus.NonStandardEncoding)

    def test_surrogates_strict_legacy_range(self):
        legacy = SurrogateRange.Legacy

        self.assertEqual(encode_utf16([0xD800, 0xDC00], True, surrogate_range = legacy).value, (0xD800, 0xDC00))
        self.assertEqual(encode_utf16([0xDA00], True, surrogate_range = legacy).status, ConversionStatus.NonStandardEncoding)

    def test_default_mode_is_permissive(self):
        self.assertEqual(encode_utf16([0xD800]).value, (0xD800,))
        self.assertEqual(encode_utf8([0xD800]).value, b'\xED\xA0\x80')


if __name__ == '__main__':
    unittest.main()
