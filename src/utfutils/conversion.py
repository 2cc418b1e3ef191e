'''
Directional conversions between UTF-8, UTF-16 and UTF-32

Each function decodes the source into code points and encodes them into the
target, skipping whichever stage is UTF-32 already. The comply_with_standard
flag (permissive by default) is handed unchanged to every stage; conversions
that encode also take the strict-mode surrogate_range.

About the U+D800..U+DFFF range:
https://en.wikipedia.org/wiki/UTF-16#U+D800_to_U+DFFF
'''

from typing import Iterable

from .common import SurrogateRange
from .decoder import decode_utf8, decode_utf16
from .encoder import encode_utf8, encode_utf16
from .status import ConversionResult, ConversionStatus

__all__ = [
    'utf8_to_utf16',
    'utf8_to_utf32',
    'utf16_to_utf8',
    'utf16_to_utf32',
    'utf32_to_utf8',
    'utf32_to_utf16',
]


def _chain(decode, encode, source, comply_with_standard: bool, surrogate_range: SurrogateRange) -> ConversionResult:
    code_points = decode(source, comply_with_standard)
    if code_points.status < ConversionStatus.Success:
        return code_points

    return encode(code_points.value, comply_with_standard, surrogate_range = surrogate_range)


def utf8_to_utf16(
    utf8: Iterable[int],
    comply_with_standard: bool = False,
    *,
    surrogate_range: SurrogateRange = SurrogateRange.Closed,
) -> ConversionResult:
    '''UTF-8 bytes -> tuple of UTF-16 code units'''
    return _chain(decode_utf8, encode_utf16, utf8, comply_with_standard, surrogate_range)


def utf8_to_utf32(utf8: Iterable[int], comply_with_standard: bool = False) -> ConversionResult:
    '''UTF-8 bytes -> tuple of code points'''
    return decode_utf8(utf8, comply_with_standard)


def utf16_to_utf8(
    utf16: Iterable[int],
    comply_with_standard: bool = False,
    *,
    surrogate_range: SurrogateRange = SurrogateRange.Closed,
) -> ConversionResult:
    '''UTF-16 code units -> UTF-8 bytes'''
    return _chain(decode_utf16, encode_utf8, utf16, comply_with_standard, surrogate_range)


def utf16_to_utf32(utf16: Iterable[int], comply_with_standard: bool = False) -> ConversionResult:
    '''UTF-16 code units -> tuple of code points'''
    return decode_utf16(utf16, comply_with_standard)


def utf32_to_utf8(
    utf32: Iterable[int] | str,
    comply_with_standard: bool = False,
    *,
    surrogate_range: SurrogateRange = SurrogateRange.Closed,
) -> ConversionResult:
    '''Code points (or a str) -> UTF-8 bytes'''
    return encode_utf8(utf32, comply_with_standard, surrogate_range = surrogate_range)


def utf32_to_utf16(
    utf32: Iterable[int] | str,
    comply_with_standard: bool = False,
    *,
    surrogate_range: SurrogateRange = SurrogateRange.Closed,
) -> ConversionResult:
    '''Code points (or a str) -> tuple of UTF-16 code units'''
    return encode_utf16(utf32, comply_with_standard, surrogate_range = surrogate_range)
