'''
Encode stage: code points -> UTF-8 / UTF-16 code units
'''

from typing import Iterable
import logging

from .constants import *
from .common import SurrogateRange
from .status import ConversionResult, ConversionStatus
from .surrogates import *

logger = logging.getLogger(__name__)


def _code_points(code_points: Iterable[int] | str) -> list:
    if isinstance(code_points, str):
        return [ord(ch) for ch in code_points]

    return list(code_points)


def _check_code_point(code_point, index: int, comply_with_standard: bool, policy: SurrogateRange | None) -> ConversionStatus:
    if not isinstance(code_point, int) or not 0 <= code_point <= MAX_CODE_POINT:
        logger.debug('code point %r at index %d is outside the Unicode range', code_point, index)
        return ConversionStatus.UndefinedError

    if comply_with_standard and policy is not None and is_surrogate(code_point, policy):
        logger.debug('code point 0x%04X at index %d is reserved for surrogates', code_point, index)
        return ConversionStatus.NonStandardEncoding

    return ConversionStatus.Success


def _trailing_byte(code_point: int, shift: int) -> int:
    return (TRAILING_BYTE_MARKER << 6) | ((code_point >> shift) & TRAILING_BYTE_PAYLOAD_MASK)


def encode_utf8(
    code_points: Iterable[int] | str,
    comply_with_standard: bool = False,
    *,
    surrogate_range: SurrogateRange = SurrogateRange.Closed,
) -> ConversionResult:
    '''Encode code points into UTF-8 bytes

    The byte count of each character is chosen by the magnitude of its code point.
    Code points above U+10FFFF fail with UndefinedError in every mode; in strict
    mode a code point in surrogate_range fails with NonStandardEncoding.
    '''
    result = bytearray()

    for index, code_point in enumerate(_code_points(code_points)):
        # only three byte code points can collide with the surrogate range
        in_three_bytes = isinstance(code_point, int) and TWO_BYTE_BOUNDARY < code_point <= THREE_BYTE_BOUNDARY
        status = _check_code_point(code_point, index, comply_with_standard, surrogate_range if in_three_bytes else None)
        if status < ConversionStatus.Success:
            return ConversionResult.failure(status)

        if code_point <= ONE_BYTE_BOUNDARY:
            result.append(code_point)

        elif code_point <= TWO_BYTE_BOUNDARY:
            result.append((DOUBLE_BYTE_MARKER << 5) | (code_point >> 6))
            result.append(_trailing_byte(code_point, 0))

        elif code_point <= THREE_BYTE_BOUNDARY:
            result.append((TRIPLE_BYTE_MARKER << 4) | (code_point >> 12))
            result.append(_trailing_byte(code_point, 6))
            result.append(_trailing_byte(code_point, 0))

        else:
            result.append((QUADRUPLE_BYTE_MARKER << 3) | (code_point >> 18))
            result.append(_trailing_byte(code_point, 12))
            result.append(_trailing_byte(code_point, 6))
            result.append(_trailing_byte(code_point, 0))

    return ConversionResult.success(bytes(result))


def encode_utf16(
    code_points: Iterable[int] | str,
    comply_with_standard: bool = False,
    *,
    surrogate_range: SurrogateRange = SurrogateRange.Closed,
) -> ConversionResult:
    '''Encode code points into UTF-16 code units

    Code points from U+10000 up are split into a surrogate pair. In strict mode a
    code point in surrogate_range fails with NonStandardEncoding.
    '''
    units = []

    for index, code_point in enumerate(_code_points(code_points)):
        status = _check_code_point(code_point, index, comply_with_standard, surrogate_range)
        if status < ConversionStatus.Success:
            return ConversionResult.failure(status)

        if code_point <= MAX_UTF16_UNIT:
            units.append(code_point)
            continue

        units.extend(split_surrogates(code_point))

    return ConversionResult.success(tuple(units))
