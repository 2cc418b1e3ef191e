'''
Decode stage: UTF-8 / UTF-16 code units -> code points
'''

from typing import Iterable
import logging

from .constants import *
from .status import ConversionResult, ConversionStatus
from .surrogates import *

logger = logging.getLogger(__name__)

# (leading bits, shift isolating them, trailing byte count, payload mask, smallest value needing this length)
_UTF8_LEADS = (
    (DOUBLE_BYTE_MARKER,    5, 1, 0x1F, ONE_BYTE_BOUNDARY + 1),
    (TRIPLE_BYTE_MARKER,    4, 2, 0x0F, TWO_BYTE_BOUNDARY + 1),
    (QUADRUPLE_BYTE_MARKER, 3, 3, 0x07, THREE_BYTE_BOUNDARY + 1),
)


def _reject(status: ConversionStatus, reason: str, index: int, unit) -> ConversionResult:
    logger.debug('%s at index %d (%r): %s', status, index, unit, reason)
    return ConversionResult.failure(status)


def _is_unit(unit, max_value: int) -> bool:
    return isinstance(unit, int) and 0 <= unit <= max_value


def decode_utf16(units: Iterable[int], comply_with_standard: bool = False) -> ConversionResult:
    '''Decode UTF-16 code units into a tuple of code points

    Surrogate pairs are combined. A high surrogate without a low one after it is
    passed through as-is, or rejected with NonStandardEncoding when
    comply_with_standard is set. Any other unit, a lone low surrogate included,
    is taken as a code point unchanged.
    '''
    units = list(units)
    code_points = []

    count = len(units)
    index = 0
    while index < count:
        this_unit = units[index]
        if not _is_unit(this_unit, MAX_UTF16_UNIT):
            return _reject(ConversionStatus.UndefinedError, 'not a 16-bit code unit', index, this_unit)

        if is_high_surrogate(this_unit):
            next_unit = units[index + 1] if index + 1 < count else None

            if next_unit is not None and _is_unit(next_unit, MAX_UTF16_UNIT) and is_low_surrogate(next_unit):
                code_points.append(combine_surrogates(this_unit, next_unit))
                index += 2
                continue

            if comply_with_standard:
                return _reject(ConversionStatus.NonStandardEncoding, 'unpaired high surrogate', index, this_unit)

        code_points.append(this_unit)
        index += 1

    return ConversionResult.success(tuple(code_points))


def decode_utf8(data: Iterable[int], comply_with_standard: bool = False) -> ConversionResult:
    '''Decode UTF-8 bytes into a tuple of code points

    Malformed sequences (bad leading byte, missing or invalid trailing bytes,
    values above U+10FFFF) fail with UndefinedError in every mode. Overlong forms
    and encoded surrogates decode to their value, or fail with NonStandardEncoding
    when comply_with_standard is set.
    '''
    data = list(data)
    code_points = []

    count = len(data)
    index = 0
    while index < count:
        lead = data[index]
        if not _is_unit(lead, MAX_UTF8_UNIT):
            return _reject(ConversionStatus.UndefinedError, 'not an 8-bit code unit', index, lead)

        if lead <= ONE_BYTE_BOUNDARY:
            code_points.append(lead)
            index += 1
            continue

        for marker, marker_shift, trailing, payload_mask, minimum in _UTF8_LEADS:
            if lead >> marker_shift == marker:
                break

        else:
            return _reject(ConversionStatus.UndefinedError, 'invalid leading byte', index, lead)

        if index + trailing >= count:
            return _reject(ConversionStatus.UndefinedError, 'truncated sequence', index, lead)

        code_point = lead & payload_mask
        for offset in range(1, trailing + 1):
            byte = data[index + offset]
            if not _is_unit(byte, MAX_UTF8_UNIT) or byte >> 6 != TRAILING_BYTE_MARKER:
                return _reject(ConversionStatus.UndefinedError, 'invalid trailing byte', index + offset, byte)

            code_point = (code_point << 6) | (byte & TRAILING_BYTE_PAYLOAD_MASK)

        if code_point > MAX_CODE_POINT:
            return _reject(ConversionStatus.UndefinedError, 'beyond U+10FFFF', index, code_point)

        if comply_with_standard:
            if code_point < minimum:
                return _reject(ConversionStatus.NonStandardEncoding, 'overlong sequence', index, code_point)

            if is_surrogate(code_point):
                return _reject(ConversionStatus.NonStandardEncoding, 'encoded surrogate', index, code_point)

        code_points.append(code_point)
        index += trailing + 1

    return ConversionResult.success(tuple(code_points))
