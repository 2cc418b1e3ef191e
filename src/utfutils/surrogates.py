'''
UTF-16 surrogate classification and pair arithmetic
'''

from .constants import *
from .common import SurrogateRange


def is_high_surrogate(unit: int) -> bool:
    '''Whether the unit can be the first one of a surrogate pair'''
    return unit >> 10 == HIGH_SURROGATE_MARKER


def is_low_surrogate(unit: int) -> bool:
    '''Whether the unit can be the second one of a surrogate pair'''
    return unit >> 10 == LOW_SURROGATE_MARKER


def is_surrogate(code_point: int, policy: SurrogateRange = SurrogateRange.Closed) -> bool:
    '''Whether a code point lies in the range reserved for surrogates

    With SurrogateRange.Legacy only the open interval 0xD800 < cp < 0xDC00 counts,
    which leaves 0xD800 and every low surrogate unchecked.
    '''
    match policy:
        case SurrogateRange.Closed:
            return HIGH_SURROGATE_START <= code_point <= LOW_SURROGATE_END

        case SurrogateRange.Legacy:
            return HIGH_SURROGATE_START < code_point < LOW_SURROGATE_START

    raise ValueError(f'unknown surrogate range: {policy!r}')


def combine_surrogates(high: int, low: int) -> int:
    return ((high - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START) + SUPPLEMENTARY_PLANE_OFFSET


def split_surrogates(code_point: int) -> tuple[int, int]:
    '''Inverse of combine_surrogates for code points 0x10000..0x10FFFF'''
    value = code_point - SUPPLEMENTARY_PLANE_OFFSET
    high = HIGH_SURROGATE_START + (value >> 10)
    low = LOW_SURROGATE_START + (value & SURROGATE_PAYLOAD_MASK)
    return high, low
