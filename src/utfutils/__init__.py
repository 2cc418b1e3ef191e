'''
Conversions between the Unicode transformation formats UTF-8, UTF-16 and UTF-32
'''

__version__ = '0.1.0'

from .common import (
    SurrogateRange,
    get_config,
    init_config,
)
from .status import (
    ConversionError,
    ConversionResult,
    ConversionStatus,
)
from .surrogates import (
    is_high_surrogate,
    is_low_surrogate,
    is_surrogate,
    combine_surrogates,
    split_surrogates,
)
from .decoder import decode_utf8, decode_utf16
from .encoder import encode_utf8, encode_utf16
from .conversion import *
from .units import pack_units, unpack_units

__all__ = [
    'SurrogateRange',
    'get_config',
    'init_config',

    'ConversionError',
    'ConversionResult',
    'ConversionStatus',

    'is_high_surrogate',
    'is_low_surrogate',
    'is_surrogate',
    'combine_surrogates',
    'split_surrogates',

    'decode_utf8',
    'decode_utf16',
    'encode_utf8',
    'encode_utf16',

    'utf8_to_utf16',
    'utf8_to_utf32',
    'utf16_to_utf8',
    'utf16_to_utf32',
    'utf32_to_utf8',
    'utf32_to_utf16',

    'pack_units',
    'unpack_units',
]
