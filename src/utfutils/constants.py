'''
Bit patterns and magnitude boundaries of the Unicode transformation formats

About the surrogate values:
https://en.wikipedia.org/wiki/UTF-16#Code_points_from_U+010000_to_U+10FFFF

About the UTF-8 boundaries and markers:
https://en.wikipedia.org/wiki/UTF-8#Encoding
'''

# UTF-16 surrogates
HIGH_SURROGATE_START        = 0xD800
HIGH_SURROGATE_END          = 0xDBFF
HIGH_SURROGATE_MARKER       = HIGH_SURROGATE_START >> 10    # 0b110110
LOW_SURROGATE_START         = 0xDC00
LOW_SURROGATE_END           = 0xDFFF
LOW_SURROGATE_MARKER        = LOW_SURROGATE_START >> 10     # 0b110111
SURROGATE_PAYLOAD_MASK      = 0x3FF

SUPPLEMENTARY_PLANE_OFFSET  = 0x10000

# Code points up to and including these values fit into 1/2/3/4 UTF-8 bytes
ONE_BYTE_BOUNDARY           = 0x7F
TWO_BYTE_BOUNDARY           = 0x7FF
THREE_BYTE_BOUNDARY         = 0xFFFF
FOUR_BYTE_BOUNDARY          = 0x10FFFF

MAX_CODE_POINT              = FOUR_BYTE_BOUNDARY
MAX_UTF8_UNIT               = 0xFF
MAX_UTF16_UNIT              = 0xFFFF

# Leading bits of each UTF-8 byte kind
TRAILING_BYTE_MARKER        = 0b10
DOUBLE_BYTE_MARKER          = 0b110
TRIPLE_BYTE_MARKER          = 0b1110
QUADRUPLE_BYTE_MARKER       = 0b11110

TRAILING_BYTE_PAYLOAD_MASK  = 0x3F
