'''
Packing of UTF-16 / UTF-32 code units to and from raw bytes

No byte order mark is read or written; the byte order comes from the caller
or from the configured default.
'''

from typing import Iterable
import struct

from .common import default_endian

_FORMATS = {
    2: 'H',
    4: 'I',
}


def _format(width: int, count: int, endian: str | None) -> str:
    if width not in _FORMATS:
        raise ValueError(f'unsupported unit width: {width}')

    endian = endian or default_endian()
    match endian:
        case 'little':
            prefix = '<'

        case 'big':
            prefix = '>'

        case _:
            raise ValueError(f'unknown byte order: {endian!r}')

    return f'{prefix}{count}{_FORMATS[width]}'


def pack_units(units: Iterable[int], width: int, endian: str | None = None) -> bytes:
    '''Serialize code units, width bytes each'''
    units = tuple(units)
    try:
        return struct.pack(_format(width, len(units), endian), *units)

    except struct.error as e:
        raise ValueError(f'cannot pack units into {width} bytes: {e}') from e


def unpack_units(data: bytes, width: int, endian: str | None = None) -> tuple[int, ...]:
    '''Deserialize code units, width bytes each'''
    data = bytes(data)
    if len(data) % width:
        raise ValueError(f'data length {len(data)} is not a multiple of {width}')

    return struct.unpack(_format(width, len(data) // width, endian), data)
