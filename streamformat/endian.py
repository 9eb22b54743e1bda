"""
Conversion of scalars between their wire representation and Python values.

Every function takes the endianess the wire data is (or must be) encoded
with. The "host" side is simply the Python value: an ``int`` for the
integer widths and a ``float`` for the single precision type.

Floats keep their raw bit pattern: NaN payloads (signaling ones included)
and infinities survive a wire -> float -> wire round trip unchanged. The
``*_f32_bits`` helpers give access to the pattern itself.
"""
import math
import struct
from functools import lru_cache, partial

from .enum import Endianess
from .exceptions import EndianessException


_PREFIXES = {
    Endianess.LITTLE_ENDIAN: '<',
    Endianess.BIG_ENDIAN: '>',
    Endianess.NETWORK: '!',
    Endianess.NATIVE: '=',
}

# format character -> width in bytes
WIDTHS = {
    'B': 1, 'b': 1,
    'H': 2, 'h': 2,
    'I': 4, 'i': 4,
    'Q': 8, 'q': 8,
    'f': 4,
}

F32_EXPONENT = 0x7f800000
F32_MANTISSA = 0x007fffff
F32_QUIET = 0x00400000


def get_format(endianess: Endianess, format: str) -> str:
    try:
        return '%s%s' % (_PREFIXES[endianess], format)
    except KeyError:
        raise EndianessException(f'unknown endianess {endianess!r}') from None


@lru_cache
def get_struct(endianess: Endianess, format: str) -> struct.Struct:
    return struct.Struct(get_format(endianess, format))


def wrap_int(value: int, format: str) -> int:
    '''Truncate an integer to the width of format, the way a C cast does.'''
    bits = WIDTHS[format] * 8
    value &= (1 << bits) - 1
    if format.islower() and value >= 1 << (bits - 1):
        value -= 1 << bits

    return value


def to_f32(value: float) -> float:
    '''Round a Python float to single precision.'''
    try:
        return struct.unpack('<f', struct.pack('<f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def f32_to_bits(value: float) -> int:
    if math.isnan(value):
        # narrow the NaN by hand, a C cast would set the quiet bit
        double = struct.unpack('<Q', struct.pack('<d', value))[0]
        mantissa = (double >> 29) & F32_MANTISSA or F32_QUIET
        return (double >> 63) << 31 | F32_EXPONENT | mantissa

    try:
        raw = struct.pack('<f', value)
    except OverflowError:
        raw = struct.pack('<f', math.copysign(math.inf, value))

    return struct.unpack('<I', raw)[0]


def bits_to_f32(bits: int) -> float:
    bits &= 0xffffffff
    if bits & F32_EXPONENT == F32_EXPONENT and bits & F32_MANTISSA:
        double = (bits >> 31) << 63 | 0x7ff << 52 | (bits & F32_MANTISSA) << 29
        return struct.unpack('<d', struct.pack('<Q', double))[0]

    return struct.unpack('<f', struct.pack('<I', bits))[0]


def to_host(endianess: Endianess, raw: bytes, format: str):
    if format == 'f':
        return bits_to_f32(get_struct(endianess, 'I').unpack(raw)[0])

    return get_struct(endianess, format).unpack(raw)[0]


def from_host(endianess: Endianess, value, format: str) -> bytes:
    if format == 'f':
        return get_struct(endianess, 'I').pack(f32_to_bits(value))

    return get_struct(endianess, format).pack(wrap_int(value, format))


to_host_u8 = partial(to_host, format='B')
to_host_u16 = partial(to_host, format='H')
to_host_u32 = partial(to_host, format='I')
to_host_u64 = partial(to_host, format='Q')
to_host_s8 = partial(to_host, format='b')
to_host_s16 = partial(to_host, format='h')
to_host_s32 = partial(to_host, format='i')
to_host_s64 = partial(to_host, format='q')
to_host_f32 = partial(to_host, format='f')

from_host_u8 = partial(from_host, format='B')
from_host_u16 = partial(from_host, format='H')
from_host_u32 = partial(from_host, format='I')
from_host_u64 = partial(from_host, format='Q')
from_host_s8 = partial(from_host, format='b')
from_host_s16 = partial(from_host, format='h')
from_host_s32 = partial(from_host, format='i')
from_host_s64 = partial(from_host, format='q')
from_host_f32 = partial(from_host, format='f')


def to_host_f32_bits(endianess: Endianess, raw: bytes) -> int:
    '''Return the IEEE-754 bit pattern stored in raw, without going through a float.'''
    return to_host_u32(endianess, raw)


def from_host_f32_bits(endianess: Endianess, bits: int) -> bytes:
    return from_host_u32(endianess, bits)
