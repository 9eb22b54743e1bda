'''
Helpers for bit fields.

A bit field of ``bits`` bits is stored in ``bits // 8`` whole bytes followed,
when ``bits`` is not a multiple of eight, by a trailing partial byte whose
low ``bits % 8`` bits carry the payload. Bits are ordered MSB-first inside
each byte.

The trailing byte is never overwritten: its payload is merged so that the
high bits already present in the destination survive.
'''
from typing import Tuple

from bitstring import Bits


BIT_PREFIX = '0b'


def split(bits: int) -> Tuple[int, int]:
    '''Return the number of whole bytes and the number of trailing bits.'''
    if bits < 0:
        raise ValueError(f'a bit field cannot have a negative size ({bits})')

    return bits // 8, bits % 8


def trailing_mask(remainder: int) -> int:
    '''Mask selecting the bits of the trailing byte that must be preserved.'''
    return (0xff << remainder) & 0xff


def merge_trailing(data: bytearray, index: int, value: int, remainder: int):
    mask = trailing_mask(remainder)
    data[index] = (data[index] & mask) | (value & ~mask & 0xff)


def format_bits(data, bits: int) -> str:
    '''Render the first bits of data as "0b" followed by binary digits.'''
    size, remainder = split(bits)

    digits = Bits(bytes=bytes(data[:size])).bin if size else ''
    if remainder:
        digits += Bits(uint=data[size] & ~trailing_mask(remainder) & 0xff, length=remainder).bin

    return BIT_PREFIX + digits


def parse_bits(digits: str, bits: int) -> Tuple[bytes, int]:
    '''Interpret a string of binary digits as a bit field of bits bits.

    A "1" is a set bit, any other character is a clear one and missing
    digits count as clear. It returns the whole bytes and the value of the
    trailing partial byte (zero when there is none).
    '''
    size, remainder = split(bits)

    digits = ''.join('1' if _ == '1' else '0' for _ in digits[:bits]).ljust(bits, '0')

    whole = Bits(bin=digits[:size * 8]).tobytes() if size else b''
    trailing = Bits(bin=digits[size * 8:]).uint if remainder else 0

    return whole, trailing
