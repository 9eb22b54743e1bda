"""
Best effort parsing of the numeric tokens found in the text format.

None of these functions raise on bad input: they return None and the caller
keeps whatever default it had.
"""
import logging
import re
from typing import Optional

from .endian import WIDTHS, to_f32


logger = logging.getLogger(__name__)

_INT_RE = re.compile(r'''
    ^(?P<sign>[-+]?)
    (?:
        0[xX](?P<hex>[0-9a-fA-F]+)
      | 0[bB](?P<bin>[01]+)
      | 0[oO]?(?P<oct>[0-7]+)
      | (?P<dec>[1-9][0-9]*|0)
    )$''', re.VERBOSE)

# like scanf("%f"): the longest float literal at the start of the text
_FLOAT_RE = re.compile(r'''
    ^\s*[-+]?
    (?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?
      | inf(?:inity)?
      | nan
    )''', re.VERBOSE | re.IGNORECASE)


def int_range(format: str):
    bits = WIDTHS[format] * 8
    if format.islower():
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1

    return 0, (1 << bits) - 1


def parse_int(text: str, format: str) -> Optional[int]:
    '''Parse text as an integer of the type described by the struct format
    character, detecting the base from the prefix (0x, 0b, 0o or a leading 0).'''
    match = _INT_RE.match(text.strip())
    if not match:
        return None

    for group, base in (('hex', 16), ('bin', 2), ('oct', 8), ('dec', 10)):
        digits = match.group(group)
        if digits is not None:
            value = int(digits, base)
            break

    if match.group('sign') == '-':
        value = -value

    low, high = int_range(format)
    if not low <= value <= high:
        logger.debug('value %d out of range for format \'%s\'' % (value, format))
        return None

    return value


def parse_float(text: str) -> Optional[float]:
    match = _FLOAT_RE.match(text)
    if not match:
        return None

    return to_f32(float(match.group(0)))
