"""
Human readable wire representation.

Values are written as tokens followed by a terminator (a space by default):

 - integers in decimal, floats with eight decimal places;
 - bit fields as ``0b`` followed by the binary digits;
 - strings between double quotes, with ``\\"`` for an embedded quote (a
   trailing backslash is not escaped and swallows the closing quote);
 - memory blocks as base64 between double quotes.

When reading, integers can use any base prefix and comments
(``//``, ``/* */`` and ``#``) may appear between tokens, see
:mod:`streamformat.tokenizer`.

Every operation works with its own scratch buffer of ``scratch_capacity``
bytes, so a format instance keeps no state between calls and can be shared
by different threads.
"""
import base64
import binascii

from . import bits as bitfield
from .endian import wrap_int, to_f32
from .format import StreamFormat
from .parsing import parse_int, parse_float
from .strings import BoundedString, to_bytes
from .tokenizer import Tokenizer, DEFAULT_TERMINATORS, DEFAULT_SCRATCH_CAPACITY


QUOTE = b'"'
ESCAPED_QUOTE = b'\\"'


def base64_size(size: int) -> int:
    '''Length of the padded base64 encoding of size bytes.'''
    return (size + 2) // 3 * 4


class TextStreamFormat(StreamFormat):

    def __init__(self, terminators=DEFAULT_TERMINATORS, scratch_capacity=DEFAULT_SCRATCH_CAPACITY):
        super().__init__()
        if not terminators:
            raise ValueError('the terminator set cannot be empty')

        self.terminators = to_bytes(terminators)
        self.scratch_capacity = scratch_capacity

    def __repr__(self):
        return f'<{self.__class__.__name__}(terminators={self.terminators!r})>'

    @property
    def terminator(self) -> bytes:
        '''The byte appended after each written value.'''
        return self.terminators[:1]

    def next_token(self, stream) -> BoundedString:
        return Tokenizer(stream, terminators=self.terminators, capacity=self.scratch_capacity).next_token()

    def _read_int(self, stream, default, format):
        value = parse_int(str(self.next_token(stream)), format)

        return default if value is None else value

    def _write_token(self, stream, text: str):
        stream.write(text.encode('latin1'))
        stream.write(self.terminator)

    def _write_int(self, stream, value, format):
        self._write_token(stream, '%d' % wrap_int(value, format))

    def read_u8(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'B')

    def read_u16(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'H')

    def read_u32(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'I')

    def read_u64(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'Q')

    def read_s8(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'b')

    def read_s16(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'h')

    def read_s32(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'i')

    def read_s64(self, stream, endianess, default=0):
        return self._read_int(stream, default, 'q')

    def read_f32(self, stream, endianess, default=0.0):
        token = self.next_token(stream)
        if token.is_empty():
            return default

        value = parse_float(str(token))

        return default if value is None else value

    def read_bit(self, stream, data, bits):
        token = str(self.next_token(stream))
        if not token.startswith(bitfield.BIT_PREFIX):
            self.logger.debug('token \'%s\' is not a bit field, ignoring it' % token)
            return

        size, remainder = bitfield.split(bits)
        whole, trailing = bitfield.parse_bits(token[len(bitfield.BIT_PREFIX):], bits)

        data[:size] = whole
        if remainder:
            bitfield.merge_trailing(data, size, trailing, remainder)

    def read_string(self, stream, string: BoundedString, size):
        string.copy(self.next_token(stream))

    def read_mem_block(self, stream, buffer, size):
        token = self.next_token(stream).value

        try:
            decoded = base64.b64decode(token + b'=' * (-len(token) % 4))
        except (binascii.Error, ValueError) as e:
            self.logger.debug('cannot decode memory block: %s' % e)
            return 0

        decoded = decoded[:size]
        buffer[:len(decoded)] = decoded

        return len(decoded)

    def write_u8(self, stream, endianess, value):
        self._write_int(stream, value, 'B')

    def write_u16(self, stream, endianess, value):
        self._write_int(stream, value, 'H')

    def write_u32(self, stream, endianess, value):
        self._write_int(stream, value, 'I')

    def write_u64(self, stream, endianess, value):
        self._write_int(stream, value, 'Q')

    def write_s8(self, stream, endianess, value):
        self._write_int(stream, value, 'b')

    def write_s16(self, stream, endianess, value):
        self._write_int(stream, value, 'h')

    def write_s32(self, stream, endianess, value):
        self._write_int(stream, value, 'i')

    def write_s64(self, stream, endianess, value):
        self._write_int(stream, value, 'q')

    def write_f32(self, stream, endianess, value):
        self._write_token(stream, '%.8f' % to_f32(value))

    def write_bit(self, stream, data, bits):
        self._write_token(stream, bitfield.format_bits(data, bits))

    def write_string(self, stream, string, size):
        raw = to_bytes(string)[:size]

        stream.write(QUOTE + raw.replace(QUOTE, ESCAPED_QUOTE) + QUOTE)

    def write_mem_block(self, stream, buffer, size):
        # the encoded text and its terminator must fit the scratch buffer
        if base64_size(size) + 1 >= self.scratch_capacity:
            self.logger.debug('memory block of %d bytes does not fit, not writing it' % size)
            return

        encoded = base64.b64encode(bytes(buffer[:size]))

        stream.write(QUOTE + encoded + QUOTE)
        stream.write(self.terminator)

    def write_decoration_text(self, stream, text):
        stream.write(to_bytes(text))

    def write_null_char(self, stream):
        stream.write(b'\x00')

    def skip(self, stream, offset):
        '''The offset is meaningless here: skipping means dropping the next token.'''
        self.next_token(stream)

    def flush(self, stream):
        pass

    def rewind(self, stream):
        stream.rewind()
