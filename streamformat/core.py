"""
Core module binding a wire format to a byte channel.

A ReadStream (or WriteStream) carries the three things a typed operation
needs: the channel, the format and the endianess. Switching between the
binary and the text representation is only a matter of calling set_mode(),
the call sites stay the same:

    stream = WriteStream(Stream(b''), mode=Modes.TEXT)
    stream.write_u32(0xcafe)
    stream.write_string('kebab', 0x10)
"""
import logging

from .binary import BinaryStreamFormat
from .enum import Endianess, Modes
from .exceptions import ModeException
from .format import StreamFormat
from .strings import BoundedString
from .text import TextStreamFormat


# the built-in formats keep no state so they can be shared by every stream
BINARY_FORMAT = BinaryStreamFormat()
TEXT_FORMAT = TextStreamFormat()


class FormatStream(object):
    """Base class of the read and write bindings"""

    def __init__(self, stream, mode=Modes.BINARY, endianess=Endianess.LITTLE_ENDIAN):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.stream = stream
        self.endianess = endianess
        self.format: StreamFormat = None
        self.set_mode(mode)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.format!r}, {self.endianess.name})>'

    def set_mode(self, mode: Modes):
        if mode == Modes.BINARY:
            self.format = BINARY_FORMAT
        elif mode == Modes.TEXT:
            self.format = TEXT_FORMAT
        else:
            raise ModeException(f'unknown mode {mode!r}')

        self.logger.debug('stream set to mode %s' % mode.name)

    def set_user_format(self, format: StreamFormat):
        '''Use a format that is not one of the built-in ones.'''
        self.format = format

    def skip(self, offset: int):
        self.format.skip(self.stream, offset)

    def rewind(self):
        self.format.rewind(self.stream)


class ReadStream(FormatStream):

    def read_u8(self, default=0) -> int:
        return self.format.read_u8(self.stream, self.endianess, default)

    def read_u16(self, default=0) -> int:
        return self.format.read_u16(self.stream, self.endianess, default)

    def read_u32(self, default=0) -> int:
        return self.format.read_u32(self.stream, self.endianess, default)

    def read_u64(self, default=0) -> int:
        return self.format.read_u64(self.stream, self.endianess, default)

    def read_s8(self, default=0) -> int:
        return self.format.read_s8(self.stream, self.endianess, default)

    def read_s16(self, default=0) -> int:
        return self.format.read_s16(self.stream, self.endianess, default)

    def read_s32(self, default=0) -> int:
        return self.format.read_s32(self.stream, self.endianess, default)

    def read_s64(self, default=0) -> int:
        return self.format.read_s64(self.stream, self.endianess, default)

    def read_f32(self, default=0.0) -> float:
        return self.format.read_f32(self.stream, self.endianess, default)

    def read_bit(self, data: bytearray, bits: int):
        self.format.read_bit(self.stream, data, bits)

    def read_string(self, string: BoundedString, size: int):
        self.format.read_string(self.stream, string, size)

    def read_mem_block(self, buffer: bytearray, size: int) -> int:
        return self.format.read_mem_block(self.stream, buffer, size)


class WriteStream(FormatStream):

    def write_u8(self, value: int):
        self.format.write_u8(self.stream, self.endianess, value)

    def write_u16(self, value: int):
        self.format.write_u16(self.stream, self.endianess, value)

    def write_u32(self, value: int):
        self.format.write_u32(self.stream, self.endianess, value)

    def write_u64(self, value: int):
        self.format.write_u64(self.stream, self.endianess, value)

    def write_s8(self, value: int):
        self.format.write_s8(self.stream, self.endianess, value)

    def write_s16(self, value: int):
        self.format.write_s16(self.stream, self.endianess, value)

    def write_s32(self, value: int):
        self.format.write_s32(self.stream, self.endianess, value)

    def write_s64(self, value: int):
        self.format.write_s64(self.stream, self.endianess, value)

    def write_f32(self, value: float):
        self.format.write_f32(self.stream, self.endianess, value)

    def write_bit(self, data, bits: int):
        self.format.write_bit(self.stream, data, bits)

    def write_string(self, string, size: int):
        self.format.write_string(self.stream, string, size)

    def write_mem_block(self, buffer, size: int):
        self.format.write_mem_block(self.stream, buffer, size)

    def write_decoration_text(self, text):
        self.format.write_decoration_text(self.stream, text)

    def write_null_char(self):
        self.format.write_null_char(self.stream)

    def flush(self):
        self.format.flush(self.stream)
