"""
The operations shared by every wire representation.

A format doesn't own any channel: each operation receives the byte channel
(something with ``read()``, ``write()``, ``skip()`` and ``rewind()``, see
:class:`streamformat.streams.Stream`) it must work on, so the same format
instance can serve any number of streams.

Writes leave the channel right after the record they produced, so that a
sequence of writes composes a flat stream of records; reads consume exactly
what the matching write produced.

None of the operations raise on malformed data: a failed read gives back the
``default`` for scalars and leaves destination buffers untouched.
"""
import logging

from .enum import Endianess


class StreamFormat(object):
    """Base class to subclass from"""

    def __init__(self):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")

    def __repr__(self):
        return f'<{self.__class__.__name__}()>'

    def read_u8(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_u8() not implemented")

    def read_u16(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_u16() not implemented")

    def read_u32(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_u32() not implemented")

    def read_u64(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_u64() not implemented")

    def read_s8(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_s8() not implemented")

    def read_s16(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_s16() not implemented")

    def read_s32(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_s32() not implemented")

    def read_s64(self, stream, endianess: Endianess, default: int = 0) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_s64() not implemented")

    def read_f32(self, stream, endianess: Endianess, default: float = 0.0) -> float:
        raise NotImplementedError(f"method {self.__class__.__name__}.read_f32() not implemented")

    def read_bit(self, stream, data: bytearray, bits: int) -> None:
        '''Read a bit field of bits bits into data, merging the trailing partial byte.'''
        raise NotImplementedError(f"method {self.__class__.__name__}.read_bit() not implemented")

    def read_string(self, stream, string, size: int) -> None:
        '''Read a string record of size bytes into the BoundedString string.'''
        raise NotImplementedError(f"method {self.__class__.__name__}.read_string() not implemented")

    def read_mem_block(self, stream, buffer: bytearray, size: int) -> int:
        '''Fill at most size bytes of buffer, returning how many were stored.'''
        raise NotImplementedError(f"method {self.__class__.__name__}.read_mem_block() not implemented")

    def write_u8(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_u8() not implemented")

    def write_u16(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_u16() not implemented")

    def write_u32(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_u32() not implemented")

    def write_u64(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_u64() not implemented")

    def write_s8(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_s8() not implemented")

    def write_s16(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_s16() not implemented")

    def write_s32(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_s32() not implemented")

    def write_s64(self, stream, endianess: Endianess, value: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_s64() not implemented")

    def write_f32(self, stream, endianess: Endianess, value: float) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_f32() not implemented")

    def write_bit(self, stream, data, bits: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_bit() not implemented")

    def write_string(self, stream, string, size: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_string() not implemented")

    def write_mem_block(self, stream, buffer, size: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.write_mem_block() not implemented")

    def write_decoration_text(self, stream, text) -> None:
        '''Annotation meant for humans (a header comment, for example).'''
        raise NotImplementedError(f"method {self.__class__.__name__}.write_decoration_text() not implemented")

    def write_null_char(self, stream) -> None:
        '''Mark the end of a section.'''
        raise NotImplementedError(f"method {self.__class__.__name__}.write_null_char() not implemented")

    def skip(self, stream, offset: int) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.skip() not implemented")

    def flush(self, stream) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.flush() not implemented")

    def rewind(self, stream) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.rewind() not implemented")
