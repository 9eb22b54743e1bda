"""
Binary wire representation: every value is stored byte for byte.

 - scalars take exactly their width, in the requested byte order;
 - strings are fixed size fields, NUL padded;
 - memory blocks are raw byte ranges;
 - bit fields are whole bytes followed by a trailing partial byte.
"""
from . import bits as bitfield
from . import endian
from .enum import Endianess
from .format import StreamFormat
from .strings import BoundedString, to_bytes


class BinaryStreamFormat(StreamFormat):

    def _read_scalar(self, stream, endianess: Endianess, format: str):
        width = endian.WIDTHS[format]
        raw = stream.read(width)
        if len(raw) != width:
            self.logger.debug('short read: %d of %d bytes' % (len(raw), width))
            raw = raw.ljust(width, b'\x00')

        return endian.to_host(endianess, raw, format)

    def _write_scalar(self, stream, endianess: Endianess, value, format: str):
        stream.write(endian.from_host(endianess, value, format))

    def read_u8(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'B')

    def read_u16(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'H')

    def read_u32(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'I')

    def read_u64(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'Q')

    def read_s8(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'b')

    def read_s16(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'h')

    def read_s32(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'i')

    def read_s64(self, stream, endianess, default=0):
        return self._read_scalar(stream, endianess, 'q')

    def read_f32(self, stream, endianess, default=0.0):
        return self._read_scalar(stream, endianess, 'f')

    def read_bit(self, stream, data, bits):
        size, remainder = bitfield.split(bits)

        whole = stream.read(size)
        data[:len(whole)] = whole

        if not remainder:
            return

        last = stream.read(1)
        if last:
            bitfield.merge_trailing(data, size, last[0], remainder)

    def read_string(self, stream, string: BoundedString, size):
        remaining = 0
        if size > string.capacity:
            remaining = size - string.capacity
            size = string.capacity

        raw = stream.read(size)
        string.buffer[:len(raw)] = raw

        if size + 1 < string.capacity:
            string.trim(size)
        else:
            string.trim(string.capacity - 1)

        if remaining:
            self.logger.debug('discarding %d bytes not fitting into %r' % (remaining, string))
            stream.read(remaining)

    def read_mem_block(self, stream, buffer, size):
        raw = stream.read(size)
        buffer[:len(raw)] = raw

        return len(raw)

    def write_u8(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'B')

    def write_u16(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'H')

    def write_u32(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'I')

    def write_u64(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'Q')

    def write_s8(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'b')

    def write_s16(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'h')

    def write_s32(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'i')

    def write_s64(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'q')

    def write_f32(self, stream, endianess, value):
        self._write_scalar(stream, endianess, value, 'f')

    def write_bit(self, stream, data, bits):
        '''NOTE: the trailing byte is written as it is, bits outside the field included.'''
        size, remainder = bitfield.split(bits)

        stream.write(bytes(data[:size]))

        if remainder:
            stream.write(bytes(data[size:size + 1]))

    def write_string(self, stream, string, size):
        raw = to_bytes(string)[:size]

        stream.write(raw)
        stream.write(b'\x00' * (size - len(raw)))

    def write_mem_block(self, stream, buffer, size):
        stream.write(bytes(buffer[:size]))

    def write_decoration_text(self, stream, text):
        pass

    def write_null_char(self, stream):
        pass

    def skip(self, stream, offset):
        stream.skip(offset)

    def flush(self, stream):
        pass

    def rewind(self, stream):
        stream.rewind()
