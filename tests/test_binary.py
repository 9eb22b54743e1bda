import math

import pytest

from streamformat import endian
from streamformat.binary import BinaryStreamFormat
from streamformat.enum import Endianess
from streamformat.streams import Stream
from streamformat.strings import BoundedString


SCALARS = [
    ('u8', 1, [0, 1, 0xff]),
    ('u16', 2, [0, 1, 0xffff]),
    ('u32', 4, [0, 1, 0xffffffff]),
    ('u64', 8, [0, 1, 0xffffffffffffffff]),
    ('s8', 1, [0, -1, 0x7f, -0x80]),
    ('s16', 2, [0, -1, 0x7fff, -0x8000]),
    ('s32', 4, [0, -1, 0x7fffffff, -0x80000000]),
    ('s64', 8, [0, -1, 0x7fffffffffffffff, -0x8000000000000000]),
    ('f32', 4, [0.0, 1.5, -0.25, math.inf]),
]


@pytest.fixture
def fmt():
    return BinaryStreamFormat()


@pytest.mark.parametrize('endianess', [Endianess.LITTLE_ENDIAN, Endianess.BIG_ENDIAN])
@pytest.mark.parametrize('name,width,values', SCALARS)
def test_scalars(fmt, name, width, values, endianess):
    """Each scalar takes exactly its width and reads back unchanged."""
    stream = Stream(b'')

    for value in values:
        getattr(fmt, 'write_%s' % name)(stream, endianess, value)

    assert len(stream.getvalue()) == width * len(values)

    fmt.rewind(stream)

    for value in values:
        assert getattr(fmt, 'read_%s' % name)(stream, endianess) == value

    assert stream.tell() == width * len(values)


def test_scalar_layout(fmt):
    stream = Stream(b'')

    fmt.write_u32(stream, Endianess.LITTLE_ENDIAN, 0xcafe)
    fmt.write_u32(stream, Endianess.BIG_ENDIAN, 0xcafe)
    fmt.write_s16(stream, Endianess.BIG_ENDIAN, -2)

    assert stream.getvalue() == b'\xfe\xca\x00\x00' + b'\x00\x00\xca\xfe' + b'\xff\xfe'


def test_short_read_is_zero_filled(fmt):
    stream = Stream(b'\x01')

    assert fmt.read_u32(stream, Endianess.LITTLE_ENDIAN) == 1
    assert fmt.read_u16(stream, Endianess.LITTLE_ENDIAN) == 0


@pytest.mark.parametrize('endianess', [Endianess.LITTLE_ENDIAN, Endianess.BIG_ENDIAN])
@pytest.mark.parametrize('bits', [0x7f800001, 0xffc00001, 0x7fbfffff, 0x7f800000])
def test_f32_nan_bits_survive(fmt, bits, endianess):
    """NaN payloads, signaling ones included, are written back unchanged."""
    raw = endian.from_host_f32_bits(endianess, bits)

    value = fmt.read_f32(Stream(raw), endianess)
    stream = Stream(b'')
    fmt.write_f32(stream, endianess, value)

    assert stream.getvalue() == raw


def test_write_string_pads(fmt):
    stream = Stream(b'')

    fmt.write_string(stream, 'hello', 10)

    assert stream.getvalue() == b'hello' + b'\x00' * 5


def test_write_string_truncates(fmt):
    stream = Stream(b'')

    fmt.write_string(stream, BoundedString(0x10, 'kebab'), 3)

    assert stream.getvalue() == b'keb'


def test_read_string_bigger_than_destination(fmt):
    """The whole record is consumed even if only part of it can be stored."""
    stream = Stream(b'hello' + b'\x00' * 5 + b'\x2a')
    string = BoundedString(3)

    fmt.read_string(stream, string, 10)

    assert string.value == b'he'
    assert stream.tell() == 10
    assert fmt.read_u8(stream, Endianess.LITTLE_ENDIAN) == 0x2a


def test_read_string_fitting(fmt):
    stream = Stream(b'hello' + b'\x00' * 5)
    string = BoundedString(0x20, 'previous content')

    fmt.read_string(stream, string, 10)

    assert string.value == b'hello'
    assert stream.tell() == 10


def test_read_string_at_capacity(fmt):
    string = BoundedString(6)
    fmt.read_string(Stream(b'world'), string, 5)
    assert string.value == b'world'

    string = BoundedString(5)
    stream = Stream(b'world!')
    fmt.read_string(stream, string, 5)
    assert string.value == b'worl'
    assert stream.tell() == 5


def test_bits_roundtrip(fmt):
    """Ten bits read back into a zeroed destination leave every other bit clear."""
    stream = Stream(b'')

    fmt.write_bit(stream, bytearray(b'\xab\x03'), 10)
    assert stream.getvalue() == b'\xab\x03'

    fmt.rewind(stream)

    data = bytearray(2)
    fmt.read_bit(stream, data, 10)

    assert data == b'\xab\x03'
    assert stream.tell() == 2


def test_write_bit_emits_whole_trailing_byte(fmt):
    """Writing doesn't mask the trailing byte, reading does."""
    stream = Stream(b'')

    fmt.write_bit(stream, b'\xab\xff\xee', 10)

    assert stream.getvalue() == b'\xab\xff'

    fmt.rewind(stream)

    data = bytearray(2)
    fmt.read_bit(stream, data, 10)

    assert data == b'\xab\x03'


def test_read_bit_merges_trailing_byte(fmt):
    data = bytearray(b'\x00\xf0')

    fmt.read_bit(Stream(b'\x12\x07'), data, 10)

    assert data == b'\x12\xf3'


def test_bits_whole_bytes(fmt):
    stream = Stream(b'')
    fmt.write_bit(stream, b'\x01\x02\x03', 16)
    assert stream.getvalue() == b'\x01\x02'

    data = bytearray(3)
    fmt.read_bit(Stream(b'\x01\x02\x03'), data, 16)
    assert data == b'\x01\x02\x00'


def test_negative_bits(fmt):
    with pytest.raises(ValueError):
        fmt.write_bit(Stream(b''), b'\x00', -1)


def test_mem_block(fmt):
    stream = Stream(b'')

    fmt.write_mem_block(stream, b'\x01\x02\x03\x04', 3)
    assert stream.getvalue() == b'\x01\x02\x03'

    fmt.rewind(stream)
    buffer = bytearray(4)
    assert fmt.read_mem_block(stream, buffer, 3) == 3
    assert buffer == b'\x01\x02\x03\x00'


def test_mem_block_short_read(fmt):
    buffer = bytearray(4)

    assert fmt.read_mem_block(Stream(b'\x01'), buffer, 4) == 1
    assert buffer == b'\x01\x00\x00\x00'


def test_no_text_in_binary(fmt):
    stream = Stream(b'')

    fmt.write_decoration_text(stream, '// generated')
    fmt.write_null_char(stream)
    fmt.flush(stream)

    assert stream.getvalue() == b''


def test_skip(fmt):
    stream = Stream(b'\x00\x01\x02\x03')

    fmt.skip(stream, 2)

    assert fmt.read_u8(stream, Endianess.LITTLE_ENDIAN) == 2
