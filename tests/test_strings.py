import pytest

from streamformat.strings import BoundedString, to_bytes


def test_bounded_string_truncates():
    string = BoundedString(4, 'kebab')

    assert string.capacity == 4
    assert string.value == b'keb'
    assert len(string) == 3
    assert str(string) == 'keb'


def test_bounded_string_copy_and_trim():
    string = BoundedString(0x10)

    assert string.is_empty()
    assert string.length == 0

    string.copy(b'magicabula')
    assert string == 'magicabula'
    assert string[0] == ord('m')

    string.trim(5)
    assert string.value == b'magic'

    # trimming beyond the content doesn't change it
    string.trim(0xff)
    assert string.value == b'magic'

    string.clear()
    assert string.is_empty()


def test_bounded_string_length_stops_at_nul():
    string = BoundedString(0x10)
    string.buffer[:7] = b'ab\x00cdef'

    assert string.length == 2
    assert string.value == b'ab'


def test_bounded_string_append():
    string = BoundedString(3)

    assert string.append(ord('a'))
    assert string.append(ord('b'))
    assert not string.append(ord('c'))
    assert string.value == b'ab'


def test_bounded_string_startswith():
    assert BoundedString(8, '0b1010').startswith('0b')
    assert not BoundedString(8, '1010').startswith(b'0b')


def test_bounded_string_needs_terminator():
    with pytest.raises(ValueError):
        BoundedString(0)


def test_to_bytes():
    assert to_bytes('abc') == b'abc'
    assert to_bytes(bytearray(b'abc')) == b'abc'
    assert to_bytes(BoundedString(3, 'abc')) == b'ab'
