"""
Fixed capacity string buffer.

It behaves like a NUL terminated C string living in a buffer of ``capacity``
bytes: the content can never be longer than ``capacity - 1`` bytes and its
length is the position of the first NUL byte. Anything that would not fit is
silently dropped.
"""
from typing import Union


def to_bytes(value: Union["BoundedString", bytes, bytearray, str]) -> bytes:
    '''Normalize whatever a caller passes as a string into raw bytes.'''
    if isinstance(value, BoundedString):
        return value.value
    if isinstance(value, str):
        return value.encode('latin1')

    return bytes(value)


class BoundedString(object):

    def __init__(self, capacity, default=b''):
        if capacity < 1:
            raise ValueError(f'a {self.__class__.__name__} needs room for the terminator (capacity={capacity})')

        self.capacity = capacity
        self.buffer = bytearray(capacity)
        self.copy(default)

    def __repr__(self):
        return '<%s(%d, %r)>' % (self.__class__.__name__, self.capacity, self.value)

    def __str__(self):
        return self.value.decode('latin1')

    def __len__(self):
        return self.length

    def __getitem__(self, item):
        return self.value[item]

    def __eq__(self, other):
        if isinstance(other, (BoundedString, bytes, bytearray, str)):
            return self.value == to_bytes(other)

        return NotImplemented

    @property
    def length(self) -> int:
        index = self.buffer.find(0)
        return index if index >= 0 else self.capacity - 1

    @property
    def value(self) -> bytes:
        return bytes(self.buffer[:self.length])

    def is_empty(self):
        return self.buffer[0] == 0

    def clear(self):
        self.buffer[0] = 0

    def trim(self, length):
        '''Cut the content at length, no-op if it is already shorter.'''
        length = max(0, min(length, self.capacity - 1))
        self.buffer[length] = 0

    def copy(self, source):
        data = to_bytes(source)[:self.capacity - 1]
        self.buffer[:len(data)] = data
        self.buffer[len(data)] = 0

    def append(self, char: int) -> bool:
        '''Append a single byte, returns False when there is no room left.'''
        length = self.length
        if length >= self.capacity - 1:
            return False

        self.buffer[length] = char
        self.buffer[length + 1] = 0

        return True

    def startswith(self, prefix) -> bool:
        return self.value.startswith(to_bytes(prefix))
