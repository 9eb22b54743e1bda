"""
# streamformat: one set of operations, two wire representations.

A format is a set of typed operations (read/write of integers, floats,
bit fields, strings and memory blocks) working over a byte channel. Two
formats are available:

 1. binary: compact, every value takes exactly its size in bytes,
    integers in the requested byte order;

 2. text: human readable, values are tokens separated by whitespace, strings
    are quoted and comments (//, /* */ and #) are allowed when reading.

Since both expose the same operations, a caller can switch representation
without changing its code: bind a format to a channel with ReadStream or
WriteStream and select the representation with a Modes value.

No operation fails because of malformed data: the formats are best effort
codecs and it's the caller that validates what it reads.
"""
from .binary import BinaryStreamFormat
from .core import ReadStream, WriteStream
from .enum import Endianess, Modes
from .format import StreamFormat
from .streams import Stream
from .strings import BoundedString
from .text import TextStreamFormat
from .tokenizer import Tokenizer

__version__ = '0.0.1'
