'''
Re-encode a stream of records from one wire representation to the other.

A record is described by a layout, a whitespace separated list of field
specs:

    u8 u16 u32 u64 s8 s16 s32 s64 f32   scalars
    bits:<n>                            bit field of n bits
    str:<size>                          string of size bytes
    mem:<size>                          memory block of size bytes

For example "u32 str:16 bits:10" is a 32 bits integer followed by a 16 bytes
string and a 10 bits field. Records are read until the input is exhausted.

Going through the text format and back gives the original bytes, except
for strings ending with a backslash: only the double quote is escaped, so
the backslash escapes the closing quote and the string runs into the next
record.
'''
import argparse
import logging
import os
import sys
from collections import namedtuple
from typing import List, Optional

from .core import ReadStream, WriteStream
from .enum import Endianess, Modes
from .exceptions import LayoutException, StreamFormatException
from .streams import Stream
from .strings import BoundedString
from .text import TextStreamFormat
from .tokenizer import Tokenizer


logger = logging.getLogger(__name__)

SCALARS = ('u8', 'u16', 'u32', 'u64', 's8', 's16', 's32', 's64', 'f32')
SIZED = ('bits', 'str', 'mem')

MODES = {
    'binary': Modes.BINARY,
    'text': Modes.TEXT,
}

ENDIANESSES = {
    'little': Endianess.LITTLE_ENDIAN,
    'big': Endianess.BIG_ENDIAN,
}


FieldSpec = namedtuple('FieldSpec', ['kind', 'size'])


def parse_field(spec: str) -> FieldSpec:
    if spec in SCALARS:
        return FieldSpec(spec, None)

    kind, _, size = spec.partition(':')
    if kind not in SIZED:
        raise LayoutException(spec, 'unknown kind')

    try:
        size = int(size, 0)
    except ValueError:
        raise LayoutException(spec, 'the size must be an integer') from None

    if size < 0:
        raise LayoutException(spec, 'the size cannot be negative')

    return FieldSpec(kind, size)


def parse_layout(text: str) -> List[FieldSpec]:
    layout = [parse_field(_) for _ in text.split()]
    if not layout:
        raise LayoutException(text, 'empty layout')

    return layout


def read_field(reader: ReadStream, field: FieldSpec):
    if field.kind in SCALARS:
        return getattr(reader, 'read_%s' % field.kind)()

    if field.kind == 'bits':
        data = bytearray((field.size + 7) // 8)
        reader.read_bit(data, field.size)
        return bytes(data)

    if field.kind == 'str':
        string = BoundedString(field.size + 1)
        reader.read_string(string, field.size)
        return string.value

    buffer = bytearray(field.size)
    reader.read_mem_block(buffer, field.size)
    return bytes(buffer)


def write_field(writer: WriteStream, field: FieldSpec, value):
    if field.kind in SCALARS:
        getattr(writer, 'write_%s' % field.kind)(value)
    elif field.kind == 'bits':
        writer.write_bit(value, field.size)
    elif field.kind == 'str':
        writer.write_string(value, field.size)
    else:
        writer.write_mem_block(value, field.size)


def read_record(reader: ReadStream, layout: List[FieldSpec]) -> list:
    return [read_field(reader, _) for _ in layout]


def write_record(writer: WriteStream, layout: List[FieldSpec], values: list):
    for field, value in zip(layout, values):
        write_field(writer, field, value)


def has_record(reader: ReadStream) -> bool:
    '''Look ahead (without consuming anything) whether there is data left.'''
    channel = reader.stream
    channel.save()
    try:
        if isinstance(reader.format, TextStreamFormat):
            tokenizer = Tokenizer(channel, reader.format.terminators, reader.format.scratch_capacity)
            token = tokenizer.next_token()
            return not (tokenizer.exhausted and token.is_empty())

        return len(channel.read(1)) != 0
    finally:
        channel.restore()


def transcode(reader: ReadStream, writer: WriteStream, layout: List[FieldSpec], count: Optional[int] = None) -> int:
    '''Copy records from reader to writer, returning how many were copied.'''
    n = 0
    while (count is None or n < count) and has_record(reader):
        write_record(writer, layout, read_record(reader, layout))
        n += 1

    writer.flush()
    logger.debug('transcoded %d records' % n)

    return n


def main(argv=None):
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    parser = argparse.ArgumentParser(description='Re-encode a stream of records between the binary and the text format')
    parser.add_argument('source', choices=MODES, help='format of the input')
    parser.add_argument('destination', choices=MODES, help='format of the output')
    parser.add_argument('layout', help='record layout, e.g. "u32 str:16 bits:10"')
    parser.add_argument('input', help='path of the input file')
    parser.add_argument('output', help='path of the output file')
    parser.add_argument('--endian', choices=ENDIANESSES, default='little', help='byte order of the binary side')
    parser.add_argument('--header', help='decoration text written before the records')
    parser.add_argument('--count', type=int, help='maximum number of records')

    args = parser.parse_args(argv)

    try:
        layout = parse_layout(args.layout)
    except LayoutException as e:
        parser.error(str(e))

    endianess = ENDIANESSES[args.endian]

    try:
        with Stream(args.input, flags='rb') as src, Stream(args.output, flags='wb') as dst:
            reader = ReadStream(src, mode=MODES[args.source], endianess=endianess)
            writer = WriteStream(dst, mode=MODES[args.destination], endianess=endianess)

            if args.header:
                writer.write_decoration_text(args.header + '\n')

            n = transcode(reader, writer, layout, count=args.count)
    except (OSError, StreamFormatException) as e:
        logger.error(f'transcoding failed: {e}')
        return 1

    logger.info(f'{n} records written to \'{args.output}\'')

    return 0


if __name__ == '__main__':
    sys.exit(main())
