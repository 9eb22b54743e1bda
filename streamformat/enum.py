from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()
    NATIVE        = auto()


class Modes(Enum):
    '''Which built-in format a stream binding talks'''
    BINARY = 0
    TEXT   = 1
