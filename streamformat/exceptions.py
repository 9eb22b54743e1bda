class StreamFormatException(Exception):
    '''Base class to extend in order to throw exception in streamformat.

    The codec operations themselves never raise: these exceptions signal
    a misuse of the library (wrong channel object, unknown byte order and
    so on), not malformed data.
    '''
    pass


class ChannelException(StreamFormatException):
    pass


class EndianessException(StreamFormatException):
    pass


class ModeException(StreamFormatException):
    pass


class LayoutException(StreamFormatException):
    '''Raised when a transcoding layout cannot be parsed.

    It takes the offending field spec as argument.'''

    def __init__(self, spec, reason=''):
        self.spec = spec
        self.reason = reason
        super().__init__(f'invalid field spec {spec!r}' + (f': {reason}' if reason else ''))
