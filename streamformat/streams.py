import io
import logging

from .exceptions import ChannelException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/path/file objects to
    uniform the byte channel operations the formats rely on: read(),
    write(), skip() and rewind().'''
    def __init__(self, obj=b'', flags='rb'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.flags = flags
        self.obj = obj
        self._owned = False
        self.history = []

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\' with flags \'%s\'' % (self.obj, self.flags))
        self.obj = open(self.obj, self.flags)
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes

    def init_file(self):
        '''Anything else must already quack like a binary file'''
        if not all(hasattr(self.obj, _) for _ in ('read', 'write', 'seek')):
            raise ChannelException(
                '\'%s\' cannot be used as a byte channel' % self.obj.__class__.__name__)

    def close(self):
        if self._owned:
            self.obj.close()

    def read(self, size: int) -> bytes:
        '''It can return less than size bytes only at the end of the data.'''
        return self.obj.read(size)

    def write(self, data) -> int:
        return self.obj.write(bytes(data))

    def skip(self, offset: int):
        self.obj.seek(offset, io.SEEK_CUR)

    def rewind(self):
        self.obj.seek(0)

    def tell(self) -> int:
        return self.obj.tell()

    def getvalue(self) -> bytes:
        return self.obj.getvalue()

    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)
