import io
import os
import tempfile
import unittest

from streamformat.exceptions import ChannelException
from streamformat.streams import Stream


class StreamTests(unittest.TestCase):

    def test_bytes_stream_read(self):
        data = b'\x01\x02\x03\x04\x05'

        stream = Stream(data)

        self.assertEqual(stream.read(1), b'\x01')
        self.assertEqual(stream.read(1), b'\x02')
        self.assertEqual(stream.read(0x10), b'\x03\x04\x05')
        self.assertEqual(stream.read(1), b'')
        self.assertEqual(stream.tell(), 5)

    def test_skip_and_rewind(self):
        stream = Stream(b'\x01\x02\x03\x04\x05')

        stream.skip(3)
        self.assertEqual(stream.read(1), b'\x04')

        stream.rewind()
        self.assertEqual(stream.tell(), 0)
        self.assertEqual(stream.read(1), b'\x01')

    def test_save_restore(self):
        stream = Stream(b'\x01\x02\x03')
        stream.read(1)

        stream.save()
        self.assertEqual(stream.read(2), b'\x02\x03')
        stream.restore()

        self.assertEqual(stream.tell(), 1)

    def test_write(self):
        stream = Stream(b'')

        stream.write(b'kebab')
        stream.write(bytearray(b'!'))

        self.assertEqual(stream.getvalue(), b'kebab!')

    def test_file_stream(self):
        data = b'\x01\x02\x03\x04\x05'
        with tempfile.TemporaryDirectory() as tmp:
            path_data = os.path.join(tmp, 'auaua')

            with Stream(path_data, flags='wb') as stream:
                stream.write(data)

            with Stream(path_data) as stream:
                self.assertEqual(stream.read(1), b'\x01')
                stream.skip(1)
                self.assertEqual(stream.read(0x10), b'\x03\x04\x05')
                self.assertEqual(stream.tell(), 5)

            self.assertTrue(stream.closed)

    def test_file_object_is_not_closed(self):
        obj = io.BytesIO(b'\x01')

        with Stream(obj) as stream:
            self.assertEqual(stream.read(1), b'\x01')

        self.assertFalse(obj.closed)

    def test_wrong_object(self):
        with self.assertRaises(ChannelException):
            Stream(42)
