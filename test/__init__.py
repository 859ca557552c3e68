import io
import logging
import random
import unittest

import utf16io


__all__ = ['utf16io', 'TestBase', 'ScriptedStream']


class ScriptedStream(io.RawIOBase):
    """
    A binary stream for testing which serves the given data, but raises the exceptions given in
    the `failures` dictionary: When the n-th call to `read` or `write` is made (counting from 0),
    and `n` is a key of the dictionary, the corresponding exception is raised instead. Calls that
    raise are counted as well. If `accept` is given, each write accepts at most that many bytes.
    """
    def __init__(self, data: bytes = B'', failures=None, accept=None):
        super().__init__()
        self.data = io.BytesIO(data)
        self.written = bytearray()
        self.failures = dict(failures or {})
        self.accept = accept
        self.calls = 0

    def _tick(self):
        n = self.calls
        self.calls += 1
        if exception := self.failures.get(n):
            raise exception

    def readable(self):
        return True

    def writable(self):
        return True

    def read(self, size=-1):
        self._tick()
        return self.data.read(size)

    def write(self, data):
        self._tick()
        data = bytes(data)
        if self.accept is not None:
            data = data[:self.accept]
        self.written.extend(data)
        return len(data)


class TestBase(unittest.TestCase):

    def generate_random_text(self, size):
        return ''.join(chr(random.choice((
            random.randrange(0x20, 0x7F),
            random.randrange(0x80, 0xD800),
            random.randrange(0xE000, 0x10000),
            random.randrange(0x10000, 0x110000),
        ))) for _ in range(size))

    def setUp(self):
        random.seed(0xBAADF00D)
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        logging.disable(logging.NOTSET)
