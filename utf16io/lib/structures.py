"""
The 16-bit word primitive that all of utf16io is built upon: a `utf16io.lib.structures.WordStream`
wraps a binary stream and reads or writes single 16-bit words in a given byte order.
"""
from __future__ import annotations

import enum

from typing import TYPE_CHECKING

from utf16io.lib.exceptions import WriteZero

if TYPE_CHECKING:
    from typing import BinaryIO, Union
    buf = Union[bytes, bytearray, memoryview]


class order(str, enum.Enum):
    """
    The byte order in which two bytes are composed into a 16-bit word.
    """
    big = 'big'
    little = 'little'


LE = order.little
BE = order.big


class EOF(EOFError):
    """
    While reading from a `utf16io.lib.structures.WordStream`, less bytes were available than
    requested. The exception contains the data from the incomplete read.
    """
    def __init__(self, size: int, rest: buf = B''):
        super().__init__(F'Unexpected end of stream; attempted to read {size} bytes, but got only {len(rest)}.')
        self.rest = rest
        self.size = size

    def __bytes__(self):
        return bytes(self.rest)


class WordStream:
    """
    A thin wrapper around a binary stream that reads and writes 16-bit words. The wrapper owns the
    stream: closing the wrapper closes the stream. Errors of the stream propagate unchanged, with
    the exception of a clean end of stream, which is reported as `utf16io.lib.structures.EOF`.
    """
    def __init__(self, stream: BinaryIO):
        if isinstance(stream, WordStream):
            stream = stream.stream
        self.stream = stream

    def __enter__(self):
        return self

    def __exit__(self, ex_type, ex_value, trace) -> bool:
        self.close()
        return False

    def close(self) -> None:
        self.stream.close()

    @property
    def closed(self) -> bool:
        return self.stream.closed

    def read_exactly(self, size: int) -> bytes:
        """
        Read exactly `size` many bytes. Short reads are continued and an `InterruptedError` of the
        stream is retried, but any other error of the stream is raised. If the stream ends before
        enough data was read, an exception of type `utf16io.lib.structures.EOF` is raised which
        contains the partial data.
        """
        data = bytearray()
        while len(data) < size:
            try:
                chunk = self.stream.read(size - len(data))
            except InterruptedError:
                continue
            if not chunk:
                raise EOF(size, data)
            data.extend(chunk)
        return bytes(data)

    def write_exactly(self, data: buf) -> None:
        """
        Write all of the given data, continuing short writes. A write which accepts no data
        raises `utf16io.lib.exceptions.WriteZero`.
        """
        view = memoryview(data)
        while view:
            try:
                n = self.stream.write(view)
            except InterruptedError:
                continue
            if not n:
                raise WriteZero
            view = view[n:]

    def read_u16(self, byteorder: order) -> int:
        """
        Read a single 16-bit word in the given byte order.
        """
        return int.from_bytes(self.read_exactly(2), order(byteorder).value)

    def write_u16(self, byteorder: order, value: int) -> None:
        """
        Write a single 16-bit word in the given byte order.
        """
        if value not in range(0x10000):
            raise ValueError(F'The value {value!r} does not fit into 16 bits.')
        self.write_exactly(value.to_bytes(2, order(byteorder).value))
