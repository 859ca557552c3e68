"""
Reading UTF-16 from binary streams. A `utf16io.read.Utf16Reader` wraps a binary stream and
provides three iterators, each of which reads in a fixed byte order:

1. `utf16io.read.Shorts` yields the 16-bit code units of the stream.
2. `utf16io.read.Chars` yields the decoded characters.
3. `utf16io.read.Lines` yields the lines of text, without line terminators.

Transient interruptions of the stream are retried and never surface. The end of the stream ends
iteration. All other failures are raised as exceptions from `utf16io.lib.exceptions`. A failure
of the stream exhausts the iterator that raised it, while after an invalid surrogate, iteration
continues with the code units that follow.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from utf16io.lib.environment import logger
from utf16io.lib.exceptions import InvalidSurrogate, StreamError, Utf16Error
from utf16io.lib.structures import EOF, WordStream, order

if TYPE_CHECKING:
    from typing import Iterator

_log = logger(__name__)


class _Utf16Iterator:
    """
    Base class for iterators over a `utf16io.read.Utf16Reader` in a fixed byte order. Once the
    stream has ended or failed, the iterator is exhausted. After malformed data, iteration can
    continue with the code units that follow.
    """
    def __init__(self, reader: Utf16Reader, byteorder: order):
        self.reader = reader
        self.order = order(byteorder)
        self.exhausted = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.exhausted:
            raise StopIteration
        try:
            return self.advance()
        except InvalidSurrogate:
            raise
        except Exception:
            self.exhausted = True
            raise

    def advance(self):
        raise NotImplementedError

    def __repr__(self):
        return F'<{self.__class__.__name__}:{self.order.value}>'


class Shorts(_Utf16Iterator):
    """
    An iterator over the `int` values of the 16-bit code units in a stream.
    """
    def advance(self) -> int:
        while True:
            try:
                return self.reader.read_u16(self.order)
            except InterruptedError:
                _log.debug('retrying interrupted read')
            except EOF:
                raise StopIteration
            except Utf16Error:
                raise
            except OSError as E:
                raise StreamError(E) from E


class Chars(_Utf16Iterator):
    """
    An iterator over the characters of a UTF-16 encoded stream. Each character is a string of
    length one which contains a Unicode scalar value, i.e. never a surrogate. A stream which ends
    right after a high surrogate is considered to end cleanly. A low surrogate in leading position
    raises `utf16io.lib.exceptions.InvalidSurrogate` without consuming another code unit, so a
    lone low surrogate at the end of the stream is an error rather than a clean end.
    """
    def __init__(self, reader: Utf16Reader, byteorder: order):
        super().__init__(reader, byteorder)
        self.shorts = Shorts(reader, byteorder)

    def advance(self) -> str:
        shorts = self.shorts
        first = next(shorts)
        if first & 0xF800 != 0xD800:
            return chr(first)
        if first >= 0xDC00:
            raise InvalidSurrogate(first)
        try:
            second = next(shorts)
        except StopIteration:
            _log.debug(F'stream ended after high surrogate {first:04X}')
            raise
        if second & 0xFC00 != 0xDC00:
            raise InvalidSurrogate(first, second)
        return chr(0x10000 + ((first & 0x3FF) << 10 | second & 0x3FF))


def _read_line(chars: Iterator[str]) -> str:
    line = []
    for char in chars:
        line.append(char)
        if char == '\n':
            break
    return ''.join(line)


class Lines(_Utf16Iterator):
    """
    An iterator over the lines of a UTF-16 encoded stream. Like the lines of a text file opened
    in Python, both `LF` and `CRLF` terminate a line, but unlike those, the terminators are not
    part of the yielded strings. A final line without terminator is yielded as well.
    """
    def __init__(self, reader: Utf16Reader, byteorder: order):
        super().__init__(reader, byteorder)
        self.chars = Chars(reader, byteorder)

    def advance(self) -> str:
        line = _read_line(self.chars)
        if not line:
            raise StopIteration
        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
        return line


class Utf16Reader(WordStream):
    """
    A binary stream wrapper which reads UTF-16. Every method receives the byte order to use as
    an argument; see `utf16io.auto.AutoEndianReader` for a reader that stores the byte order.
    """

    def shorts(self, byteorder: order) -> Shorts:
        """
        Return an iterator over the code units of this reader.
        """
        return Shorts(self, byteorder)

    def utf16_chars(self, byteorder: order) -> Chars:
        """
        Return an iterator over the characters of this reader.
        """
        return Chars(self, byteorder)

    def read_utf16_line(self, byteorder: order) -> str:
        """
        Read all characters up to and including the next line feed (U+000A) and return them. At
        the end of the stream, the empty string is returned.
        """
        return _read_line(Chars(self, byteorder))

    def utf16_lines(self, byteorder: order) -> Lines:
        """
        Return an iterator over the lines of this reader; line terminators are removed.
        """
        return Lines(self, byteorder)
