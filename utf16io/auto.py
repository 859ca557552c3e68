"""
A UTF-16 reader that stores its byte order, which can either be specified explicitly or detected
from a byte order mark at the beginning of the stream.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from utf16io.lib.environment import logger
from utf16io.lib.exceptions import InvalidByteOrderMark, StreamError, Utf16Error
from utf16io.lib.structures import BE, LE, order
from utf16io.read import Chars, Lines, Shorts, Utf16Reader

if TYPE_CHECKING:
    from typing import BinaryIO

_I = TypeVar('_I', Shorts, Chars, Lines)

_log = logger(__name__)


class _AutoEndianIterator(Generic[_I]):
    """
    Wraps one of the iterators from `utf16io.read` and exposes the byte order it reads in.
    """
    def __init__(self, inner: _I):
        self.inner = inner

    @property
    def order(self) -> order:
        return self.inner.order

    @property
    def is_little(self) -> bool:
        return self.inner.order is LE

    @property
    def is_big(self) -> bool:
        return self.inner.order is BE

    def __iter__(self):
        return self

    def __next__(self):
        return next(self.inner)

    def __repr__(self):
        return F'<{self.__class__.__name__}:{self.order.value}>'


class AutoEndianShorts(_AutoEndianIterator[Shorts]):
    """
    An iterator over the code units read by an `utf16io.auto.AutoEndianReader`.
    """


class AutoEndianChars(_AutoEndianIterator[Chars]):
    """
    An iterator over the characters read by an `utf16io.auto.AutoEndianReader`.
    """


class AutoEndianLines(_AutoEndianIterator[Lines]):
    """
    An iterator over the lines read by an `utf16io.auto.AutoEndianReader`.
    """


class AutoEndianReader:
    """
    A reader which stores whether to read in little or big endian. It provides the same methods
    as `utf16io.read.Utf16Reader`, but without the byte order argument. The reader owns the
    wrapped stream and closes it when it is closed itself.
    """
    def __init__(self, stream: BinaryIO | Utf16Reader, byteorder: order):
        if not isinstance(stream, Utf16Reader):
            stream = Utf16Reader(stream)
        self.reader = stream
        self._order = order(byteorder)

    @classmethod
    def little(cls, stream: BinaryIO | Utf16Reader) -> AutoEndianReader:
        """
        Create a new little endian reader.
        """
        return cls(stream, LE)

    @classmethod
    def big(cls, stream: BinaryIO | Utf16Reader) -> AutoEndianReader:
        """
        Create a new big endian reader.
        """
        return cls(stream, BE)

    @classmethod
    def auto_bom(cls, stream: BinaryIO | Utf16Reader) -> AutoEndianReader:
        """
        Read one code unit in little endian to detect the byte order: The value 0xFEFF indicates
        a little endian stream and 0xFFFE indicates a big endian stream. Any other value raises
        `utf16io.lib.exceptions.InvalidByteOrderMark`. Only the byte order mark is consumed from
        the stream. When the stream ends before a complete code unit could be read, the exception
        `utf16io.lib.structures.EOF` is raised.
        """
        reader = stream if isinstance(stream, Utf16Reader) else Utf16Reader(stream)
        while True:
            try:
                bom = reader.read_u16(LE)
            except InterruptedError:
                continue
            except Utf16Error:
                raise
            except OSError as E:
                raise StreamError(E) from E
            else:
                break
        if bom == 0xFEFF:
            byteorder = LE
        elif bom == 0xFFFE:
            byteorder = BE
        else:
            raise InvalidByteOrderMark(bom)
        _log.debug(F'detected {byteorder.value} endian byte order mark')
        return cls(reader, byteorder)

    @property
    def order(self) -> order:
        return self._order

    @property
    def is_little(self) -> bool:
        """
        Whether this reader is little endian.
        """
        return self._order is LE

    @property
    def is_big(self) -> bool:
        """
        Whether this reader is big endian.
        """
        return self._order is BE

    def __enter__(self):
        return self

    def __exit__(self, ex_type, ex_value, trace) -> bool:
        self.close()
        return False

    def close(self) -> None:
        self.reader.close()

    @property
    def closed(self) -> bool:
        return self.reader.closed

    def read_u16(self) -> int:
        """
        Read a single code unit in the byte order of this reader.
        """
        return self.reader.read_u16(self._order)

    def shorts(self) -> AutoEndianShorts:
        return AutoEndianShorts(self.reader.shorts(self._order))

    def utf16_chars(self) -> AutoEndianChars:
        return AutoEndianChars(self.reader.utf16_chars(self._order))

    def read_utf16_line(self) -> str:
        return self.reader.read_utf16_line(self._order)

    def utf16_lines(self) -> AutoEndianLines:
        return AutoEndianLines(self.reader.utf16_lines(self._order))

    def __repr__(self):
        return F'<{self.__class__.__name__}:{self._order.value}>'
