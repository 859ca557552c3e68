"""
Writing UTF-16 to binary streams. The write methods of `utf16io.write.Utf16Writer` report partial
progress instead of raising when a failure occurs after some data has already been written:

- `utf16io.write.Utf16Writer.write_shorts` returns the number of code units written so far.
- `utf16io.write.Utf16Writer.write_utf16_string` returns a `utf16io.write.Missing` object which
  contains the code units that were not written.

Only a failure on the very first code unit is raised to the caller.
"""
from __future__ import annotations

from array import array
from typing import TYPE_CHECKING, ClassVar

from utf16io.lib.environment import logger
from utf16io.lib.exceptions import WriteZero
from utf16io.lib.structures import WordStream, order

if TYPE_CHECKING:
    from typing import Iterable, Iterator

_log = logger(__name__)


def encode_utf16(text: str) -> Iterator[int]:
    """
    Lazily generate the UTF-16 code units of the given string. Surrogate characters which can
    occur in Python strings are emitted as a single code unit.
    """
    for char in text:
        cp = ord(char)
        if cp < 0x10000:
            yield cp
            continue
        cp -= 0x10000
        yield 0xD800 | cp >> 10
        yield 0xDC00 | cp & 0x3FF


class Utf16Written:
    """
    Represents how much of a string was written by `utf16io.write.Utf16Writer.write_utf16_string`.
    """
    __slots__ = ()
    complete: ClassVar[bool] = False


class FullyComplete(Utf16Written):
    """
    The whole string was written without errors.
    """
    __slots__ = ()
    complete = True

    def __eq__(self, other):
        return isinstance(other, FullyComplete)

    def __hash__(self):
        return hash(FullyComplete)

    def __repr__(self):
        return 'FullyComplete()'


class Missing(Utf16Written):
    """
    An error occurred while writing the string. The code units that were not written are
    available as the tuple `units`, starting with the one that failed to be written.
    """
    __slots__ = 'units',

    def __init__(self, units: Iterable[int]):
        self.units = tuple(units)

    def __len__(self):
        return len(self.units)

    def __iter__(self):
        return iter(self.units)

    def __eq__(self, other):
        return isinstance(other, Missing) and self.units == other.units

    def __hash__(self):
        return hash(self.units)

    def __repr__(self):
        return F'Missing({self.units!r})'


class Utf16Writer(WordStream):
    """
    A binary stream wrapper which writes UTF-16. Every method receives the byte order to use as
    an argument.
    """

    def write_shorts(self, byteorder: order, units: Iterable[int]) -> int:
        """
        Write code units one at a time and return the number of code units that were written. If
        writing the first code unit fails, the exception is raised. If a later one fails, the
        error is discarded and the number of code units written up to that point is returned.
        """
        count = 0
        for unit in units:
            try:
                self.write_u16(byteorder, unit)
            except OSError as E:
                if not count:
                    raise
                _log.debug(F'stopped writing after {count} code units: {E!s}')
                break
            count += 1
        return count

    def write_all_shorts(self, byteorder: order, units: Iterable[int]) -> None:
        """
        Write all given code units by calling `utf16io.write.Utf16Writer.write_shorts` on the
        remaining code units until none are left. An `InterruptedError` is retried, and if no
        code unit can be written at all, `utf16io.lib.exceptions.WriteZero` is raised.
        """
        try:
            view = memoryview(array('H', units))
        except OverflowError as E:
            raise ValueError(str(E)) from E
        while view:
            try:
                n = self.write_shorts(byteorder, view)
            except InterruptedError:
                continue
            if n == 0:
                raise WriteZero
            view = view[n:]

    def write_bom(self, byteorder: order) -> None:
        """
        Write a byte order mark, i.e. the character U+FEFF.
        """
        self.write_u16(byteorder, 0xFEFF)

    def write_utf16_string(self, byteorder: order, text: str) -> Utf16Written:
        """
        Write a string as UTF-16. If writing the first code unit fails, the exception is raised.
        For all remaining code units, a failure is not raised; instead, the method returns a
        `utf16io.write.Missing` object that contains the code units which were not written.
        Otherwise, the return value is `utf16io.write.FullyComplete`.
        """
        encoder = encode_utf16(text)
        for unit in encoder:
            self.write_u16(byteorder, unit)
            break
        for unit in encoder:
            try:
                self.write_u16(byteorder, unit)
            except OSError as E:
                missing = Missing((unit, *encoder))
                _log.debug(F'failed to write {len(missing)} code units: {E!s}')
                return missing
        return FullyComplete()
