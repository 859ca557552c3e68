"""
Exceptions raised by utf16io. All of them derive from `utf16io.lib.exceptions.Utf16Error`; in
addition, every exception also derives from the builtin exception type that best describes it,
so that I/O failures can be caught as `OSError` and malformed input as `ValueError`.
"""
from __future__ import annotations


class Utf16Error(Exception):
    """
    Base class for all errors raised by utf16io.
    """


class StreamError(Utf16Error, OSError):
    """
    Raised when the underlying byte stream fails with an error that is neither a clean end of
    the stream nor a transient interruption. The original exception is available as the `error`
    attribute and is also chained as the cause.
    """
    def __init__(self, error: OSError):
        super().__init__(error.errno, error.strerror or str(error))
        self.error = error

    def __str__(self):
        return F'I/O failure in underlying stream: {self.error!s}'


class InvalidSurrogate(Utf16Error, ValueError):
    """
    Raised when decoding encounters a surrogate code unit that is not part of a valid pair. The
    offending code units are available as the tuple `units`.
    """
    def __init__(self, *units: int):
        self.units = units
        super().__init__(F'Invalid surrogate sequence: {" ".join(F"{u:04X}" for u in units)}.')


class InvalidByteOrderMark(Utf16Error, ValueError):
    """
    Raised when the first code unit of a stream is not a byte order mark. The probed value, read
    in little endian, is available as `value`.
    """
    def __init__(self, value: int):
        self.value = value
        super().__init__(F'First character was not a byte order mark; read {value:#06x}.')


class WriteZero(Utf16Error, OSError):
    """
    Raised when the destination accepts no data at all while there is still data to be written.
    """
    def __init__(self, msg: str = 'failed to write whole buffer'):
        super().__init__(msg)
