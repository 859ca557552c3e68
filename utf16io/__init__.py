R"""
The utf16io package extends binary streams with the ability to read and write UTF-16 in either
byte order. The following modules are available:

1. `utf16io.read`: reading code units, characters, and lines in a given byte order.
2. `utf16io.auto`: a reader that stores its byte order or detects it from a byte order mark.
3. `utf16io.write`: writing code units and strings with partial progress reporting.

A stream that starts with a byte order mark can be read as follows:

    with AutoEndianReader.auto_bom(open('notes.txt', 'rb')) as reader:
        for line in reader.utf16_lines():
            print(line)
"""
from __future__ import annotations

__version__ = '0.3.1'
__distribution__ = 'utf16io'

from utf16io.auto import (
    AutoEndianChars,
    AutoEndianLines,
    AutoEndianReader,
    AutoEndianShorts,
)
from utf16io.lib.exceptions import (
    InvalidByteOrderMark,
    InvalidSurrogate,
    StreamError,
    Utf16Error,
    WriteZero,
)
from utf16io.lib.structures import BE, EOF, LE, WordStream, order
from utf16io.read import Chars, Lines, Shorts, Utf16Reader
from utf16io.write import FullyComplete, Missing, Utf16Writer, Utf16Written, encode_utf16

__all__ = [
    'AutoEndianChars',
    'AutoEndianLines',
    'AutoEndianReader',
    'AutoEndianShorts',
    'BE',
    'Chars',
    'EOF',
    'FullyComplete',
    'InvalidByteOrderMark',
    'InvalidSurrogate',
    'LE',
    'Lines',
    'Missing',
    'Shorts',
    'StreamError',
    'Utf16Error',
    'Utf16Reader',
    'Utf16Writer',
    'Utf16Written',
    'WordStream',
    'WriteZero',
    'encode_utf16',
    'order',
]
