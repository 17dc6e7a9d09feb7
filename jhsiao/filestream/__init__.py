"""Stream delimited records to/from flat files.

StreamReader reads records lazily in chunks so large files can be
processed with bounded memory.  StreamWriter appends records, each
followed by the delimiter, without buffering.

Matching is done on encoded bytes.  Encodings that emit a byte order
mark on every encode (utf-16, utf-32) are not supported.  Use the
explicit-endian forms instead (utf-16-le, etc).
"""
__all__ = [
    'StreamReader',
    'StreamWriter',
    'StreamError',
    'OpenError',
    'EncodeError',
    'DecodeError',
    'ClosedError',
]

from jhsiao.filestream.errors import (
    StreamError,
    OpenError,
    EncodeError,
    DecodeError,
    ClosedError,
)
from jhsiao.filestream.reader import StreamReader
from jhsiao.filestream.writer import StreamWriter
