"""Basic classes.

FileWrapper owns a single binary file object.  Subclasses deal with
sequences of delimited records rather than bytes/chars.

Paths are opened unbuffered so that every read/write corresponds to a
single call on the underlying file.  Already opened binary file objects
can be wrapped instead, in which case the wrapper takes ownership and
closes them on close().
"""
__all__ = [
    'DEFAULT_DELIMITER',
    'DEFAULT_ENCODING',
    'DEFAULT_CHUNKSIZE',
    'FileWrapper',
]

import codecs
import io
import os

from jhsiao.filestream.errors import ClosedError, OpenError

DEFAULT_DELIMITER = '\n'
DEFAULT_ENCODING = 'utf-8'
DEFAULT_CHUNKSIZE = 4096

def parse_mode(mode, allowed):
    """Split mode into (base, binary).

    mode: str
        The mode.  It is searched for specific characters.
        'b': binary records (bytes), else text records (str).
        The remaining character must be one of allowed.
    allowed: str
        The allowed base modes.
    """
    binary = 'b' in mode
    base = mode.replace('b', '', 1)
    if len(base) != 1 or base not in allowed:
        raise ValueError('Invalid mode {!r}'.format(mode))
    return base, binary

def encode_delimiter(delimiter, encoding):
    """Return the delimiter as non-empty bytes.

    bytes-like delimiters are used as is.
    """
    if isinstance(delimiter, (bytes, bytearray, memoryview)):
        data = bytes(delimiter)
    else:
        try:
            data = codecs.encode(delimiter, encoding)
        except (UnicodeError, TypeError) as e:
            raise OpenError(
                'Could not encode delimiter {!r} with {}'.format(
                    delimiter, encoding)) from e
    if not data:
        raise OpenError('Delimiter must not be empty.')
    return data

class FileWrapper(object):
    """Own a binary file object.

    The file is released exactly once: on close(), detach(), leaving a
    with block, or garbage collection, whichever comes first.
    """
    modes = ''
    f = None

    def __init__(
            self, f, mode, delimiter=DEFAULT_DELIMITER,
            encoding=DEFAULT_ENCODING, errors='strict'):
        """Initialize a FileWrapper.

        f: str, bytes, os.PathLike, or binary file object.
            The file to wrap.  Paths are opened with the base mode.
        mode: str, see parse_mode().  Must be in self.modes.
        delimiter: str or bytes, record delimiter.
        encoding: str, codec used for text records and str delimiter.
        errors: str, codec error handler for records.
        """
        base, self.binary = parse_mode(mode, self.modes)
        try:
            self.encoding = codecs.lookup(encoding).name
        except LookupError as e:
            raise OpenError(
                'Unknown encoding {!r}'.format(encoding)) from e
        self.errors = errors
        self.delimiter = encode_delimiter(delimiter, self.encoding)
        if isinstance(f, (str, bytes, os.PathLike)):
            try:
                f = io.open(f, base + 'b', buffering=0)
            except OSError as e:
                raise OpenError(
                    'Could not open {!r} with mode {!r}'.format(
                        f, base)) from e
        self.f = f
        self.mode = mode

    def __enter__(self):
        return self
    def __exit__(self, tp, exc, tb):
        self.close()

    def __del__(self):
        self.close()

    @property
    def closed(self):
        return self.f is None

    def _checkopen(self):
        """Return the wrapped file or raise ClosedError."""
        f = self.f
        if f is None:
            raise ClosedError()
        return f

    def fileno(self):
        return self._checkopen().fileno()

    def detach(self):
        """Unwrap the file and return it.

        This instance should no longer be used.
        """
        ret = self.f
        self.f = None
        return ret

    def close(self):
        """Close the underlying file.  Closing twice is a no-op."""
        if self.f is not None:
            self.detach().close()
