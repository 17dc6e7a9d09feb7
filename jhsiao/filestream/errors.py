"""Errors raised by stream readers/writers.

End of stream is not an error: readers return None (or -1 for
readinto) instead.
"""
__all__ = [
    'StreamError',
    'OpenError',
    'EncodeError',
    'DecodeError',
    'ClosedError',
]

class StreamError(Exception):
    """Base class for all filestream errors."""

class OpenError(StreamError):
    """The stream could not be initialized.

    Either the file could not be opened in the requested mode or the
    encoding/delimiter combination is unusable.
    """

class EncodeError(StreamError, ValueError):
    """An item could not be encoded.  Nothing was written."""
    def __init__(self, msg, item):
        super(EncodeError, self).__init__(msg)
        self.item = item

class DecodeError(StreamError, ValueError):
    """A record could not be decoded.

    The record was consumed, so reading can continue with the next one.
    data: the raw bytes of the record.
    """
    def __init__(self, msg, data):
        super(DecodeError, self).__init__(msg)
        self.data = data

class ClosedError(StreamError, ValueError):
    """Operation on a closed stream."""
    def __init__(self, msg='I/O operation on closed stream.'):
        super(ClosedError, self).__init__(msg)
