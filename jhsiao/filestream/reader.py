"""Read delimited records from a file.

Records are read lazily in chunks.  Unconsumed data is kept in
buf[start:stop].  Consuming a record only advances start.  When there
is not enough room left for another chunk, the remaining data is
shifted to the front or the buffer is grown.  Searches resume where the
previous search left off so data is scanned only once.
"""
__all__ = ['StreamReader']
import codecs

from jhsiao.filestream import bases
from jhsiao.filestream.errors import DecodeError

class StreamReader(bases.FileWrapper):
    """Read delimited records.

    The last record of the file does not need a trailing delimiter.
    Iterating yields records until end of stream.  Use rewind() to
    start over.
    """
    modes = 'r'

    def __init__(
            self, f, delimiter=bases.DEFAULT_DELIMITER,
            encoding=bases.DEFAULT_ENCODING,
            chunksize=bases.DEFAULT_CHUNKSIZE, mode='r', errors='strict',
            factor=1.5):
        """Initialize a StreamReader.

        f: path or binary file object to read from.
        delimiter: str or bytes, the record delimiter.
        encoding: str, codec for the delimiter and text records.
        chunksize: int, max bytes requested per read call.
        mode: str
            'r': return records as str.
            'rb': return records as bytes.
        errors: str, codec error handler used when decoding records.
        factor: float, the buffer growth factor.
        """
        if chunksize <= 0:
            raise ValueError('chunksize must be > 0')
        if factor <= 1:
            raise ValueError('Growth factor must be > 1')
        super(StreamReader, self).__init__(
            f, mode, delimiter, encoding, errors)
        self.chunksize = chunksize
        self.factor = factor
        self.buf = bytearray(max(chunksize, len(self.delimiter)))
        self.view = memoryview(self.buf)
        self.start = self.stop = self.scan = 0
        self.eof = False
        self._readinto = getattr(self.f, 'readinto1', self.f.readinto)
        if self.binary:
            self._parse = memoryview.tobytes
        else:
            self._decode = codecs.getdecoder(self.encoding)
            self._parse = self._parse_text

    def _parse_text(self, view):
        try:
            return self._decode(view, self.errors)[0]
        except UnicodeDecodeError as e:
            raise DecodeError(
                'Could not decode record with {}'.format(self.encoding),
                view.tobytes()) from e

    def _resize_or_shift(self):
        """Make room for a chunk after stop.

        Data is shifted to the beginning of buf if that frees enough
        room.  Otherwise a new buffer is allocated.
        """
        start = self.start
        size = self.stop - start
        target = size + self.chunksize
        L = len(self.buf)
        if target > L:
            nbuf = bytearray(max(int(L * self.factor), target))
            nbuf[:size] = self.view[start:self.stop]
            self.buf = nbuf
            self.view = memoryview(nbuf)
        elif start:
            self.view[:size] = self.view[start:self.stop]
        self.scan -= start
        self.start = 0
        self.stop = size

    def _reset(self):
        self.start = self.stop = self.scan = 0

    def readrecord(self):
        """Return the next record or None if end of stream.

        Raise DecodeError if the record could not be decoded.  The
        record is consumed regardless.
        """
        self._checkopen()
        if self.eof:
            return None
        delimiter = self.delimiter
        while 1:
            pos = self.buf.find(delimiter, self.scan, self.stop)
            if pos >= 0:
                record = self.view[self.start:pos]
                end = pos + len(delimiter)
                if end == self.stop:
                    self._reset()
                else:
                    self.start = self.scan = end
                return self._parse(record)
            # delimiter may straddle the next chunk
            self.scan = max(self.start, self.stop - len(delimiter) + 1)
            if len(self.buf) - self.stop < self.chunksize:
                self._resize_or_shift()
            amt = self._readinto(
                self.view[self.stop:self.stop + self.chunksize])
            if amt:
                self.stop += amt
            elif amt == 0:
                self.eof = True
                record = self.view[self.start:self.stop]
                self._reset()
                if len(record):
                    return self._parse(record)
                return None
            else:
                raise ValueError(
                    'Unexpected readinto return value {}'.format(amt))

    def readinto(self, out, count=-1):
        """Read records into out.

        out: container
            out should have an `append()` method.
        count: int
            Max number of records to read.  Negative to read all.

        Return the number of records added.  -1 if end of stream was
        reached before any records were added.
        """
        n = 0
        while n != count:
            record = self.readrecord()
            if record is None:
                return n if n else -1
            out.append(record)
            n += 1
        return n

    def readrecords(self, count=-1):
        """Same as readinto(), but return a new list."""
        L = []
        self.readinto(L, count)
        return L

    def rewind(self):
        """Read from the beginning of the file again."""
        self._checkopen().seek(0)
        self._reset()
        self.eof = False

    def __iter__(self):
        return self

    def __next__(self):
        record = self.readrecord()
        if record is None:
            raise StopIteration
        return record

    def detach(self):
        ret = super(StreamReader, self).detach()
        self._readinto = None
        return ret
