"""Write delimited records to a file.

Each record is followed by the delimiter, including the last one.
Nothing is buffered: every write() goes straight to the wrapped file
and the file is flushed.
"""
__all__ = ['StreamWriter']
import codecs

from jhsiao.filestream import bases
from jhsiao.filestream.errors import EncodeError

def writeall(f, data):
    """Write all of data to f.  Return the number of bytes written.

    Raw files may write partially so keep writing until done.
    """
    view = memoryview(data).cast('B')
    target = len(view)
    amt = 0
    while amt < target:
        chunk = f.write(view[amt:])
        if chunk is None:
            raise ValueError('Unexpected write return value None')
        amt += chunk
    return amt

class StreamWriter(bases.FileWrapper):
    """Write delimited records."""
    modes = 'wa'

    def __init__(
            self, f, delimiter=bases.DEFAULT_DELIMITER,
            encoding=bases.DEFAULT_ENCODING, mode='w', errors='strict'):
        """Initialize a StreamWriter.

        f: path or binary file object to write to.
        delimiter: str or bytes, the record delimiter.
        encoding: str, codec for the delimiter and text records.
        mode: str
            'w': create or truncate the file.
            'a': create or append to the file.
            Add 'b' to write bytes-like records instead of str.
        errors: str, codec error handler used when encoding records.
        """
        super(StreamWriter, self).__init__(
            f, mode, delimiter, encoding, errors)
        self._written = 0
        if not self.binary:
            self._encode = codecs.getencoder(self.encoding)

    @property
    def written(self):
        """The number of records written."""
        return self._written

    def _serialize(self, item):
        if self.binary:
            return item
        try:
            return self._encode(item, self.errors)[0]
        except UnicodeEncodeError as e:
            raise EncodeError(
                'Could not encode record with {}'.format(self.encoding),
                item) from e

    def write(self, item):
        """Write a record followed by the delimiter.

        Return the total number of bytes written.  Raise EncodeError
        without writing anything if item could not be encoded.
        """
        f = self._checkopen()
        data = self._serialize(item)
        amt = writeall(f, data)
        amt += writeall(f, self.delimiter)
        f.flush()
        self._written += 1
        return amt

    def writelines(self, items):
        """Write each item as a record.  Return the number written."""
        n = 0
        for item in items:
            self.write(item)
            n += 1
        return n

    def detach(self):
        if self.f is not None:
            self.f.flush()
        return super(StreamWriter, self).detach()
