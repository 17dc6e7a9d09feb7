import io

from jhsiao.filestream import StreamReader, StreamWriter

records = ['hello world', '', 'goodbye', 'caf\xe9 ☃', 'x' * 5000, 'the end']

def test_roundtrip_file(tmp_path):
    path = tmp_path / 'records.txt'
    with StreamWriter(path) as w:
        assert w.writelines(records) == len(records)
        assert w.written == len(records)
    with StreamReader(path) as r:
        assert list(r) == records
        r.rewind()
        assert r.readrecords() == records

def test_roundtrip_options():
    for delimiter, encoding in (
            ('\n', 'utf-8'),
            ('\r\n', 'utf-8'),
            ('<|>', 'utf-8'),
            ('\n', 'utf-16-le'),
            ('\x1e', 'utf-32-be')):
        for chunksize in (1, 2, 3, 7, 4096):
            f = io.BytesIO()
            w = StreamWriter(f, delimiter, encoding)
            w.writelines(records)
            data = w.detach().getvalue()
            with StreamReader(
                    io.BytesIO(data), delimiter, encoding,
                    chunksize=chunksize) as r:
                assert list(r) == records

def test_roundtrip_binary():
    items = [b'\x00\x01', b'', b'\xff' * 100]
    f = io.BytesIO()
    w = StreamWriter(f, b'\n\n', mode='wb')
    w.writelines(items)
    with StreamReader(io.BytesIO(w.detach().getvalue()), b'\n\n', mode='rb', chunksize=5) as r:
        assert list(r) == items
