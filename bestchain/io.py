import struct
from typing import (
    BinaryIO,
    Iterable,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    to_tuple,
)

from bestchain.abc import (
    HeaderAPI,
)
from bestchain.constants import (
    HASH_SIZE,
    HEADER_SIZE,
    HEIGHT_FORMAT,
    HEIGHT_RECORD_SIZE,
)
from bestchain.exceptions import (
    TruncatedHeaderStream,
)
from bestchain.header import (
    Header,
)
from bestchain.typing import (
    Height,
    HeightRecord,
)
from bestchain.validation import (
    validate_length,
)


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    # raw streams may return short reads before the end of the stream
    chunks = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_header_records(stream: BinaryIO) -> Iterable[bytes]:
    """
    Yield raw 80-byte header records until the stream is exhausted.

    A stream holding less than one whole record is treated as empty.

    :raises TruncatedHeaderStream: if the stream ends part way through a record
        after at least one complete record has been read
    """
    records_read = 0
    while True:
        record = _read_exactly(stream, HEADER_SIZE)
        if len(record) == HEADER_SIZE:
            records_read += 1
            yield record
        elif not record or records_read == 0:
            return
        else:
            raise TruncatedHeaderStream(records_read, len(record))


def read_headers(stream: BinaryIO) -> Iterable[HeaderAPI]:
    for record in read_header_records(stream):
        yield Header.from_record(record)


def decode_height_record(record: bytes) -> HeightRecord:
    validate_length(record, HEIGHT_RECORD_SIZE, title="Height record")
    (height,) = struct.unpack(HEIGHT_FORMAT, record[HASH_SIZE:])
    return Hash32(record[:HASH_SIZE]), Height(height)


@to_tuple
def read_height_records(stream: BinaryIO) -> Iterable[HeightRecord]:
    while True:
        record = _read_exactly(stream, HEIGHT_RECORD_SIZE)
        if not record:
            return
        yield decode_height_record(record)
