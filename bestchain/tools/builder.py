"""
Helpers for building headers, header chains and raw header records, mostly
for use in tests.
"""
import struct
from typing import (
    Iterable,
    Union,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    to_tuple,
)

from bestchain._utils.hashing import (
    hash256,
)
from bestchain.abc import (
    HeaderAPI,
)
from bestchain.constants import (
    HEADER_SIZE,
    PARENT_HASH_END,
    WORK_FORMAT,
    WORK_OFFSET,
    ZERO_HASH32,
)
from bestchain.header import (
    Header,
)
from bestchain.validation import (
    validate_length,
)

HEADER_VERSION = 1

ParentLike = Union[HeaderAPI, Hash32, None]


def _to_parent_hash(parent: ParentLike) -> Hash32:
    if parent is None:
        return ZERO_HASH32
    elif isinstance(parent, HeaderAPI):
        return parent.hash
    else:
        return parent


def mk_header(
    parent: ParentLike = None,
    work: int = 1,
    header_hash: Hash32 = None,
    salt: bytes = b"",
) -> Header:
    """
    Build a header on top of ``parent``: a header, a bare parent hash, or
    ``None`` for a root. Unless a hash is given it is derived from the parent,
    the work and ``salt``, so siblings need different salts or work.
    """
    parent_hash = _to_parent_hash(parent)
    if header_hash is None:
        header_hash = hash256(parent_hash + struct.pack(WORK_FORMAT, work) + salt)
    return Header(header_hash, parent_hash, work)


@to_tuple
def mk_header_chain(
    base: ParentLike, length: int, work: int = 1, salt: bytes = b""
) -> Iterable[Header]:
    parent = base
    for _ in range(length):
        header = mk_header(parent, work=work, salt=salt)
        yield header
        parent = header


def mk_header_record(
    parent_hash: Hash32 = ZERO_HASH32,
    work: int = 1,
    version: int = HEADER_VERSION,
    payload: bytes = b"",
    nonce: int = 0,
) -> bytes:
    """
    Build a raw 80-byte header record. ``payload`` fills the unused fields
    between the parent hash and the work proxy.
    """
    padding = WORK_OFFSET - PARENT_HASH_END
    record = b"".join((
        struct.pack("<I", version),
        parent_hash,
        payload.ljust(padding, b"\x00")[:padding],
        struct.pack(WORK_FORMAT, work),
        struct.pack("<I", nonce),
    ))
    validate_length(record, HEADER_SIZE, title="Header record")
    return record
