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

from bestchain.constants import (
    GENESIS_HEIGHT,
    HEIGHT_FORMAT,
)
from bestchain.exceptions import (
    EmptyHeaderSet,
)
from bestchain.typing import (
    Chain,
    Height,
    HeightRecord,
    HeightTable,
)
from bestchain.validation import (
    validate_height,
    validate_word,
)


def chain_heights(chain: Chain) -> HeightTable:
    """
    Map the hash of every header in a root-first chain to its height, with the
    root at height 0. Entries are ordered by hash.
    """
    if not chain:
        raise EmptyHeaderSet("Cannot assign heights to an empty chain")

    heights = {
        header.hash: Height(height)
        for height, header in enumerate(chain, start=GENESIS_HEIGHT)
    }
    return {header_hash: heights[header_hash] for header_hash in sorted(heights)}


@to_tuple
def materialize_chain(chain: Chain) -> Iterable[HeightRecord]:
    yield from chain_heights(chain).items()


def encode_height_record(header_hash: Hash32, height: int) -> bytes:
    validate_word(header_hash, title="Header Hash")
    validate_height(height)
    return header_hash + struct.pack(HEIGHT_FORMAT, height)


def write_chain(chain: Chain, sink: BinaryIO) -> int:
    """
    Write a 36-byte record (hash, then signed little-endian height) for every
    header in the chain, in ascending order of hash. Return the number of
    records written.
    """
    records = materialize_chain(chain)
    for header_hash, height in records:
        sink.write(encode_height_record(header_hash, height))
    return len(records)
