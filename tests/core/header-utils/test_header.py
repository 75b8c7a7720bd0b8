from eth_utils import (
    ValidationError,
    decode_hex,
    encode_hex,
)
import pytest

from bestchain._utils.hashing import (
    display_hash,
    hash256,
)
from bestchain.constants import (
    ZERO_HASH32,
)
from bestchain.header import (
    Header,
)
from bestchain.tools.builder import (
    mk_header_record,
)

# the bitcoin mainnet genesis header
GENESIS_RECORD = decode_hex(
    "0x0100000000000000000000000000000000000000000000000000000000000000"
    "000000003ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa"
    "4b1e5e4a29ab5f49ffff001d1dac2b7c"
)
GENESIS_DISPLAY_HASH = (
    "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
)


def test_hash256_of_empty_bytes():
    assert hash256(b"").hex() == (
        "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"
    )


def test_display_hash_reverses_bytes():
    assert display_hash(b"\x01\x02\x03") == "030201"


def test_header_from_genesis_record():
    header = Header.from_record(GENESIS_RECORD)

    assert header.display_hash == GENESIS_DISPLAY_HASH
    assert header.parent_hash == ZERO_HASH32
    assert header.work == 0x1D00FFFF


def test_header_from_record_reads_parent_and_work():
    parent_hash = b"\xaa" * 32
    record = mk_header_record(parent_hash, work=0x01020304, payload=b"\xff" * 36)

    header = Header.from_record(record)

    assert header.parent_hash == parent_hash
    assert header.work == 0x01020304
    assert header.hash == hash256(record)


def test_header_hash_depends_on_whole_record():
    first = Header.from_record(mk_header_record(nonce=1))
    second = Header.from_record(mk_header_record(nonce=2))

    assert first.parent_hash == second.parent_hash
    assert first.work == second.work
    assert first.hash != second.hash


@pytest.mark.parametrize(
    "record",
    (
        b"",
        b"\x00" * 79,
        b"\x00" * 81,
    ),
)
def test_header_from_record_rejects_wrong_size(record):
    with pytest.raises(ValidationError):
        Header.from_record(record)


def test_header_from_record_rejects_non_bytes():
    with pytest.raises(ValidationError):
        Header.from_record("\x00" * 80)


@pytest.mark.parametrize(
    "header_hash,parent_hash,work",
    (
        (b"\x01" * 31, ZERO_HASH32, 0),
        (b"\x01" * 32, b"\x00" * 33, 0),
        (b"\x01" * 32, ZERO_HASH32, -1),
        (b"\x01" * 32, ZERO_HASH32, 2**32),
        (b"\x01" * 32, ZERO_HASH32, True),
        ("0x01" * 16, ZERO_HASH32, 0),
    ),
)
def test_header_validation(header_hash, parent_hash, work):
    with pytest.raises(ValidationError):
        Header(header_hash, parent_hash, work)


def test_header_is_immutable():
    header = Header(b"\x01" * 32, ZERO_HASH32, 7)
    with pytest.raises(AttributeError):
        header.work = 8


def test_header_equality():
    header = Header(b"\x01" * 32, ZERO_HASH32, 7)

    assert header == Header(b"\x01" * 32, ZERO_HASH32, 7)
    assert header != Header(b"\x01" * 32, ZERO_HASH32, 8)
    assert len({header, Header(b"\x01" * 32, ZERO_HASH32, 7)}) == 1


def test_header_hex_hash():
    header = Header.from_record(GENESIS_RECORD)

    assert header.hex_hash == encode_hex(header.hash)
    assert decode_hex(header.hex_hash)[::-1].hex() == GENESIS_DISPLAY_HASH
    assert f"header_hash={header.hex_hash}," in repr(header)
