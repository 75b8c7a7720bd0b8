import struct
from typing import (
    Any,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    encode_hex,
    humanize_hash,
)

from bestchain._utils.hashing import (
    display_hash,
    hash256,
)
from bestchain.abc import (
    HeaderAPI,
)
from bestchain.constants import (
    HEADER_SIZE,
    PARENT_HASH_END,
    PARENT_HASH_OFFSET,
    WORK_END,
    WORK_FORMAT,
    WORK_OFFSET,
)
from bestchain.validation import (
    validate_is_bytes,
    validate_length,
    validate_uint32,
    validate_word,
)


class Header(HeaderAPI):
    __slots__ = ("_hash", "_parent_hash", "_work")

    def __init__(self, header_hash: Hash32, parent_hash: Hash32, work: int) -> None:
        validate_word(header_hash, title="Header Hash")
        validate_word(parent_hash, title="Parent Hash")
        validate_uint32(work, title="Work")

        self._hash = header_hash
        self._parent_hash = parent_hash
        self._work = work

    @classmethod
    def from_record(cls, record: bytes) -> "Header":
        """
        Decode a raw 80-byte header record. The identity of the header is the
        ``hash256`` of the whole record; only the parent hash and the work
        proxy are read from it.
        """
        validate_is_bytes(record, title="Header record")
        validate_length(record, HEADER_SIZE, title="Header record")

        (work,) = struct.unpack(WORK_FORMAT, record[WORK_OFFSET:WORK_END])
        return cls(
            header_hash=hash256(record),
            parent_hash=Hash32(record[PARENT_HASH_OFFSET:PARENT_HASH_END]),
            work=work,
        )

    @property
    def hash(self) -> Hash32:
        return self._hash

    @property
    def parent_hash(self) -> Hash32:  # type: ignore[override]
        return self._parent_hash

    @property
    def work(self) -> int:  # type: ignore[override]
        return self._work

    @property
    def hex_hash(self) -> str:
        return encode_hex(self._hash)

    @property
    def display_hash(self) -> str:
        return display_hash(self._hash)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HeaderAPI):
            return NotImplemented
        return (
            self.hash == other.hash
            and self.parent_hash == other.parent_hash
            and self.work == other.work
        )

    def __hash__(self) -> int:
        return hash((self._hash, self._parent_hash, self._work))

    def __str__(self) -> str:
        return f"<Header 0x{humanize_hash(self._hash)} work={self._work}>"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"header_hash={self.hex_hash}, "
            f"parent_hash={encode_hex(self._parent_hash)}, "
            f"work={self._work})"
        )
