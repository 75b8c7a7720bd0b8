import hashlib

from eth_typing import (
    Hash32,
)


def hash256(data: bytes) -> Hash32:
    """
    Double SHA-256, the identity hash of a proof-of-work block header.
    """
    return Hash32(hashlib.sha256(hashlib.sha256(data).digest()).digest())


def display_hash(value: bytes) -> str:
    """
    Render a hash the way block explorers do: byte-reversed, as plain hex.
    """
    return value[::-1].hex()
