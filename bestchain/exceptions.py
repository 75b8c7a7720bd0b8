from eth_typing import (
    Hash32,
)
from eth_utils import (
    encode_hex,
)


class BestChainError(Exception):
    """
    Base class for all bestchain errors.
    """


class HeaderNotFound(BestChainError):
    """
    Raised when a header with the given hash does not exist in the store.
    """


class StoreSealed(BestChainError):
    """
    Raised when a header is written to a store that has already been frozen.
    """


class EmptyHeaderSet(BestChainError):
    """
    Raised when a best chain is requested from a store without any headers.
    There is no chain to report, so no root, tip or height exists.
    """


class CyclicAncestry(BestChainError):
    """
    Raised when walking the ancestry of a header takes more steps than the
    store has headers, which can only happen if parent links form a cycle.
    """

    @property
    def header_hash(self) -> Hash32:
        return self.args[0]

    @property
    def max_depth(self) -> int:
        return self.args[1]

    def __str__(self) -> str:
        return (
            f"Ancestry of header {encode_hex(self.header_hash)} did not reach a "
            f"root within {self.max_depth} steps, parent links form a cycle"
        )


class TruncatedHeaderStream(BestChainError):
    """
    Raised when a header stream ends part way through a record, after at
    least one complete record was read.
    """

    @property
    def records_read(self) -> int:
        return self.args[0]

    @property
    def trailing_bytes(self) -> int:
        return self.args[1]

    def __str__(self) -> str:
        return (
            f"Header stream ended with {self.trailing_bytes} trailing bytes after "
            f"{self.records_read} complete records"
        )
