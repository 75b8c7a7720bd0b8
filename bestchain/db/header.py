from typing import (
    Dict,
    Iterable,
    Iterator,
    Optional,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    encode_hex,
)

from bestchain.abc import (
    HeaderAPI,
    HeaderStoreAPI,
)
from bestchain.exceptions import (
    HeaderNotFound,
    StoreSealed,
)
from bestchain.validation import (
    validate_word,
)


class HeaderStore(HeaderStoreAPI):
    def __init__(self) -> None:
        self._headers: Dict[Hash32, HeaderAPI] = {}
        self._is_frozen = False

    @classmethod
    def from_headers(
        cls, headers: Iterable[HeaderAPI], freeze: bool = True
    ) -> "HeaderStore":
        store = cls()
        for header in headers:
            store.put(header)
        if freeze:
            store.freeze()
        return store

    #
    # Write API
    #
    def put(self, header: HeaderAPI) -> None:
        if self._is_frozen:
            raise StoreSealed(
                f"Cannot store header {encode_hex(header.hash)} in a frozen store"
            )
        self._headers[header.hash] = header

    def freeze(self) -> None:
        self._is_frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._is_frozen

    #
    # Read API
    #
    def get(self, header_hash: Hash32) -> Optional[HeaderAPI]:
        return self._headers.get(header_hash)

    def get_header_by_hash(self, header_hash: Hash32) -> HeaderAPI:
        validate_word(header_hash, title="Header Hash")
        try:
            return self._headers[header_hash]
        except KeyError:
            raise HeaderNotFound(f"No header with hash {encode_hex(header_hash)} found")

    def get_parent(self, header: HeaderAPI) -> Optional[HeaderAPI]:
        return self._headers.get(header.parent_hash)

    def all(self) -> Iterable[HeaderAPI]:
        return self._headers.values()

    def sorted_headers(self) -> Iterable[HeaderAPI]:
        for header_hash in sorted(self._headers):
            yield self._headers[header_hash]

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, header_hash: object) -> bool:
        return header_hash in self._headers

    def __iter__(self) -> Iterator[Hash32]:
        return iter(self._headers)
