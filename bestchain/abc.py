from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    Iterable,
    Iterator,
    Optional,
)

from eth_typing import (
    Hash32,
)

from bestchain.typing import (
    Work,
)


class HeaderAPI(ABC):
    """
    A block header reduced to the fields fork choice needs: its own identity,
    the identity of its parent and the work it contributes.
    """

    parent_hash: Hash32
    work: int

    @property
    @abstractmethod
    def hash(self) -> Hash32:
        """
        Return the identity of the header.
        """
        ...

    @property
    @abstractmethod
    def hex_hash(self) -> str:
        """
        Return the hash as a hex string.
        """
        ...

    @property
    @abstractmethod
    def display_hash(self) -> str:
        """
        Return the hash in byte-reversed display order, as block explorers
        print it.
        """
        ...


class HeaderStoreAPI(ABC):
    """
    A collection of headers keyed by their hash. A store is populated once
    and only read afterwards.
    """

    @abstractmethod
    def put(self, header: HeaderAPI) -> None:
        """
        Insert the header, replacing any header stored under the same hash.

        Raise ``StoreSealed`` if the store has been frozen.
        """
        ...

    @abstractmethod
    def get(self, header_hash: Hash32) -> Optional[HeaderAPI]:
        """
        Return the header with the given hash, or ``None`` if it is not stored.

        Absence is the normal signal for "no known parent" and is not an error.
        """
        ...

    @abstractmethod
    def get_header_by_hash(self, header_hash: Hash32) -> HeaderAPI:
        """
        Return the header with the given hash.

        Raise ``HeaderNotFound`` if it is not stored.
        """
        ...

    @abstractmethod
    def get_parent(self, header: HeaderAPI) -> Optional[HeaderAPI]:
        """
        Return the stored parent of ``header``, or ``None`` if the parent is
        unknown.
        """
        ...

    @abstractmethod
    def all(self) -> Iterable[HeaderAPI]:
        """
        Return every stored header, in no particular order.
        """
        ...

    @abstractmethod
    def sorted_headers(self) -> Iterable[HeaderAPI]:
        """
        Return every stored header in ascending order of hash.
        """
        ...

    @abstractmethod
    def freeze(self) -> None:
        """
        Seal the store against further writes.
        """
        ...

    @property
    @abstractmethod
    def is_frozen(self) -> bool:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __contains__(self, header_hash: object) -> bool:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Hash32]:
        ...


class WorkCacheAPI(ABC):
    """
    Cumulative work of headers whose ancestry has already been walked. An
    entry for a hash means the total work from that header back to its
    terminal ancestor is known.
    """

    @abstractmethod
    def get(self, header_hash: Hash32) -> Optional[Work]:
        ...

    @abstractmethod
    def set(self, header_hash: Hash32, total_work: Work) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __contains__(self, header_hash: object) -> bool:
        ...
