from typing import (
    FrozenSet,
    Iterable,
    Set,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    to_set,
)

from bestchain.abc import (
    HeaderAPI,
    HeaderStoreAPI,
)


@to_set
def _find_parents_with_children(store: HeaderStoreAPI) -> Iterable[Hash32]:
    for header in store.all():
        # a dangling parent reference does not mark anything
        if header.parent_hash in store:
            yield header.parent_hash


def find_chain_tips(store: HeaderStoreAPI) -> FrozenSet[HeaderAPI]:
    """
    Return every header that no other stored header names as its parent.

    Each tip ends a branch, so the number of tips is the number of competing
    branches in the store.
    """
    has_children: Set[Hash32] = _find_parents_with_children(store)
    return frozenset(
        header for header in store.all() if header.hash not in has_children
    )
