from typing import (
    Dict,
    Optional,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    encode_hex,
    get_extended_debug_logger,
)

from bestchain.abc import (
    HeaderAPI,
    HeaderStoreAPI,
    WorkCacheAPI,
)
from bestchain.exceptions import (
    CyclicAncestry,
)
from bestchain.typing import (
    Work,
)


class WorkCache(WorkCacheAPI):
    def __init__(self) -> None:
        self._cache: Dict[Hash32, Work] = {}

    def get(self, header_hash: Hash32) -> Optional[Work]:
        return self._cache.get(header_hash)

    def set(self, header_hash: Hash32, total_work: Work) -> None:
        self._cache[header_hash] = total_work

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, header_hash: object) -> bool:
        return header_hash in self._cache


class WorkAccumulator:
    """
    Computes the cumulative work of headers, from a header back to the root
    of its branch.

    Totals that have been recorded in the cache are reused, so headers that
    share ancestry only walk the shared prefix once. The accumulator never
    writes to the cache itself; the caller records a header's total once it
    has been computed.

    ``steps`` counts every parent hop taken across all walks, and
    ``cache_hits`` counts walks that ended on a cached ancestor.
    """
    logger = get_extended_debug_logger("bestchain.forkchoice.work.WorkAccumulator")

    def __init__(
        self,
        store: HeaderStoreAPI,
        cache: WorkCacheAPI = None,
        max_depth: int = None,
    ) -> None:
        self.store = store
        self.cache = WorkCache() if cache is None else cache
        # an acyclic walk can't visit more headers than the store holds
        self.max_depth = len(store) if max_depth is None else max_depth
        self.steps = 0
        self.cache_hits = 0

    def total_work(self, header: HeaderAPI) -> Work:
        visitor = header
        total_work = header.work
        depth = 0

        while True:
            parent = self.store.get(visitor.parent_hash)
            if parent is None:
                # reached the root of the branch
                break

            cached_work = self.cache.get(parent.hash)
            if cached_work is not None:
                total_work += cached_work
                self.cache_hits += 1
                break

            depth += 1
            if depth > self.max_depth:
                raise CyclicAncestry(header.hash, self.max_depth)

            visitor = parent
            total_work += visitor.work

        self.steps += depth
        if self.logger.show_debug2:
            self.logger.debug2(
                "Total work of %s is %d after %d steps",
                encode_hex(header.hash),
                total_work,
                depth,
            )
        return Work(total_work)

    def record(self, header: HeaderAPI, total_work: Work) -> None:
        self.cache.set(header.hash, total_work)
