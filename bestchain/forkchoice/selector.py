from typing import (
    Iterable,
    Tuple,
)

from eth_utils import (
    ValidationError,
    encode_hex,
    get_extended_debug_logger,
    to_tuple,
)

from bestchain.abc import (
    HeaderAPI,
    HeaderStoreAPI,
)
from bestchain.exceptions import (
    CyclicAncestry,
    EmptyHeaderSet,
)
from bestchain.forkchoice.work import (
    WorkAccumulator,
)
from bestchain.typing import (
    Chain,
    ChainSelection,
    Work,
)

logger = get_extended_debug_logger("bestchain.forkchoice.selector")


def select_best_header(
    store: HeaderStoreAPI, accumulator: WorkAccumulator = None
) -> ChainSelection:
    """
    Return the header with the most cumulative work, along with that work.

    Headers are visited in ascending order of hash and a header only replaces
    the best one when its total work is strictly greater, so among headers
    with equal work the one with the lowest hash wins.

    :raises EmptyHeaderSet: if the store has no headers
    :raises CyclicAncestry: if parent links in the store form a cycle
    :raises ValidationError: if ``accumulator`` walks a different store
    """
    if accumulator is None:
        accumulator = WorkAccumulator(store)
    elif accumulator.store is not store:
        raise ValidationError(
            "Work accumulator must walk the store being selected from"
        )
    else:
        # totals from an earlier selection may not hold for this one
        accumulator.cache.clear()

    best_header = None
    most_work = Work(0)

    for header in store.sorted_headers():
        total_work = accumulator.total_work(header)
        # record before comparing, so later headers can build on this total
        accumulator.record(header, total_work)

        if best_header is None or total_work > most_work:
            best_header = header
            most_work = total_work

    if best_header is None:
        raise EmptyHeaderSet("Cannot select a best chain from an empty header set")

    logger.debug(
        "Selected %s with total work %d (%d steps, %d cache hits)",
        best_header,
        most_work,
        accumulator.steps,
        accumulator.cache_hits,
    )
    return ChainSelection(best_header, most_work)


@to_tuple
def _walk_to_root(store: HeaderStoreAPI, tip: HeaderAPI) -> Iterable[HeaderAPI]:
    max_depth = len(store)
    visitor = tip
    yield visitor

    for _ in range(max_depth):
        parent = store.get_parent(visitor)
        if parent is None:
            return
        visitor = parent
        yield visitor

    raise CyclicAncestry(tip.hash, max_depth)


def get_chain_to(store: HeaderStoreAPI, tip: HeaderAPI) -> Chain:
    """
    Return the chain ending at ``tip``, ordered from its root to ``tip``.
    """
    return tuple(reversed(_walk_to_root(store, tip)))


def find_best_chain(store: HeaderStoreAPI) -> Tuple[Chain, Work]:
    best_header, total_work = select_best_header(store)
    chain = get_chain_to(store, best_header)
    logger.debug2(
        "Best chain runs from %s to %s",
        encode_hex(chain[0].hash),
        encode_hex(chain[-1].hash),
    )
    return chain, total_work


def select_best_chain(store: HeaderStoreAPI) -> Chain:
    """
    Return the chain with the most cumulative work, root first.

    :raises EmptyHeaderSet: if the store has no headers
    """
    chain, _ = find_best_chain(store)
    return chain
