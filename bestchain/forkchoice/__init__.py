from .selector import (
    find_best_chain,
    get_chain_to,
    select_best_chain,
    select_best_header,
)
from .tips import find_chain_tips
from .work import (
    WorkAccumulator,
    WorkCache,
)
