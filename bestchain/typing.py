from typing import (
    TYPE_CHECKING,
    Dict,
    NamedTuple,
    NewType,
    Tuple,
)

from eth_typing import (
    Hash32,
)

if TYPE_CHECKING:
    from bestchain.abc import (  # noqa: F401
        HeaderAPI,
    )


Height = NewType("Height", int)

Work = NewType("Work", int)

# root-first, tip-last
Chain = Tuple["HeaderAPI", ...]

HeightRecord = Tuple[Hash32, Height]

HeightTable = Dict[Hash32, Height]


class ChainSelection(NamedTuple):
    header: "HeaderAPI"
    total_work: Work
