from importlib.metadata import (
    version as __version,
)

from bestchain.db.header import (
    HeaderStore,
)
from bestchain.forkchoice import (
    find_best_chain,
    find_chain_tips,
    select_best_chain,
    select_best_header,
)
from bestchain.header import (
    Header,
)
from bestchain.materialize import (
    materialize_chain,
    write_chain,
)

__version__ = __version("py-bestchain")
