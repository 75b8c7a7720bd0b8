from eth_utils import (
    setup_DEBUG2_logging,
)
import pytest

from bestchain.db.header import (
    HeaderStore,
)
from bestchain.tools.builder import (
    mk_header,
)

#
#  Setup DEBUG2 level logging.
#
setup_DEBUG2_logging()


@pytest.fixture
def header_store():
    return HeaderStore()


@pytest.fixture
def root_header():
    return mk_header(work=10, salt=b"root")


@pytest.fixture
def forked_store(root_header):
    """
    A root with two children: a light one and a heavy one.
    """
    light = mk_header(root_header, work=5)
    heavy = mk_header(root_header, work=20)
    return HeaderStore.from_headers((root_header, light, heavy))
