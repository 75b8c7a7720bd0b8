from contextlib import (
    ExitStack,
)
import logging
import sys
from typing import (
    BinaryIO,
    Sequence,
)

from eth_utils import (
    setup_DEBUG2_logging,
)

from bestchain._utils.logging import (
    set_logger_levels,
    setup_stderr_logging,
)
from bestchain.cli_parser import (
    parser,
)
from bestchain.db.header import (
    HeaderStore,
)
from bestchain.exceptions import (
    CyclicAncestry,
    EmptyHeaderSet,
    TruncatedHeaderStream,
)
from bestchain.forkchoice import (
    find_best_chain,
    find_chain_tips,
)
from bestchain.io import (
    read_headers,
)
from bestchain.materialize import (
    write_chain,
)
from bestchain.typing import (
    Chain,
)

logger = logging.getLogger('bestchain')

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def load_best_chain(source: BinaryIO) -> Chain:
    headers = tuple(read_headers(source))
    logger.info("Read %d headers", len(headers))

    store = HeaderStore.from_headers(headers)
    logger.info("Stored %d unique headers", len(store))

    chain_tips = find_chain_tips(store)
    logger.info("Found %d chain tips", len(chain_tips))

    chain, total_work = find_best_chain(store)
    logger.info("Best chain")
    logger.info("- Height: %d", len(chain) - 1)
    logger.info("- Genesis: %s", chain[0].display_hash)
    logger.info("- Tip: %s", chain[-1].display_hash)
    logger.info("- Work: %d", total_work)
    return chain


def write_output(chain: Chain, sink: BinaryIO) -> None:
    records_written = write_chain(chain, sink)
    sink.flush()
    logger.debug("Wrote %d height records", records_written)


def main(
    argv: Sequence[str] = None,
    stdin: BinaryIO = None,
    stdout: BinaryIO = None,
) -> int:
    args = parser.parse_args(argv)
    setup_DEBUG2_logging()

    log_levels = args.log_levels or {}
    handler = setup_stderr_logging(log_levels.get(None))
    set_logger_levels(log_levels)

    try:
        with ExitStack() as stack:
            if args.input_path is not None:
                source = stack.enter_context(open(args.input_path, 'rb'))
            else:
                source = stdin if stdin is not None else sys.stdin.buffer

            chain = load_best_chain(source)

            # the output file is only replaced once a chain has been selected
            if args.output_path is not None:
                sink = stack.enter_context(open(args.output_path, 'wb'))
            else:
                sink = stdout if stdout is not None else sys.stdout.buffer

            write_output(chain, sink)
            return EXIT_SUCCESS
    except EmptyHeaderSet as err:
        logger.error("No chain: %s", err)
        return EXIT_FAILURE
    except (CyclicAncestry, TruncatedHeaderStream) as err:
        logger.error("Invalid header set: %s", err)
        return EXIT_FAILURE
    finally:
        logging.getLogger().removeHandler(handler)
