import logging
from logging import (
    StreamHandler,
)
import sys
from typing import (
    Dict,
    Optional,
    TextIO,
)


class BestChainLogFormatter(logging.Formatter):

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        record.shortname = record.name.split('.')[-1]  # type: ignore
        return super().format(record)


LOG_FORMATTER = BestChainLogFormatter(
    fmt='%(levelname)8s  %(asctime)s  %(shortname)20s  %(message)s',
)


def setup_stderr_logging(level: int = None, stream: TextIO = None) -> StreamHandler:
    if level is None:
        level = logging.INFO
    if stream is None:
        stream = sys.stderr
    logger = logging.getLogger()

    handler_stream = logging.StreamHandler(stream)
    handler_stream.setLevel(level)
    handler_stream.setFormatter(LOG_FORMATTER)

    logger.addHandler(handler_stream)
    logger.setLevel(min(logger.level or level, level))

    logger.debug('Logging initialized for stderr')

    return handler_stream


def set_logger_levels(log_levels: Dict[Optional[str], int]) -> None:
    for name, level in log_levels.items():

        # The root logger is configured separately
        if name is None:
            continue

        logging.getLogger(name).setLevel(level)
