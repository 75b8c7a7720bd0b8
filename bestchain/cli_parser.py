import argparse
import logging
from typing import (
    Any,
)

from eth_utils.logging import (
    DEBUG2_LEVEL_NUM,
)

from bestchain import __version__

LOG_LEVEL_CHOICES = {
    # numeric versions
    '8': DEBUG2_LEVEL_NUM,
    '10': logging.DEBUG,
    '20': logging.INFO,
    '30': logging.WARNING,
    '40': logging.ERROR,
    '50': logging.CRITICAL,
    # string versions
    'DEBUG2': DEBUG2_LEVEL_NUM,
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def log_level_formatted_string() -> str:
    numeric_levels = [k for k in LOG_LEVEL_CHOICES.keys() if k.isdigit()]
    literal_levels = [k for k in LOG_LEVEL_CHOICES.keys() if not k.isdigit()]

    return (
        "LEVEL must be one of: "
        f"\n  {'/'.join(numeric_levels)} (numeric); "
        f"\n  {'/'.join(literal_levels).lower()} (lowercase); "
        f"\n  {'/'.join(literal_levels).upper()} (uppercase)."
    )


class ValidateAndStoreLogLevel(argparse.Action):
    def __call__(self,
                 parser: argparse.ArgumentParser,
                 namespace: argparse.Namespace,
                 value: Any,
                 option_string: str = None) -> None:
        if value is None:
            return

        raw_value = value.upper()

        # this is a global log level.
        if raw_value in LOG_LEVEL_CHOICES:
            path = None
            log_level = LOG_LEVEL_CHOICES[raw_value]
        else:
            path, _, raw_log_level = value.partition('=')

            if not path or not raw_log_level:
                raise argparse.ArgumentError(
                    self,
                    f"Invalid logging config: '{value}'.  Log level may be specified "
                    "as a global logging level using the syntax `--log-level "
                    "<LEVEL>`; or, to specify the logging level for an "
                    "individual logger, '--log-level "
                    "<LOGGER-NAME>=<LEVEL>'" + '\n' +
                    log_level_formatted_string()
                )

            try:
                log_level = LOG_LEVEL_CHOICES[raw_log_level.upper()]
            except KeyError:
                raise argparse.ArgumentError(
                    self,
                    f"Invalid logging level.  Got '{raw_log_level}'. " +
                    log_level_formatted_string()
                )

        if getattr(namespace, self.dest) is None:
            setattr(namespace, self.dest, {})
        log_levels = getattr(namespace, self.dest)
        if path in log_levels:
            if path is None:
                raise argparse.ArgumentError(
                    self,
                    f"Global logging has already been configured to '{log_level}'.  The "
                    "global logging level may only be specified once."
                )
            else:
                raise argparse.ArgumentError(
                    self,
                    f"The logging level for '{path}' was provided more than once. "
                    "Please ensure the each name is provided only once"
                )
        log_levels[path] = log_level


parser = argparse.ArgumentParser(
    prog='bestchain',
    description=(
        "Read 80-byte block headers from stdin and write the heaviest chain to "
        "stdout as (hash, height) records sorted by hash."
    ),
)

#
# Argument Groups
#
bestchain_parser = parser.add_argument_group('core')
logging_parser = parser.add_argument_group('logging')


#
# Globals
#
bestchain_parser.add_argument('--version', action='version', version=__version__)
bestchain_parser.add_argument(
    '--input',
    dest='input_path',
    metavar='PATH',
    help="Read header records from PATH instead of stdin",
)
bestchain_parser.add_argument(
    '--output',
    dest='output_path',
    metavar='PATH',
    help="Write height records to PATH instead of stdout",
)


#
# Logging configuration
#
logging_parser.add_argument(
    '-l',
    '--log-level',
    action=ValidateAndStoreLogLevel,
    dest="log_levels",
    metavar="LEVEL",
    help=(
        "Configure the logging level. " + log_level_formatted_string()
    ),
)
