# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

from logging import ERROR as ERROR
from logging import WARNING as WARN
from logging import INFO as INFO
from logging import DEBUG as DEBUG


PACKAGE_LOGGER = "regdefgen"


class LoggerError(Exception):
    "Generic Error for logger setup"

    pass


def add_arguments(parser: argparse.ArgumentParser):
    """Add logger arguments to parser.

    :param parser: ArgumentParser to add logger arguments to
    :type parser: argparse.ArgumentParser
    """
    logger_parser = parser.add_argument_group("Logger", description="Arguments that affect Logger behavior. Log output never goes to stdout")
    logger_parser.add_argument("--logger_level", type=str.upper, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logger level")
    logger_parser.add_argument("--logger_file", type=Path, default=None, help="Logger file path")
    logger_parser.add_argument("--logger_no_tee", dest="logger_tee", action="store_false", default=True, help="Do not tee log output. Default command line behavior is to tee to stderr")
    logger_parser.add_argument("--logger_no_timestamp", dest="logger_timestamp", action="store_false", default=True, help="Do not include timestamp in log messages")
    logger_parser.add_argument("--logger_verbose", dest="verbose_logging", action="store_true", default=False, help="Enable verbose logging (filename, function name)")


def from_args(args: argparse.Namespace):
    "Initialize the package logger from command-line arguments"
    return init_logger(
        args.logger_file,
        level=args.logger_level,
        tee_to_stderr=args.logger_tee,
        logger_timestamp=args.logger_timestamp,
        verbose=args.verbose_logging,
    )


def init_logger(log_path: Optional[Path] = None, level: str = "WARNING", tee_to_stderr: bool = True, logger_timestamp: bool = True, verbose: bool = False) -> None:
    """
    Initializes the package logger. Generated source goes to stdout, so handlers only ever write to stderr or ``log_path``.

    :param log_path: Optional path to log file
    :type log_path: Path
    :param level: Logging level (DEBUG, INFO, WARNING, ERROR)
    :type level: str
    :param tee_to_stderr: Log to stderr
    :type tee_to_stderr: bool
    :param verbose: Enable verbose logging
    :type verbose: bool

    .. code-block:: python

        from regdefgen.lib.logger import init_logger
        init_logger(level="DEBUG", verbose=True)

        # In modules:
        import logging
        log = logging.getLogger(__name__)
        log.info("Hello, world!")
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    # If already configured, keep the existing handlers
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    default_fmt = "%(levelname)s %(name)s:%(lineno)d  %(message)s"
    verbose_fmt = "%(levelname)s %(name)s %(filename)s:%(lineno)d %(funcName)s(): %(message)s"
    if verbose:
        fmt = verbose_fmt
    else:
        fmt = default_fmt
    if logger_timestamp:
        fmt = "[%(asctime)s]" + fmt
    logger_format = logging.Formatter(fmt, datefmt="%Y-%m-%dT%H:%M:%S")

    if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        raise LoggerError(f"Unknown logger level {level}")

    if tee_to_stderr:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(logger_format)
        logger.addHandler(stderr_handler)

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(logger_format)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.setLevel(getattr(logging, level))
    logging.getLogger(__name__).debug(f"Logger initialized, setting log level to {level}")


def close_logger():
    """
    Close and remove all non-null handlers so the logger can be initialized again, e.g. between test cases.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        if isinstance(handler, logging.NullHandler):
            continue
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.WARNING)
    logger.propagate = True


def set_package_log_level(package_name, level):
    """
    Set log level for a package and all its modules that are already loaded.

    E.g. to see every skipped ``#define`` without debug output from the rest of the package:
    .. code-block:: python

        from regdefgen.lib.logger import set_package_log_level
        set_package_log_level("regdefgen.lib.processor", logging.DEBUG)

    """
    logger = logging.getLogger(package_name)
    logger.setLevel(level)
    prefix = package_name + "."
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith(prefix):
            logging.getLogger(name).setLevel(level)
