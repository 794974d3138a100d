"""
Logging for the kssgen CLI.

``configure_logging()`` runs once per process, from the click group.
Console verbosity follows the global flags (``--debug`` > ``--verbose`` >
``--quiet``); with none of them the ``KSSGEN_LOG_LEVEL`` env var decides,
then WARNING. ``KSSGEN_LOG_FILE`` adds a file handler at
``KSSGEN_LOG_FILE_LEVEL`` (or the console level).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping

ENV_LEVEL = "KSSGEN_LOG_LEVEL"
ENV_FILE = "KSSGEN_LOG_FILE"
ENV_FILE_LEVEL = "KSSGEN_LOG_FILE_LEVEL"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"

# The preview server logs every request at INFO
_SERVER_LOGGERS = ("werkzeug", "flask")


def parse_level(level: str | None) -> int:
    """Level name to number; unknown or empty names mean WARNING."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Console level for the given flags, falling back to ``KSSGEN_LOG_LEVEL``."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    environ = os.environ if environ is None else environ
    return parse_level(environ.get(ENV_LEVEL))


def _console_formatter(level: int) -> logging.Formatter:
    if level <= logging.DEBUG:
        return logging.Formatter("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s", "%H:%M:%S")
    if level <= logging.INFO:
        return logging.Formatter("%(levelname)s %(name)s: %(message)s")
    # Warnings and errors read like CLI output
    return logging.Formatter("%(message)s")


def configure_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Install the process-wide handlers and return the console level.

    Replaces any handlers already on the root logger, so calling it again
    (e.g. once per ``CliRunner.invoke``) does not duplicate output.
    """
    environ = os.environ if environ is None else environ
    level = resolve_level(debug, verbose, quiet, environ)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(_console_formatter(level))
    handlers: list[logging.Handler] = [console]

    log_file = environ.get(ENV_FILE)
    if log_file:
        file_level = parse_level(environ[ENV_FILE_LEVEL]) if environ.get(ENV_FILE_LEVEL) else level
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(handler.level for handler in handlers))

    server_level = logging.DEBUG if debug else logging.WARNING
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(server_level)

    # Handlers may outlive the stream they write to (CliRunner swaps stderr)
    logging.raiseExceptions = False

    return level
