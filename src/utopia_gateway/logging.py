"""Logging helpers used by the UTOPIA GATEWAY CLI.

Console logging goes through Rich on stderr so stdout stays reserved for call
results. An in-memory "flight recorder" keeps recent DEBUG records and writes
them to a file when something goes wrong. Records from libraries (grpc,
urllib3, ...) get a short bracketed prefix on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import cryptography
import grpc
from google.protobuf import __version__ as protobuf_version
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "utopia_gateway"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate library log records with their top-level package name.

    Records from loggers outside the project get `record.prefix` set to a
    token like "[grpc]"; project records get an empty prefix. Nothing is
    filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach a prefix to the record and let it through."""
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG when `debug_mode`).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output. Mirrors click-extra's --color/--no-color.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to `capacity` records are buffered and written to `path` once a record
    at `flush_level` or above arrives (or on close when `flush_on_close`).

    Args:
        path: Destination file for flushed records.
        capacity: Number of records to buffer.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def discard_buffer(handler: MemoryHandler) -> None:
    """Drop the records a flight recorder has not written yet.

    `logging.shutdown` flushes every handler before closing it on Python 3.11,
    which would write the buffer even without flush-on-close.
    """
    handler.acquire()
    try:
        handler.buffer.clear()
    finally:
        handler.release()


def shutdown_logging(handlers: list[logging.Handler], flush_buffers: bool) -> None:
    """Shut logging down, writing flight-recorder buffers only when asked to."""
    if not flush_buffers:
        for handler in handlers:
            if isinstance(handler, MemoryHandler):
                discard_buffer(handler)
    logging.shutdown()


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary and DEBUG diagnostics.

    The diagnostics cover interpreter and platform, process id, working
    directory, the grpcio/protobuf/cryptography versions in use, active
    handlers, flight-recorder settings and per-logger level overrides.
    """
    logger.info(
        "UTOPIA GATEWAY %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("grpcio: %s", grpc.__version__)
    logger.debug("protobuf: %s", protobuf_version)
    logger.debug("cryptography: %s", cryptography.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
