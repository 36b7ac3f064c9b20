"""Container log records, log consumers and the logger used by the package."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TextIO, Union

STDOUT_LOG = "STDOUT"
STDERR_LOG = "STDERR"

PACKAGE_PATH = "containerkit"

_SERVER_INFO_MESSAGE = (
    "%s - Connected to docker: \n"
    "  Server Version: %s\n"
    "  API Version: %s\n"
    "  Operating System: %s\n"
    "  Total Memory: %s MB\n"
)


@dataclass(frozen=True)
class Log:
    """A message written by a process: its stream type and raw content."""

    log_type: str
    content: bytes


class LogConsumer(ABC):
    """Receives container log records; what it does with them is its own business."""

    @abstractmethod
    def accept(self, log: Log) -> None:
        """Handle one log record."""


class Logging(ABC):
    """Anything that can print a printf-style formatted message."""

    @abstractmethod
    def printf(self, fmt: str, *args: Any) -> None:
        """Format ``fmt`` with ``args`` and emit the result."""


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


class StdLogger(Logging):
    """Writes timestamped lines to a text stream, standard error by default."""

    def __init__(self, stream: TextIO | None = None, prefix: str = "") -> None:
        self._stream = stream
        self.prefix = prefix

    def printf(self, fmt: str, *args: Any) -> None:
        message = _format(fmt, args)
        if not message.endswith("\n"):
            message += "\n"
        stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S ")
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(self.prefix + stamp + message)
        stream.flush()


logger: Logging = StdLogger()

ServerInfo = Union[Mapping[str, Any], Callable[[], Mapping[str, Any]]]


def log_docker_server_info(
    info: ServerInfo, client_version: str, logger: Logging | None = None
) -> None:
    """Log a summary of the Docker server.

    ``info`` is the server's info document, or a callable that fetches it;
    if fetching fails the failure is logged instead.
    """
    target = logger if logger is not None else globals_logger()
    if callable(info):
        try:
            info = info()
        except Exception as exc:  # any failure to reach the daemon is only reported
            target.printf("failed getting information about docker server: %s", exc)
            return

    mem_total = int(info.get("MemTotal", 0))
    target.printf(
        _SERVER_INFO_MESSAGE,
        PACKAGE_PATH,
        info.get("ServerVersion", ""),
        client_version,
        info.get("OperatingSystem", ""),
        mem_total // 1024 // 1024,
    )


def globals_logger() -> Logging:
    """Return the package-wide default logger."""
    return logger