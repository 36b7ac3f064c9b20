"""Post-processing of output read from a container exec session."""

from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

_HEADER_LEN = 8


class _Stream(IntEnum):
    STDIN = 0
    STDOUT = 1
    STDERR = 2
    SYSTEMERR = 3


class StreamError(Exception):
    """Raised when a multiplexed stream is malformed or reports a daemon error."""


@dataclass
class ProcessOptions:
    """Options applied to the reader returned by an exec call."""

    reader: BinaryIO


ProcessOption = Callable[[ProcessOptions], None]


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def demultiplex(stream: BinaryIO) -> tuple[bytes, bytes]:
    """Split a Docker multiplexed stream into its stdout and stderr content.

    Stdin frames count as stdout. A truncated trailing frame is dropped.
    Raises ``StreamError`` for a daemon error frame or an unknown stream type.
    """
    out = bytearray()
    err = bytearray()
    while True:
        header = _read_exactly(stream, _HEADER_LEN)
        if len(header) < _HEADER_LEN:
            break
        kind = header[0]
        size = int.from_bytes(header[4:8], "big")
        payload = _read_exactly(stream, size)
        if len(payload) < size:
            break

        if kind in (_Stream.STDIN, _Stream.STDOUT):
            out += payload
        elif kind == _Stream.STDERR:
            err += payload
        elif kind == _Stream.SYSTEMERR:
            raise StreamError(
                "error from daemon in stream: " + payload.decode("utf-8", "replace")
            )
        else:
            raise StreamError(f"Unrecognized input header: {kind}")
    return bytes(out), bytes(err)


def multiplexed() -> ProcessOption:
    """Return an option that replaces the reader with its demultiplexed stdout."""

    def apply(opts: ProcessOptions) -> None:
        stdout, _ = demultiplex(opts.reader)
        opts.reader = io.BytesIO(stdout)

    return apply