"""Locating the Docker daemon socket and detecting container environments."""

from __future__ import annotations

import os
import subprocess
from urllib.parse import urlsplit

DEFAULT_DOCKER_SOCKET = "/var/run/docker.sock"
SOCKET_OVERRIDE_ENV = "TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE"


def default_gateway_ip() -> str:
    """Return the default gateway IP reported by ``ip route``.

    Raises ``RuntimeError`` when the command fails or prints nothing.
    """
    try:
        result = subprocess.run(
            ["sh", "-c", "ip route|awk '/default/ { print $3 }'"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError("failed to detect docker host") from exc

    ip = result.stdout.strip()
    if not ip:
        raise RuntimeError("failed to parse default gateway IP")
    return ip


def extract_docker_host(docker_host: str | None = None) -> str:
    """Return the Docker socket path.

    The override environment variable wins; otherwise a ``unix://`` URL in
    ``docker_host`` gives the path, and anything else yields the default socket.
    """
    override = os.environ.get(SOCKET_OVERRIDE_ENV, "")
    if override:
        return override

    if not docker_host:
        return DEFAULT_DOCKER_SOCKET

    try:
        url = urlsplit(docker_host)
    except ValueError:
        return DEFAULT_DOCKER_SOCKET

    if url.scheme == "unix":
        return url.path
    return DEFAULT_DOCKER_SOCKET


def in_a_container(path: str | os.PathLike[str] = "/.dockerenv") -> bool:
    """Return whether the marker file that Docker puts in containers exists."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True