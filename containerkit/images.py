"""Image names: registries and base images referenced by Dockerfiles."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from urllib.parse import urlsplit

INDEX_DOCKER_IO = "https://index.docker.io/v1/"
MAX_URL_RUNE_COUNT = 2083
MIN_URL_RUNE_COUNT = 3

URL_SCHEMA = r"((ftp|tcp|udp|wss?|https?):\/\/)"
URL_USERNAME = r"(\S+(:\S*)?@)"
URL_IP = (
    r"([1-9]\d?|1\d\d|2[01]\d|22[0-3]|24\d|25[0-5])"
    r"(\.(\d{1,2}|1\d\d|2[0-4]\d|25[0-5])){2}"
    r"(?:\.([0-9]\d?|1\d\d|2[0-4]\d|25[0-5]))"
)
IP = (
    r"(([0-9a-fA-F]{1,4}:){7,7}[0-9a-fA-F]{1,4}|([0-9a-fA-F]{1,4}:){1,7}:|"
    r"([0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}|([0-9a-fA-F]{1,4}:){1,5}(:[0-9a-fA-F]{1,4}){1,2}|"
    r"([0-9a-fA-F]{1,4}:){1,4}(:[0-9a-fA-F]{1,4}){1,3}|([0-9a-fA-F]{1,4}:){1,3}(:[0-9a-fA-F]{1,4}){1,4}|"
    r"([0-9a-fA-F]{1,4}:){1,2}(:[0-9a-fA-F]{1,4}){1,5}|[0-9a-fA-F]{1,4}:((:[0-9a-fA-F]{1,4}){1,6})|"
    r":((:[0-9a-fA-F]{1,4}){1,7}|:)|fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}|"
    r"::(ffff(:0{1,4}){0,1}:){0,1}((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])|"
    r"([0-9a-fA-F]{1,4}:){1,4}:((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9]))"
)
URL_SUBDOMAIN = r"((www\.)|([a-zA-Z0-9]+([\-_\.]?[a-zA-Z0-9])*[a-zA-Z0-9]\.[a-zA-Z0-9]+))"
URL_PATH = r"((\/|\?|#)[^\s]*)"
URL_PORT = r"(:(\d{1,5}))"
URL = (
    r"^" + URL_SCHEMA + r"?" + URL_USERNAME + r"?"
    + r"((" + URL_IP + r"|(\[" + IP + r"\])|"
    + r"(([a-zA-Z0-9]([a-zA-Z0-9\-_]+)?[a-zA-Z0-9]([\-\.][a-zA-Z0-9]+)*)|(" + URL_SUBDOMAIN + r"?))?"
    + r"(([a-zA-Z\u00a1-\uffff0-9]+-?-?)*[a-zA-Z\u00a1-\uffff0-9]+)"
    + r"(?:\.([a-zA-Z\u00a1-\uffff]{1,}))?))\.?"
    + URL_PORT + r"?" + URL_PATH + r"?$"
)

_RX_URL = re.compile(URL, re.ASCII)
_RX_IMAGE = re.compile(
    r"^(?:(?P<registry>(https?://)?[^/]+)(?::(?P<port>\d+))?/)?"
    r"(?:(?P<repository>[^/]+)/)?(?P<image>[^:]+)(?::(?P<tag>.+))?$",
    re.ASCII,
)


def extract_images_from_dockerfile(
    dockerfile: str | os.PathLike[str],
    build_args: Mapping[str, str | None] | None = None,
) -> list[str]:
    """Return the images named by the ``FROM`` lines of a Dockerfile.

    ``${NAME}`` references are replaced by build arguments that have a value.
    Raises ``OSError`` when the file cannot be read.
    """
    with open(dockerfile, encoding="utf-8") as handle:
        lines = handle.read().splitlines()

    images = []
    for raw_line in lines:
        line = raw_line.strip()
        if not line.upper().startswith("FROM"):
            continue

        line = line.removeprefix("FROM")
        image = line.strip().split(" ")[0]

        for name, value in (build_args or {}).items():
            if value is not None:
                image = image.replace("${" + name + "}", value)
        images.append(image)

    return images


def extract_registry(image: str, fallback: str) -> str:
    """Return the registry part of an image name.

    Returns ``""`` when the name cannot be parsed, and ``fallback`` when the
    leading component is not a URL or address.
    """
    match = _RX_IMAGE.fullmatch(image)
    if match is None:
        return ""

    registry = match.group("registry") or ""
    if is_url(registry):
        return registry
    return fallback


def is_url(value: str) -> bool:
    """Return whether ``value`` looks like a URL, host name or address."""
    if (
        not value
        or len(value) >= MAX_URL_RUNE_COUNT
        or len(value.encode("utf-8")) <= MIN_URL_RUNE_COUNT
        or value.startswith(".")
    ):
        return False

    candidate = value
    if ":" in value and "://" not in value:
        # a bare host:port parses as a URL once a scheme is added
        candidate = "http://" + value

    try:
        parts = urlsplit(candidate)
        parts.port
    except ValueError:
        return False

    host = parts.netloc.rpartition("@")[2]
    if host.startswith("."):
        return False
    if not host and parts.path and "." not in parts.path:
        return False

    return _RX_URL.fullmatch(value) is not None