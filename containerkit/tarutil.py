"""Packing files and directories into gzip-compressed tar archives."""

from __future__ import annotations

import io
import os
import stat
import tarfile
from collections.abc import Iterator


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` is a directory.

    Raises ``OSError`` (e.g. ``FileNotFoundError``) when the path cannot be read.
    """
    return stat.S_ISDIR(os.stat(path).st_mode)


def _walk(path: str) -> Iterator[str]:
    """Yield ``path`` and everything below it, depth first, in lexical order."""
    yield path
    if stat.S_ISDIR(os.lstat(path).st_mode):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def _base_name(path: str) -> str:
    trimmed = path.rstrip("/" + os.sep)
    if not trimmed:
        return os.sep if path else "."
    return os.path.basename(trimmed)


def tar_dir(src: str | os.PathLike[str], file_mode: int) -> bytes:
    """Pack a directory into a tar.gz archive and return its bytes.

    Entry names keep the directory's own name as their first component and
    every entry gets ``file_mode`` as its permission bits. Symbolic links are
    skipped.
    """
    src = os.path.abspath(os.fspath(src))
    base_dir = os.path.basename(src)
    index = src.rfind(base_dir)

    print(f">> creating TAR file from directory: {src}")

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for path in _walk(src):
            info_stat = os.lstat(path)
            if stat.S_ISLNK(info_stat.st_mode):
                print(f">> skipping symlink: {path}")
                continue

            name = path[index:].replace(os.sep, "/")
            info = archive.gettarinfo(path, arcname=name)
            info.mode = file_mode

            if info.isreg():
                with open(path, "rb") as data:
                    archive.addfile(info, data)
            else:
                archive.addfile(info)

    return buffer.getvalue()


def tar_file(content: bytes, base_path: str, file_mode: int) -> bytes:
    """Pack ``content`` as a single file named after ``base_path`` into a tar.gz archive."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        info = tarfile.TarInfo(name=_base_name(base_path))
        info.mode = file_mode
        info.size = len(content)
        archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()