"""File, terminal and process primitives that raise ``OSError`` on failure."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from typing import BinaryIO, Union

SEEK_SET = os.SEEK_SET
SEEK_CUR = os.SEEK_CUR
SEEK_END = os.SEEK_END

FileLike = Union[int, BinaryIO]


def _fileno(fd: FileLike) -> int:
    return fd if isinstance(fd, int) else fd.fileno()


def _as_byte(ch: int | str | bytes) -> bytes:
    """Coerce ``ch`` to exactly one byte; integers keep their low eight bits."""
    if isinstance(ch, int):
        return bytes((ch & 0xFF,))
    data = ch.encode("latin-1") if isinstance(ch, str) else bytes(ch)
    if len(data) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return data


def getc(stream: BinaryIO) -> int | None:
    """Read one byte from ``stream``; None at end of file."""
    data = stream.read(1)
    if not data:
        return None
    return data[0]


def putc(stream: BinaryIO, ch: int | str | bytes) -> None:
    """Write a single character to ``stream``."""
    stream.write(_as_byte(ch))


def write(stream: BinaryIO, data: bytes | bytearray | memoryview) -> None:
    """Write all of ``data`` to ``stream``."""
    view = memoryview(bytes(data))
    while view:
        written = stream.write(view)
        if written is None:
            raise BlockingIOError("stream is not ready for writing")
        view = view[written:]


def open_reader(path: str | os.PathLike[str]) -> BinaryIO:
    """Open ``path`` for binary reading."""
    return open(path, "rb")


def open_writer(path: str | os.PathLike[str]) -> BinaryIO:
    """Create or truncate ``path`` and open it for binary writing."""
    return open(path, "wb")


def ttyname(fd: FileLike) -> str | None:
    """Name of the terminal behind ``fd``, or None if it is not a terminal."""
    try:
        return os.ttyname(_fileno(fd))
    except OSError:
        return None


def isatty(fd: FileLike) -> bool:
    """True if ``fd`` refers to a terminal device."""
    return ttyname(fd) is not None


def is_directory(fd: FileLike) -> bool:
    """True if ``fd`` refers to a directory."""
    return stat.S_ISDIR(os.fstat(_fileno(fd)).st_mode)


def is_file(fd: FileLike) -> bool:
    """True if ``fd`` refers to a regular file."""
    return stat.S_ISREG(os.fstat(_fileno(fd)).st_mode)


def seek(stream: FileLike, pos: int, whence: int = SEEK_SET) -> int:
    """Move the position of ``stream`` and return the new offset."""
    if isinstance(stream, int):
        return os.lseek(stream, pos, whence)
    return stream.seek(pos, whence)


def execvp(cmd: str, args: Iterable[str]) -> None:
    """Replace the current process with ``cmd``, searched for on PATH.

    Returns only by raising ``OSError`` when the program cannot be run.
    """
    os.execvp(cmd, list(args))