"""Line and byte copying, run-length compression and formatted output."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from itertools import groupby
from typing import BinaryIO

from tclib.sysutil import getc, putc, write

NEWLINE = ord("\n")
TILDE = ord("~")
_MAX_REPEAT = 26
_THRESHOLD = 4


def _as_bytes(s: str | bytes) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def getln(stream: BinaryIO) -> bytes | None:
    """Read one line without its newline; None at end of file with nothing read."""
    line = bytearray()
    while (ch := getc(stream)) is not None:
        if ch == NEWLINE:
            return bytes(line)
        line.append(ch)
    return bytes(line) if line else None


def puterr(msg: str) -> None:
    """Write ``msg`` to standard error."""
    sys.stderr.write(msg)
    sys.stderr.flush()


def puterrln(msg: str) -> None:
    """Write ``msg`` and a newline to standard error."""
    puterr(msg + "\n")


def puts(stream: BinaryIO, s: str | bytes) -> None:
    """Write ``s`` to ``stream``."""
    write(stream, _as_bytes(s))


def putln(stream: BinaryIO, s: str | bytes) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    puts(stream, s)
    putc(stream, NEWLINE)


def copy_byte(src: BinaryIO, dst: BinaryIO) -> bool:
    """Copy one byte; False if ``src`` was already at end of file."""
    ch = getc(src)
    if ch is None:
        return False
    putc(dst, ch)
    return True


def copy_bytes(src: BinaryIO, dst: BinaryIO, n: int) -> bool:
    """Copy up to ``n`` bytes; False if end of file came first."""
    return all(copy_byte(src, dst) for _ in range(n))


def copy_line(src: BinaryIO, dst: BinaryIO) -> bool:
    """Copy one line including its newline; False if end of file ended it."""
    while (ch := getc(src)) is not None:
        putc(dst, ch)
        if ch == NEWLINE:
            return True
    return False


def copy_lines(src: BinaryIO, dst: BinaryIO, n: int) -> bool:
    """Copy ``n`` lines, or every line when ``n`` is negative.

    Returns False if end of file was reached before the lines ran out.
    """
    copied = 0
    while n < 0 or copied < n:
        if not copy_line(src, dst):
            return False
        copied += 1
    return True


def _iter_bytes(stream: BinaryIO) -> Iterator[int]:
    while (ch := getc(stream)) is not None:
        yield ch


def _encode_run(ch: int, n: int) -> bytes:
    out = bytearray()
    while n >= _THRESHOLD or (ch == TILDE and n > 0):
        out += bytes((TILDE, ord("A") + min(n, _MAX_REPEAT) - 1, ch))
        n -= _MAX_REPEAT
    if n > 0:
        out += bytes((ch,)) * n
    return bytes(out)


def compress(src: BinaryIO, dst: BinaryIO) -> None:
    """Run-length encode ``src`` into ``dst`` using ``~`` escapes."""
    for ch, run in groupby(_iter_bytes(src)):
        count = sum(1 for _ in run)
        if count > 1 or ch == TILDE:
            write(dst, _encode_run(ch, count))
        else:
            putc(dst, ch)


def decompress(src: BinaryIO, dst: BinaryIO) -> None:
    """Expand the ``~`` run-length escapes written by :func:`compress`."""
    while (ch := getc(src)) is not None:
        if ch != TILDE:
            putc(dst, ch)
            continue
        count_ch = getc(src)
        if count_ch is not None and ord("A") <= count_ch <= ord("Z"):
            repeated = getc(src)
            if repeated is not None:
                write(dst, bytes((repeated,)) * (count_ch - ord("A") + 1))
            else:
                write(dst, bytes((TILDE, count_ch)))
        else:
            putc(dst, TILDE)
            if count_ch is not None:
                putc(dst, count_ch)


def putdec(stream: BinaryIO, n: int, width: int) -> None:
    """Write ``n`` in decimal, right-aligned in at least ``width`` columns."""
    puts(stream, str(n).rjust(width))