"""Small fast pseudo-random generator and entropy-based seeding."""

from __future__ import annotations

import os
import sys

_MASK = 0xFFFFFFFF
_A_INITIAL = 0xF1EA5EED
_B_INITIAL = 0xB4C0FFEE
_C_INITIAL = 0xB4C0FFEE
_D_INITIAL = 0xB4C0FFEE
_WARMUP_ROUNDS = 64
_ENTROPY_SOURCES = ("/dev/urandom", "/dev/random")
_EOF_BYTE = b"\xfe"


def _rotate(n: int, m: int) -> int:
    return ((n << m) | (n >> (32 - m))) & _MASK


def _to_int32(value: int) -> int:
    return value - (1 << 32) if value & 0x80000000 else value


class JsfRandom:
    """A four-word chaotic generator producing signed 32-bit integers."""

    def __init__(self, seed: int | None = None) -> None:
        self._state = [_A_INITIAL, _B_INITIAL, _C_INITIAL, _D_INITIAL]
        if seed is not None:
            self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from ``seed`` and discard the warm-up outputs."""
        value = seed & _MASK
        self._state = [_A_INITIAL, value, value, value]
        for _ in range(_WARMUP_ROUNDS):
            self.rand()

    def rand(self) -> int:
        """Advance the generator and return a signed 32-bit value."""
        a, b, c, d = self._state
        tmp = (a - _rotate(b, 27)) & _MASK
        a = b ^ _rotate(c, 17)
        b = (c + d) & _MASK
        c = (d + tmp) & _MASK
        d = (a + tmp) & _MASK
        self._state = [a, b, c, d]
        return _to_int32(tmp)


_default = JsfRandom()


def srand(seed: int) -> None:
    """Seed the shared generator."""
    _default.seed(seed)


def rand() -> int:
    """Next value of the shared generator."""
    return _default.rand()


def system_seed() -> int:
    """An unsigned 32-bit seed from the system entropy device.

    Falls back to the shared generator when no entropy device can be opened.
    """
    for path in _ENTROPY_SOURCES:
        try:
            with open(path, "rb") as source:
                data = source.read(4)
        except OSError:
            continue
        return int.from_bytes(data.ljust(4, _EOF_BYTE), sys.byteorder)
    srand((os.getpid() << 1) & 0x1)
    return rand() & _MASK