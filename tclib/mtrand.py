"""MT19937 Mersenne Twister generator."""

from __future__ import annotations

from collections.abc import Iterator

from tclib.rand import system_seed

_N = 624
_M = 397
_F = 1812433253
_U = 11
_S = 7
_B = 0x9D2C5680
_T = 15
_C = 0xEFC60000
_L = 18
_R = 31
_HI = 1 << _R
_LO = (1 << _R) - 1
_A = 0x9908B0DF
_MASK = 0xFFFFFFFF


class MersenneTwister:
    """MT19937 producing unsigned 32-bit integers.

    A seed of 0 asks for a seed drawn from the system entropy source.
    """

    def __init__(self, seed: int = 0) -> None:
        seed &= _MASK
        while seed == 0:
            seed = system_seed()
        state = [seed]
        for i in range(1, _N):
            prev = state[-1]
            state.append((_F * (prev ^ (prev >> 30)) + i) & _MASK)
        self._mt = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._mt
        for i in range(_N):
            x = (mt[i] & _HI) + (mt[(i + 1) % _N] & _LO)
            value = mt[(i + _M) % _N] ^ (x >> 1)
            if x & 1:
                value ^= _A
            mt[i] = value
        self._index = 0

    def next(self) -> int:
        """Return the next tempered 32-bit output."""
        if self._index >= _N:
            self._twist()
        y = self._mt[self._index]
        y ^= y >> _U
        y ^= (y << _S) & _B
        y ^= (y << _T) & _C
        y ^= y >> _L
        self._index += 1
        return y & _MASK

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()