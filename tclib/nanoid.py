"""URL-friendly random identifiers."""

from __future__ import annotations

from tclib.mtrand import MersenneTwister
from tclib.rand import system_seed

LENGTH = 21
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"


def nanoid(seed: int | None = None) -> str:
    """A 21-character identifier drawn from a URL-safe alphabet.

    Without a seed (or with 0) the generator is seeded from system entropy.
    """
    if seed is None:
        seed = system_seed()
    generator = MersenneTwister(seed)
    return "".join(ALPHABET[generator.next() & 0x3F] for _ in range(LENGTH))