"""Small utility library: strings, random generators, byte streams, run-length compression, patterns, IDs and WAV writing."""

__version__ = "0.1.0"

__all__ = [
    "mtrand",
    "nanoid",
    "pattern",
    "rand",
    "stack",
    "stdio",
    "strings",
    "sysutil",
    "wav",
]