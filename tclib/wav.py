"""Writer for mono 16-bit PCM WAVE files."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable
from types import TracebackType

from tclib.sysutil import SEEK_END, SEEK_SET, open_writer, seek, write

RIFF_MAGIC = b"RIFF"
WAVE_MAGIC = b"WAVE"
FMT_MAGIC = b"fmt "
DATA_MAGIC = b"data"
WAVE_FORMAT_PCM = 1
NCHANNELS = 1
SAMPLE_RATE = 44100
BITS_PER_SAMPLE = 16

_RIFF_CHUNK = struct.Struct("<4si4s")
_FMT_CHUNK = struct.Struct("<4sihhiihh4sI")
_HEADER_SIZE = _RIFF_CHUNK.size + _FMT_CHUNK.size
_SIZE_FIELD = struct.Struct("<i")
_RIFF_SIZE_POS = 4
_DATA_SIZE_POS = _HEADER_SIZE - _SIZE_FIELD.size


class WavWriter:
    """Streams 16-bit samples to a WAVE file and fixes the sizes on close."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._stream = open_writer(path)
        try:
            write(self._stream, _RIFF_CHUNK.pack(RIFF_MAGIC, 0, WAVE_MAGIC))
            block_align = BITS_PER_SAMPLE // 8
            write(
                self._stream,
                _FMT_CHUNK.pack(
                    FMT_MAGIC,
                    16,
                    WAVE_FORMAT_PCM,
                    NCHANNELS,
                    SAMPLE_RATE,
                    SAMPLE_RATE * block_align,
                    block_align,
                    BITS_PER_SAMPLE,
                    DATA_MAGIC,
                    0,
                ),
            )
        except BaseException:
            self._stream.close()
            raise

    def write(self, samples: Iterable[int]) -> None:
        """Append signed 16-bit samples."""
        values = list(samples)
        try:
            data = struct.pack(f"<{len(values)}h", *values)
        except struct.error as exc:
            raise ValueError(f"samples must be 16-bit signed integers: {exc}") from None
        if self._stream.closed:
            raise ValueError("write to closed WAVE file")
        write(self._stream, data)

    def close(self) -> None:
        """Fill in the chunk sizes and close the file."""
        if self._stream.closed:
            return
        try:
            file_len = seek(self._stream, 0, SEEK_END)
            seek(self._stream, _DATA_SIZE_POS, SEEK_SET)
            write(self._stream, _SIZE_FIELD.pack(file_len - _HEADER_SIZE))
            seek(self._stream, _RIFF_SIZE_POS, SEEK_SET)
            write(self._stream, _SIZE_FIELD.pack(file_len - 8))
        finally:
            self._stream.close()

    def __enter__(self) -> WavWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()