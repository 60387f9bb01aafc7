"""FLAC bit reader over a seekable file on disk."""

from __future__ import annotations

import os

from flaccodec.lowlevel import FlacLowLevelInput


class SeekableFileFlacInput(FlacLowLevelInput):
    """Reads FLAC data from a file opened in binary mode."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file = open(path, "rb")
        try:
            self._length = self._file.seek(0, os.SEEK_END)
            self._file.seek(0)
        except OSError:
            self._file.close()
            raise
        super().__init__()

    def length(self) -> int:
        return self._length

    def seek_to(self, pos: int) -> None:
        if pos < 0:
            raise ValueError("Position must not be negative")
        if not self._file.closed:
            self._file.seek(pos)
        self._position_changed(pos)

    def _read_underlying(self, size: int) -> bytes:
        if self._file.closed:
            return b""
        return self._file.read(size)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            super().close()