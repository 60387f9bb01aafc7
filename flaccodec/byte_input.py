"""FLAC bit reader over an in-memory byte string."""

from __future__ import annotations

from flaccodec.lowlevel import FlacLowLevelInput


class ByteFlacInput(FlacLowLevelInput):
    """Reads FLAC data held in memory."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0
        super().__init__()

    def length(self) -> int:
        return len(self._data)

    def seek_to(self, pos: int) -> None:
        if pos < 0:
            raise ValueError("Position must not be negative")
        self._offset = pos
        self._position_changed(pos)

    def _read_underlying(self, size: int) -> bytes:
        chunk = self._data[self._offset:self._offset + size]
        self._offset += len(chunk)
        return chunk

    def close(self) -> None:
        self._data = b""
        super().close()