"""Bit-level reader for FLAC streams with running CRC-8 and CRC-16."""

from __future__ import annotations

import abc
from typing import Optional

_BUFFER_SIZE = 4096
_MASK64 = (1 << 64) - 1


class FlacFormatError(ValueError):
    """Raised when the stream holds invalid data or is read at a wrong boundary."""


def _make_crc_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    crc8 = []
    crc16 = []
    for i in range(256):
        temp8 = i
        temp16 = i << 8
        for _ in range(8):
            temp8 = (temp8 << 1) ^ ((temp8 >> 7) * 0x107)
            temp16 = (temp16 << 1) ^ ((temp16 >> 15) * 0x18005)
        crc8.append(temp8)
        crc16.append(temp16)
    return tuple(crc8), tuple(crc16)


_CRC8_TABLE, _CRC16_TABLE = _make_crc_tables()


class FlacLowLevelInput(abc.ABC):
    """Buffered big-endian bit reader over an underlying byte source.

    Subclasses supply the bytes through ``_read_underlying`` and implement
    ``length`` and ``seek_to``; seeking must call ``_position_changed``.
    """

    def __init__(self) -> None:
        self._closed = False
        self._position_changed(0)

    @abc.abstractmethod
    def length(self) -> Optional[int]:
        """Total length of the stream in bytes, or None if unknown."""

    @abc.abstractmethod
    def seek_to(self, pos: int) -> None:
        """Move to byte offset ``pos`` of the stream."""

    @abc.abstractmethod
    def _read_underlying(self, size: int) -> bytes:
        """Return up to ``size`` bytes; an empty result means end of stream."""

    def _position_changed(self, pos: int) -> None:
        self._buffer_start = pos
        self._buffer = b""
        self._buffer_index = 0
        self._bit_buffer = 0
        self._bit_len = 0
        self._crc_start = 0
        self._crc8 = 0
        self._crc16 = 0

    def position(self) -> int:
        """Byte offset of the next byte not yet fully consumed."""
        return self._buffer_start + self._buffer_index - (self._bit_len + 7) // 8

    def bit_position(self) -> int:
        """Number of bits already consumed within the current byte (0-7)."""
        return -self._bit_len & 7

    def _check_byte_aligned(self) -> None:
        if self._bit_len % 8 != 0:
            raise FlacFormatError("Not at a byte boundary")

    def _next_byte(self) -> Optional[int]:
        if self._buffer_index >= len(self._buffer):
            if self._closed:
                return None
            self._update_crcs(0)
            self._buffer_start += len(self._buffer)
            self._buffer = bytes(self._read_underlying(_BUFFER_SIZE))
            self._buffer_index = 0
            self._crc_start = 0
            if not self._buffer:
                return None
        value = self._buffer[self._buffer_index]
        self._buffer_index += 1
        return value

    def _push_byte(self) -> None:
        value = self._next_byte()
        if value is None:
            raise EOFError("Reached end of stream")
        self._bit_buffer = ((self._bit_buffer << 8) | value) & _MASK64
        self._bit_len += 8

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned big-endian integer of ``num_bits`` bits (0-32)."""
        if not 0 <= num_bits <= 32:
            raise ValueError("Number of bits must be between 0 and 32")
        while self._bit_len < num_bits:
            self._push_byte()
        self._bit_len -= num_bits
        return (self._bit_buffer >> self._bit_len) & ((1 << num_bits) - 1)

    def read_signed_int(self, num_bits: int) -> int:
        """Read a two's-complement integer of ``num_bits`` bits (0-32)."""
        value = self.read_uint(num_bits)
        if num_bits and value >> (num_bits - 1):
            value -= 1 << num_bits
        return value

    def _read_unary(self, limit: int) -> int:
        zeros = 0
        while True:
            if self._bit_len == 0:
                self._push_byte()
            pending = self._bit_buffer & ((1 << self._bit_len) - 1)
            if pending == 0:
                zeros += self._bit_len
                self._bit_len = 0
            else:
                run = self._bit_len - pending.bit_length()
                zeros += run
                self._bit_len -= run + 1
            if zeros > limit:
                raise FlacFormatError("Residual value is too large")
            if pending:
                return zeros

    def read_rice_signed_ints(self, param: int, count: int) -> list[int]:
        """Read ``count`` Rice-coded signed residuals with parameter ``param``."""
        if not 0 <= param <= 31:
            raise ValueError("Rice parameter must be between 0 and 31")
        if count < 0:
            raise ValueError("Count must not be negative")
        limit = 1 << (53 - param)
        result = []
        for _ in range(count):
            value = (self._read_unary(limit) << param) | self.read_uint(param)
            result.append((value >> 1) ^ -(value & 1))
        return result

    def read_byte(self) -> Optional[int]:
        """Read one whole byte, or return None at the end of the stream."""
        self._check_byte_aligned()
        if self._bit_len >= 8:
            return self.read_uint(8)
        return self._next_byte()

    def read_fully(self, count: int) -> bytes:
        """Read exactly ``count`` bytes; raise EOFError if they are not there."""
        if count < 0:
            raise ValueError("Count must not be negative")
        self._check_byte_aligned()
        return bytes(self.read_uint(8) for _ in range(count))

    def reset_crcs(self) -> None:
        """Start both checksums afresh at the current byte."""
        self._check_byte_aligned()
        self._crc_start = self._buffer_index - self._bit_len // 8
        self._crc8 = 0
        self._crc16 = 0

    def _update_crcs(self, unused_trailing_bytes: int) -> None:
        end = self._buffer_index - unused_trailing_bytes
        crc8 = self._crc8
        crc16 = self._crc16
        for value in self._buffer[self._crc_start:end]:
            crc8 = _CRC8_TABLE[crc8 ^ value]
            crc16 = _CRC16_TABLE[(crc16 >> 8) ^ value] ^ ((crc16 & 0xFF) << 8)
        self._crc8 = crc8
        self._crc16 = crc16
        self._crc_start = end

    def crc8(self) -> int:
        """CRC-8 of the bytes consumed since the last reset."""
        self._check_byte_aligned()
        self._update_crcs(self._bit_len // 8)
        return self._crc8

    def crc16(self) -> int:
        """CRC-16 of the bytes consumed since the last reset."""
        self._check_byte_aligned()
        self._update_crcs(self._bit_len // 8)
        return self._crc16

    def close(self) -> None:
        """Drop buffered state; later reads behave as end of stream."""
        self._buffer = b""
        self._buffer_index = 0
        self._bit_buffer = 0
        self._bit_len = 0
        self._crc8 = 0
        self._crc16 = 0
        self._crc_start = 0
        self._closed = True

    def __enter__(self) -> "FlacLowLevelInput":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()