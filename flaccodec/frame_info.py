"""Parsing of FLAC frame headers and the code tables they use."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flaccodec.lowlevel import FlacFormatError, FlacLowLevelInput

_BLOCK_SIZE_BY_CODE = {
    1: 192,
    2: 576,
    3: 1152,
    4: 2304,
    5: 4608,
    8: 256,
    9: 512,
    10: 1024,
    11: 2048,
    12: 4096,
    13: 8192,
    14: 16384,
    15: 32768,
}

_BIT_DEPTH_BY_CODE = {
    1: 8,
    2: 12,
    4: 16,
    5: 20,
    6: 24,
}

_SAMPLE_RATE_BY_CODE = {
    1: 88200,
    2: 176400,
    3: 192000,
    4: 8000,
    5: 16000,
    6: 22050,
    7: 24000,
    8: 32000,
    9: 44100,
    10: 48000,
    11: 96000,
}

_BLOCK_SIZE_CODES = {size: code for code, size in _BLOCK_SIZE_BY_CODE.items()}
_BIT_DEPTH_CODES = {depth: code for code, depth in _BIT_DEPTH_BY_CODE.items()}
_SAMPLE_RATE_CODES = {rate: code for code, rate in _SAMPLE_RATE_BY_CODE.items()}

_SYNC_CODE = 0x3FFE


@dataclass
class FrameInfo:
    """Fields decoded from one FLAC frame header."""

    frame_index: Optional[int] = None
    sample_offset: Optional[int] = None
    num_channels: Optional[int] = None
    channel_assignment: Optional[int] = None
    block_size: Optional[int] = None
    sample_rate: Optional[int] = None
    bit_depth: Optional[int] = None
    frame_size: Optional[int] = None

    @classmethod
    def read_frame(cls, source: FlacLowLevelInput) -> Optional["FrameInfo"]:
        """Read a frame header, or return None at the end of the stream."""
        source.reset_crcs()
        first = source.read_byte()
        if first is None:
            return None

        sync = (first << 6) | source.read_uint(6)
        if sync != _SYNC_CODE:
            raise FlacFormatError("Sync code expected")
        if source.read_uint(1) != 0:
            raise FlacFormatError("Reserved bit")

        blocking_strategy = source.read_uint(1)
        block_code = source.read_uint(4)
        rate_code = source.read_uint(4)
        assignment = source.read_uint(4)

        if assignment < 8:
            num_channels = assignment + 1
        elif assignment <= 10:
            num_channels = 2
        else:
            raise FlacFormatError("Reserved channel assignment")

        bit_depth = decode_bit_depth(source.read_uint(3))
        if source.read_uint(1) != 0:
            raise FlacFormatError("Reserved bit")

        position = read_utf8_integer(source)
        frame_index: Optional[int] = None
        sample_offset: Optional[int] = None
        if blocking_strategy == 0:
            if position >> 31:
                raise FlacFormatError("Frame index too large")
            frame_index = position
        else:
            sample_offset = position

        block_size = decode_block_size(block_code, source)
        sample_rate = decode_sample_rate(rate_code, source)

        computed = source.crc8()
        if source.read_uint(8) != computed:
            raise FlacFormatError("CRC-8 mismatch")

        return cls(
            frame_index=frame_index,
            sample_offset=sample_offset,
            num_channels=num_channels,
            channel_assignment=assignment,
            block_size=block_size,
            sample_rate=sample_rate,
            bit_depth=bit_depth,
        )


def read_utf8_integer(source: FlacLowLevelInput) -> int:
    """Read an integer coded in the extended UTF-8 form of frame headers."""
    head = source.read_uint(8)
    leading_ones = 8 - (~head & 0xFF).bit_length()
    if leading_ones == 0:
        return head
    if leading_ones in (1, 8):
        raise FlacFormatError("Invalid UTF-8 coded number")
    result = head & (0x7F >> leading_ones)
    for _ in range(leading_ones - 1):
        continuation = source.read_uint(8)
        if continuation & 0xC0 != 0x80:
            raise FlacFormatError("Invalid UTF-8 coded number")
        result = (result << 6) | (continuation & 0x3F)
    return result


def decode_block_size(code: int, source: FlacLowLevelInput) -> int:
    """Turn a 4-bit block size code into a size, reading extra bits if needed."""
    if code >> 4:
        raise ValueError("Block size code must fit in 4 bits")
    if code == 0:
        raise FlacFormatError("Reserved block size")
    if code == 6:
        return source.read_uint(8) + 1
    if code == 7:
        return source.read_uint(16) + 1
    return _BLOCK_SIZE_BY_CODE[code]


def decode_sample_rate(code: int, source: FlacLowLevelInput) -> Optional[int]:
    """Turn a 4-bit sample rate code into a rate in Hz; None means unspecified."""
    if code >> 4:
        raise ValueError("Sample rate code must fit in 4 bits")
    if code == 0:
        return None
    if code == 12:
        return source.read_uint(8)
    if code == 13:
        return source.read_uint(16)
    if code == 14:
        return source.read_uint(16) * 10
    if code == 15:
        raise FlacFormatError("Invalid sample rate")
    return _SAMPLE_RATE_BY_CODE[code]


def decode_bit_depth(code: int) -> Optional[int]:
    """Turn a 3-bit sample size code into bits per sample; None means unspecified."""
    if code >> 3:
        raise ValueError("Bit depth code must fit in 3 bits")
    if code == 0:
        return None
    try:
        return _BIT_DEPTH_BY_CODE[code]
    except KeyError:
        raise FlacFormatError("Reserved bit depth") from None


def block_size_code(block_size: int) -> int:
    """The 4-bit code that encodes ``block_size`` in a frame header."""
    code = _BLOCK_SIZE_CODES.get(block_size)
    if code is not None:
        return code
    if 1 <= block_size <= 256:
        return 6
    if 1 <= block_size <= 65536:
        return 7
    raise ValueError("Block size is out of range")


def sample_rate_code(sample_rate: int) -> int:
    """The 4-bit code that encodes ``sample_rate``; 0 when it cannot be coded."""
    if sample_rate <= 0:
        raise ValueError("Sample rate must be positive")
    code = _SAMPLE_RATE_CODES.get(sample_rate)
    if code is not None:
        return code
    if sample_rate < 256:
        return 12
    if sample_rate < 65536:
        return 13
    if sample_rate < 655360 and sample_rate % 10 == 0:
        return 14
    return 0


def bit_depth_code(bit_depth: int) -> int:
    """The 3-bit code that encodes ``bit_depth``; 0 when it has no code."""
    if not 1 <= bit_depth <= 32:
        raise ValueError("Bit depth must be between 1 and 32")
    return _BIT_DEPTH_CODES.get(bit_depth, 0)