"""Bit-level FLAC stream reading and frame header decoding."""

__version__ = "0.0.1"

__all__ = ["byte_input", "cli", "file_input", "frame_info", "lowlevel"]