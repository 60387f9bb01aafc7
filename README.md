# flaccodec

A small library for reading FLAC streams at the bit level and decoding
FLAC frame headers.

## What it offers

- `flaccodec.lowlevel.FlacLowLevelInput` is the buffered, big-endian bit
  reader that all inputs share. It provides:
  - `read_uint(num_bits)` and `read_signed_int(num_bits)` for integers of
    0 to 32 bits. Any other width raises `ValueError`.
  - `read_rice_signed_ints(param, count)`, which returns a list of
    Rice-coded signed residuals. `param` is 0 to 31.
  - `read_byte()`, which returns one byte or `None` at the end of the stream.
  - `read_fully(count)`, which returns exactly `count` bytes.
  - `reset_crcs()`, `crc8()` and `crc16()` for the running checksums that
    FLAC frames are checked with.
  - `position()` and `bit_position()` for where the reader stands.
  - `length()` and `seek_to(pos)`.
  - `close()`. Inputs are also context managers and close themselves on exit.

  Running out of data in the middle of a read raises `EOFError`. Reading
  bytes or checksums off a byte boundary raises `FlacFormatError`, a
  subclass of `ValueError`. A Rice residual that is too large raises
  `FlacFormatError` as well. After `close()`, reads behave as if the stream
  had ended.
- `flaccodec.byte_input.ByteFlacInput` reads from bytes held in memory.
- `flaccodec.file_input.SeekableFileFlacInput` reads from a file on disk,
  opened in binary mode.
- `flaccodec.frame_info.FrameInfo` is a dataclass holding the fields of one
  frame header:
  - `frame_index` or `sample_offset`
  - `num_channels`
  - `channel_assignment`
  - `block_size`
  - `sample_rate`
  - `bit_depth`
  - `frame_size`, which is always left as `None`

  `FrameInfo.read_frame(source)` reads a header and checks its CRC-8.

Helpers in `flaccodec.frame_info` map between header codes and values:

- `decode_block_size(code, source)`
- `decode_sample_rate(code, source)`, which returns `None` for "unspecified"
- `decode_bit_depth(code)`, which returns `None` for "unspecified"
- `block_size_code(block_size)`
- `sample_rate_code(sample_rate)`, which returns 0 when the rate cannot be coded
- `bit_depth_code(bit_depth)`, which returns 0 when the depth has no code
- `read_utf8_integer(source)`, for the UTF-8-style coded frame or sample numbers

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Using it

```python
from flaccodec.byte_input import ByteFlacInput

with ByteFlacInput(b"fLaC\x00\x00\x00\x22") as source:
    marker = source.read_uint(32)        # 0x664C6143, "fLaC"
    last_block = source.read_uint(1)     # 0
    block_type = source.read_uint(7)     # 0
    block_length = source.read_uint(24)  # 34
```

To read a frame header from a file, first position the input at the start
of a frame:

```python
from flaccodec.file_input import SeekableFileFlacInput
from flaccodec.frame_info import FrameInfo

with SeekableFileFlacInput("song.flac") as source:
    source.seek_to(frame_offset)
    header = FrameInfo.read_frame(source)
```

`read_frame` returns `None` when the input is already at its end. It raises
`FlacFormatError` for any of these:

- a bad sync code
- a reserved bit, channel assignment, block size or bit depth
- an invalid sample rate code
- an invalid coded number
- a CRC-8 mismatch

## Command line

```
flaccodec
```

The command takes no options besides `--help`. It prints a greeting and
exits with status 0.

## What it does not do

This package reads bits and frame headers only. It does not:

- parse metadata blocks
- decode subframes into audio samples
- write or encode FLAC
- convert to or from other audio formats

The `flaccodec` command does not decode files either.