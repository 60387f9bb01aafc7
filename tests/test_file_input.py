import pytest

from flaccodec.byte_input import ByteFlacInput
from flaccodec.file_input import SeekableFileFlacInput


@pytest.fixture
def sample(tmp_path):
    data = bytes(i % 253 for i in range(9000))
    path = tmp_path / "sample.flac"
    path.write_bytes(data)
    return path, data


def test_length_matches_file_size(sample):
    path, data = sample
    with SeekableFileFlacInput(path) as inp:
        assert inp.length() == len(data)


def test_reads_whole_file(sample):
    path, data = sample
    with SeekableFileFlacInput(str(path)) as inp:
        assert inp.read_fully(len(data)) == data
        assert inp.read_byte() is None


def test_seek_to_absolute_position(sample):
    path, data = sample
    with SeekableFileFlacInput(path) as inp:
        inp.read_fully(100)
        inp.seek_to(5000)
        assert inp.position() == 5000
        assert inp.read_fully(10) == data[5000:5010]
        inp.seek_to(3)
        assert inp.read_byte() == data[3]


def test_seek_negative_raises(sample):
    path, _ = sample
    with SeekableFileFlacInput(path) as inp:
        with pytest.raises(ValueError):
            inp.seek_to(-5)


def test_crc_matches_in_memory_reader(sample):
    path, data = sample
    mem = ByteFlacInput(data)
    mem.reset_crcs()
    mem.read_fully(len(data))
    with SeekableFileFlacInput(path) as inp:
        inp.reset_crcs()
        inp.read_fully(len(data))
        assert inp.crc8() == mem.crc8()
        assert inp.crc16() == mem.crc16()


def test_bits_match_in_memory_reader(sample):
    path, data = sample
    mem = ByteFlacInput(data)
    with SeekableFileFlacInput(path) as inp:
        for width in (1, 7, 13, 32, 3, 16):
            assert inp.read_uint(width) == mem.read_uint(width)


def test_close_makes_reads_end(sample):
    path, _ = sample
    inp = SeekableFileFlacInput(path)
    inp.close()
    assert inp.read_byte() is None
    inp.close()
    with pytest.raises(EOFError):
        inp.read_uint(4)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SeekableFileFlacInput(tmp_path / "absent.flac")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.flac"
    path.write_bytes(b"")
    with SeekableFileFlacInput(path) as inp:
        assert inp.length() == 0
        assert inp.read_byte() is None