import os

import pytest

from nexos.diskfile import (
    BLOCK_BYTES,
    DiskCreateError,
    DiskFile,
    DiskOpenError,
    XfsError,
    decode_block,
    encode_block,
)
from nexos.layout import BLOCK_SIZE, WORD_SIZE


def test_encode_length_is_one_block():
    assert len(encode_block(["abc"])) == BLOCK_SIZE * WORD_SIZE


def test_encode_pads_words_with_nul():
    data = encode_block(["MOV R0, 1", "-1"])
    assert data[:WORD_SIZE] == b"MOV R0, 1".ljust(WORD_SIZE, b"\0")
    assert data[WORD_SIZE:2 * WORD_SIZE] == b"-1".ljust(WORD_SIZE, b"\0")


def test_round_trip():
    words = [str(i) for i in range(BLOCK_SIZE)]
    assert decode_block(encode_block(words)) == words


def test_short_word_list_is_padded():
    words = decode_block(encode_block(["root"]))
    assert len(words) == BLOCK_SIZE
    assert words[0] == "root"
    assert set(words[1:]) == {""}


def test_long_word_is_truncated():
    words = decode_block(encode_block(["x" * 40]))
    assert words[0] == "x" * WORD_SIZE
    assert words[1] == ""


def test_too_many_words():
    with pytest.raises(ValueError):
        encode_block([""] * (BLOCK_SIZE + 1))


def test_decode_short_data():
    words = decode_block(b"kernel\0")
    assert words[0] == "kernel"
    assert len(words) == BLOCK_SIZE


def test_missing_disk_raises(tmp_path):
    disk = DiskFile(tmp_path / "missing.xfs")
    with pytest.raises(DiskOpenError):
        disk.read_block(0)
    with pytest.raises(DiskOpenError):
        disk.write_block(0, ["a"])
    with pytest.raises(DiskOpenError):
        disk.check_exists()


def test_error_messages():
    assert str(DiskOpenError()) == "Unable to open disk file"
    assert str(DiskCreateError()) == "Failed to create disk file"
    assert isinstance(DiskOpenError(), XfsError)
    assert isinstance(DiskCreateError(), XfsError)


def test_write_then_read(tmp_path):
    disk = DiskFile(tmp_path / "disk.xfs")
    disk.create(False)
    disk.check_exists()
    disk.write_block(3, ["hello", "", "42"])
    words = disk.read_block(3)
    assert words[:3] == ["hello", "", "42"]
    assert os.path.getsize(disk.path) == 4 * BLOCK_BYTES


def test_read_past_end_is_empty(tmp_path):
    disk = DiskFile(tmp_path / "disk.xfs")
    disk.create(False)
    assert disk.read_block(10) == [""] * BLOCK_SIZE


def test_create_without_format_keeps_contents(tmp_path):
    disk = DiskFile(tmp_path / "disk.xfs")
    disk.create(True)
    disk.write_block(0, ["keep"])
    disk.create(False)
    assert disk.read_block(0)[0] == "keep"


def test_create_with_format_truncates(tmp_path):
    disk = DiskFile(tmp_path / "disk.xfs")
    disk.create(True)
    disk.write_block(1, ["gone"])
    disk.create(True)
    assert os.path.getsize(disk.path) == 0


def test_create_in_missing_directory(tmp_path):
    disk = DiskFile(tmp_path / "nope" / "disk.xfs")
    with pytest.raises(DiskCreateError):
        disk.create(True)