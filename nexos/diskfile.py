"""Block-level access to the XFS disk file."""

import os

from .layout import BLOCK_SIZE, WORD_SIZE

DISK_NAME = "disk.xfs"
BLOCK_BYTES = BLOCK_SIZE * WORD_SIZE


class XfsError(Exception):
    """Base class of disk file errors."""

    code = 0
    message = "Disk error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class DiskOpenError(XfsError):
    """The disk file could not be opened."""

    code = 1
    message = "Unable to open disk file"


class DiskCreateError(XfsError):
    """The disk file could not be created."""

    code = 2
    message = "Failed to create disk file"


def encode_block(words):
    """Encode up to BLOCK_SIZE words as one block of fixed-width, NUL-padded fields."""
    words = list(words)
    if len(words) > BLOCK_SIZE:
        raise ValueError(f"a block holds at most {BLOCK_SIZE} words")
    out = bytearray(BLOCK_BYTES)
    for index, word in enumerate(words):
        data = word.encode("latin-1", errors="replace")[:WORD_SIZE]
        start = index * WORD_SIZE
        out[start:start + len(data)] = data
    return bytes(out)


def decode_block(data):
    """Decode block bytes into BLOCK_SIZE words; missing bytes read as empty."""
    data = bytes(data[:BLOCK_BYTES]).ljust(BLOCK_BYTES, b"\0")
    return [
        data[start:start + WORD_SIZE].split(b"\0", 1)[0].decode("latin-1")
        for start in range(0, BLOCK_BYTES, WORD_SIZE)
    ]


class DiskFile:
    """The disk file on the host file system, read and written a block at a time."""

    def __init__(self, path=DISK_NAME):
        self.path = os.fspath(path)

    def _open(self, mode):
        try:
            return open(self.path, mode)
        except OSError as exc:
            raise DiskOpenError() from exc

    def read_block(self, block_number):
        """Return the words of one block."""
        with self._open("rb") as handle:
            handle.seek(BLOCK_BYTES * block_number)
            return decode_block(handle.read(BLOCK_BYTES))

    def write_block(self, block_number, words):
        """Write words to one block of an existing disk file."""
        data = encode_block(words)
        with self._open("r+b") as handle:
            handle.seek(BLOCK_BYTES * block_number)
            handle.write(data)

    def create(self, format):
        """Create the disk file; when format is true, empty an existing one."""
        try:
            with open(self.path, "wb" if format else "ab"):
                pass
        except OSError as exc:
            raise DiskCreateError() from exc

    def check_exists(self):
        """Raise DiskOpenError unless the disk file can be opened."""
        with self._open("rb"):
            pass