"""The disk of the XSM machine, held in memory and written back on close."""

import os

from .xsm_word import DEFAULT_DISK, PAGE_SIZE, WORD_SIZE, Word

DISK_BLOCK_NUM = 528
DISK_BLOCK_SIZE = PAGE_SIZE
_BLOCK_BYTES = DISK_BLOCK_SIZE * WORD_SIZE
_DISK_BYTES = _BLOCK_BYTES * DISK_BLOCK_NUM


class MachineDisk:
    """A copy of the disk file that pages are loaded from and stored to."""

    def __init__(self, path=DEFAULT_DISK):
        self.path = os.fspath(path)
        self._data = bytearray(_DISK_BYTES)
        try:
            with open(self.path, "rb") as handle:
                content = handle.read(_DISK_BYTES)
        except FileNotFoundError:
            with open(self.path, "wb"):
                pass
        else:
            self._data[:len(content)] = content

    def _offset(self, block_num):
        if not 0 <= block_num < DISK_BLOCK_NUM:
            raise IndexError(f"no such disk block: {block_num}")
        return block_num * _BLOCK_BYTES

    def block(self, block_num):
        """Return copies of the words of a block."""
        start = self._offset(block_num)
        words = []
        for index in range(DISK_BLOCK_SIZE):
            word = Word()
            offset = start + index * WORD_SIZE
            word.raw = self._data[offset:offset + WORD_SIZE]
            words.append(word)
        return words

    def read_block(self, page, block_num):
        """Copy a block into the words of a memory page."""
        start = self._offset(block_num)
        for index, word in zip(range(PAGE_SIZE), page):
            offset = start + index * WORD_SIZE
            word.raw = self._data[offset:offset + WORD_SIZE]

    def write_page(self, page, block_num):
        """Copy the words of a memory page into a block."""
        start = self._offset(block_num)
        for index, word in zip(range(PAGE_SIZE), page):
            offset = start + index * WORD_SIZE
            self._data[offset:offset + WORD_SIZE] = word.raw

    def close(self):
        """Write the disk back to its file and return the number of bytes written."""
        with open(self.path, "wb") as handle:
            return handle.write(self._data)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()