"""In-memory copy of the XFS disk and its free list, inode table and root file."""

import enum
from dataclasses import dataclass

from .diskfile import DiskFile
from .layout import (
    BLOCK_SIZE,
    DATA_START_BLOCK,
    DISK_FREE_LIST,
    INODE,
    INODE_ENTRY_FILENAME,
    INODE_ENTRY_FILESIZE,
    INODE_ENTRY_SIZE,
    NO_OF_DISK_BLOCKS,
    NO_OF_FREE_LIST_BLOCKS,
    NO_OF_INODE_BLOCKS,
    NO_OF_ROOTFILE_BLOCKS,
    ROOTFILE,
    ROOTFILE_ENTRY_FILESIZE,
    ROOTFILE_ENTRY_SIZE,
    TEMP_BLOCK,
    USER_TABLE_OFFSET,
    WORD_SIZE,
    XFS_NUM_BLOCKS,
)
from .xsm_word import atoi


class Structure(enum.IntEnum):
    """The file system structures kept in memory; values are their first blocks."""

    DISK_FREE_LIST = DISK_FREE_LIST
    INODE = INODE
    ROOTFILE = ROOTFILE


@dataclass
class XosFile:
    """A file listed in the inode table."""

    name: str
    size: int


class VirtualDisk:
    """Every block of the disk held as a list of word strings."""

    def __init__(self, disk_file=None):
        self.disk_file = disk_file if disk_file is not None else DiskFile()
        self.blocks = [[""] * BLOCK_SIZE for _ in range(XFS_NUM_BLOCKS)]

    def word(self, block, index):
        return self.blocks[block][index]

    def set_word(self, block, index, text):
        self.blocks[block][index] = str(text)[:WORD_SIZE]

    def empty_block(self, block_no):
        """Set every word of a block to the empty string."""
        self.blocks[block_no] = [""] * BLOCK_SIZE

    def _write(self, block):
        self.disk_file.write_block(block, self.blocks[block])

    def free_blocks(self, blocks):
        """Mark blocks free and wipe them on disk, stopping at the first -1 or 0."""
        for block in blocks:
            if block in (-1, 0):
                break
            self.store_value_at(DISK_FREE_LIST * BLOCK_SIZE + block, 0)
            self.empty_block(TEMP_BLOCK)
            self.disk_file.write_block(block, self.blocks[TEMP_BLOCK])

    def find_free_block(self):
        """Claim the first free block and return its number, or None if the disk is full."""
        for list_block in range(DISK_FREE_LIST, DISK_FREE_LIST + NO_OF_FREE_LIST_BLOCKS):
            for index, text in enumerate(self.blocks[list_block]):
                if atoi(text) == 0:
                    self.set_word(list_block, index, "1")
                    return (list_block - DISK_FREE_LIST) * BLOCK_SIZE + index
        return None

    def set_defaults(self, structure):
        """Fill a structure with the values of a freshly formatted disk."""
        structure = Structure(structure)
        if structure is Structure.DISK_FREE_LIST:
            for number in range(NO_OF_FREE_LIST_BLOCKS * BLOCK_SIZE):
                used = not DATA_START_BLOCK <= number < NO_OF_DISK_BLOCKS
                self.set_word(
                    DISK_FREE_LIST + number // BLOCK_SIZE,
                    number % BLOCK_SIZE,
                    "1" if used else "0",
                )
        elif structure is Structure.INODE:
            user_start = USER_TABLE_OFFSET - BLOCK_SIZE
            for block, limit in ((INODE, BLOCK_SIZE), (INODE + 1, user_start)):
                for index in range(BLOCK_SIZE):
                    self.set_word(block, index, "-1")
                for index in range(0, limit, INODE_ENTRY_SIZE):
                    self.set_word(block, index + INODE_ENTRY_FILESIZE, "0")
                    self.set_word(block, index + INODE_ENTRY_FILENAME, "-1")
        else:
            for block in range(ROOTFILE, ROOTFILE + NO_OF_ROOTFILE_BLOCKS):
                for index in range(BLOCK_SIZE):
                    self.set_word(block, index, "-1")
                for index in range(0, BLOCK_SIZE, ROOTFILE_ENTRY_SIZE):
                    self.set_word(block, index + ROOTFILE_ENTRY_FILESIZE, "0")

    def commit(self, structure):
        """Write a structure to the disk file; the inode table brings the root file along."""
        structure = Structure(structure)
        if structure is Structure.DISK_FREE_LIST:
            for block in range(DISK_FREE_LIST, DISK_FREE_LIST + NO_OF_FREE_LIST_BLOCKS):
                self._write(block)
            return
        if structure is Structure.INODE:
            for block in range(INODE, INODE + NO_OF_INODE_BLOCKS):
                self._write(block)
        for block in range(ROOTFILE, ROOTFILE + NO_OF_ROOTFILE_BLOCKS):
            self._write(block)

    def list_files(self):
        """Return the files named in the inode table."""
        self.disk_file.check_exists()
        files = []
        for block in range(INODE, INODE + NO_OF_INODE_BLOCKS):
            for index in range(0, BLOCK_SIZE, INODE_ENTRY_SIZE):
                if (block - INODE) * BLOCK_SIZE + index >= USER_TABLE_OFFSET:
                    continue
                name = self.word(block, index + INODE_ENTRY_FILENAME)
                if atoi(name) == -1:
                    continue
                size = atoi(self.word(block, index + INODE_ENTRY_FILESIZE))
                files.append(XosFile(name, size))
        return files

    def load(self):
        """Read the free list, inode table and root file from the disk file."""
        ranges = (
            range(DISK_FREE_LIST, DISK_FREE_LIST + NO_OF_FREE_LIST_BLOCKS),
            range(INODE, INODE + NO_OF_INODE_BLOCKS),
            range(ROOTFILE, ROOTFILE + NO_OF_ROOTFILE_BLOCKS),
        )
        for blocks in ranges:
            for block in blocks:
                self.blocks[block] = self.disk_file.read_block(block)

    def clear(self):
        """Empty every block of the memory copy."""
        for block in range(XFS_NUM_BLOCKS):
            self.empty_block(block)

    def value_at(self, address):
        return atoi(self.word(address // BLOCK_SIZE, address % BLOCK_SIZE))

    def store_value_at(self, address, value):
        self.set_word(address // BLOCK_SIZE, address % BLOCK_SIZE, str(int(value)))

    def store_string_at(self, address, text):
        self.set_word(address // BLOCK_SIZE, address % BLOCK_SIZE, text)