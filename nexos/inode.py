"""The inode table and root file entries of the XFS disk."""

import enum

from .layout import (
    BLOCK_SIZE,
    FILETYPE_DATA,
    FILETYPE_EXEC,
    FILETYPE_ROOT,
    INODE,
    INODE_ENTRY_DATABLOCK,
    INODE_ENTRY_FILENAME,
    INODE_ENTRY_FILESIZE,
    INODE_ENTRY_FILETYPE,
    INODE_ENTRY_PERMISSION,
    INODE_ENTRY_SIZE,
    INODE_ENTRY_USERID,
    INODE_NUM_DATA_BLOCKS,
    NO_OF_INODE_BLOCKS,
    ROOTFILE,
    ROOTFILE_ENTRY_FILENAME,
    ROOTFILE_ENTRY_FILESIZE,
    ROOTFILE_ENTRY_FILETYPE,
    ROOTFILE_ENTRY_SIZE,
    USER_TABLE_OFFSET,
)
from .xsm_word import atoi


class FileType(enum.IntEnum):
    ROOT = FILETYPE_ROOT
    DATA = FILETYPE_DATA
    EXEC = FILETYPE_EXEC


# (user id, permission) recorded for each file type.
_OWNERSHIP = {
    FileType.ROOT: (0, 0),
    FileType.DATA: (1, 1),
    FileType.EXEC: (0, -1),
}


class InodeTable:
    """Inode and root file entries kept in a VirtualDisk."""

    def __init__(self, vdisk):
        self.vdisk = vdisk

    def _entries(self):
        """Yield (block, word index, location) of every inode entry before the user table."""
        for block in range(INODE, INODE + NO_OF_INODE_BLOCKS):
            for index in range(0, BLOCK_SIZE, INODE_ENTRY_SIZE):
                location = (block - INODE) * BLOCK_SIZE + index
                if location >= USER_TABLE_OFFSET:
                    return
                yield block, index, location

    def find_empty_entry(self):
        """Return the location of the first unused entry, or None if the table is full."""
        for block, index, location in self._entries():
            if atoi(self.vdisk.word(block, index + INODE_ENTRY_FILENAME)) == -1:
                return location
        return None

    def find_entry(self, name):
        """Return the location of the entry for a file name, or None."""
        if name is None:
            return None
        for block, index, location in self._entries():
            word = self.vdisk.word(block, index + INODE_ENTRY_FILENAME)
            if word == name and atoi(word) != -1:
                return location
        return None

    def add_entry(self, start_index, file_type, name, size, data_blocks):
        """Fill the inode entry at start_index and its root file entry."""
        base = INODE * BLOCK_SIZE + start_index
        store = self.vdisk.store_value_at
        store(base + INODE_ENTRY_FILETYPE, file_type)
        self.vdisk.store_string_at(base + INODE_ENTRY_FILENAME, name)
        store(base + INODE_ENTRY_FILESIZE, size)
        ownership = _OWNERSHIP.get(file_type)
        if ownership is not None:
            store(base + INODE_ENTRY_USERID, ownership[0])
            store(base + INODE_ENTRY_PERMISSION, ownership[1])
        blocks = list(data_blocks)[:INODE_NUM_DATA_BLOCKS]
        blocks += [-1] * (INODE_NUM_DATA_BLOCKS - len(blocks))
        for offset, block in enumerate(blocks):
            store(base + INODE_ENTRY_DATABLOCK + offset, block)
        self.add_root_entry(
            start_index // INODE_ENTRY_SIZE * ROOTFILE_ENTRY_SIZE, file_type, name, size
        )

    def add_root_entry(self, start_index, file_type, name, size):
        """Fill the root file entry at start_index."""
        base = ROOTFILE * BLOCK_SIZE + start_index
        self.vdisk.store_string_at(base + ROOTFILE_ENTRY_FILENAME, name)
        self.vdisk.store_value_at(base + ROOTFILE_ENTRY_FILESIZE, size)
        self.vdisk.store_value_at(base + ROOTFILE_ENTRY_FILETYPE, file_type)

    def remove_entry(self, location):
        """Reset the inode entry at location and its root file entry."""
        block = INODE + location // BLOCK_SIZE
        start = location % BLOCK_SIZE
        values = {
            INODE_ENTRY_FILETYPE: -1,
            INODE_ENTRY_FILENAME: -1,
            INODE_ENTRY_FILESIZE: 0,
            INODE_ENTRY_USERID: -1,
            INODE_ENTRY_PERMISSION: -1,
        }
        for offset in range(INODE_NUM_DATA_BLOCKS):
            values[INODE_ENTRY_DATABLOCK + offset] = -1
        for offset, value in values.items():
            self.vdisk.set_word(block, start + offset, str(value))
        self.remove_root_entry(location // INODE_ENTRY_SIZE * ROOTFILE_ENTRY_SIZE)

    def remove_root_entry(self, location):
        """Reset the root file entry at location."""
        block = ROOTFILE + location // BLOCK_SIZE
        start = location % BLOCK_SIZE
        self.vdisk.set_word(block, start + ROOTFILE_ENTRY_FILETYPE, "-1")
        self.vdisk.set_word(block, start + ROOTFILE_ENTRY_FILENAME, "-1")
        self.vdisk.set_word(block, start + ROOTFILE_ENTRY_FILESIZE, "0")

    def data_blocks(self, location):
        """Return the data block numbers recorded in the entry at location."""
        block = INODE + location // BLOCK_SIZE
        start = INODE_ENTRY_DATABLOCK + location % BLOCK_SIZE
        return [
            atoi(self.vdisk.word(block, start + offset))
            for offset in range(INODE_NUM_DATA_BLOCKS)
        ]