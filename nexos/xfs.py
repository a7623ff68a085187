"""Operations on an XFS disk: formatting, loading, listing, exporting and deleting."""

import io
import os

from .codefile import (
    add_extension,
    data_file_size,
    expand_path,
    read_code_block,
    read_data_block,
)
from .diskfile import DISK_NAME, DiskFile, DiskOpenError, XfsError
from .inode import FileType, InodeTable
from .labels import LabelTable
from .layout import (
    BLOCK_SIZE,
    CONSOLE_INT,
    CONSOLE_INT_SIZE,
    DISK_FREE_LIST,
    DISKCONTROLLER_INT,
    DISKCONTROLLER_INT_SIZE,
    EX_HANDLER,
    EX_HANDLER_SIZE,
    IDLE_BLOCK,
    INIT_BLOCK,
    INODE,
    INODE_MAX_BLOCK_NUM,
    INODE_NUM_DATA_BLOCKS,
    LIBRARY_BLOCK,
    MEM_CONSOLE_INT,
    MEM_DISKCONTROLLER_INT,
    MEM_EX_HANDLER,
    MEM_OS2_STARTUP_CODE,
    MEM_OS_STARTUP_CODE,
    MEM_TIMERINT,
    NO_OF_DISK_BLOCKS,
    NO_OF_FREE_LIST_BLOCKS,
    NO_OF_IDLE_BLOCKS,
    NO_OF_INIT_BLOCKS,
    NO_OF_INODE_BLOCKS,
    NO_OF_LIBRARY_BLOCKS,
    NO_OF_ROOTFILE_BLOCKS,
    NO_OF_SHELL_BLOCKS,
    OS2_STARTUP_CODE,
    OS2_STARTUP_CODE_SIZE,
    OS_STARTUP_CODE,
    OS_STARTUP_CODE_SIZE,
    ROOTFILE,
    SHELL_BLOCK,
    TEMP_BLOCK,
    TIMERINT,
    TIMERINT_SIZE,
    USER_TABLE_OFFSET,
    XSM_PAGE_SIZE,
    interrupt_location,
    module_location,
)
from .virtual_disk import Structure, VirtualDisk
from .xsm_word import atoi

_ENCODING = "latin-1"
_DUPLICATE = (
    "Disk already contains the file with this name. Try again with a different name."
)
_NO_INODE = "No free INODE entry found."


def _open_text(path, mode, missing):
    try:
        return open(path, mode, encoding=_ENCODING, newline="\n")
    except OSError as exc:
        raise XfsError(missing) from exc


def _xfs_name(path, ext):
    base = path.rsplit("/", 1)[-1][:15]
    return add_extension(base, ext)


class XfsDisk:
    """An XFS disk file together with the memory copy of its structures."""

    def __init__(self, path=DISK_NAME):
        self.disk_file = DiskFile(path)
        self.vdisk = VirtualDisk(self.disk_file)
        self.inodes = InodeTable(self.vdisk)
        if os.path.isfile(self.disk_file.path):
            try:
                self.vdisk.load()
            except DiskOpenError:
                pass

    def format(self, format):
        """Create the disk file; when format is true, lay out an empty file system."""
        self.disk_file.create(False)
        if not format:
            return
        self.vdisk.clear()
        self.vdisk.set_defaults(Structure.DISK_FREE_LIST)
        self.vdisk.commit(Structure.DISK_FREE_LIST)
        self.vdisk.set_defaults(Structure.INODE)
        self.vdisk.set_defaults(Structure.ROOTFILE)

        root_blocks = [ROOTFILE + i for i in range(NO_OF_ROOTFILE_BLOCKS)]
        root_blocks += [-1] * (INODE_NUM_DATA_BLOCKS - len(root_blocks))
        self.inodes.add_entry(
            0, FileType.ROOT, "root", NO_OF_ROOTFILE_BLOCKS * BLOCK_SIZE, root_blocks
        )

        user_table = INODE * BLOCK_SIZE + USER_TABLE_OFFSET
        for offset, text in enumerate(("kernel", "-1", "root", "452")):
            self.vdisk.store_string_at(user_table + offset, text)

        self.vdisk.commit(Structure.INODE)
        self.vdisk.commit(Structure.ROOTFILE)

    def files(self):
        """Return the files recorded in the inode table."""
        return self.vdisk.list_files()

    def list_files(self):
        """Return the lines of a file listing."""
        files = self.files()
        if not files:
            return ["The disk contains no files."]
        return [f"Filename: {f.name} \t Filesize {f.size}" for f in files]

    def _file_blocks(self, name):
        self.disk_file.check_exists()
        location = self.inodes.find_entry(name)
        if location is None:
            raise XfsError(f"File '{name}' not found!")
        blocks = []
        for block in self.inodes.data_blocks(location):
            if block <= 0:
                break
            blocks.append(block)
        return blocks

    def display_file(self, name):
        """Return the non-empty words of a file."""
        return [
            word
            for block in self._file_blocks(name)
            for word in self.disk_file.read_block(block)
            if word
        ]

    def export_file(self, name, unix_file):
        """Write every word of a file's blocks to a host file, one per line."""
        blocks = self._file_blocks(name)
        unix_file = expand_path(unix_file)
        with _open_text(unix_file, "w", f"File '{unix_file}' not found!") as out:
            for block in blocks:
                for word in self.disk_file.read_block(block):
                    out.write(word + "\n")

    def clear_blocks(self, start, count):
        """Overwrite count blocks from start with empty words."""
        self.vdisk.empty_block(TEMP_BLOCK)
        for block in range(start, start + count):
            self.disk_file.write_block(block, self.vdisk.blocks[TEMP_BLOCK])

    def copy_blocks_to_file(self, start, end, filename):
        """Write the words of blocks start..end inclusive to a host file."""
        self.disk_file.check_exists()
        filename = expand_path(filename)
        with _open_text(filename, "w", f"File '{filename}' not found!") as out:
            for block in range(start, end + 1):
                for word in self.disk_file.read_block(block):
                    out.write(word + "\n")

    def free_list_report(self):
        """Return the lines describing the disk free list and the free block count."""
        self.disk_file.check_exists()
        lines = []
        free = 0
        for block in range(DISK_FREE_LIST, DISK_FREE_LIST + NO_OF_FREE_LIST_BLOCKS):
            for index in range(BLOCK_SIZE):
                word = self.vdisk.word(block, index)
                lines.append(f"{index} \t - \t {word}  ")
                if atoi(word) == 0:
                    free += 1
        lines.append("")
        lines.append(f"No of Free Blocks = {free}")
        lines.append(f"Total no of Blocks = {NO_OF_DISK_BLOCKS}")
        return lines

    def _load_code_stream(self, stream, start_block, count):
        complete = False
        for block in range(start_block, start_block + count):
            words, complete = read_code_block(stream)
            self.disk_file.write_block(block, words)
            if not complete:
                break
        if complete:
            self.clear_blocks(start_block, count)
            raise XfsError(f"Code exceeds {count} block")

    def load_code(self, filename, start_block, count):
        """Assemble a code file into count blocks starting at start_block."""
        filename = expand_path(filename)
        with _open_text(filename, "r", f"File {filename} not found.") as stream:
            self._load_code_stream(stream, start_block, count)

    def load_code_with_labels(self, filename, block, count, mem_page):
        """Resolve labels for code running at mem_page, then load it like load_code."""
        filename = expand_path(filename)
        with _open_text(filename, "r", "Can't open source file.") as source:
            lines = source.readlines()
        resolved = LabelTable().resolve(lines, mem_page * XSM_PAGE_SIZE)
        stream = io.StringIO("".join(line + "\n" for line in resolved), newline="\n")
        self._load_code_stream(stream, block, count)

    def load_os(self, path):
        self.load_code_with_labels(
            path, OS_STARTUP_CODE, OS_STARTUP_CODE_SIZE, MEM_OS_STARTUP_CODE
        )

    def load_os2(self, path):
        self.load_code_with_labels(
            path, OS2_STARTUP_CODE, OS2_STARTUP_CODE_SIZE, MEM_OS2_STARTUP_CODE
        )

    def load_timer(self, path):
        self.load_code_with_labels(path, TIMERINT, TIMERINT_SIZE, MEM_TIMERINT)

    def load_disk_controller(self, path):
        self.load_code_with_labels(
            path, DISKCONTROLLER_INT, DISKCONTROLLER_INT_SIZE, MEM_DISKCONTROLLER_INT
        )

    def load_console(self, path):
        self.load_code_with_labels(path, CONSOLE_INT, CONSOLE_INT_SIZE, MEM_CONSOLE_INT)

    def load_exhandler(self, path):
        self.load_code_with_labels(path, EX_HANDLER, EX_HANDLER_SIZE, MEM_EX_HANDLER)

    def load_interrupt(self, path, int_no):
        self.load_code_with_labels(path, *interrupt_location(int_no))

    def load_module(self, path, mod_no):
        self.load_code_with_labels(path, *module_location(mod_no))

    def load_init(self, path):
        self.load_code(path, INIT_BLOCK, NO_OF_INIT_BLOCKS)

    def load_idle(self, path):
        self.load_code(path, IDLE_BLOCK, NO_OF_IDLE_BLOCKS)

    def load_shell(self, path):
        self.load_code(path, SHELL_BLOCK, NO_OF_SHELL_BLOCKS)

    def load_library(self, path):
        self.load_code(path, LIBRARY_BLOCK, NO_OF_LIBRARY_BLOCKS)

    def _allocate(self, count, no_space):
        blocks = []
        for _ in range(count):
            block = self.vdisk.find_free_block()
            if block is None:
                self.vdisk.free_blocks(blocks)
                raise XfsError(no_space)
            blocks.append(block)
        return blocks

    def _install(self, stream, filename, block_count, no_space, reader, file_type, size):
        blocks = self._allocate(block_count, no_space)
        if self.inodes.find_entry(filename) is not None:
            self.vdisk.free_blocks(blocks)
            raise XfsError(_DUPLICATE)
        entry = self.inodes.find_empty_entry()
        if entry is None:
            self.vdisk.free_blocks(blocks)
            raise XfsError(_NO_INODE)
        self.vdisk.commit(Structure.DISK_FREE_LIST)
        stream.seek(0)
        for block in blocks:
            words, _ = reader(stream)
            self.disk_file.write_block(block, words)
        self.inodes.add_entry(entry, file_type, filename, size, blocks)
        self.vdisk.commit(Structure.INODE)

    def load_data(self, path):
        """Store a data file, one word per line, as a new XFS data file."""
        filename = _xfs_name(path, ".dat")
        path = expand_path(path)
        with _open_text(path, "r", f"File '{path}' not found.!") as stream:
            words = data_file_size(stream)
            needed = words // BLOCK_SIZE + (1 if words % BLOCK_SIZE else 0)
            if needed > INODE_MAX_BLOCK_NUM:
                raise XfsError(
                    f"The size of file exceeds {INODE_MAX_BLOCK_NUM} blocks\n"
                    f"The file contains {words} words, an xfs file can have only upto "
                    f"{INODE_MAX_BLOCK_NUM * BLOCK_SIZE} words"
                )
            self._install(
                stream,
                filename,
                needed,
                "Disk does not have enough space to contain the file.",
                read_data_block,
                FileType.DATA,
                words,
            )

    def load_executable(self, path):
        """Assemble a program file into a new XFS executable file."""
        filename = _xfs_name(path, ".xsm")
        path = expand_path(path)
        with _open_text(path, "r", f"File {path} not found.") as stream:
            lines = stream.read().count("\n")
            needed = lines // (BLOCK_SIZE // 2) + 1
            if needed > INODE_MAX_BLOCK_NUM:
                raise XfsError(f"The size of file exceeds {INODE_MAX_BLOCK_NUM} blocks")
            self._install(
                stream,
                filename,
                needed,
                "Insufficient disk space!",
                read_code_block,
                FileType.EXEC,
                lines * 2,
            )

    def delete_os(self):
        self.clear_blocks(OS_STARTUP_CODE, OS_STARTUP_CODE_SIZE)

    def delete_os2(self):
        self.clear_blocks(OS_STARTUP_CODE, OS2_STARTUP_CODE_SIZE)

    def delete_timer(self):
        self.clear_blocks(TIMERINT, TIMERINT_SIZE)

    def delete_disk_controller(self):
        self.clear_blocks(DISKCONTROLLER_INT, DISKCONTROLLER_INT_SIZE)

    def delete_console(self):
        self.clear_blocks(CONSOLE_INT, CONSOLE_INT_SIZE)

    def delete_exhandler(self):
        self.clear_blocks(EX_HANDLER, EX_HANDLER_SIZE)

    def delete_interrupt(self, int_no):
        block, count, _ = interrupt_location(int_no)
        self.clear_blocks(block, count)

    def delete_module(self, mod_no):
        block, count, _ = module_location(mod_no)
        self.clear_blocks(block, count)

    def delete_init(self):
        self.clear_blocks(INIT_BLOCK, NO_OF_INIT_BLOCKS)

    def delete_idle(self):
        self.clear_blocks(IDLE_BLOCK, NO_OF_IDLE_BLOCKS)

    def delete_shell(self):
        self.clear_blocks(SHELL_BLOCK, NO_OF_SHELL_BLOCKS)

    def delete_library(self):
        self.clear_blocks(LIBRARY_BLOCK, NO_OF_LIBRARY_BLOCKS)

    def delete_file(self, name):
        """Remove a data or executable file and free its blocks."""
        if name == "root":
            raise XfsError("Root file cannot be deleted")
        self.disk_file.check_exists()
        location = self.inodes.find_entry(name)
        if location is None:
            raise XfsError(f"File '{name}' not found!")
        self.vdisk.free_blocks(self.inodes.data_blocks(location))
        self.inodes.remove_entry(location)
        self.vdisk.commit(Structure.INODE)
        self.vdisk.commit(Structure.DISK_FREE_LIST)

    def dump_root_file(self, filename):
        self.copy_blocks_to_file(ROOTFILE, ROOTFILE + NO_OF_ROOTFILE_BLOCKS - 1, filename)

    def dump_inode_table(self, filename):
        self.copy_blocks_to_file(INODE, INODE + NO_OF_INODE_BLOCKS - 1, filename)