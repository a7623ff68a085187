# nexos

A Python library for building and inspecting disk images of the XFS
teaching file system, together with the core pieces of the XSM machine:
words, registers, memory with paged address translation, and the machine's
in-memory view of the disk.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Working with an XFS disk

`nexos.xfs.XfsDisk` wraps a disk file (by default `disk.xfs` in the current
directory) and the memory copy of its free list, inode table and root file.

```python
from nexos.xfs import XfsDisk

disk = XfsDisk("disk.xfs")
disk.format(True)
disk.load_executable("shell.xsm")
disk.load_data("numbers.dat")
for f in disk.files():
    print(f.name, f.size)
print("\n".join(disk.list_files()))
```

Its main operations:

- `format(format)`: create the disk file and, when `format` is true, lay out
  an empty file system with its root file and user table.
- `load_executable(path)`, `load_data(path)`: add a file to the inode table
  and write it to free data blocks.
- `load_os`, `load_os2`, `load_timer`, `load_disk_controller`,
  `load_console`, `load_exhandler`, `load_interrupt(path, int_no)`,
  `load_module(path, mod_no)`: resolve labels in assembly source for the
  memory page the code runs at, then write it to its reserved blocks.
- `load_init`, `load_idle`, `load_shell`, `load_library`: write code to
  their reserved blocks without label resolution.
- the matching `delete_*` methods, which wipe those reserved blocks, and
  `delete_file(name)`, which removes a file and frees its blocks.
- `display_file(name)`, `export_file(name, unix_file)`,
  `copy_blocks_to_file(start, end, filename)`, `dump_root_file(filename)`,
  `dump_inode_table(filename)`, `free_list_report()`.

Failures are raised as `nexos.diskfile.XfsError` (with `DiskOpenError` and
`DiskCreateError` for the disk file itself).

## Other modules

- `nexos.layout`: block numbers, sizes and memory pages of the disk layout,
  with `interrupt_location` and `module_location`.
- `nexos.diskfile`: `DiskFile`, block-level reads and writes of the disk file.
- `nexos.virtual_disk`: `VirtualDisk`, the memory copy of the disk.
- `nexos.inode`: `InodeTable`, inode and root file entries.
- `nexos.labels`: `LabelTable`, two-pass resolution of jump and call labels;
  `resolve(lines, base_address)` returns the resolved lines.
- `nexos.codefile`: turning assembly and data text into blocks of words.
- `nexos.xsm_word`: `Word`, a sixteen-byte machine word.
- `nexos.xsm_registers`: `RegisterFile`, the registers of each core.
- `nexos.xsm_memory`: `Memory`, with page-table translation raising
  `PageFault`, `AccessViolation` or `IllegalPage`.
- `nexos.xsm_disk`: `MachineDisk`, the machine's disk held in memory and
  written back on `close()`.
- `nexos.xsm_exception`: `MachineException` and `ExceptionCode`.

## What this package does not do

It installs no command: there is no command-line or interactive shell for
the disk; use `XfsDisk` from Python. It does not execute XSM programs
either: there is no instruction decoder, machine run loop or debugger, only
the words, registers, memory and disk such a machine works on.