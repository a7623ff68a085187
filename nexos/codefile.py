"""Conversion of assembly and data text files into disk blocks of words."""

import os

from .layout import BLOCK_SIZE, WORD_SIZE

_C_SPACE = " \t\n\v\f\r"

# Sizes of the line buffers used when reading code and data files.
_CODE_LINE = 100
_DATA_LINE = 16
_CODE_BUFFER = 31


def trim(text):
    """Remove leading and trailing whitespace."""
    return text.strip(_C_SPACE)


def expand_path(path):
    """Replace the first path component by the environment variable named by its tail.

    The first character of the component is dropped to form the variable name,
    so "$HOME/file" becomes the value of HOME followed by "/file". A component
    with no matching variable is left alone.
    """
    head, sep, rest = path.partition("/")
    name = head[1:]
    value = os.environ.get(name) if name else None
    if value is not None:
        head = value
    return head + sep + rest


def add_extension(filename, ext):
    """Append ext unless present, keeping the result under sixteen characters."""
    if len(filename) >= 16:
        return filename[:11] + ext
    if not filename.endswith(ext):
        filename += ext
        if len(filename) >= 16:
            return filename[:11] + ext
    return filename


def _strtok(text, delims):
    """Return the next token of text separated by delims, and what follows it."""
    start = 0
    while start < len(text) and text[start] in delims:
        start += 1
    if start == len(text):
        return None, ""
    end = start
    while end < len(text) and text[end] not in delims:
        end += 1
    return text[start:end], text[end + 1:]


def _read(stream, size):
    """Read a piece of at most size - 1 characters; also tell if end of file was hit."""
    piece = stream.readline(size - 1)
    eof = not piece.endswith("\n") and len(piece) < size - 1
    return piece, eof


def assemble_line(line):
    """Turn one line of assembly into the words it occupies: none, one or two."""
    quote = line.find('"')
    if quote < 0 or len(line) - quote <= 16:
        buffer = line[:_CODE_BUFFER]
    else:
        # A string literal longer than a word is cut and closed again.
        buffer = line[:quote + 14] + '"'

    if len(buffer) <= 1:
        return []
    if buffer.endswith("\n"):
        buffer = buffer[:-1]

    instr, rest = _strtok(buffer, " ")
    if instr is None:
        return []
    arg1, rest = _strtok(rest, ",")
    arg2 = rest if arg1 is not None and rest else None

    opcode = trim(instr)
    if opcode[:1].isascii() and opcode[:1].isdigit():
        return [opcode[:WORD_SIZE]]
    if arg1 is not None:
        first = trim(arg1)
        if arg2 is not None:
            first += ","
        second = trim(arg2) if arg2 is not None else ""
        return [f"{opcode} {first}"[:WORD_SIZE], second[:WORD_SIZE]]
    return [instr[:WORD_SIZE], ""]


def read_code_block(stream):
    """Assemble lines from stream into one block.

    Returns (words, complete): complete is False when the end of the file was
    reached before the block filled up.
    """
    words = [""] * BLOCK_SIZE
    count = 0
    while count < BLOCK_SIZE:
        piece, eof = _read(stream, _CODE_LINE)
        if eof:
            return words, False
        for word in assemble_line(piece):
            if count < BLOCK_SIZE:
                words[count] = word
            count += 1
    return words, True


def read_data_block(stream):
    """Read one block of data words, one per line of at most fifteen characters.

    Returns (words, complete) as read_code_block does.
    """
    words = [""] * BLOCK_SIZE
    for index in range(BLOCK_SIZE):
        piece, eof = _read(stream, _DATA_LINE)
        if eof:
            return words, False
        newline = piece.find("\n", 1)
        if newline >= 1:
            piece = piece[:newline]
        words[index] = piece
    return words, True


def data_file_size(stream):
    """Return the number of words a data file holds, reading it from the start."""
    stream.seek(0)
    count = 0
    while True:
        count += 1
        _, eof = _read(stream, _DATA_LINE)
        if eof:
            break
    return count - 1