"""Resolution of symbolic jump and call targets in assembly source."""

import re

from .layout import XSM_INSTRUCTION_SIZE, XSM_WORD_SIZE

# Width of the line reader in each pass: long lines are read in pieces.
_PHASE_ONE_WIDTH = XSM_INSTRUCTION_SIZE * XSM_WORD_SIZE + 1
_PHASE_TWO_WIDTH = 100

_SEPARATORS = re.compile(r"[ ,]+")


class LabelError(Exception):
    """A jump or call names a label that is not defined."""


def is_label(text):
    """Tell whether a line is a label definition, i.e. ends with a colon."""
    return text.endswith(":")


def is_charstring(text):
    """Tell whether the text holds any letter."""
    if not text:
        return False
    return any(char.isascii() and char.isalpha() for char in text)


def label_name(text):
    """Return the label name: the first run of characters other than a colon."""
    return next((part for part in text.split(":") if part), "")


def strip_newline(text):
    """Cut the text at its first newline."""
    return text.split("\n", 1)[0]


def _read_pieces(lines, width):
    """Split lines into the pieces a reader with a buffer of width bytes returns."""
    limit = width - 1
    for line in lines:
        while line:
            cut = line.find("\n", 0, limit)
            piece = line[:cut + 1] if cut >= 0 else line[:limit]
            yield piece
            line = line[len(piece):]


class LabelTable:
    """Label addresses collected from one source file."""

    def __init__(self):
        self._labels = {}

    def reset(self):
        self._labels.clear()

    def target(self, name):
        """Return the address of a label, or None if it is not defined."""
        return self._labels.get(name)

    def insert(self, name, address):
        """Record a label; a later definition of the same name wins."""
        self._labels[name] = address

    def phase_one(self, lines):
        """Record the address of every label; every other line is one instruction."""
        address = 0
        for piece in _read_pieces(lines, _PHASE_ONE_WIDTH):
            text = strip_newline(piece)
            if is_label(text):
                self.insert(label_name(text), address)
            else:
                address += XSM_INSTRUCTION_SIZE

    def phase_two(self, lines, base_address):
        """Return the source lines with labels dropped and symbolic targets replaced."""
        output = []
        for piece in _read_pieces(lines, _PHASE_TWO_WIDTH):
            line = strip_newline(piece)
            if not line or is_label(line):
                continue
            tokens = [token for token in _SEPARATORS.split(line) if token]
            if not tokens:
                output.append(line)
                continue
            opcode = tokens[0]
            leftop = tokens[1] if len(tokens) > 1 else None
            rightop = tokens[2] if len(tokens) > 2 else None
            upper = opcode.upper()
            jump = False
            sep = ""
            if upper in ("JMP", "CALL"):
                jump = True
                rightop, leftop = leftop, ""
            elif upper in ("JNZ", "JZ"):
                jump = True
                sep = ", "
            if jump and is_charstring(rightop):
                address = self.target(rightop)
                if address is None:
                    raise LabelError(f'Can not resolve label "{rightop}".')
                output.append(f"{opcode} {leftop or ''}{sep}{address + base_address}")
            else:
                output.append(line)
        return output

    def resolve(self, lines, base_address):
        """Run both passes over the source lines and return the resolved lines."""
        lines = list(lines)
        self.phase_one(lines)
        return self.phase_two(lines, base_address)