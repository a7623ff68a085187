"""Machine words of the XSM machine: sixteen bytes holding a string or an integer."""

import enum

WORD_SIZE = 16
MEMORY_NUMPAGES = 144
PAGE_SIZE = 512
NUM_CORES = 2
REG_SIZE = WORD_SIZE
NUM_REG = 34
INSTRUCTION_SIZE = 2

DISK_IDLE = 0
DISK_BUSY = 1
CONSOLE_IDLE = 0
CONSOLE_BUSY = 1

PRIMARY_CORE = 0
SECONDARY_CORE = 1

RESET_MODE = 0
ACTIVE_MODE = 1

INTERRUPT_EXCEPTION = 0
INTERRUPT_TIMER = 1
INTERRUPT_DISK = 2
INTERRUPT_CONSOLE = 3

DEFAULT_DISK = "../nexfs-interface/disk.xfs"


class WordType(enum.IntEnum):
    """What a word holds."""

    STRING = 0
    INTEGER = 1


def atoi(text):
    """Parse a leading decimal integer the way C atoi does; 0 when there is none."""
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for char in text:
        if not "0" <= char <= "9":
            break
        digits += char
    return sign * int(digits) if digits else 0


def _wrap32(value):
    return (value + 2**31) % 2**32 - 2**31


class Word:
    """A sixteen-byte machine word."""

    __slots__ = ("_data",)

    def __init__(self, text=""):
        self._data = bytearray(WORD_SIZE)
        if text:
            self.store_str(text)

    @property
    def raw(self):
        """All sixteen bytes of the word."""
        return bytes(self._data)

    @raw.setter
    def raw(self, data):
        self._data[:] = bytes(data[:WORD_SIZE]).ljust(WORD_SIZE, b"\0")

    @property
    def text(self):
        """The string held in the word, up to its first NUL byte."""
        return self._data.split(b"\0", 1)[0].decode("latin-1")

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"Word({self.text!r})"

    def unix_type(self):
        """Return INTEGER if the word is an optional sign followed by digits only."""
        body = self.text
        if body[:1] in ("+", "-"):
            body = body[1:]
        if all("0" <= char <= "9" for char in body):
            return WordType.INTEGER
        return WordType.STRING

    def to_int(self):
        """Return the integer value of the word."""
        return atoi(self.text)

    def store_int(self, value):
        """Store a 32-bit integer as its decimal text; later bytes are kept."""
        data = str(_wrap32(int(value))).encode("ascii") + b"\0"
        self._data[:len(data)] = data

    def store_str(self, text):
        """Store up to sixteen bytes of text, NUL-padding the rest."""
        data = text.encode("latin-1", errors="replace").split(b"\0", 1)[0][:WORD_SIZE]
        self._data[:] = data.ljust(WORD_SIZE, b"\0")

    def copy_from(self, other):
        """Copy all bytes of another word into this one."""
        self._data[:] = other._data

    def encrypt(self):
        """Replace the word by the sum of its sixteen bytes taken as signed chars."""
        total = sum(b - 256 if b >= 128 else b for b in self._data)
        self.store_int(total)