"""Main memory of the XSM machine and its page-table address translation."""

from .xsm_word import INSTRUCTION_SIZE, MEMORY_NUMPAGES, PAGE_SIZE, Word

MEMORY_SIZE = PAGE_SIZE * MEMORY_NUMPAGES

# Kinds of address fetch.
INSTR_FETCH = -5
OPER_FETCH = -6
DEBUG_FETCH = -7


class TranslationFault(Exception):
    """A logical address could not be translated."""

    code = 0

    def __init__(self, message, page=None):
        super().__init__(message)
        self.page = page


class AccessViolation(TranslationFault):
    """A write to a page that is not writable."""

    code = -1


class PageFault(TranslationFault):
    """The page is not present in memory."""

    code = -2


class IllegalPage(TranslationFault):
    """The page lies outside the logical address space."""

    code = -3


def page_of(address):
    """Return the page number of an address, or -1 for a negative address."""
    if address < 0:
        return -1
    return address // PAGE_SIZE


class Memory:
    """The words of main memory."""

    def __init__(self):
        self._words = [Word() for _ in range(MEMORY_SIZE)]

    def __len__(self):
        return MEMORY_SIZE

    def is_valid(self, address):
        return 0 <= address < MEMORY_SIZE

    def word(self, address):
        """Return the word at a physical address; IndexError if there is none."""
        if not self.is_valid(address):
            raise IndexError(f"illegal memory address: {address}")
        return self._words[address]

    def page(self, page):
        """Return the words of a physical page."""
        start = page * PAGE_SIZE
        if not self.is_valid(start):
            raise IndexError(f"illegal memory page: {page}")
        return self._words[start:start + PAGE_SIZE]

    def translate_page(self, ptbr, ptlr, page, write):
        """Return the physical page of a logical page through the page table."""
        if page < 0 or page >= ptlr:
            raise IllegalPage("Address outside logical address space", page)
        entry = page * 2 + ptbr
        target = self.word(entry).to_int()
        info = self.word(entry + 1).raw
        if info[1] == ord("0"):
            raise PageFault("Page fault", page)
        if write and info[2] == ord("0"):
            raise AccessViolation("Access violation", page)
        return target

    def translate_address(self, ptbr, ptlr, address, write):
        """Return the physical address of a logical address."""
        target = self.translate_page(ptbr, ptlr, page_of(address), write)
        return target * PAGE_SIZE + address % PAGE_SIZE

    def raw_instruction(self, address):
        """Return the text of the instruction stored at address."""
        return "".join(
            self.word(address + offset).text for offset in range(INSTRUCTION_SIZE)
        )