import pytest

from nexos.xsm_memory import (
    MEMORY_SIZE,
    AccessViolation,
    IllegalPage,
    Memory,
    PageFault,
    TranslationFault,
    page_of,
)
from nexos.xsm_word import PAGE_SIZE


@pytest.fixture
def memory():
    return Memory()


def test_page_of():
    assert page_of(-1) == -1
    assert page_of(0) == 0
    assert page_of(PAGE_SIZE) == 1
    assert page_of(PAGE_SIZE - 1) == 0


def test_is_valid_bounds(memory):
    assert memory.is_valid(0)
    assert memory.is_valid(MEMORY_SIZE - 1)
    assert not memory.is_valid(MEMORY_SIZE)
    assert not memory.is_valid(-1)


@pytest.mark.parametrize("address", [-1, MEMORY_SIZE])
def test_word_out_of_range(memory, address):
    with pytest.raises(IndexError):
        memory.word(address)


def test_page_shares_words(memory):
    page = memory.page(2)
    assert len(page) == PAGE_SIZE
    assert page[0] is memory.word(2 * PAGE_SIZE)
    page[5].store_int(42)
    assert memory.word(2 * PAGE_SIZE + 5).to_int() == 42


def test_page_out_of_range(memory):
    with pytest.raises(IndexError):
        memory.page(MEMORY_SIZE // PAGE_SIZE)


def _set_entry(memory, ptbr, page, target, info):
    memory.word(ptbr + 2 * page).store_int(target)
    memory.word(ptbr + 2 * page + 1).store_str(info)


def test_translate_address(memory):
    _set_entry(memory, 1000, 0, 5, "0110")
    assert memory.translate_address(1000, 2, 10, False) == 5 * PAGE_SIZE + 10
    assert memory.translate_address(1000, 2, 10, True) == 5 * PAGE_SIZE + 10


def test_translate_page_second_entry(memory):
    _set_entry(memory, 1000, 1, 7, "0110")
    assert memory.translate_page(1000, 2, 1, False) == 7


def test_write_to_read_only_page(memory):
    _set_entry(memory, 1000, 0, 5, "0100")
    assert memory.translate_address(1000, 2, 3, False) == 5 * PAGE_SIZE + 3
    with pytest.raises(AccessViolation):
        memory.translate_address(1000, 2, 3, True)


def test_page_fault(memory):
    _set_entry(memory, 1000, 1, 5, "0010")
    with pytest.raises(PageFault) as info:
        memory.translate_address(1000, 2, PAGE_SIZE + 1, False)
    assert info.value.page == 1


@pytest.mark.parametrize("address", [-4, 2 * PAGE_SIZE])
def test_illegal_page(memory, address):
    with pytest.raises(IllegalPage):
        memory.translate_address(1000, 2, address, False)


def test_faults_share_base_class(memory):
    _set_entry(memory, 1000, 0, 5, "0100")
    _set_entry(memory, 1000, 1, 6, "0010")
    with pytest.raises(TranslationFault):
        memory.translate_address(1000, 2, 3, True)
    with pytest.raises(TranslationFault):
        memory.translate_address(1000, 2, PAGE_SIZE, False)
    with pytest.raises(TranslationFault):
        memory.translate_address(1000, 2, 5 * PAGE_SIZE, False)


def test_raw_instruction(memory):
    memory.word(0).store_str("MOV R0,")
    memory.word(1).store_str("5")
    assert memory.raw_instruction(0) == "MOV R0,5"