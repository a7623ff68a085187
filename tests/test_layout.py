import pytest

from nexos import layout
from nexos.layout import interrupt_location, module_location

SOURCE_INTERRUPT_BLOCKS = {
    1: 17, 2: 19, 3: 21, 4: 23, 5: 25, 6: 27, 7: 29, 8: 31, 9: 33,
    10: 35, 11: 37, 12: 39, 13: 41, 14: 43, 15: 45, 16: 47, 17: 49, 18: 51,
    19: 514,
}

SOURCE_MODULE_BLOCKS = {
    0: 53, 1: 55, 2: 57, 3: 59, 4: 61, 5: 63, 6: 65, 7: 67,
    8: 516, 9: 518, 10: 520, 11: 522,
}


@pytest.mark.parametrize("int_no, block", sorted(SOURCE_INTERRUPT_BLOCKS.items()))
def test_interrupt_blocks_match_table(int_no, block):
    assert interrupt_location(int_no)[0] == block
    assert interrupt_location(int_no)[1] == layout.INT_SIZE


@pytest.mark.parametrize("mod_no, block", sorted(SOURCE_MODULE_BLOCKS.items()))
def test_module_blocks_match_table(mod_no, block):
    assert module_location(mod_no)[0] == block
    assert module_location(mod_no)[1] == layout.MOD_SIZE


def test_named_interrupts_share_locations():
    assert interrupt_location(1) == (
        layout.TIMERINT, layout.TIMERINT_SIZE, layout.MEM_TIMERINT)
    assert interrupt_location(2) == (
        layout.DISKCONTROLLER_INT, layout.DISKCONTROLLER_INT_SIZE,
        layout.MEM_DISKCONTROLLER_INT)
    assert interrupt_location(3) == (
        layout.CONSOLE_INT, layout.CONSOLE_INT_SIZE, layout.MEM_CONSOLE_INT)


def test_interrupt_19_is_special():
    assert interrupt_location(19) == (layout.INT19, layout.INT_SIZE, layout.MEM_INT19)


def test_module_memory_pages():
    assert module_location(0)[2] == layout.MEM_MOD0
    assert module_location(8)[2] == layout.MEM_MOD8


def test_interrupt_pages_step_by_two():
    pages = [interrupt_location(n)[2] for n in range(1, 19)]
    assert all(b - a == layout.MEM_INT_SIZE for a, b in zip(pages, pages[1:]))