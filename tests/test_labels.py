import pytest

from nexos.labels import (
    LabelError,
    LabelTable,
    is_charstring,
    is_label,
    label_name,
    strip_newline,
)
from nexos.layout import XSM_INSTRUCTION_SIZE

SOURCE = [
    "start:\n",
    "MOV R0, 1\n",
    "JMP start\n",
    "loop:\n",
    "JZ R0, loop\n",
    "CALL end\n",
    "end:\n",
    "HALT\n",
]


def test_is_label():
    assert is_label("loop:")
    assert not is_label("MOV R0, 1")
    assert not is_label("")


def test_is_charstring():
    assert is_charstring("loop")
    assert not is_charstring("1024")
    assert not is_charstring(None)


def test_label_name():
    assert label_name("loop:") == "loop"
    assert label_name(":x:") == "x"


def test_strip_newline():
    assert strip_newline("HALT\nrest") == "HALT"
    assert strip_newline("HALT") == "HALT"


def test_resolve_worked_example():
    table = LabelTable()
    assert table.resolve(SOURCE, 0) == [
        "MOV R0, 1",
        "JMP 0",
        "JZ R0, 4",
        "CALL 8",
        "HALT",
    ]


def test_base_address_shifts_targets():
    base = LabelTable().resolve(SOURCE, 0)
    shifted = LabelTable().resolve(SOURCE, 512)
    assert base[0] == shifted[0]
    assert shifted[1] == f"JMP {512 + int(base[1].split()[1])}"


def test_numeric_targets_kept():
    assert LabelTable().resolve(["JMP 1024\n", "JZ R1, 6\n"], 512) == ["JMP 1024", "JZ R1, 6"]


def test_unresolved_label():
    with pytest.raises(LabelError):
        LabelTable().resolve(["JMP nowhere\n"], 0)


def test_target_and_reset():
    table = LabelTable()
    table.insert("a", 4)
    table.insert("a", 6)
    assert table.target("a") == 6
    table.reset()
    assert table.target("a") is None


def test_blank_line_counts_in_phase_one():
    plain = LabelTable()
    plain.phase_one(["NOP\n", "here:\n"])
    spaced = LabelTable()
    spaced.phase_one(["NOP\n", "\n", "here:\n"])
    assert spaced.target("here") - plain.target("here") == XSM_INSTRUCTION_SIZE


def test_long_line_counts_twice_in_phase_one():
    short = LabelTable()
    short.phase_one(["NOP\n", "here:\n"])
    long = LabelTable()
    long.phase_one(["MOV R0, " + "x" * 40 + "\n", "here:\n"])
    assert long.target("here") - short.target("here") == XSM_INSTRUCTION_SIZE


def test_labels_dropped_from_output():
    output = LabelTable().resolve(SOURCE, 0)
    assert not any(is_label(line) for line in output)
    assert len(output) == sum(1 for line in SOURCE if not line.rstrip("\n").endswith(":"))