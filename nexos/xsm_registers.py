"""The register file of each XSM core."""

from .xsm_word import NUM_CORES, Word

REGISTER_NAMES = (
    "R0", "R1", "R2", "R3", "R4", "R5", "R6", "R7", "R8", "R9",
    "R10", "R11", "R12", "R13", "R14", "R15", "R16", "R17", "R18", "R19",
    "P0", "P1", "P2", "P3",
    "BP", "SP", "IP",
    "PTBR", "PTLR", "EIP", "EC", "EPN", "EMA",
    "CORE",
)

REG_PORT_LOW = 20
REG_PORT_HIGH = 23
REG_KERN_LOW = 27
REG_KERN_HIGH = 33
REG_COUNT = 20

_CODES = {name: code for code, name in enumerate(REGISTER_NAMES)}


def register_code(name):
    """Return the index of a register, matching its name case-insensitively."""
    try:
        return _CODES[name.upper()]
    except KeyError:
        raise KeyError(f"no such register: {name}") from None


def is_user_mode(name):
    """Tell whether the register may be used in user mode."""
    code = _CODES.get(name.upper())
    if code is None:
        return False
    if REG_PORT_LOW <= code <= REG_PORT_HIGH:
        return False
    # Only the first kernel register is guarded.
    if code == REG_KERN_LOW:
        return False
    return True


class RegisterFile:
    """The registers of every core."""

    def __init__(self, cores=NUM_CORES):
        self._cores = [[Word() for _ in REGISTER_NAMES] for _ in range(cores)]

    def get(self, name, core):
        """Return the register word, raising KeyError or ValueError when absent."""
        code = register_code(name)
        if not 0 <= core < len(self._cores):
            raise ValueError(f"no such core: {core}")
        return self._cores[core][code]

    def get_int(self, name, core):
        return self.get(name, core).to_int()

    def get_str(self, name, core):
        return self.get(name, core).text

    def set_int(self, name, value, core):
        self.get(name, core).store_int(value)

    def set_str(self, name, text, core):
        self.get(name, core).store_str(text)