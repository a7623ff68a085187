"""Exceptions raised by the XSM machine while executing an instruction."""

import enum


class ExceptionCode(enum.IntEnum):
    """Cause codes stored in the EC register."""

    PAGEFAULT = 0
    ILLINSTR = 1
    ILLMEM = 2
    ARITH = 3


class MachineException(Exception):
    """A machine exception, with the mode it occurred in and its fault details."""

    def __init__(self, message, code, mode, ma=None, epn=None):
        super().__init__(message)
        self.message = message
        self.code = ExceptionCode(code)
        self.mode = mode
        self.ma = ma
        self.epn = epn

    def __str__(self):
        return self.message