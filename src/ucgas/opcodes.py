"""UCGv2 opcode table.

Static, read-only mapping between opcode mnemonics and the 5-bit opcode
values carried in the third header byte of every frame.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping, Optional


class Opcode(enum.IntEnum):
    """Canonical UCGv2 opcodes."""

    NOP = 0
    RQRY = 1
    SQST = 2
    SVAL = 3
    RTYP = 4
    RVAL = 5
    RWRT = 6
    RRTC = 7
    SRUN = 8
    STAT = 9
    STOP = 10
    SRET = 11
    MACK = 12
    OPOK = 13
    FAIL = 14
    NSUP = 15
    DERR = 16
    DDIE = 17
    REDY = 18


MAX_OPCODE: int = int(max(Opcode))

# Indexed by opcode value
NUM_TO_OPCODE: tuple[str, ...] = tuple(op.name for op in sorted(Opcode))

OPCODE_TO_NUM: Mapping[str, int] = MappingProxyType({op.name: op.value for op in Opcode})


def text_of(op: int) -> str:
    """Return the mnemonic for a valid opcode.

    Args:
        op: Opcode value (0 to MAX_OPCODE)

    Returns:
        Mnemonic string, e.g. "RQRY"

    Raises:
        ValueError: If op is outside [0, MAX_OPCODE]. Callers are expected to
            validate before looking up.
    """
    if not 0 <= op <= MAX_OPCODE:
        raise ValueError(f"Opcode must be 0-{MAX_OPCODE}, got {op}")
    return NUM_TO_OPCODE[op]


def opcode_of(text: str) -> Optional[int]:
    """Look up an opcode by exact, case-sensitive mnemonic.

    Example:
        >>> opcode_of("RVAL")
        5
        >>> opcode_of("rval") is None
        True
    """
    return OPCODE_TO_NUM.get(text)
