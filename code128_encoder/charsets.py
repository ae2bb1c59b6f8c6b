"""
Code 128 Character Sets

Symbol values, reserved function symbols and the per-set character
mappings defined by ISO/IEC 15417.

Set summary:
- A: ASCII 0x00-0x5F (control codes, digits, upper case, punctuation)
- B: ASCII 0x20-0x7F (printable ASCII, lower case, DEL)
- C: digit pairs 00-99 packed into one symbol each

Characters 0x80-0xFF are reached from A or B through FNC4 followed by
the value of the character minus 128.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .errors import InvalidModeError


class CodeSet(str, Enum):
    """Requested code set."""
    A = "A"
    B = "B"
    C = "C"
    AUTO = "AUTO"


# Start / stop
START_A = 103
START_B = 104
START_C = 105
STOP = 106

START_SYMBOLS = {
    CodeSet.A: START_A,
    CodeSet.B: START_B,
    CodeSet.C: START_C,
}

# Function symbols
SHIFT = 98
CODE_C = 99
FNC1 = 102

# CODE A / CODE B / FNC4 share values depending on the active set
SWITCH_SYMBOLS = {
    (CodeSet.A, CodeSet.B): 100,
    (CodeSet.A, CodeSet.C): CODE_C,
    (CodeSet.B, CodeSet.A): 101,
    (CodeSet.B, CodeSet.C): CODE_C,
    (CodeSet.C, CodeSet.A): 101,
    (CodeSet.C, CodeSet.B): 100,
}

FNC4_SYMBOLS = {
    CodeSet.A: 101,
    CodeSet.B: 100,
}

CHECKSUM_MODULUS = 103
MAX_SYMBOL_VALUE = STOP

# ASCII GS, transmitted by scanners in place of FNC1
GS = '\x1d'

DIGITS = frozenset('0123456789')

# Inclusive code point ranges per alphabet
ALPHABET_RANGES = {
    CodeSet.A: (0x00, 0x5F),
    CodeSet.B: (0x20, 0x7F),
    CodeSet.AUTO: (0x00, 0x7F),
}

ALPHABET_NAMES = {
    CodeSet.A: "Code 128 set A (ASCII 0-95)",
    CodeSet.B: "Code 128 set B (ASCII 32-127)",
    CodeSet.C: "Code 128 set C (pairs of decimal digits)",
    CodeSet.AUTO: "Code 128 (ASCII 0-127)",
}

_MODE_TOKENS = {
    "a": CodeSet.A,
    "b": CodeSet.B,
    "c": CodeSet.C,
    "auto": CodeSet.AUTO,
}


def parse_code_set(token: Union[str, CodeSet, None]) -> CodeSet:
    """
    Resolve a mode token to a CodeSet.

    Accepts "a", "b", "c" or "auto" in any case, or a CodeSet member.

    Raises:
        InvalidModeError: token is empty, None or unrecognised
    """
    if isinstance(token, CodeSet):
        return token
    if token is None:
        raise InvalidModeError("Code set must be specified")
    if not isinstance(token, str):
        raise InvalidModeError(f"Code set token must be a string, got {type(token).__name__}")

    key = token.strip().lower()
    if not key:
        raise InvalidModeError("Code set must be specified")

    code_set = _MODE_TOKENS.get(key)
    if code_set is None:
        raise InvalidModeError(f"Unknown code set: {token!r}")
    return code_set


def in_set(code: int, code_set: CodeSet) -> bool:
    """True if an ASCII code point belongs to set A, B or the A/B union."""
    low, high = ALPHABET_RANGES[code_set]
    return low <= code <= high


def exclusive_set(code: int) -> Optional[CodeSet]:
    """
    Set that a code point (0-127) can only be encoded in.

    Control codes live only in A, 0x60-0x7F only in B, everything else
    is shared.
    """
    if code < 0x20:
        return CodeSet.A
    if code >= 0x60:
        return CodeSet.B
    return None


def char_value(code: int, code_set: CodeSet) -> int:
    """
    Symbol value of an ASCII code point in set A or B.

    Raises:
        ValueError: code point outside the set
    """
    if not in_set(code, code_set):
        raise ValueError(f"{code:#04x} is not in {ALPHABET_NAMES[code_set]}")
    if code_set is CodeSet.A and code < 0x20:
        return code + 64
    return code - 32


def is_digit(char: str) -> bool:
    return char in DIGITS
