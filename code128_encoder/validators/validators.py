"""
Code 128 Input Validation

Checks whether every character of an input string can be represented
in a requested code set:
- A: ASCII 0-95
- B: ASCII 32-127
- C: an even number of decimal digits
- AUTO: ASCII 0-127 (representable somewhere in A or B)

Validation is a soft check: failures come back as a ValidationResult,
never as an exception. Only an unusable mode token raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..charsets import (
    ALPHABET_NAMES,
    GS,
    CodeSet,
    in_set,
    parse_code_set,
)


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


# Precompiled pattern for set C data
PATTERNS = {
    'set_c': re.compile(r'(?:[0-9]{2})*'),
}

# Number of offending characters quoted in an error message
MAX_REPORTED = 5


def _describe(char: str) -> str:
    code = ord(char)
    if 0x20 < code < 0x7F:
        return repr(char)
    return f"{code:#04x}"


def _check_range(text: str, code_set: CodeSet, result: ValidationResult) -> None:
    invalid = [
        (index, char) for index, char in enumerate(text)
        if not in_set(ord(char), code_set)
    ]
    if not invalid:
        return

    result.valid = False
    result.meta['invalid_positions'] = [index for index, _ in invalid]
    quoted = ", ".join(
        f"{_describe(char)} at {index}" for index, char in invalid[:MAX_REPORTED]
    )
    if len(invalid) > MAX_REPORTED:
        quoted += f" (+{len(invalid) - MAX_REPORTED} more)"
    result.errors.append(f"Characters outside {ALPHABET_NAMES[code_set]}: {quoted}")


def _check_digit_pairs(segments: List[str], result: ValidationResult) -> None:
    for segment in segments:
        if PATTERNS['set_c'].fullmatch(segment):
            continue
        result.valid = False
        if not segment.isdigit() or not segment.isascii():
            result.errors.append(
                f"{ALPHABET_NAMES[CodeSet.C]} accepts only digits, got {segment!r}"
            )
        else:
            result.errors.append(
                f"{ALPHABET_NAMES[CodeSet.C]} requires an even number of digits, "
                f"got {len(segment)}"
            )
        return


def check_input(
    text: str,
    mode: Union[str, CodeSet, None],
    gs1_128: bool = False
) -> ValidationResult:
    """
    Validate input text against a code set alphabet.

    Args:
        text: Data to be encoded
        mode: "a", "b", "c", "auto" or a CodeSet
        gs1_128: Treat ASCII GS as FNC1, which every set can carry

    Returns:
        ValidationResult; errors name the violated alphabet

    Raises:
        InvalidModeError: mode is empty or unrecognised
    """
    code_set = parse_code_set(mode)
    result = ValidationResult(valid=True)
    result.meta['code_set'] = code_set.value

    if not text:
        result.valid = False
        result.errors.append("Input is empty")
        return result

    if code_set is CodeSet.C:
        segments = text.split(GS) if gs1_128 else [text]
        _check_digit_pairs(segments, result)
        return result

    data = text.replace(GS, "") if gs1_128 else text
    _check_range(data, code_set, result)
    return result


def validate_input(
    text: str,
    mode: Union[str, CodeSet, None],
    gs1_128: bool = False
) -> bool:
    """
    True if every character of text is representable in the requested set.

    Raises:
        InvalidModeError: mode is empty or unrecognised
    """
    return check_input(text, mode, gs1_128=gs1_128).valid


def first_error(result: ValidationResult) -> Optional[str]:
    return result.errors[0] if result.errors else None
