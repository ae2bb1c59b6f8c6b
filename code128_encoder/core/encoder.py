"""
Code 128 Symbol Encoder

Turns input text plus a requested code set into the symbol value
sequence of a Code 128 barcode (ISO/IEC 15417):

    [start] [data / shift / switch ...] [checksum] [stop]

Features:
- Explicit A, B and C encoding
- AUTO encoding with minimal-symbol set selection (ISO/IEC 15417 Annex E)
- Latin-1 extension through FNC4, one FNC4 per extended character
- GS1-128 usage: FNC1 after the start symbol, ASCII GS encoded as FNC1
- Encoder hooks that may supply a result before the default algorithm

Checksum rule:
    checksum = (start + sum(position * value)) mod 103
with positions counted from 1 at the first symbol after the start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..charsets import (
    ALPHABET_NAMES,
    CHECKSUM_MODULUS,
    FNC1,
    FNC4_SYMBOLS,
    GS,
    SHIFT,
    START_SYMBOLS,
    STOP,
    SWITCH_SYMBOLS,
    CodeSet,
    char_value,
    exclusive_set,
    in_set,
    is_digit,
    parse_code_set,
)
from ..errors import EncodingPreconditionError, ValidationFailure
from ..validators.validators import ValidationResult, check_input, first_error


logger = logging.getLogger(__name__)

# Digits needed before switching into set C mid-data
MIN_DIGITS_FOR_C = 4


@dataclass(frozen=True)
class EncodingRequest:
    """Text plus the code set requested for it."""
    text: str
    code_set: CodeSet


@dataclass(frozen=True)
class EncodedSymbolSequence:
    """
    Complete symbol sequence of one barcode.

    Attributes:
        symbols: start, data/shift/switch symbols, checksum, stop
        code_set: the code set that was requested (AUTO included)
    """
    symbols: Tuple[int, ...]
    code_set: CodeSet

    @property
    def start(self) -> int:
        return self.symbols[0]

    @property
    def data(self) -> Tuple[int, ...]:
        """Symbols between start and checksum."""
        return self.symbols[1:-2]

    @property
    def checksum(self) -> int:
        return self.symbols[-2]

    @property
    def stop(self) -> int:
        return self.symbols[-1]

    def __iter__(self) -> Iterator[int]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, index):
        return self.symbols[index]


EncoderHook = Callable[[EncodingRequest], Optional[EncodedSymbolSequence]]


@dataclass
class EncodeOptions:
    """
    Configuration options for encoding.

    Attributes:
        gs1_128: Emit FNC1 after the start symbol and encode ASCII GS as FNC1
        hooks: Called in order before the default algorithm; the first one
            returning a sequence wins
    """
    gs1_128: bool = False
    hooks: Sequence[EncoderHook] = field(default_factory=tuple)


def calculate_checksum(values: Iterable[int]) -> int:
    """
    Modulo 103 checksum of a start symbol followed by data symbols.

    Args:
        values: Start symbol value, then every symbol up to (not including)
            the checksum

    Returns:
        Checksum symbol value (0-102)
    """
    total = 0
    for position, value in enumerate(values):
        total += value * max(1, position)
    return total % CHECKSUM_MODULUS


def _finish(symbols: List[int], code_set: CodeSet) -> EncodedSymbolSequence:
    symbols.append(calculate_checksum(symbols))
    symbols.append(STOP)
    return EncodedSymbolSequence(symbols=tuple(symbols), code_set=code_set)


def _precondition(message: str, code_set: CodeSet, index: Optional[int] = None):
    return EncodingPreconditionError(message, alphabet=ALPHABET_NAMES[code_set], index=index)


# ---------------------------------------------------------------------------
# Explicit sets
# ---------------------------------------------------------------------------

def _encode_char(char: str, index: int, code_set: CodeSet) -> List[int]:
    """Values for one character in set A or B, FNC4-prefixed when extended."""
    code = ord(char)
    if code > 0xFF:
        raise _precondition(
            f"Character {char!r} at {index} is outside Latin-1 and cannot be encoded",
            code_set, index,
        )

    if code >= 0x80:
        low = code - 0x80
        if not in_set(low, code_set):
            raise _precondition(
                f"Character {char!r} at {index} cannot be encoded in "
                f"{ALPHABET_NAMES[code_set]} even with FNC4",
                code_set, index,
            )
        return [FNC4_SYMBOLS[code_set], char_value(low, code_set)]

    if not in_set(code, code_set):
        raise _precondition(
            f"Character {char!r} at {index} is outside {ALPHABET_NAMES[code_set]}",
            code_set, index,
        )
    return [char_value(code, code_set)]


def _encode_ab(text: str, code_set: CodeSet, gs1_128: bool) -> List[int]:
    symbols = [START_SYMBOLS[code_set]]
    if gs1_128:
        symbols.append(FNC1)

    for index, char in enumerate(text):
        if gs1_128 and char == GS:
            symbols.append(FNC1)
        else:
            symbols.extend(_encode_char(char, index, code_set))
    return symbols


def _encode_c(text: str, gs1_128: bool) -> List[int]:
    check = check_input(text, CodeSet.C, gs1_128=gs1_128)
    if not check.valid:
        raise _precondition(first_error(check), CodeSet.C)

    symbols = [START_SYMBOLS[CodeSet.C]]
    if gs1_128:
        symbols.append(FNC1)

    segments = text.split(GS) if gs1_128 else [text]
    for number, segment in enumerate(segments):
        if number:
            symbols.append(FNC1)
        for i in range(0, len(segment), 2):
            symbols.append(int(segment[i:i + 2]))
    return symbols


# ---------------------------------------------------------------------------
# AUTO
# ---------------------------------------------------------------------------

def _digit_run(text: str, start: int) -> int:
    """Number of consecutive ASCII digits beginning at start."""
    end = start
    while end < len(text) and is_digit(text[end]):
        end += 1
    return end - start


def _base_code(char: str) -> Optional[int]:
    """ASCII code point a character is encoded as (Latin-1 drops its high bit)."""
    code = ord(char)
    if code > 0xFF:
        return None
    return code - 0x80 if code >= 0x80 else code


def _needed_set(char: str, gs1_128: bool) -> Optional[CodeSet]:
    if gs1_128 and char == GS:
        return None
    code = _base_code(char)
    if code is None:
        return None
    return exclusive_set(code)


def _choose_ab(text: str, start: int, gs1_128: bool) -> CodeSet:
    """
    A if a control character occurs before any lower-case-range character,
    otherwise B.
    """
    for char in text[start:]:
        needed = _needed_set(char, gs1_128)
        if needed is not None:
            return needed
    return CodeSet.B


def _choose_start(text: str, gs1_128: bool) -> CodeSet:
    run = _digit_run(text, 0)
    if run >= MIN_DIGITS_FOR_C or (run == len(text) and run % 2 == 0):
        return CodeSet.C
    return _choose_ab(text, 0, gs1_128)


def _encode_auto(text: str, gs1_128: bool) -> List[int]:
    current = _choose_start(text, gs1_128)
    logger.debug("AUTO encoding %r starts in set %s", text, current.value)

    symbols = [START_SYMBOLS[current]]
    if gs1_128:
        symbols.append(FNC1)

    def switch(target: CodeSet) -> None:
        nonlocal current
        logger.debug("Switching from set %s to %s at %d", current.value, target.value, i)
        symbols.append(SWITCH_SYMBOLS[(current, target)])
        current = target

    i = 0
    n = len(text)
    while i < n:
        char = text[i]

        if gs1_128 and char == GS:
            symbols.append(FNC1)
            i += 1
            continue

        run = _digit_run(text, i)

        if current is CodeSet.C:
            if run >= 2:
                symbols.append(int(text[i:i + 2]))
                i += 2
            else:
                switch(_choose_ab(text, i, gs1_128))
            continue

        if run >= MIN_DIGITS_FOR_C:
            if run % 2:
                symbols.append(char_value(ord(char), current))
                i += 1
            switch(CodeSet.C)
            continue

        code = _base_code(char)
        if code is None:
            raise _precondition(
                f"Character {char!r} at {i} is outside Latin-1 and cannot be encoded",
                CodeSet.AUTO, i,
            )
        extended = ord(char) >= 0x80
        needed = exclusive_set(code)

        if needed is not None and needed is not current:
            following = _needed_set(text[i + 1], gs1_128) if i + 1 < n else None
            if following is current and not extended:
                symbols.append(SHIFT)
                symbols.append(char_value(code, needed))
                i += 1
                continue
            switch(needed)

        if extended:
            symbols.append(FNC4_SYMBOLS[current])
        symbols.append(char_value(code, current))
        i += 1

    return symbols


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def encode(
    text: str,
    mode: Union[str, CodeSet, None],
    options: Optional[EncodeOptions] = None
) -> EncodedSymbolSequence:
    """
    Encode text as a Code 128 symbol sequence.

    Args:
        text: Data to encode
        mode: "a", "b", "c", "auto" (any case) or a CodeSet
        options: EncodeOptions (GS1-128 usage, hooks)

    Returns:
        EncodedSymbolSequence ending in checksum and stop symbols

    Raises:
        InvalidModeError: mode is empty or unrecognised
        ValidationFailure: text is empty
        EncodingPreconditionError: text cannot be encoded in the requested set
    """
    code_set = parse_code_set(mode)
    options = options or EncodeOptions()

    if not text:
        result = ValidationResult(valid=False, errors=["Input is empty"])
        result.meta['code_set'] = code_set.value
        raise ValidationFailure("Cannot encode empty input", result=result)

    request = EncodingRequest(text=text, code_set=code_set)
    for hook in options.hooks:
        handled = hook(request)
        if handled is not None:
            logger.debug("Encoding of %r supplied by hook %r", text, hook)
            return handled

    if code_set is CodeSet.AUTO:
        symbols = _encode_auto(text, options.gs1_128)
    elif code_set is CodeSet.C:
        symbols = _encode_c(text, options.gs1_128)
    else:
        symbols = _encode_ab(text, code_set, options.gs1_128)

    sequence = _finish(symbols, code_set)
    logger.debug("Encoded %r in set %s: %s", text, code_set.value, sequence.symbols)
    return sequence
