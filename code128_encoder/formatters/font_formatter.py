"""
Barcode Font Formatter

Converts encoded symbol sequences into output for rendering collaborators:
- Font text for Code 128 barcode fonts (one character per symbol)
- Dict / JSON summaries for report datasets

The symbol-to-character mapping is a property of the font, so it is a
fixed lookup table that callers may replace. The default table matches
the common "code128.ttf" layout:
    0       -> chr(194)
    1..94   -> chr(value + 32)
    95..106 -> chr(value + 100)
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Union

from ..charsets import MAX_SYMBOL_VALUE, CodeSet
from ..core.encoder import EncodedSymbolSequence, EncodeOptions, encode
from ..errors import Code128Error


def _build_default_table() -> Dict[int, str]:
    table = {0: chr(194)}
    for value in range(1, 95):
        table[value] = chr(value + 32)
    for value in range(95, MAX_SYMBOL_VALUE + 1):
        table[value] = chr(value + 100)
    return table


CODE128_FONT_TABLE: Mapping[int, str] = _build_default_table()


def to_font_text(
    sequence: EncodedSymbolSequence,
    table: Optional[Mapping[int, str]] = None
) -> str:
    """
    Map every symbol of a sequence to its barcode font character.

    Args:
        sequence: Encoded symbol sequence
        table: Font lookup table (defaults to CODE128_FONT_TABLE)

    Returns:
        Text to print with the barcode font

    Raises:
        Code128Error: a symbol value has no entry in the table
    """
    table = CODE128_FONT_TABLE if table is None else table
    chars = []
    for value in sequence:
        try:
            chars.append(table[value])
        except KeyError:
            raise Code128Error(f"Font table has no character for symbol {value}") from None
    return "".join(chars)


def encode_to_font_text(
    text: str,
    mode: Union[str, CodeSet, None],
    options: Optional[EncodeOptions] = None,
    table: Optional[Mapping[int, str]] = None
) -> str:
    """Encode text and return it as barcode font text."""
    return to_font_text(encode(text, mode, options=options), table=table)


def encoding_to_dict(
    text: str,
    sequence: EncodedSymbolSequence,
    table: Optional[Mapping[int, str]] = None
) -> Dict[str, Any]:
    """
    Summarise an encoding for report datasets.

    Returns:
        {"input", "code_set", "symbols", "checksum", "font_text"}
    """
    return {
        "input": text,
        "code_set": sequence.code_set.value,
        "symbols": list(sequence.symbols),
        "checksum": sequence.checksum,
        "font_text": to_font_text(sequence, table=table),
    }


def encode_to_json(
    text: str,
    mode: Union[str, CodeSet, None],
    options: Optional[EncodeOptions] = None,
    indent: int = 2
) -> str:
    """
    Encode text and return the summary as a JSON string.

    Non-ASCII font characters are written as-is (ensure_ascii=False).
    """
    sequence = encode(text, mode, options=options)
    return json.dumps(encoding_to_dict(text, sequence), indent=indent, ensure_ascii=False)
