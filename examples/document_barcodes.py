#!/usr/bin/env python3
"""
Document Report Barcodes

Shows how a report dataset turns document numbers into barcode font text,
and how an encoder hook can take over encoding for selected documents.
"""

import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from code128_encoder import (
    CodeSet,
    EncodeOptions,
    EncodedSymbolSequence,
    Code128Error,
    check_input,
    encode,
    to_font_text,
)


def example_1_report_lines():
    """Example 1: Font text for a batch of document numbers"""
    print("=" * 70)
    print("Example 1: Document numbers as barcode font text")
    print("=" * 70)

    documents = ["SO-000123", "PO-2024-0042", "10293847", "inv/7788"]

    for number in documents:
        sequence = encode(number, CodeSet.AUTO)
        print(f"{number:15} -> {to_font_text(sequence)!r} ({len(sequence)} symbols)")

    print()


def example_2_validation():
    """Example 2: Pre-checking a field before printing"""
    print("=" * 70)
    print("Example 2: Validating a barcode field")
    print("=" * 70)

    for text, mode in [("ABC123", "a"), ("abc", "a"), ("12345", "c")]:
        result = check_input(text, mode)
        status = "OK" if result.valid else "; ".join(result.errors)
        print(f"{text!r:10} mode {mode}: {status}")

    print()


def example_3_hook():
    """Example 3: A hook that takes over encoding for legacy documents"""
    print("=" * 70)
    print("Example 3: Encoder hook")
    print("=" * 70)

    def legacy_scanners(request) -> Optional[EncodedSymbolSequence]:
        # Old warehouse scanners only read set A
        if request.text.startswith("LEGACY-"):
            return encode(request.text, CodeSet.A)
        return None

    options = EncodeOptions(hooks=[legacy_scanners])

    for number in ["LEGACY-1", "SO-000123", "LEGACY-x"]:
        try:
            sequence = encode(number, "b", options=options)
        except Code128Error as e:
            print(f"{number}: {e}")
            continue
        print(f"{number:10} -> {list(sequence)}")

    print()


if __name__ == "__main__":
    example_1_report_lines()
    example_2_validation()
    example_3_hook()
