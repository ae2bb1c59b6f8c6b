"""
Performance benchmarks for the Code 128 encoder.

Reports encode/validate timings per input together with the symbol count
AUTO produces versus a forced set B encoding.
"""

import time
from typing import Callable, List, Tuple

from code128_encoder import (
    Code128Error,
    EncodeOptions,
    encode,
    validate_input,
)


def time_per_call_us(func: Callable[[], object], iterations: int = 2000) -> Tuple[float, float]:
    """
    Time repeated calls.

    Returns:
        (median_us, p95_us)
    """
    samples: List[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        samples.append((time.perf_counter() - start) * 1_000_000)

    samples.sort()
    return samples[len(samples) // 2], samples[int(len(samples) * 0.95)]


def symbols_in_b(text: str) -> str:
    """Symbol count of a forced set B encoding, or '-' when B cannot carry the text."""
    try:
        return str(len(encode(text, "b")))
    except Code128Error:
        return "-"


def run_benchmarks():
    """Run all benchmarks and print results."""
    cases = [
        ("Short text", "TEST"),
        ("GTIN digits", "0106285096000842"),
        ("Order number", "ORDER-2024-000123456"),
        ("Control + lower", "line1\nline2\tend"),
        ("Latin-1", "Crème brûlée 12345678"),
        ("Long document number", "INV" + "0123456789" * 8),
    ]

    print(f"{'case':24} {'auto':>5} {'B':>5} {'encode us':>12} {'validate us':>12}")
    for name, text in cases:
        symbols = len(encode(text, "auto"))
        enc_median, enc_p95 = time_per_call_us(lambda s=text: encode(s, "auto"))
        val_median, _ = time_per_call_us(lambda s=text: validate_input(s, "auto"))
        print(
            f"{name:24} {symbols:>5} {symbols_in_b(text):>5} "
            f"{enc_median:7.1f}/{enc_p95:<4.0f} {val_median:12.1f}"
        )

    options = EncodeOptions(gs1_128=True)
    gs1_text = "0106285096000842\x1d10BATCH123\x1d17290131"
    median, p95 = time_per_call_us(lambda: encode(gs1_text, "auto", options=options))
    print(f"{'GS1-128 element string':24} {len(encode(gs1_text, 'auto', options=options)):>5} "
          f"{'-':>5} {median:7.1f}/{p95:<4.0f}")


if __name__ == "__main__":
    run_benchmarks()
