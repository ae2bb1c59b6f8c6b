"""
Core encoding modules for the Code 128 encoder.
"""

from .encoder import (
    encode,
    calculate_checksum,
    EncodeOptions,
    EncodingRequest,
    EncodedSymbolSequence,
    EncoderHook,
)

__all__ = [
    "encode",
    "calculate_checksum",
    "EncodeOptions",
    "EncodingRequest",
    "EncodedSymbolSequence",
    "EncoderHook",
]
