"""
Code 128 Barcode Encoder

Encodes text into Code 128 symbol sequences (ISO/IEC 15417) for barcode
fonts and rendering collaborators, and validates input against the
A, B and C character sets.

GS1-128 and ISBT-128 are usages of Code 128 and go through the same encoder.
"""

from .charsets import CodeSet, parse_code_set
from .errors import (
    Code128Error,
    InvalidModeError,
    ValidationFailure,
    EncodingPreconditionError,
)
from .core.encoder import (
    encode,
    calculate_checksum,
    EncodeOptions,
    EncodingRequest,
    EncodedSymbolSequence,
    EncoderHook,
)
from .validators.validators import (
    validate_input,
    check_input,
    ValidationResult,
)
from .formatters.font_formatter import (
    CODE128_FONT_TABLE,
    to_font_text,
    encode_to_font_text,
    encode_to_json,
)

__version__ = "1.0.0"
__all__ = [
    "CodeSet",
    "parse_code_set",
    "Code128Error",
    "InvalidModeError",
    "ValidationFailure",
    "EncodingPreconditionError",
    "encode",
    "calculate_checksum",
    "EncodeOptions",
    "EncodingRequest",
    "EncodedSymbolSequence",
    "EncoderHook",
    "validate_input",
    "check_input",
    "ValidationResult",
    "CODE128_FONT_TABLE",
    "to_font_text",
    "encode_to_font_text",
    "encode_to_json",
]
