"""
Output formatters for the Code 128 encoder.
"""

from .font_formatter import (
    CODE128_FONT_TABLE,
    to_font_text,
    encode_to_font_text,
    encoding_to_dict,
    encode_to_json,
)

__all__ = [
    "CODE128_FONT_TABLE",
    "to_font_text",
    "encode_to_font_text",
    "encoding_to_dict",
    "encode_to_json",
]
