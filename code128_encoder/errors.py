"""
Exceptions raised by the Code 128 encoder.
"""

from __future__ import annotations

from typing import Any, Optional


class Code128Error(ValueError):
    """Base class for encoder failures."""


class InvalidModeError(Code128Error):
    """The requested code set token is empty or unrecognised."""


class ValidationFailure(Code128Error):
    """
    Input rejected before encoding (e.g. empty text).

    Attributes:
        result: the ValidationResult describing the failure
    """

    def __init__(self, message: str, result: Optional[Any] = None):
        super().__init__(message)
        self.result = result


class EncodingPreconditionError(Code128Error):
    """
    Input cannot be encoded in the requested code set.

    Raised for characters outside an explicit alphabet, odd-length
    set C data and code points above 255.

    Attributes:
        alphabet: name of the violated alphabet
        index: position of the offending character, if known
    """

    def __init__(self, message: str, alphabet: str = "", index: Optional[int] = None):
        super().__init__(message)
        self.alphabet = alphabet
        self.index = index
