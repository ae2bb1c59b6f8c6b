"""
CLI interface for the Code 128 encoder.

Usage:
    python -m code128_encoder "<text>" [options]

Options:
    --mode {a,b,c,auto}   Code set to encode with (required)
    --gs1                 GS1-128 usage: leading FNC1, ASCII GS as FNC1
    --json                Output as JSON
    --font                Output only the barcode font text
    --validate-only       Check the input alphabet without encoding
    --verbose             Log encoder decisions to stderr
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .charsets import parse_code_set
from .core.encoder import EncodedSymbolSequence, EncodeOptions, encode
from .errors import Code128Error, EncodingPreconditionError, ValidationFailure
from .formatters.font_formatter import encoding_to_dict, to_font_text
from .validators.validators import ValidationResult, check_input


def format_result(text: str, sequence: EncodedSymbolSequence) -> str:
    """Format an encoding for display."""
    lines = [
        "=" * 60,
        "Code 128 Encoding",
        "=" * 60,
        f"Input: {text!r}",
        f"Code Set: {sequence.code_set.value}",
        f"Start: {sequence.start}",
        f"Data: {' '.join(str(v) for v in sequence.data)}",
        f"Checksum: {sequence.checksum}",
        f"Stop: {sequence.stop}",
        f"Symbol Count: {len(sequence)}",
    ]
    return '\n'.join(lines)


def format_validation(text: str, result: ValidationResult) -> str:
    """Format a validation result for display."""
    lines = [
        f"Input: {text!r}",
        f"Code Set: {result.meta.get('code_set')}",
        f"Valid: {result.valid}",
    ]
    for error in result.errors:
        lines.append(f"  Error: {error}")
    return '\n'.join(lines)


def _error_output(text: str, error: Code128Error) -> dict:
    output = {
        "error": str(error),
        "type": type(error).__name__,
        "input": text,
    }
    if isinstance(error, EncodingPreconditionError):
        output["alphabet"] = error.alphabet
        if error.index is not None:
            output["index"] = error.index
    if isinstance(error, ValidationFailure) and error.result is not None:
        output["errors"] = error.result.errors
    return output


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='code128_encoder',
        description='Encode text as a Code 128 barcode symbol sequence'
    )

    parser.add_argument(
        'text',
        help='Data to encode'
    )

    parser.add_argument(
        '--mode',
        required=True,
        help='Code set: a, b, c or auto'
    )

    parser.add_argument(
        '--gs1',
        action='store_true',
        help='GS1-128 usage (FNC1 after start, ASCII GS encoded as FNC1)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--font',
        action='store_true',
        help='Output only the barcode font text'
    )

    parser.add_argument(
        '--validate-only',
        action='store_true',
        help='Validate the input alphabet without encoding'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log encoder decisions'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.validate_only:
            result = check_input(args.text, args.mode, gs1_128=args.gs1)
            if args.json:
                output = {"input": args.text, "valid": result.valid, **result.meta}
                output["errors"] = result.errors
                print(json.dumps(output, indent=2, ensure_ascii=False))
            else:
                print(format_validation(args.text, result))
            return 0 if result.valid else 1

        options = EncodeOptions(gs1_128=args.gs1)
        sequence = encode(args.text, parse_code_set(args.mode), options=options)

    except Code128Error as e:
        if args.json:
            print(json.dumps(_error_output(args.text, e), indent=2, ensure_ascii=False))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.font:
        print(to_font_text(sequence))
    elif args.json:
        print(json.dumps(encoding_to_dict(args.text, sequence), indent=2, ensure_ascii=False))
    else:
        print(format_result(args.text, sequence))

    return 0


if __name__ == '__main__':
    sys.exit(main())
