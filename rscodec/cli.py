"""Command-line entry points that encode and decode JSON message files."""

from __future__ import annotations

import json
import logging
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from rscodec.field import GaloisField
from rscodec.fileio import MessageFileError
from rscodec.lagrange import LagrangeDecoder, LagrangeEncoder
from rscodec.vandermonde import VandermondeDecoder, VandermondeEncoder

_PRIMITIVE_POLY = 0x1D
_PARITY_SHARDS = 12
_DATA_SHARDS = 6
_TOTAL_SHARDS = 18

_HEX_RUN = re.compile(r"[0-9a-fA-F_]+")
_JSON_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "\u2028": "\\u2028", "\u2029": "\\u2029"}


class _Encoder(Protocol):
    def encode(self, message: Iterable[int]) -> bytes: ...


class _Decoder(Protocol):
    def decode(self, shards: Iterable[int], indices: Iterable[int]) -> bytes: ...


@dataclass
class _InputFile:
    message: Optional[list[str]] = None
    start_index: int = 0


def _parse_hex_byte(text: str) -> int:
    """Parse a leading run of hex digits; anything unreadable counts as 0."""
    digits = text[2:] if text.startswith("0x") else text
    match = _HEX_RUN.match(digits.lstrip(" \t\r"))
    if match is None:
        return 0
    token = match.group()
    if "_" in token:
        return 0
    value = int(token, 16)
    return value if value <= 0xFF else 0


def hex_strings_to_bytes(hex_strings: Iterable[str]) -> bytes:
    """Convert strings such as "0x1f" to bytes, reading bad entries as 0."""
    return bytes(_parse_hex_byte(text) for text in hex_strings)


def bytes_to_hex_strings(data: Iterable[int]) -> list[str]:
    """Convert bytes to strings of the form "0x1f"."""
    return [f"0x{value:02x}" for value in bytes(data)]


def format_array(data: Iterable[int]) -> str:
    """Return the bytes as a decimal line followed by a hexadecimal line."""
    values = bytes(data)
    decimal = " ".join(str(value) for value in values)
    hexadecimal = " ".join(f"0x{value:02x}" for value in values)
    return f"[ {decimal} ]\nHexadecimal: [ {hexadecimal} ]"


def _load_input(path: str) -> _InputFile:
    try:
        raw = Path(path).read_bytes()
    except OSError as err:
        raise MessageFileError(str(err)) from err
    try:
        document = json.loads(raw)
    except ValueError as err:
        raise MessageFileError(f"invalid JSON: {err}") from err

    result = _InputFile()
    if document is None:
        return result
    if not isinstance(document, dict):
        raise MessageFileError("top-level JSON value must be an object")
    for key, value in document.items():
        name = key.casefold()
        if name == "message":
            if value is None:
                result.message = None
            elif isinstance(value, list) and all(item is None or isinstance(item, str) for item in value):
                result.message = ["" if item is None else item for item in value]
            else:
                raise MessageFileError('"message" must be an array of strings')
        elif name == "start_index":
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise MessageFileError('"start_index" must be an integer')
            result.start_index = value
    return result


def _save_json(path: str, document: dict) -> None:
    text = json.dumps(document, indent=2, ensure_ascii=False)
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    try:
        Path(path).write_bytes(text.encode("utf-8"))
    except OSError as err:
        raise MessageFileError(str(err)) from err


@contextmanager
def _echo_progress() -> Iterator[None]:
    """Show the codec's step-by-step log on standard output while running."""
    logger = logging.getLogger("rscodec")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


def _arguments(argv: Optional[Sequence[str]], usage: str) -> Optional[tuple[str, str]]:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(usage)
        return None
    return args[0], args[1]


def _run_encode(
    argv: Optional[Sequence[str]],
    prog: str,
    make_encoder: Callable[[GaloisField, int, int], _Encoder],
    method: str,
) -> int:
    paths = _arguments(argv, f"Usage: {prog} <input file> <output file>")
    if paths is None:
        return 2
    input_file, output_file = paths

    with _echo_progress():
        field = GaloisField(_PRIMITIVE_POLY)
        try:
            source = _load_input(input_file)
        except MessageFileError as err:
            print(f"Unable to read input file: {err}")
            return 1

        message = hex_strings_to_bytes(source.message or [])
        encoder = make_encoder(field, len(message), _PARITY_SHARDS)
        encoded = encoder.encode(message)

        print("Original message (message shards):")
        print(format_array(message))
        print(f"\nEncoding result generated by {method} (codeword shards):")
        print(format_array(encoded))

        try:
            _save_json(
                output_file,
                {"message": source.message, "encoded": bytes_to_hex_strings(encoded)},
            )
        except MessageFileError as err:
            print(f"Unable to save output file: {err}")
            return 1

    print("\nEncoding result has been saved to", output_file)
    return 0


def _run_decode(
    argv: Optional[Sequence[str]],
    prog: str,
    make_decoder: Callable[[GaloisField, int, int], _Decoder],
) -> int:
    paths = _arguments(argv, f"Usage: {prog} <input_file> <output_file>")
    if paths is None:
        return 2
    input_file, output_file = paths

    with _echo_progress():
        field = GaloisField(_PRIMITIVE_POLY)
        try:
            source = _load_input(input_file)
        except MessageFileError as err:
            print(f"Cannot read input file: {err}")
            return 1

        shards = hex_strings_to_bytes(source.message or [])
        decoder = make_decoder(field, _DATA_SHARDS, _TOTAL_SHARDS)
        indices = [source.start_index + offset for offset in range(len(shards))]

        print("Input encoded shards:")
        print(format_array(shards))
        print("Used shard indices:", "[" + " ".join(str(index) for index in indices) + "]")

        try:
            decoded = decoder.decode(shards, indices)
        except (ValueError, IndexError) as err:
            print(f"Decoding failed: {err}", file=sys.stderr)
            return 1

        print("\nDecoding result (original message):")
        print(format_array(decoded))

        try:
            _save_json(
                output_file,
                {"encoded_shards": source.message, "decoded_data": bytes_to_hex_strings(decoded)},
            )
        except MessageFileError as err:
            print(f"Cannot save output file: {err}")
            return 1

    print("\nDecoding result saved to", output_file)
    return 0


def lagrange_encode_main(argv: Optional[Sequence[str]] = None) -> int:
    """Encode a message file with the Lagrange interpolation encoder."""
    return _run_encode(argv, "lagrange-encode", LagrangeEncoder, "interpolation")


def lagrange_decode_main(argv: Optional[Sequence[str]] = None) -> int:
    """Decode a shard file with the Lagrange interpolation decoder."""
    return _run_decode(argv, "lagrange-decode", LagrangeDecoder)


def vandermonde_encode_main(argv: Optional[Sequence[str]] = None) -> int:
    """Encode a message file with the Vandermonde encoder."""
    return _run_encode(argv, "vandermonde-encode", VandermondeEncoder, "Vandermonde method")


def vandermonde_decode_main(argv: Optional[Sequence[str]] = None) -> int:
    """Decode a shard file with the Vandermonde decoder."""
    return _run_decode(argv, "vandermonde-decode", VandermondeDecoder)