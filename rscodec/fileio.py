"""Reading messages from and writing encoded shards to JSON files."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DEFAULT_MESSAGE_LENGTH = 6


class MessageFileError(Exception):
    """Raised when a message file cannot be read, parsed or written."""


def _parse_hex_byte(text: str) -> int:
    digits = text[2:] if text.startswith("0x") else text
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"invalid hex byte {text!r}")
    value = int(digits, 16)
    if value > 0xFF:
        raise ValueError(f"hex value {text!r} out of byte range")
    return value


def _message_field(document: object) -> list:
    if document is None:
        return []
    if not isinstance(document, dict):
        raise ValueError("top-level JSON value must be an object")
    items: object = None
    for key, value in document.items():
        if key.casefold() == "message":
            items = value
    if items is None:
        return []
    if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
        raise ValueError('"message" must be an array of strings')
    return items


def read_message(path: PathLike) -> bytes:
    """Read the hex strings under "message" in a JSON file as bytes."""
    try:
        raw = Path(path).read_bytes()
    except OSError as err:
        raise MessageFileError(f"failed to open file: {err}") from err

    try:
        items = _message_field(json.loads(raw))
    except ValueError as err:
        raise MessageFileError(f"failed to parse JSON: {err}") from err

    try:
        return bytes(_parse_hex_byte(item) for item in items)
    except ValueError as err:
        raise MessageFileError(f"failed to parse hex value: {err}") from err


def _hex_strings(data: Iterable[int]) -> list[str]:
    return [f"0x{value:02x}" for value in bytes(data)]


def write_encoded(path: PathLike, encoded: Iterable[int], original_message: Iterable[int]) -> None:
    """Write the original message and its encoding as hex strings to a JSON file."""
    document = {
        "message": _hex_strings(original_message),
        "encoded": _hex_strings(encoded),
    }
    text = json.dumps(document, indent=2)
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as err:
        raise MessageFileError(f"failed to write file: {err}") from err


def write_encoded_default(path: PathLike, encoded: Iterable[int]) -> None:
    """Write an encoding, taking its first six bytes as the original message."""
    data = bytes(encoded)
    write_encoded(path, data, data[:_DEFAULT_MESSAGE_LENGTH])