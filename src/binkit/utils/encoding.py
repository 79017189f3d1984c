"""Hex encoding and decoding utilities."""

import logging
from typing import Iterable, Union

from binkit.exceptions import InvalidFormatError

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

BytesLike = Union[bytes, bytearray, memoryview]


def ensure_bytes(data: Union[BytesLike, str]) -> bytes:
    """
    Ensure data is in bytes format.

    Args:
        data: Bytes-like object or string

    Returns:
        bytes: Data as bytes (strings are UTF-8 encoded)
    """
    if isinstance(data, bytes):
        return data
    elif isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    elif isinstance(data, str):
        return data.encode('utf-8')
    else:
        raise TypeError(f"Expected bytes or str, got {type(data)}")


def binary_to_hex(data: Union[BytesLike, Iterable[int]], uppercase: bool = True) -> str:
    """
    Convert binary data to a hexadecimal string.

    Every byte becomes two zero-padded digits, high nibble first.

    Args:
        data: Bytes-like object or iterable of ints in range 0..255
        uppercase: Emit A-F instead of a-f

    Returns:
        str: Hexadecimal string without prefix ("" for empty input)
    """
    if isinstance(data, int):
        raise TypeError(f"Expected a byte sequence, got {type(data)}")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)
    hex_str = data.hex()
    return hex_str.upper() if uppercase else hex_str


def hex_to_binary(hex_str: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    Decoding is case-insensitive. No prefix, whitespace or separators
    are accepted.

    Args:
        hex_str: Hexadecimal string

    Returns:
        bytes: Decoded bytes

    Raises:
        TypeError: If hex_str is not a str
        InvalidFormatError: If the length is odd or a character is not a hex digit
    """
    if not isinstance(hex_str, str):
        raise TypeError(f"Expected str, got {type(hex_str)}")

    if len(hex_str) % 2 != 0:
        logger.debug("Rejecting hex string of odd length %d", len(hex_str))
        raise InvalidFormatError(
            f"Hex string must have even number of characters, got {len(hex_str)}"
        )

    for position, char in enumerate(hex_str):
        if char not in HEX_DIGITS:
            logger.debug("Rejecting hex string: %r at position %d", char, position)
            raise InvalidFormatError(
                f"Invalid hex character {char!r} at position {position}",
                position=position,
            )

    return bytes.fromhex(hex_str)
