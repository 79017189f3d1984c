"""Encoding, sequence and logging helpers."""

from .encoding import binary_to_hex, hex_to_binary, ensure_bytes
from .containers import add_range, add_to_container

__all__ = [
    "binary_to_hex",
    "hex_to_binary",
    "ensure_bytes",
    "add_range",
    "add_to_container",
]
