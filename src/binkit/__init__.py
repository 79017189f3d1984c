"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "binkit Team"
__description__ = "Hex codec, sequence appenders and directory size utilities"

from .utils.encoding import binary_to_hex, hex_to_binary, ensure_bytes
from .utils.containers import add_range, add_to_container
from .core.directory import directory_size, scan_directory
from .models.schemas import SizePolicy, SizeReport, WalkError
from .exceptions import BinkitException, InvalidFormatError

__all__ = [
    "binary_to_hex",
    "hex_to_binary",
    "ensure_bytes",
    "add_range",
    "add_to_container",
    "directory_size",
    "scan_directory",
    "SizePolicy",
    "SizeReport",
    "WalkError",
    "BinkitException",
    "InvalidFormatError",
]
