"""Custom exceptions for binkit."""

from typing import Optional, Union


class BinkitException(Exception):
    """Base exception for all binkit errors."""
    pass


# Codec Errors
class CodecError(BinkitException):
    """Base exception for encoding/decoding errors."""
    pass


class InvalidFormatError(CodecError, ValueError):
    """Raised when a hex string is malformed (odd length or non-hex character)."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


# Walker Errors
class WalkerError(BinkitException):
    """Base exception for directory walk errors."""
    pass


class DirectoryAccessError(WalkerError):
    """Raised when an entry cannot be enumerated or stat'ed during a walk."""

    def __init__(self, path: Union[str, bytes], operation: str, cause: OSError):
        super().__init__(f"{operation} failed for {path}: {cause}")
        self.path = path
        self.operation = operation
        self.cause = cause
