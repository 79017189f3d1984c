"""Pydantic data models for binkit."""

from pydantic import BaseModel, Field
from typing import List
from enum import Enum


class SizePolicy(str, Enum):
    """Which entries contribute to a directory size."""
    REGULAR_FILES = "regular_files"
    ALL_ENTRIES = "all_entries"


class WalkError(BaseModel):
    """A failure recorded and skipped during a directory walk."""
    path: str = Field(..., description="Entry that could not be read")
    operation: str = Field(..., description="scandir, stat or classify")
    message: str = Field(..., description="Underlying OS error message")


class SizeReport(BaseModel):
    """Best-effort result of a directory walk."""
    root: str = Field(..., description="Root path that was walked")
    policy: SizePolicy
    total_bytes: int = Field(0, ge=0, description="Accumulated size in bytes")
    file_count: int = Field(0, ge=0, description="Regular files visited")
    directory_count: int = Field(0, ge=0, description="Subdirectories visited")
    errors: List[WalkError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when the walk finished without skipping anything."""
        return not self.errors
