"""Data models."""

from .schemas import SizePolicy, SizeReport, WalkError

__all__ = ["SizePolicy", "SizeReport", "WalkError"]
