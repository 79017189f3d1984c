#!/usr/bin/env python3
"""
Quick start guide for binkit.

Usage:
    python examples/quick_start.py [DIRECTORY]

The directory defaults to BINKIT_DEMO_PATH, then the current directory.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from binkit.config import get_settings
from binkit.core.directory import scan_directory
from binkit.exceptions import InvalidFormatError
from binkit.utils.encoding import binary_to_hex, hex_to_binary
from binkit.utils.logger import setup_logger


def main():
    """Run a short tour of the codec and the directory walker."""
    setup_logger()
    settings = get_settings()

    print("=" * 70)
    print("BINKIT QUICK START EXAMPLE")
    print("=" * 70)
    print()

    print("Step 1: Encode binary data")
    print("-" * 70)
    data = bytes([0xBA, 0xAD, 0xF0, 0x0D])
    print(f"  Uppercase: {binary_to_hex(data)}")
    print(f"  Lowercase: {binary_to_hex(data, uppercase=False)}")
    print()

    print("Step 2: Decode it back")
    print("-" * 70)
    decoded = hex_to_binary("baadf00d")
    print(f"  Decoded: {list(decoded)} (round trip ok: {decoded == data})")
    try:
        hex_to_binary("ABC")
    except InvalidFormatError as e:
        print(f"  Rejected 'ABC': {e}")
    print()

    print("Step 3: Measure a directory")
    print("-" * 70)
    target = sys.argv[1] if len(sys.argv) > 1 else (settings.demo_path or ".")
    report = scan_directory(target)
    print(f"  Directory size: {report.total_bytes} bytes")
    print(f"  Files: {report.file_count}  Subdirectories: {report.directory_count}")
    print(f"  Policy: {report.policy.value}")
    if not report.ok:
        print(f"  Skipped {len(report.errors)} entries (see log output)")
    print()


if __name__ == "__main__":
    main()
