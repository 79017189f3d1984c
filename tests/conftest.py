"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from binkit.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from BINKIT_* variables and cached settings."""
    for name in ("BINKIT_LOG_LEVEL", "BINKIT_SIZE_POLICY", "BINKIT_DEMO_PATH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_tree(tmp_path):
    """
    Fixture providing a small directory tree.

    root/
        a.bin        (100 bytes)
        empty/
        sub/
            b.bin    (250 bytes)
            deeper/
                c.bin (7 bytes)
    """
    root = tmp_path / "tree"
    (root / "empty").mkdir(parents=True)
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "a.bin").write_bytes(b"a" * 100)
    (root / "sub" / "b.bin").write_bytes(b"b" * 250)
    (root / "sub" / "deeper" / "c.bin").write_bytes(b"c" * 7)
    return root


@pytest.fixture(scope="session")
def test_data():
    """Fixture providing test data."""
    return {
        "sample_bytes": bytes([0xBA, 0xAD, 0xF0, 0x0D]),
        "sample_hex_upper": "BAADF00D",
        "sample_hex_lower": "baadf00d",
        "sample_tree_total": 357,
    }
