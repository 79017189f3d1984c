"""Property-based tests using Hypothesis for codec and appender invariants."""

import pytest
from hypothesis import given, strategies as st, settings, HealthCheck

from binkit.exceptions import InvalidFormatError
from binkit.utils.containers import add_range, add_to_container
from binkit.utils.encoding import binary_to_hex, hex_to_binary

hex_text = st.text(alphabet="0123456789abcdefABCDEF")


class TestCodecProperties:
    """Property-based tests for the hex codec."""

    @given(st.binary(), st.booleans())
    @settings(max_examples=200)
    def test_decode_inverts_encode(self, data: bytes, uppercase: bool):
        """Property: decoding an encoding gives back the original bytes."""
        assert hex_to_binary(binary_to_hex(data, uppercase)) == data

    @given(st.binary(), st.booleans())
    def test_encoding_shape(self, data: bytes, uppercase: bool):
        """Property: two characters per byte, in the requested case."""
        encoded = binary_to_hex(data, uppercase)
        assert len(encoded) == 2 * len(data)
        assert encoded == (encoded.upper() if uppercase else encoded.lower())

    @given(hex_text.filter(lambda s: len(s) % 2 == 0))
    @settings(suppress_health_check=[HealthCheck.filter_too_much])
    def test_encode_normalizes_case(self, text: str):
        """Property: hex -> bytes -> hex only changes letter case."""
        assert binary_to_hex(hex_to_binary(text)) == text.upper()
        assert binary_to_hex(hex_to_binary(text), uppercase=False) == text.lower()

    @given(hex_text.filter(lambda s: len(s) % 2 == 1))
    @settings(suppress_health_check=[HealthCheck.filter_too_much])
    def test_odd_length_always_rejected(self, text: str):
        """Property: no odd-length string decodes."""
        with pytest.raises(InvalidFormatError):
            hex_to_binary(text)

    @given(hex_text, st.characters().filter(lambda c: c not in "0123456789abcdefABCDEF"), hex_text)
    def test_foreign_character_rejected(self, left: str, bad: str, right: str):
        """Property: any non-hex character makes an even string invalid."""
        text = left + bad + right
        if len(text) % 2:
            text += "0"
        with pytest.raises(InvalidFormatError):
            hex_to_binary(text)


class TestAppenderProperties:
    """Property-based tests for the sequence appenders."""

    @given(st.lists(st.integers()), st.lists(st.integers()))
    def test_add_range_appends(self, existing: list, values: list):
        """Property: add_range equals list concatenation."""
        container = list(existing)
        add_range(container, *values)
        assert container == existing + values

    @given(st.lists(st.integers()), st.lists(st.integers()))
    def test_add_to_container_appends(self, existing: list, values: list):
        """Property: add_to_container equals list concatenation."""
        container = list(existing)
        add_to_container(container, iter(values))
        assert container == existing + values
