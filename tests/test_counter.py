"""Tests for counter encoding."""

import pytest

from otpgen.counter import MAX_COUNTER, decode_counter, encode_counter
from otpgen.errors import InvalidCounterError


def test_encode_counter_big_endian():
    """Test that byte 0 is the most significant byte."""
    assert encode_counter(0) == b"\x00" * 8
    assert encode_counter(1) == b"\x00\x00\x00\x00\x00\x00\x00\x01"
    assert encode_counter(0x0102030405060708) == bytes([1, 2, 3, 4, 5, 6, 7, 8])
    assert encode_counter(MAX_COUNTER) == b"\xff" * 8


@pytest.mark.parametrize("counter", [0, 1, 255, 256, 52930525, 2**32, MAX_COUNTER])
def test_counter_round_trip(counter):
    """Test that decoding the encoded bytes yields the original counter."""
    encoded = encode_counter(counter)
    assert len(encoded) == 8
    assert decode_counter(encoded) == counter


@pytest.mark.parametrize("counter", [-1, MAX_COUNTER + 1, 1.0, "1", None, False])
def test_encode_counter_invalid(counter):
    """Test that values outside the unsigned 64-bit domain are rejected."""
    with pytest.raises(InvalidCounterError):
        encode_counter(counter)


def test_decode_counter_wrong_length():
    """Test that only 8-byte inputs are decoded."""
    with pytest.raises(InvalidCounterError, match="must be 8 bytes"):
        decode_counter(b"\x00" * 7)
