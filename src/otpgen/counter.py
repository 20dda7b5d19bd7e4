"""Fixed-width encoding of the moving factor (RFC 4226, Section 5.2)."""

from otpgen.errors import InvalidCounterError

COUNTER_SIZE = 8
MAX_COUNTER = 2 ** 64 - 1


def encode_counter(counter: int) -> bytes:
    """
    Encode a counter as 8 big-endian bytes.

    Args:
        counter: Unsigned 64-bit counter value.

    Returns:
        The counter in network byte order, most significant byte first.

    Raises:
        InvalidCounterError: If the counter is not an integer in 0..2**64-1.
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidCounterError(
            f"Counter must be an integer, got {type(counter).__name__}"
        )
    if not 0 <= counter <= MAX_COUNTER:
        raise InvalidCounterError(f"Counter {counter} is outside 0..{MAX_COUNTER}")

    return counter.to_bytes(COUNTER_SIZE, byteorder="big")


def decode_counter(data: bytes) -> int:
    """Decode 8 big-endian bytes back into the counter value."""
    if len(data) != COUNTER_SIZE:
        raise InvalidCounterError(
            f"Encoded counter must be {COUNTER_SIZE} bytes, got {len(data)}"
        )
    return int.from_bytes(data, byteorder="big")
