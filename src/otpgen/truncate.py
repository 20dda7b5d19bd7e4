"""Dynamic truncation and decimal formatting (RFC 4226, Section 5.3)."""

from otpgen.errors import OutOfBoundsError

MIN_DIGITS = 6
MAX_DIGITS = 8

# shortest digest (SHA1) still leaves room for offset 15 plus 4 bytes
MIN_DIGEST_SIZE = 20


def check_digits(digits: int) -> int:
    """
    Validate the code length.

    Raises:
        OutOfBoundsError: If ``digits`` is not an integer in 6..8.
    """
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise OutOfBoundsError(f"Digits must be an integer, got {digits!r}")
    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise OutOfBoundsError(
            f"Digits must be between {MIN_DIGITS} and {MAX_DIGITS}, got {digits}"
        )
    return digits


def dynamic_truncate(digest: bytes) -> int:
    """
    Extract a 31-bit integer from an HMAC digest.

    The low nibble of the last byte picks a 4-byte window, which is read
    big-endian with the top bit masked off.

    Args:
        digest: HMAC-SHA1 or HMAC-SHA256 output.

    Returns:
        An integer in 0..2**31-1.

    Raises:
        ValueError: If the digest is too short to truncate.
    """
    if len(digest) < MIN_DIGEST_SIZE:
        raise ValueError(
            f"Digest must be at least {MIN_DIGEST_SIZE} bytes, got {len(digest)}"
        )

    offset = digest[-1] & 0x0F
    return (
        ((digest[offset] & 0x7F) << 24)
        | ((digest[offset + 1] & 0xFF) << 16)
        | ((digest[offset + 2] & 0xFF) << 8)
        | (digest[offset + 3] & 0xFF)
    )


def format_code(value: int, digits: int) -> str:
    """Reduce ``value`` modulo 10**digits and zero-pad it to ``digits`` characters."""
    check_digits(digits)
    code = value % (10**digits)
    return f"{code:0{digits}d}"
