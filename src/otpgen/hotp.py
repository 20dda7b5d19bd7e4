"""RFC 4226 HOTP (HMAC-based One-Time Password) implementation."""

import logging

from otpgen.counter import encode_counter
from otpgen.digest import Algorithm, Secret, compute_digest
from otpgen.truncate import check_digits, dynamic_truncate, format_code

log = logging.getLogger(__name__)


def build_code(
    secret: Secret,
    counter: int,
    digits: int = 6,
    algorithm: Algorithm = Algorithm.SHA1,
) -> str:
    """
    Generate a one-time code for a counter value.

    This is shared by HOTP and TOTP: the counter is encoded, keyed with the
    secret, truncated and formatted.

    Args:
        secret: Raw key material (bytes, or text encoded as UTF-8).
        counter: Unsigned 64-bit moving factor.
        digits: Number of digits in the output code (6 to 8).
        algorithm: HMAC hash function.

    Returns:
        A zero-padded code string of exactly ``digits`` characters.

    Raises:
        OutOfBoundsError: If ``digits`` is outside 6..8.
        InvalidCounterError: If ``counter`` does not fit in 64 bits.
        UnsupportedAlgorithmError: If ``algorithm`` is not supported.
    """
    # Validate before any hashing work.
    check_digits(digits)

    message = encode_counter(counter)
    digest = compute_digest(secret, message, algorithm)
    log.debug("generated %d digit code for counter %d", digits, counter)
    return format_code(dynamic_truncate(digest), digits)


class HOTP:
    """
    Counter-based one-time password generator.

    The counter has to be kept in sync between client and server by the
    caller; this class holds no counter state.
    """

    __slots__ = ("_digits",)

    def __init__(self, digits: int = 6):
        """
        Initialize an HOTP generator.

        Args:
            digits: Number of digits in generated codes (default: 6).

        Raises:
            OutOfBoundsError: If ``digits`` is outside 6..8.
        """
        self._digits = check_digits(digits)

    @property
    def digits(self) -> int:
        return self._digits

    def generate_code(self, secret: Secret, counter: int) -> str:
        """Generate the HMAC-SHA1 code for ``counter``."""
        return build_code(secret, counter, self._digits, Algorithm.SHA1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HOTP):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash((HOTP, self._digits))

    def __repr__(self) -> str:
        return f"HOTP(digits={self._digits})"
