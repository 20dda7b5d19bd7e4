"""HOTP (RFC 4226) and TOTP (RFC 6238) one-time passcode generation."""

from otpgen.digest import Algorithm
from otpgen.errors import (
    InvalidCounterError,
    InvalidTimestampError,
    OTPError,
    OutOfBoundsError,
    UnsupportedAlgorithmError,
)
from otpgen.hotp import HOTP
from otpgen.totp import TOTP, Options

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "HOTP",
    "TOTP",
    "Options",
    "OTPError",
    "OutOfBoundsError",
    "UnsupportedAlgorithmError",
    "InvalidCounterError",
    "InvalidTimestampError",
]
