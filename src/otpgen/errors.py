"""Exceptions raised while generating one-time passcodes."""


class OTPError(ValueError):
    """Base class for all code generation errors."""


class OutOfBoundsError(OTPError):
    """Raised when the requested number of digits is outside 6..8."""


class UnsupportedAlgorithmError(OTPError):
    """Raised when the HMAC algorithm is not SHA1 or SHA256."""


class InvalidCounterError(OTPError):
    """Raised when a counter does not fit in an unsigned 64-bit integer."""


class InvalidTimestampError(OTPError):
    """Raised for timestamps before the Unix epoch or of an unknown type."""
