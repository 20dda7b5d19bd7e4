"""RFC 6238 TOTP (Time-based One-Time Password) implementation."""

import datetime
import logging
import math
import time
from dataclasses import dataclass
from typing import Optional, Union

from otpgen.digest import Algorithm, Secret
from otpgen.errors import InvalidTimestampError
from otpgen.hotp import build_code
from otpgen.truncate import check_digits

log = logging.getLogger(__name__)

Timestamp = Union[int, float, datetime.datetime]


@dataclass(frozen=True)
class Options:
    """
    TOTP generation settings.

    Attributes:
        digits: Number of digits in generated codes (6 to 8).
        algorithm: HMAC hash function, an ``Algorithm`` or its name.
        time_step: Length of one time step in seconds.
    """

    digits: int = 6
    algorithm: Algorithm = Algorithm.SHA1
    time_step: int = 30

    def __post_init__(self) -> None:
        check_digits(self.digits)
        object.__setattr__(self, "algorithm", Algorithm.from_name(self.algorithm))

        if isinstance(self.time_step, bool) or not isinstance(self.time_step, int):
            raise ValueError(f"Time step must be an integer, got {self.time_step!r}")
        if self.time_step <= 0:
            raise ValueError(f"Time step must be positive, got {self.time_step}")


def _to_seconds(timestamp: Timestamp) -> int:
    if isinstance(timestamp, datetime.datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)
        timestamp = timestamp.timestamp()

    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        raise InvalidTimestampError(
            f"Timestamp must be Unix seconds or a datetime, got {timestamp!r}"
        )
    if isinstance(timestamp, float):
        if not math.isfinite(timestamp):
            raise InvalidTimestampError(f"Timestamp must be finite, got {timestamp}")
        timestamp = math.floor(timestamp)

    if timestamp < 0:
        raise InvalidTimestampError(
            f"Timestamps before the Unix epoch are not supported, got {timestamp}"
        )
    return timestamp


def timecode(timestamp: Timestamp, time_step: int = 30) -> int:
    """
    Convert a timestamp into the TOTP counter.

    Args:
        timestamp: Unix seconds (int or float) or a datetime. Naive datetimes
            are taken to be UTC.
        time_step: Length of one time step in seconds.

    Returns:
        The number of whole time steps since the Unix epoch.

    Raises:
        InvalidTimestampError: If the timestamp is negative or not a number.
    """
    return _to_seconds(timestamp) // time_step


class TOTP:
    """Time-based one-time password generator."""

    __slots__ = ("_options",)

    def __init__(self, options: Optional[Options] = None):
        self._options = options if options is not None else Options()

    @property
    def options(self) -> Options:
        return self._options

    def generate_code(self, secret: Secret, timestamp: Optional[Timestamp] = None) -> str:
        """
        Generate the code for the time step containing ``timestamp``.

        Args:
            secret: Raw key material (bytes, or text encoded as UTF-8).
            timestamp: Unix seconds or a datetime (default: now).

        Returns:
            A zero-padded code string of ``options.digits`` characters.

        Raises:
            InvalidTimestampError: If the timestamp is before the epoch.
            UnsupportedAlgorithmError: If the algorithm is not supported.
        """
        if timestamp is None:
            timestamp = time.time()

        counter = timecode(timestamp, self._options.time_step)
        log.debug(
            "time step %ds gives counter %d", self._options.time_step, counter
        )
        return build_code(
            secret, counter, self._options.digits, self._options.algorithm
        )

    def now(self, secret: Secret) -> str:
        """Generate the code for the current time."""
        return self.generate_code(secret)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TOTP):
            return NotImplemented
        return self._options == other._options

    def __hash__(self) -> int:
        return hash((TOTP, self._options))

    def __repr__(self) -> str:
        return f"TOTP({self._options!r})"
