"""Keyed-hash computation over the encoded counter."""

import enum
import logging
from typing import Union

from cryptography.hazmat.primitives import hashes, hmac

from otpgen.errors import UnsupportedAlgorithmError

log = logging.getLogger(__name__)

Secret = Union[bytes, bytearray, memoryview, str]


class Algorithm(enum.Enum):
    """HMAC variants a code can be generated with."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"

    @classmethod
    def from_name(cls, name: Union[str, "Algorithm"]) -> "Algorithm":
        """
        Look up an algorithm by name.

        Matching ignores case and dashes, so "sha1", "SHA-256" and
        "Sha256" are all accepted.

        Raises:
            UnsupportedAlgorithmError: If the name is not a known algorithm.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnsupportedAlgorithmError(f"Unsupported algorithm: {name!r}")

        normalized = name.strip().upper().replace("-", "")
        try:
            return cls(normalized)
        except ValueError as e:
            raise UnsupportedAlgorithmError(f"Unsupported algorithm: {name!r}") from e


_HASHES = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA256: hashes.SHA256,
}


def secret_bytes(secret: Secret) -> bytes:
    """
    Return the raw key material, encoding text secrets as UTF-8.

    Raises:
        TypeError: If the secret is neither text nor bytes-like.
    """
    if isinstance(secret, str):
        return secret.encode("utf-8")
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"Secret must be str or bytes-like, got {type(secret).__name__}"
        )
    return bytes(secret)


def compute_digest(secret: Secret, message: bytes, algorithm: Algorithm) -> bytes:
    """
    Compute HMAC(secret, message) with the selected hash.

    Args:
        secret: Raw key material. Text is encoded as UTF-8, never base32-decoded.
        message: The encoded counter.
        algorithm: Hash function to key.

    Returns:
        The digest, 20 bytes for SHA1 and 32 bytes for SHA256.

    Raises:
        UnsupportedAlgorithmError: If ``algorithm`` is not an ``Algorithm``.
    """
    hash_cls = _HASHES.get(algorithm) if isinstance(algorithm, Algorithm) else None
    if hash_cls is None:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm!r}")

    log.debug("computing HMAC-%s over %d byte message", algorithm.value, len(message))

    mac = hmac.HMAC(secret_bytes(secret), hash_cls())
    mac.update(message)
    return mac.finalize()
