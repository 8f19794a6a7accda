"""
Secret generation and constant-time comparison.

This module provides the random byte source used for keys, nonces and
salts, and the comparison primitive used by MAC verification.
"""

import logging
import secrets

from .errors import InvalidInputError, RandomSourceError

logger = logging.getLogger(__name__)


def random_bytes(length: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        length: Number of random bytes to generate (0 is allowed)

    Returns:
        Cryptographically secure random bytes

    Raises:
        InvalidInputError: If length is negative
        RandomSourceError: If the operating system source cannot be read
    """
    if length < 0:
        raise InvalidInputError("length must not be negative")

    try:
        return secrets.token_bytes(length)
    except OSError as e:
        logger.warning(f"Random source read of {length} bytes failed: {e}")
        raise RandomSourceError("failed to read from the system random source") from e


def generate_salt(length: int) -> bytes:
    """
    Generate a random salt.

    Unlike random_bytes(), a zero-length salt is rejected.

    Args:
        length: Salt length in bytes

    Returns:
        Random salt

    Raises:
        InvalidInputError: If length is not positive
    """
    if length <= 0:
        raise InvalidInputError("salt length must be positive")

    return random_bytes(length)


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte sequences in constant time.

    Running time depends only on the input lengths, never on the position
    or number of differing bytes. Sequences of different length compare
    unequal; two empty sequences compare equal.

    Args:
        a: First byte sequence
        b: Second byte sequence

    Returns:
        True if sequences are equal, False otherwise
    """
    return secrets.compare_digest(a, b)
