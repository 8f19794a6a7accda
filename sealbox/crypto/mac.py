"""
HMAC-SHA256 message authentication.

Tags are the raw 32-byte HMAC-SHA256 digest, base64 encoded with no
further framing. Verification collapses every failure (malformed
signature, wrong data, wrong key) into a plain False so callers cannot
tell why a signature was rejected.
"""

from cryptography.hazmat.primitives import hashes, hmac

from . import codec
from .errors import DecodeError, InvalidInputError
from .utils import constant_time_compare

DIGEST_SIZE = 32


def _digest(data: bytes, key: bytes) -> bytes:
    h = hmac.HMAC(key, hashes.SHA256())
    h.update(data)
    return h.finalize()


def sign(data: bytes, key: bytes, strict: bool = False) -> str:
    """
    Create an HMAC-SHA256 signature.

    Empty data or an empty key produce an empty signature rather than an
    error, unless strict is set.

    Args:
        data: The data to sign
        key: The signing key (any non-empty length)
        strict: Raise InvalidInputError instead of returning ""

    Returns:
        Base64 signature, or "" when nothing was signed

    Raises:
        InvalidInputError: If strict and data or key is empty
    """
    if not data or not key:
        if strict:
            raise InvalidInputError("data and key must not be empty")
        return ""

    return codec.encode(_digest(data, key))


def verify(data: bytes, signature: str, key: bytes) -> bool:
    """
    Verify an HMAC-SHA256 signature in constant time.

    Args:
        data: The original data
        signature: Base64 signature to verify
        key: The signing key

    Returns:
        True if the signature is valid, False otherwise
    """
    if not data or not signature or not key:
        return False

    try:
        actual = codec.decode(signature)
    except DecodeError:
        return False

    return constant_time_compare(_digest(data, key), actual)
