"""
Binary-to-text codec for ciphertext blobs and MAC tags.

The codec is fixed to RFC 4648 standard base64 with padding. Decoding is
strict: characters outside the alphabet, bad padding or non-ASCII input
raise DecodeError instead of being skipped.
"""

import base64
from typing import Union

from .errors import DecodeError


def encode(data: bytes) -> str:
    """Encode raw bytes as standard padded base64 text."""
    return base64.b64encode(data).decode('ascii')


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode standard base64 text back into bytes.

    Args:
        text: Base64 text produced by encode()

    Returns:
        The decoded bytes

    Raises:
        DecodeError: If the text is not valid standard base64
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        # binascii.Error is a ValueError; so is non-ASCII str input
        raise DecodeError("malformed base64 input") from e
