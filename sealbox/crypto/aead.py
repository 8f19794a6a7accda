"""
AES-GCM Authenticated Encryption for sealbox.

Provides sealing and opening of byte payloads with AES-128/192/256-GCM.
Ciphertext blobs are self-contained and text-encoded:

    base64( nonce || ciphertext || tag )

where the nonce is 12 bytes drawn fresh for every encryption and the
16-byte tag is appended by AES-GCM. Decryption needs only the key.
"""

import logging
from typing import Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from . import codec
from .errors import (
    AuthenticationError,
    CipherConstructionError,
    CiphertextTooShortError,
    DecodeError,
    InvalidInputError,
    InvalidKeySizeError,
)
from .utils import random_bytes

logger = logging.getLogger(__name__)

# Protocol constants
NONCE_SIZE = 12  # 96-bit nonce for GCM
TAG_SIZE = 16
VALID_KEY_SIZES = (16, 24, 32)


def check_key_size(size: int) -> None:
    """Raise InvalidKeySizeError unless size is a supported AES key length."""
    if size not in VALID_KEY_SIZES:
        raise InvalidKeySizeError(size)


class AESGCMCipher:
    """
    AES-GCM cipher bound to a single key.

    Every call to seal() draws a new random nonce, so one instance can be
    used for any number of messages and from several threads at once.
    """

    def __init__(self, key: bytes):
        """
        Initialize AES-GCM cipher.

        Args:
            key: 16, 24 or 32 byte AES key

        Raises:
            InvalidInputError: If key is empty
            InvalidKeySizeError: If key length is not supported
            CipherConstructionError: If the primitive rejects the key
        """
        if not key:
            raise InvalidInputError("key must not be empty")
        check_key_size(len(key))

        try:
            self._aesgcm = AESGCM(key)
        except (TypeError, ValueError) as e:
            raise CipherConstructionError("failed to construct AES-GCM cipher") from e

        self._key_size = len(key)

    def seal(self, plaintext: bytes, associated_data: Optional[bytes] = None) -> bytes:
        """
        Encrypt and authenticate plaintext.

        Args:
            plaintext: Data to encrypt
            associated_data: Additional authenticated data (optional)

        Returns:
            nonce || ciphertext || tag

        Raises:
            InvalidInputError: If plaintext is empty
        """
        if not plaintext:
            raise InvalidInputError("plaintext must not be empty")

        nonce = random_bytes(NONCE_SIZE)
        sealed = nonce + self._aesgcm.encrypt(nonce, plaintext, associated_data)

        logger.debug(f"{self.algorithm_name} sealed {len(plaintext)} bytes into {len(sealed)}")
        return sealed

    def open(self, sealed: bytes, associated_data: Optional[bytes] = None) -> bytes:
        """
        Verify and decrypt output of seal().

        Args:
            sealed: nonce || ciphertext || tag
            associated_data: Additional authenticated data used when sealing

        Returns:
            Decrypted plaintext

        Raises:
            CiphertextTooShortError: If sealed cannot hold a nonce
            AuthenticationError: If the tag does not verify
        """
        if len(sealed) < NONCE_SIZE:
            logger.warning(f"Rejected {len(sealed)}-byte blob shorter than the nonce")
            raise CiphertextTooShortError("ciphertext too short")

        nonce, body = sealed[:NONCE_SIZE], sealed[NONCE_SIZE:]

        try:
            plaintext = self._aesgcm.decrypt(nonce, body, associated_data)
        except InvalidTag as e:
            logger.warning(f"{self.algorithm_name} authentication failed for {len(sealed)}-byte blob")
            raise AuthenticationError("message authentication failed") from e

        logger.debug(f"{self.algorithm_name} opened {len(sealed)} bytes into {len(plaintext)}")
        return plaintext

    @property
    def algorithm_name(self) -> str:
        """Get the name of the current algorithm."""
        return f"AES-{self._key_size * 8}-GCM"

    @property
    def key_size(self) -> int:
        """Get the key size in bytes."""
        return self._key_size

    @property
    def nonce_size(self) -> int:
        """Get the nonce size in bytes."""
        return NONCE_SIZE

    @property
    def tag_size(self) -> int:
        """Get the authentication tag size in bytes."""
        return TAG_SIZE


def encrypt(plaintext: bytes, key: bytes, associated_data: Optional[bytes] = None) -> str:
    """
    Encrypt plaintext into a text-encoded ciphertext blob.

    Args:
        plaintext: Data to encrypt (must not be empty)
        key: 16, 24 or 32 byte AES key
        associated_data: Additional authenticated data (optional)

    Returns:
        Base64 text of nonce || ciphertext || tag

    Raises:
        InvalidInputError: If plaintext or key is empty
        InvalidKeySizeError: If key length is not supported
    """
    if not plaintext or not key:
        raise InvalidInputError("plaintext and key must not be empty")

    return codec.encode(AESGCMCipher(key).seal(plaintext, associated_data))


def decrypt(blob: Union[str, bytes], key: bytes, associated_data: Optional[bytes] = None) -> bytes:
    """
    Decrypt a ciphertext blob produced by encrypt().

    Args:
        blob: Base64 text of nonce || ciphertext || tag
        key: The key used for encryption
        associated_data: Additional authenticated data used for encryption

    Returns:
        The original plaintext

    Raises:
        InvalidInputError: If blob or key is empty
        InvalidKeySizeError: If key length is not supported
        DecodeError: If blob is not valid base64
        CiphertextTooShortError: If the decoded blob cannot hold a nonce
        AuthenticationError: If the data was modified or the key is wrong
    """
    if not blob or not key:
        raise InvalidInputError("ciphertext and key must not be empty")
    check_key_size(len(key))

    try:
        sealed = codec.decode(blob)
    except DecodeError:
        logger.warning("Rejected ciphertext blob that is not valid base64")
        raise

    return AESGCMCipher(key).open(sealed, associated_data)


def generate_key(size: Optional[int] = None) -> bytes:
    """
    Generate a random AES key.

    Args:
        size: Key size in bytes (16, 24 or 32). Defaults to the configured
            default_key_size.

    Returns:
        Random key

    Raises:
        InvalidKeySizeError: If size is not supported
    """
    if size is None:
        from ..config import default_key_size
        size = default_key_size()

    check_key_size(size)
    return random_bytes(size)
