"""
Exception types for the sealbox cryptographic primitives.

Every failure of the AEAD engine, the secret generator and the text codec
is reported as a subclass of CryptoError. Messages never carry key,
plaintext or tag material.
"""


class CryptoError(Exception):
    """Base class for all sealbox cryptographic errors."""
    pass


class InvalidInputError(CryptoError, ValueError):
    """Raised when a required argument is empty or out of range."""
    pass


class InvalidKeySizeError(CryptoError, ValueError):
    """Raised when a key length is not one of the supported AES sizes."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"invalid key size {size}: must be 16, 24, or 32 bytes")


class CiphertextTooShortError(CryptoError, ValueError):
    """Raised when a decoded blob cannot even hold a nonce."""
    pass


class DecodeError(CryptoError, ValueError):
    """Raised when text cannot be decoded back into bytes."""
    pass


class AuthenticationError(CryptoError):
    """
    Raised when an AEAD tag does not verify.

    Tampered data and a wrong key produce the same error on purpose.
    """
    pass


class CipherConstructionError(CryptoError):
    """Raised when the underlying cipher cannot be built."""
    pass


class RandomSourceError(CryptoError):
    """Raised when the operating system random source cannot be read."""
    pass
