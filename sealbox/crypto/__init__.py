"""
Cryptographic primitives for sealbox.

This module provides the core cryptographic functions including:
- Authenticated encryption (AES-GCM)
- Message authentication (HMAC-SHA256)
- Secure random bytes, salts and constant-time comparison
"""

from .errors import (
    CryptoError,
    InvalidInputError,
    InvalidKeySizeError,
    CiphertextTooShortError,
    DecodeError,
    AuthenticationError,
    CipherConstructionError,
    RandomSourceError,
)
from .aead import AESGCMCipher, encrypt, decrypt, generate_key, NONCE_SIZE, TAG_SIZE, VALID_KEY_SIZES
from .mac import sign, verify, DIGEST_SIZE
from .utils import random_bytes, generate_salt, constant_time_compare

__all__ = [
    'AESGCMCipher',
    'encrypt',
    'decrypt',
    'generate_key',
    'sign',
    'verify',
    'random_bytes',
    'generate_salt',
    'constant_time_compare',
    'NONCE_SIZE',
    'TAG_SIZE',
    'VALID_KEY_SIZES',
    'DIGEST_SIZE',
    'CryptoError',
    'InvalidInputError',
    'InvalidKeySizeError',
    'CiphertextTooShortError',
    'DecodeError',
    'AuthenticationError',
    'CipherConstructionError',
    'RandomSourceError',
]
