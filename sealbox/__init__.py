"""
sealbox: symmetric encryption and message authentication helpers.

A small library of low-level primitives built on the cryptography package.

Key Features:
- AES-128/192/256-GCM encryption into self-contained base64 blobs
- HMAC-SHA256 signing with constant-time verification
- Secure random bytes, salts and keys
- Random tokens, passwords and hex digests

Basic Usage:
    >>> from sealbox import encrypt, decrypt, generate_key
    >>>
    >>> key = generate_key(32)
    >>> blob = encrypt(b"Hello, Bob!", key)
    >>> decrypt(blob, key)
    b'Hello, Bob!'
    >>>
    >>> from sealbox import sign, verify
    >>> signature = sign(b"payload", b"shared secret")
    >>> verify(b"payload", signature, b"shared secret")
    True
"""

import logging

__version__ = "0.1.0"
__author__ = "sealbox contributors"

# Cryptographic primitives
from .crypto import (
    AESGCMCipher,
    encrypt,
    decrypt,
    generate_key,
    sign,
    verify,
    random_bytes,
    generate_salt,
    constant_time_compare,
    CryptoError,
    InvalidInputError,
    InvalidKeySizeError,
    CiphertextTooShortError,
    DecodeError,
    AuthenticationError,
    CipherConstructionError,
    RandomSourceError,
)

# Configuration
from .config import SealboxConfig, ConfigError, load_config, configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    # Version info
    '__version__',

    # Authenticated encryption
    'AESGCMCipher',
    'encrypt',
    'decrypt',
    'generate_key',

    # Message authentication
    'sign',
    'verify',

    # Secrets
    'random_bytes',
    'generate_salt',
    'constant_time_compare',

    # Errors
    'CryptoError',
    'InvalidInputError',
    'InvalidKeySizeError',
    'CiphertextTooShortError',
    'DecodeError',
    'AuthenticationError',
    'CipherConstructionError',
    'RandomSourceError',

    # Configuration
    'SealboxConfig',
    'ConfigError',
    'load_config',
    'configure_logging',
]
