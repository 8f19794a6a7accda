"""
Random identifiers, passwords and one-time codes.

Everything here draws from the secrets module, never from random.
"""

import secrets
import time
import uuid

from .crypto.utils import random_bytes
from .digest import hash_string

# Character sets for random generation
ALPHA_LOWER = "abcdefghijklmnopqrstuvwxyz"
ALPHA_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHA = ALPHA_LOWER + ALPHA_UPPER
NUMERIC = "0123456789"
ALPHANUMERIC = ALPHA + NUMERIC
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"
ALL_CHARS = ALPHANUMERIC + SYMBOLS

MIN_PASSWORD_LENGTH = 4
FALLBACK_PASSWORD_LENGTH = 8


def random_string(length: int, charset: str = ALPHANUMERIC) -> str:
    """
    Generate a random string.

    Args:
        length: Number of characters
        charset: Characters to draw from

    Returns:
        Random string of the given length
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not charset:
        raise ValueError("charset must not be empty")
    return ''.join(secrets.choice(charset) for _ in range(length))


def random_int(minimum: int, maximum: int) -> int:
    """Return a random integer in [minimum, maximum], or minimum if the range is empty."""
    if minimum >= maximum:
        return minimum
    return minimum + secrets.randbelow(maximum - minimum + 1)


def random_password(length: int, include_symbols: bool = False) -> str:
    """
    Generate a random password.

    Lengths below 4 are raised to 8. With include_symbols the password
    holds at least one lowercase letter, uppercase letter, digit and symbol.

    Args:
        length: Requested password length
        include_symbols: Whether to draw from SYMBOLS as well

    Returns:
        Random password
    """
    if length < MIN_PASSWORD_LENGTH:
        length = FALLBACK_PASSWORD_LENGTH

    if not include_symbols:
        return random_string(length, ALPHANUMERIC)

    chars = list(random_string(length, ALL_CHARS))

    # Replace a character whose class still has another member
    for charset in (ALPHA_LOWER, ALPHA_UPPER, NUMERIC, SYMBOLS):
        if not any(c in charset for c in chars):
            index = secrets.choice([i for i in range(len(chars)) if not _is_sole_member(chars, i)])
            chars[index] = secrets.choice(charset)

    return ''.join(chars)


def _is_sole_member(chars: list, index: int) -> bool:
    # True if chars[index] is the only character of its class
    for charset in (ALPHA_LOWER, ALPHA_UPPER, NUMERIC, SYMBOLS):
        if chars[index] in charset:
            return sum(c in charset for c in chars) == 1
    return False


def generate_otp(length: int = 6) -> str:
    """Generate a numeric one-time password."""
    return random_string(length, NUMERIC)


def generate_session_id() -> str:
    """Generate a 32-character session identifier."""
    return random_string(32, ALPHANUMERIC)


def generate_csrf_token() -> str:
    """Generate a 32-character CSRF token."""
    return random_string(32, ALPHANUMERIC)


def generate_uuid() -> str:
    """Generate a random (version 4) UUID string."""
    return str(uuid.UUID(bytes=random_bytes(16), version=4))


def generate_api_key() -> str:
    """Generate a 64-character hex API key."""
    return hash_string(f"{time.time_ns()}-{random_string(32)}")
