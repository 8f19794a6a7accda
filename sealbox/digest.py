"""
Hex digest helpers built on hashlib.
"""

import hashlib


def hash_bytes(data: bytes) -> str:
    """Return the SHA-256 hex digest of data."""
    return hashlib.sha256(data).hexdigest()


def hash_string(s: str) -> str:
    """Return the SHA-256 hex digest of a UTF-8 string."""
    return hash_bytes(s.encode('utf-8'))


def short_hash(s: str) -> str:
    """
    Return the first 8 hex characters of hash_string(s).

    Collisions are likely at this length; use for display identifiers only.
    """
    return hash_string(s)[:8]


class Hasher:
    """Base class for hex digest algorithms."""

    name = ""

    def hash(self, data: bytes) -> str:
        return hashlib.new(self.name, data).hexdigest()

    def hash_string(self, s: str) -> str:
        return self.hash(s.encode('utf-8'))


class SHA256Hasher(Hasher):
    name = "sha256"


class SHA512Hasher(Hasher):
    name = "sha512"


_HASHERS = {
    "sha256": SHA256Hasher,
    "sha512": SHA512Hasher,
}


def new_hasher(algorithm: str) -> Hasher:
    """Create a hasher by case-sensitive name, falling back to SHA-256 for unknown names."""
    return _HASHERS.get(algorithm, SHA256Hasher)()
