"""
Tests for random tokens and hex digests.
"""

import re

import pytest

from sealbox import digest, tokens


class TestRandomStrings:
    """Test random string helpers."""

    def test_random_string(self):
        """Test length and charset are respected."""
        value = tokens.random_string(64, "ab")
        assert len(value) == 64
        assert set(value) <= {"a", "b"}

        assert tokens.random_string(0) == ""
        assert all(c in tokens.ALPHANUMERIC for c in tokens.random_string(100))

    def test_random_string_negative_length(self):
        """Test a negative length is rejected instead of returning an empty string."""
        with pytest.raises(ValueError):
            tokens.random_string(-1)

    def test_otp(self):
        """Test one-time passwords are numeric."""
        otp = tokens.generate_otp(8)
        assert len(otp) == 8
        assert otp.isdigit()

    def test_session_and_csrf_tokens(self):
        """Test session ids and CSRF tokens are 32 alphanumerics and unique."""
        for generate in (tokens.generate_session_id, tokens.generate_csrf_token):
            values = {generate() for _ in range(20)}
            assert len(values) == 20
            assert all(len(v) == 32 and v.isalnum() for v in values)

    def test_random_int(self):
        """Test random integers stay within the inclusive range."""
        values = {tokens.random_int(1, 3) for _ in range(200)}
        assert values <= {1, 2, 3}
        assert tokens.random_int(5, 5) == 5
        assert tokens.random_int(7, 2) == 7


class TestPasswords:
    """Test password generation."""

    def test_short_length_raised(self):
        """Test lengths below 4 become 8."""
        assert len(tokens.random_password(2)) == 8
        assert len(tokens.random_password(4)) == 4

    def test_symbol_password_complexity(self):
        """Test symbol passwords hold every character class."""
        for _ in range(200):
            password = tokens.random_password(4, include_symbols=True)
            assert len(password) == 4
            assert any(c in tokens.ALPHA_LOWER for c in password)
            assert any(c in tokens.ALPHA_UPPER for c in password)
            assert any(c in tokens.NUMERIC for c in password)
            assert any(c in tokens.SYMBOLS for c in password)

    def test_plain_password(self):
        """Test passwords without symbols are alphanumeric."""
        password = tokens.random_password(16)
        assert len(password) == 16
        assert password.isalnum()


class TestIdentifiers:
    """Test UUID and API key generation."""

    def test_uuid_v4(self):
        """Test UUIDs are version 4 with the RFC 4122 variant."""
        pattern = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")
        values = {tokens.generate_uuid() for _ in range(20)}
        assert len(values) == 20
        assert all(pattern.match(v) for v in values)

    def test_api_key(self):
        """Test API keys are 64 hex characters and unique."""
        key = tokens.generate_api_key()
        assert re.fullmatch(r"[0-9a-f]{64}", key)
        assert tokens.generate_api_key() != key


class TestDigest:
    """Test hex digest helpers."""

    def test_hash_string(self):
        """Test SHA-256 of a known string."""
        expected = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        assert digest.hash_string("hello") == expected
        assert digest.hash_bytes(b"hello") == expected
        assert digest.short_hash("hello") == expected[:8]

    def test_hashers(self):
        """Test hasher selection by name."""
        assert isinstance(digest.new_hasher("sha256"), digest.SHA256Hasher)
        assert isinstance(digest.new_hasher("sha512"), digest.SHA512Hasher)
        assert isinstance(digest.new_hasher("SHA512"), digest.SHA256Hasher)
        assert isinstance(digest.new_hasher("md5"), digest.SHA256Hasher)

        assert len(digest.new_hasher("sha512").hash_string("hello")) == 128
        assert digest.new_hasher("sha256").hash(b"hello") == digest.hash_bytes(b"hello")
