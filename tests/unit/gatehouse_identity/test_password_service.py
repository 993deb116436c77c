"""Unit tests for PasswordHashingService."""

import pytest

from gatehouse_identity import PasswordHashingService
from gatehouse_identity.services.password_service import bcrypt_cost


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        hashed = self.service.hash("secure_password123")

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        assert len(hashed) >= 50

    def test_hash_empty_password_raises(self):
        with pytest.raises(ValueError, match="empty"):
            self.service.hash("")

    def test_verify_correct_password(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("my_secret_password", hashed) is True

    def test_verify_incorrect_password(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_hash_non_string_raises_type_error(self):
        with pytest.raises(TypeError, match="string"):
            self.service.hash(12345)

    def test_verify_non_string_password_returns_false(self):
        hashed = self.service.hash("12345")

        assert self.service.verify(12345, hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_hash_produces_different_hashes(self):
        """Due to random salt, hashes differ but both verify."""
        hash1 = self.service.hash("same_password")
        hash2 = self.service.hash("same_password")

        assert hash1 != hash2
        assert self.service.verify("same_password", hash1)
        assert self.service.verify("same_password", hash2)


class TestNeedsRehash:
    """Tests for outdated hash detection."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=5)

    def test_current_rounds(self):
        assert self.service.needs_rehash(self.service.hash("password")) is False

    def test_different_rounds(self):
        old_hash = PasswordHashingService(rounds=4).hash("password")

        assert self.service.needs_rehash(old_hash) is True

    def test_rehashed_password_still_verifies(self):
        old_hash = PasswordHashingService(rounds=4).hash("password")
        new_hash = self.service.hash("password")

        assert self.service.verify("password", old_hash) is True
        assert self.service.verify("password", new_hash) is True
        assert self.service.needs_rehash(new_hash) is False

    @pytest.mark.parametrize(
        "password_hash",
        ["", "plaintext", "$argon2id$v=19$m=65536,t=3,p=4$abc", "$2b$xx$abc"],
    )
    def test_non_bcrypt_hash(self, password_hash):
        assert self.service.needs_rehash(password_hash) is True

    def test_rounds_property(self):
        assert self.service.rounds == 5


class TestPasswordLength:
    """bcrypt only uses the first 72 bytes of its input."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)

    def test_hash_rejects_overlong_password(self):
        with pytest.raises(ValueError, match="72 bytes"):
            self.service.hash("x" * 73)

    def test_hash_accepts_72_bytes(self):
        password = "x" * 72

        assert self.service.verify(password, self.service.hash(password)) is True

    def test_verify_overlong_password_never_matches(self):
        stored = self.service.hash("x" * 72)

        assert self.service.verify("x" * 73, stored) is False

    def test_multibyte_characters_count_as_bytes(self):
        with pytest.raises(ValueError):
            self.service.hash("ü" * 37)


class TestBcryptCost:
    @pytest.mark.parametrize(
        ("password_hash", "expected"),
        [
            ("$2b$12$" + "a" * 53, 12),
            ("$2a$04$" + "a" * 53, 4),
            ("$2b$xx$abc", None),
            ("$argon2id$v=19$m=65536,t=3,p=4$abc", None),
            ("", None),
        ],
    )
    def test_bcrypt_cost(self, password_hash, expected):
        assert bcrypt_cost(password_hash) == expected
