"""bcrypt password hashing for stored user credentials.

Besides hashing and checking, the service reports whether a stored hash
was made with a different cost than the configured one, which lets the
login path upgrade hashes in place.
"""

import bcrypt

# bcrypt ignores everything past the 72nd byte of its input
MAX_PASSWORD_BYTES = 72


def bcrypt_cost(password_hash: str) -> int | None:
    """Return the cost factor of a bcrypt hash, None for anything else.

    >>> bcrypt_cost("$2b$12$" + "a" * 53)
    12
    """
    parts = password_hash.split("$") if password_hash else []
    if len(parts) < 4 or not parts[1].startswith("2") or not parts[2].isdigit():
        return None
    return int(parts[2])


class PasswordHashingService:
    """Hash and check passwords with bcrypt at a configurable cost.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=12)
    >>> stored = service.hash("s3cret-passphrase")
    >>> service.verify("s3cret-passphrase", stored)
    True
    >>> service.needs_rehash(stored)
    False
    """

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor (log2 of the key expansion rounds)
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh salt.

        Raises
        ------
        ValueError
            If the password is empty or longer than bcrypt can use
        TypeError
            If the password is not a string
        """
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Malformed hashes and unusable passwords never match.
        """
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("ascii"))
        except (ValueError, TypeError, UnicodeEncodeError):
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Whether a stored hash should be replaced on the next login.

        True for bcrypt hashes with a different cost and for anything that
        is not a bcrypt hash.
        """
        return bcrypt_cost(password_hash) != self._rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        if not isinstance(password, str):
            msg = "Password must be a string"
            raise TypeError(msg)
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            msg = f"Password cannot exceed {MAX_PASSWORD_BYTES} bytes"
            raise ValueError(msg)
        return encoded
