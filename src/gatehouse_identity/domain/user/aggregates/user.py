"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from gatehouse_identity.domain.shared.time import utc_now
from gatehouse_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds the account identity and the stored password hash. The plaintext
    password never reaches this object.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        username: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._username = username
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        username: str | None = None,
    ) -> "User":
        return cls(email=email, password_hash=password_hash, username=username)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        username: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            username=username,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
