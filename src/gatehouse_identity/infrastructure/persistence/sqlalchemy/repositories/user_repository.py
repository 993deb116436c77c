"""SQLAlchemy user repository, the engine's persistence provider."""

import logging
from typing import Any, Mapping, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse_identity.domain.shared.time import ensure_tz_aware
from gatehouse_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserRepository,
)
from gatehouse_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    # SQLite says "UNIQUE constraint failed", PostgreSQL "duplicate key ... unique"
    return "unique" in str(error.orig).lower()


class UserRepositorySQLAlchemy(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        return await self.find_by_credentials({"email": str(email)})

    async def find_by_credentials(self, criteria: Mapping[str, Any]) -> User | None:
        if not criteria:
            return None

        unknown = set(criteria) - self.CREDENTIAL_FIELDS
        if unknown:
            logger.debug("Ignoring lookup on unsupported fields: %s", sorted(unknown))
            return None

        conditions = []
        for field, value in criteria.items():
            if field == "email":
                try:
                    value = Email(str(value)).value
                except InvalidEmailError:
                    return None
            conditions.append(getattr(UserModel, field) == value)

        # Two rows are enough to tell a unique match from an ambiguous one
        stmt = select(UserModel).where(*conditions).limit(2)
        models = (await self._session.execute(stmt)).scalars().all()

        if len(models) != 1:
            return None
        return self._to_domain(models[0])

    async def save(self, user: User) -> None:
        model = await self._session.get(UserModel, user.id)
        is_new = model is None
        if model is None:
            model = UserModel(id=user.id, created_at=user.created_at)
            self._session.add(model)
        self._write(model, user)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        if is_new:
            logger.info("Created user: %s", user.id)
        else:
            logger.debug("Updated user: %s", user.id)

    @staticmethod
    def _write(model: UserModel, user: User) -> None:
        model.email = user.email
        model.username = user.username
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            username=model.username,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
