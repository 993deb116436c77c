"""SQLAlchemy implementation of RememberTokenRepository."""

import logging
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse_auth.persistence.sqlalchemy.models import RememberTokenModel
from gatehouse_auth.repositories import RememberTokenRepository
from gatehouse_auth.schemas import RememberTokenData
from gatehouse_identity.domain.shared.time import ensure_tz_aware

logger = logging.getLogger(__name__)


class RememberTokenRepositorySQLAlchemy(RememberTokenRepository):
    """SQLAlchemy implementation of RememberTokenRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(
        self,
        user_id: UUID,
        selector: str,
        hashed_validator: str,
        expires_at: datetime,
    ) -> UUID:
        token_id = uuid4()
        model = RememberTokenModel(
            id=str(token_id),
            user_id=str(user_id),
            selector=selector,
            hashed_validator=hashed_validator,
            expires_at=expires_at,
        )
        self._session.add(model)
        await self._session.flush()
        return token_id

    async def find_by_selector(self, selector: str) -> RememberTokenData | None:
        stmt = select(RememberTokenModel).where(
            RememberTokenModel.selector == selector,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return RememberTokenData(
            id=UUID(str(model.id)),
            user_id=UUID(model.user_id),
            selector=model.selector,
            hashed_validator=model.hashed_validator,
            expires_at=ensure_tz_aware(model.expires_at),
            created_at=ensure_tz_aware(model.created_at),
        )

    async def update_validator(
        self,
        selector: str,
        current_hashed_validator: str,
        new_hashed_validator: str,
    ) -> bool:
        stmt = (
            update(RememberTokenModel)
            .where(
                RememberTokenModel.selector == selector,
                RememberTokenModel.hashed_validator == current_hashed_validator,
            )
            .values(hashed_validator=new_hashed_validator)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def delete_by_selector(self, selector: str) -> bool:
        stmt = delete(RememberTokenModel).where(
            RememberTokenModel.selector == selector,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def delete_all_for_user(self, user_id: UUID) -> int:
        stmt = delete(RememberTokenModel).where(
            RememberTokenModel.user_id == str(user_id),
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_expired(self, now: datetime) -> int:
        stmt = delete(RememberTokenModel).where(
            RememberTokenModel.expires_at <= now,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        deleted = result.rowcount  # type: ignore[attr-defined]
        logger.debug("Deleted %d expired remember tokens", deleted)
        return deleted
