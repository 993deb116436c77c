"""SQLAlchemy implementation of LoginAttemptRepository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse_auth.persistence.sqlalchemy.models import LoginAttemptModel
from gatehouse_auth.repositories import LoginAttemptRepository


class LoginAttemptRepositorySQLAlchemy(LoginAttemptRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def add(  # noqa: PLR0913
        self,
        identifier: str,
        success: bool,
        ip_address: str | None,
        user_id: UUID | None,
        created_at: datetime,
    ) -> int:
        model = LoginAttemptModel(
            identifier=identifier,
            success=success,
            ip_address=ip_address,
            user_id=str(user_id) if user_id else None,
            created_at=created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return model.id

    async def count_failures_since(self, identifier: str, since: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(LoginAttemptModel)
            .where(
                LoginAttemptModel.identifier == identifier,
                LoginAttemptModel.success.is_(False),
                LoginAttemptModel.created_at >= since,
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()
