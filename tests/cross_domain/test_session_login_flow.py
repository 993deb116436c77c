"""End-to-end login flows through create_session_authenticator.

Uses real SQLAlchemy repositories on aiosqlite, bcrypt hashing and
Starlette request/response objects.
"""

import pytest
import pytest_asyncio
from fastapi import Request, Response
from sqlalchemy import func, select

from gatehouse_auth import create_session_authenticator
from gatehouse_auth.events import AuthEvent, EventBus
from gatehouse_auth.persistence.sqlalchemy import LoginAttemptModel
from gatehouse_config import Settings
from gatehouse_identity import PasswordHashingService, User
from gatehouse_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

TEST_EMAIL = "a@x.com"
TEST_PASSWORD = "correct"


def make_request(session: dict) -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/login",
            "headers": [],
            "client": ("192.0.2.10", 40000),
            "session": session,
        }
    )


def remember_token_from(response: Response) -> str:
    for name, value in response.raw_headers:
        if name == b"set-cookie" and value.startswith(b"remember="):
            return value.split(b";")[0].split(b"=", 1)[1].decode().strip('"')
    raise AssertionError("remember cookie not set")


class LoginFlow:
    """One stored user plus a way to build per-request authenticators."""

    def __init__(self, db_session, user: User):
        self.db_session = db_session
        self.user = user
        self.settings = Settings(
            _env_file=None,
            password_hash_rounds=4,
            remember_purge_probability=0.0,
        )
        self.received: list[tuple[str, object]] = []
        self.events = EventBus()
        for event in AuthEvent:
            self.events.subscribe(event.value, self._recorder(event.value))

    def _recorder(self, name: str):
        def handler(payload):
            self.received.append((name, payload))

        return handler

    def authenticator(self, session: dict, response: Response):
        return create_session_authenticator(
            self.db_session,
            make_request(session),
            response,
            settings=self.settings,
            notifier=self.events,
        )

    async def audit_rows(self) -> int:
        result = await self.db_session.execute(
            select(func.count()).select_from(LoginAttemptModel)
        )
        return result.scalar_one()


@pytest_asyncio.fixture
async def flow(db_session):
    hasher = PasswordHashingService(rounds=4)
    user = User.create(TEST_EMAIL, password_hash=hasher.hash(TEST_PASSWORD))
    await UserRepositorySQLAlchemy(db_session).save(user)
    return LoginFlow(db_session, user)


@pytest.mark.integration
class TestSessionLoginFlow:
    """Login, remember-me and logout across requests."""

    @pytest.mark.asyncio
    async def test_attempt_and_restore_on_next_request(self, flow):
        session: dict = {}
        auth = flow.authenticator(session, Response())

        result = await auth.attempt({"email": TEST_EMAIL, "password": TEST_PASSWORD})

        assert result.success is True
        assert session["user_id"] == str(flow.user.id)
        assert await flow.audit_rows() == 2
        assert [name for name, _ in flow.received] == ["login"]

        next_request = flow.authenticator(session, Response())
        assert await next_request.logged_in() is True
        assert next_request.get_user() == flow.user

    @pytest.mark.asyncio
    async def test_wrong_password(self, flow):
        session: dict = {}
        auth = flow.authenticator(session, Response())

        result = await auth.attempt({"email": TEST_EMAIL, "password": "wrong"})

        assert result.message == "Unable to log you in. Please check your password."
        assert "user_id" not in session
        assert await flow.audit_rows() == 1
        assert flow.received == [("failed_login_attempt", {"email": TEST_EMAIL})]

    @pytest.mark.asyncio
    async def test_remember_me_round_trip(self, flow):
        response = Response()
        auth = flow.authenticator({}, response)
        await auth.attempt(
            {"email": TEST_EMAIL, "password": TEST_PASSWORD},
            remember=True,
        )
        token = remember_token_from(response)

        # A new browser session presents only the cookie
        fresh_session: dict = {}
        next_response = Response()
        next_request = flow.authenticator(fresh_session, next_response)

        assert await next_request.login_by_remember_token(token) is True
        assert fresh_session["user_id"] == str(flow.user.id)

        rotated = remember_token_from(next_response)
        assert rotated != token
        replay = flow.authenticator({}, Response())
        assert await replay.login_by_remember_token(token) is False

    @pytest.mark.asyncio
    async def test_logout_revokes_remember_token(self, flow):
        session: dict = {}
        response = Response()
        auth = flow.authenticator(session, response)
        await auth.login(flow.user, remember=True)
        token = remember_token_from(response)

        await auth.logout()

        assert await auth.logged_in() is False
        assert "user_id" not in session
        later = flow.authenticator({}, Response())
        assert await later.login_by_remember_token(token) is False
