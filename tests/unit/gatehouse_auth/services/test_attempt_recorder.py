"""Unit tests for AttemptRecorder."""

from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from gatehouse_auth.services import AttemptRecorder
from tests.shared.fixtures.fakes import FakeClock, InMemoryLoginAttemptRepository


class TestAttemptRecorderRecord:
    """Tests for record."""

    def setup_method(self):
        """Set up test fixtures."""
        self.clock = FakeClock()
        self.repository = InMemoryLoginAttemptRepository()
        self.recorder = AttemptRecorder(self.repository, clock=self.clock)

    @pytest.mark.asyncio
    async def test_record_appends_row(self):
        user_id = uuid4()

        record_id = await self.recorder.record(
            "test@example.com",
            True,
            ip_address="203.0.113.7",
            user_id=user_id,
        )

        assert record_id == 1
        [attempt] = self.repository.attempts
        assert attempt.identifier == "test@example.com"
        assert attempt.success is True
        assert attempt.ip_address == "203.0.113.7"
        assert attempt.user_id == user_id
        assert attempt.created_at == self.clock.now

    @pytest.mark.asyncio
    async def test_record_failure_without_user(self):
        await self.recorder.record("unknown@example.com", False)

        [attempt] = self.repository.attempts
        assert attempt.success is False
        assert attempt.user_id is None
        assert attempt.ip_address is None

    @pytest.mark.asyncio
    async def test_store_failure_is_swallowed(self):
        repository = AsyncMock()
        repository.add.side_effect = Exception("database unavailable")
        recorder = AttemptRecorder(repository)

        result = await recorder.record("test@example.com", False)

        assert result is None


class TestAttemptRecorderRecentFailures:
    """Tests for recent_failures."""

    def setup_method(self):
        """Set up test fixtures."""
        self.clock = FakeClock()
        self.repository = InMemoryLoginAttemptRepository()
        self.recorder = AttemptRecorder(self.repository, clock=self.clock)

    @pytest.mark.asyncio
    async def test_counts_only_failures_in_window(self):
        await self.recorder.record("test@example.com", False)
        self.clock.advance(minutes=20)
        await self.recorder.record("test@example.com", False)
        await self.recorder.record("test@example.com", True)
        await self.recorder.record("other@example.com", False)
        self.clock.advance(minutes=5)

        count = await self.recorder.recent_failures(
            "test@example.com",
            timedelta(minutes=15),
        )

        assert count == 1

    @pytest.mark.asyncio
    async def test_no_failures(self):
        count = await self.recorder.recent_failures(
            "test@example.com",
            timedelta(hours=1),
        )

        assert count == 0
