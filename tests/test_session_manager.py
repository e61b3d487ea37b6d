# -*- coding: utf-8 -*-
"""
Tests for SessionManager lifecycle.
"""

import pytest
import aiohttp
from unittest.mock import AsyncMock, MagicMock, patch

from alpaca_client.models import ConnectionConfig
from alpaca_client.session_manager import SessionManager


@pytest.fixture
def config():
    return ConnectionConfig(base_url="https://api.example.com", timeout=12.5)


class TestSessionManager:
    """Test session creation, reuse and closing."""

    def test_no_session_before_first_use(self, config):
        """Test that constructing a manager creates nothing."""
        manager = SessionManager(config)
        assert manager.session is None
        assert manager.external_session is None

    @pytest.mark.asyncio
    async def test_creates_owned_session(self, config):
        """Test that a session is created with the configured timeout and headers."""
        manager = SessionManager(config)
        session = await manager.create_session()
        try:
            assert isinstance(session, aiohttp.ClientSession)
            assert session.timeout.total == 12.5
            assert session.headers["User-Agent"] == config.user_agent
            assert manager.session is session
        finally:
            await manager.close_session()
        assert session.closed
        assert manager.session is None

    @pytest.mark.asyncio
    async def test_reuses_open_session(self, config):
        """Test that consecutive calls share one session."""
        manager = SessionManager(config)
        first = await manager.create_session()
        second = await manager.create_session()
        assert first is second
        await manager.close_session()

    @pytest.mark.asyncio
    async def test_recreates_closed_session(self, config):
        """Test that a closed session is replaced."""
        manager = SessionManager(config)
        first = await manager.create_session()
        await first.close()
        second = await manager.create_session()
        assert first is not second
        assert not second.closed
        await manager.close_session()

    @pytest.mark.asyncio
    async def test_external_session_used_as_is(self, config):
        """Test that a supplied session is returned and never closed."""
        external = MagicMock(spec=aiohttp.ClientSession)
        external.close = AsyncMock()
        manager = SessionManager(config, external)

        with patch("aiohttp.ClientSession") as session_class:
            assert await manager.create_session() is external
        session_class.assert_not_called()

        await manager.close_session()
        external.close.assert_not_called()
        assert manager.session is external

    @pytest.mark.asyncio
    async def test_close_without_session(self, config):
        """Test that closing before first use is a no-op."""
        manager = SessionManager(config)
        await manager.close_session()
        assert manager.session is None
