"""
Session management for Alpaca client.

The aiohttp session is the client's transport. A caller-supplied session is
used as is and never closed here; otherwise one is opened on the first
request, so constructing a client performs no I/O.
"""

import logging
from typing import Optional

import aiohttp

from .models.config import ConnectionConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Hands out the aiohttp session a client sends its requests through."""

    def __init__(
        self,
        config: ConnectionConfig,
        http_session: Optional[aiohttp.ClientSession] = None,
    ):
        self._config = config
        self._external_session = http_session
        self._owned_session: Optional[aiohttp.ClientSession] = None

    async def create_session(self) -> aiohttp.ClientSession:
        """Return the caller's session, or the owned one, opening it if needed."""
        if self._external_session is not None:
            return self._external_session

        if self._owned_session is None or self._owned_session.closed:
            # No await between the check and the assignment: concurrent
            # first calls on one loop share the same session
            self._owned_session = self._open_session()
            logger.debug(f"Opened HTTP session for {self._config.base_url}")

        return self._owned_session

    def _open_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(
                limit=100,
                limit_per_host=20,
                ttl_dns_cache=300,
            ),
            timeout=aiohttp.ClientTimeout(total=self._config.timeout),
            headers={
                "User-Agent": self._config.user_agent,
                "Accept": "application/json",
            },
        )

    async def close_session(self) -> None:
        """Close the owned session; a caller-supplied one is left open."""
        owned, self._owned_session = self._owned_session, None
        if owned is not None and not owned.closed:
            await owned.close()

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current session without creating one."""
        return self._external_session or self._owned_session

    @property
    def external_session(self) -> Optional[aiohttp.ClientSession]:
        """The caller-supplied session, if any."""
        return self._external_session
