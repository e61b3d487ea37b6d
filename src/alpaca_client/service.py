"""
Base class for the API service clients.

A service client owns a resolved ``ConnectionConfig``, an authenticator, a
session manager and an HTTP client. Subclasses implement one async method
per API operation on top of ``_call``.
"""

import logging
from typing import Any, Dict, Optional

from aiohttp import ClientSession

from .auth import Authenticator
from .http_client import HttpClient
from .models.config import ConnectionConfig
from .session_manager import SessionManager

logger = logging.getLogger(__name__)


class ServiceClient:
    """
    Async client for one Alpaca API surface.

    Base URL and authentication are fixed at construction. The aiohttp
    session is created lazily on the first call unless one was supplied.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        auth: Authenticator,
        http_session: Optional[ClientSession] = None,
    ):
        """Initialize service client with configuration."""
        self._config = config
        self._auth = auth
        self._session_manager = SessionManager(config, http_session)
        self._http_client = HttpClient(config, auth)
        self._closed = False

    @property
    def base_url(self) -> str:
        """Root endpoint every request is sent to."""
        return self._config.base_url

    @property
    def auth_headers(self) -> Dict[str, str]:
        """Copy of the authentication headers sent with every request."""
        return dict(self._auth.get_auth_headers())

    @property
    def http_session(self) -> Optional[ClientSession]:
        """The caller-supplied aiohttp session, or None for the default one."""
        return self._session_manager.external_session

    @property
    def closed(self) -> bool:
        return self._closed

    async def _call(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if self._closed:
            raise RuntimeError("Client is closed")

        session = await self._session_manager.create_session()
        return await self._http_client.request(
            session, method, path, params=params, json_body=json_body
        )

    async def close(self) -> None:
        """Close client and cleanup resources."""
        if not self._closed:
            await self._session_manager.close_session()
            self._closed = True
            logger.debug(f"{type(self).__name__} for {self.base_url} closed")

    # Context manager support
    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"
