"""
HTTP client for the Alpaca APIs.

Handles request execution, authentication headers and response processing.
Each call is exactly one HTTP request: nothing is retried, and every failure
is raised to the caller.
"""

import json
import logging
from typing import Any, Dict, Optional

from aiohttp import ClientResponse, ClientSession

from .auth import Authenticator
from .models.config import ConnectionConfig

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP client bound to one API base URL and authenticator."""

    def __init__(self, config: ConnectionConfig, auth: Authenticator):
        """Initialize HTTP client with configuration."""
        self._config = config
        self._auth = auth

    async def request(
        self,
        session: ClientSession,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Execute an authenticated request and return the decoded JSON body."""
        url = f"{self._config.base_url.rstrip('/')}{path}"

        request_kwargs: Dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": self._prepare_headers(),
        }
        if params:
            request_kwargs["params"] = params
        if json_body is not None:
            request_kwargs["json"] = json_body

        logger.debug(f"{method} {url}")

        async with session.request(**request_kwargs) as response:
            response_data = await self._process_response(response)

            if response.status < 400:
                return response_data

            error = self._build_error(response.status, response_data)
            logger.error(f"{method} {path} failed: {error}")
            raise error

    def _prepare_headers(self) -> Dict[str, str]:
        """Prepare request headers."""
        headers = {"Accept": "application/json"}
        headers.update(self._auth.get_auth_headers())
        return headers

    async def _process_response(self, response: ClientResponse) -> Any:
        """Process HTTP response and return data."""
        response_text = await response.text()

        if not response_text:
            return None

        try:
            return json.loads(response_text)
        except json.JSONDecodeError as e:
            if response.status >= 400:
                # Error pages from proxies are not JSON; keep the text for the message
                return response_text
            raise ResponseDecodeError(
                f"Invalid JSON response (Status {response.status}): {response_text[:200]}",
                status_code=response.status,
            ) from e

    def _build_error(self, status: int, response_data: Any) -> "APIError":
        """Map a failed response to the matching exception."""
        code = None
        message = response_data
        if isinstance(response_data, dict):
            code = response_data.get("code")
            message = response_data.get("message", response_data)

        if status in (401, 403):
            error_class = AuthenticationError
            text = f"Authentication failed ({status}): {message}"
        elif status < 500:
            error_class = APIClientError
            text = f"Client error {status}: {message}"
        else:
            error_class = APIServerError
            text = f"Server error {status}: {message}"

        return error_class(
            text,
            status_code=status,
            code=code,
            response_data=response_data,
        )


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
        response_data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.response_data = response_data


class APIClientError(APIError):
    """Exception for client errors (4xx)."""
    pass


class AuthenticationError(APIClientError):
    """Exception for rejected credentials (401, 403)."""
    pass


class APIServerError(APIError):
    """Exception for server errors (5xx)."""
    pass


class ResponseDecodeError(APIError):
    """Exception for successful responses whose body is not valid JSON."""
    pass
