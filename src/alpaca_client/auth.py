"""
Authentication for the Alpaca APIs.

The trading and market data APIs take the raw key and secret in two
dedicated headers. The broker API takes them as HTTP Basic credentials.
"""

import base64
from dataclasses import dataclass
from typing import Dict

from .constants import API_KEY_ID_HEADER, API_SECRET_KEY_HEADER


@dataclass(frozen=True)
class ApiCredentials:
    """Container for API credentials"""
    api_key: str
    api_secret: str

    def __repr__(self) -> str:
        return f"ApiCredentials(api_key={self.api_key!r}, api_secret='***')"


class Authenticator:
    """Produces the authentication headers sent with every request."""

    def __init__(self, credentials: ApiCredentials):
        self.credentials = credentials

    def get_auth_headers(self) -> Dict[str, str]:
        raise NotImplementedError


class KeyHeaderAuth(Authenticator):
    """
    Key/secret header authentication.

    Both values are sent unmodified; they are not validated locally, so a
    bad credential surfaces as an authentication error from the server.
    """

    def get_auth_headers(self) -> Dict[str, str]:
        return {
            API_KEY_ID_HEADER: self.credentials.api_key,
            API_SECRET_KEY_HEADER: self.credentials.api_secret,
        }


class BasicAuth(Authenticator):
    """HTTP Basic authentication used by the broker API."""

    def __init__(self, credentials: ApiCredentials):
        super().__init__(credentials)
        # Encoded once; credentials never change for the lifetime of a client
        raw = f"{credentials.api_key}:{credentials.api_secret}".encode("utf-8")
        self._authorization = "Basic " + base64.b64encode(raw).decode("ascii")

    def get_auth_headers(self) -> Dict[str, str]:
        return {"Authorization": self._authorization}
