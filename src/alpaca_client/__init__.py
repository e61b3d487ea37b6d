"""
Alpaca Client - async Python clients for the Alpaca trading, market data
and broker APIs.

Each API lives in its own subpackage with a ``new_client`` factory, the
environment variants and every request, response, model and enum type it
uses:

    from alpaca_client import trading

    async with trading.new_paper_client(key, secret) as client:
        account = await client.get_account()
"""

from . import broker, marketdata, trading
from .auth import ApiCredentials, BasicAuth, KeyHeaderAuth
from .http_client import (
    APIError,
    APIClientError,
    APIServerError,
    AuthenticationError,
    ResponseDecodeError,
)
from .models import ConnectionConfig
from .options import ClientOptions, Option, with_base_url, with_http_client

__version__ = "0.1.0"

__all__ = [
    # API packages
    "trading",
    "marketdata",
    "broker",
    # Options
    "ClientOptions",
    "Option",
    "with_base_url",
    "with_http_client",
    "ConnectionConfig",
    # Authentication
    "ApiCredentials",
    "KeyHeaderAuth",
    "BasicAuth",
    # Exceptions
    "APIError",
    "APIClientError",
    "AuthenticationError",
    "APIServerError",
    "ResponseDecodeError",
]
