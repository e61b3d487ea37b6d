"""
Market Data API client factory.

Market data is served from a single endpoint for both live and paper
accounts, authenticated with the key and secret headers.
"""

import logging
import os

from dotenv import load_dotenv

from ..auth import ApiCredentials, KeyHeaderAuth
from ..constants import ENV_API_KEY_ID, ENV_API_SECRET_KEY
from ..options import Option, apply_options
from .service import MarketDataServiceClient

logger = logging.getLogger(__name__)

BASE_URL = "https://data.alpaca.markets"


class Client(MarketDataServiceClient):
    """Market Data API client with Alpaca defaults; build it with ``new_client``."""

    @classmethod
    def from_env(cls, *options: Option) -> "Client":
        """Create client from environment variables."""
        load_dotenv()
        return new_client(
            os.getenv(ENV_API_KEY_ID, ""),
            os.getenv(ENV_API_SECRET_KEY, ""),
            *options,
        )


def new_client(api_key: str, api_secret: str, *options: Option) -> Client:
    """
    Create a Market Data API client.

    Args:
        api_key: API key ID, sent as is
        api_secret: API secret key, sent as is
        *options: Configuration options, applied in order (later wins)

    Returns:
        Client bound to the resolved base URL, defaulting to BASE_URL
    """
    draft = apply_options(BASE_URL, options)
    auth = KeyHeaderAuth(ApiCredentials(api_key, api_secret))

    logger.debug(f"Creating market data client for {draft.base_url}")
    return Client(draft.to_config(), auth, http_session=draft.http_session)
