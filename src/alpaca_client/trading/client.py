"""
Trading API client factories.

The Trading API authenticates with the key and secret in two headers and is
served from a live and a paper endpoint.
"""

import logging
import os

from dotenv import load_dotenv

from ..auth import ApiCredentials, KeyHeaderAuth
from ..constants import ENV_API_KEY_ID, ENV_API_SECRET_KEY
from ..options import Option, apply_options, with_base_url
from .service import TradingServiceClient

logger = logging.getLogger(__name__)

LIVE_BASE_URL = "https://api.alpaca.markets"
PAPER_BASE_URL = "https://paper-api.alpaca.markets"


class Client(TradingServiceClient):
    """Trading API client with Alpaca defaults; build it with ``new_client``."""

    @classmethod
    def from_env(cls, *options: Option, paper: bool = False) -> "Client":
        """Create client from environment variables."""
        load_dotenv()
        api_key = os.getenv(ENV_API_KEY_ID, "")
        api_secret = os.getenv(ENV_API_SECRET_KEY, "")

        factory = new_paper_client if paper else new_client
        return factory(api_key, api_secret, *options)


def new_client(api_key: str, api_secret: str, *options: Option) -> Client:
    """
    Create a Trading API client.

    Args:
        api_key: API key ID, sent as is
        api_secret: API secret key, sent as is
        *options: Configuration options, applied in order (later wins)

    Returns:
        Client bound to the resolved base URL, defaulting to LIVE_BASE_URL
    """
    draft = apply_options(LIVE_BASE_URL, options)
    auth = KeyHeaderAuth(ApiCredentials(api_key, api_secret))

    logger.debug(f"Creating trading client for {draft.base_url}")
    return Client(draft.to_config(), auth, http_session=draft.http_session)


def new_paper_client(api_key: str, api_secret: str, *options: Option) -> Client:
    """Create a client for paper trading; PAPER_BASE_URL overrides any base URL option."""
    return new_client(api_key, api_secret, *options, with_base_url(PAPER_BASE_URL))
