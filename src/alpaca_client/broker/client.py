"""
Broker API client factories.

The Broker API authenticates with HTTP Basic credentials built from the
broker key and secret, and is served from a live and a sandbox endpoint.
"""

import logging
import os

from dotenv import load_dotenv

from ..auth import ApiCredentials, BasicAuth
from ..constants import ENV_BROKER_API_KEY, ENV_BROKER_API_SECRET
from ..options import Option, apply_options, with_base_url
from .service import BrokerServiceClient

logger = logging.getLogger(__name__)

LIVE_BASE_URL = "https://broker-api.alpaca.markets"
SANDBOX_BASE_URL = "https://broker-api.sandbox.alpaca.markets"


class Client(BrokerServiceClient):
    """Broker API client with Alpaca defaults; build it with ``new_client``."""

    @classmethod
    def from_env(cls, *options: Option, sandbox: bool = False) -> "Client":
        """Create client from environment variables."""
        load_dotenv()
        api_key = os.getenv(ENV_BROKER_API_KEY, "")
        api_secret = os.getenv(ENV_BROKER_API_SECRET, "")

        factory = new_sandbox_client if sandbox else new_client
        return factory(api_key, api_secret, *options)


def new_client(api_key: str, api_secret: str, *options: Option) -> Client:
    """
    Create a Broker API client.

    Args:
        api_key: Broker API key, the Basic auth user name
        api_secret: Broker API secret, the Basic auth password
        *options: Configuration options, applied in order (later wins)

    Returns:
        Client bound to the resolved base URL, defaulting to LIVE_BASE_URL
    """
    draft = apply_options(LIVE_BASE_URL, options)
    auth = BasicAuth(ApiCredentials(api_key, api_secret))

    logger.debug(f"Creating broker client for {draft.base_url}")
    return Client(draft.to_config(), auth, http_session=draft.http_session)


def new_sandbox_client(api_key: str, api_secret: str, *options: Option) -> Client:
    """Create a client for the sandbox; SANDBOX_BASE_URL overrides any base URL option."""
    return new_client(api_key, api_secret, *options, with_base_url(SANDBOX_BASE_URL))
