"""
Constants for the Alpaca client.
"""

# API Configuration
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "alpaca-client/0.1"

# Key-header authentication (trading and market data APIs)
API_KEY_ID_HEADER = "APCA-API-KEY-ID"
API_SECRET_KEY_HEADER = "APCA-API-SECRET-KEY"

# Environment variables read by Client.from_env
ENV_API_KEY_ID = "APCA_API_KEY_ID"
ENV_API_SECRET_KEY = "APCA_API_SECRET_KEY"
ENV_BROKER_API_KEY = "ALPACA_BROKER_API_KEY"
ENV_BROKER_API_SECRET = "ALPACA_BROKER_API_SECRET"
