"""
Configuration models for Alpaca client.

Immutable configuration structures resolved once per client.
"""

from dataclasses import dataclass

from ..constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


@dataclass(frozen=True)
class ConnectionConfig:
    """Resolved connection settings for one client."""
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
