"""
Data models for Alpaca client.

This package contains the configuration structure and the base classes
shared by the request, response and model types of every API surface.
"""

from .base import ApiEnum, Model, Request, api_field, path_field
from .config import ConnectionConfig

__all__ = [
    # Configuration
    "ConnectionConfig",
    # Base classes
    "ApiEnum",
    "Model",
    "Request",
    "api_field",
    "path_field",
]
