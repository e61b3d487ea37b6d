"""
Functional options shared by the client factories.

Options are callables applied in order to a mutable ``ClientOptions`` draft;
later options override earlier ones for the same field. The draft is then
frozen into a ``ConnectionConfig``.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from aiohttp import ClientSession

from .models.config import ConnectionConfig


@dataclass
class ClientOptions:
    """Draft configuration, mutated only while a client is being built."""
    base_url: str
    http_session: Optional[ClientSession] = None

    def to_config(self) -> ConnectionConfig:
        return ConnectionConfig(base_url=self.base_url)


Option = Callable[[ClientOptions], None]


def with_http_client(session: ClientSession) -> Option:
    """Use a caller-owned aiohttp session for all requests."""
    def apply(options: ClientOptions) -> None:
        options.http_session = session
    return apply


def with_base_url(url: str) -> Option:
    """Send requests to ``url`` instead of the API's default endpoint."""
    def apply(options: ClientOptions) -> None:
        options.base_url = url
    return apply


def apply_options(default_base_url: str, options: Iterable[Option]) -> ClientOptions:
    """Build a draft from the defaults and apply ``options`` left to right."""
    draft = ClientOptions(base_url=default_base_url)
    for option in options:
        option(draft)
    return draft
