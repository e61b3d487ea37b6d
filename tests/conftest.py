# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing the Alpaca clients.
"""

import json
import pytest
from unittest.mock import Mock, AsyncMock, MagicMock
from typing import Any, Dict, List

import aiohttp

from alpaca_client import broker, marketdata, trading
from alpaca_client.options import with_http_client


def make_response(status: int = 200, payload: Any = None, text: str = None) -> Mock:
    """Build a mock aiohttp response whose body is ``payload`` encoded as JSON."""
    response = Mock()
    response.status = status
    if text is None:
        text = "" if payload is None else json.dumps(payload)
    response.text = AsyncMock(return_value=text)
    return response


def attach_response(session: MagicMock, response: Mock) -> None:
    """Make ``session.request(...)`` yield ``response`` inside ``async with``."""
    context = session.request.return_value
    context.__aenter__.return_value = response
    # A truthy __aexit__ would swallow errors raised inside the block
    context.__aexit__.return_value = False


# Credentials
@pytest.fixture
def api_key() -> str:
    return "AKFAKE123"


@pytest.fixture
def api_secret() -> str:
    return "secretXYZ"


# Mock session fixtures
@pytest.fixture
def mock_session() -> MagicMock:
    """Mock aiohttp ClientSession answering every request with an empty 200."""
    session = MagicMock(spec=aiohttp.ClientSession)
    session.closed = False
    session.close = AsyncMock()
    attach_response(session, make_response(200))
    return session


@pytest.fixture
def respond(mock_session):
    """Set the response the mock session returns: ``respond(payload, status=200)``."""
    def _respond(payload: Any = None, status: int = 200, text: str = None) -> Mock:
        response = make_response(status, payload, text)
        attach_response(mock_session, response)
        return response
    return _respond


# Client fixtures
@pytest.fixture
def trading_client(api_key, api_secret, mock_session):
    """Trading client wired to the mock session."""
    return trading.new_client(api_key, api_secret, with_http_client(mock_session))


@pytest.fixture
def marketdata_client(api_key, api_secret, mock_session):
    """Market data client wired to the mock session."""
    return marketdata.new_client(api_key, api_secret, with_http_client(mock_session))


@pytest.fixture
def broker_client(api_key, api_secret, mock_session):
    """Broker client wired to the mock session."""
    return broker.new_client(api_key, api_secret, with_http_client(mock_session))


# Mock data fixtures
@pytest.fixture
def order_data() -> Dict[str, Any]:
    """Order as returned by the Trading API."""
    return {
        "id": "61e69015-8549-4bfd-b9c3-01e75843f47d",
        "client_order_id": "eb9e2aaa-f71a-4f51-b5b4-52a6c565dad4",
        "created_at": "2024-03-01T14:30:00.123456789Z",
        "submitted_at": "2024-03-01T14:30:00.2Z",
        "filled_at": None,
        "asset_id": "b0b6dd9d-8b9b-48a9-ba46-b9d54906e415",
        "symbol": "AAPL",
        "asset_class": "us_equity",
        "qty": "10",
        "filled_qty": "0",
        "order_class": "simple",
        "type": "limit",
        "side": "buy",
        "time_in_force": "day",
        "limit_price": "170.25",
        "status": "new",
        "extended_hours": False,
        "legs": None,
    }


@pytest.fixture
def account_data() -> Dict[str, Any]:
    """Trading account as returned by the Trading API."""
    return {
        "id": "904837e3-3b76-47ec-b432-046db621571b",
        "account_number": "PA3FAKE01",
        "status": "ACTIVE",
        "currency": "USD",
        "cash": "100000.00",
        "buying_power": "400000.00",
        "equity": "100000.00",
        "pattern_day_trader": False,
        "trading_blocked": False,
        "created_at": "2024-01-02T10:00:00Z",
        "multiplier": "4",
    }


@pytest.fixture
def bars_data() -> Dict[str, Any]:
    """Historical bars page as returned by the Market Data API."""
    return {
        "bars": {
            "AAPL": [
                {"t": "2024-03-01T05:00:00Z", "o": 179.55, "h": 180.53, "l": 177.38,
                 "c": 179.66, "v": 73488997, "n": 899745, "vw": 179.0},
                {"t": "2024-03-04T05:00:00Z", "o": 176.15, "h": 176.9, "l": 173.79,
                 "c": 175.1, "v": 81510101, "n": 1005567, "vw": 175.3},
            ],
        },
        "next_page_token": "QUFQTHxEfDIwMjQtMDMtMDRUMDU6MDA6MDAuMDAwMDAwMDAwWg==",
        "currency": "USD",
    }


@pytest.fixture
def broker_accounts_data() -> List[Dict[str, Any]]:
    """Customer accounts as returned by the Broker API."""
    return [
        {
            "id": "b9b19618-22dd-4e80-8432-fc9e1ba0b27d",
            "account_number": "935142145",
            "status": "APPROVED",
            "currency": "USD",
            "last_equity": "0",
            "created_at": "2024-02-10T16:01:09.123Z",
            "contact": {
                "email_address": "jane.doe@example.com",
                "street_address": ["20 N San Mateo Dr"],
                "city": "San Mateo",
            },
            "identity": {
                "given_name": "Jane",
                "family_name": "Doe",
                "date_of_birth": "1990-01-01",
            },
            "agreements": [
                {"agreement": "customer_agreement", "signed_at": "2024-02-10T16:00:00Z",
                 "ip_address": "127.0.0.1"},
            ],
        },
    ]
