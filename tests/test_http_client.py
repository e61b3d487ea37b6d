# -*- coding: utf-8 -*-
"""
Tests for HttpClient request execution and error mapping.
"""

import asyncio
import pytest
import aiohttp
from unittest.mock import MagicMock

from alpaca_client.auth import ApiCredentials, KeyHeaderAuth
from alpaca_client.http_client import (
    APIClientError,
    APIError,
    APIServerError,
    AuthenticationError,
    HttpClient,
    ResponseDecodeError,
)
from alpaca_client.models import ConnectionConfig

from conftest import attach_response, make_response


@pytest.fixture
def http_client():
    """HttpClient with key-header auth against a test endpoint."""
    config = ConnectionConfig(base_url="https://api.example.com/")
    return HttpClient(config, KeyHeaderAuth(ApiCredentials("key", "secret")))


class TestRequest:
    """Test request construction."""

    @pytest.mark.asyncio
    async def test_get_with_params(self, http_client, mock_session):
        """Test URL joining, headers and query parameters."""
        attach_response(mock_session, make_response(200, {"ok": True}))

        result = await http_client.request(mock_session, "GET", "/v2/clock", params={"a": "1"})

        assert result == {"ok": True}
        mock_session.request.assert_called_once_with(
            method="GET",
            url="https://api.example.com/v2/clock",
            headers={
                "Accept": "application/json",
                "APCA-API-KEY-ID": "key",
                "APCA-API-SECRET-KEY": "secret",
            },
            params={"a": "1"},
        )

    @pytest.mark.asyncio
    async def test_post_with_json_body(self, http_client, mock_session):
        """Test that a body is passed as json and empty params are left out."""
        attach_response(mock_session, make_response(200, {"id": "1"}))

        await http_client.request(mock_session, "POST", "/v2/orders", params={}, json_body={"a": 1})

        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["json"] == {"a": 1}
        assert "params" not in kwargs

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, http_client, mock_session):
        """Test that a 204 with no body yields None."""
        attach_response(mock_session, make_response(204))
        assert await http_client.request(mock_session, "DELETE", "/v2/orders/1") is None

    @pytest.mark.asyncio
    async def test_list_body(self, http_client, mock_session):
        """Test that a JSON array is returned as a list."""
        attach_response(mock_session, make_response(200, [1, 2]))
        assert await http_client.request(mock_session, "GET", "/v2/positions") == [1, 2]


class TestErrorMapping:
    """Test mapping of failed responses to exceptions."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_authentication_errors(self, http_client, mock_session, status):
        """Test that 401 and 403 raise AuthenticationError."""
        body = {"code": 40110000, "message": "request is not authorized"}
        attach_response(mock_session, make_response(status, body))

        with pytest.raises(AuthenticationError) as exc_info:
            await http_client.request(mock_session, "GET", "/v2/account")

        error = exc_info.value
        assert isinstance(error, APIClientError)
        assert error.status_code == status
        assert error.code == 40110000
        assert error.response_data == body
        assert str(error) == f"Authentication failed ({status}): request is not authorized"

    @pytest.mark.asyncio
    async def test_client_error(self, http_client, mock_session):
        """Test that other 4xx raise APIClientError."""
        attach_response(mock_session, make_response(404, {"message": "order not found"}))

        with pytest.raises(APIClientError) as exc_info:
            await http_client.request(mock_session, "GET", "/v2/orders/x")

        assert not isinstance(exc_info.value, AuthenticationError)
        assert str(exc_info.value) == "Client error 404: order not found"
        assert exc_info.value.code is None

    @pytest.mark.asyncio
    async def test_server_error(self, http_client, mock_session):
        """Test that 5xx raise APIServerError."""
        attach_response(mock_session, make_response(500, {"message": "internal"}))

        with pytest.raises(APIServerError, match="Server error 500: internal"):
            await http_client.request(mock_session, "GET", "/v2/account")

    @pytest.mark.asyncio
    async def test_error_without_body(self, http_client, mock_session):
        """Test that an empty error body still raises."""
        attach_response(mock_session, make_response(503))

        with pytest.raises(APIServerError) as exc_info:
            await http_client.request(mock_session, "GET", "/v2/account")

        assert exc_info.value.response_data is None

    @pytest.mark.asyncio
    async def test_invalid_json_success(self, http_client, mock_session):
        """Test that a 2xx body that is not JSON raises ResponseDecodeError."""
        attach_response(mock_session, make_response(200, text="not json"))

        with pytest.raises(ResponseDecodeError) as exc_info:
            await http_client.request(mock_session, "GET", "/v2/account")

        assert isinstance(exc_info.value, APIError)
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_transport_errors_pass_through(self, http_client):
        """Test that aiohttp and timeout errors are not wrapped."""
        session = MagicMock()
        session.request.side_effect = aiohttp.ClientConnectionError("refused")
        with pytest.raises(aiohttp.ClientConnectionError):
            await http_client.request(session, "GET", "/v2/account")

        session.request.side_effect = asyncio.TimeoutError()
        with pytest.raises(asyncio.TimeoutError):
            await http_client.request(session, "GET", "/v2/account")

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, http_client, mock_session, caplog):
        """Test that failed requests are logged at error level without credentials."""
        attach_response(mock_session, make_response(400, {"message": "bad"}))

        with caplog.at_level("ERROR", logger="alpaca_client.http_client"):
            with pytest.raises(APIClientError):
                await http_client.request(mock_session, "GET", "/v2/orders")

        assert "GET /v2/orders failed" in caplog.text
        assert "secret" not in caplog.text
