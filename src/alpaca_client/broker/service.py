"""
Broker API service client.

Account management lives under ``/v1/accounts``; orders and positions of a
customer account under ``/v1/trading/accounts/{account_id}``.
"""

from typing import Optional

from ..service import ServiceClient
from ..utils import path_segment
from .models import ACHRelationship, BrokerAccount, BrokerOrder, BrokerPosition, Transfer
from .requests import (
    CancelTradingOrderRequest,
    CancelTransferRequest,
    CloseAllTradingPositionsRequest,
    CloseBrokerAccountRequest,
    CloseTradingPositionRequest,
    CreateACHRelationshipRequest,
    CreateAccountRequest,
    CreateTradingOrderRequest,
    CreateTransferRequest,
    DeleteACHRelationshipRequest,
    GetBrokerAccountRequest,
    GetTradingOrderRequest,
    GetTradingPositionRequest,
    GetTransferRequest,
    ListACHRelationshipsRequest,
    ListAccountsRequest,
    ListTradingOrdersRequest,
    ListTradingPositionsRequest,
    ListTransfersRequest,
    UpdateBrokerAccountRequest,
)
from .responses import (
    CancelTradingOrderResponse,
    CancelTransferResponse,
    CloseAllTradingPositionsResponse,
    CloseBrokerAccountResponse,
    DeleteACHRelationshipResponse,
    ListACHRelationshipsResponse,
    ListAccountsResponse,
    ListTradingOrdersResponse,
    ListTradingPositionsResponse,
    ListTransfersResponse,
)


def _account_path(account_id: str) -> str:
    return f"/v1/accounts/{path_segment(account_id)}"


def _trading_path(account_id: str) -> str:
    return f"/v1/trading/accounts/{path_segment(account_id)}"


class BrokerServiceClient(ServiceClient):
    """Async client for the Broker API (``/v1``)."""

    # Account methods
    async def create_account(self, request: CreateAccountRequest) -> BrokerAccount:
        """Open a customer account."""
        data = await self._call("POST", "/v1/accounts", json_body=request.to_dict())
        return BrokerAccount.from_dict(data)

    async def list_accounts(
        self, request: Optional[ListAccountsRequest] = None
    ) -> ListAccountsResponse:
        request = request or ListAccountsRequest()
        data = await self._call("GET", "/v1/accounts", params=request.to_params())
        return ListAccountsResponse.from_dict({"accounts": data})

    async def get_broker_account(self, request: GetBrokerAccountRequest) -> BrokerAccount:
        data = await self._call("GET", _account_path(request.account_id))
        return BrokerAccount.from_dict(data)

    async def update_broker_account(self, request: UpdateBrokerAccountRequest) -> BrokerAccount:
        data = await self._call(
            "PATCH", _account_path(request.account_id), json_body=request.to_dict()
        )
        return BrokerAccount.from_dict(data)

    async def close_broker_account(
        self, request: CloseBrokerAccountRequest
    ) -> CloseBrokerAccountResponse:
        """Close an account; its positions must be liquidated first."""
        await self._call("POST", f"{_account_path(request.account_id)}/actions/close")
        return CloseBrokerAccountResponse(account_id=request.account_id)

    # ACH relationship methods
    async def create_ach_relationship(
        self, request: CreateACHRelationshipRequest
    ) -> ACHRelationship:
        path = f"{_account_path(request.account_id)}/ach_relationships"
        data = await self._call("POST", path, json_body=request.to_dict())
        return ACHRelationship.from_dict(data)

    async def list_ach_relationships(
        self, request: ListACHRelationshipsRequest
    ) -> ListACHRelationshipsResponse:
        path = f"{_account_path(request.account_id)}/ach_relationships"
        data = await self._call("GET", path, params=request.to_params())
        return ListACHRelationshipsResponse.from_dict({"ach_relationships": data})

    async def delete_ach_relationship(
        self, request: DeleteACHRelationshipRequest
    ) -> DeleteACHRelationshipResponse:
        path = (
            f"{_account_path(request.account_id)}/ach_relationships"
            f"/{path_segment(request.ach_relationship_id)}"
        )
        await self._call("DELETE", path)
        return DeleteACHRelationshipResponse(ach_relationship_id=request.ach_relationship_id)

    # Transfer methods
    async def create_transfer(self, request: CreateTransferRequest) -> Transfer:
        """Move funds in or out of an account over a linked relationship."""
        path = f"{_account_path(request.account_id)}/transfers"
        data = await self._call("POST", path, json_body=request.to_dict())
        return Transfer.from_dict(data)

    async def list_transfers(self, request: ListTransfersRequest) -> ListTransfersResponse:
        path = f"{_account_path(request.account_id)}/transfers"
        data = await self._call("GET", path, params=request.to_params())
        return ListTransfersResponse.from_dict({"transfers": data})

    async def get_transfer(self, request: GetTransferRequest) -> Transfer:
        path = f"{_account_path(request.account_id)}/transfers/{path_segment(request.transfer_id)}"
        data = await self._call("GET", path)
        return Transfer.from_dict(data)

    async def cancel_transfer(self, request: CancelTransferRequest) -> CancelTransferResponse:
        path = f"{_account_path(request.account_id)}/transfers/{path_segment(request.transfer_id)}"
        await self._call("DELETE", path)
        return CancelTransferResponse(transfer_id=request.transfer_id)

    # Trading methods
    async def create_trading_order(self, request: CreateTradingOrderRequest) -> BrokerOrder:
        """Submit an order on behalf of a customer account."""
        path = f"{_trading_path(request.account_id)}/orders"
        data = await self._call("POST", path, json_body=request.to_dict())
        return BrokerOrder.from_dict(data)

    async def list_trading_orders(
        self, request: ListTradingOrdersRequest
    ) -> ListTradingOrdersResponse:
        path = f"{_trading_path(request.account_id)}/orders"
        data = await self._call("GET", path, params=request.to_params())
        return ListTradingOrdersResponse.from_dict({"orders": data})

    async def get_trading_order(self, request: GetTradingOrderRequest) -> BrokerOrder:
        path = f"{_trading_path(request.account_id)}/orders/{path_segment(request.order_id)}"
        data = await self._call("GET", path, params=request.to_params())
        return BrokerOrder.from_dict(data)

    async def cancel_trading_order(
        self, request: CancelTradingOrderRequest
    ) -> CancelTradingOrderResponse:
        path = f"{_trading_path(request.account_id)}/orders/{path_segment(request.order_id)}"
        await self._call("DELETE", path)
        return CancelTradingOrderResponse(order_id=request.order_id)

    async def list_trading_positions(
        self, request: ListTradingPositionsRequest
    ) -> ListTradingPositionsResponse:
        data = await self._call("GET", f"{_trading_path(request.account_id)}/positions")
        return ListTradingPositionsResponse.from_dict({"positions": data})

    async def get_trading_position(self, request: GetTradingPositionRequest) -> BrokerPosition:
        path = (
            f"{_trading_path(request.account_id)}/positions"
            f"/{path_segment(request.symbol_or_asset_id)}"
        )
        data = await self._call("GET", path)
        return BrokerPosition.from_dict(data)

    async def close_trading_position(self, request: CloseTradingPositionRequest) -> BrokerOrder:
        """Liquidate a position of the account; returns the closing order."""
        path = (
            f"{_trading_path(request.account_id)}/positions"
            f"/{path_segment(request.symbol_or_asset_id)}"
        )
        data = await self._call("DELETE", path, params=request.to_params())
        return BrokerOrder.from_dict(data)

    async def close_all_trading_positions(
        self, request: CloseAllTradingPositionsRequest
    ) -> CloseAllTradingPositionsResponse:
        path = f"{_trading_path(request.account_id)}/positions"
        data = await self._call("DELETE", path, params=request.to_params())
        return CloseAllTradingPositionsResponse.from_dict({"results": data or []})
