"""
Trading API service client.

One coroutine per Trading API operation. Requests are sent as they are:
no local validation, no retries.
"""

from typing import Optional

from ..service import ServiceClient
from ..utils import path_segment
from .models import (
    Account,
    AccountConfigurations,
    Asset,
    Clock,
    Order,
    PortfolioHistory,
    Position,
    Watchlist,
)
from .requests import (
    AddWatchlistAssetRequest,
    CancelAllOrdersRequest,
    CancelOrderRequest,
    CloseAllPositionsRequest,
    ClosePositionRequest,
    CreateOrderRequest,
    CreateWatchlistRequest,
    DeleteWatchlistRequest,
    ExerciseOptionRequest,
    GetAccountActivitiesByTypeRequest,
    GetAccountActivitiesRequest,
    GetAccountConfigurationsRequest,
    GetAccountRequest,
    GetAssetRequest,
    GetCalendarRequest,
    GetClockRequest,
    GetOrderByClientIdRequest,
    GetOrderRequest,
    GetPortfolioHistoryRequest,
    GetPositionRequest,
    GetWatchlistRequest,
    ListAssetsRequest,
    ListOrdersRequest,
    ListPositionsRequest,
    ListWatchlistsRequest,
    RemoveWatchlistAssetRequest,
    ReplaceOrderRequest,
    UpdateAccountConfigurationsRequest,
    UpdateWatchlistRequest,
)
from .responses import (
    CancelAllOrdersResponse,
    CancelOrderResponse,
    CloseAllPositionsResponse,
    DeleteWatchlistResponse,
    ExerciseOptionResponse,
    GetAccountActivitiesResponse,
    GetCalendarResponse,
    ListAssetsResponse,
    ListOrdersResponse,
    ListPositionsResponse,
    ListWatchlistsResponse,
    RemoveWatchlistAssetResponse,
)


class TradingServiceClient(ServiceClient):
    """Async client for the Trading API (``/v2``)."""

    # Account methods
    async def get_account(self, request: Optional[GetAccountRequest] = None) -> Account:
        """Get the trading account."""
        data = await self._call("GET", "/v2/account")
        return Account.from_dict(data)

    async def get_account_configurations(
        self, request: Optional[GetAccountConfigurationsRequest] = None
    ) -> AccountConfigurations:
        data = await self._call("GET", "/v2/account/configurations")
        return AccountConfigurations.from_dict(data)

    async def update_account_configurations(
        self, request: UpdateAccountConfigurationsRequest
    ) -> AccountConfigurations:
        data = await self._call(
            "PATCH", "/v2/account/configurations", json_body=request.to_dict()
        )
        return AccountConfigurations.from_dict(data)

    async def get_portfolio_history(
        self, request: Optional[GetPortfolioHistoryRequest] = None
    ) -> PortfolioHistory:
        request = request or GetPortfolioHistoryRequest()
        data = await self._call(
            "GET", "/v2/account/portfolio/history", params=request.to_params()
        )
        return PortfolioHistory.from_dict(data)

    async def get_account_activities(
        self, request: Optional[GetAccountActivitiesRequest] = None
    ) -> GetAccountActivitiesResponse:
        """Get account activities of any type, newest first by default."""
        request = request or GetAccountActivitiesRequest()
        data = await self._call(
            "GET", "/v2/account/activities", params=request.to_params()
        )
        return GetAccountActivitiesResponse.from_dict({"activities": data})

    async def get_account_activities_by_type(
        self, request: GetAccountActivitiesByTypeRequest
    ) -> GetAccountActivitiesResponse:
        path = f"/v2/account/activities/{path_segment(request.activity_type)}"
        data = await self._call("GET", path, params=request.to_params())
        return GetAccountActivitiesResponse.from_dict({"activities": data})

    # Order methods
    async def create_order(self, request: CreateOrderRequest) -> Order:
        """Submit a new order."""
        data = await self._call("POST", "/v2/orders", json_body=request.to_dict())
        return Order.from_dict(data)

    async def list_orders(
        self, request: Optional[ListOrdersRequest] = None
    ) -> ListOrdersResponse:
        request = request or ListOrdersRequest()
        data = await self._call("GET", "/v2/orders", params=request.to_params())
        return ListOrdersResponse.from_dict({"orders": data})

    async def get_order(self, request: GetOrderRequest) -> Order:
        path = f"/v2/orders/{path_segment(request.order_id)}"
        data = await self._call("GET", path, params=request.to_params())
        return Order.from_dict(data)

    async def get_order_by_client_id(self, request: GetOrderByClientIdRequest) -> Order:
        data = await self._call(
            "GET", "/v2/orders:by_client_order_id", params=request.to_params()
        )
        return Order.from_dict(data)

    async def replace_order(self, request: ReplaceOrderRequest) -> Order:
        """Replace an open order; the server returns the new order."""
        path = f"/v2/orders/{path_segment(request.order_id)}"
        data = await self._call("PATCH", path, json_body=request.to_dict())
        return Order.from_dict(data)

    async def cancel_order(self, request: CancelOrderRequest) -> CancelOrderResponse:
        await self._call("DELETE", f"/v2/orders/{path_segment(request.order_id)}")
        return CancelOrderResponse(order_id=request.order_id)

    async def cancel_all_orders(
        self, request: Optional[CancelAllOrdersRequest] = None
    ) -> CancelAllOrdersResponse:
        data = await self._call("DELETE", "/v2/orders")
        return CancelAllOrdersResponse.from_dict({"results": data or []})

    # Position methods
    async def list_positions(
        self, request: Optional[ListPositionsRequest] = None
    ) -> ListPositionsResponse:
        data = await self._call("GET", "/v2/positions")
        return ListPositionsResponse.from_dict({"positions": data})

    async def get_position(self, request: GetPositionRequest) -> Position:
        path = f"/v2/positions/{path_segment(request.symbol_or_asset_id)}"
        data = await self._call("GET", path)
        return Position.from_dict(data)

    async def close_position(self, request: ClosePositionRequest) -> Order:
        """Liquidate a position; returns the closing order."""
        path = f"/v2/positions/{path_segment(request.symbol_or_asset_id)}"
        data = await self._call("DELETE", path, params=request.to_params())
        return Order.from_dict(data)

    async def close_all_positions(
        self, request: Optional[CloseAllPositionsRequest] = None
    ) -> CloseAllPositionsResponse:
        request = request or CloseAllPositionsRequest()
        data = await self._call("DELETE", "/v2/positions", params=request.to_params())
        return CloseAllPositionsResponse.from_dict({"results": data or []})

    async def exercise_option(self, request: ExerciseOptionRequest) -> ExerciseOptionResponse:
        path = f"/v2/positions/{path_segment(request.symbol_or_contract_id)}/exercise"
        await self._call("POST", path)
        return ExerciseOptionResponse(symbol_or_contract_id=request.symbol_or_contract_id)

    # Asset methods
    async def list_assets(
        self, request: Optional[ListAssetsRequest] = None
    ) -> ListAssetsResponse:
        request = request or ListAssetsRequest()
        data = await self._call("GET", "/v2/assets", params=request.to_params())
        return ListAssetsResponse.from_dict({"assets": data})

    async def get_asset(self, request: GetAssetRequest) -> Asset:
        path = f"/v2/assets/{path_segment(request.symbol_or_asset_id)}"
        data = await self._call("GET", path)
        return Asset.from_dict(data)

    # Market calendar methods
    async def get_clock(self, request: Optional[GetClockRequest] = None) -> Clock:
        data = await self._call("GET", "/v2/clock")
        return Clock.from_dict(data)

    async def get_calendar(
        self, request: Optional[GetCalendarRequest] = None
    ) -> GetCalendarResponse:
        request = request or GetCalendarRequest()
        data = await self._call("GET", "/v2/calendar", params=request.to_params())
        return GetCalendarResponse.from_dict({"days": data})

    # Watchlist methods
    async def list_watchlists(
        self, request: Optional[ListWatchlistsRequest] = None
    ) -> ListWatchlistsResponse:
        data = await self._call("GET", "/v2/watchlists")
        return ListWatchlistsResponse.from_dict({"watchlists": data})

    async def create_watchlist(self, request: CreateWatchlistRequest) -> Watchlist:
        data = await self._call("POST", "/v2/watchlists", json_body=request.to_dict())
        return Watchlist.from_dict(data)

    async def get_watchlist(self, request: GetWatchlistRequest) -> Watchlist:
        data = await self._call("GET", f"/v2/watchlists/{path_segment(request.watchlist_id)}")
        return Watchlist.from_dict(data)

    async def update_watchlist(self, request: UpdateWatchlistRequest) -> Watchlist:
        path = f"/v2/watchlists/{path_segment(request.watchlist_id)}"
        data = await self._call("PUT", path, json_body=request.to_dict())
        return Watchlist.from_dict(data)

    async def delete_watchlist(self, request: DeleteWatchlistRequest) -> DeleteWatchlistResponse:
        await self._call("DELETE", f"/v2/watchlists/{path_segment(request.watchlist_id)}")
        return DeleteWatchlistResponse(watchlist_id=request.watchlist_id)

    async def add_watchlist_asset(self, request: AddWatchlistAssetRequest) -> Watchlist:
        path = f"/v2/watchlists/{path_segment(request.watchlist_id)}"
        data = await self._call("POST", path, json_body=request.to_dict())
        return Watchlist.from_dict(data)

    async def remove_watchlist_asset(
        self, request: RemoveWatchlistAssetRequest
    ) -> RemoveWatchlistAssetResponse:
        path = (
            f"/v2/watchlists/{path_segment(request.watchlist_id)}"
            f"/{path_segment(request.symbol)}"
        )
        data = await self._call("DELETE", path)
        return RemoveWatchlistAssetResponse.from_dict({"watchlist": data})
