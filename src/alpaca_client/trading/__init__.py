"""
Trading API client.

Orders, account, positions, assets, calendar and watchlists against the live
or paper trading endpoint. Every type used by the client is importable from
this package.
"""

from ..options import Option, with_base_url, with_http_client
from .client import (
    LIVE_BASE_URL,
    PAPER_BASE_URL,
    Client,
    new_client,
    new_paper_client,
)
from .enums import (
    OrderSide,
    OrderType,
    OrderStatus,
    TimeInForce,
    AssetClass,
    AssetStatus,
    PositionSide,
    ActivitySide,
    OrderClass,
    ActivityType,
    DtbpCheck,
    TradeConfirmEmail,
    AccountStatus,
)
from .models import (
    Account,
    AccountConfigurations,
    TakeProfitSpec,
    StopLossSpec,
    Order,
    Position,
    Asset,
    Clock,
    CalendarDay,
    Watchlist,
    PortfolioHistory,
    AccountActivity,
    OrderCancelResult,
    PositionCloseResult,
)
from .requests import (
    GetAccountRequest,
    GetAccountConfigurationsRequest,
    UpdateAccountConfigurationsRequest,
    GetPortfolioHistoryRequest,
    GetAccountActivitiesRequest,
    GetAccountActivitiesByTypeRequest,
    CreateOrderRequest,
    ListOrdersRequest,
    GetOrderRequest,
    GetOrderByClientIdRequest,
    ReplaceOrderRequest,
    CancelOrderRequest,
    CancelAllOrdersRequest,
    ListPositionsRequest,
    GetPositionRequest,
    ClosePositionRequest,
    CloseAllPositionsRequest,
    ExerciseOptionRequest,
    ListAssetsRequest,
    GetAssetRequest,
    GetClockRequest,
    GetCalendarRequest,
    ListWatchlistsRequest,
    CreateWatchlistRequest,
    GetWatchlistRequest,
    UpdateWatchlistRequest,
    DeleteWatchlistRequest,
    AddWatchlistAssetRequest,
    RemoveWatchlistAssetRequest,
)
from .responses import (
    GetAccountActivitiesResponse,
    ListOrdersResponse,
    CancelOrderResponse,
    CancelAllOrdersResponse,
    ListPositionsResponse,
    CloseAllPositionsResponse,
    ExerciseOptionResponse,
    ListAssetsResponse,
    GetCalendarResponse,
    ListWatchlistsResponse,
    DeleteWatchlistResponse,
    RemoveWatchlistAssetResponse,
)
from .service import TradingServiceClient

__all__ = [
    # Client
    "LIVE_BASE_URL",
    "PAPER_BASE_URL",
    "Client",
    "new_client",
    "new_paper_client",
    "Option",
    "with_base_url",
    "with_http_client",
    "TradingServiceClient",
    # Enums
    "OrderSide",
    "OrderType",
    "OrderStatus",
    "TimeInForce",
    "AssetClass",
    "AssetStatus",
    "PositionSide",
    "ActivitySide",
    "OrderClass",
    "ActivityType",
    "DtbpCheck",
    "TradeConfirmEmail",
    "AccountStatus",
    # Models
    "Account",
    "AccountConfigurations",
    "TakeProfitSpec",
    "StopLossSpec",
    "Order",
    "Position",
    "Asset",
    "Clock",
    "CalendarDay",
    "Watchlist",
    "PortfolioHistory",
    "AccountActivity",
    "OrderCancelResult",
    "PositionCloseResult",
    # Requests
    "GetAccountRequest",
    "GetAccountConfigurationsRequest",
    "UpdateAccountConfigurationsRequest",
    "GetPortfolioHistoryRequest",
    "GetAccountActivitiesRequest",
    "GetAccountActivitiesByTypeRequest",
    "CreateOrderRequest",
    "ListOrdersRequest",
    "GetOrderRequest",
    "GetOrderByClientIdRequest",
    "ReplaceOrderRequest",
    "CancelOrderRequest",
    "CancelAllOrdersRequest",
    "ListPositionsRequest",
    "GetPositionRequest",
    "ClosePositionRequest",
    "CloseAllPositionsRequest",
    "ExerciseOptionRequest",
    "ListAssetsRequest",
    "GetAssetRequest",
    "GetClockRequest",
    "GetCalendarRequest",
    "ListWatchlistsRequest",
    "CreateWatchlistRequest",
    "GetWatchlistRequest",
    "UpdateWatchlistRequest",
    "DeleteWatchlistRequest",
    "AddWatchlistAssetRequest",
    "RemoveWatchlistAssetRequest",
    # Responses
    "GetAccountActivitiesResponse",
    "ListOrdersResponse",
    "CancelOrderResponse",
    "CancelAllOrdersResponse",
    "ListPositionsResponse",
    "CloseAllPositionsResponse",
    "ExerciseOptionResponse",
    "ListAssetsResponse",
    "GetCalendarResponse",
    "ListWatchlistsResponse",
    "DeleteWatchlistResponse",
    "RemoveWatchlistAssetResponse",
]
