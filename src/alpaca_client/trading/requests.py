"""
Trading API request types.

One dataclass per operation. Fields declared with ``path_field`` go into the
URL; the rest become query parameters (GET, DELETE) or the JSON body.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from ..models.base import Request, path_field
from .enums import (
    ActivityType,
    AssetClass,
    AssetStatus,
    DtbpCheck,
    OrderClass,
    OrderSide,
    OrderType,
    TimeInForce,
    TradeConfirmEmail,
)
from .models import StopLossSpec, TakeProfitSpec


# Account

@dataclass(frozen=True)
class GetAccountRequest(Request):
    pass


@dataclass(frozen=True)
class GetAccountConfigurationsRequest(Request):
    pass


@dataclass(frozen=True)
class UpdateAccountConfigurationsRequest(Request):
    """Only the fields that are set are changed."""
    dtbp_check: Optional[DtbpCheck] = None
    trade_confirm_email: Optional[TradeConfirmEmail] = None
    suspend_trade: Optional[bool] = None
    no_shorting: Optional[bool] = None
    fractional_trading: Optional[bool] = None
    max_margin_multiplier: Optional[str] = None
    max_options_trading_level: Optional[int] = None
    pdt_check: Optional[str] = None
    ptp_no_exception_entry: Optional[bool] = None


@dataclass(frozen=True)
class GetPortfolioHistoryRequest(Request):
    """
    Portfolio history query.

    ``period`` is a duration such as ``1D``, ``1W``, ``1M`` or ``1A``;
    ``timeframe`` one of ``1Min``, ``5Min``, ``15Min``, ``1H`` or ``1D``.
    """
    period: Optional[str] = None
    timeframe: Optional[str] = None
    intraday_reporting: Optional[str] = None
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    pnl_reset: Optional[str] = None
    extended_hours: Optional[bool] = None


@dataclass(frozen=True)
class GetAccountActivitiesRequest(Request):
    activity_types: Optional[List[ActivityType]] = None
    date: Optional[dt.date] = None
    until: Optional[dt.datetime] = None
    after: Optional[dt.datetime] = None
    direction: Optional[str] = None
    page_size: Optional[int] = None
    page_token: Optional[str] = None


@dataclass(frozen=True)
class GetAccountActivitiesByTypeRequest(Request):
    activity_type: ActivityType = path_field()
    date: Optional[dt.date] = None
    until: Optional[dt.datetime] = None
    after: Optional[dt.datetime] = None
    direction: Optional[str] = None
    page_size: Optional[int] = None
    page_token: Optional[str] = None


# Orders

@dataclass(frozen=True)
class CreateOrderRequest(Request):
    """
    New order.

    Exactly one of ``qty`` and ``notional`` should be set. Bracket, OCO and
    OTO orders set ``order_class`` and the ``take_profit``/``stop_loss`` legs.
    """
    symbol: str
    side: OrderSide
    type: OrderType
    time_in_force: TimeInForce
    qty: Optional[Decimal] = None
    notional: Optional[Decimal] = None
    limit_price: Optional[Decimal] = None
    stop_price: Optional[Decimal] = None
    trail_price: Optional[Decimal] = None
    trail_percent: Optional[Decimal] = None
    extended_hours: Optional[bool] = None
    client_order_id: Optional[str] = None
    order_class: Optional[OrderClass] = None
    take_profit: Optional[TakeProfitSpec] = None
    stop_loss: Optional[StopLossSpec] = None
    position_intent: Optional[str] = None


@dataclass(frozen=True)
class ListOrdersRequest(Request):
    """``status`` is ``open``, ``closed`` or ``all``."""
    status: Optional[str] = None
    limit: Optional[int] = None
    after: Optional[dt.datetime] = None
    until: Optional[dt.datetime] = None
    direction: Optional[str] = None
    nested: Optional[bool] = None
    symbols: Optional[List[str]] = None
    side: Optional[OrderSide] = None


@dataclass(frozen=True)
class GetOrderRequest(Request):
    order_id: str = path_field()
    nested: Optional[bool] = None


@dataclass(frozen=True)
class GetOrderByClientIdRequest(Request):
    client_order_id: str


@dataclass(frozen=True)
class ReplaceOrderRequest(Request):
    order_id: str = path_field()
    qty: Optional[Decimal] = None
    time_in_force: Optional[TimeInForce] = None
    limit_price: Optional[Decimal] = None
    stop_price: Optional[Decimal] = None
    trail: Optional[Decimal] = None
    client_order_id: Optional[str] = None


@dataclass(frozen=True)
class CancelOrderRequest(Request):
    order_id: str = path_field()


@dataclass(frozen=True)
class CancelAllOrdersRequest(Request):
    pass


# Positions

@dataclass(frozen=True)
class ListPositionsRequest(Request):
    pass


@dataclass(frozen=True)
class GetPositionRequest(Request):
    symbol_or_asset_id: str = path_field()


@dataclass(frozen=True)
class ClosePositionRequest(Request):
    """Closes the whole position unless ``qty`` or ``percentage`` is set."""
    symbol_or_asset_id: str = path_field()
    qty: Optional[Decimal] = None
    percentage: Optional[Decimal] = None


@dataclass(frozen=True)
class CloseAllPositionsRequest(Request):
    cancel_orders: Optional[bool] = None


@dataclass(frozen=True)
class ExerciseOptionRequest(Request):
    symbol_or_contract_id: str = path_field()


# Assets

@dataclass(frozen=True)
class ListAssetsRequest(Request):
    status: Optional[AssetStatus] = None
    asset_class: Optional[AssetClass] = None
    exchange: Optional[str] = None
    attributes: Optional[List[str]] = None


@dataclass(frozen=True)
class GetAssetRequest(Request):
    symbol_or_asset_id: str = path_field()


# Calendar and clock

@dataclass(frozen=True)
class GetClockRequest(Request):
    pass


@dataclass(frozen=True)
class GetCalendarRequest(Request):
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None


# Watchlists

@dataclass(frozen=True)
class ListWatchlistsRequest(Request):
    pass


@dataclass(frozen=True)
class CreateWatchlistRequest(Request):
    name: str
    symbols: Optional[List[str]] = None


@dataclass(frozen=True)
class GetWatchlistRequest(Request):
    watchlist_id: str = path_field()


@dataclass(frozen=True)
class UpdateWatchlistRequest(Request):
    """Replaces the name and the full symbol list."""
    watchlist_id: str = path_field()
    name: Optional[str] = None
    symbols: Optional[List[str]] = None


@dataclass(frozen=True)
class DeleteWatchlistRequest(Request):
    watchlist_id: str = path_field()


@dataclass(frozen=True)
class AddWatchlistAssetRequest(Request):
    watchlist_id: str = path_field()
    symbol: Optional[str] = None


@dataclass(frozen=True)
class RemoveWatchlistAssetRequest(Request):
    watchlist_id: str = path_field()
    symbol: str = path_field()
