"""
Trading API models.

Immutable data structures for accounts, orders, positions, assets and
watchlists. Fields mirror the API's JSON keys; every field is optional
because the server omits what does not apply.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from ..models.base import Model, api_field
from .enums import (
    AccountStatus,
    ActivitySide,
    ActivityType,
    AssetClass,
    AssetStatus,
    DtbpCheck,
    OrderClass,
    OrderSide,
    OrderStatus,
    OrderType,
    PositionSide,
    TimeInForce,
    TradeConfirmEmail,
)


@dataclass(frozen=True)
class Account(Model):
    """Trading account summary."""
    id: Optional[str] = None
    account_number: Optional[str] = None
    status: Optional[AccountStatus] = None
    crypto_status: Optional[AccountStatus] = None
    currency: Optional[str] = None
    cash: Optional[Decimal] = None
    portfolio_value: Optional[Decimal] = None
    equity: Optional[Decimal] = None
    last_equity: Optional[Decimal] = None
    buying_power: Optional[Decimal] = None
    regt_buying_power: Optional[Decimal] = None
    daytrading_buying_power: Optional[Decimal] = None
    non_marginable_buying_power: Optional[Decimal] = None
    options_buying_power: Optional[Decimal] = None
    multiplier: Optional[str] = None
    initial_margin: Optional[Decimal] = None
    maintenance_margin: Optional[Decimal] = None
    last_maintenance_margin: Optional[Decimal] = None
    sma: Optional[Decimal] = None
    long_market_value: Optional[Decimal] = None
    short_market_value: Optional[Decimal] = None
    accrued_fees: Optional[Decimal] = None
    pending_transfer_in: Optional[Decimal] = None
    pending_transfer_out: Optional[Decimal] = None
    daytrade_count: Optional[int] = None
    pattern_day_trader: Optional[bool] = None
    trading_blocked: Optional[bool] = None
    transfers_blocked: Optional[bool] = None
    account_blocked: Optional[bool] = None
    trade_suspended_by_user: Optional[bool] = None
    shorting_enabled: Optional[bool] = None
    options_approved_level: Optional[int] = None
    options_trading_level: Optional[int] = None
    created_at: Optional[dt.datetime] = None


@dataclass(frozen=True)
class AccountConfigurations(Model):
    """Per-account trading settings."""
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
class TakeProfitSpec(Model):
    """Take-profit leg of an advanced order."""
    limit_price: Optional[Decimal] = None


@dataclass(frozen=True)
class StopLossSpec(Model):
    """Stop-loss leg of an advanced order."""
    stop_price: Optional[Decimal] = None
    limit_price: Optional[Decimal] = None


@dataclass(frozen=True)
class Order(Model):
    """Order data structure."""
    id: Optional[str] = None
    client_order_id: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    submitted_at: Optional[dt.datetime] = None
    filled_at: Optional[dt.datetime] = None
    expired_at: Optional[dt.datetime] = None
    canceled_at: Optional[dt.datetime] = None
    failed_at: Optional[dt.datetime] = None
    replaced_at: Optional[dt.datetime] = None
    replaced_by: Optional[str] = None
    replaces: Optional[str] = None
    asset_id: Optional[str] = None
    symbol: Optional[str] = None
    asset_class: Optional[AssetClass] = None
    notional: Optional[Decimal] = None
    qty: Optional[Decimal] = None
    filled_qty: Optional[Decimal] = None
    filled_avg_price: Optional[Decimal] = None
    order_class: Optional[OrderClass] = None
    type: Optional[OrderType] = None
    side: Optional[OrderSide] = None
    time_in_force: Optional[TimeInForce] = None
    limit_price: Optional[Decimal] = None
    stop_price: Optional[Decimal] = None
    trail_price: Optional[Decimal] = None
    trail_percent: Optional[Decimal] = None
    hwm: Optional[Decimal] = None
    status: Optional[OrderStatus] = None
    extended_hours: Optional[bool] = None
    position_intent: Optional[str] = None
    legs: Optional[List["Order"]] = None


@dataclass(frozen=True)
class Position(Model):
    """Open position data structure."""
    asset_id: Optional[str] = None
    symbol: Optional[str] = None
    exchange: Optional[str] = None
    asset_class: Optional[AssetClass] = None
    avg_entry_price: Optional[Decimal] = None
    qty: Optional[Decimal] = None
    qty_available: Optional[Decimal] = None
    side: Optional[PositionSide] = None
    market_value: Optional[Decimal] = None
    cost_basis: Optional[Decimal] = None
    unrealized_pl: Optional[Decimal] = None
    unrealized_plpc: Optional[Decimal] = None
    unrealized_intraday_pl: Optional[Decimal] = None
    unrealized_intraday_plpc: Optional[Decimal] = None
    current_price: Optional[Decimal] = None
    lastday_price: Optional[Decimal] = None
    change_today: Optional[Decimal] = None
    asset_marginable: Optional[bool] = None


@dataclass(frozen=True)
class Asset(Model):
    """Tradable asset; the wire key for ``asset_class`` is ``class``."""
    id: Optional[str] = None
    asset_class: Optional[AssetClass] = api_field("class")
    exchange: Optional[str] = None
    symbol: Optional[str] = None
    name: Optional[str] = None
    status: Optional[AssetStatus] = None
    tradable: Optional[bool] = None
    marginable: Optional[bool] = None
    shortable: Optional[bool] = None
    easy_to_borrow: Optional[bool] = None
    fractionable: Optional[bool] = None
    maintenance_margin_requirement: Optional[Decimal] = None
    attributes: Optional[List[str]] = None


@dataclass(frozen=True)
class Clock(Model):
    """Market clock."""
    timestamp: Optional[dt.datetime] = None
    is_open: Optional[bool] = None
    next_open: Optional[dt.datetime] = None
    next_close: Optional[dt.datetime] = None


@dataclass(frozen=True)
class CalendarDay(Model):
    """Market calendar entry; times are ``HH:MM`` in New York time."""
    date: Optional[dt.date] = None
    open: Optional[str] = None
    close: Optional[str] = None
    session_open: Optional[str] = None
    session_close: Optional[str] = None
    settlement_date: Optional[dt.date] = None


@dataclass(frozen=True)
class Watchlist(Model):
    id: Optional[str] = None
    account_id: Optional[str] = None
    name: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    assets: Optional[List[Asset]] = None


@dataclass(frozen=True)
class PortfolioHistory(Model):
    """Equity time series; the lists are index-aligned with ``timestamp``."""
    timestamp: Optional[List[int]] = None
    equity: Optional[List[Decimal]] = None
    profit_loss: Optional[List[Decimal]] = None
    profit_loss_pct: Optional[List[Decimal]] = None
    base_value: Optional[Decimal] = None
    base_value_asof: Optional[dt.date] = None
    timeframe: Optional[str] = None


@dataclass(frozen=True)
class AccountActivity(Model):
    """
    Account activity entry.

    Trade activities (FILL) carry the order fields; non-trade activities
    carry ``date``, ``net_amount`` and ``description``.
    """
    id: Optional[str] = None
    activity_type: Optional[ActivityType] = None
    transaction_time: Optional[dt.datetime] = None
    type: Optional[str] = None
    price: Optional[Decimal] = None
    qty: Optional[Decimal] = None
    side: Optional[ActivitySide] = None
    symbol: Optional[str] = None
    leaves_qty: Optional[Decimal] = None
    cum_qty: Optional[Decimal] = None
    order_id: Optional[str] = None
    order_status: Optional[OrderStatus] = None
    date: Optional[dt.date] = None
    net_amount: Optional[Decimal] = None
    per_share_amount: Optional[Decimal] = None
    description: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class OrderCancelResult(Model):
    """Per-order outcome of a cancel-all request."""
    id: Optional[str] = None
    status: Optional[int] = None
    body: Optional[Order] = None


@dataclass(frozen=True)
class PositionCloseResult(Model):
    """Per-position outcome of a close-all request."""
    symbol: Optional[str] = None
    status: Optional[int] = None
    body: Optional[Order] = None
