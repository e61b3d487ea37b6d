"""
Market Data API models.

The API uses one- and two-letter keys for bars, trades and quotes
(``t``, ``o``, ``h``, ``bp``, ``as``...); the fields here carry readable
names and declare the wire key with ``api_field``.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from ..models.base import Model, api_field


# Stocks

@dataclass(frozen=True)
class Bar(Model):
    """OHLCV bar."""
    timestamp: Optional[dt.datetime] = api_field("t")
    open: Optional[Decimal] = api_field("o")
    high: Optional[Decimal] = api_field("h")
    low: Optional[Decimal] = api_field("l")
    close: Optional[Decimal] = api_field("c")
    volume: Optional[int] = api_field("v")
    trade_count: Optional[int] = api_field("n")
    vwap: Optional[Decimal] = api_field("vw")


@dataclass(frozen=True)
class Trade(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    exchange: Optional[str] = api_field("x")
    price: Optional[Decimal] = api_field("p")
    size: Optional[int] = api_field("s")
    id: Optional[int] = api_field("i")
    conditions: Optional[List[str]] = api_field("c")
    tape: Optional[str] = api_field("z")


@dataclass(frozen=True)
class Quote(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    ask_exchange: Optional[str] = api_field("ax")
    ask_price: Optional[Decimal] = api_field("ap")
    ask_size: Optional[int] = api_field("as")
    bid_exchange: Optional[str] = api_field("bx")
    bid_price: Optional[Decimal] = api_field("bp")
    bid_size: Optional[int] = api_field("bs")
    conditions: Optional[List[str]] = api_field("c")
    tape: Optional[str] = api_field("z")


@dataclass(frozen=True)
class Snapshot(Model):
    """Latest trade and quote plus the current and previous bars of a symbol."""
    latest_trade: Optional[Trade] = api_field("latestTrade")
    latest_quote: Optional[Quote] = api_field("latestQuote")
    minute_bar: Optional[Bar] = api_field("minuteBar")
    daily_bar: Optional[Bar] = api_field("dailyBar")
    prev_daily_bar: Optional[Bar] = api_field("prevDailyBar")


@dataclass(frozen=True)
class AuctionPrint(Model):
    """Single print of an opening or closing auction."""
    timestamp: Optional[dt.datetime] = api_field("t")
    exchange: Optional[str] = api_field("x")
    price: Optional[Decimal] = api_field("p")
    size: Optional[int] = api_field("s")
    condition: Optional[str] = api_field("c")


@dataclass(frozen=True)
class Auction(Model):
    """Opening and closing auction prints of one trading day."""
    date: Optional[dt.date] = api_field("d")
    opening: Optional[List[AuctionPrint]] = api_field("o")
    closing: Optional[List[AuctionPrint]] = api_field("c")


# Crypto

@dataclass(frozen=True)
class CryptoBar(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    open: Optional[Decimal] = api_field("o")
    high: Optional[Decimal] = api_field("h")
    low: Optional[Decimal] = api_field("l")
    close: Optional[Decimal] = api_field("c")
    volume: Optional[Decimal] = api_field("v")
    trade_count: Optional[int] = api_field("n")
    vwap: Optional[Decimal] = api_field("vw")


@dataclass(frozen=True)
class CryptoTrade(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    price: Optional[Decimal] = api_field("p")
    size: Optional[Decimal] = api_field("s")
    id: Optional[int] = api_field("i")
    taker_side: Optional[str] = api_field("tks")


@dataclass(frozen=True)
class CryptoQuote(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    bid_price: Optional[Decimal] = api_field("bp")
    bid_size: Optional[Decimal] = api_field("bs")
    ask_price: Optional[Decimal] = api_field("ap")
    ask_size: Optional[Decimal] = api_field("as")


@dataclass(frozen=True)
class CryptoSnapshot(Model):
    latest_trade: Optional[CryptoTrade] = api_field("latestTrade")
    latest_quote: Optional[CryptoQuote] = api_field("latestQuote")
    minute_bar: Optional[CryptoBar] = api_field("minuteBar")
    daily_bar: Optional[CryptoBar] = api_field("dailyBar")
    prev_daily_bar: Optional[CryptoBar] = api_field("prevDailyBar")


# Options

@dataclass(frozen=True)
class OptionBar(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    open: Optional[Decimal] = api_field("o")
    high: Optional[Decimal] = api_field("h")
    low: Optional[Decimal] = api_field("l")
    close: Optional[Decimal] = api_field("c")
    volume: Optional[int] = api_field("v")
    trade_count: Optional[int] = api_field("n")
    vwap: Optional[Decimal] = api_field("vw")


@dataclass(frozen=True)
class OptionTrade(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    exchange: Optional[str] = api_field("x")
    price: Optional[Decimal] = api_field("p")
    size: Optional[int] = api_field("s")
    condition: Optional[str] = api_field("c")


@dataclass(frozen=True)
class OptionQuote(Model):
    timestamp: Optional[dt.datetime] = api_field("t")
    ask_exchange: Optional[str] = api_field("ax")
    ask_price: Optional[Decimal] = api_field("ap")
    ask_size: Optional[int] = api_field("as")
    bid_exchange: Optional[str] = api_field("bx")
    bid_price: Optional[Decimal] = api_field("bp")
    bid_size: Optional[int] = api_field("bs")
    condition: Optional[str] = api_field("c")


@dataclass(frozen=True)
class OptionGreeks(Model):
    delta: Optional[Decimal] = None
    gamma: Optional[Decimal] = None
    rho: Optional[Decimal] = None
    theta: Optional[Decimal] = None
    vega: Optional[Decimal] = None


@dataclass(frozen=True)
class OptionSnapshot(Model):
    latest_trade: Optional[OptionTrade] = api_field("latestTrade")
    latest_quote: Optional[OptionQuote] = api_field("latestQuote")
    minute_bar: Optional[OptionBar] = api_field("minuteBar")
    daily_bar: Optional[OptionBar] = api_field("dailyBar")
    prev_daily_bar: Optional[OptionBar] = api_field("prevDailyBar")
    implied_volatility: Optional[Decimal] = api_field("impliedVolatility")
    greeks: Optional[OptionGreeks] = None


# News

@dataclass(frozen=True)
class NewsArticle(Model):
    """News article; ``images`` entries carry ``size`` and ``url``."""
    id: Optional[int] = None
    headline: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    summary: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    images: Optional[List[Dict[str, str]]] = None
    symbols: Optional[List[str]] = None
    source: Optional[str] = None


# Screener

@dataclass(frozen=True)
class MostActive(Model):
    symbol: Optional[str] = None
    volume: Optional[int] = None
    trade_count: Optional[int] = None


@dataclass(frozen=True)
class Mover(Model):
    symbol: Optional[str] = None
    percent_change: Optional[Decimal] = None
    change: Optional[Decimal] = None
    price: Optional[Decimal] = None
