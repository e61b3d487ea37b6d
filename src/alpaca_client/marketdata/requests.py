"""
Market Data API request types.

Multi-symbol requests take ``symbols`` as a list; it is sent comma-joined.
Historical requests return one page; pass the response's
``next_page_token`` back as ``page_token`` to fetch the next one.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from ..models.base import Request, path_field
from .enums import Adjustment, CryptoLoc, Feed, Sort, Timeframe


# Stocks

@dataclass(frozen=True)
class GetStockBarsRequest(Request):
    symbols: List[str]
    timeframe: Timeframe
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    adjustment: Optional[Adjustment] = None
    asof: Optional[dt.date] = None
    feed: Optional[Feed] = None
    currency: Optional[str] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestStockBarsRequest(Request):
    symbols: List[str]
    feed: Optional[Feed] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockTradesRequest(Request):
    symbols: List[str]
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    asof: Optional[dt.date] = None
    feed: Optional[Feed] = None
    currency: Optional[str] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestStockTradesRequest(Request):
    symbols: List[str]
    feed: Optional[Feed] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockQuotesRequest(Request):
    symbols: List[str]
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    asof: Optional[dt.date] = None
    feed: Optional[Feed] = None
    currency: Optional[str] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestStockQuotesRequest(Request):
    symbols: List[str]
    feed: Optional[Feed] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockSnapshotsRequest(Request):
    symbols: List[str]
    feed: Optional[Feed] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockSnapshotRequest(Request):
    symbol: str = path_field()
    feed: Optional[Feed] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockAuctionsRequest(Request):
    symbols: List[str]
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    asof: Optional[dt.date] = None
    feed: Optional[Feed] = None
    currency: Optional[str] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


# Crypto

@dataclass(frozen=True)
class GetCryptoBarsRequest(Request):
    symbols: List[str]
    timeframe: Timeframe
    loc: CryptoLoc = path_field(CryptoLoc.US)
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestCryptoBarsRequest(Request):
    symbols: List[str]
    loc: CryptoLoc = path_field(CryptoLoc.US)


@dataclass(frozen=True)
class GetCryptoTradesRequest(Request):
    symbols: List[str]
    loc: CryptoLoc = path_field(CryptoLoc.US)
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestCryptoTradesRequest(Request):
    symbols: List[str]
    loc: CryptoLoc = path_field(CryptoLoc.US)


@dataclass(frozen=True)
class GetCryptoQuotesRequest(Request):
    symbols: List[str]
    loc: CryptoLoc = path_field(CryptoLoc.US)
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestCryptoQuotesRequest(Request):
    symbols: List[str]
    loc: CryptoLoc = path_field(CryptoLoc.US)


@dataclass(frozen=True)
class GetCryptoSnapshotsRequest(Request):
    symbols: List[str]
    loc: CryptoLoc = path_field(CryptoLoc.US)


# Options
# Option feeds are "opra" and "indicative", so ``feed`` is a plain string here.

@dataclass(frozen=True)
class GetOptionBarsRequest(Request):
    symbols: List[str]
    timeframe: Timeframe
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestOptionBarsRequest(Request):
    symbols: List[str]
    feed: Optional[str] = None


@dataclass(frozen=True)
class GetOptionTradesRequest(Request):
    symbols: List[str]
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestOptionTradesRequest(Request):
    symbols: List[str]
    feed: Optional[str] = None


@dataclass(frozen=True)
class GetOptionQuotesRequest(Request):
    symbols: List[str]
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class GetLatestOptionQuotesRequest(Request):
    symbols: List[str]
    feed: Optional[str] = None


@dataclass(frozen=True)
class GetOptionSnapshotsRequest(Request):
    symbols: List[str]
    feed: Optional[str] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None


@dataclass(frozen=True)
class GetOptionChainRequest(Request):
    """Snapshots of every contract of an underlying, optionally filtered."""
    underlying_symbol: str = path_field()
    feed: Optional[str] = None
    type: Optional[str] = None
    strike_price_gte: Optional[Decimal] = None
    strike_price_lte: Optional[Decimal] = None
    expiration_date: Optional[dt.date] = None
    expiration_date_gte: Optional[dt.date] = None
    expiration_date_lte: Optional[dt.date] = None
    root_symbol: Optional[str] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None


# News

@dataclass(frozen=True)
class GetNewsRequest(Request):
    symbols: Optional[List[str]] = None
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    sort: Optional[Sort] = None
    include_content: Optional[bool] = None
    exclude_contentless: Optional[bool] = None
    limit: Optional[int] = None
    page_token: Optional[str] = None


# Screener

@dataclass(frozen=True)
class GetMostActivesRequest(Request):
    """``by`` is ``volume`` or ``trades``."""
    by: Optional[str] = None
    top: Optional[int] = None


@dataclass(frozen=True)
class GetMoversRequest(Request):
    """``market_type`` is ``stocks`` or ``crypto``."""
    market_type: str = path_field("stocks")
    top: Optional[int] = None
