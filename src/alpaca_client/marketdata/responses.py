"""
Market Data API response types.

Historical responses are keyed by symbol and carry ``next_page_token``;
it is None on the last page.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.base import Model
from .models import (
    Auction,
    Bar,
    CryptoBar,
    CryptoQuote,
    CryptoSnapshot,
    CryptoTrade,
    MostActive,
    Mover,
    NewsArticle,
    OptionBar,
    OptionQuote,
    OptionSnapshot,
    OptionTrade,
    Quote,
    Snapshot,
    Trade,
)


# Stocks

@dataclass(frozen=True)
class GetStockBarsResponse(Model):
    bars: Optional[Dict[str, List[Bar]]] = None
    next_page_token: Optional[str] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetLatestStockBarsResponse(Model):
    bars: Optional[Dict[str, Bar]] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockTradesResponse(Model):
    trades: Optional[Dict[str, List[Trade]]] = None
    next_page_token: Optional[str] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetLatestStockTradesResponse(Model):
    trades: Optional[Dict[str, Trade]] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockQuotesResponse(Model):
    quotes: Optional[Dict[str, List[Quote]]] = None
    next_page_token: Optional[str] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetLatestStockQuotesResponse(Model):
    quotes: Optional[Dict[str, Quote]] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class GetStockSnapshotsResponse(Model):
    snapshots: Optional[Dict[str, Snapshot]] = None


@dataclass(frozen=True)
class GetStockAuctionsResponse(Model):
    auctions: Optional[Dict[str, List[Auction]]] = None
    next_page_token: Optional[str] = None
    currency: Optional[str] = None


# Crypto

@dataclass(frozen=True)
class GetCryptoBarsResponse(Model):
    bars: Optional[Dict[str, List[CryptoBar]]] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class GetLatestCryptoBarsResponse(Model):
    bars: Optional[Dict[str, CryptoBar]] = None


@dataclass(frozen=True)
class GetCryptoTradesResponse(Model):
    trades: Optional[Dict[str, List[CryptoTrade]]] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class GetLatestCryptoTradesResponse(Model):
    trades: Optional[Dict[str, CryptoTrade]] = None


@dataclass(frozen=True)
class GetCryptoQuotesResponse(Model):
    quotes: Optional[Dict[str, List[CryptoQuote]]] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class GetLatestCryptoQuotesResponse(Model):
    quotes: Optional[Dict[str, CryptoQuote]] = None


@dataclass(frozen=True)
class GetCryptoSnapshotsResponse(Model):
    snapshots: Optional[Dict[str, CryptoSnapshot]] = None


# Options

@dataclass(frozen=True)
class GetOptionBarsResponse(Model):
    bars: Optional[Dict[str, List[OptionBar]]] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class GetLatestOptionBarsResponse(Model):
    bars: Optional[Dict[str, OptionBar]] = None


@dataclass(frozen=True)
class GetOptionTradesResponse(Model):
    trades: Optional[Dict[str, List[OptionTrade]]] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class GetLatestOptionTradesResponse(Model):
    trades: Optional[Dict[str, OptionTrade]] = None


@dataclass(frozen=True)
class GetOptionQuotesResponse(Model):
    quotes: Optional[Dict[str, List[OptionQuote]]] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class GetLatestOptionQuotesResponse(Model):
    quotes: Optional[Dict[str, OptionQuote]] = None


@dataclass(frozen=True)
class GetOptionSnapshotsResponse(Model):
    snapshots: Optional[Dict[str, OptionSnapshot]] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class GetOptionChainResponse(Model):
    snapshots: Optional[Dict[str, OptionSnapshot]] = None
    next_page_token: Optional[str] = None


# News

@dataclass(frozen=True)
class GetNewsResponse(Model):
    news: Optional[List[NewsArticle]] = None
    next_page_token: Optional[str] = None


# Screener

@dataclass(frozen=True)
class GetMostActivesResponse(Model):
    most_actives: Optional[List[MostActive]] = None
    last_updated: Optional[dt.datetime] = None


@dataclass(frozen=True)
class GetMoversResponse(Model):
    gainers: Optional[List[Mover]] = None
    losers: Optional[List[Mover]] = None
    market_type: Optional[str] = None
    last_updated: Optional[dt.datetime] = None
