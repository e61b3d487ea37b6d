"""
Market Data API client.

Historical and latest bars, trades, quotes and snapshots for stocks, crypto
and options, plus news and the stock screener. Every type used by the
client is importable from this package.
"""

from ..options import Option, with_base_url, with_http_client
from .client import (
    BASE_URL,
    Client,
    new_client,
)
from .enums import (
    Timeframe,
    Adjustment,
    Feed,
    Sort,
    CryptoLoc,
)
from .models import (
    Bar,
    Trade,
    Quote,
    Snapshot,
    AuctionPrint,
    Auction,
    CryptoBar,
    CryptoTrade,
    CryptoQuote,
    CryptoSnapshot,
    OptionBar,
    OptionTrade,
    OptionQuote,
    OptionGreeks,
    OptionSnapshot,
    NewsArticle,
    MostActive,
    Mover,
)
from .requests import (
    GetStockBarsRequest,
    GetLatestStockBarsRequest,
    GetStockTradesRequest,
    GetLatestStockTradesRequest,
    GetStockQuotesRequest,
    GetLatestStockQuotesRequest,
    GetStockSnapshotsRequest,
    GetStockSnapshotRequest,
    GetStockAuctionsRequest,
    GetCryptoBarsRequest,
    GetLatestCryptoBarsRequest,
    GetCryptoTradesRequest,
    GetLatestCryptoTradesRequest,
    GetCryptoQuotesRequest,
    GetLatestCryptoQuotesRequest,
    GetCryptoSnapshotsRequest,
    GetOptionBarsRequest,
    GetLatestOptionBarsRequest,
    GetOptionTradesRequest,
    GetLatestOptionTradesRequest,
    GetOptionQuotesRequest,
    GetLatestOptionQuotesRequest,
    GetOptionSnapshotsRequest,
    GetOptionChainRequest,
    GetNewsRequest,
    GetMostActivesRequest,
    GetMoversRequest,
)
from .responses import (
    GetStockBarsResponse,
    GetLatestStockBarsResponse,
    GetStockTradesResponse,
    GetLatestStockTradesResponse,
    GetStockQuotesResponse,
    GetLatestStockQuotesResponse,
    GetStockSnapshotsResponse,
    GetStockAuctionsResponse,
    GetCryptoBarsResponse,
    GetLatestCryptoBarsResponse,
    GetCryptoTradesResponse,
    GetLatestCryptoTradesResponse,
    GetCryptoQuotesResponse,
    GetLatestCryptoQuotesResponse,
    GetCryptoSnapshotsResponse,
    GetOptionBarsResponse,
    GetLatestOptionBarsResponse,
    GetOptionTradesResponse,
    GetLatestOptionTradesResponse,
    GetOptionQuotesResponse,
    GetLatestOptionQuotesResponse,
    GetOptionSnapshotsResponse,
    GetOptionChainResponse,
    GetNewsResponse,
    GetMostActivesResponse,
    GetMoversResponse,
)
from .service import MarketDataServiceClient

__all__ = [
    # Client
    "BASE_URL",
    "Client",
    "new_client",
    "Option",
    "with_base_url",
    "with_http_client",
    "MarketDataServiceClient",
    # Enums
    "Timeframe",
    "Adjustment",
    "Feed",
    "Sort",
    "CryptoLoc",
    # Models
    "Bar",
    "Trade",
    "Quote",
    "Snapshot",
    "AuctionPrint",
    "Auction",
    "CryptoBar",
    "CryptoTrade",
    "CryptoQuote",
    "CryptoSnapshot",
    "OptionBar",
    "OptionTrade",
    "OptionQuote",
    "OptionGreeks",
    "OptionSnapshot",
    "NewsArticle",
    "MostActive",
    "Mover",
    # Requests
    "GetStockBarsRequest",
    "GetLatestStockBarsRequest",
    "GetStockTradesRequest",
    "GetLatestStockTradesRequest",
    "GetStockQuotesRequest",
    "GetLatestStockQuotesRequest",
    "GetStockSnapshotsRequest",
    "GetStockSnapshotRequest",
    "GetStockAuctionsRequest",
    "GetCryptoBarsRequest",
    "GetLatestCryptoBarsRequest",
    "GetCryptoTradesRequest",
    "GetLatestCryptoTradesRequest",
    "GetCryptoQuotesRequest",
    "GetLatestCryptoQuotesRequest",
    "GetCryptoSnapshotsRequest",
    "GetOptionBarsRequest",
    "GetLatestOptionBarsRequest",
    "GetOptionTradesRequest",
    "GetLatestOptionTradesRequest",
    "GetOptionQuotesRequest",
    "GetLatestOptionQuotesRequest",
    "GetOptionSnapshotsRequest",
    "GetOptionChainRequest",
    "GetNewsRequest",
    "GetMostActivesRequest",
    "GetMoversRequest",
    # Responses
    "GetStockBarsResponse",
    "GetLatestStockBarsResponse",
    "GetStockTradesResponse",
    "GetLatestStockTradesResponse",
    "GetStockQuotesResponse",
    "GetLatestStockQuotesResponse",
    "GetStockSnapshotsResponse",
    "GetStockAuctionsResponse",
    "GetCryptoBarsResponse",
    "GetLatestCryptoBarsResponse",
    "GetCryptoTradesResponse",
    "GetLatestCryptoTradesResponse",
    "GetCryptoQuotesResponse",
    "GetLatestCryptoQuotesResponse",
    "GetCryptoSnapshotsResponse",
    "GetOptionBarsResponse",
    "GetLatestOptionBarsResponse",
    "GetOptionTradesResponse",
    "GetLatestOptionTradesResponse",
    "GetOptionQuotesResponse",
    "GetLatestOptionQuotesResponse",
    "GetOptionSnapshotsResponse",
    "GetOptionChainResponse",
    "GetNewsResponse",
    "GetMostActivesResponse",
    "GetMoversResponse",
]
