"""
Market Data API service client.

Every operation is a GET whose query string is the encoded request.
Stocks live under ``/v2``, crypto under ``/v1beta3`` and options, news and
the screener under ``/v1beta1``.
"""

from typing import Any, Type

from ..models.base import Model, Request
from ..service import ServiceClient
from ..utils import path_segment
from .models import Snapshot
from .requests import (
    GetCryptoBarsRequest,
    GetCryptoQuotesRequest,
    GetCryptoSnapshotsRequest,
    GetCryptoTradesRequest,
    GetLatestCryptoBarsRequest,
    GetLatestCryptoQuotesRequest,
    GetLatestCryptoTradesRequest,
    GetLatestOptionBarsRequest,
    GetLatestOptionQuotesRequest,
    GetLatestOptionTradesRequest,
    GetLatestStockBarsRequest,
    GetLatestStockQuotesRequest,
    GetLatestStockTradesRequest,
    GetMostActivesRequest,
    GetMoversRequest,
    GetNewsRequest,
    GetOptionBarsRequest,
    GetOptionChainRequest,
    GetOptionQuotesRequest,
    GetOptionSnapshotsRequest,
    GetOptionTradesRequest,
    GetStockAuctionsRequest,
    GetStockBarsRequest,
    GetStockQuotesRequest,
    GetStockSnapshotRequest,
    GetStockSnapshotsRequest,
    GetStockTradesRequest,
)
from .responses import (
    GetCryptoBarsResponse,
    GetCryptoQuotesResponse,
    GetCryptoSnapshotsResponse,
    GetCryptoTradesResponse,
    GetLatestCryptoBarsResponse,
    GetLatestCryptoQuotesResponse,
    GetLatestCryptoTradesResponse,
    GetLatestOptionBarsResponse,
    GetLatestOptionQuotesResponse,
    GetLatestOptionTradesResponse,
    GetLatestStockBarsResponse,
    GetLatestStockQuotesResponse,
    GetLatestStockTradesResponse,
    GetMostActivesResponse,
    GetMoversResponse,
    GetNewsResponse,
    GetOptionBarsResponse,
    GetOptionChainResponse,
    GetOptionQuotesResponse,
    GetOptionSnapshotsResponse,
    GetOptionTradesResponse,
    GetStockAuctionsResponse,
    GetStockBarsResponse,
    GetStockQuotesResponse,
    GetStockSnapshotsResponse,
    GetStockTradesResponse,
)


class MarketDataServiceClient(ServiceClient):
    """Async client for the Market Data API."""

    async def _get(self, path: str, request: Request, response_type: Type[Model]) -> Any:
        data = await self._call("GET", path, params=request.to_params())
        return response_type.from_dict(data)

    # Stock methods
    async def get_stock_bars(self, request: GetStockBarsRequest) -> GetStockBarsResponse:
        """Get historical bars for one or more stocks."""
        return await self._get("/v2/stocks/bars", request, GetStockBarsResponse)

    async def get_latest_stock_bars(
        self, request: GetLatestStockBarsRequest
    ) -> GetLatestStockBarsResponse:
        return await self._get("/v2/stocks/bars/latest", request, GetLatestStockBarsResponse)

    async def get_stock_trades(self, request: GetStockTradesRequest) -> GetStockTradesResponse:
        return await self._get("/v2/stocks/trades", request, GetStockTradesResponse)

    async def get_latest_stock_trades(
        self, request: GetLatestStockTradesRequest
    ) -> GetLatestStockTradesResponse:
        return await self._get("/v2/stocks/trades/latest", request, GetLatestStockTradesResponse)

    async def get_stock_quotes(self, request: GetStockQuotesRequest) -> GetStockQuotesResponse:
        return await self._get("/v2/stocks/quotes", request, GetStockQuotesResponse)

    async def get_latest_stock_quotes(
        self, request: GetLatestStockQuotesRequest
    ) -> GetLatestStockQuotesResponse:
        return await self._get("/v2/stocks/quotes/latest", request, GetLatestStockQuotesResponse)

    async def get_stock_snapshots(
        self, request: GetStockSnapshotsRequest
    ) -> GetStockSnapshotsResponse:
        """Get snapshots keyed by symbol; the API returns them as a bare object."""
        data = await self._call("GET", "/v2/stocks/snapshots", params=request.to_params())
        return GetStockSnapshotsResponse.from_dict({"snapshots": data})

    async def get_stock_snapshot(self, request: GetStockSnapshotRequest) -> Snapshot:
        path = f"/v2/stocks/{path_segment(request.symbol)}/snapshot"
        return await self._get(path, request, Snapshot)

    async def get_stock_auctions(
        self, request: GetStockAuctionsRequest
    ) -> GetStockAuctionsResponse:
        return await self._get("/v2/stocks/auctions", request, GetStockAuctionsResponse)

    # Crypto methods
    @staticmethod
    def _crypto_path(request: Request, suffix: str) -> str:
        return f"/v1beta3/crypto/{path_segment(request.loc)}/{suffix}"

    async def get_crypto_bars(self, request: GetCryptoBarsRequest) -> GetCryptoBarsResponse:
        return await self._get(
            self._crypto_path(request, "bars"), request, GetCryptoBarsResponse
        )

    async def get_latest_crypto_bars(
        self, request: GetLatestCryptoBarsRequest
    ) -> GetLatestCryptoBarsResponse:
        return await self._get(
            self._crypto_path(request, "latest/bars"), request, GetLatestCryptoBarsResponse
        )

    async def get_crypto_trades(self, request: GetCryptoTradesRequest) -> GetCryptoTradesResponse:
        return await self._get(
            self._crypto_path(request, "trades"), request, GetCryptoTradesResponse
        )

    async def get_latest_crypto_trades(
        self, request: GetLatestCryptoTradesRequest
    ) -> GetLatestCryptoTradesResponse:
        return await self._get(
            self._crypto_path(request, "latest/trades"), request, GetLatestCryptoTradesResponse
        )

    async def get_crypto_quotes(self, request: GetCryptoQuotesRequest) -> GetCryptoQuotesResponse:
        return await self._get(
            self._crypto_path(request, "quotes"), request, GetCryptoQuotesResponse
        )

    async def get_latest_crypto_quotes(
        self, request: GetLatestCryptoQuotesRequest
    ) -> GetLatestCryptoQuotesResponse:
        return await self._get(
            self._crypto_path(request, "latest/quotes"), request, GetLatestCryptoQuotesResponse
        )

    async def get_crypto_snapshots(
        self, request: GetCryptoSnapshotsRequest
    ) -> GetCryptoSnapshotsResponse:
        return await self._get(
            self._crypto_path(request, "snapshots"), request, GetCryptoSnapshotsResponse
        )

    # Option methods
    async def get_option_bars(self, request: GetOptionBarsRequest) -> GetOptionBarsResponse:
        return await self._get("/v1beta1/options/bars", request, GetOptionBarsResponse)

    async def get_latest_option_bars(
        self, request: GetLatestOptionBarsRequest
    ) -> GetLatestOptionBarsResponse:
        return await self._get(
            "/v1beta1/options/bars/latest", request, GetLatestOptionBarsResponse
        )

    async def get_option_trades(self, request: GetOptionTradesRequest) -> GetOptionTradesResponse:
        return await self._get("/v1beta1/options/trades", request, GetOptionTradesResponse)

    async def get_latest_option_trades(
        self, request: GetLatestOptionTradesRequest
    ) -> GetLatestOptionTradesResponse:
        return await self._get(
            "/v1beta1/options/trades/latest", request, GetLatestOptionTradesResponse
        )

    async def get_option_quotes(self, request: GetOptionQuotesRequest) -> GetOptionQuotesResponse:
        return await self._get("/v1beta1/options/quotes", request, GetOptionQuotesResponse)

    async def get_latest_option_quotes(
        self, request: GetLatestOptionQuotesRequest
    ) -> GetLatestOptionQuotesResponse:
        return await self._get(
            "/v1beta1/options/quotes/latest", request, GetLatestOptionQuotesResponse
        )

    async def get_option_snapshots(
        self, request: GetOptionSnapshotsRequest
    ) -> GetOptionSnapshotsResponse:
        return await self._get("/v1beta1/options/snapshots", request, GetOptionSnapshotsResponse)

    async def get_option_chain(self, request: GetOptionChainRequest) -> GetOptionChainResponse:
        """Get snapshots for every contract of an underlying symbol."""
        path = f"/v1beta1/options/snapshots/{path_segment(request.underlying_symbol)}"
        return await self._get(path, request, GetOptionChainResponse)

    # News and screener methods
    async def get_news(self, request: GetNewsRequest) -> GetNewsResponse:
        return await self._get("/v1beta1/news", request, GetNewsResponse)

    async def get_most_actives(self, request: GetMostActivesRequest) -> GetMostActivesResponse:
        return await self._get(
            "/v1beta1/screener/stocks/most-actives", request, GetMostActivesResponse
        )

    async def get_movers(self, request: GetMoversRequest) -> GetMoversResponse:
        path = f"/v1beta1/screener/{path_segment(request.market_type)}/movers"
        return await self._get(path, request, GetMoversResponse)
