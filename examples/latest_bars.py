#!/usr/bin/env python3
"""
Example: Fetch daily stock bars and latest crypto quotes.

Pages through historical bars by passing ``next_page_token`` back as
``page_token`` until the server returns none.

Prerequisites:
- Set APCA_API_KEY_ID and APCA_API_SECRET_KEY (a .env file works too)

Usage:
    python examples/latest_bars.py AAPL MSFT
"""

import asyncio
import logging
import sys
from datetime import datetime, timedelta, timezone

from alpaca_client import marketdata

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def fetch_daily_bars(client, symbols):
    """Collect 30 days of daily bars for ``symbols``."""
    start = datetime.now(timezone.utc) - timedelta(days=30)
    collected = {}
    page_token = None

    while True:
        response = await client.get_stock_bars(marketdata.GetStockBarsRequest(
            symbols=symbols,
            timeframe=marketdata.Timeframe.ONE_DAY,
            start=start,
            feed=marketdata.Feed.IEX,
            page_token=page_token,
        ))
        for symbol, bars in (response.bars or {}).items():
            collected.setdefault(symbol, []).extend(bars)

        page_token = response.next_page_token
        if not page_token:
            return collected


async def main(symbols):
    async with marketdata.Client.from_env() as client:
        bars_by_symbol = await fetch_daily_bars(client, symbols)
        for symbol, bars in bars_by_symbol.items():
            last = bars[-1]
            print(f"{symbol:<8} {len(bars):>3} bars, last close {last.close} on {last.timestamp:%Y-%m-%d}")

        quotes = await client.get_latest_crypto_quotes(
            marketdata.GetLatestCryptoQuotesRequest(symbols=["BTC/USD", "ETH/USD"])
        )
        for symbol, quote in (quotes.quotes or {}).items():
            print(f"{symbol:<8} bid {quote.bid_price} ask {quote.ask_price}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:] or ["AAPL", "MSFT"]))
