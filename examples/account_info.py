#!/usr/bin/env python3
"""
Example: Fetch and display paper trading account information.

This example demonstrates how to:
1. Create a paper trading client from environment variables
2. Fetch the account overview (status, cash, buying power, equity)
3. List open positions with unrealized P&L
4. Show the market clock

Prerequisites:
- Set APCA_API_KEY_ID and APCA_API_SECRET_KEY (a .env file works too)
- Install alpaca-client in development mode: pip install -e .

Usage:
    python examples/account_info.py
"""

import asyncio
import logging
from decimal import Decimal
from typing import Optional

from alpaca_client import APIError, trading

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def format_currency(amount: Optional[Decimal], currency: str = "USD") -> str:
    """Format amount as currency."""
    if amount is None:
        return "N/A"
    return f"{amount:,.2f} {currency}"


def print_section_header(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f" {title.upper()} ".center(70, "="))
    print("=" * 70)


def print_account_summary(account: trading.Account):
    print_section_header("Account Overview")
    print(f"Account Number:  {account.account_number}")
    print(f"Status:          {account.status.value if account.status else 'N/A'}")
    print(f"Cash:            {format_currency(account.cash)}")
    print(f"Buying Power:    {format_currency(account.buying_power)}")
    print(f"Equity:          {format_currency(account.equity)}")
    print(f"Day Trader:      {account.pattern_day_trader}")


def print_positions(positions):
    print_section_header("Open Positions")
    if not positions:
        print("No open positions")
        return
    for position in positions:
        print(
            f"{position.symbol:<10} {str(position.qty):>10} "
            f"value {format_currency(position.market_value)} "
            f"P&L {format_currency(position.unrealized_pl)}"
        )


async def main():
    async with trading.Client.from_env(paper=True) as client:
        logger.info(f"Connected to {client.base_url}")
        try:
            account = await client.get_account()
            positions = await client.list_positions()
            clock = await client.get_clock()
        except APIError as e:
            logger.error(f"Request failed: {e}")
            return

        print_account_summary(account)
        print_positions(positions.positions)

        print_section_header("Market Clock")
        print(f"Open now:        {clock.is_open}")
        print(f"Next open:       {clock.next_open}")
        print(f"Next close:      {clock.next_close}")


if __name__ == "__main__":
    asyncio.run(main())
