#!/usr/bin/env python3
"""
Example: List customer accounts and their transfers in the broker sandbox.

Prerequisites:
- Set ALPACA_BROKER_API_KEY and ALPACA_BROKER_API_SECRET (a .env file works too)

Usage:
    python examples/broker_accounts.py
"""

import asyncio
import logging

from alpaca_client import AuthenticationError, broker

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main():
    async with broker.Client.from_env(sandbox=True) as client:
        try:
            accounts = await client.list_accounts()
        except AuthenticationError as e:
            logger.error(f"Broker credentials rejected: {e}")
            return

        for account in accounts.accounts or []:
            status = account.status.value if account.status else "N/A"
            print(f"{account.account_number}  {status:<16} created {account.created_at}")

            transfers = await client.list_transfers(
                broker.ListTransfersRequest(account_id=account.id, limit=5)
            )
            for transfer in transfers.transfers or []:
                print(
                    f"    {transfer.direction.value if transfer.direction else '':<9}"
                    f" {transfer.amount} {transfer.status.value if transfer.status else ''}"
                )


if __name__ == "__main__":
    asyncio.run(main())
