"""
Broker API request types.

Every call outside account creation and listing is scoped to one customer
account, named by the ``account_id`` path field.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from ..models.base import Request, path_field
from ..trading.enums import OrderClass, OrderSide, OrderType, TimeInForce
from ..trading.models import StopLossSpec, TakeProfitSpec
from .enums import TransferDirection, TransferType
from .models import Agreement, Contact, Disclosures, Identity, TrustedContact


# Accounts

@dataclass(frozen=True)
class CreateAccountRequest(Request):
    """
    New customer account.

    ``contact``, ``identity``, ``disclosures`` and ``agreements`` are the
    KYC records the account is opened with.
    """
    contact: Optional[Contact] = None
    identity: Optional[Identity] = None
    disclosures: Optional[Disclosures] = None
    agreements: Optional[List[Agreement]] = None
    trusted_contact: Optional[TrustedContact] = None
    enabled_assets: Optional[List[str]] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class ListAccountsRequest(Request):
    """``query`` matches account number, names and email addresses."""
    query: Optional[str] = None
    created_after: Optional[dt.datetime] = None
    created_before: Optional[dt.datetime] = None
    status: Optional[str] = None
    sort: Optional[str] = None
    entities: Optional[List[str]] = None


@dataclass(frozen=True)
class GetBrokerAccountRequest(Request):
    account_id: str = path_field()


@dataclass(frozen=True)
class UpdateBrokerAccountRequest(Request):
    account_id: str = path_field()
    contact: Optional[Contact] = None
    identity: Optional[Identity] = None
    disclosures: Optional[Disclosures] = None
    trusted_contact: Optional[TrustedContact] = None


@dataclass(frozen=True)
class CloseBrokerAccountRequest(Request):
    account_id: str = path_field()


# ACH relationships

@dataclass(frozen=True)
class CreateACHRelationshipRequest(Request):
    """Link a bank account, either by number or by Plaid ``processor_token``."""
    account_id: str = path_field()
    account_owner_name: Optional[str] = None
    bank_account_type: Optional[str] = None
    bank_account_number: Optional[str] = None
    bank_routing_number: Optional[str] = None
    nickname: Optional[str] = None
    processor_token: Optional[str] = None


@dataclass(frozen=True)
class ListACHRelationshipsRequest(Request):
    account_id: str = path_field()
    statuses: Optional[List[str]] = None


@dataclass(frozen=True)
class DeleteACHRelationshipRequest(Request):
    account_id: str = path_field()
    ach_relationship_id: str = path_field()


# Transfers

@dataclass(frozen=True)
class CreateTransferRequest(Request):
    account_id: str = path_field()
    transfer_type: Optional[TransferType] = None
    relationship_id: Optional[str] = None
    amount: Optional[Decimal] = None
    direction: Optional[TransferDirection] = None
    timing: Optional[str] = None
    fee_payment_method: Optional[str] = None


@dataclass(frozen=True)
class ListTransfersRequest(Request):
    account_id: str = path_field()
    direction: Optional[TransferDirection] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass(frozen=True)
class GetTransferRequest(Request):
    account_id: str = path_field()
    transfer_id: str = path_field()


@dataclass(frozen=True)
class CancelTransferRequest(Request):
    account_id: str = path_field()
    transfer_id: str = path_field()


# Trading on behalf of an account

@dataclass(frozen=True)
class CreateTradingOrderRequest(Request):
    """Order for a customer account; same fields as a Trading API order."""
    account_id: str = path_field()
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
    commission: Optional[Decimal] = None


@dataclass(frozen=True)
class ListTradingOrdersRequest(Request):
    account_id: str = path_field()
    status: Optional[str] = None
    limit: Optional[int] = None
    after: Optional[dt.datetime] = None
    until: Optional[dt.datetime] = None
    direction: Optional[str] = None
    nested: Optional[bool] = None
    symbols: Optional[List[str]] = None


@dataclass(frozen=True)
class GetTradingOrderRequest(Request):
    account_id: str = path_field()
    order_id: str = path_field()
    nested: Optional[bool] = None


@dataclass(frozen=True)
class CancelTradingOrderRequest(Request):
    account_id: str = path_field()
    order_id: str = path_field()


@dataclass(frozen=True)
class ListTradingPositionsRequest(Request):
    account_id: str = path_field()


@dataclass(frozen=True)
class GetTradingPositionRequest(Request):
    account_id: str = path_field()
    symbol_or_asset_id: str = path_field()


@dataclass(frozen=True)
class CloseTradingPositionRequest(Request):
    account_id: str = path_field()
    symbol_or_asset_id: str = path_field()
    qty: Optional[Decimal] = None
    percentage: Optional[Decimal] = None


@dataclass(frozen=True)
class CloseAllTradingPositionsRequest(Request):
    account_id: str = path_field()
    cancel_orders: Optional[bool] = None
