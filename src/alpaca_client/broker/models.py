"""
Broker API models.

Customer accounts with their KYC records, funding relationships, transfers,
and the orders and positions held in each account. Order and position enums
are shared with the Trading API.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from ..models.base import Model
from ..trading.enums import (
    AccountStatus,
    AssetClass,
    OrderClass,
    OrderSide,
    OrderStatus,
    OrderType,
    PositionSide,
    TimeInForce,
)
from .enums import ACHRelationshipStatus, TransferDirection, TransferStatus, TransferType


# Account records

@dataclass(frozen=True)
class Contact(Model):
    email_address: Optional[str] = None
    phone_number: Optional[str] = None
    street_address: Optional[List[str]] = None
    unit: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class Identity(Model):
    """KYC identity; countries are ISO 3166-1 alpha-3 codes."""
    given_name: Optional[str] = None
    middle_name: Optional[str] = None
    family_name: Optional[str] = None
    date_of_birth: Optional[dt.date] = None
    tax_id: Optional[str] = None
    tax_id_type: Optional[str] = None
    country_of_citizenship: Optional[str] = None
    country_of_birth: Optional[str] = None
    country_of_tax_residence: Optional[str] = None
    funding_source: Optional[List[str]] = None
    annual_income_min: Optional[Decimal] = None
    annual_income_max: Optional[Decimal] = None
    liquid_net_worth_min: Optional[Decimal] = None
    liquid_net_worth_max: Optional[Decimal] = None
    total_net_worth_min: Optional[Decimal] = None
    total_net_worth_max: Optional[Decimal] = None


@dataclass(frozen=True)
class Disclosures(Model):
    is_control_person: Optional[bool] = None
    is_affiliated_exchange_or_finra: Optional[bool] = None
    is_politically_exposed: Optional[bool] = None
    immediate_family_exposed: Optional[bool] = None
    employment_status: Optional[str] = None
    employer_name: Optional[str] = None
    employer_address: Optional[str] = None
    employment_position: Optional[str] = None


@dataclass(frozen=True)
class Agreement(Model):
    """Signed agreement, e.g. ``customer_agreement`` or ``margin_agreement``."""
    agreement: Optional[str] = None
    signed_at: Optional[dt.datetime] = None
    ip_address: Optional[str] = None
    revision: Optional[str] = None


@dataclass(frozen=True)
class TrustedContact(Model):
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    email_address: Optional[str] = None
    phone_number: Optional[str] = None
    street_address: Optional[List[str]] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


# Core models

@dataclass(frozen=True)
class BrokerAccount(Model):
    """Customer account managed through the Broker API."""
    id: Optional[str] = None
    account_number: Optional[str] = None
    status: Optional[AccountStatus] = None
    crypto_status: Optional[AccountStatus] = None
    currency: Optional[str] = None
    last_equity: Optional[Decimal] = None
    created_at: Optional[dt.datetime] = None
    account_type: Optional[str] = None
    enabled_assets: Optional[List[str]] = None
    contact: Optional[Contact] = None
    identity: Optional[Identity] = None
    disclosures: Optional[Disclosures] = None
    agreements: Optional[List[Agreement]] = None
    trusted_contact: Optional[TrustedContact] = None


@dataclass(frozen=True)
class BrokerOrder(Model):
    """Order placed on behalf of a customer account."""
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
    status: Optional[OrderStatus] = None
    extended_hours: Optional[bool] = None
    commission: Optional[Decimal] = None
    legs: Optional[List["BrokerOrder"]] = None


@dataclass(frozen=True)
class BrokerPosition(Model):
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


@dataclass(frozen=True)
class ACHRelationship(Model):
    """Bank account linked to a customer account for ACH transfers."""
    id: Optional[str] = None
    account_id: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    status: Optional[ACHRelationshipStatus] = None
    account_owner_name: Optional[str] = None
    bank_account_type: Optional[str] = None
    bank_account_number: Optional[str] = None
    bank_routing_number: Optional[str] = None
    nickname: Optional[str] = None
    processor_token: Optional[str] = None


@dataclass(frozen=True)
class Transfer(Model):
    id: Optional[str] = None
    relationship_id: Optional[str] = None
    account_id: Optional[str] = None
    type: Optional[TransferType] = None
    status: Optional[TransferStatus] = None
    reason: Optional[str] = None
    amount: Optional[Decimal] = None
    requested_amount: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    fee_payment_method: Optional[str] = None
    direction: Optional[TransferDirection] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    expires_at: Optional[dt.datetime] = None


@dataclass(frozen=True)
class TradingPositionCloseResult(Model):
    """Per-position outcome of closing all positions of an account."""
    symbol: Optional[str] = None
    status: Optional[int] = None
    body: Optional[BrokerOrder] = None
