"""
Broker API response types.

The Broker API answers list calls with bare JSON arrays and several delete
calls with an empty body; these types give each a named shape.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..models.base import Model
from .models import (
    ACHRelationship,
    BrokerAccount,
    BrokerOrder,
    BrokerPosition,
    TradingPositionCloseResult,
    Transfer,
)


@dataclass(frozen=True)
class ListAccountsResponse(Model):
    accounts: Optional[List[BrokerAccount]] = None


@dataclass(frozen=True)
class CloseBrokerAccountResponse(Model):
    account_id: Optional[str] = None


@dataclass(frozen=True)
class ListACHRelationshipsResponse(Model):
    ach_relationships: Optional[List[ACHRelationship]] = None


@dataclass(frozen=True)
class DeleteACHRelationshipResponse(Model):
    ach_relationship_id: Optional[str] = None


@dataclass(frozen=True)
class ListTransfersResponse(Model):
    transfers: Optional[List[Transfer]] = None


@dataclass(frozen=True)
class CancelTransferResponse(Model):
    transfer_id: Optional[str] = None


@dataclass(frozen=True)
class ListTradingOrdersResponse(Model):
    orders: Optional[List[BrokerOrder]] = None


@dataclass(frozen=True)
class CancelTradingOrderResponse(Model):
    order_id: Optional[str] = None


@dataclass(frozen=True)
class ListTradingPositionsResponse(Model):
    positions: Optional[List[BrokerPosition]] = None


@dataclass(frozen=True)
class CloseAllTradingPositionsResponse(Model):
    results: Optional[List[TradingPositionCloseResult]] = None
