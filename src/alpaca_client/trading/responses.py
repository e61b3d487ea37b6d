"""
Trading API response types.

List endpoints return bare JSON arrays; these wrap them. Operations the
server answers with an empty body echo the identifier that was acted on.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..models.base import Model
from .models import (
    AccountActivity,
    Asset,
    CalendarDay,
    Order,
    OrderCancelResult,
    Position,
    PositionCloseResult,
    Watchlist,
)


@dataclass(frozen=True)
class GetAccountActivitiesResponse(Model):
    activities: Optional[List[AccountActivity]] = None


@dataclass(frozen=True)
class ListOrdersResponse(Model):
    orders: Optional[List[Order]] = None


@dataclass(frozen=True)
class CancelOrderResponse(Model):
    order_id: Optional[str] = None


@dataclass(frozen=True)
class CancelAllOrdersResponse(Model):
    results: Optional[List[OrderCancelResult]] = None


@dataclass(frozen=True)
class ListPositionsResponse(Model):
    positions: Optional[List[Position]] = None


@dataclass(frozen=True)
class CloseAllPositionsResponse(Model):
    results: Optional[List[PositionCloseResult]] = None


@dataclass(frozen=True)
class ExerciseOptionResponse(Model):
    symbol_or_contract_id: Optional[str] = None


@dataclass(frozen=True)
class ListAssetsResponse(Model):
    assets: Optional[List[Asset]] = None


@dataclass(frozen=True)
class GetCalendarResponse(Model):
    days: Optional[List[CalendarDay]] = None


@dataclass(frozen=True)
class ListWatchlistsResponse(Model):
    watchlists: Optional[List[Watchlist]] = None


@dataclass(frozen=True)
class DeleteWatchlistResponse(Model):
    watchlist_id: Optional[str] = None


@dataclass(frozen=True)
class RemoveWatchlistAssetResponse(Model):
    watchlist: Optional[Watchlist] = None
