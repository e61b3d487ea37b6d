"""
Broker API client.

Customer accounts, ACH relationships, transfers, and orders and positions
held in customer accounts, against the live or sandbox broker endpoint.
Every type used by the client is importable from this package.
"""

from ..options import Option, with_base_url, with_http_client
from .client import (
    LIVE_BASE_URL,
    SANDBOX_BASE_URL,
    Client,
    new_client,
    new_sandbox_client,
)
from .enums import (
    TransferDirection,
    TransferType,
    TransferStatus,
    ACHRelationshipStatus,
)
from .models import (
    Contact,
    Identity,
    Disclosures,
    Agreement,
    TrustedContact,
    BrokerAccount,
    BrokerOrder,
    BrokerPosition,
    ACHRelationship,
    Transfer,
    TradingPositionCloseResult,
)
from .requests import (
    CreateAccountRequest,
    ListAccountsRequest,
    GetBrokerAccountRequest,
    UpdateBrokerAccountRequest,
    CloseBrokerAccountRequest,
    CreateACHRelationshipRequest,
    ListACHRelationshipsRequest,
    DeleteACHRelationshipRequest,
    CreateTransferRequest,
    ListTransfersRequest,
    GetTransferRequest,
    CancelTransferRequest,
    CreateTradingOrderRequest,
    ListTradingOrdersRequest,
    GetTradingOrderRequest,
    CancelTradingOrderRequest,
    ListTradingPositionsRequest,
    GetTradingPositionRequest,
    CloseTradingPositionRequest,
    CloseAllTradingPositionsRequest,
)
from .responses import (
    ListAccountsResponse,
    CloseBrokerAccountResponse,
    ListACHRelationshipsResponse,
    DeleteACHRelationshipResponse,
    ListTransfersResponse,
    CancelTransferResponse,
    ListTradingOrdersResponse,
    CancelTradingOrderResponse,
    ListTradingPositionsResponse,
    CloseAllTradingPositionsResponse,
)
from .service import BrokerServiceClient

# Order and position types shared with the Trading API
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
from ..trading.models import StopLossSpec, TakeProfitSpec

__all__ = [
    # Client
    "LIVE_BASE_URL",
    "SANDBOX_BASE_URL",
    "Client",
    "new_client",
    "new_sandbox_client",
    "Option",
    "with_base_url",
    "with_http_client",
    "BrokerServiceClient",
    # Enums
    "TransferDirection",
    "TransferType",
    "TransferStatus",
    "ACHRelationshipStatus",
    # Shared with the Trading API
    "AccountStatus",
    "AssetClass",
    "OrderClass",
    "OrderSide",
    "OrderStatus",
    "OrderType",
    "PositionSide",
    "TimeInForce",
    "TakeProfitSpec",
    "StopLossSpec",
    # Models
    "Contact",
    "Identity",
    "Disclosures",
    "Agreement",
    "TrustedContact",
    "BrokerAccount",
    "BrokerOrder",
    "BrokerPosition",
    "ACHRelationship",
    "Transfer",
    "TradingPositionCloseResult",
    # Requests
    "CreateAccountRequest",
    "ListAccountsRequest",
    "GetBrokerAccountRequest",
    "UpdateBrokerAccountRequest",
    "CloseBrokerAccountRequest",
    "CreateACHRelationshipRequest",
    "ListACHRelationshipsRequest",
    "DeleteACHRelationshipRequest",
    "CreateTransferRequest",
    "ListTransfersRequest",
    "GetTransferRequest",
    "CancelTransferRequest",
    "CreateTradingOrderRequest",
    "ListTradingOrdersRequest",
    "GetTradingOrderRequest",
    "CancelTradingOrderRequest",
    "ListTradingPositionsRequest",
    "GetTradingPositionRequest",
    "CloseTradingPositionRequest",
    "CloseAllTradingPositionsRequest",
    # Responses
    "ListAccountsResponse",
    "CloseBrokerAccountResponse",
    "ListACHRelationshipsResponse",
    "DeleteACHRelationshipResponse",
    "ListTransfersResponse",
    "CancelTransferResponse",
    "ListTradingOrdersResponse",
    "CancelTradingOrderResponse",
    "ListTradingPositionsResponse",
    "CloseAllTradingPositionsResponse",
]
