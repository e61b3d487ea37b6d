"""
Enumerations of the Trading API.
"""

from ..models.base import ApiEnum


class OrderSide(ApiEnum):
    UNSPECIFIED = ""
    BUY = "buy"
    SELL = "sell"


class OrderType(ApiEnum):
    UNSPECIFIED = ""
    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"
    STOP_LIMIT = "stop_limit"
    TRAILING_STOP = "trailing_stop"


class OrderStatus(ApiEnum):
    UNSPECIFIED = ""
    NEW = "new"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    DONE_FOR_DAY = "done_for_day"
    CANCELED = "canceled"
    EXPIRED = "expired"
    REPLACED = "replaced"
    PENDING_CANCEL = "pending_cancel"
    PENDING_REPLACE = "pending_replace"
    PENDING_REVIEW = "pending_review"
    ACCEPTED = "accepted"
    PENDING_NEW = "pending_new"
    ACCEPTED_FOR_BIDDING = "accepted_for_bidding"
    STOPPED = "stopped"
    REJECTED = "rejected"
    SUSPENDED = "suspended"
    CALCULATED = "calculated"
    HELD = "held"


class TimeInForce(ApiEnum):
    UNSPECIFIED = ""
    DAY = "day"
    GTC = "gtc"
    OPG = "opg"
    CLS = "cls"
    IOC = "ioc"
    FOK = "fok"


class AssetClass(ApiEnum):
    UNSPECIFIED = ""
    US_EQUITY = "us_equity"
    US_OPTION = "us_option"
    CRYPTO = "crypto"


class AssetStatus(ApiEnum):
    UNSPECIFIED = ""
    ACTIVE = "active"
    INACTIVE = "inactive"


class PositionSide(ApiEnum):
    UNSPECIFIED = ""
    LONG = "long"
    SHORT = "short"


class ActivitySide(ApiEnum):
    """Side reported on a fill activity; short sales are told apart from sells."""
    UNSPECIFIED = ""
    BUY = "buy"
    SELL = "sell"
    SELL_SHORT = "sell_short"


class OrderClass(ApiEnum):
    """Order class; bracket, OCO and OTO orders carry take-profit/stop-loss legs."""
    UNSPECIFIED = ""
    SIMPLE = "simple"
    BRACKET = "bracket"
    OCO = "oco"
    OTO = "oto"
    MLEG = "mleg"


class ActivityType(ApiEnum):
    """Account activity type codes."""
    UNSPECIFIED = ""
    FILL = "FILL"
    TRANS = "TRANS"
    MISC = "MISC"
    ACATC = "ACATC"
    ACATS = "ACATS"
    CFEE = "CFEE"
    CSD = "CSD"
    CSW = "CSW"
    DIV = "DIV"
    DIVCGL = "DIVCGL"
    DIVCGS = "DIVCGS"
    DIVFEE = "DIVFEE"
    DIVFT = "DIVFT"
    DIVNRA = "DIVNRA"
    DIVROC = "DIVROC"
    DIVTW = "DIVTW"
    DIVTXEX = "DIVTXEX"
    FEE = "FEE"
    INT = "INT"
    INTNRA = "INTNRA"
    INTTW = "INTTW"
    JNL = "JNL"
    JNLC = "JNLC"
    JNLS = "JNLS"
    MA = "MA"
    NC = "NC"
    OPASN = "OPASN"
    OPEXP = "OPEXP"
    OPXRC = "OPXRC"
    PTC = "PTC"
    PTR = "PTR"
    REORG = "REORG"
    SC = "SC"
    SSO = "SSO"
    SSP = "SSP"


class DtbpCheck(ApiEnum):
    UNSPECIFIED = ""
    BOTH = "both"
    ENTRY = "entry"
    EXIT = "exit"


class TradeConfirmEmail(ApiEnum):
    UNSPECIFIED = ""
    ALL = "all"
    NONE = "none"


class AccountStatus(ApiEnum):
    UNSPECIFIED = ""
    ONBOARDING = "ONBOARDING"
    SUBMISSION_FAILED = "SUBMISSION_FAILED"
    SUBMITTED = "SUBMITTED"
    ACCOUNT_UPDATED = "ACCOUNT_UPDATED"
    APPROVAL_PENDING = "APPROVAL_PENDING"
    ACTION_REQUIRED = "ACTION_REQUIRED"
    APPROVED = "APPROVED"
    ACTIVE = "ACTIVE"
    REJECTED = "REJECTED"
    DISABLED = "DISABLED"
    ACCOUNT_CLOSED = "ACCOUNT_CLOSED"
