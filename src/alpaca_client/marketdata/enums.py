"""
Enumerations of the Market Data API.
"""

from ..models.base import ApiEnum


class Timeframe(ApiEnum):
    """Bar aggregation period."""
    UNSPECIFIED = ""
    ONE_MIN = "1Min"
    FIVE_MIN = "5Min"
    FIFTEEN_MIN = "15Min"
    THIRTY_MIN = "30Min"
    ONE_HOUR = "1Hour"
    FOUR_HOUR = "4Hour"
    ONE_DAY = "1Day"
    ONE_WEEK = "1Week"
    ONE_MONTH = "1Month"


class Adjustment(ApiEnum):
    """Corporate action adjustment applied to stock bars."""
    UNSPECIFIED = ""
    RAW = "raw"
    SPLIT = "split"
    DIVIDEND = "dividend"
    ALL = "all"


class Feed(ApiEnum):
    """Stock data feed; SIP requires a paid subscription."""
    UNSPECIFIED = ""
    IEX = "iex"
    SIP = "sip"


class Sort(ApiEnum):
    UNSPECIFIED = ""
    ASC = "asc"
    DESC = "desc"


class CryptoLoc(ApiEnum):
    """Crypto data location."""
    UNSPECIFIED = ""
    US = "us"
    US_1 = "us-1"
    EU_1 = "eu-1"
