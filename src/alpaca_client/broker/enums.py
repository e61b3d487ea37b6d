"""
Enumerations of the Broker API.
"""

from ..models.base import ApiEnum


class TransferDirection(ApiEnum):
    UNSPECIFIED = ""
    INCOMING = "INCOMING"
    OUTGOING = "OUTGOING"


class TransferType(ApiEnum):
    UNSPECIFIED = ""
    ACH = "ach"
    WIRE = "wire"


class TransferStatus(ApiEnum):
    UNSPECIFIED = ""
    QUEUED = "QUEUED"
    APPROVAL_PENDING = "APPROVAL_PENDING"
    PENDING = "PENDING"
    SENT_TO_CLEARING = "SENT_TO_CLEARING"
    REJECTED = "REJECTED"
    CANCELED = "CANCELED"
    APPROVED = "APPROVED"
    COMPLETE = "COMPLETE"
    RETURNED = "RETURNED"


class ACHRelationshipStatus(ApiEnum):
    UNSPECIFIED = ""
    QUEUED = "QUEUED"
    APPROVED = "APPROVED"
    PENDING = "PENDING"
    CANCEL_REQUESTED = "CANCEL_REQUESTED"
    CANCELED = "CANCELED"
