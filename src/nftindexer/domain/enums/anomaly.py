from enum import Enum


class AnomalyType(str, Enum):
    """Recoverable inconsistencies recorded while reconciling a batch."""

    NFT_NOT_FOUND = "NFTNotFound"
    ORDER_NOT_FOUND = "OrderNotFound"
    WEARABLE_NOT_FOUND = "WearableNotFound"
    ENS_NOT_FOUND = "ENSNotFound"
    MISSING_COORDINATES = "MissingCoordinates"
    UNRESOLVED_WEARABLE = "UnresolvedWearable"
