from nftindexer.domain.enums.anomaly import AnomalyType
from nftindexer.domain.enums.category import Category
from nftindexer.domain.enums.network import Network
from nftindexer.domain.enums.order import OrderStatus
from nftindexer.domain.enums.wearable import BodyShape, WearableCategory, WearableRarity

__all__ = [
    "AnomalyType",
    "BodyShape",
    "Category",
    "Network",
    "OrderStatus",
    "WearableCategory",
    "WearableRarity",
]
