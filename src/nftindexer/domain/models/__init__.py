from nftindexer.domain.models.account import Account
from nftindexer.domain.models.catalog import ENS, Wearable
from nftindexer.domain.models.count import DEFAULT_COUNT_ID, Count
from nftindexer.domain.models.land import Estate, Parcel
from nftindexer.domain.models.nft import NFT
from nftindexer.domain.models.order import Order

__all__ = [
    "Account",
    "Count",
    "DEFAULT_COUNT_ID",
    "ENS",
    "Estate",
    "NFT",
    "Order",
    "Parcel",
    "Wearable",
]
