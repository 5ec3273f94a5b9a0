from nftindexer.db.models.account import AccountRecord
from nftindexer.db.models.anomaly import AnomalyRecord
from nftindexer.db.models.catalog import ENSRecord, WearableRecord
from nftindexer.db.models.count import CountRecord
from nftindexer.db.models.land import EstateRecord, ParcelRecord
from nftindexer.db.models.nft import NFTRecord
from nftindexer.db.models.order import OrderRecord

__all__ = [
    "AccountRecord",
    "AnomalyRecord",
    "CountRecord",
    "ENSRecord",
    "EstateRecord",
    "NFTRecord",
    "OrderRecord",
    "ParcelRecord",
    "WearableRecord",
]
