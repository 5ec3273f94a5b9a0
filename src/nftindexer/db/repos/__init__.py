from nftindexer.db.repos.anomaly_repo import AnomalyRepo
from nftindexer.db.repos.snapshot_repo import SnapshotRepo

__all__ = ["AnomalyRepo", "SnapshotRepo"]
