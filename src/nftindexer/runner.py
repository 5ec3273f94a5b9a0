"""One batch end to end: preload from the database, reconcile, flush, record anomalies."""

import logging

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from nftindexer.db.repos import AnomalyRepo, SnapshotRepo
from nftindexer.domain.events import Coordinate, TransferLog
from nftindexer.reconcile.batch import BatchProcessor
from nftindexer.reconcile.lookups import BatchLookups
from nftindexer.reconcile.store import BatchStore

logger = logging.getLogger(__name__)


class BatchInput(BaseModel):
    """Transfer logs of one batch plus the auxiliary data fetched for them."""

    logs: list[TransferLog] = []
    coordinates: dict[int, Coordinate] = {}
    token_uris: dict[str, str] = {}  # "<contract>-<tokenId>" -> URI
    ens_subdomains: dict[int, str] = {}

    def to_lookups(self) -> BatchLookups:
        return BatchLookups(
            coordinates=self.coordinates,
            token_uris={key.lower(): uri for key, uri in self.token_uris.items()},
            ens_subdomains=self.ens_subdomains,
        )


async def run_batch(session: AsyncSession, processor: BatchProcessor, batch: BatchInput) -> dict[str, int]:
    store = BatchStore()
    nft_ids, account_ids = processor.referenced_ids(batch.logs)

    snapshots = SnapshotRepo(session)
    await snapshots.load(store, nft_ids=nft_ids, account_ids=account_ids)
    logger.debug("Preloaded %d NFTs, %d accounts", len(store.nfts), len(store.accounts))

    stats = processor.process(batch.logs, store, batch.to_lookups())

    written = await snapshots.save(store)
    if store.anomalies:
        await AnomalyRepo(session).create_many(store.anomalies)
    await session.commit()

    logger.info("Flushed %s", ", ".join(f"{count} {name}" for name, count in written.items() if count))
    return stats
