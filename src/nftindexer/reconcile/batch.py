"""BatchProcessor: applies a batch of transfer logs in order against one BatchStore."""

import logging

from nftindexer.domain.events import TransferLog
from nftindexer.reconcile.category import CategoryResolver
from nftindexer.reconcile.ids import nft_id, parse_token_id
from nftindexer.reconcile.lookups import BatchLookups
from nftindexer.reconcile.reconciler import TransferReconciler
from nftindexer.reconcile.store import BatchStore

logger = logging.getLogger(__name__)


class BatchProcessor:
    """Logs -> CategoryResolver -> TransferReconciler, strictly in input order.

    Later transfers of the same NFT depend on the state left by earlier ones
    (order cancellation, owner mirroring), so logs are never reordered.
    """

    def __init__(self, reconciler: TransferReconciler, resolver: CategoryResolver) -> None:
        self._reconciler = reconciler
        self._resolver = resolver

    def process(self, logs: list[TransferLog], store: BatchStore, lookups: BatchLookups) -> dict[str, int]:
        stats = {"applied": 0, "skipped": 0, "anomalies": 0, "total": len(logs)}
        for log in logs:
            seen = len(store.anomalies)
            category = self._resolver.resolve(log.contract_address)
            outcome = self._reconciler.reconcile(
                log.event, log.contract_address, category, log.timestamp, store, lookups
            )
            if outcome.applied:
                stats["applied"] += 1
            else:
                stats["skipped"] += 1

            for anomaly in store.anomalies[seen:]:
                anomaly.block_number = log.block_number
            stats["anomalies"] += len(store.anomalies) - seen

        logger.info(
            "Reconciled %d/%d transfers (%d skipped, %d anomalies)",
            stats["applied"], stats["total"], stats["skipped"], stats["anomalies"],
        )
        return stats

    def referenced_ids(self, logs: list[TransferLog]) -> tuple[set[str], set[str]]:
        """NFT ids and account addresses a batch will touch, for preloading the store."""
        nft_ids: set[str] = set()
        account_ids: set[str] = set()
        for log in logs:
            token_id = parse_token_id(log.event.token_id)
            if token_id is None:
                continue
            category = self._resolver.resolve(log.contract_address)
            nft_ids.add(nft_id(category, log.contract_address.lower(), token_id))
            account_ids.add(log.event.to_address.lower())
        return nft_ids, account_ids
