"""Count aggregate: the single global statistics record of a store."""

import logging

from nftindexer.domain.models import DEFAULT_COUNT_ID, NFT, Count, Order
from nftindexer.domain.models.count import MINT_COUNTERS, ORDER_COUNTERS
from nftindexer.reconcile.store import BatchStore

logger = logging.getLogger(__name__)

# Marketplace fees are parts-per-million of the price
ONE_MILLION = 1_000_000


def ensure_count(store: BatchStore) -> Count:
    count = store.counts.get(DEFAULT_COUNT_ID)
    if count is None:
        logger.info("Count not found, creating new one")
        count = store.counts.put(Count(id=DEFAULT_COUNT_ID, started=1))
    return count


def increment_on_mint(nft: NFT, store: BatchStore) -> Count:
    count = ensure_count(store)
    field = MINT_COUNTERS.get(nft.category)
    if field is not None:
        setattr(count, field, getattr(count, field) + 1)
    return count


def increment_on_order(order: Order, store: BatchStore) -> Count:
    count = ensure_count(store)
    count.order_total += 1
    field = ORDER_COUNTERS.get(order.category)
    if field is not None:
        setattr(count, field, getattr(count, field) + 1)
    return count


def increment_on_sale(price: int, fees_collector_cut: int, store: BatchStore) -> Count:
    """Record one settled sale. `fees_collector_cut` is parts-per-million of `price`."""
    count = ensure_count(store)
    count.sales_total += 1
    count.sales_mana_total += price
    count.dao_earnings_mana_total += fees_collector_cut * price // ONE_MILLION
    return count
