"""SnapshotRepo: preloads a BatchStore from the database and flushes it back."""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nftindexer.db.models import (
    AccountRecord,
    CountRecord,
    ENSRecord,
    EstateRecord,
    NFTRecord,
    OrderRecord,
    ParcelRecord,
    WearableRecord,
)
from nftindexer.db.session import Base
from nftindexer.domain.models import DEFAULT_COUNT_ID, ENS, NFT, Account, Count, Estate, Order, Parcel, Wearable
from nftindexer.reconcile.store import BatchStore

# (BatchStore attribute, domain model, row class)
ENTITY_TABLES: list[tuple[str, type[BaseModel], type[Base]]] = [
    ("nfts", NFT, NFTRecord),
    ("accounts", Account, AccountRecord),
    ("orders", Order, OrderRecord),
    ("counts", Count, CountRecord),
    ("parcels", Parcel, ParcelRecord),
    ("estates", Estate, EstateRecord),
    ("wearables", Wearable, WearableRecord),
    ("ens", ENS, ENSRecord),
]


def _row_values(entity: BaseModel) -> dict[str, Any]:
    """model_dump() with enums (and lists of enums) flattened to their values."""
    values: dict[str, Any] = {}
    for key, value in entity.model_dump().items():
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, list):
            value = [v.value if isinstance(v, Enum) else v for v in value]
        values[key] = value
    return values


class SnapshotRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def load(
        self,
        store: BatchStore,
        *,
        nft_ids: Iterable[str] = (),
        account_ids: Iterable[str] = (),
        order_ids: Iterable[str] = (),
    ) -> None:
        """Stage the given entities plus everything a transfer of those NFTs can touch.

        That is: their category sub-entities, their active orders and the Count singleton.
        """
        nft_keys = set(nft_ids)
        nfts = await self._fetch(NFTRecord, NFT, nft_keys)
        for nft in nfts:
            store.nfts.put(nft)

        order_keys = set(order_ids) | {nft.active_order_id for nft in nfts if nft.active_order_id}
        for order in await self._fetch(OrderRecord, Order, order_keys):
            store.orders.put(order)
        for account in await self._fetch(AccountRecord, Account, set(account_ids)):
            store.accounts.put(account)

        for parcel in await self._fetch(ParcelRecord, Parcel, nft_keys):
            store.parcels.put(parcel)
        for estate in await self._fetch(EstateRecord, Estate, nft_keys):
            store.estates.put(estate)
        for wearable in await self._fetch(WearableRecord, Wearable, nft_keys):
            store.wearables.put(wearable)
        for ens in await self._fetch(ENSRecord, ENS, nft_keys):
            store.ens.put(ens)

        for count in await self._fetch(CountRecord, Count, {DEFAULT_COUNT_ID}):
            store.counts.put(count)

    async def save(self, store: BatchStore) -> dict[str, int]:
        """Upsert every staged entity. Returns rows written per entity type."""
        written: dict[str, int] = {}
        for attr, _, record_cls in ENTITY_TABLES:
            repo = getattr(store, attr)
            for entity in repo.values():
                await self._session.merge(record_cls(**_row_values(entity)))
            written[attr] = len(repo)
        await self._session.flush()
        return written

    async def get_nft(self, nft_id: str) -> NFT | None:
        found = await self._fetch(NFTRecord, NFT, {nft_id})
        return found[0] if found else None

    async def get_count(self) -> Count | None:
        found = await self._fetch(CountRecord, Count, {DEFAULT_COUNT_ID})
        return found[0] if found else None

    async def _fetch(self, record_cls: Any, model_cls: type[BaseModel], ids: set[str]) -> list[Any]:
        if not ids:
            return []
        result = await self._session.execute(select(record_cls).where(record_cls.id.in_(ids)))
        return [model_cls.model_validate(row, from_attributes=True) for row in result.scalars().all()]
