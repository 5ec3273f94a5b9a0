"""BatchStore: staged entities for one batch, behind a get/put repository interface.

The batch driver owns a store for the duration of one batch, preloads it from
storage, hands it to the reconciler for every event, then flushes it. Nothing
here outlives the batch.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterator, Protocol, TypeVar

from pydantic import BaseModel

from nftindexer.domain.enums import AnomalyType
from nftindexer.domain.models import ENS, NFT, Account, Count, Estate, Order, Parcel, Wearable

logger = logging.getLogger(__name__)


class _Identified(Protocol):
    id: str


T = TypeVar("T", bound=_Identified)


class EntityRepo(ABC, Generic[T]):
    """Minimal capability set the reconciler needs per entity type."""

    @abstractmethod
    def get(self, entity_id: str) -> T | None:
        """Return the staged entity or None."""

    @abstractmethod
    def put(self, entity: T) -> T:
        """Stage (insert or replace) an entity under its id."""

    @abstractmethod
    def values(self) -> list[T]:
        """All staged entities, in insertion order."""

    def __contains__(self, entity_id: object) -> bool:
        return isinstance(entity_id, str) and self.get(entity_id) is not None

    def __len__(self) -> int:
        return len(self.values())

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())


class InMemoryRepo(EntityRepo[T]):
    def __init__(self, entities: list[T] | None = None) -> None:
        self._entities: dict[str, T] = {}
        for entity in entities or []:
            self.put(entity)

    def get(self, entity_id: str) -> T | None:
        return self._entities.get(entity_id)

    def put(self, entity: T) -> T:
        self._entities[entity.id] = entity
        return entity

    def values(self) -> list[T]:
        return list(self._entities.values())


class Anomaly(BaseModel):
    """A recoverable inconsistency. Reported, never raised."""

    anomaly_type: AnomalyType
    entity_id: str
    message: str
    block_number: int | None = None


class BatchStore:
    """One repo per entity type plus the anomalies seen while reconciling."""

    def __init__(
        self,
        *,
        nfts: EntityRepo[NFT] | None = None,
        accounts: EntityRepo[Account] | None = None,
        orders: EntityRepo[Order] | None = None,
        counts: EntityRepo[Count] | None = None,
        parcels: EntityRepo[Parcel] | None = None,
        estates: EntityRepo[Estate] | None = None,
        wearables: EntityRepo[Wearable] | None = None,
        ens: EntityRepo[ENS] | None = None,
    ) -> None:
        self.nfts: EntityRepo[NFT] = nfts if nfts is not None else InMemoryRepo()
        self.accounts: EntityRepo[Account] = accounts if accounts is not None else InMemoryRepo()
        self.orders: EntityRepo[Order] = orders if orders is not None else InMemoryRepo()
        self.counts: EntityRepo[Count] = counts if counts is not None else InMemoryRepo()
        self.parcels: EntityRepo[Parcel] = parcels if parcels is not None else InMemoryRepo()
        self.estates: EntityRepo[Estate] = estates if estates is not None else InMemoryRepo()
        self.wearables: EntityRepo[Wearable] = wearables if wearables is not None else InMemoryRepo()
        self.ens: EntityRepo[ENS] = ens if ens is not None else InMemoryRepo()
        self.anomalies: list[Anomaly] = []

    def get_or_create_account(self, address: str) -> Account:
        account = self.accounts.get(address)
        if account is None:
            account = self.accounts.put(Account.for_address(address))
        return account

    def report(self, anomaly_type: AnomalyType, entity_id: str, message: str) -> Anomaly:
        logger.warning("%s: %s (%s)", anomaly_type.value, message, entity_id)
        anomaly = Anomaly(anomaly_type=anomaly_type, entity_id=entity_id, message=message)
        self.anomalies.append(anomaly)
        return anomaly
