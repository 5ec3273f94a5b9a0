"""Category specializers: per-category sub-entity build (on mint) and owner mirroring (on transfer).

Each specializer touches only its own sub-entity repo, so a transfer in one
category can never create or mutate another category's records.
"""

from abc import ABC, abstractmethod

from nftindexer.catalog.ens import build_ens_from_nft
from nftindexer.catalog.wearables import (
    WearableCatalog,
    build_wearable_from_nft,
    is_wearable_accessory,
    is_wearable_head,
    wearable_image,
)
from nftindexer.domain.enums import AnomalyType, Category
from nftindexer.domain.models import NFT
from nftindexer.land.builders import build_estate_from_nft, build_parcel_from_nft
from nftindexer.land.geometry import (
    NO_DISTANCE,
    LandMap,
    distance_to_plaza,
    estate_image,
    is_adjacent_to_road,
    is_in_bounds,
    parcel_image,
    parcel_text,
)
from nftindexer.reconcile.lookups import BatchLookups
from nftindexer.reconcile.store import BatchStore


class CategorySpecializer(ABC):
    """Interface every category variant implements."""

    CATEGORY: Category = Category.OTHER

    @abstractmethod
    def on_mint(self, nft: NFT, store: BatchStore, lookups: BatchLookups) -> None:
        """Build the sub-entity for a freshly minted NFT and fill its search columns."""

    @abstractmethod
    def on_transfer(self, nft: NFT, store: BatchStore) -> None:
        """Mirror the NFT's new owner onto the existing sub-entity."""


class NoopSpecializer(CategorySpecializer):
    def on_mint(self, nft: NFT, store: BatchStore, lookups: BatchLookups) -> None:
        return None

    def on_transfer(self, nft: NFT, store: BatchStore) -> None:
        return None


class ParcelSpecializer(CategorySpecializer):
    CATEGORY = Category.PARCEL

    def __init__(self, land_map: LandMap | None = None) -> None:
        self._land_map = land_map or LandMap()

    def on_mint(self, nft: NFT, store: BatchStore, lookups: BatchLookups) -> None:
        coordinate = lookups.coordinate(nft.token_id)
        if coordinate is None:
            # NFT keeps the generic mint defaults
            store.report(AnomalyType.MISSING_COORDINATES, nft.id, f"No coordinates for parcel token {nft.token_id}")
            return

        parcel = build_parcel_from_nft(nft, coordinate)
        nft.parcel_id = parcel.id
        nft.image = parcel_image(parcel)
        nft.search_is_land = True
        nft.search_parcel_is_in_bounds = is_in_bounds(parcel.x, parcel.y)
        nft.search_parcel_x = parcel.x
        nft.search_parcel_y = parcel.y
        nft.search_distance_to_plaza = distance_to_plaza(parcel, self._land_map)
        nft.search_adjacent_to_road = is_adjacent_to_road(parcel, self._land_map)
        nft.search_text = parcel_text(parcel)
        store.parcels.put(parcel)

    def on_transfer(self, nft: NFT, store: BatchStore) -> None:
        parcel = store.parcels.get(nft.id)
        if parcel is not None:
            parcel.owner_id = nft.owner_id


class EstateSpecializer(CategorySpecializer):
    CATEGORY = Category.ESTATE

    def on_mint(self, nft: NFT, store: BatchStore, lookups: BatchLookups) -> None:
        estate = build_estate_from_nft(nft)
        nft.estate_id = estate.id
        nft.image = estate_image(estate)
        nft.search_is_land = True
        nft.search_distance_to_plaza = NO_DISTANCE
        nft.search_adjacent_to_road = False
        nft.search_estate_size = estate.size
        store.estates.put(estate)

    def on_transfer(self, nft: NFT, store: BatchStore) -> None:
        estate = store.estates.get(nft.id)
        if estate is not None:
            estate.owner_id = nft.owner_id


class WearableSpecializer(CategorySpecializer):
    CATEGORY = Category.WEARABLE

    def __init__(self, catalog: WearableCatalog | None = None) -> None:
        self._catalog = catalog or WearableCatalog()

    def on_mint(self, nft: NFT, store: BatchStore, lookups: BatchLookups) -> None:
        wearable = build_wearable_from_nft(nft, self._catalog)
        if not wearable.id:
            store.report(AnomalyType.UNRESOLVED_WEARABLE, nft.id, f"Cannot resolve wearable from {nft.token_uri!r}")
            return

        nft.wearable_id = wearable.id
        nft.name = wearable.name
        nft.image = wearable_image(wearable)
        nft.search_is_wearable_head = is_wearable_head(wearable)
        nft.search_is_wearable_accessory = is_wearable_accessory(wearable)
        nft.search_wearable_category = wearable.category
        nft.search_wearable_body_shapes = list(wearable.body_shapes)
        nft.search_wearable_rarity = wearable.rarity
        nft.search_text = wearable.name.lower()
        store.wearables.put(wearable)

    def on_transfer(self, nft: NFT, store: BatchStore) -> None:
        wearable = store.wearables.get(nft.id)
        if wearable is None:
            store.report(AnomalyType.WEARABLE_NOT_FOUND, nft.id, "Wearable not found")
            return
        wearable.owner_id = nft.owner_id


class ENSSpecializer(CategorySpecializer):
    CATEGORY = Category.ENS

    def on_mint(self, nft: NFT, store: BatchStore, lookups: BatchLookups) -> None:
        ens = build_ens_from_nft(nft, lookups.ens_subdomain(nft.token_id))
        nft.ens_id = ens.id
        store.ens.put(ens)

    def on_transfer(self, nft: NFT, store: BatchStore) -> None:
        ens = store.ens.get(nft.id)
        if ens is None:
            store.report(AnomalyType.ENS_NOT_FOUND, nft.id, "ENS not found")
            return
        ens.owner_id = nft.owner_id


class SpecializerRegistry:
    """Category -> specializer. Unregistered categories get a no-op."""

    def __init__(self) -> None:
        self._specializers: dict[Category, CategorySpecializer] = {}
        self._fallback: CategorySpecializer = NoopSpecializer()

    def register(self, specializer: CategorySpecializer) -> None:
        self._specializers[specializer.CATEGORY] = specializer

    def get(self, category: Category) -> CategorySpecializer:
        return self._specializers.get(category, self._fallback)


def build_default_registry(
    land_map: LandMap | None = None,
    catalog: WearableCatalog | None = None,
) -> SpecializerRegistry:
    registry = SpecializerRegistry()
    registry.register(ParcelSpecializer(land_map))
    registry.register(EstateSpecializer())
    registry.register(WearableSpecializer(catalog))
    registry.register(ENSSpecializer())
    return registry
