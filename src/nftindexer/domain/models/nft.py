"""NFT record with the denormalized search columns the marketplace queries on."""

from pydantic import BaseModel

from nftindexer.domain.enums import BodyShape, Category, OrderStatus, WearableCategory, WearableRarity


class NFT(BaseModel):
    """One token of one contract. `id` is derived by `nft_id()`; never reassigned."""

    id: str
    token_id: int = 0
    owner_id: str | None = None  # Account.id
    category: Category = Category.OTHER
    contract_address: bytes = b""
    token_uri: str | None = None
    name: str | None = None
    image: str | None = None

    # Unix seconds
    created_at: int | None = None
    updated_at: int | None = None
    transferred_at: int | None = None
    sold_at: int | None = None

    # Reset on every transfer; cumulative sale stats live on Count
    sales: int = 0
    volume: int = 0

    # Weak references by id
    active_order_id: str | None = None
    parcel_id: str | None = None
    estate_id: str | None = None
    wearable_id: str | None = None
    ens_id: str | None = None

    # Mirrors of the active order; written only by reconcile.orders
    search_order_status: OrderStatus | None = None
    search_order_price: int | None = None
    search_order_created_at: int | None = None
    search_order_expires_at: int | None = None

    search_is_land: bool = False
    search_text: str | None = None
    search_parcel_is_in_bounds: bool | None = None
    search_parcel_x: int | None = None
    search_parcel_y: int | None = None
    search_distance_to_plaza: int | None = None
    search_adjacent_to_road: bool | None = None
    search_estate_size: int | None = None
    search_is_wearable_head: bool | None = None
    search_is_wearable_accessory: bool | None = None
    search_wearable_category: WearableCategory | None = None
    search_wearable_body_shapes: list[BodyShape] | None = None
    search_wearable_rarity: WearableRarity | None = None
