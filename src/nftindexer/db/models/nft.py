from typing import Optional

from sqlalchemy import JSON, BigInteger, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nftindexer.db.session import Base, EntityPrimaryKey, Uint256


class NFTRecord(EntityPrimaryKey, Base):
    """Row for domain.models.NFT. Column names match the pydantic fields one-to-one."""

    __tablename__ = "nfts"

    token_id: Mapped[int] = mapped_column(Uint256)
    owner_id: Mapped[Optional[str]] = mapped_column(String(42), default=None, index=True)
    category: Mapped[str] = mapped_column(String(20), index=True)
    contract_address: Mapped[bytes] = mapped_column(LargeBinary(20))
    token_uri: Mapped[Optional[str]] = mapped_column(Text, default=None)
    name: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    image: Mapped[Optional[str]] = mapped_column(Text, default=None)

    created_at: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
    updated_at: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
    transferred_at: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
    sold_at: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
    sales: Mapped[int] = mapped_column(default=0)
    volume: Mapped[int] = mapped_column(Uint256, default=0)

    active_order_id: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    parcel_id: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    estate_id: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    wearable_id: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    ens_id: Mapped[Optional[str]] = mapped_column(String(255), default=None)

    search_order_status: Mapped[Optional[str]] = mapped_column(String(20), default=None, index=True)
    search_order_price: Mapped[Optional[int]] = mapped_column(Uint256, default=None)
    search_order_created_at: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
    search_order_expires_at: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)

    search_is_land: Mapped[bool] = mapped_column(default=False)
    search_text: Mapped[Optional[str]] = mapped_column(Text, default=None)
    search_parcel_is_in_bounds: Mapped[Optional[bool]] = mapped_column(default=None)
    search_parcel_x: Mapped[Optional[int]] = mapped_column(default=None)
    search_parcel_y: Mapped[Optional[int]] = mapped_column(default=None)
    search_distance_to_plaza: Mapped[Optional[int]] = mapped_column(default=None)
    search_adjacent_to_road: Mapped[Optional[bool]] = mapped_column(default=None)
    search_estate_size: Mapped[Optional[int]] = mapped_column(default=None)
    search_is_wearable_head: Mapped[Optional[bool]] = mapped_column(default=None)
    search_is_wearable_accessory: Mapped[Optional[bool]] = mapped_column(default=None)
    search_wearable_category: Mapped[Optional[str]] = mapped_column(String(20), default=None)
    search_wearable_body_shapes: Mapped[Optional[list]] = mapped_column(JSON, default=None)
    search_wearable_rarity: Mapped[Optional[str]] = mapped_column(String(20), default=None)
