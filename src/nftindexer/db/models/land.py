from typing import Optional

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from nftindexer.db.session import Base, EntityPrimaryKey, Uint256


class ParcelRecord(EntityPrimaryKey, Base):
    __tablename__ = "parcels"

    token_id: Mapped[int] = mapped_column(Uint256)
    x: Mapped[int]
    y: Mapped[int]
    owner_id: Mapped[Optional[str]] = mapped_column(String(42), default=None)
    estate_id: Mapped[Optional[str]] = mapped_column(String(255), default=None)


class EstateRecord(EntityPrimaryKey, Base):
    __tablename__ = "estates"

    token_id: Mapped[int] = mapped_column(Uint256)
    owner_id: Mapped[Optional[str]] = mapped_column(String(42), default=None)
    size: Mapped[int] = mapped_column(default=0)
    parcel_distances: Mapped[list] = mapped_column(JSON, default=list)
    adjacent_to_road_count: Mapped[int] = mapped_column(default=0)
