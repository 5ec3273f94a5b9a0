from typing import Optional

from sqlalchemy import JSON, BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nftindexer.db.session import Base, EntityPrimaryKey, Uint256


class WearableRecord(EntityPrimaryKey, Base):
    __tablename__ = "wearables"

    representation_id: Mapped[str] = mapped_column(String(255), default="")
    collection: Mapped[str] = mapped_column(String(255), default="")
    issued_id: Mapped[Optional[int]] = mapped_column(Uint256, default=None)
    name: Mapped[str] = mapped_column(String(255), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    category: Mapped[Optional[str]] = mapped_column(String(20), default=None)
    rarity: Mapped[Optional[str]] = mapped_column(String(20), default=None)
    body_shapes: Mapped[list] = mapped_column(JSON, default=list)
    owner_id: Mapped[Optional[str]] = mapped_column(String(42), default=None)


class ENSRecord(EntityPrimaryKey, Base):
    __tablename__ = "ens"

    token_id: Mapped[int] = mapped_column(Uint256)
    owner_id: Mapped[Optional[str]] = mapped_column(String(42), default=None)
    caller: Mapped[Optional[str]] = mapped_column(String(42), default=None)
    subdomain: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    created_at: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
