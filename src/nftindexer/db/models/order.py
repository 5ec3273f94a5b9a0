from typing import Optional

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from nftindexer.db.session import Base, EntityPrimaryKey, Uint256


class OrderRecord(EntityPrimaryKey, Base):
    __tablename__ = "orders"

    category: Mapped[str] = mapped_column(String(20))
    nft_id: Mapped[Optional[str]] = mapped_column(String(255), default=None, index=True)
    nft_address: Mapped[str] = mapped_column(String(42), default="")
    token_id: Mapped[int] = mapped_column(Uint256, default=0)
    owner: Mapped[str] = mapped_column(String(42), default="")
    buyer: Mapped[Optional[str]] = mapped_column(String(42), default=None)
    price: Mapped[int] = mapped_column(Uint256, default=0)
    status: Mapped[str] = mapped_column(String(20), index=True)
    expires_at: Mapped[int] = mapped_column(BigInteger, default=0)
    created_at: Mapped[int] = mapped_column(BigInteger, default=0)
    updated_at: Mapped[int] = mapped_column(BigInteger, default=0)
    tx_hash: Mapped[Optional[str]] = mapped_column(String(66), default=None)
    block_number: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
