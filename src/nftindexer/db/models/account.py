from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from nftindexer.db.session import Base, EntityPrimaryKey, Uint256


class AccountRecord(EntityPrimaryKey, Base):
    __tablename__ = "accounts"

    address: Mapped[str] = mapped_column(String(42), index=True)
    sales: Mapped[int] = mapped_column(default=0)
    purchases: Mapped[int] = mapped_column(default=0)
    spent: Mapped[int] = mapped_column(Uint256, default=0)
    earned: Mapped[int] = mapped_column(Uint256, default=0)
