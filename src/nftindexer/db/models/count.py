from sqlalchemy.orm import Mapped, mapped_column

from nftindexer.db.session import Base, EntityPrimaryKey, Uint256


class CountRecord(EntityPrimaryKey, Base):
    """Singleton statistics row (id = "all")."""

    __tablename__ = "counts"

    order_total: Mapped[int] = mapped_column(default=0)
    order_parcel: Mapped[int] = mapped_column(default=0)
    order_estate: Mapped[int] = mapped_column(default=0)
    order_wearable: Mapped[int] = mapped_column(default=0)
    order_ens: Mapped[int] = mapped_column(default=0)
    parcel_total: Mapped[int] = mapped_column(default=0)
    estate_total: Mapped[int] = mapped_column(default=0)
    wearable_total: Mapped[int] = mapped_column(default=0)
    ens_total: Mapped[int] = mapped_column(default=0)
    sales_total: Mapped[int] = mapped_column(default=0)
    sales_mana_total: Mapped[int] = mapped_column(Uint256, default=0)
    creator_earnings_mana_total: Mapped[int] = mapped_column(Uint256, default=0)
    dao_earnings_mana_total: Mapped[int] = mapped_column(Uint256, default=0)
    started: Mapped[int] = mapped_column(default=0)
