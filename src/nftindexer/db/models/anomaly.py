from typing import Optional

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nftindexer.db.session import Base, TimestampMixin, UUIDPrimaryKey


class AnomalyRecord(UUIDPrimaryKey, TimestampMixin, Base):
    """Recoverable reconciliation anomalies, kept for inspection."""

    __tablename__ = "anomaly_records"

    anomaly_type: Mapped[str] = mapped_column(String(50), index=True)
    entity_id: Mapped[str] = mapped_column(String(255), index=True)
    message: Mapped[Optional[str]] = mapped_column(Text, default=None)
    block_number: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
    resolved: Mapped[bool] = mapped_column(default=False)
