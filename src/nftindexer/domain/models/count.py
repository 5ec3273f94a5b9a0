from pydantic import BaseModel

from nftindexer.domain.enums import Category

DEFAULT_COUNT_ID = "all"


class Count(BaseModel):
    """Global marketplace statistics. Exactly one row, keyed by DEFAULT_COUNT_ID."""

    id: str = DEFAULT_COUNT_ID
    order_total: int = 0
    order_parcel: int = 0
    order_estate: int = 0
    order_wearable: int = 0
    order_ens: int = 0
    parcel_total: int = 0
    estate_total: int = 0
    wearable_total: int = 0
    ens_total: int = 0
    sales_total: int = 0
    sales_mana_total: int = 0  # wei
    creator_earnings_mana_total: int = 0
    dao_earnings_mana_total: int = 0
    started: int = 0


# Per-category counter field names
MINT_COUNTERS: dict[Category, str] = {
    Category.PARCEL: "parcel_total",
    Category.ESTATE: "estate_total",
    Category.WEARABLE: "wearable_total",
    Category.ENS: "ens_total",
}

ORDER_COUNTERS: dict[Category, str] = {
    Category.PARCEL: "order_parcel",
    Category.ESTATE: "order_estate",
    Category.WEARABLE: "order_wearable",
    Category.ENS: "order_ens",
}
