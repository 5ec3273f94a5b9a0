from pydantic import BaseModel

from nftindexer.domain.enums import Category, OrderStatus


class Order(BaseModel):
    """Marketplace listing. Created by the order handlers; the reconciler only cancels."""

    id: str
    category: Category
    nft_id: str | None = None
    nft_address: str = ""
    token_id: int = 0
    owner: str = ""
    buyer: str | None = None
    price: int = 0  # wei
    status: OrderStatus = OrderStatus.OPEN
    expires_at: int = 0
    created_at: int = 0
    updated_at: int = 0
    tx_hash: str | None = None
    block_number: int | None = None
