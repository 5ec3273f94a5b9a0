"""Order lifecycle and the NFT's denormalized order columns.

open -> sold | cancelled; both are terminal. The search_order_* columns on an
NFT are set or cleared only through the functions below, all together.
"""

from nftindexer.domain.enums import OrderStatus
from nftindexer.domain.models import NFT, Order

TERMINAL_STATUSES = frozenset({OrderStatus.SOLD, OrderStatus.CANCELLED})


def update_nft_order_properties(nft: NFT, order: Order) -> None:
    if order.status == OrderStatus.OPEN:
        add_nft_order_properties(nft, order)
    elif order.status in TERMINAL_STATUSES:
        clear_nft_order_properties(nft)


def add_nft_order_properties(nft: NFT, order: Order) -> None:
    nft.active_order_id = order.id
    nft.search_order_status = order.status
    nft.search_order_price = order.price
    nft.search_order_created_at = order.created_at
    nft.search_order_expires_at = order.expires_at


def clear_nft_order_properties(nft: NFT) -> None:
    nft.active_order_id = None
    nft.search_order_status = None
    nft.search_order_price = None
    nft.search_order_created_at = None
    nft.search_order_expires_at = None


def cancel_active_order(order: Order, now: int) -> Order:
    """Cancel an open order. Sold/cancelled orders are returned untouched.

    The marketplace contract lets a new listing overwrite an old one in place,
    so a transfer must retire whatever listing the previous owner left open.
    """
    if order.status == OrderStatus.OPEN:
        order.status = OrderStatus.CANCELLED
        order.updated_at = now
    return order


def settle_order(order: Order, buyer: str, now: int) -> bool:
    """Mark an open order sold. Returns False (and changes nothing) otherwise."""
    if order.status != OrderStatus.OPEN:
        return False
    order.status = OrderStatus.SOLD
    order.buyer = buyer
    order.updated_at = now
    return True
