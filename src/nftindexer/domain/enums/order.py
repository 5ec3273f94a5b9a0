from enum import Enum


class OrderStatus(str, Enum):
    """Marketplace order status. SOLD and CANCELLED are terminal."""

    OPEN = "open"
    SOLD = "sold"
    CANCELLED = "cancelled"
