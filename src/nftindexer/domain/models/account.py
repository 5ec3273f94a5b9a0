from pydantic import BaseModel


class Account(BaseModel):
    """Owner or counterparty. `id` is the lowercase address."""

    id: str
    address: str
    sales: int = 0
    purchases: int = 0
    spent: int = 0
    earned: int = 0

    @classmethod
    def for_address(cls, address: str) -> "Account":
        return cls(id=address, address=address)
