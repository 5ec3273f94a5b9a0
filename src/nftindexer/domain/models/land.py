from pydantic import BaseModel


class Parcel(BaseModel):
    """A LAND parcel. `id` is the owning NFT id."""

    id: str
    token_id: int
    x: int
    y: int
    owner_id: str | None = None
    estate_id: str | None = None


class Estate(BaseModel):
    """A group of parcels. Minted empty; parcels are added by estate events."""

    id: str
    token_id: int
    owner_id: str | None = None
    size: int = 0
    parcel_distances: list[int] = []
    adjacent_to_road_count: int = 0
