from pydantic import BaseModel

from nftindexer.domain.enums import BodyShape, WearableCategory, WearableRarity


class Wearable(BaseModel):
    """Avatar wearable issued from a collection. An empty `id` means "not resolved"."""

    id: str = ""
    representation_id: str = ""
    collection: str = ""
    issued_id: int | None = None
    name: str = ""
    description: str = ""
    category: WearableCategory | None = None
    rarity: WearableRarity | None = None
    body_shapes: list[BodyShape] = []
    owner_id: str | None = None


class ENS(BaseModel):
    """A DCL name registration (subdomain of dcl.eth)."""

    id: str
    token_id: int
    owner_id: str | None = None
    caller: str | None = None
    subdomain: str | None = None
    created_at: int | None = None
