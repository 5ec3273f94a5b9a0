"""Wearable resolution from `dcl://<collection>/<representation>/<issued>` token URIs."""

from pathlib import Path

from pydantic import BaseModel, TypeAdapter

from nftindexer.domain.enums import BodyShape, WearableCategory, WearableRarity
from nftindexer.domain.models import NFT, Wearable

TOKEN_URI_SCHEME = "dcl://"
WEARABLE_API_URL = "https://wearable-api.decentraland.org/v2"

HEAD_CATEGORIES = frozenset({
    WearableCategory.EYEBROWS,
    WearableCategory.EYES,
    WearableCategory.FACIAL_HAIR,
    WearableCategory.HAIR,
    WearableCategory.MOUTH,
})

ACCESSORY_CATEGORIES = frozenset({
    WearableCategory.EARRING,
    WearableCategory.EYEWEAR,
    WearableCategory.HAT,
    WearableCategory.HELMET,
    WearableCategory.MASK,
    WearableCategory.TIARA,
    WearableCategory.TOP_HEAD,
})


class WearableDefinition(BaseModel):
    """Static description of one wearable representation in a collection."""

    collection: str
    representation_id: str
    name: str
    description: str = ""
    category: WearableCategory
    rarity: WearableRarity
    body_shapes: list[BodyShape] = [BodyShape.BASE_MALE, BodyShape.BASE_FEMALE]


class WearableCatalog:
    """(collection, representation_id) -> WearableDefinition."""

    def __init__(self, definitions: list[WearableDefinition] | None = None) -> None:
        self._definitions: dict[tuple[str, str], WearableDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: WearableDefinition) -> None:
        self._definitions[(definition.collection, definition.representation_id)] = definition

    def get(self, collection: str, representation_id: str) -> WearableDefinition | None:
        return self._definitions.get((collection, representation_id))

    def __len__(self) -> int:
        return len(self._definitions)


def load_wearable_catalog(path: str = "") -> WearableCatalog:
    """Catalog from a JSON list of WearableDefinition objects. Empty path -> empty catalog."""
    if not path:
        return WearableCatalog()
    definitions = TypeAdapter(list[WearableDefinition]).validate_json(Path(path).read_bytes())
    return WearableCatalog(definitions)


def parse_wearable_uri(token_uri: str | None) -> tuple[str, str, int | None] | None:
    """Split a dcl:// token URI into (collection, representation_id, issued_id)."""
    if not token_uri or not token_uri.startswith(TOKEN_URI_SCHEME):
        return None
    parts = token_uri[len(TOKEN_URI_SCHEME):].strip("/").split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    issued_id: int | None = None
    if len(parts) > 2 and parts[2].isdigit():
        issued_id = int(parts[2])
    return parts[0], parts[1], issued_id


def build_wearable_from_nft(nft: NFT, catalog: WearableCatalog) -> Wearable:
    """Resolve the NFT's wearable. Returns a Wearable with an empty id when unresolvable."""
    parsed = parse_wearable_uri(nft.token_uri)
    if parsed is None:
        return Wearable()
    collection, representation_id, issued_id = parsed
    definition = catalog.get(collection, representation_id)
    if definition is None:
        return Wearable()
    return Wearable(
        id=nft.id,
        representation_id=representation_id,
        collection=collection,
        issued_id=issued_id,
        name=definition.name,
        description=definition.description,
        category=definition.category,
        rarity=definition.rarity,
        body_shapes=list(definition.body_shapes),
        owner_id=nft.owner_id,
    )


def wearable_image(wearable: Wearable) -> str:
    return f"{WEARABLE_API_URL}/collections/{wearable.collection}/wearables/{wearable.representation_id}/thumbnail"


def is_wearable_head(wearable: Wearable) -> bool:
    return wearable.category in HEAD_CATEGORIES


def is_wearable_accessory(wearable: Wearable) -> bool:
    return wearable.category in ACCESSORY_CATEGORIES
