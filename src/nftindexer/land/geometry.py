"""Pure functions over parcel coordinates.

Genesis City spans -150..150 on both axes. Plaza and road parcels are supplied
as a `LandMap` since they change with each district survey.
"""

from pathlib import Path

from pydantic import BaseModel

from nftindexer.domain.models import Estate, Parcel

LAND_API_URL = "https://api.decentraland.org/v1"

MIN_COORDINATE = -150
MAX_COORDINATE = 150

# Sentinel for "no known plaza" and for estates, which have no single position
NO_DISTANCE = -1


class LandMap(BaseModel):
    """Special parcels of the city, as (x, y) pairs."""

    plazas: set[tuple[int, int]] = set()
    roads: set[tuple[int, int]] = set()


def load_land_map(path: str = "") -> LandMap:
    """LandMap from JSON: {"plazas": [[x, y], ...], "roads": [[x, y], ...]}. Empty path -> no special parcels."""
    if not path:
        return LandMap()
    return LandMap.model_validate_json(Path(path).read_bytes())


def is_in_bounds(x: int, y: int) -> bool:
    return MIN_COORDINATE <= x <= MAX_COORDINATE and MIN_COORDINATE <= y <= MAX_COORDINATE


def distance_to_plaza(parcel: Parcel, land_map: LandMap) -> int:
    """Chebyshev distance to the nearest plaza parcel."""
    if not land_map.plazas:
        return NO_DISTANCE
    return min(max(abs(parcel.x - px), abs(parcel.y - py)) for px, py in land_map.plazas)


def is_adjacent_to_road(parcel: Parcel, land_map: LandMap) -> bool:
    neighbours = {
        (parcel.x + 1, parcel.y),
        (parcel.x - 1, parcel.y),
        (parcel.x, parcel.y + 1),
        (parcel.x, parcel.y - 1),
    }
    return not neighbours.isdisjoint(land_map.roads)


def parcel_image(parcel: Parcel) -> str:
    return f"{LAND_API_URL}/parcels/{parcel.x}/{parcel.y}/map.png"


def estate_image(estate: Estate) -> str:
    return f"{LAND_API_URL}/estates/{estate.token_id}/map.png"


def parcel_text(parcel: Parcel, name: str = "") -> str:
    """Free-text search column: "x,y name", lowercased."""
    return f"{parcel.x},{parcel.y} {name}".strip().lower()
