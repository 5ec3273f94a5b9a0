import pytest

from nftindexer.domain.events import Coordinate
from nftindexer.domain.models import NFT
from nftindexer.land.builders import build_estate_from_nft, build_parcel_from_nft
from nftindexer.land.geometry import (
    NO_DISTANCE,
    LandMap,
    distance_to_plaza,
    estate_image,
    is_adjacent_to_road,
    is_in_bounds,
    load_land_map,
    parcel_image,
    parcel_text,
)


def _parcel(x: int, y: int):
    nft = NFT(id=f"parcel-0xland-{x}{y}", token_id=1, owner_id="0xaaaa")
    return build_parcel_from_nft(nft, Coordinate(x=x, y=y))


class TestBounds:
    @pytest.mark.parametrize("x,y", [(0, 0), (-150, 150), (150, -150)])
    def test_inside(self, x, y):
        assert is_in_bounds(x, y) is True

    @pytest.mark.parametrize("x,y", [(151, 0), (0, -151), (-200, 200)])
    def test_outside(self, x, y):
        assert is_in_bounds(x, y) is False


class TestDistanceToPlaza:
    def test_no_plazas(self):
        assert distance_to_plaza(_parcel(3, 3), LandMap()) == NO_DISTANCE

    def test_nearest_plaza_wins(self):
        land_map = LandMap(plazas={(0, 0), (10, 10)})
        assert distance_to_plaza(_parcel(8, 7), land_map) == 3

    def test_diagonal_counts_as_one_step(self):
        assert distance_to_plaza(_parcel(2, 2), LandMap(plazas={(0, 0)})) == 2

    def test_on_plaza(self):
        assert distance_to_plaza(_parcel(0, 0), LandMap(plazas={(0, 0)})) == 0


class TestRoads:
    def test_orthogonal_neighbour(self):
        assert is_adjacent_to_road(_parcel(5, 5), LandMap(roads={(5, 6)})) is True

    def test_diagonal_is_not_adjacent(self):
        assert is_adjacent_to_road(_parcel(5, 5), LandMap(roads={(6, 6)})) is False

    def test_no_roads(self):
        assert is_adjacent_to_road(_parcel(5, 5), LandMap()) is False


class TestRendering:
    def test_parcel_image(self):
        assert parcel_image(_parcel(-3, 4)) == "https://api.decentraland.org/v1/parcels/-3/4/map.png"

    def test_estate_image(self):
        estate = build_estate_from_nft(NFT(id="estate-0xestate-12", token_id=12))
        assert estate_image(estate) == "https://api.decentraland.org/v1/estates/12/map.png"

    def test_parcel_text(self):
        assert parcel_text(_parcel(-3, 4)) == "-3,4"
        assert parcel_text(_parcel(-3, 4), "Genesis Plaza") == "-3,4 genesis plaza"


class TestBuilders:
    def test_parcel_copies_identity(self):
        nft = NFT(id="parcel-0xland-9", token_id=9, owner_id="0xaaaa")
        parcel = build_parcel_from_nft(nft, Coordinate(x=1, y=2))
        assert (parcel.id, parcel.token_id, parcel.owner_id) == (nft.id, 9, "0xaaaa")
        assert parcel.estate_id is None

    def test_estate_starts_empty(self):
        estate = build_estate_from_nft(NFT(id="estate-0xestate-1", token_id=1, owner_id="0xaaaa"))
        assert estate.size == 0
        assert estate.parcel_distances == []
        assert estate.adjacent_to_road_count == 0


class TestLoadLandMap:
    def test_from_json_file(self, tmp_path):
        path = tmp_path / "land.json"
        path.write_text('{"plazas": [[0, 0], [-5, 5]], "roads": [[1, 0]]}')

        land_map = load_land_map(str(path))

        assert land_map.plazas == {(0, 0), (-5, 5)}
        assert land_map.roads == {(1, 0)}

    def test_empty_path(self):
        assert load_land_map("") == LandMap()
