from nftindexer.domain.events import Coordinate
from nftindexer.domain.models import NFT, Estate, Parcel


def build_parcel_from_nft(nft: NFT, coordinate: Coordinate) -> Parcel:
    return Parcel(
        id=nft.id,
        token_id=nft.token_id,
        x=coordinate.x,
        y=coordinate.y,
        owner_id=nft.owner_id,
    )


def build_estate_from_nft(nft: NFT) -> Estate:
    """Estates are minted empty; AddLand events grow them later."""
    return Estate(id=nft.id, token_id=nft.token_id, owner_id=nft.owner_id, size=0)
