from nftindexer.domain.models import ENS, NFT


def build_ens_from_nft(nft: NFT, subdomain: str | None = None) -> ENS:
    """ENS record for a freshly minted name. `caller` is filled by the registrar's NameRegistered event."""
    return ENS(
        id=nft.id,
        token_id=nft.token_id,
        owner_id=nft.owner_id,
        subdomain=subdomain,
        created_at=nft.created_at,
    )
