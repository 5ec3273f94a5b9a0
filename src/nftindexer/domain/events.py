"""Decoded inputs and results of the transfer reconciler."""

from pydantic import BaseModel

from nftindexer.domain.models import NFT, Account


class TransferEvent(BaseModel):
    """ERC-721 Transfer(from, to, tokenId) as decoded from the log.

    `token_id` is kept as decoded; the reconciler rejects values that don't parse.
    """

    token_id: int | str
    from_address: str
    to_address: str


class TransferLog(BaseModel):
    """A transfer event plus where and when it was emitted."""

    contract_address: str
    timestamp: int  # block time, unix seconds
    event: TransferEvent
    block_number: int | None = None
    log_index: int = 0


class Coordinate(BaseModel):
    x: int
    y: int


class TransferOutcome(BaseModel):
    """What the driver stages after one transfer. Both None for a rejected event."""

    nft: NFT | None = None
    account: Account | None = None

    @property
    def applied(self) -> bool:
        return self.nft is not None
