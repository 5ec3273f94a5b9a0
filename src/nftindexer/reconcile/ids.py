"""Identity and mint helpers shared by the reconciler and the order handlers."""

from nftindexer.domain.enums import Category

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def nft_id(category: Category | str, contract_address: str, token_id: int | str) -> str:
    """Deterministic NFT id: `<category>-<contract>-<tokenId>`."""
    category_value = category.value if isinstance(category, Category) else category
    return f"{category_value}-{contract_address}-{token_id}"


def is_mint(from_address: str, zero_address: str = ZERO_ADDRESS) -> bool:
    return from_address.lower() == zero_address.lower()


def parse_token_id(raw: int | str | None) -> int | None:
    """Return the token id as an int, or None if it can't be used as one."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    text = raw.strip()
    if not text:
        return None
    try:
        value = int(text, 16) if text.lower().startswith("0x") else int(text)
    except ValueError:
        return None
    return value if value >= 0 else None


def address_bytes(address: str) -> bytes:
    """Hex address -> raw bytes, as stored in NFT.contract_address."""
    return bytes.fromhex(address[2:] if address.lower().startswith("0x") else address)
