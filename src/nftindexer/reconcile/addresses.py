"""Registry contracts per network.

LAND, Estate and the DCL name registrar don't implement `tokenURI`, so the
reconciler special-cases them.
"""

from pydantic import BaseModel, field_validator

from nftindexer.config import Settings
from nftindexer.domain.enums import Network


class RegistryAddresses(BaseModel):
    land_registry: str
    estate_registry: str
    dcl_registrar: str

    @field_validator("land_registry", "estate_registry", "dcl_registrar")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.lower()

    def without_token_uri(self) -> set[str]:
        return {self.land_registry, self.estate_registry, self.dcl_registrar}


# Testnets are configured through settings overrides
REGISTRY_ADDRESSES: dict[Network, RegistryAddresses] = {
    Network.ETHEREUM: RegistryAddresses(
        land_registry="0xf87e31492faf9a91b02ee0deaad50d51d56d5d4d",
        estate_registry="0x959e104e1a4db6317fa58f8295f586e1a978c297",
        dcl_registrar="0x2a187453064356c898cae034eaed119e1663acb8",
    ),
}


def get_addresses(settings: Settings) -> RegistryAddresses:
    """Built-in table for `settings.network`, with any non-empty overrides applied."""
    base = REGISTRY_ADDRESSES.get(Network(settings.network))
    overrides = {
        "land_registry": settings.land_registry_address,
        "estate_registry": settings.estate_registry_address,
        "dcl_registrar": settings.dcl_registrar_address,
    }
    resolved: dict[str, str] = {}
    for field, override in overrides.items():
        value = override or (getattr(base, field) if base is not None else "")
        if not value:
            raise ValueError(f"No {field} address configured for network {settings.network}")
        resolved[field] = value
    return RegistryAddresses(**resolved)
