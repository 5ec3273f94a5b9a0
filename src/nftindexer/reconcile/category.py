"""CategoryResolver: contract address -> Category lookup."""

from nftindexer.domain.enums import Category
from nftindexer.reconcile.addresses import RegistryAddresses


class CategoryResolver:
    """Registry of known NFT contracts. Unknown contracts resolve to OTHER."""

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}

    def register(self, address: str, category: Category) -> None:
        self._categories[address.lower()] = category

    def register_collections(self, addresses: list[str], category: Category) -> None:
        for address in addresses:
            self.register(address, category)

    def resolve(self, address: str) -> Category:
        return self._categories.get(address.lower(), Category.OTHER)


def build_default_resolver(
    addresses: RegistryAddresses,
    wearable_collections: list[str] | None = None,
) -> CategoryResolver:
    resolver = CategoryResolver()
    resolver.register(addresses.land_registry, Category.PARCEL)
    resolver.register(addresses.estate_registry, Category.ESTATE)
    resolver.register(addresses.dcl_registrar, Category.ENS)
    resolver.register_collections(wearable_collections or [], Category.WEARABLE)
    return resolver
