"""TransferReconciler: applies one ERC-721 Transfer to the staged entities of a batch."""

import logging

from nftindexer.domain.enums import AnomalyType, Category
from nftindexer.domain.events import TransferEvent, TransferOutcome
from nftindexer.domain.models import NFT
from nftindexer.reconcile.addresses import RegistryAddresses
from nftindexer.reconcile.counts import increment_on_mint
from nftindexer.reconcile.ids import ZERO_ADDRESS, address_bytes, is_mint, nft_id, parse_token_id
from nftindexer.reconcile.lookups import BatchLookups
from nftindexer.reconcile.orders import cancel_active_order, clear_nft_order_properties, update_nft_order_properties
from nftindexer.reconcile.specializers import SpecializerRegistry, build_default_registry
from nftindexer.reconcile.store import BatchStore

logger = logging.getLogger(__name__)


class TransferReconciler:
    """Transfer -> NFT + Account, with order invalidation, category sub-entities and mint counts.

    Stateless between calls: everything it reads or writes lives in the
    BatchStore passed to `reconcile`.
    """

    def __init__(
        self,
        addresses: RegistryAddresses,
        specializers: SpecializerRegistry | None = None,
        zero_address: str = ZERO_ADDRESS,
    ) -> None:
        self._addresses = addresses
        self._specializers = specializers or build_default_registry()
        self._zero_address = zero_address

    def reconcile(
        self,
        event: TransferEvent,
        contract_address: str,
        category: Category,
        timestamp: int,
        store: BatchStore,
        lookups: BatchLookups,
    ) -> TransferOutcome:
        token_id = parse_token_id(event.token_id)
        if token_id is None:
            logger.debug("Skipping transfer with unusable token id %r on %s", event.token_id, contract_address)
            return TransferOutcome()

        contract = contract_address.lower()
        category = Category(category)
        key = nft_id(category, contract, token_id)

        prior = store.nfts.get(key)
        nft = prior if prior is not None else store.nfts.put(NFT(id=key))

        to_address = event.to_address.lower()
        account = store.get_or_create_account(to_address)

        self._stamp(nft, token_id, to_address, contract, category, timestamp)
        self._apply_token_uri(nft, contract, token_id, lookups)

        specializer = self._specializers.get(category)
        if is_mint(event.from_address, self._zero_address):
            self._apply_mint_defaults(nft, timestamp)
            increment_on_mint(nft, store)
            specializer.on_mint(nft, store, lookups)
        else:
            self._invalidate_active_order(prior, nft, timestamp, store)
            specializer.on_transfer(nft, store)

        store.get_or_create_account(to_address)
        return TransferOutcome(nft=nft, account=account)

    @staticmethod
    def _stamp(nft: NFT, token_id: int, owner: str, contract: str, category: Category, timestamp: int) -> None:
        nft.token_id = token_id
        nft.owner_id = owner
        nft.contract_address = address_bytes(contract)
        nft.category = category
        nft.updated_at = timestamp
        nft.transferred_at = timestamp
        nft.sold_at = None
        # Per-NFT sale stats describe the current holding only
        nft.sales = 0
        nft.volume = 0

    def _apply_token_uri(self, nft: NFT, contract: str, token_id: int, lookups: BatchLookups) -> None:
        if contract not in self._addresses.without_token_uri():
            if not nft.token_uri:
                nft.token_uri = lookups.token_uri(contract, token_id)
        elif contract == self._addresses.land_registry:
            nft.token_uri = None
        else:
            nft.token_uri = ""

    @staticmethod
    def _apply_mint_defaults(nft: NFT, timestamp: int) -> None:
        nft.created_at = timestamp
        # Defaults let range/existence filters (estate size > 0, in bounds) match every category
        nft.search_estate_size = 1
        nft.search_parcel_is_in_bounds = True
        nft.search_text = ""
        nft.search_is_land = False

    @staticmethod
    def _invalidate_active_order(prior: NFT | None, nft: NFT, timestamp: int, store: BatchStore) -> None:
        if prior is None:
            store.report(AnomalyType.NFT_NOT_FOUND, nft.id, "NFT not found for non-mint transfer")
            return
        if prior.active_order_id is None:
            return

        order = store.orders.get(prior.active_order_id)
        if order is None:
            store.report(AnomalyType.ORDER_NOT_FOUND, nft.id, f"Order not found {prior.active_order_id}")
            clear_nft_order_properties(nft)
            return

        cancel_active_order(order, timestamp)
        update_nft_order_properties(nft, order)
