"""Tests for TransferReconciler: mint vs transfer, token URIs, order invalidation."""

from nftindexer.domain.enums import AnomalyType, Category, Network, OrderStatus
from nftindexer.domain.events import Coordinate, TransferEvent
from nftindexer.domain.models import DEFAULT_COUNT_ID, NFT, Order
from nftindexer.reconcile.addresses import REGISTRY_ADDRESSES
from nftindexer.reconcile.ids import ZERO_ADDRESS, nft_id
from nftindexer.reconcile.lookups import BatchLookups
from nftindexer.reconcile.orders import add_nft_order_properties
from nftindexer.reconcile.reconciler import TransferReconciler
from nftindexer.reconcile.store import BatchStore

ADDRESSES = REGISTRY_ADDRESSES[Network.ETHEREUM]
LAND = ADDRESSES.land_registry
ESTATE = ADDRESSES.estate_registry
REGISTRAR = ADDRESSES.dcl_registrar
OTHER_CONTRACT = "0x3333333333333333333333333333333333333333"
ALICE = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
BOB = "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"


def _transfer(token_id: int | str, from_addr: str, to_addr: str) -> TransferEvent:
    return TransferEvent(token_id=token_id, from_address=from_addr, to_address=to_addr)


def _mint(
    reconciler: TransferReconciler,
    store: BatchStore,
    lookups: BatchLookups,
    token_id: int = 1,
    contract: str = OTHER_CONTRACT,
    category: Category = Category.OTHER,
    to_addr: str = ALICE,
    timestamp: int = 1000,
) -> NFT:
    outcome = reconciler.reconcile(_transfer(token_id, ZERO_ADDRESS, to_addr), contract, category, timestamp, store, lookups)
    assert outcome.nft is not None
    return outcome.nft


def _open_order(nft: NFT) -> Order:
    return Order(
        id="order-1",
        category=nft.category,
        nft_id=nft.id,
        token_id=nft.token_id,
        owner=nft.owner_id or "",
        price=10**18,
        status=OrderStatus.OPEN,
        created_at=1100,
        expires_at=99_999,
        updated_at=1100,
    )


class TestMalformedInput:
    def test_empty_token_id_is_noop(self):
        store = BatchStore()
        outcome = TransferReconciler(ADDRESSES).reconcile(
            _transfer("", ZERO_ADDRESS, ALICE), OTHER_CONTRACT, Category.OTHER, 1000, store, BatchLookups()
        )
        assert outcome.nft is None
        assert outcome.account is None
        assert outcome.applied is False
        assert len(store.nfts) == 0
        assert len(store.accounts) == 0
        assert len(store.counts) == 0
        assert store.anomalies == []

    def test_unparseable_token_id_is_noop(self):
        store = BatchStore()
        outcome = TransferReconciler(ADDRESSES).reconcile(
            _transfer("not-a-number", ALICE, BOB), OTHER_CONTRACT, Category.OTHER, 1000, store, BatchLookups()
        )
        assert outcome.applied is False
        assert len(store.nfts) == 0


class TestMint:
    def test_mint_defaults(self):
        store, lookups = BatchStore(), BatchLookups()
        nft = _mint(TransferReconciler(ADDRESSES), store, lookups, timestamp=1234)

        assert nft.created_at == 1234
        assert nft.updated_at == 1234
        assert nft.transferred_at == 1234
        assert nft.search_estate_size == 1
        assert nft.search_parcel_is_in_bounds is True
        assert nft.search_text == ""
        assert nft.search_is_land is False
        assert nft.owner_id == ALICE
        assert nft.category == Category.OTHER
        assert nft.contract_address == bytes.fromhex(OTHER_CONTRACT[2:])

    def test_id_is_derived(self):
        store, lookups = BatchStore(), BatchLookups()
        nft = _mint(TransferReconciler(ADDRESSES), store, lookups, token_id=77)
        assert nft.id == nft_id(Category.OTHER, OTHER_CONTRACT, 77)
        assert store.nfts.get(nft.id) is nft

    def test_contract_address_normalized(self):
        store, lookups = BatchStore(), BatchLookups()
        nft = _mint(TransferReconciler(ADDRESSES), store, lookups, contract="0xAbCdEf0000000000000000000000000000000001")
        assert nft.id == nft_id(Category.OTHER, "0xabcdef0000000000000000000000000000000001", 1)

    def test_owner_account_created_once(self):
        store, lookups = BatchStore(), BatchLookups()
        reconciler = TransferReconciler(ADDRESSES)
        _mint(reconciler, store, lookups, token_id=1)
        _mint(reconciler, store, lookups, token_id=2, to_addr=ALICE.upper().replace("0X", "0x"))
        assert len(store.accounts) == 1
        assert store.accounts.get(ALICE) is not None

    def test_mint_counts_only_matching_category(self):
        store, lookups = BatchStore(), BatchLookups()
        _mint(TransferReconciler(ADDRESSES), store, lookups, contract=REGISTRAR, category=Category.ENS)
        count = store.counts.get(DEFAULT_COUNT_ID)
        assert count is not None
        assert count.ens_total == 1
        assert count.parcel_total == 0
        assert count.estate_total == 0
        assert count.wearable_total == 0

    def test_other_category_creates_count_without_bucket(self):
        store, lookups = BatchStore(), BatchLookups()
        _mint(TransferReconciler(ADDRESSES), store, lookups)
        count = store.counts.get(DEFAULT_COUNT_ID)
        assert count.started == 1
        assert count.parcel_total + count.estate_total + count.wearable_total + count.ens_total == 0

    def test_parcel_mint_scenario(self):
        store = BatchStore()
        lookups = BatchLookups(coordinates={5: Coordinate(x=10, y=-5)})
        nft = _mint(TransferReconciler(ADDRESSES), store, lookups, token_id=5, contract=LAND, category=Category.PARCEL)

        parcel = store.parcels.get(nft.id)
        assert parcel is not None
        assert (parcel.x, parcel.y) == (10, -5)
        assert parcel.owner_id == ALICE
        assert nft.parcel_id == parcel.id
        assert nft.search_is_land is True
        assert nft.search_parcel_x == 10
        assert nft.search_parcel_y == -5
        assert nft.search_parcel_is_in_bounds is True
        assert nft.search_text == "10,-5"
        assert store.counts.get(DEFAULT_COUNT_ID).parcel_total == 1


class TestTokenURI:
    def test_filled_from_lookup(self):
        store = BatchStore()
        lookups = BatchLookups(token_uris={f"{OTHER_CONTRACT}-1": "ipfs://meta/1"})
        nft = _mint(TransferReconciler(ADDRESSES), store, lookups)
        assert nft.token_uri == "ipfs://meta/1"

    def test_existing_uri_kept(self):
        store = BatchStore()
        store.nfts.put(NFT(id=nft_id(Category.OTHER, OTHER_CONTRACT, 1), token_uri="ipfs://original"))
        lookups = BatchLookups(token_uris={f"{OTHER_CONTRACT}-1": "ipfs://other"})
        nft = _mint(TransferReconciler(ADDRESSES), store, lookups)
        assert nft.token_uri == "ipfs://original"

    def test_missing_lookup_leaves_none(self):
        nft = _mint(TransferReconciler(ADDRESSES), BatchStore(), BatchLookups())
        assert nft.token_uri is None

    def test_land_registry_is_none(self):
        lookups = BatchLookups(token_uris={f"{LAND}-1": "ignored"})
        nft = _mint(TransferReconciler(ADDRESSES), BatchStore(), lookups, contract=LAND, category=Category.PARCEL)
        assert nft.token_uri is None

    def test_estate_registry_is_empty_string(self):
        nft = _mint(TransferReconciler(ADDRESSES), BatchStore(), BatchLookups(), contract=ESTATE, category=Category.ESTATE)
        assert nft.token_uri == ""

    def test_registrar_is_empty_string(self):
        nft = _mint(TransferReconciler(ADDRESSES), BatchStore(), BatchLookups(), contract=REGISTRAR, category=Category.ENS)
        assert nft.token_uri == ""


class TestTransfer:
    def test_owner_and_timestamps(self):
        store, lookups = BatchStore(), BatchLookups()
        reconciler = TransferReconciler(ADDRESSES)
        _mint(reconciler, store, lookups, timestamp=1000)

        outcome = reconciler.reconcile(_transfer(1, ALICE, BOB), OTHER_CONTRACT, Category.OTHER, 2000, store, lookups)

        nft = outcome.nft
        assert nft.owner_id == BOB
        assert outcome.account.id == BOB
        assert nft.created_at == 1000
        assert nft.updated_at == 2000
        assert nft.transferred_at == 2000
        assert len(store.nfts) == 1
        assert store.anomalies == []

    def test_transfer_does_not_count(self):
        store, lookups = BatchStore(), BatchLookups()
        reconciler = TransferReconciler(ADDRESSES)
        _mint(reconciler, store, lookups, contract=REGISTRAR, category=Category.ENS)
        reconciler.reconcile(_transfer(1, ALICE, BOB), REGISTRAR, Category.ENS, 2000, store, lookups)
        assert store.counts.get(DEFAULT_COUNT_ID).ens_total == 1

    def test_sales_and_volume_reset(self):
        store, lookups = BatchStore(), BatchLookups()
        reconciler = TransferReconciler(ADDRESSES)
        nft = _mint(reconciler, store, lookups)
        nft.sales = 3
        nft.volume = 7 * 10**18
        nft.sold_at = 1500

        reconciler.reconcile(_transfer(1, ALICE, BOB), OTHER_CONTRACT, Category.OTHER, 2000, store, lookups)

        assert nft.sales == 0
        assert nft.volume == 0
        assert nft.sold_at is None

    def test_open_order_cancelled(self):
        store, lookups = BatchStore(), BatchLookups()
        reconciler = TransferReconciler(ADDRESSES)
        nft = _mint(reconciler, store, lookups)
        order = store.orders.put(_open_order(nft))
        add_nft_order_properties(nft, order)

        outcome = reconciler.reconcile(_transfer(1, ALICE, BOB), OTHER_CONTRACT, Category.OTHER, 2000, store, lookups)

        assert order.status == OrderStatus.CANCELLED
        assert order.updated_at == 2000
        assert outcome.nft.active_order_id is None
        assert outcome.nft.search_order_status is None
        assert outcome.nft.search_order_price is None
        assert outcome.nft.search_order_created_at is None
        assert outcome.nft.search_order_expires_at is None
        assert store.anomalies == []

    def test_sold_order_not_reopened(self):
        store, lookups = BatchStore(), BatchLookups()
        reconciler = TransferReconciler(ADDRESSES)
        nft = _mint(reconciler, store, lookups)
        order = _open_order(nft)
        add_nft_order_properties(nft, order)
        order.status = OrderStatus.SOLD
        store.orders.put(order)

        reconciler.reconcile(_transfer(1, ALICE, BOB), OTHER_CONTRACT, Category.OTHER, 2000, store, lookups)

        assert order.status == OrderStatus.SOLD
        assert order.updated_at == 1100
        assert nft.active_order_id is None
        assert nft.search_order_status is None

    def test_missing_order_reported(self):
        store, lookups = BatchStore(), BatchLookups()
        reconciler = TransferReconciler(ADDRESSES)
        nft = _mint(reconciler, store, lookups)
        add_nft_order_properties(nft, _open_order(nft))  # never staged

        outcome = reconciler.reconcile(_transfer(1, ALICE, BOB), OTHER_CONTRACT, Category.OTHER, 2000, store, lookups)

        assert [a.anomaly_type for a in store.anomalies] == [AnomalyType.ORDER_NOT_FOUND]
        assert outcome.nft.owner_id == BOB
        assert outcome.nft.active_order_id is None
        assert outcome.nft.search_order_price is None

    def test_no_prior_nft_reported(self):
        store, lookups = BatchStore(), BatchLookups()
        outcome = TransferReconciler(ADDRESSES).reconcile(
            _transfer(9, ALICE, BOB), OTHER_CONTRACT, Category.OTHER, 2000, store, lookups
        )

        assert outcome.nft is not None
        assert outcome.nft.owner_id == BOB
        assert outcome.nft.created_at is None
        assert store.nfts.get(outcome.nft.id) is outcome.nft
        assert [a.anomaly_type for a in store.anomalies] == [AnomalyType.NFT_NOT_FOUND]
        assert store.anomalies[0].entity_id == outcome.nft.id
        assert len(store.counts) == 0
