"""initial entity tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# uint256 columns are stored as decimal text
UINT256 = sa.String(78)


def upgrade() -> None:
    op.create_table(
        "nfts",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("token_id", UINT256, nullable=False),
        sa.Column("owner_id", sa.String(42), nullable=True),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("contract_address", sa.LargeBinary(20), nullable=False),
        sa.Column("token_uri", sa.Text(), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("created_at", sa.BigInteger(), nullable=True),
        sa.Column("updated_at", sa.BigInteger(), nullable=True),
        sa.Column("transferred_at", sa.BigInteger(), nullable=True),
        sa.Column("sold_at", sa.BigInteger(), nullable=True),
        sa.Column("sales", sa.Integer(), nullable=False),
        sa.Column("volume", UINT256, nullable=False),
        sa.Column("active_order_id", sa.String(255), nullable=True),
        sa.Column("parcel_id", sa.String(255), nullable=True),
        sa.Column("estate_id", sa.String(255), nullable=True),
        sa.Column("wearable_id", sa.String(255), nullable=True),
        sa.Column("ens_id", sa.String(255), nullable=True),
        sa.Column("search_order_status", sa.String(20), nullable=True),
        sa.Column("search_order_price", UINT256, nullable=True),
        sa.Column("search_order_created_at", sa.BigInteger(), nullable=True),
        sa.Column("search_order_expires_at", sa.BigInteger(), nullable=True),
        sa.Column("search_is_land", sa.Boolean(), nullable=False),
        sa.Column("search_text", sa.Text(), nullable=True),
        sa.Column("search_parcel_is_in_bounds", sa.Boolean(), nullable=True),
        sa.Column("search_parcel_x", sa.Integer(), nullable=True),
        sa.Column("search_parcel_y", sa.Integer(), nullable=True),
        sa.Column("search_distance_to_plaza", sa.Integer(), nullable=True),
        sa.Column("search_adjacent_to_road", sa.Boolean(), nullable=True),
        sa.Column("search_estate_size", sa.Integer(), nullable=True),
        sa.Column("search_is_wearable_head", sa.Boolean(), nullable=True),
        sa.Column("search_is_wearable_accessory", sa.Boolean(), nullable=True),
        sa.Column("search_wearable_category", sa.String(20), nullable=True),
        sa.Column("search_wearable_body_shapes", sa.JSON(), nullable=True),
        sa.Column("search_wearable_rarity", sa.String(20), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_nfts")),
    )
    op.create_index(op.f("ix_nfts_owner_id"), "nfts", ["owner_id"])
    op.create_index(op.f("ix_nfts_category"), "nfts", ["category"])
    op.create_index(op.f("ix_nfts_search_order_status"), "nfts", ["search_order_status"])

    op.create_table(
        "orders",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("nft_id", sa.String(255), nullable=True),
        sa.Column("nft_address", sa.String(42), nullable=False),
        sa.Column("token_id", UINT256, nullable=False),
        sa.Column("owner", sa.String(42), nullable=False),
        sa.Column("buyer", sa.String(42), nullable=True),
        sa.Column("price", UINT256, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("expires_at", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
        sa.Column("tx_hash", sa.String(66), nullable=True),
        sa.Column("block_number", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_orders")),
    )
    op.create_index(op.f("ix_orders_nft_id"), "orders", ["nft_id"])
    op.create_index(op.f("ix_orders_status"), "orders", ["status"])

    op.create_table(
        "accounts",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("address", sa.String(42), nullable=False),
        sa.Column("sales", sa.Integer(), nullable=False),
        sa.Column("purchases", sa.Integer(), nullable=False),
        sa.Column("spent", UINT256, nullable=False),
        sa.Column("earned", UINT256, nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_accounts")),
    )
    op.create_index(op.f("ix_accounts_address"), "accounts", ["address"])

    op.create_table(
        "parcels",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("token_id", UINT256, nullable=False),
        sa.Column("x", sa.Integer(), nullable=False),
        sa.Column("y", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.String(42), nullable=True),
        sa.Column("estate_id", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_parcels")),
    )

    op.create_table(
        "estates",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("token_id", UINT256, nullable=False),
        sa.Column("owner_id", sa.String(42), nullable=True),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("parcel_distances", sa.JSON(), nullable=False),
        sa.Column("adjacent_to_road_count", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_estates")),
    )

    op.create_table(
        "wearables",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("representation_id", sa.String(255), nullable=False),
        sa.Column("collection", sa.String(255), nullable=False),
        sa.Column("issued_id", UINT256, nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(20), nullable=True),
        sa.Column("rarity", sa.String(20), nullable=True),
        sa.Column("body_shapes", sa.JSON(), nullable=False),
        sa.Column("owner_id", sa.String(42), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_wearables")),
    )

    op.create_table(
        "ens",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("token_id", UINT256, nullable=False),
        sa.Column("owner_id", sa.String(42), nullable=True),
        sa.Column("caller", sa.String(42), nullable=True),
        sa.Column("subdomain", sa.String(255), nullable=True),
        sa.Column("created_at", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_ens")),
    )

    op.create_table(
        "counts",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("order_total", sa.Integer(), nullable=False),
        sa.Column("order_parcel", sa.Integer(), nullable=False),
        sa.Column("order_estate", sa.Integer(), nullable=False),
        sa.Column("order_wearable", sa.Integer(), nullable=False),
        sa.Column("order_ens", sa.Integer(), nullable=False),
        sa.Column("parcel_total", sa.Integer(), nullable=False),
        sa.Column("estate_total", sa.Integer(), nullable=False),
        sa.Column("wearable_total", sa.Integer(), nullable=False),
        sa.Column("ens_total", sa.Integer(), nullable=False),
        sa.Column("sales_total", sa.Integer(), nullable=False),
        sa.Column("sales_mana_total", UINT256, nullable=False),
        sa.Column("creator_earnings_mana_total", UINT256, nullable=False),
        sa.Column("dao_earnings_mana_total", UINT256, nullable=False),
        sa.Column("started", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_counts")),
    )

    op.create_table(
        "anomaly_records",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("anomaly_type", sa.String(50), nullable=False),
        sa.Column("entity_id", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("block_number", sa.BigInteger(), nullable=True),
        sa.Column("resolved", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_anomaly_records")),
    )
    op.create_index(op.f("ix_anomaly_records_anomaly_type"), "anomaly_records", ["anomaly_type"])
    op.create_index(op.f("ix_anomaly_records_entity_id"), "anomaly_records", ["entity_id"])


def downgrade() -> None:
    op.drop_index(op.f("ix_anomaly_records_entity_id"), table_name="anomaly_records")
    op.drop_index(op.f("ix_anomaly_records_anomaly_type"), table_name="anomaly_records")
    op.drop_table("anomaly_records")
    op.drop_table("counts")
    op.drop_table("ens")
    op.drop_table("wearables")
    op.drop_table("estates")
    op.drop_table("parcels")
    op.drop_index(op.f("ix_accounts_address"), table_name="accounts")
    op.drop_table("accounts")
    op.drop_index(op.f("ix_orders_status"), table_name="orders")
    op.drop_index(op.f("ix_orders_nft_id"), table_name="orders")
    op.drop_table("orders")
    op.drop_index(op.f("ix_nfts_search_order_status"), table_name="nfts")
    op.drop_index(op.f("ix_nfts_category"), table_name="nfts")
    op.drop_index(op.f("ix_nfts_owner_id"), table_name="nfts")
    op.drop_table("nfts")
