from enum import Enum


class Category(str, Enum):
    """NFT category. Values match the indexed `category` column."""

    PARCEL = "parcel"
    ESTATE = "estate"
    WEARABLE = "wearable"
    ENS = "ens"
    OTHER = "other"
