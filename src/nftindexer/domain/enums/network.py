from enum import Enum


class Network(str, Enum):
    """Chains the registry contract table knows about."""

    ETHEREUM = "ethereum"
    SEPOLIA = "sepolia"
