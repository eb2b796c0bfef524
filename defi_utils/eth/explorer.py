"""Block explorer links."""

from typing import Dict, Mapping, Optional

DEFAULT_NETWORK = "polygon"

# Transaction URL prefix per network
EXPLORER_URLS: Dict[str, str] = {
    "polygon": "https://polygonscan.com/tx/",
    "ethereum": "https://etherscan.io/tx/",
    "bsc": "https://bscscan.com/tx/",
}


def get_explorer_url(
    tx_hash: str,
    network: str = DEFAULT_NETWORK,
    explorers: Optional[Mapping[str, str]] = None,
) -> str:
    """Build the explorer URL for a transaction.

    Unknown networks fall back to Polygon.

    Args:
        tx_hash: Transaction hash, appended as-is
        network: Network key ("polygon", "ethereum", "bsc")
        explorers: Extra network entries, checked before the built-in table

    Returns:
        Explorer URL
    """
    base_url = None
    if explorers:
        base_url = explorers.get(network)
    if not base_url:
        base_url = EXPLORER_URLS.get(network) or EXPLORER_URLS[DEFAULT_NETWORK]
    return f"{base_url}{tx_hash}"
