"""Address and transaction hash helpers."""

from typing import Any, Mapping, Optional

from web3 import Web3

from defi_utils.log import get_logger

logger = get_logger(__name__)

UNKNOWN_TOKEN_SYMBOL = "TOKEN"


def is_valid_address(address: Any) -> bool:
    """Check whether a value is a valid Ethereum address.

    Only hex strings count. Mixed-case addresses must carry a valid EIP-55
    checksum; all-lowercase and all-uppercase ones are accepted as is.

    Args:
        address: Value to check

    Returns:
        True if valid, False otherwise (never raises)
    """
    if not isinstance(address, str):
        return False

    try:
        if not Web3.is_address(address):
            return False
        hex_body = address[2:] if address[:2].lower() == "0x" else address
        if hex_body.lower() != hex_body and hex_body.upper() != hex_body:
            return Web3.is_checksum_address(address)
        return True
    except (TypeError, ValueError) as e:
        logger.debug(f"Address validation failed for {address!r}: {e}")
        return False


def truncate_address(address: Optional[str], start_chars: int = 6, end_chars: int = 4) -> str:
    """Shorten an address for display, e.g. "0x1234...abcd".

    Args:
        address: Address to shorten
        start_chars: Characters kept at the start
        end_chars: Characters kept at the end

    Returns:
        Shortened address, the address itself if already short, or "".
        With end_chars=0 nothing is kept after the ellipsis.
    """
    if not address:
        return ""
    if len(address) <= start_chars + end_chars:
        return address

    return f"{address[:start_chars]}...{address[len(address) - end_chars:]}"


def format_tx_hash(tx_hash: Optional[str]) -> str:
    """Shorten a transaction hash to its first 10 and last 8 characters."""
    if not tx_hash:
        return ""
    return f"{tx_hash[:10]}...{tx_hash[-8:]}"


def get_token_symbol(address: str, popular_tokens: Optional[Mapping[str, Mapping[str, Any]]] = None) -> str:
    """Look up a token symbol by address.

    Args:
        address: Token contract address (any case)
        popular_tokens: Registry of token records with "address" and "symbol"

    Returns:
        Matching symbol, or "TOKEN" if the address is not registered
    """
    if not popular_tokens or not address:
        return UNKNOWN_TOKEN_SYMBOL

    wanted = address.lower()
    for token in popular_tokens.values():
        token_address = token.get("address")
        if token_address and token_address.lower() == wanted:
            return token["symbol"]

    return UNKNOWN_TOKEN_SYMBOL
