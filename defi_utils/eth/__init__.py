"""EVM token, address and explorer helpers."""

from defi_utils.eth.address import (
    format_tx_hash,
    get_token_symbol,
    is_valid_address,
    truncate_address,
)
from defi_utils.eth.explorer import DEFAULT_NETWORK, EXPLORER_URLS, get_explorer_url
from defi_utils.eth.units import (
    UnitConversionError,
    calculate_slippage,
    format_token_amount,
    from_base_units,
    has_sufficient_balance,
    parse_token_amount,
    to_base_units,
)

__all__ = [
    "format_tx_hash",
    "get_token_symbol",
    "is_valid_address",
    "truncate_address",
    "DEFAULT_NETWORK",
    "EXPLORER_URLS",
    "get_explorer_url",
    "UnitConversionError",
    "calculate_slippage",
    "format_token_amount",
    "from_base_units",
    "has_sufficient_balance",
    "parse_token_amount",
    "to_base_units",
]
