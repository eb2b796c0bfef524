"""Display and convenience helpers for DeFi front ends."""

from defi_utils.eth import (
    DEFAULT_NETWORK,
    EXPLORER_URLS,
    UnitConversionError,
    calculate_slippage,
    format_token_amount,
    format_tx_hash,
    from_base_units,
    get_explorer_url,
    get_token_symbol,
    has_sufficient_balance,
    is_valid_address,
    parse_token_amount,
    to_base_units,
    truncate_address,
)
from defi_utils.formatting import (
    calculate_percentage_change,
    format_large_number,
    format_price,
    get_relative_time,
    to_fixed,
)
from defi_utils.timing import debounce, delay, retry_with_backoff

__all__ = [
    "DEFAULT_NETWORK",
    "EXPLORER_URLS",
    "UnitConversionError",
    "calculate_slippage",
    "format_token_amount",
    "format_tx_hash",
    "from_base_units",
    "get_explorer_url",
    "get_token_symbol",
    "has_sufficient_balance",
    "is_valid_address",
    "parse_token_amount",
    "to_base_units",
    "truncate_address",
    "calculate_percentage_change",
    "format_large_number",
    "format_price",
    "get_relative_time",
    "to_fixed",
    "debounce",
    "delay",
    "retry_with_backoff",
]
