"""Command line access to the formatting helpers."""

import argparse
import sys
from typing import List, Optional

from defi_utils.config import Config
from defi_utils.eth.address import format_tx_hash, is_valid_address, truncate_address
from defi_utils.eth.explorer import get_explorer_url
from defi_utils.eth.units import (
    calculate_slippage,
    format_token_amount,
    has_sufficient_balance,
    parse_token_amount,
)
from defi_utils.formatting import format_large_number, format_price
from defi_utils.log import get_logger, setup_logging

logger = get_logger(__name__)


def create_parser(config: Config) -> argparse.ArgumentParser:
    """Create the argument parser.

    Args:
        config: Configuration supplying option defaults

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="DeFi amount, address and explorer formatting helpers",
        prog="python -m defi_utils",
    )
    parser.add_argument("--log-level", type=str, help="Override LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # amount
    amount_parser = subparsers.add_parser("amount", help="Format a base-unit amount for display")
    amount_parser.add_argument("amount", help="Amount in base units")
    amount_parser.add_argument("--decimals", "-d", type=int, default=config.default_decimals, help="Token decimals")
    amount_parser.add_argument(
        "--display-decimals", type=int, default=config.display_decimals, help="Decimal places to show"
    )

    # parse
    parse_parser = subparsers.add_parser("parse", help="Convert a human amount to base units")
    parse_parser.add_argument("amount", help="Amount such as 1.5")
    parse_parser.add_argument("--decimals", "-d", type=int, default=config.default_decimals, help="Token decimals")

    # price
    price_parser = subparsers.add_parser("price", help="Format a price")
    price_parser.add_argument("price", type=float, help="Price value")
    price_parser.add_argument("--decimals", "-d", type=int, default=6, help="Decimal places below 1K")

    # number
    number_parser = subparsers.add_parser("number", help="Format a large number with a K/M/B/T suffix")
    number_parser.add_argument("number", type=float, help="Number to format")

    # address
    address_parser = subparsers.add_parser("address", help="Truncate and validate an address")
    address_parser.add_argument("address", help="Address to check")
    address_parser.add_argument("--start", type=int, default=6, help="Characters kept at the start")
    address_parser.add_argument("--end", type=int, default=4, help="Characters kept at the end")

    # tx
    tx_parser = subparsers.add_parser("tx", help="Shorten a transaction hash")
    tx_parser.add_argument("hash", help="Transaction hash")

    # explorer
    explorer_parser = subparsers.add_parser("explorer", help="Build a block explorer link")
    explorer_parser.add_argument("hash", help="Transaction hash")
    explorer_parser.add_argument("--network", "-n", type=str, default=config.default_network, help="Network key")

    # slippage
    slippage_parser = subparsers.add_parser("slippage", help="Minimum amount after slippage, in base units")
    slippage_parser.add_argument("amount", help="Amount such as 10.5")
    slippage_parser.add_argument("percent", type=float, help="Slippage in percent")
    slippage_parser.add_argument("--decimals", "-d", type=int, default=config.default_decimals, help="Token decimals")

    # balance
    balance_parser = subparsers.add_parser("balance", help="Check that a balance covers an amount")
    balance_parser.add_argument("amount", help="Amount needed")
    balance_parser.add_argument("balance", help="Available balance")
    balance_parser.add_argument("--decimals", "-d", type=int, default=config.default_decimals, help="Token decimals")

    return parser


def run_command(args: argparse.Namespace, config: Config) -> str:
    """Execute a parsed command.

    Args:
        args: Parsed arguments with a command set
        config: Configuration object

    Returns:
        Output line for the command
    """
    if args.command == "amount":
        return format_token_amount(args.amount, args.decimals, args.display_decimals)
    if args.command == "parse":
        return str(parse_token_amount(args.amount, args.decimals))
    if args.command == "price":
        return format_price(args.price, args.decimals)
    if args.command == "number":
        return format_large_number(args.number)
    if args.command == "address":
        validity = "valid" if is_valid_address(args.address) else "invalid"
        return f"{truncate_address(args.address, args.start, args.end)} ({validity})"
    if args.command == "tx":
        return format_tx_hash(args.hash)
    if args.command == "explorer":
        return get_explorer_url(args.hash, args.network, config.extra_explorers)
    if args.command == "slippage":
        return str(calculate_slippage(args.amount, args.percent, args.decimals))
    if args.command == "balance":
        return "sufficient" if has_sufficient_balance(args.amount, args.balance, args.decimals) else "insufficient"

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    try:
        config = Config.from_env()
        config.validate()
    except Exception as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    parser = create_parser(config)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(config, args.log_level)

    try:
        print(run_command(args, config))
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
