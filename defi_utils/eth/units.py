"""Conversions between base units and human-readable token amounts."""

import math
import re
from decimal import MAX_EMAX, MIN_EMIN, Decimal, InvalidOperation, localcontext
from typing import Optional, Union

from defi_utils.formatting import to_fixed
from defi_utils.log import get_logger

logger = get_logger(__name__)

TokenAmount = Union[str, int, Decimal]

DEFAULT_DECIMALS = 18

# Values that are not zero but would render as 0.0000
MIN_DISPLAY_AMOUNT = Decimal("0.0001")

# Same bound as the interpreter's int/str conversion limit
MAX_AMOUNT_DIGITS = 4300

_DECIMAL_RE = re.compile(r"^-?([0-9]*)(?:\.([0-9]*))?$")
_BASE_UNITS_RE = re.compile(r"^-?[0-9]+$")
_HEX_BASE_UNITS_RE = re.compile(r"^-?0[xX][0-9a-fA-F]+$")


class UnitConversionError(ValueError):
    """Raised when an amount cannot be converted between units."""


def _check_decimals(decimals: int) -> None:
    if not isinstance(decimals, int) or decimals < 0:
        raise UnitConversionError(f"decimals must be a non-negative integer, got {decimals!r}")


def _widen(ctx, digits: int) -> None:
    """Make a decimal context exact for operands of up to ``digits`` digits."""
    ctx.prec = max(28, digits)
    ctx.Emax = MAX_EMAX
    ctx.Emin = MIN_EMIN


def _preview(amount: object, limit: int = 40) -> str:
    text = repr(amount)
    return text if len(text) <= limit else f"{text[:limit]}... ({len(text)} chars)"


def from_base_units(amount: TokenAmount, decimals: int = DEFAULT_DECIMALS) -> Decimal:
    """Convert an amount in base units to an exact decimal value.

    Args:
        amount: Integer amount, as an int, a decimal-digit string or a 0x hex string
        decimals: Token decimals

    Returns:
        Exact Decimal amount in whole tokens

    Raises:
        UnitConversionError: If amount is not an integer value
    """
    _check_decimals(decimals)

    if isinstance(amount, bool):
        raise UnitConversionError(f"Invalid base unit amount: {amount!r}")
    if isinstance(amount, int):
        value = amount
    elif isinstance(amount, Decimal):
        if not amount.is_finite() or amount != amount.to_integral_value():
            raise UnitConversionError(f"Base unit amount must be an integer: {amount}")
        value = int(amount)
    elif isinstance(amount, str):
        text = amount.strip()
        if _BASE_UNITS_RE.match(text):
            base = 10
        elif _HEX_BASE_UNITS_RE.match(text):
            base = 16
        else:
            raise UnitConversionError(f"Invalid base unit amount: {_preview(amount)}")
        if base == 10 and len(text.lstrip("-")) > MAX_AMOUNT_DIGITS:
            raise UnitConversionError(f"Base unit amount too large: {_preview(amount)}")
        try:
            value = int(text, base)
        except ValueError as e:
            # int() refuses very long digit strings
            raise UnitConversionError(f"Base unit amount too large: {e}") from e
    else:
        raise UnitConversionError(f"Unsupported amount type: {type(amount).__name__}")

    try:
        with localcontext() as ctx:
            _widen(ctx, value.bit_length() // 3 + 1)
            return Decimal(value).scaleb(-decimals)
    except (ValueError, ArithmeticError) as e:
        raise UnitConversionError(f"Cannot scale base unit amount: {e}") from e


def to_base_units(amount: Union[TokenAmount, float], decimals: int = DEFAULT_DECIMALS) -> int:
    """Convert a human-readable amount to base units.

    Args:
        amount: Decimal string such as "1.5", or a number
        decimals: Token decimals

    Returns:
        Amount in base units

    Raises:
        UnitConversionError: If the amount is malformed or has more
            fractional digits than the token supports
    """
    _check_decimals(decimals)

    if isinstance(amount, bool):
        raise UnitConversionError(f"Invalid token amount: {amount!r}")
    if isinstance(amount, int):
        return amount * 10 ** decimals

    if isinstance(amount, str):
        text = amount.strip()
        match = _DECIMAL_RE.match(text)
        if not match or not (match.group(1) or match.group(2)):
            raise UnitConversionError(f"Invalid token amount: {_preview(amount)}")
        value = Decimal(text)
    else:
        try:
            value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise UnitConversionError(f"Invalid token amount: {_preview(amount)}") from e

    if not value.is_finite():
        raise UnitConversionError(f"Token amount must be finite: {_preview(amount)}")
    if value.adjusted() + decimals >= MAX_AMOUNT_DIGITS:
        raise UnitConversionError(f"Token amount too large: {_preview(amount)}")

    try:
        with localcontext() as ctx:
            _widen(ctx, len(value.as_tuple().digits) + decimals)
            scaled = value.scaleb(decimals)
            integral = scaled.to_integral_value()
            if scaled != integral:
                raise UnitConversionError(
                    f"Fractional component of {_preview(amount)} exceeds {decimals} decimals"
                )
            return int(integral)
    except ArithmeticError as e:
        raise UnitConversionError(f"Cannot scale token amount: {e}") from e


def format_token_amount(
    amount: Optional[TokenAmount],
    decimals: int = DEFAULT_DECIMALS,
    display_decimals: int = 4,
) -> str:
    """Format an amount in base units for display.

    Args:
        amount: Amount in base units
        decimals: Token decimals
        display_decimals: Decimal places to show

    Returns:
        Formatted amount, "< 0.0001" for dust, or "0" for empty or
        unparseable input
    """
    if not amount or amount == "0":
        return "0"

    try:
        value = from_base_units(amount, decimals)
    except UnitConversionError as e:
        logger.error(f"Error formatting token amount: {e}")
        return "0"

    if value == 0:
        return "0"
    if value < MIN_DISPLAY_AMOUNT:
        return "< 0.0001"

    return to_fixed(value, display_decimals)


def parse_token_amount(amount: Optional[Union[TokenAmount, float]], decimals: int = DEFAULT_DECIMALS) -> int:
    """Parse a user-entered amount into base units.

    Args:
        amount: User input such as "1.25"
        decimals: Token decimals

    Returns:
        Amount in base units, 0 for empty or unparseable input
    """
    if not amount:
        return 0

    try:
        return to_base_units(amount, decimals)
    except UnitConversionError as e:
        logger.error(f"Error parsing token amount: {e}")
        return 0


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def calculate_slippage(
    amount: Optional[Union[TokenAmount, float]],
    slippage_percent: float,
    decimals: int = DEFAULT_DECIMALS,
) -> int:
    """Apply a slippage tolerance to an amount.

    The multiplier is truncated to whole percentage points before it is
    applied, so 0.5% slippage uses 99/100.

    Args:
        amount: Human-readable amount, e.g. "10.5"
        slippage_percent: Tolerance in percent (0.5 for 0.5%)
        decimals: Token decimals

    Returns:
        Minimum amount in base units, 0 on failure
    """
    try:
        parsed_amount = parse_token_amount(amount, decimals)
        slippage_multiplier = (100 - slippage_percent) / 100
        return _div_toward_zero(parsed_amount * math.floor(slippage_multiplier * 100), 100)
    except (TypeError, ValueError, ArithmeticError) as e:
        logger.error(f"Error calculating slippage: {e}")
        return 0


def has_sufficient_balance(
    amount: Optional[Union[TokenAmount, float]],
    balance: Optional[Union[TokenAmount, float]],
    decimals: int = DEFAULT_DECIMALS,
) -> bool:
    """Check whether balance covers amount.

    Both values are human-readable amounts. Missing or unparseable input
    is never sufficient.
    """
    if not amount or not balance:
        return False

    try:
        parsed_amount = to_base_units(amount, decimals)
        parsed_balance = to_base_units(balance, decimals)
    except UnitConversionError as e:
        logger.error(f"Error checking balance: {e}")
        return False

    return parsed_balance >= parsed_amount
