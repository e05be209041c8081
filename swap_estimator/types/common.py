"""
Common type definitions and amount conversion

All on-chain amounts are fixed-point integers scaled by the token's decimals.
Conversion goes through a float multiplication, so values with more than
~15 significant digits are approximated.
"""

import math
from decimal import Decimal
from typing import Union

from ..errors import InputError


# Decimals assumed for every token unless the caller says otherwise
DEFAULT_DECIMALS = 18

# Amount shown alongside any error
ZERO_AMOUNT = "0"

# Largest value of a uint24 fee field
MAX_UINT24 = 2**24 - 1

# Largest on-chain amount (uint256)
MAX_UINT256 = 2**256 - 1

# 10**77 still fits a float; uint256 amounts never need more
MAX_DECIMALS = 77

AmountLike = Union[str, int, float, Decimal]


def parse_amount(amount: AmountLike) -> float:
    """
    Parse a human-unit amount

    Args:
        amount: Decimal string (or number) in human units, e.g. "1.5"

    Returns:
        Parsed value as float

    Raises:
        InputError: If the amount is empty, not a number, not finite or negative
    """
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise InputError.invalid_amount(str(amount)) from None

    if math.isnan(value) or math.isinf(value):
        raise InputError.invalid_amount(str(amount))
    if value < 0:
        raise InputError.negative_amount(str(amount))
    return value


def is_positive_amount(amount: AmountLike) -> bool:
    """
    Whether an amount is worth quoting

    Empty, zero and negative amounts are not. Unparsable amounts count as
    positive here so the resolver reports them as input errors.
    """
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        return False
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return True
    if math.isnan(value):
        return True
    return value > 0


def to_fixed_point(amount: AmountLike, decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Convert a human-unit amount to a fixed-point integer

    Multiplies as float and truncates toward zero.

    Example:
        to_fixed_point("1.5") == 1500000000000000000

    Raises:
        InputError: Amount is invalid or does not fit a uint256 once scaled
    """
    scaled = parse_amount(amount) * 10 ** decimals
    if math.isinf(scaled) or int(scaled) > MAX_UINT256:
        raise InputError.amount_too_large(str(amount))
    return int(scaled)


def from_fixed_point(raw_amount: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Convert a fixed-point integer back to a decimal string

    Example:
        from_fixed_point(1500000000000000000) == "1.5"
    """
    return format_amount(raw_amount / 10 ** decimals)


def format_amount(value: float) -> str:
    """
    Render a float as a plain positional decimal string

    Uses the shortest repr digits, never exponent notation, and drops
    trailing zeros: 2.0 -> "2", 1e-07 -> "0.0000001".
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return ZERO_AMOUNT
    return text


def validate_decimals(decimals: int) -> int:
    """Ensure token decimals are within 0..MAX_DECIMALS so 10**decimals stays a finite float"""
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
        raise InputError.invalid_decimals(decimals)
    return decimals


def validate_fee_tier(fee_tier: int) -> int:
    """Ensure a fee tier fits the quoter's uint24 fee field"""
    if isinstance(fee_tier, bool) or not isinstance(fee_tier, int):
        raise InputError.invalid_fee(fee_tier)
    if fee_tier <= 0 or fee_tier > MAX_UINT24:
        raise InputError.invalid_fee(fee_tier)
    return fee_tier
