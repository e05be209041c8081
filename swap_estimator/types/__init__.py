"""
Type definitions for Swap Estimator
"""

from .common import (
    DEFAULT_DECIMALS,
    ZERO_AMOUNT,
    MAX_UINT24,
    MAX_UINT256,
    MAX_DECIMALS,
    parse_amount,
    is_positive_amount,
    to_fixed_point,
    from_fixed_point,
    format_amount,
    validate_decimals,
    validate_fee_tier,
)
from .quote import QuoterBackend, SwapQuoteRequest, ExactOutputQuoteRequest
from .result import SwapQuoteResult, ExactOutputResult, EstimateState

__all__ = [
    # Amount conversion
    "DEFAULT_DECIMALS",
    "ZERO_AMOUNT",
    "MAX_UINT24",
    "MAX_UINT256",
    "MAX_DECIMALS",
    "parse_amount",
    "is_positive_amount",
    "to_fixed_point",
    "from_fixed_point",
    "format_amount",
    "validate_decimals",
    "validate_fee_tier",
    # Requests
    "QuoterBackend",
    "SwapQuoteRequest",
    "ExactOutputQuoteRequest",
    # Results
    "SwapQuoteResult",
    "ExactOutputResult",
    "EstimateState",
]
