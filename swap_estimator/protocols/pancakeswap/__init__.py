"""
PancakeSwap Infinity quoting (BSC)
"""

from .api import (
    PANCAKESWAP_INFINITY_ADDRESSES,
    PANCAKESWAP_SUPPORTED_CHAINS,
    PANCAKESWAP_FEE_TIERS,
    DEFAULT_FEE_TIER,
    QUOTER_ABI,
    QUOTER_BACKENDS,
    MIXED_QUOTER,
    BIN_QUOTER,
    CL_QUOTER,
    QUOTE_EXACT_INPUT_SINGLE,
    QUOTE_EXACT_OUTPUT_SINGLE,
)
from .quoter import QuoteResolver, decode_amount

__all__ = [
    "PANCAKESWAP_INFINITY_ADDRESSES",
    "PANCAKESWAP_SUPPORTED_CHAINS",
    "PANCAKESWAP_FEE_TIERS",
    "DEFAULT_FEE_TIER",
    "QUOTER_ABI",
    "QUOTER_BACKENDS",
    "MIXED_QUOTER",
    "BIN_QUOTER",
    "CL_QUOTER",
    "QUOTE_EXACT_INPUT_SINGLE",
    "QUOTE_EXACT_OUTPUT_SINGLE",
    "QuoteResolver",
    "decode_amount",
]
