"""
PancakeSwap Infinity Quoter Addresses and Constants

Provides contract addresses, ABI and backend priority for quoting on BSC
(Chain ID 56) only.
Source: https://developer.pancakeswap.finance/contracts/infinity/resources/addresses
"""

from ...types.quote import QuoterBackend

# PancakeSwap Infinity contract addresses on BSC mainnet
PANCAKESWAP_INFINITY_ADDRESSES = {
    "CLQUOTER": "0xd0737C9762912dD34c3271197E362Aa736Df0926",  # Concentrated Liquidity Quoter
    "BINQUOTER": "0xC631f4B0Fc2Dd68AD45f74B2942628db117dD359",  # Bin Quoter
    "MIXEDQUOTER": "0x2dCbF7B985c8C5C931818e4E107bAe8aaC8dAB7C",  # Mixed Quoter
    "CLPOOLMANAGER": "0xa0FfB9c1CE1Fe56963B0321B32E7A0302114058b",
    "UNIVERSALROUTER": "0xd9c500dff816a1da21a48a732d3498bf09dc9aeb",
}

# Supported chain IDs (BSC only)
PANCAKESWAP_SUPPORTED_CHAINS = [56]

# Fee tiers (in hundredths of a bip, i.e., 1e-6)
# 100 = 0.01%, 500 = 0.05%, 2500 = 0.25%, 3000 = 0.3%, 10000 = 1%
PANCAKESWAP_FEE_TIERS = [100, 500, 2500, 3000, 10000]
DEFAULT_FEE_TIER = 3000

# Zero sqrtPriceLimitX96 means "no price limit"
NO_PRICE_LIMIT = 0

QUOTE_EXACT_INPUT_SINGLE = "quoteExactInputSingle"
QUOTE_EXACT_OUTPUT_SINGLE = "quoteExactOutputSingle"

MIXED_QUOTER = QuoterBackend("MixedQuoter", PANCAKESWAP_INFINITY_ADDRESSES["MIXEDQUOTER"])
BIN_QUOTER = QuoterBackend("BinQuoter", PANCAKESWAP_INFINITY_ADDRESSES["BINQUOTER"])
CL_QUOTER = QuoterBackend("CLQuoter", PANCAKESWAP_INFINITY_ADDRESSES["CLQUOTER"])

# Tried in this order; the first quoter that answers wins
QUOTER_BACKENDS = (MIXED_QUOTER, BIN_QUOTER, CL_QUOTER)

# Shared quoter ABI (subset)
QUOTER_ABI = [
    {
        "inputs": [
            {
                "components": [
                    {"name": "tokenIn", "type": "address"},
                    {"name": "tokenOut", "type": "address"},
                    {"name": "amountIn", "type": "uint256"},
                    {"name": "sqrtPriceLimitX96", "type": "uint160"},
                    {"name": "fee", "type": "uint24"},
                ],
                "name": "params",
                "type": "tuple"
            }
        ],
        "name": QUOTE_EXACT_INPUT_SINGLE,
        "outputs": [{"name": "amountOut", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {
                "components": [
                    {"name": "tokenIn", "type": "address"},
                    {"name": "tokenOut", "type": "address"},
                    {"name": "amountOut", "type": "uint256"},
                    {"name": "sqrtPriceLimitX96", "type": "uint160"},
                    {"name": "fee", "type": "uint24"},
                ],
                "name": "params",
                "type": "tuple"
            }
        ],
        "name": QUOTE_EXACT_OUTPUT_SINGLE,
        "outputs": [{"name": "amountIn", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
]
